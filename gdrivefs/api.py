# api.py
import logging
from typing import List, Optional, Type

import requests
from google.auth.transport.requests import AuthorizedSession
from google.oauth2.credentials import Credentials

from .config import DriveConfig
from .exceptions import PermanentError, RemoteCallFailedError
from .multipart import MultipartPayload
from .storage.dto import RemoteObject

ROOT_ID = "root"


def is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def ensure_success(
    response: requests.Response, error: Optional[Type[PermanentError]] = None
) -> requests.Response:
    """
    Raises if the response is not 2xx. With `error` given, every failure is
    reported as that error class; otherwise as a RemoteCallFailedError
    carrying the remote status text.
    """
    if is_success(response):
        return response
    if error is not None:
        raise error(f"{response.status_code} {response.reason or ''}".strip())
    logging.error(
        f"Google Drive API call to {response.url} failed: {response.status_code} {response.reason}"
    )
    raise RemoteCallFailedError(response.status_code, response.reason)


def items_from(response: requests.Response) -> List[RemoteObject]:
    """Converts a files listing into RemoteObject DTOs, in listing order."""
    return [RemoteObject.model_validate(item) for item in response.json().get("items", [])]


class DriveApiClient:
    """
    Thin wrapper over the Google Drive v2 REST API.
    Every method performs exactly one request and returns the raw response;
    deciding what a status code means is left to the caller.
    """

    def __init__(self, config: DriveConfig, session: Optional[requests.Session] = None):
        self.config = config
        if session is None:
            # A bare access token: no refresh, sent as "Authorization: Bearer <token>".
            credentials = Credentials(token=config.token)
            session = AuthorizedSession(credentials)
        self.session = session

    def _api(self, resource: str) -> str:
        return self.config.api_url + resource

    def _upload(self, resource: str) -> str:
        return self.config.upload_url + resource

    def list_children(self, parent_id: str) -> requests.Response:
        return self.session.get(
            self._api("files"),
            params={"corpus": "domain", "q": f"'{parent_id}' in parents"},
        )

    def get_metadata(self, file_id: str) -> requests.Response:
        return self.session.get(self._api(f"files/{file_id}"))

    def export(self, file_id: str, mime_type: str) -> requests.Response:
        logging.info(f"Exporting file ID '{file_id}' as {mime_type}")
        return self.session.get(
            self._api(f"files/{file_id}/export"),
            params={"mimeType": mime_type},
            stream=True,
        )

    def download(self, file_id: str) -> requests.Response:
        logging.info(f"Downloading file ID '{file_id}'")
        return self.session.get(
            self._api(f"files/{file_id}"), params={"alt": "media"}, stream=True
        )

    def update_media(
        self, file_id: str, content: bytes | str, mime_type: str
    ) -> requests.Response:
        if isinstance(content, str):
            content = content.encode("utf-8")
        logging.info(f"Replacing content of file ID '{file_id}' ({mime_type})")
        return self.session.put(
            self._upload(f"files/{file_id}"),
            params={"uploadType": "media"},
            headers={"Content-Type": mime_type},
            data=content,
        )

    def create_multipart(self, payload: MultipartPayload) -> requests.Response:
        body = payload.to_bytes()
        logging.info(
            f"Creating '{payload.metadata['title']}' in folder ID '{payload.metadata['parents'][0]['id']}'"
        )
        return self.session.post(
            self._upload("files"),
            params={"uploadType": "multipart"},
            headers=payload.headers(body),
            data=body,
        )
