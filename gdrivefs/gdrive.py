# gdrive.py
import logging
from typing import Optional, Type

import requests

from .api import DriveApiClient, ensure_success, is_success, items_from
from .config import DriveConfig
from .exceptions import (
    CreateTargetMissingError,
    DriveFileNotFoundError,
    NotFoundError,
    PathNotFoundError,
    RemoteCallFailedError,
    StatNotFoundError,
)
from .formats import classify, export_mime_type, is_folder
from .multipart import MultipartPayload
from .paths import DrivePath
from .resolver import PathResolver
from .storage.base import Filesystem
from .storage.dto import DirectoryEntry, RemoteObject, StatResult


class GoogleDriveFilesystem(Filesystem):
    """
    Exposes Google Drive, which addresses files by ID and parent IDs,
    through the path-based Filesystem interface.
    """

    SUPPORTED_METHODS = ("GET", "OPTIONS")

    def __init__(self, config: DriveConfig, session: Optional[requests.Session] = None):
        super().__init__("googledrive")
        self.config = config
        self.api = DriveApiClient(config, session=session)
        self.resolver = PathResolver(self.api)
        logging.info(
            f"Google Drive filesystem initialized (subfolder: '{config.subfolder or '/'}')."
        )

    def _drive_path(self, relative_path: str) -> Optional[DrivePath]:
        return DrivePath.join(self.config.subfolder, relative_path)

    def _resolve_existing(self, path: str, error: Type[NotFoundError]) -> str:
        drive_path = self._drive_path(path)
        try:
            file_id = self.resolver.resolve(drive_path)
        except PathNotFoundError as e:
            raise error(str(e)) from e
        if file_id is None:
            raise error("No path given")
        return file_id

    def _metadata(
        self, file_id: str, error: Optional[Type[NotFoundError]] = None
    ) -> RemoteObject:
        response = ensure_success(self.api.get_metadata(file_id), error)
        return RemoteObject.model_validate(response.json())

    def stat(self, path: str) -> StatResult:
        """
        Lists the folder at `path`. Sizes are always 0 because the listing
        endpoint does not report them.
        """
        logging.info(f"stat {path}")
        file_id = self._resolve_existing(path, StatNotFoundError)
        response = ensure_success(self.api.list_children(file_id), StatNotFoundError)

        entries = [
            DirectoryEntry(
                type="directory" if is_folder(item.mimeType) else "file",
                name=item.title,
                size=0,
            )
            for item in items_from(response)
        ]
        return StatResult(
            exists=True, entries=entries, supported_methods=list(self.SUPPORTED_METHODS)
        )

    def read(self, path: str) -> requests.Response:
        """
        Returns the streamed content response for the file at `path`.
        Google-native documents are exported, everything else is downloaded.
        """
        logging.info(f"read {path}")
        file_id = self._resolve_existing(path, DriveFileNotFoundError)
        metadata = self._metadata(file_id, DriveFileNotFoundError)

        kind = classify(metadata.mimeType)
        if kind is None:
            response = self.api.download(file_id)
        else:
            response = self.api.export(file_id, export_mime_type(kind))

        if not is_success(response):
            # Streamed responses hold their pooled connection until closed.
            response.close()
        return ensure_success(response, DriveFileNotFoundError)

    def write(self, path: str, content: bytes | str) -> bytes | str:
        """
        Replaces the content of the file at `path`, keeping its mimeType, or
        creates it in its parent folder. The parent folder must exist.
        """
        logging.info(f"write {path}")
        drive_path = self._drive_path(path)
        if drive_path is None:
            raise CreateTargetMissingError("No path given")

        try:
            file_id = self.resolver.resolve(drive_path)
        except PathNotFoundError:
            file_id = None

        if file_id:
            response = self._replace(file_id, content)
        else:
            response = self._create(drive_path, content)

        if not is_success(response):
            logging.error(
                f"Failed to write '{drive_path}': {response.status_code} {response.reason}"
            )
            raise RemoteCallFailedError(response.status_code, response.reason)
        return content

    def _replace(
        self, file_id: str, content: bytes | str, mime_type: Optional[str] = None
    ) -> requests.Response:
        if not mime_type:
            mime_type = self._metadata(file_id).mimeType
        return self.api.update_media(file_id, content, mime_type)

    def _create(self, drive_path: DrivePath, content: bytes | str) -> requests.Response:
        folder_path = drive_path.parent
        try:
            folder_id = self.resolver.resolve(folder_path)
        except PathNotFoundError as e:
            raise CreateTargetMissingError(f"Folder {folder_path} does not exist") from e

        payload = MultipartPayload.for_new_file(drive_path.name, folder_id, content)
        return self.api.create_multipart(payload)
