# tests/helpers.py
from unittest.mock import MagicMock

from gdrivefs.config import DEFAULT_API_URL, DEFAULT_UPLOAD_URL

API_URL = DEFAULT_API_URL
UPLOAD_URL = DEFAULT_UPLOAD_URL
FOLDER = "application/vnd.google-apps.folder"
SPREADSHEET = "application/vnd.google-apps.spreadsheet"
DRAWING = "application/vnd.google-apps.drawing"
DOCUMENT = "application/vnd.google-apps.document"


def fake_response(status_code=200, json_data=None, reason="OK", url=API_URL):
    """Builds a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.ok = 200 <= status_code < 400
    response.json.return_value = json_data if json_data is not None else {}
    return response


class FakeDrive:
    """
    Answers the GET requests of DriveApiClient from an in-memory list of objects.
    `failures` maps "children:<id>", "files/<id>", "files/<id>/export" or
    "files/<id>?alt=media" to a status code to return instead.
    """

    def __init__(self, objects):
        self.objects = objects
        self.failures = {}
        self.failed_responses = []

    def _find(self, file_id):
        for obj in self.objects:
            if obj["id"] == file_id:
                return obj
        return None

    def _item(self, obj):
        return {
            "id": obj["id"],
            "title": obj["title"],
            "mimeType": obj["mimeType"],
            "parents": [{"id": obj["parent"]}],
        }

    def get(self, url, params=None, stream=False, **kwargs):
        params = params or {}
        resource = url[len(API_URL):]

        if resource == "files":
            parent_id = params["q"].split("'")[1]
            key = f"children:{parent_id}"
            if key in self.failures:
                return fake_response(self.failures[key], reason="Not Found", url=url)
            if parent_id != "root" and self._find(parent_id) is None:
                return fake_response(404, reason="Not Found", url=url)
            items = [self._item(o) for o in self.objects if o["parent"] == parent_id]
            return fake_response(json_data={"items": items}, url=url)

        key = resource + "?alt=media" if params.get("alt") == "media" else resource
        if key in self.failures:
            response = fake_response(self.failures[key], reason="Not Found", url=url)
            self.failed_responses.append(response)
            return response

        file_id = resource.split("/")[1]
        obj = self._find(file_id)
        if obj is None:
            return fake_response(404, reason="Not Found", url=url)
        if resource.endswith("/export") or params.get("alt") == "media":
            return fake_response(url=url)
        return fake_response(json_data=self._item(obj), url=url)


def listing_parents(session):
    """Returns the parent IDs of every children listing, in call order."""
    return [
        call.kwargs["params"]["q"].split("'")[1]
        for call in session.get.call_args_list
        if call.args[0] == API_URL + "files"
    ]


def split_parts(body: bytes, boundary: str):
    """Returns (headers, content) for each part of a multipart body."""
    chunks = body.split(b"--" + boundary.encode())
    assert chunks[0] == b""
    assert chunks[-1] == b"--"
    parts = []
    for chunk in chunks[1:-1]:
        headers, content = chunk[2:-2].split(b"\r\n\r\n", 1)
        parts.append((headers.decode(), content))
    return parts
