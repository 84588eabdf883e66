# multipart.py
import json
import mimetypes
import uuid
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class MultipartPayload:
    """
    A multipart/related body pairing JSON metadata with the file content,
    so a file can be created with its name, parent and data in one request.
    Built per request and never reused.
    """

    metadata: dict
    content: bytes
    content_type: str
    boundary: str

    @classmethod
    def for_new_file(
        cls, name: str, parent_id: str, content: bytes | str
    ) -> "MultipartPayload":
        if isinstance(content, str):
            data = content.encode("utf-8")
            fallback_type = "text/plain; charset=UTF-8"
        else:
            data = bytes(content)
            fallback_type = "application/octet-stream"

        guessed_type, _ = mimetypes.guess_type(name)
        return cls(
            metadata={"title": name, "parents": [{"id": parent_id}]},
            content=data,
            content_type=guessed_type or fallback_type,
            boundary=uuid.uuid4().hex,
        )

    def to_bytes(self) -> bytes:
        delimiter = f"--{self.boundary}".encode("ascii")
        return b"\r\n".join(
            [
                delimiter,
                b"Content-Type: application/json; charset=UTF-8",
                b"",
                json.dumps(self.metadata).encode("utf-8"),
                delimiter,
                f"Content-Type: {self.content_type}".encode("ascii"),
                b"",
                self.content,
                delimiter + b"--",
            ]
        )

    def headers(self, body: bytes) -> Dict[str, str]:
        return {
            "Content-Type": f"multipart/related; boundary={self.boundary}",
            "Content-Length": str(len(body)),
        }
