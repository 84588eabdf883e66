# storage/dto.py
from pydantic import BaseModel, ConfigDict
from typing import List, Literal, Optional


class RemoteObject(BaseModel):
    """
    A file or folder as returned by the Drive API. Only the attributes the
    filesystem needs are kept; everything else in the payload is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    mimeType: str
    parents: Optional[List[dict]] = None


class DirectoryEntry(BaseModel):
    """
    A RemoteObject projected onto a directory listing. The listing API does
    not report sizes, so size is always 0.
    """

    type: Literal["file", "directory"]
    name: str
    size: int = 0


class StatResult(BaseModel):
    exists: bool
    entries: List[DirectoryEntry]
    supported_methods: List[str]
