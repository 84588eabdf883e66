# formats.py
from enum import Enum
from typing import Optional

NATIVE_PREFIX = "application/vnd.google-apps."
FOLDER_MIME_TYPE = NATIVE_PREFIX + "folder"


class NativeDocumentType(Enum):
    """Google-native document kinds. These have no raw bytes and must be exported."""

    FOLDER = "folder"
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"
    DRAWING = "drawing"
    FORM = "form"
    OTHER = "other"


# Drawings can not be exported as svg+xml through this endpoint, so PDF it is.
EXPORT_MIME_TYPES = {
    NativeDocumentType.SPREADSHEET: "text/csv",
    NativeDocumentType.DRAWING: "application/pdf",
}
DEFAULT_EXPORT_MIME_TYPE = "text/html"


def classify(mime_type: Optional[str]) -> Optional[NativeDocumentType]:
    """
    Returns the native document kind for a Google-native mimeType,
    or None for ordinary content that can be downloaded as is.
    """
    if not mime_type or not mime_type.startswith(NATIVE_PREFIX):
        return None
    subtype = mime_type[len(NATIVE_PREFIX):]
    try:
        return NativeDocumentType(subtype)
    except ValueError:
        return NativeDocumentType.OTHER


def export_mime_type(kind: NativeDocumentType) -> str:
    return EXPORT_MIME_TYPES.get(kind, DEFAULT_EXPORT_MIME_TYPE)


def is_folder(mime_type: Optional[str]) -> bool:
    return classify(mime_type) is NativeDocumentType.FOLDER
