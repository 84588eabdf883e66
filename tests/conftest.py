# tests/conftest.py
import pytest
from unittest.mock import MagicMock

from gdrivefs.config import DriveConfig
from gdrivefs.gdrive import GoogleDriveFilesystem
from helpers import DOCUMENT, DRAWING, FOLDER, SPREADSHEET, UPLOAD_URL, FakeDrive, fake_response


@pytest.fixture
def drive():
    """
    / -> Docs/ (Budget, Diagram, Letter, Sub/ (deep.txt), report.pdf),
         Mixed/ (X/, Y), notes.txt, "My File.txt"
    """
    return FakeDrive(
        [
            {"id": "docs", "title": "Docs", "mimeType": FOLDER, "parent": "root"},
            {"id": "mixed", "title": "Mixed", "mimeType": FOLDER, "parent": "root"},
            {"id": "notes", "title": "notes.txt", "mimeType": "text/plain", "parent": "root"},
            {"id": "myfile", "title": "My File.txt", "mimeType": "text/plain", "parent": "root"},
            {"id": "budget", "title": "Budget", "mimeType": SPREADSHEET, "parent": "docs"},
            {"id": "diagram", "title": "Diagram", "mimeType": DRAWING, "parent": "docs"},
            {"id": "letter", "title": "Letter", "mimeType": DOCUMENT, "parent": "docs"},
            {"id": "sub", "title": "Sub", "mimeType": FOLDER, "parent": "docs"},
            {"id": "report", "title": "report.pdf", "mimeType": "application/pdf", "parent": "docs"},
            {"id": "deep", "title": "deep.txt", "mimeType": "text/plain", "parent": "sub"},
            {"id": "x", "title": "X", "mimeType": FOLDER, "parent": "mixed"},
            {"id": "y", "title": "Y", "mimeType": "text/plain", "parent": "mixed"},
        ]
    )


@pytest.fixture
def session(drive):
    """A mock AuthorizedSession backed by the fake drive."""
    mock_session = MagicMock()
    mock_session.get.side_effect = drive.get
    mock_session.put.return_value = fake_response(url=UPLOAD_URL)
    mock_session.post.return_value = fake_response(url=UPLOAD_URL)
    return mock_session


@pytest.fixture
def config():
    return DriveConfig(token="test_token")


@pytest.fixture
def filesystem(config, session):
    return GoogleDriveFilesystem(config, session=session)
