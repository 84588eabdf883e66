# exceptions.py


class PermanentError(Exception):
    """An error that will not be fixed by a retry (e.g., a missing file)."""
    pass


class NotFoundError(PermanentError):
    """The requested path or object does not exist in Google Drive."""
    pass


class PathNotFoundError(NotFoundError):
    """A path segment could not be found under its parent folder."""

    def __init__(self, path: str, segment: str):
        super().__init__(f"'{segment}' not found while resolving '{path}'")
        self.path = path
        self.segment = segment


class StatNotFoundError(NotFoundError):
    pass


class DriveFileNotFoundError(NotFoundError):
    pass


class CreateTargetMissingError(PermanentError):
    """The folder a new file should be created in does not exist."""
    pass


class RemoteCallFailedError(PermanentError):
    """The Drive API answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str | None):
        super().__init__(reason or f"HTTP {status_code}")
        self.status_code = status_code
        self.reason = reason
