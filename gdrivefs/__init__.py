from .config import DriveConfig
from .gdrive import GoogleDriveFilesystem
from .paths import DrivePath
from .resolver import PathResolver

__all__ = ["DriveConfig", "DrivePath", "GoogleDriveFilesystem", "PathResolver"]
