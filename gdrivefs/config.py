from pathlib import Path
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import lru_cache

DEFAULT_API_URL = "https://www.googleapis.com/drive/v2/"
DEFAULT_UPLOAD_URL = "https://www.googleapis.com/upload/drive/v2/"


class DriveConfig(BaseModel):
    """
    Immutable configuration for a GoogleDriveFilesystem.
    Holds the bearer token and the subfolder every path is resolved under.
    """

    model_config = ConfigDict(frozen=True)

    token: str
    subfolder: str = ""
    api_url: str = DEFAULT_API_URL
    upload_url: str = DEFAULT_UPLOAD_URL

    @field_validator("token", mode="before")
    @classmethod
    def require_token(cls, value):
        if value is None or not str(value).strip():
            raise ValueError("[googledrive] bearer auth token required")
        return value

    @field_validator("subfolder", mode="before")
    @classmethod
    def normalize_subfolder(cls, value):
        if not value:
            return ""
        value = str(value).rstrip("/")
        if not value:
            return ""
        if not value.startswith("/"):
            value = "/" + value
        return value

    @field_validator("api_url", "upload_url")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"


class Settings(BaseSettings):
    """
    Application configuration with type validation.
    Automatically reads variables from the environment and a .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Google Drive Settings ---
    GDRIVE_TOKEN: str
    GDRIVE_SUBFOLDER: Optional[str] = None
    GDRIVE_API_URL: str = DEFAULT_API_URL
    GDRIVE_UPLOAD_URL: str = DEFAULT_UPLOAD_URL

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None

    def drive_config(self) -> DriveConfig:
        return DriveConfig(
            token=self.GDRIVE_TOKEN,
            subfolder=self.GDRIVE_SUBFOLDER,
            api_url=self.GDRIVE_API_URL,
            upload_url=self.GDRIVE_UPLOAD_URL,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Returns a cached instance of the application settings.
    The first call to this function will initialize the settings.
    """
    return Settings()
