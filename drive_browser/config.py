"""
Google Drive API configuration.

Contains endpoints and the static access token used for every request.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from drive_browser.core.exceptions import ConfigurationError


# Drive v3 metadata endpoint
DRIVE_BASE_URL = "https://www.googleapis.com/drive/v3/files"

# Drive v3 media upload endpoint
DRIVE_UPLOAD_URL = "https://www.googleapis.com/upload/drive/v3/files"


@dataclass
class DriveConfig:
    """Configuration for Google Drive API access.

    Required environment variables:
    - DRIVE_ACCESS_TOKEN: OAuth access token sent as a bearer credential

    Optional:
    - DRIVE_BASE_URL: Override the metadata endpoint
    - DRIVE_UPLOAD_URL: Override the media upload endpoint
    """

    access_token: str | None = None
    base_url: str = DRIVE_BASE_URL
    upload_url: str = DRIVE_UPLOAD_URL

    @classmethod
    def from_env(cls) -> "DriveConfig":
        """Load configuration from environment variables."""
        return cls(
            access_token=os.getenv("DRIVE_ACCESS_TOKEN"),
            base_url=os.getenv("DRIVE_BASE_URL", DRIVE_BASE_URL).rstrip("/"),
            upload_url=os.getenv("DRIVE_UPLOAD_URL", DRIVE_UPLOAD_URL).rstrip("/"),
        )

    def validate(self) -> None:
        """Validate required configuration. Call at startup to fail fast."""
        if not self.access_token:
            raise ConfigurationError(
                "DRIVE_ACCESS_TOKEN environment variable is required"
            )


@lru_cache()
def get_drive_config() -> DriveConfig:
    """Get Drive configuration singleton."""
    return DriveConfig.from_env()
