"""
Core domain models for Drive files.

These models represent the business domain and are independent of
any infrastructure or delivery mechanism.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileRecord(BaseModel):
    """
    Remote metadata entry for a stored file.

    Mirrors the `files(id,name,mimeType)` field set requested from Drive.
    """

    id: str = Field(description="Opaque file ID assigned by Drive")
    name: str = Field(description="Display name")
    mime_type: Optional[str] = Field(
        default=None, alias="mimeType", description="Content-type tag"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class UploadedFile(BaseModel):
    """Record returned by the media upload endpoint."""

    id: str = Field(description="ID of the newly created file")
    name: str = Field(default="Untitled", description="Provisional name")

    model_config = ConfigDict(extra="ignore")


class SelectedFile(BaseModel):
    """A local file chosen in the file picker, not yet uploaded."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class ActionOutcome(str, Enum):
    """Completion signal returned by every controller action."""

    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"
