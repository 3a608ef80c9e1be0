"""
Core type definitions for drivepath.

A DriveFile is the remote service's description of a folder or a file.
It is only ever built from a remote response and never modified locally.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
"""MIME type the Drive API uses to mark folders."""

ROOT_PATHS = (".", "/")
"""Paths that denote the root folder."""


class DriveFile(BaseModel):
    """
    A folder or file descriptor returned by the remote service.

    Only the attributes path resolution needs are declared. Any other
    field the caller asked for is kept as-is in the model extras.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
    )

    id: str | None = None
    """Service-assigned identifier, used only to link children to parents."""

    name: str | None = None
    """Single path segment, never a full path."""

    mime_type: str | None = Field(default=None, alias="mimeType")

    trashed: bool | None = None

    parents: list[str] | None = None

    @computed_field
    @property
    def is_folder(self) -> bool:
        """Whether the remote object is folder-typed."""
        return self.mime_type == FOLDER_MIME_TYPE

    @classmethod
    def from_api(cls, resource: dict[str, Any]) -> "DriveFile":
        """Build a descriptor from a raw Drive file resource."""
        return cls.model_validate(resource)

    def to_api(self) -> dict[str, Any]:
        """Return the descriptor in the Drive API's own field names."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"is_folder"})
