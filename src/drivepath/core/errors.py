"""
Error types raised by drivepath.

Only NotFoundError is ever caught inside the package, by the
"if not exists" creators. Everything else reaches the caller.
"""

from typing import Literal


class DrivePathError(Exception):
    """Base class for all drivepath errors."""


class RemoteLookupError(DrivePathError):
    """A call to the remote service failed (transport, auth, quota, service error)."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class NotFoundError(DrivePathError, LookupError):
    """A path segment or file does not exist under its parent."""

    def __init__(self, kind: Literal["folder", "file"], name: str):
        super().__init__(f"{kind} {name} not found")
        self.kind = kind
        self.name = name
