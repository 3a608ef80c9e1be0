"""
Storage Layer - The remote Drive surface.

DriveBackend describes the three identifier-based calls path resolution
needs; GoogleDriveBackend provides them over the Drive v3 API.
"""

from drivepath.storage.backend import DriveBackend
from drivepath.storage.google_drive import GoogleDriveBackend

__all__ = [
    "DriveBackend",
    "GoogleDriveBackend",
]
