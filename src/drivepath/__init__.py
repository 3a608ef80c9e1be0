"""
drivepath

Path-based folder and file operations for Google Drive, which only
addresses objects by identifier. Paths like "docs/2024/report.pdf" are
resolved one segment at a time from the root folder.
"""

__version__ = "0.1.0"

from drivepath.core.config import settings
from drivepath.core.errors import DrivePathError, NotFoundError, RemoteLookupError
from drivepath.core.types import DriveFile
from drivepath.paths import (
    PathCreator,
    PathResolver,
    create_folder,
    create_folder_if_not_exists,
    resolve_file,
    resolve_folder,
    resolve_root,
    set_backend,
    upload_file,
    upload_file_if_not_exists,
)

__all__ = [
    "settings",
    "DrivePathError",
    "NotFoundError",
    "RemoteLookupError",
    "DriveFile",
    "PathCreator",
    "PathResolver",
    "create_folder",
    "create_folder_if_not_exists",
    "resolve_file",
    "resolve_folder",
    "resolve_root",
    "set_backend",
    "upload_file",
    "upload_file_if_not_exists",
]
