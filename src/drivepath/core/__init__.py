"""
Core module - Configuration, descriptor types, and errors.
"""

from drivepath.core.config import Settings, settings, get_logger, setup_logging
from drivepath.core.errors import DrivePathError, NotFoundError, RemoteLookupError
from drivepath.core.types import FOLDER_MIME_TYPE, ROOT_PATHS, DriveFile

__all__ = [
    "Settings",
    "settings",
    "get_logger",
    "setup_logging",
    "DrivePathError",
    "NotFoundError",
    "RemoteLookupError",
    "FOLDER_MIME_TYPE",
    "ROOT_PATHS",
    "DriveFile",
]
