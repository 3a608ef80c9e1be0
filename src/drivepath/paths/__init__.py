"""
Path operations - resolve, create and upload by path.

The module-level functions share one PathCreator over the Google Drive
backend, built on first use. set_backend() swaps the backend, e.g. to point
the functions at a prebuilt service.
"""

from os import PathLike
from typing import Any

from drivepath.core.types import DriveFile
from drivepath.paths.creator import PathCreator
from drivepath.paths.resolver import PathResolver
from drivepath.storage.backend import DriveBackend
from drivepath.storage.google_drive import GoogleDriveBackend

_creator: PathCreator | None = None


def _get_creator() -> PathCreator:
    """Get or create the shared PathCreator."""
    global _creator
    if _creator is None:
        _creator = PathCreator(GoogleDriveBackend())
    return _creator


def set_backend(backend: DriveBackend | None) -> None:
    """Use `backend` for the module-level functions (None restores the default on next use)."""
    global _creator
    _creator = PathCreator(backend) if backend is not None else None


async def resolve_root(fields: str, auth: Any) -> DriveFile:
    return await _get_creator().resolve_root(fields, auth)


async def resolve_folder(path: str, fields: str, auth: Any) -> DriveFile:
    return await _get_creator().resolve_folder(path, fields, auth)


async def resolve_file(path: str, fields: str, auth: Any) -> DriveFile:
    return await _get_creator().resolve_file(path, fields, auth)


async def create_folder(path: str, fields: str, auth: Any) -> DriveFile:
    return await _get_creator().create_folder(path, fields, auth)


async def create_folder_if_not_exists(path: str, fields: str, auth: Any) -> DriveFile:
    return await _get_creator().create_folder_if_not_exists(path, fields, auth)


async def upload_file(local_source: str | PathLike, upload_path: str, fields: str, auth: Any) -> DriveFile:
    return await _get_creator().upload_file(local_source, upload_path, fields, auth)


async def upload_file_if_not_exists(
    local_source: str | PathLike,
    upload_path: str,
    fields: str,
    auth: Any,
) -> DriveFile:
    return await _get_creator().upload_file_if_not_exists(local_source, upload_path, fields, auth)


__all__ = [
    "PathResolver",
    "PathCreator",
    "set_backend",
    "resolve_root",
    "resolve_folder",
    "resolve_file",
    "create_folder",
    "create_folder_if_not_exists",
    "upload_file",
    "upload_file_if_not_exists",
]
