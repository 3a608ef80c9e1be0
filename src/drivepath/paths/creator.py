"""
Existence-gated creation - folders and uploads on top of path resolution.

The "if not exists" variants check first and only act when the path is
missing. There is no transaction around the check: two callers racing on the
same path can both see it missing and both create it. Callers needing
exactly-once creation must serialize on their side.
"""

import os
from os import PathLike
from typing import Any

from drivepath.core.config import get_logger
from drivepath.core.errors import NotFoundError
from drivepath.core.types import FOLDER_MIME_TYPE, DriveFile
from drivepath.paths.resolver import PathResolver
from drivepath.paths.split import split_parent, split_segments

logger = get_logger("paths.creator")


class PathCreator(PathResolver):
    """Creates folder chains and uploads files, creating missing parents on the way."""

    async def create_folder(self, path: str, fields: str, auth: Any) -> DriveFile:
        """
        Create the folder at `path`, creating missing parents first.

        The folder itself is created unconditionally: if it already exists a
        second folder with the same name appears. Use
        create_folder_if_not_exists to avoid that.
        """
        if not split_segments(path):
            raise ValueError(f"Path {path!r} names the root folder, which cannot be created")

        parent_path, child_name = split_parent(path)
        parent = await self.create_folder_if_not_exists(parent_path, fields, auth)

        resource = await self.backend.create(
            child_name,
            [self.require_id(parent, parent_path)],
            fields,
            auth,
            mime_type=FOLDER_MIME_TYPE,
        )
        folder = DriveFile.from_api(resource)
        logger.info(f"Created folder {path} ({folder.id})")
        return folder

    async def create_folder_if_not_exists(self, path: str, fields: str, auth: Any) -> DriveFile:
        """Return the folder at `path`, creating it and any missing parents if needed."""
        try:
            return await self.resolve_folder(path, fields, auth)
        except NotFoundError as ex:
            logger.debug(f"Folder {path} missing ({ex}), creating it")
        return await self.create_folder(path, fields, auth)

    async def upload_file(
        self,
        local_source: str | PathLike,
        upload_path: str,
        fields: str,
        auth: Any,
    ) -> DriveFile:
        """
        Upload a local file into the folder part of `upload_path`.

        The remote file takes the local file's base name, not the last
        segment of `upload_path`: uploading a local "out.csv" to
        "reports/q1.csv" creates "reports/out.csv".
        """
        parent_path, _ = split_parent(upload_path)
        parent = await self.create_folder_if_not_exists(parent_path, fields, auth)

        file_name = os.path.basename(os.fspath(local_source))
        resource = await self.backend.create(
            file_name,
            [self.require_id(parent, parent_path)],
            fields,
            auth,
            media=local_source,
        )
        uploaded = DriveFile.from_api(resource)
        logger.info(f"Uploaded {local_source} to {parent_path} as {file_name} ({uploaded.id})")
        return uploaded

    async def upload_file_if_not_exists(
        self,
        local_source: str | PathLike,
        upload_path: str,
        fields: str,
        auth: Any,
    ) -> DriveFile:
        """Return the file at `upload_path`, uploading `local_source` if it is missing."""
        try:
            return await self.resolve_file(upload_path, fields, auth)
        except NotFoundError as ex:
            logger.debug(f"File {upload_path} missing ({ex}), uploading {local_source}")
        return await self.upload_file(local_source, upload_path, fields, auth)
