"""
Path Resolver - turn slash-delimited paths into Drive descriptors.

The remote service cannot look up a path, only "children of this parent
with this name". Resolution therefore starts at the root and issues one
lookup per segment, each scoped to the folder found by the previous one.

Nothing is cached: every call re-reads the remote state.
"""

import os
from typing import Any

from drivepath.core.config import Settings, settings as default_settings, get_logger
from drivepath.core.errors import DrivePathError, NotFoundError
from drivepath.core.types import DriveFile
from drivepath.paths.split import is_root, split_parent, split_segments
from drivepath.storage.backend import DriveBackend

logger = get_logger("paths.resolver")


class PathResolver:
    """
    Resolves folder and file paths against a DriveBackend.

    When a parent holds several children with the same name, the first one
    in the service's own order is used and a warning is logged. That order is
    not controlled here.
    """

    def __init__(self, backend: DriveBackend, settings: Settings | None = None):
        self.backend = backend
        self.settings = settings or default_settings

    @staticmethod
    def require_id(folder: DriveFile, path: str) -> str:
        """Return the identifier of a folder about to be used as a parent."""
        if folder.id is None:
            raise DrivePathError(
                f"Folder {path} has no id; the field selection must include \"id\""
            )
        return folder.id

    async def resolve_root(self, fields: str, auth: Any) -> DriveFile:
        """Fetch the root folder by its reserved identifier."""
        resource = await self.backend.get(self.settings.root_id, fields, auth)
        return DriveFile.from_api(resource)

    async def resolve_folder(self, path: str, fields: str, auth: Any) -> DriveFile:
        """
        Resolve a folder path, one lookup per segment.

        Args:
            path: Folder path ("." or "/" for the root)
            fields: Comma separated field selection, forwarded as-is
            auth: Authenticated session, forwarded as-is

        Returns:
            The descriptor of the last segment's folder

        Raises:
            NotFoundError: a segment has no matching folder; later segments
                are not queried
            DrivePathError: a folder on the way carries no id (the field
                selection left it out)
        """
        parent = await self.resolve_root(fields, auth)
        if is_root(path):
            return parent

        walked = "/"
        for segment in split_segments(path):
            matches = await self.backend.list(
                self.require_id(parent, walked), segment, fields, auth, folders_only=True
            )
            if not matches:
                raise NotFoundError("folder", segment)

            if len(matches) > 1:
                logger.warning(f"Found {len(matches)} duplicate folders of name {segment}")

            parent = DriveFile.from_api(matches[0])
            walked = os.path.join(walked, segment)
            logger.debug(f"Resolved folder {segment} -> {parent.id}")

        return parent

    async def resolve_file(self, path: str, fields: str, auth: Any) -> DriveFile:
        """
        Resolve a file path.

        The parent folders are resolved first, then the last segment is
        looked up without a type filter, so a folder with that name also
        matches.

        Raises:
            NotFoundError: a parent folder or the file itself is missing
        """
        parent_path, child_name = split_parent(path)
        parent = await self.resolve_folder(parent_path, fields, auth)

        matches = await self.backend.list(
            self.require_id(parent, parent_path), child_name, fields, auth
        )
        if not matches:
            raise NotFoundError("file", path)

        if len(matches) > 1:
            logger.warning(f"Found {len(matches)} duplicate files of name {child_name}")

        return DriveFile.from_api(matches[0])
