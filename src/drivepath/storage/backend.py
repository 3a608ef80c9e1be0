"""
Remote Drive surface used by path resolution.

The remote service only knows identifiers. It can fetch one object by id,
list the children of a parent that carry a given name, and create a child
under a parent. Everything path-shaped is layered on top of these three calls.
"""

from os import PathLike
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DriveBackend(Protocol):
    """
    The three remote calls drivepath relies on.

    `fields` is the caller's comma separated field selection and `auth` is
    the caller's authenticated session. Both are forwarded without being
    looked at. Implementations raise RemoteLookupError when the remote call
    itself fails.
    """

    async def get(self, file_id: str, fields: str, auth: Any) -> dict[str, Any]:
        """Fetch a single object by identifier."""
        ...

    async def create(
        self,
        name: str,
        parents: list[str],
        fields: str,
        auth: Any,
        mime_type: str | None = None,
        media: str | PathLike | None = None,
    ) -> dict[str, Any]:
        """Create a folder (mime_type set, no media) or a file whose body is streamed from `media`."""
        ...

    async def list(
        self,
        parent_id: str,
        name: str,
        fields: str,
        auth: Any,
        folders_only: bool = False,
    ) -> list[dict[str, Any]]:
        """List the non-trashed children of `parent_id` named `name`, in service order."""
        ...
