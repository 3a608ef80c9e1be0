"""
Google Drive backend - the remote surface over the Drive v3 API.

The discovery client is built once without credentials. Each request is
executed with an HTTP object authorized by the credentials the caller passed
in, so one backend can serve any number of users.

The client library is blocking; every execute() runs in a worker thread so
callers only suspend at remote call boundaries.
"""

import asyncio
import functools
import socket
import ssl
from os import PathLike, fspath
from typing import Any, Callable

import google.auth.exceptions
import httplib2
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient import discovery
from googleapiclient.errors import HttpError
from googleapiclient.http import HttpRequest, MediaFileUpload, build_http

from drivepath.core.config import Settings, settings as default_settings, get_logger
from drivepath.core.errors import RemoteLookupError
from drivepath.core.types import FOLDER_MIME_TYPE

logger = get_logger("storage.google_drive")

# Network failures only. Other OSErrors (e.g. reading the local file during
# an upload) are not remote failures and propagate unchanged.
TRANSPORT_ERRORS = (
    httplib2.HttpLib2Error,
    ConnectionError,
    TimeoutError,
    socket.gaierror,
    ssl.SSLError,
)


def wrap_google_errors(cb):
    """Re-raise failures of a remote call as RemoteLookupError, keeping the cause."""

    @functools.wraps(cb)
    async def _inner(*args, **kwargs):
        try:
            return await cb(*args, **kwargs)
        except HttpError as ex:
            status = ex.resp.status if ex.resp is not None else None
            raise RemoteLookupError(f"Drive: HTTP error {status}: {ex}", status) from ex
        except google.auth.exceptions.GoogleAuthError as ex:
            raise RemoteLookupError(f"Drive: authentication error: {ex.__class__.__name__}: {ex}") from ex
        except TRANSPORT_ERRORS as ex:
            raise RemoteLookupError(f"Drive: transport error: {ex.__class__.__name__}: {ex}") from ex

    return _inner


def escape_query_value(value: str) -> str:
    """Escape a value for use inside a single-quoted Drive query literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def authorized_http(auth: Any) -> httplib2.Http:
    """Default HTTP factory: authorize a fresh transport with the caller's credentials."""
    return AuthorizedHttp(auth, http=build_http())


class GoogleDriveBackend:
    """
    DriveBackend implementation for Google Drive v3.

    Args:
        service: Prebuilt Drive service resource (built lazily when omitted)
        http_factory: Turns the caller's auth handle into an HTTP object
        settings: Settings to use instead of the global instance
    """

    def __init__(
        self,
        service: Any = None,
        http_factory: Callable[[Any], Any] = authorized_http,
        settings: Settings | None = None,
    ):
        self._service = service
        self._http_factory = http_factory
        self.settings = settings or default_settings

    def _get_service(self) -> Any:
        if self._service is None:
            # Static discovery reads the bundled document, so no credentials are needed here.
            self._service = discovery.build(
                "drive",
                "v3",
                http=build_http(),
                cache_discovery=False,
                static_discovery=True,
            )
            logger.debug("Built Google Drive v3 service")
        return self._service

    def _drive_kwargs(self) -> dict[str, Any]:
        if self.settings.supports_all_drives:
            return {"supportsAllDrives": True}
        return {}

    @wrap_google_errors
    async def _execute(self, request: HttpRequest, auth: Any) -> dict[str, Any]:
        return await asyncio.to_thread(request.execute, http=self._http_factory(auth))

    async def get(self, file_id: str, fields: str, auth: Any) -> dict[str, Any]:
        request = self._get_service().files().get(
            fileId=file_id,
            fields=fields,
            **self._drive_kwargs(),
        )
        return await self._execute(request, auth)

    async def create(
        self,
        name: str,
        parents: list[str],
        fields: str,
        auth: Any,
        mime_type: str | None = None,
        media: str | PathLike | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": name,
            "parents": parents,
        }
        if mime_type:
            body["mimeType"] = mime_type

        kwargs: dict[str, Any] = {
            "body": body,
            "fields": fields,
            **self._drive_kwargs(),
        }
        if media is not None:
            kwargs["media_body"] = MediaFileUpload(
                fspath(media),
                chunksize=self.settings.upload_chunk_size,
                resumable=True,
            )

        return await self._execute(self._get_service().files().create(**kwargs), auth)

    async def list(
        self,
        parent_id: str,
        name: str,
        fields: str,
        auth: Any,
        folders_only: bool = False,
    ) -> list[dict[str, Any]]:
        clauses = [
            f"'{escape_query_value(parent_id)}' in parents",
            f"name='{escape_query_value(name)}'",
        ]
        if folders_only:
            clauses.append(f"mimeType='{FOLDER_MIME_TYPE}'")
        clauses.append("trashed=false")
        query = " and ".join(clauses)

        kwargs: dict[str, Any] = {
            "q": query,
            "fields": f"files({fields})",
            "spaces": self.settings.spaces,
        }
        if self.settings.page_size:
            kwargs["pageSize"] = self.settings.page_size
        if self.settings.supports_all_drives:
            kwargs["includeItemsFromAllDrives"] = True
            if self.settings.drive_id:
                kwargs["corpora"] = "drive"
                kwargs["driveId"] = self.settings.drive_id
            else:
                kwargs["corpora"] = "allDrives"
            kwargs.update(self._drive_kwargs())

        logger.debug(f"Listing children: {query}")
        result = await self._execute(self._get_service().files().list(**kwargs), auth)
        return result.get("files", [])
