"""
Pytest configuration and fixtures for drivepath tests.
"""

import os
from pathlib import Path
from typing import Any

import pytest

# Set test environment before importing app modules
os.environ["DRIVEPATH_ROOT_ID"] = "root"
os.environ["DRIVEPATH_SUPPORTS_ALL_DRIVES"] = "false"

from drivepath.core.errors import RemoteLookupError
from drivepath.core.types import FOLDER_MIME_TYPE


class FakeDrive:
    """
    In-memory DriveBackend that records every remote call.

    Children are returned in insertion order, which plays the role of the
    service-defined order for duplicate names.
    """

    def __init__(self):
        self.objects: dict[str, dict[str, Any]] = {
            "root": {"id": "root", "name": "My Drive", "mimeType": FOLDER_MIME_TYPE},
        }
        self.calls: list[tuple] = []
        self.forwarded: list[tuple[str, Any]] = []
        self.fail_on: set[str] = set()
        self._next_id = 0

    # ============================================
    # Seeding and inspection
    # ============================================

    def add(
        self,
        name: str,
        parent_id: str = "root",
        folder: bool = True,
        trashed: bool = False,
        **extra: Any,
    ) -> dict[str, Any]:
        self._next_id += 1
        file_id = f"id-{self._next_id}"
        obj = {
            "id": file_id,
            "name": name,
            "mimeType": FOLDER_MIME_TYPE if folder else "text/plain",
            "parents": [parent_id],
            "trashed": trashed,
            **extra,
        }
        self.objects[file_id] = obj
        return obj

    def children(self, parent_id: str, name: str) -> list[dict[str, Any]]:
        return [
            obj for obj in self.objects.values()
            if parent_id in obj.get("parents", []) and obj["name"] == name
        ]

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call[0] == kind)

    def _record(self, call: tuple, fields: str, auth: Any) -> None:
        self.calls.append(call)
        self.forwarded.append((fields, auth))
        if call[0] in self.fail_on:
            raise RemoteLookupError(f"Drive: HTTP error 500: {call[0]} failed", 500)

    # ============================================
    # DriveBackend
    # ============================================

    async def get(self, file_id: str, fields: str, auth: Any) -> dict[str, Any]:
        self._record(("get", file_id), fields, auth)
        if file_id not in self.objects:
            raise RemoteLookupError(f"Drive: HTTP error 404: File not found: {file_id}", 404)
        return dict(self.objects[file_id])

    async def create(
        self,
        name: str,
        parents: list[str],
        fields: str,
        auth: Any,
        mime_type: str | None = None,
        media=None,
    ) -> dict[str, Any]:
        self._record(("create", name, tuple(parents), mime_type), fields, auth)
        extra = {}
        if media is not None:
            extra["content"] = Path(media).read_bytes()
        obj = self.add(name, parents[0], folder=mime_type == FOLDER_MIME_TYPE, **extra)
        return dict(obj)

    async def list(
        self,
        parent_id: str,
        name: str,
        fields: str,
        auth: Any,
        folders_only: bool = False,
    ) -> list[dict[str, Any]]:
        self._record(("list", parent_id, name, folders_only), fields, auth)
        return [
            dict(obj) for obj in self.children(parent_id, name)
            if not obj.get("trashed")
            and (not folders_only or obj["mimeType"] == FOLDER_MIME_TYPE)
        ]


@pytest.fixture
def drive() -> FakeDrive:
    """Empty in-memory drive holding only the root folder."""
    return FakeDrive()


@pytest.fixture
def docs_drive(drive) -> FakeDrive:
    """Drive with root -> docs -> 2024 -> report.pdf."""
    docs = drive.add("docs")
    year = drive.add("2024", docs["id"])
    drive.add("report.pdf", year["id"], folder=False, webViewLink="https://drive.example/report")
    return drive


@pytest.fixture
def fields() -> str:
    """Field selection forwarded to every remote call."""
    return "id, name, mimeType, parents"


@pytest.fixture
def auth() -> object:
    """Opaque authenticated session handle."""
    return object()


@pytest.fixture
def local_file(tmp_path) -> Path:
    """A local file to upload."""
    path = tmp_path / "out.csv"
    path.write_bytes(b"quarter,total\nq1,1200\nq2,1350\n")
    return path
