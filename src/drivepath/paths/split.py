"""
Path splitting helpers.

Paths use the host separator. "." and "/" name the root folder.
"""

import os

from drivepath.core.config import get_logger
from drivepath.core.types import ROOT_PATHS

logger = get_logger("paths.split")


def is_root(path: str) -> bool:
    """Check whether a path names the root folder."""
    return path in ROOT_PATHS


def split_segments(path: str) -> list[str]:
    """
    Split a path into its segments, first to last.

    Empty segments (leading, doubled or trailing separators) are dropped,
    so "/a//b/" and "a/b" walk the same folders.
    """
    if is_root(path):
        return []

    parts = path.split(os.sep)
    segments = [part for part in parts if part]
    if len(segments) != len(parts):
        logger.debug(f"Ignoring empty segments in path {path!r}")
    return segments


def split_parent(path: str) -> tuple[str, str]:
    """
    Split a path into (parent_path, name).

    A bare name has "." as its parent, matching how the root is addressed.
    """
    trimmed = path.rstrip(os.sep) or path
    parent = os.path.dirname(trimmed) or "."
    return parent, os.path.basename(trimmed)
