"""Filesystem scanning for single-directory listings.

Only immediate children are read. A child whose metadata cannot be read is
still listed, defaulting to a file with unknown size and mtime.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .types import DirectoryEntry, DirectoryListing, EntryKind, ScanError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildInfo:
    """Raw metadata for one child as reported by the OS."""

    name: str
    is_dir: bool
    size: int | None
    mtime_ns: int | None


def _child_info(child: os.DirEntry) -> ChildInfo:
    """Read kind/size/mtime for ``child``, defaulting fields on stat failure."""
    try:
        stat = child.stat(follow_symlinks=True)
    except OSError:
        # Broken symlink: fall back to the link's own metadata.
        try:
            stat = child.stat(follow_symlinks=False)
        except OSError as exc:
            logger.debug("stat failed for %s: %s", child.path, exc)
            return ChildInfo(name=child.name, is_dir=False, size=None, mtime_ns=None)

    try:
        is_dir = child.is_dir(follow_symlinks=True)
    except OSError:
        is_dir = False
    return ChildInfo(
        name=child.name,
        is_dir=is_dir,
        size=None if is_dir else int(stat.st_size),
        mtime_ns=int(stat.st_mtime_ns),
    )


def list_children(directory: Path) -> list[ChildInfo]:
    """Return metadata for every immediate child of ``directory``.

    Raises ``OSError`` when the directory itself cannot be opened.
    """
    with os.scandir(directory) as entries:
        return [_child_info(child) for child in entries]


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def sort_key(entry: DirectoryEntry) -> tuple[bool, str]:
    """Directories first, then case-insensitive name."""
    return (not entry.is_dir, entry.name.lower())


def scan_directory(
    location: Path,
    show_hidden: bool,
    children_provider: Callable[[Path], list[ChildInfo]] = list_children,
) -> tuple[DirectoryListing | None, ScanError | None]:
    """List ``location`` as a sorted ``DirectoryListing``.

    Returns ``(listing, None)`` on success and ``(None, scan_error)`` when the
    directory cannot be opened.
    """
    try:
        children = children_provider(location)
    except (OSError, ValueError) as exc:
        logger.info("cannot list %s: %s", location, exc)
        return None, ScanError(path=location, cause=exc)

    entries: list[DirectoryEntry] = []
    for child in children:
        if not show_hidden and is_hidden_name(child.name):
            continue
        entries.append(
            DirectoryEntry(
                name=child.name,
                path=location / child.name,
                kind=EntryKind.DIRECTORY if child.is_dir else EntryKind.FILE,
                size=None if child.is_dir else child.size,
                mtime_ns=child.mtime_ns,
            )
        )

    entries.sort(key=sort_key)
    return DirectoryListing(location=location, entries=tuple(entries)), None


__all__ = [
    "ChildInfo",
    "list_children",
    "is_hidden_name",
    "sort_key",
    "scan_directory",
]
