"""Value types for one directory listing snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Display kind of a listing row."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a directory with metadata captured at scan time.

    ``size`` is only set for files. Both ``size`` and ``mtime_ns`` are
    ``None`` when the child could not be stat'ed.
    """

    name: str
    path: Path
    kind: EntryKind = EntryKind.FILE
    size: int | None = None
    mtime_ns: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def modified(self) -> float | None:
        """Modification time in POSIX seconds, or ``None`` when unknown."""
        if self.mtime_ns is None:
            return None
        return self.mtime_ns / 1_000_000_000


@dataclass(frozen=True)
class DirectoryListing:
    """Sorted, filtered children of ``location``."""

    location: Path
    entries: tuple[DirectoryEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index: int) -> DirectoryEntry:
        return self.entries[index]

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]


@dataclass(frozen=True)
class ScanError:
    """Failure to open a directory for listing.

    ``cause`` keeps the underlying ``OSError``, or the ``ValueError`` raised
    for paths the OS cannot represent. ``message`` is suitable for showing to
    the user as-is.
    """

    path: Path
    cause: OSError | ValueError

    @property
    def message(self) -> str:
        reason = getattr(self.cause, "strerror", None) or str(self.cause) or type(self.cause).__name__
        return f"Failed to read dir: {reason}"

    def __str__(self) -> str:
        return self.message


__all__ = [
    "EntryKind",
    "DirectoryEntry",
    "DirectoryListing",
    "ScanError",
]
