"""Human-readable size and date strings for listing metadata."""

from __future__ import annotations

from datetime import datetime

from .listing import DirectoryEntry

DATE_FORMAT = "%b %d, %Y %H:%M"
METADATA_SEPARATOR = "  ·  "

_UNITS = (
    ("GB", 1024**3),
    ("MB", 1024**2),
    ("KB", 1024),
)


def format_size(num_bytes: int) -> str:
    """Format ``num_bytes`` in the largest binary unit it reaches, truncated.

    ``format_size(2048) == "2 KB"``; values below 1024 stay in bytes.
    """
    for unit, factor in _UNITS:
        if num_bytes >= factor:
            return f"{num_bytes // factor} {unit}"
    return f"{num_bytes} B"


def format_date(timestamp: float) -> str:
    """Format POSIX seconds as local ``Mon DD, YYYY HH:MM``."""
    return datetime.fromtimestamp(timestamp).strftime(DATE_FORMAT)


def metadata_line(entry: DirectoryEntry) -> str:
    """Return ``date · size`` for files, date only for directories.

    Missing parts are left out; an entry with no readable metadata yields ``""``.
    """
    date_text = format_date(entry.modified) if entry.modified is not None else ""
    size_text = format_size(entry.size) if entry.size is not None else ""
    if date_text and size_text:
        return f"{date_text}{METADATA_SEPARATOR}{size_text}"
    return date_text + size_text


__all__ = [
    "DATE_FORMAT",
    "METADATA_SEPARATOR",
    "format_date",
    "format_size",
    "metadata_line",
]
