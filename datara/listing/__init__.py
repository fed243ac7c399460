"""Directory listing model: value types plus the single-directory scanner.

This package has no UI concerns:
- entry/listing/error datatypes
- the OS collaborator reading immediate children
- filtering and ordering of one directory snapshot
"""

from __future__ import annotations

from .types import DirectoryEntry, DirectoryListing, EntryKind, ScanError
from .fs import ChildInfo, is_hidden_name, list_children, scan_directory, sort_key

__all__ = [
    "DirectoryEntry",
    "DirectoryListing",
    "EntryKind",
    "ScanError",
    "ChildInfo",
    "is_hidden_name",
    "list_children",
    "scan_directory",
    "sort_key",
]
