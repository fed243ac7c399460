"""Tests for single-directory scanning.

Covers ordering, hidden-file filtering, metadata defaults and failures.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from datara.listing import ChildInfo, EntryKind, ScanError, scan_directory
from datara.listing import fs


def _populate(root: Path) -> None:
    (root / "b.txt").write_text("bee\n", encoding="utf-8")
    (root / "A").mkdir()
    (root / ".hidden").write_text("", encoding="utf-8")
    (root / "a.txt").write_text("a", encoding="utf-8")


class ScanDirectoryTests(unittest.TestCase):
    def test_directories_first_then_case_insensitive_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            listing, error = scan_directory(root, show_hidden=False)

            self.assertIsNone(error)
            self.assertEqual(listing.names(), ["A", "a.txt", "b.txt"])
            self.assertEqual(listing.location, root)

    def test_sort_invariant_with_mixed_case_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            for name in ("zeta", "Alpha", "mid"):
                (root / name).mkdir()
            for name in ("beta.TXT", "Gamma", "alpha.md", "Zulu"):
                (root / name).write_text("x", encoding="utf-8")

            listing, _error = scan_directory(root, show_hidden=False)

            kinds = [entry.kind for entry in listing]
            first_file = kinds.index(EntryKind.FILE)
            self.assertTrue(all(kind is EntryKind.DIRECTORY for kind in kinds[:first_file]))
            self.assertTrue(all(kind is EntryKind.FILE for kind in kinds[first_file:]))
            for group in (listing.entries[:first_file], listing.entries[first_file:]):
                lowered = [entry.name.lower() for entry in group]
                self.assertEqual(lowered, sorted(lowered))
            self.assertEqual(listing.names(), ["Alpha", "mid", "zeta", "alpha.md", "beta.TXT", "Gamma", "Zulu"])

    def test_hidden_entries_only_listed_when_requested(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)
            (root / ".config").mkdir()

            visible, _ = scan_directory(root, show_hidden=False)
            everything, _ = scan_directory(root, show_hidden=True)

            self.assertFalse(any(name.startswith(".") for name in visible.names()))
            self.assertTrue(set(visible.names()) <= set(everything.names()))
            self.assertEqual(everything.names(), [".config", "A", ".hidden", "a.txt", "b.txt"])

    def test_entries_carry_size_and_mtime(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            listing, _ = scan_directory(root, show_hidden=False)
            by_name = {entry.name: entry for entry in listing}

            self.assertEqual(by_name["b.txt"].size, 4)
            self.assertEqual(by_name["b.txt"].path, root / "b.txt")
            self.assertIsNotNone(by_name["b.txt"].mtime_ns)
            self.assertIsNone(by_name["A"].size)
            self.assertTrue(by_name["A"].is_dir)
            self.assertIsNotNone(by_name["A"].modified)

    def test_missing_directory_reports_scan_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "gone"

            listing, error = scan_directory(missing, show_hidden=False)

            self.assertIsNone(listing)
            self.assertIsInstance(error, ScanError)
            self.assertIsInstance(error.cause, FileNotFoundError)
            self.assertEqual(error.path, missing)
            self.assertTrue(error.message.startswith("Failed to read dir"))

    def test_file_path_reports_scan_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "plain.txt"
            target.write_text("x", encoding="utf-8")

            listing, error = scan_directory(target, show_hidden=False)

            self.assertIsNone(listing)
            self.assertIsInstance(error.cause, NotADirectoryError)

    def test_unrepresentable_path_reports_scan_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            bad = Path(tmp).resolve() / "bad\x00name"

            listing, error = scan_directory(bad, show_hidden=False)

            self.assertIsNone(listing)
            self.assertIsInstance(error.cause, ValueError)
            self.assertEqual(error.path, bad)
            self.assertEqual(error.message, "Failed to read dir: embedded null byte")

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlink_kinds_follow_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real").mkdir()
            os.symlink(root / "real", root / "linked")
            os.symlink(root / "nowhere", root / "dangling")

            listing, error = scan_directory(root, show_hidden=False)
            by_name = {entry.name: entry for entry in listing}

            self.assertIsNone(error)
            self.assertTrue(by_name["linked"].is_dir)
            self.assertEqual(by_name["dangling"].kind, EntryKind.FILE)
            self.assertEqual(listing.names(), ["linked", "real", "dangling"])

    def test_children_provider_defaults_are_kept(self) -> None:
        def provider(_path: Path) -> list[ChildInfo]:
            return [
                ChildInfo(name="unreadable", is_dir=False, size=None, mtime_ns=None),
                ChildInfo(name="folder", is_dir=True, size=4096, mtime_ns=5),
            ]

        listing, error = scan_directory(Path("/virtual"), show_hidden=False, children_provider=provider)

        self.assertIsNone(error)
        self.assertEqual(listing.names(), ["folder", "unreadable"])
        self.assertIsNone(listing[0].size)
        self.assertEqual(listing[1].kind, EntryKind.FILE)
        self.assertIsNone(listing[1].mtime_ns)
        self.assertIsNone(listing[1].modified)


class _UnreadableEntry:
    name = "locked"
    path = "/virtual/locked"

    def stat(self, follow_symlinks: bool = True):
        raise PermissionError("denied")

    def is_dir(self, follow_symlinks: bool = True) -> bool:
        raise PermissionError("denied")


class ChildInfoTests(unittest.TestCase):
    def test_stat_failure_defaults_to_file_without_metadata(self) -> None:
        info = fs._child_info(_UnreadableEntry())

        self.assertEqual(info, ChildInfo(name="locked", is_dir=False, size=None, mtime_ns=None))


if __name__ == "__main__":
    unittest.main()
