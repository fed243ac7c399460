"""CLI argument, default-path and listing output tests."""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from datara import cli


def _run(argv: list[str], default_path: Path | None = None) -> str:
    stdout = io.StringIO()
    with mock.patch.object(sys, "argv", argv), mock.patch.object(sys, "stdout", stdout):
        cli.main(default_path=default_path)
    return stdout.getvalue()


class CliListingTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        self.config_path = self.root / "settings.txt"
        patcher = mock.patch("datara.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _make_tree(self) -> Path:
        tree = self.root / "tree"
        tree.mkdir()
        (tree / "sub").mkdir()
        (tree / "note.txt").write_text("hello", encoding="utf-8")
        (tree / ".dot").write_text("", encoding="utf-8")
        return tree

    def test_lists_explicit_path_directories_first(self) -> None:
        tree = self._make_tree()

        output = _run(["datara", str(tree), "--max-cols", "80"])

        lines = output.splitlines()
        self.assertEqual(lines[0], str(tree))
        self.assertTrue(lines[1].startswith("[D] sub "))
        self.assertTrue(lines[2].startswith("    note.txt "))
        self.assertTrue(lines[2].endswith("·  5 B"))
        self.assertEqual(len(lines), 3)

    def test_show_hidden_flag_includes_dot_files(self) -> None:
        tree = self._make_tree()

        output = _run(["datara", str(tree), "--show-hidden", "--max-cols", "80"])

        self.assertIn(".dot", output)

    def test_show_hidden_setting_is_honored(self) -> None:
        tree = self._make_tree()
        self.config_path.write_text("show_hidden=true\n", encoding="utf-8")

        output = _run(["datara", str(tree), "--max-cols", "80"])

        self.assertIn(".dot", output)

    def test_defaults_to_current_working_directory(self) -> None:
        tree = self._make_tree()
        previous_cwd = Path.cwd()
        try:
            os.chdir(tree)
            output = _run(["datara", "--max-cols", "80"])
        finally:
            os.chdir(previous_cwd)

        self.assertEqual(output.splitlines()[0], str(tree))

    def test_narrow_output_truncates_names(self) -> None:
        tree = self.root / "narrow"
        tree.mkdir()
        (tree / "an-exceedingly-long-file-name.txt").write_text("", encoding="utf-8")

        output = _run(["datara", str(tree), "--max-cols", "24"])

        self.assertIn("an-exce...", output.splitlines()[1])

    def test_missing_path_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            _run(["datara", str(self.root / "missing")])
        self.assertIn("Path not found", str(ctx.exception.code))

    def test_file_path_exits(self) -> None:
        target = self.root / "file.txt"
        target.write_text("", encoding="utf-8")

        with self.assertRaises(SystemExit) as ctx:
            _run(["datara", str(target)])
        self.assertIn("Not a directory", str(ctx.exception.code))

    def test_rejects_non_positive_max_cols(self) -> None:
        with mock.patch.object(sys, "stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                _run(["datara", str(self.root), "--max-cols", "0"])


if __name__ == "__main__":
    unittest.main()
