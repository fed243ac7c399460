"""Command-line front door for datara.

Parses CLI options, loads display settings, and lists the starting
directory through the same row layout the interactive UI uses.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .config import load_config
from .listing import EntryKind
from .marquee import char_width
from .navigation import BrowserSession
from .presentation import build_entry_views

KIND_MARKERS = {
    EntryKind.DIRECTORY: "[D]",
    EntryKind.FILE: "   ",
}
NAME_COLUMN_RATIO = 0.5
# Terminal cells map to marquee width units at a fixed font size.
TERMINAL_FONT_SIZE = 10.0
CELL_WIDTH = char_width(TERMINAL_FONT_SIZE)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default listing width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def render_listing(session: BrowserSession, max_cols: int) -> str:
    """Render the session's listing as plain text rows, ``max_cols`` wide."""
    marker_cols = len(KIND_MARKERS[EntryKind.FILE]) + 1
    name_cols = max(1, int((max_cols - marker_cols) * NAME_COLUMN_RATIO))
    meta_cols = max(1, max_cols - marker_cols - name_cols - 1)
    views = build_entry_views(
        session.listing,
        name_width=name_cols * CELL_WIDTH,
        meta_width=meta_cols * CELL_WIDTH,
        font_size=TERMINAL_FONT_SIZE,
        meta_font_size=TERMINAL_FONT_SIZE,
        now=0.0,
    )
    out = [f"{session.location}\n"]
    for view in views:
        row = f"{KIND_MARKERS[view.kind]} {view.name.ljust(name_cols)} {view.metadata}"
        out.append(row.rstrip() + "\n")
    return "".join(out)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list the starting directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Retro file browser: list a directory with its metadata.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument("--show-hidden", action="store_true", help="Include dot-files for this run.")
    parser.add_argument("--config", type=Path, default=None, help="Settings file (default: user config dir).")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for output (default: terminal width).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug messages to stderr.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    config = load_config(args.config)
    session = BrowserSession(path, show_hidden=args.show_hidden or config.show_hidden)
    if session.last_error is not None:
        raise SystemExit(session.last_error.message)

    max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
    sys.stdout.write(render_listing(session, max_cols))


if __name__ == "__main__":
    main()
