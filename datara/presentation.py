"""Per-frame row data handed to the renderer, and click resolution.

The renderer draws; this module decides what text each row shows and what a
click on a row means.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import DisplayConfig
from .formatting import metadata_line
from .listing import DirectoryListing, EntryKind
from .marquee import marquee_text

BASE_NAME_FONT_SIZE = 15.0
BASE_META_FONT_SIZE = 11.0
GRID_MARGIN = 32.0
MIN_GRID_ITEM_WIDTH = 200.0
MAX_HORIZONTAL_SPACING = 100.0


@dataclass(frozen=True)
class EntryView:
    """What to draw for one listing row this frame."""

    index: int
    kind: EntryKind
    name: str
    metadata: str
    path: Path


@dataclass(frozen=True)
class NavigateRequest:
    path: Path


@dataclass(frozen=True)
class OpenRequest:
    path: Path


EntryAction = NavigateRequest | OpenRequest


def label_font_sizes(config: DisplayConfig) -> tuple[float, float]:
    """Return ``(name_font_size, metadata_font_size)`` for the UI scale."""
    return BASE_NAME_FONT_SIZE * config.ui_scale, BASE_META_FONT_SIZE * config.ui_scale


def max_horizontal_spacing(screen_width: float, ui_scale: float, columns: int) -> float:
    """Largest grid spacing that still leaves each column its minimum width.

    Bounded to ``[0, MAX_HORIZONTAL_SPACING]``; a single column has no gaps.
    """
    if columns <= 1:
        return 0.0
    available = screen_width - GRID_MARGIN * ui_scale
    spacing = (available - columns * MIN_GRID_ITEM_WIDTH * ui_scale) / (columns - 1)
    return max(0.0, min(MAX_HORIZONTAL_SPACING, spacing))


def build_entry_views(
    listing: DirectoryListing,
    name_width: float,
    meta_width: float,
    font_size: float,
    meta_font_size: float,
    now: float,
    focused_index: int | None = None,
) -> list[EntryView]:
    """Lay out names and metadata lines for every row of ``listing``."""
    views: list[EntryView] = []
    for index, entry in enumerate(listing.entries):
        focused = index == focused_index
        views.append(
            EntryView(
                index=index,
                kind=entry.kind,
                name=marquee_text(entry.name, name_width, font_size, now, focused),
                metadata=marquee_text(metadata_line(entry), meta_width, meta_font_size, now, focused),
                path=entry.path,
            )
        )
    return views


def action_for(listing: DirectoryListing, index: int) -> EntryAction:
    """Map a click on row ``index`` to navigate (directory) or open (file).

    Raises ``IndexError`` for a row that is not in ``listing``.
    """
    if index < 0 or index >= len(listing.entries):
        raise IndexError(f"no entry at index {index}")
    entry = listing.entries[index]
    if entry.is_dir:
        return NavigateRequest(entry.path)
    return OpenRequest(entry.path)


__all__ = [
    "EntryAction",
    "EntryView",
    "NavigateRequest",
    "OpenRequest",
    "action_for",
    "build_entry_views",
    "label_font_sizes",
    "max_horizontal_spacing",
]
