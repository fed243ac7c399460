"""Navigation state: current location, back/forward history, and listing.

This module has no UI concerns. ``BrowserSession`` is the only owner of
"where the browser is"; every move rescans the target directory and commits
location, history and listing together, or not at all.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .listing import DirectoryListing, ScanError, scan_directory
from .presentation import EntryAction, NavigateRequest, action_for

logger = logging.getLogger(__name__)

MAX_HISTORY = 256

Scanner = Callable[[Path, bool], tuple[DirectoryListing | None, ScanError | None]]


def normalize_location(path: Path) -> Path:
    """Return an absolute variant of ``path`` without following symlinks.

    ``..`` segments are collapsed lexically, so going up from a symlinked
    directory returns to the directory that holds the link.
    """
    return Path(os.path.abspath(path.expanduser()))


class NavigationHistory:
    """Bounded back/forward stacks of visited locations.

    The oldest entries are dropped once a stack exceeds ``max_entries``.
    """

    def __init__(self, max_entries: int = MAX_HISTORY) -> None:
        self.max_entries = max(1, max_entries)
        self.back: list[Path] = []
        self.forward: list[Path] = []

    def _push(self, stack: list[Path], location: Path) -> None:
        stack.append(location)
        overflow = len(stack) - self.max_entries
        if overflow > 0:
            del stack[:overflow]

    @property
    def can_go_back(self) -> bool:
        return bool(self.back)

    @property
    def can_go_forward(self) -> bool:
        return bool(self.forward)

    def record(self, origin: Path) -> None:
        """Push ``origin`` onto the back stack and clear forward history."""
        self._push(self.back, origin)
        self.forward.clear()

    def go_back(self, current: Path) -> Path | None:
        """Pop the back target and push ``current`` onto the forward stack."""
        if not self.back:
            return None
        target = self.back.pop()
        self._push(self.forward, current)
        return target

    def go_forward(self, current: Path) -> Path | None:
        """Pop the forward target and push ``current`` onto the back stack."""
        if not self.forward:
            return None
        target = self.forward.pop()
        self._push(self.back, current)
        return target

    def snapshot(self) -> tuple[tuple[Path, ...], tuple[Path, ...]]:
        return tuple(self.back), tuple(self.forward)

    def restore(self, snapshot: tuple[tuple[Path, ...], tuple[Path, ...]]) -> None:
        back, forward = snapshot
        self.back = list(back)
        self.forward = list(forward)


class BrowserSession:
    """Current location plus history and the listing shown for it.

    Move operations return ``None`` on success or no-op, and the
    ``ScanError`` when the target could not be listed. A failed move keeps
    the previous location, history, and listing; only ``last_error`` changes.
    """

    def __init__(
        self,
        start: Path,
        show_hidden: bool = False,
        scanner: Scanner = scan_directory,
        max_history: int = MAX_HISTORY,
    ) -> None:
        self.show_hidden = show_hidden
        self.scanner = scanner
        self.history = NavigationHistory(max_history)
        self.location = normalize_location(start)
        self.last_error: ScanError | None = None
        listing, error = self.scanner(self.location, self.show_hidden)
        if error is not None:
            self.last_error = error
            listing = DirectoryListing(location=self.location)
        self.listing = listing

    @property
    def error_message(self) -> str | None:
        return None if self.last_error is None else self.last_error.message

    def _commit(self, target: Path, history_after: tuple[tuple[Path, ...], tuple[Path, ...]]) -> ScanError | None:
        """Scan ``target`` and, when it succeeds, adopt it with ``history_after``."""
        listing, error = self.scanner(target, self.show_hidden)
        if error is not None:
            self.last_error = error
            return error
        self.history.restore(history_after)
        self.location = target
        self.listing = listing
        self.last_error = None
        logger.debug("navigated to %s (%d entries)", target, len(listing))
        return None

    def _planned(self, move: Callable[[NavigationHistory], Path | None]) -> tuple[Path | None, tuple]:
        """Run ``move`` against a scratch copy of the history."""
        scratch = NavigationHistory(self.history.max_entries)
        scratch.restore(self.history.snapshot())
        target = move(scratch)
        return target, scratch.snapshot()

    def navigate_to(self, path: Path, record_history: bool = True) -> ScanError | None:
        """Move to ``path``, pushing the current location onto back history if requested."""
        target = normalize_location(path)
        current = self.location

        def move(history: NavigationHistory) -> Path:
            if record_history:
                history.record(current)
            return target

        _target, history_after = self._planned(move)
        return self._commit(target, history_after)

    def navigate_up(self) -> ScanError | None:
        """Move to the parent directory; no-op at the filesystem root."""
        parent = self.location.parent
        if parent == self.location:
            return None
        return self.navigate_to(parent, record_history=True)

    def navigate_back(self) -> ScanError | None:
        current = self.location
        target, history_after = self._planned(lambda history: history.go_back(current))
        if target is None:
            return None
        return self._commit(target, history_after)

    def navigate_forward(self) -> ScanError | None:
        current = self.location
        target, history_after = self._planned(lambda history: history.go_forward(current))
        if target is None:
            return None
        return self._commit(target, history_after)

    def refresh(self) -> ScanError | None:
        """Rescan the current location without touching history."""
        return self._commit(self.location, self.history.snapshot())

    def set_show_hidden(self, show_hidden: bool) -> ScanError | None:
        """Change the hidden-file filter and rescan; reverts the flag on failure."""
        previous = self.show_hidden
        if previous == show_hidden:
            return None
        self.show_hidden = show_hidden
        error = self.refresh()
        if error is not None:
            self.show_hidden = previous
        return error

    def activate(self, index: int) -> tuple[EntryAction, ScanError | None]:
        """Resolve a click on listing row ``index``.

        Directory rows are navigated immediately; the second item is the
        ``ScanError`` when that navigation failed. File rows come back as an
        ``OpenRequest`` for the caller to dispatch, with no error.
        """
        action = action_for(self.listing, index)
        if isinstance(action, NavigateRequest):
            return action, self.navigate_to(action.path, record_history=True)
        return action, None


__all__ = [
    "MAX_HISTORY",
    "BrowserSession",
    "NavigationHistory",
    "normalize_location",
]
