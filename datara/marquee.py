"""Marquee layout for labels wider than their slot.

Everything here is a pure function of its arguments. Scrolling is driven by
an explicit clock value, so a label can be redrawn at any ``now`` without
per-item state. Width is approximated from a monospace-ish character width
of ``font_size * CHAR_WIDTH_RATIO``.
"""

from __future__ import annotations

CHAR_WIDTH_RATIO = 0.6
CYCLE_SECONDS = 4.0
ELLIPSIS = "..."


def char_width(font_size: float) -> float:
    return font_size * CHAR_WIDTH_RATIO


def fits(text: str, available_width: float, font_size: float) -> bool:
    """Return whether ``text`` renders within ``available_width``."""
    if char_width(font_size) <= 0:
        return True
    return len(text) * font_size * CHAR_WIDTH_RATIO <= available_width


def visible_char_count(available_width: float, font_size: float) -> int:
    """Number of whole characters that fit in ``available_width``."""
    width = char_width(font_size)
    if width <= 0 or available_width <= 0:
        return 0
    return int(available_width / width)


def truncate_text(text: str, available_width: float, font_size: float) -> str:
    """Cut ``text`` to the characters that fit, ending with an ellipsis."""
    if fits(text, available_width, font_size):
        return text
    max_chars = visible_char_count(available_width, font_size)
    if max_chars >= len(text):
        return text
    keep = max(0, max_chars - len(ELLIPSIS))
    return text[:keep] + ELLIPSIS


def scroll_offset(total_width: float, visible_width: float, now: float) -> float:
    """Horizontal offset at ``now`` for a there-and-back scroll of one cycle.

    The first half of each cycle ramps from 0 to the overflow width and the
    second half ramps back to 0.
    """
    scroll_range = max(0.0, total_width - visible_width)
    phase = (now % CYCLE_SECONDS) / CYCLE_SECONDS
    if phase < 0.5:
        return phase * 2.0 * scroll_range
    return (1.0 - (phase - 0.5) * 2.0) * scroll_range


def circular_window(text: str, start: int, length: int) -> str:
    """Read ``length`` characters from ``start``, wrapping past the end."""
    if not text or length <= 0:
        return ""
    start %= len(text)
    end = start + length
    if end <= len(text):
        return text[start:end]
    head = text[start:]
    return head + text[: length - len(head)]


def marquee_text(text: str, available_width: float, font_size: float, now: float, is_focused: bool) -> str:
    """Return the part of ``text`` to draw this frame.

    Text that fits is returned unchanged. Oversized text scrolls through a
    circular window while focused and is truncated with an ellipsis otherwise.
    """
    if fits(text, available_width, font_size):
        return text
    max_chars = visible_char_count(available_width, font_size)
    if max_chars >= len(text):
        return text
    if not is_focused:
        return truncate_text(text, available_width, font_size)

    width = char_width(font_size)
    offset = scroll_offset(len(text) * width, max_chars * width, now)
    start = int(offset / width)
    return circular_window(text, start, max_chars)


__all__ = [
    "CHAR_WIDTH_RATIO",
    "CYCLE_SECONDS",
    "ELLIPSIS",
    "char_width",
    "circular_window",
    "fits",
    "marquee_text",
    "scroll_offset",
    "truncate_text",
    "visible_char_count",
]
