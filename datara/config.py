"""Persistent display preferences stored as ``key=value`` lines.

Stores UI scale, grid columns, spacing, scanline overlay and hidden-file
preferences. All access is defensive: malformed or missing settings fall
back to defaults, and failed writes never reach the caller.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "datara"
CONFIG_FILENAME = "settings.txt"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

MIN_ITEMS_PER_ROW = 2
MAX_ITEMS_PER_ROW = 5


class ConfigError(ValueError):
    """A single settings value could not be parsed."""


def clamp_items_per_row(value: int) -> int:
    return max(MIN_ITEMS_PER_ROW, min(MAX_ITEMS_PER_ROW, value))


@dataclass(frozen=True)
class DisplayConfig:
    """User-adjustable presentation parameters."""

    ui_scale: float = 1.0
    max_items_per_row: int = 3
    show_scanlines: bool = False
    show_hidden: bool = False
    horizontal_spacing: float = 16.0
    vertical_spacing: float = 12.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "max_items_per_row", clamp_items_per_row(int(self.max_items_per_row)))

    def updated(self, **changes: object) -> DisplayConfig:
        """Return a copy with ``changes`` applied; unknown names raise ``TypeError``."""
        return replace(self, **changes)


DEFAULT_CONFIG = DisplayConfig()


def _parse_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"invalid float: {raw!r}") from exc
    if not math.isfinite(value):
        raise ConfigError(f"non-finite float: {raw!r}")
    return value


def _parse_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"invalid integer: {raw!r}") from exc


def _parse_bool(raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ConfigError(f"invalid boolean: {raw!r}")


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


_PARSERS = {
    "ui_scale": _parse_float,
    "max_items_per_row": _parse_int,
    "show_scanlines": _parse_bool,
    "show_hidden": _parse_bool,
    "horizontal_spacing": _parse_float,
    "vertical_spacing": _parse_float,
}


def parse_config_text(text: str) -> DisplayConfig:
    """Build a config from settings file contents.

    Lines without ``=`` and unknown keys are skipped. A value that fails to
    parse leaves its field at the default.
    """
    values: dict[str, object] = {}
    for line in text.splitlines():
        key, sep, raw_value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        parser = _PARSERS.get(key)
        if parser is None:
            continue
        try:
            values[key] = parser(raw_value.strip())
        except ConfigError as exc:
            logger.debug("ignoring setting %s: %s", key, exc)
    return DisplayConfig(**values)


def format_config_text(config: DisplayConfig) -> str:
    """Serialize every field as one ``key=value`` line in declaration order."""
    return "".join(f"{field.name}={_format_value(getattr(config, field.name))}\n" for field in fields(config))


def load_config(path: Path | None = None) -> DisplayConfig:
    """Load persisted settings, returning defaults when the file is missing or unreadable."""
    config_path = CONFIG_PATH if path is None else path
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return DisplayConfig()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("cannot read settings %s: %s", config_path, exc)
        return DisplayConfig()
    return parse_config_text(text)


def save_config(config: DisplayConfig, path: Path | None = None) -> None:
    """Overwrite the settings file with ``config``.

    Filesystem errors are logged and ignored; the in-memory config stays
    authoritative for the session.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(format_config_text(config), encoding="utf-8")
    except OSError as exc:
        logger.warning("cannot save settings to %s: %s", config_path, exc)


class SettingsStore:
    """In-memory display settings with write-through persistence."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self.config = load_config(path)

    def update(self, **changes: object) -> DisplayConfig:
        """Apply ``changes`` and persist the result immediately."""
        self.config = self.config.updated(**changes)
        save_config(self.config, self.path)
        return self.config

    def reset(self) -> DisplayConfig:
        """Restore and persist the default settings."""
        self.config = DEFAULT_CONFIG
        save_config(self.config, self.path)
        return self.config


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "DisplayConfig",
    "SettingsStore",
    "clamp_items_per_row",
    "format_config_text",
    "load_config",
    "parse_config_text",
    "save_config",
]
