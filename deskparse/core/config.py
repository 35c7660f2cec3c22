"""Configuration for deskparse: format literals, XDG locations and user settings.

User settings persist to $XDG_CONFIG_HOME/deskparse/settings.json and only
affect the collaborators (icon lookup, discovery, logging), never the parser.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from deskparse.core.logger import get_logger

_log = get_logger("config")

# ── Format literals ──

PRIMARY_GROUP = "Desktop Entry"
ACTION_GROUP_PREFIX = "Desktop Action "
LIST_SEPARATOR = ";"
COMMENT_PREFIX = "#"
# Unicode White_Space. str.strip() would also drop \x1c-\x1f, which must
# survive so the header parser can reject them.
WHITESPACE = (
    " \t\n\x0b\x0c\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
BOOL_LITERALS = {"true": True, "false": False}

# ── Icon lookup defaults ──

DEFAULT_ICON_THEME = "hicolor"
DEFAULT_ICON_SIZE = 48
DEFAULT_ICON_SCALE = 1
ICON_EXTENSIONS = [".png", ".svg", ".xpm"]


# ── XDG base directories ──

def config_home() -> Path:
    value = os.environ.get("XDG_CONFIG_HOME")
    return Path(value) if value else Path.home() / ".config"


def data_home() -> Path:
    value = os.environ.get("XDG_DATA_HOME")
    return Path(value) if value else Path.home() / ".local" / "share"


def data_dirs() -> list[Path]:
    value = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    return [Path(p) for p in value.split(":") if p]


def applications_dirs() -> list[Path]:
    """Application directories in precedence order (user data home first)."""
    return [d / "applications" for d in [data_home(), *data_dirs()]]


def icon_base_dirs() -> list[Path]:
    """Icon theme base directories in lookup order, per the Icon Theme Specification."""
    dirs = [Path.home() / ".icons", data_home() / "icons"]
    dirs.extend(d / "icons" for d in data_dirs())
    return dirs


def pixmap_dirs() -> list[Path]:
    return [d / "pixmaps" for d in data_dirs()]


def settings_file() -> Path:
    return config_home() / "deskparse" / "settings.json"


DEFAULTS: dict[str, Any] = {
    "icon_theme": DEFAULT_ICON_THEME,
    "icon_size": DEFAULT_ICON_SIZE,
    "icon_scale": DEFAULT_ICON_SCALE,
    "log_level": "INFO",
    "extra_application_dirs": [],
}


class Config:
    """Settings manager with JSON persistence."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else settings_file()
        self._data: dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self) -> None:
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    saved = json.load(f)
            except (json.JSONDecodeError, OSError):
                _log.warning("Ignoring unreadable settings file %s", self.path)
                return
            if isinstance(saved, dict):
                self._data.update(saved)
            else:
                _log.warning("Ignoring settings file %s: top level is not an object", self.path)

    def save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except OSError:
            _log.warning("Could not write settings file %s", self.path)

    def get(self, key: str, fallback: Any = None) -> Any:
        return self._data.get(key, fallback if fallback is not None else DEFAULTS.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def reset(self) -> None:
        self._data = dict(DEFAULTS)
        self.save()

    @property
    def application_dirs(self) -> list[Path]:
        """XDG application dirs followed by any configured extra dirs."""
        extra = [Path(p).expanduser() for p in self.get("extra_application_dirs") or []]
        return applications_dirs() + extra
