"""Icon reference resolution — never called by the parser itself.

Resolution order:
  1. The reference is an existing file path
  2. Icon theme lookup (requested theme, its Inherits chain, then hicolor),
     exact size match first, then the closest size
  3. Unthemed icons in the base and pixmaps directories
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from deskparse.core.config import (
    DEFAULT_ICON_SCALE,
    DEFAULT_ICON_SIZE,
    DEFAULT_ICON_THEME,
    ICON_EXTENSIONS,
    Config,
    icon_base_dirs,
    pixmap_dirs,
)
from deskparse.core.logger import get_logger
from deskparse.core.models import IconSpec

_log = get_logger("icon_resolver")

FALLBACK_THEME = "hicolor"


@dataclass(frozen=True)
class ThemeDirectory:
    """One entry of an index.theme ``Directories`` list."""
    path: str
    size: int
    scale: int = 1
    type: str = "Threshold"
    min_size: int = 0
    max_size: int = 0
    threshold: int = 2

    def matches(self, size: int, scale: int) -> bool:
        if self.scale != scale:
            return False
        if self.type == "Fixed":
            return self.size == size
        if self.type == "Scaled":
            return self.min_size <= size <= self.max_size
        return self.size - self.threshold <= size <= self.size + self.threshold

    def distance(self, size: int, scale: int) -> int:
        wanted = size * scale
        if self.type == "Fixed":
            return abs(self.size * self.scale - wanted)
        if self.type == "Scaled":
            low, high = self.min_size, self.max_size
        else:
            low, high = self.size - self.threshold, self.size + self.threshold
        if wanted < low * self.scale:
            return low * self.scale - wanted
        if wanted > high * self.scale:
            return wanted - high * self.scale
        return 0


@dataclass(frozen=True)
class ThemeIndex:
    name: str
    directories: tuple[ThemeDirectory, ...]
    inherits: tuple[str, ...]


def _int(section: configparser.SectionProxy, key: str, default: int) -> int:
    try:
        return int(section.get(key, str(default)))
    except ValueError:
        return default


@lru_cache(maxsize=64)
def load_theme_index(name: str, base_dirs: tuple[Path, ...]) -> ThemeIndex | None:
    """Read ``<base>/<name>/index.theme`` from the first base dir that has one."""
    for base in base_dirs:
        index_file = base / name / "index.theme"
        if not index_file.is_file():
            continue
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        parser.optionxform = str
        try:
            parser.read(index_file, encoding="utf-8")
        except (configparser.Error, OSError, UnicodeDecodeError):
            _log.warning("Unreadable icon theme index %s", index_file)
            return None
        if "Icon Theme" not in parser:
            _log.warning("Icon theme index %s has no [Icon Theme] group", index_file)
            return None

        main = parser["Icon Theme"]
        names = [d for d in main.get("Directories", "").split(",") if d.strip()]
        names += [d for d in main.get("ScaledDirectories", "").split(",") if d.strip()]
        directories = []
        for dir_name in (d.strip() for d in names):
            if dir_name not in parser:
                continue
            section = parser[dir_name]
            size = _int(section, "Size", 0)
            directories.append(ThemeDirectory(
                path=dir_name,
                size=size,
                scale=_int(section, "Scale", 1),
                type=section.get("Type", "Threshold"),
                min_size=_int(section, "MinSize", size),
                max_size=_int(section, "MaxSize", size),
                threshold=_int(section, "Threshold", 2),
            ))
        inherits = tuple(t.strip() for t in main.get("Inherits", "").split(",") if t.strip())
        return ThemeIndex(name, tuple(directories), inherits)
    return None


def clear_icon_cache() -> None:
    """Forget every memoized theme index."""
    load_theme_index.cache_clear()


def _theme_chain(theme: str, base_dirs: tuple[Path, ...]) -> list[ThemeIndex]:
    chain: list[ThemeIndex] = []
    seen: set[str] = set()

    def visit(name: str) -> None:
        if name in seen:
            return
        seen.add(name)
        index = load_theme_index(name, base_dirs)
        if index is None:
            return
        chain.append(index)
        for parent in index.inherits:
            visit(parent)

    visit(theme)
    visit(FALLBACK_THEME)
    return chain


def _candidates(index: ThemeIndex, directory: ThemeDirectory, icon_name: str, base_dirs: Sequence[Path]):
    for base in base_dirs:
        for ext in ICON_EXTENSIONS:
            yield base / index.name / directory.path / f"{icon_name}{ext}"


def lookup_in_theme(index: ThemeIndex, icon_name: str, size: int, scale: int,
                    base_dirs: Sequence[Path]) -> Path | None:
    for directory in index.directories:
        if not directory.matches(size, scale):
            continue
        for candidate in _candidates(index, directory, icon_name, base_dirs):
            if candidate.is_file():
                return candidate

    closest: Path | None = None
    best = None
    for directory in index.directories:
        distance = directory.distance(size, scale)
        if best is not None and distance >= best:
            continue
        for candidate in _candidates(index, directory, icon_name, base_dirs):
            if candidate.is_file():
                closest, best = candidate, distance
                break
    return closest


def _lookup_unthemed(icon_name: str, dirs: Sequence[Path]) -> Path | None:
    for d in dirs:
        for ext in ICON_EXTENSIONS:
            candidate = d / f"{icon_name}{ext}"
            if candidate.is_file():
                return candidate
    return None


def _strip_extension(name: str) -> str:
    for ext in ICON_EXTENSIONS:
        if name.endswith(ext):
            return name[: -len(ext)]
    return name


def resolve_icon(
    icon: IconSpec | str,
    size: int | None = None,
    scale: int | None = None,
    theme: str | None = None,
    base_dirs: Sequence[Path] | None = None,
    config: Config | None = None,
) -> Path | None:
    """Resolve an icon reference to a file, or None when nothing matches.

    Unset ``size``/``scale``/``theme`` come from ``config`` when given,
    otherwise from the library defaults.
    """
    content = icon.content if isinstance(icon, IconSpec) else icon
    if not content:
        return None

    # 1) Literal path
    literal = Path(content).expanduser()
    if literal.is_file():
        return literal
    if literal.is_absolute():
        _log.debug("Icon path %s does not exist", content)
        return None

    if config is not None:
        size = size or config.get("icon_size")
        scale = scale or config.get("icon_scale")
        theme = theme or config.get("icon_theme")
    size = size or DEFAULT_ICON_SIZE
    scale = scale or DEFAULT_ICON_SCALE
    theme = theme or DEFAULT_ICON_THEME
    dirs = tuple(base_dirs) if base_dirs is not None else tuple(icon_base_dirs())
    icon_name = _strip_extension(content)

    # 2) Theme lookup
    for index in _theme_chain(theme, dirs):
        found = lookup_in_theme(index, icon_name, size, scale, dirs)
        if found is not None:
            _log.debug("Icon %r resolved in theme %s: %s", content, index.name, found)
            return found

    # 3) Unthemed fallback
    found = _lookup_unthemed(icon_name, list(dirs) + pixmap_dirs())
    if found is None:
        _log.debug("Icon %r not found (theme %s, size %d@%d)", content, theme, size, scale)
    return found
