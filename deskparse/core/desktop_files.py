"""Desktop file loading and discovery across the XDG application directories."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from deskparse.core.config import Config
from deskparse.core.errors import ParseError
from deskparse.core.logger import get_logger
from deskparse.core.models import Application, DesktopFile
from deskparse.core.parser import parse

_log = get_logger("desktop_files")

DESKTOP_SUFFIX = ".desktop"


def read_desktop_file(path: str | Path) -> DesktopFile:
    """Read and parse one .desktop file. OSError and ParseError propagate."""
    with open(path, "r", encoding="utf-8") as f:
        return parse(f.read())


def desktop_file_id(path: str | Path, base_dir: str | Path) -> str:
    """Desktop file ID: the path below ``base_dir`` with '/' turned into '-'.

    ``applications/kde/konsole.desktop`` has the ID ``kde-konsole.desktop``.
    """
    relative = Path(path).relative_to(base_dir)
    return "-".join(relative.parts)


def iter_desktop_files(dirs: Iterable[Path] | None = None, config: Config | None = None) -> Iterator[tuple[str, Path]]:
    """Yield (desktop file ID, path), the first directory winning for a repeated ID.

    Without ``dirs`` the configured application directories are scanned.
    """
    if dirs is None:
        dirs = (config or Config()).application_dirs
    seen: set[str] = set()
    for d in dirs:
        d = Path(d)
        if not d.is_dir():
            continue
        for f in sorted(d.rglob(f"*{DESKTOP_SUFFIX}")):
            if not f.is_file():
                continue
            file_id = desktop_file_id(f, d)
            if file_id in seen:
                continue
            seen.add(file_id)
            yield file_id, f


def load_desktop_file(path: str | Path) -> DesktopFile | None:
    """Like read_desktop_file, but log and return None on failure."""
    try:
        return read_desktop_file(path)
    except ParseError as e:
        _log.warning("Skipping %s: %s", path, e)
    except (OSError, UnicodeDecodeError) as e:
        _log.warning("Could not read %s: %s", path, e)
    return None


def is_visible_application(desktop: DesktopFile) -> bool:
    entry = desktop.entry
    return isinstance(entry.entry_type, Application) and not entry.no_display and not entry.hidden


def get_all_desktop_entries(dirs: Iterable[Path] | None = None, config: Config | None = None) -> dict[str, DesktopFile]:
    """Return a dict mapping desktop file ID (without suffix) -> DesktopFile for all visible apps.

    A Hidden entry shadows files of the same ID in later directories, so it
    hides them rather than falling through.
    """
    entries: dict[str, DesktopFile] = {}
    for file_id, path in iter_desktop_files(dirs, config):
        desktop = load_desktop_file(path)
        if desktop is None or not is_visible_application(desktop):
            continue
        entries[file_id[: -len(DESKTOP_SUFFIX)]] = desktop
    _log.debug("Found %d visible application(s)", len(entries))
    return entries


def find_desktop_for_package(pkg_name: str, entries: dict[str, DesktopFile] | None = None) -> DesktopFile | None:
    """Try to find a desktop entry matching a package name."""
    if entries is None:
        entries = get_all_desktop_entries()

    if pkg_name in entries:
        return entries[pkg_name]

    pkg_lower = pkg_name.lower()
    for stem, desktop in entries.items():
        if stem.lower() == pkg_lower:
            return desktop

    for stem, desktop in entries.items():
        if pkg_lower in stem.lower() or pkg_lower in desktop.entry.name.default.lower():
            return desktop

    return None
