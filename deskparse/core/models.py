"""Parsed desktop file types.

Everything here is immutable and produced by ``deskparse.core.parser.parse``.
Field names follow the keys of the Desktop Entry Specification.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

# ── Localized values ──


def _freeze_mapping(obj: object, name: str) -> None:
    object.__setattr__(obj, name, MappingProxyType(dict(getattr(obj, name))))


def locale_candidates(locale: str) -> list[str]:
    """Return the lookup keys for ``lang_COUNTRY.ENCODING@MODIFIER``, most specific first.

    The encoding part never takes part in matching.
    """
    rest, _, modifier = locale.partition("@")
    rest = rest.split(".", 1)[0]
    lang, _, country = rest.partition("_")

    candidates = []
    if country and modifier:
        candidates.append(f"{lang}_{country}@{modifier}")
    if country:
        candidates.append(f"{lang}_{country}")
    if modifier:
        candidates.append(f"{lang}@{modifier}")
    candidates.append(lang)
    return candidates


@dataclass(frozen=True)
class LocaleString:
    """A string with per-locale variants and a mandatory default."""
    default: str
    variants: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze_mapping(self, "variants")

    def __hash__(self) -> int:
        return hash((self.default, frozenset(self.variants.items())))

    def get_variant(self, locale: str) -> str:
        """Best match for ``locale``, falling back to the default."""
        for candidate in locale_candidates(locale):
            if candidate in self.variants:
                return self.variants[candidate]
        return self.default

    def __str__(self) -> str:
        return self.default


@dataclass(frozen=True)
class LocaleStringList:
    """A string list with per-locale variants."""
    default: tuple[str, ...] = ()
    variants: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze_mapping(self, "variants")

    def __hash__(self) -> int:
        return hash((self.default, frozenset(self.variants.items())))

    def get_variant(self, locale: str) -> tuple[str, ...]:
        for candidate in locale_candidates(locale):
            if candidate in self.variants:
                return self.variants[candidate]
        return self.default


@dataclass(frozen=True)
class IconSpec:
    """An icon reference as written in the file: a path or a theme icon name.

    Resolving it to a file is left to ``deskparse.core.icon_resolver``.
    """
    content: str

    def resolve(self, size: int | None = None, scale: int | None = None, theme: str | None = None) -> Path | None:
        from deskparse.core.icon_resolver import resolve_icon

        return resolve_icon(self, size=size, scale=scale, theme=theme)


# ── Entry types ──


class EntryType:
    """Base of the entry type variants."""

    @property
    def type_name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Application(EntryType):
    try_exec: str | None = None
    exec: str | None = None
    path: str | None = None
    terminal: bool | None = None
    actions: tuple[str, ...] | None = None
    mime_type: tuple[str, ...] | None = None
    categories: tuple[str, ...] | None = None
    implements: tuple[str, ...] | None = None
    keywords: LocaleStringList | None = None
    startup_notify: bool | None = None
    startup_wm_class: str | None = None
    prefers_non_default_gpu: bool | None = None
    single_main_window: bool | None = None


@dataclass(frozen=True)
class Link(EntryType):
    url: str


@dataclass(frozen=True)
class Directory(EntryType):
    pass


@dataclass(frozen=True)
class Unknown(EntryType):
    """A Type value this library does not know; kept for forward compatibility."""
    tag: str

    @property
    def type_name(self) -> str:
        return self.tag


# ── Records ──


def current_desktops() -> list[str]:
    """Desktop names from $XDG_CURRENT_DESKTOP, in order."""
    return [d for d in os.environ.get("XDG_CURRENT_DESKTOP", "").split(":") if d]


@dataclass(frozen=True)
class DesktopEntry:
    """The ``[Desktop Entry]`` group."""
    name: LocaleString
    entry_type: EntryType
    version: str | None = None
    generic_name: LocaleString | None = None
    no_display: bool | None = None
    comment: LocaleString | None = None
    icon: IconSpec | None = None
    hidden: bool | None = None
    only_show_in: tuple[str, ...] | None = None
    not_show_in: tuple[str, ...] | None = None
    dbus_activatable: bool | None = None

    @property
    def application(self) -> Application | None:
        return self.entry_type if isinstance(self.entry_type, Application) else None

    def should_show_in(self, desktops: Iterable[str] | None = None) -> bool:
        """Apply OnlyShowIn/NotShowIn to an ordered list of desktop names.

        The first desktop found in either list decides. Without a match the
        entry is shown unless OnlyShowIn is present.
        """
        if desktops is None:
            desktops = current_desktops()
        for desktop in desktops:
            if self.only_show_in and desktop in self.only_show_in:
                return True
            if self.not_show_in and desktop in self.not_show_in:
                return False
        return self.only_show_in is None


@dataclass(frozen=True)
class DesktopAction:
    """A ``[Desktop Action <ref_name>]`` group."""
    ref_name: str
    name: LocaleString
    exec: str | None = None
    icon: IconSpec | None = None


@dataclass(frozen=True)
class DesktopFile:
    entry: DesktopEntry
    actions: Mapping[str, DesktopAction] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze_mapping(self, "actions")

    def __hash__(self) -> int:
        return hash((self.entry, frozenset(self.actions.items())))

    def listed_actions(self) -> list[DesktopAction]:
        """Actions named by the Actions key, in that order. Names without a group are skipped."""
        app = self.entry.application
        if app is None or not app.actions:
            return []
        return [self.actions[name] for name in app.actions if name in self.actions]
