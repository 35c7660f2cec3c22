"""Mutable accumulators filled during one scan and frozen into the result types."""

from __future__ import annotations

from dataclasses import dataclass, field

from deskparse.core.models import (
    Application,
    DesktopAction,
    DesktopEntry,
    Directory,
    EntryType,
    IconSpec,
    Link,
    LocaleString,
    LocaleStringList,
    Unknown,
)


@dataclass
class LocaleStringBuilder:
    default: str | None = None
    variants: dict[str, str] = field(default_factory=dict)

    def freeze(self) -> LocaleString:
        if self.default is None:
            raise ValueError("locale string has no default value")
        return LocaleString(self.default, dict(self.variants))


@dataclass
class LocaleStringListBuilder:
    default: list[str] | None = None
    variants: dict[str, list[str]] = field(default_factory=dict)

    def freeze(self) -> LocaleStringList:
        default = tuple(self.default) if self.default is not None else ()
        return LocaleStringList(default, {k: tuple(v) for k, v in self.variants.items()})


def _tuple(value: list[str] | None) -> tuple[str, ...] | None:
    return tuple(value) if value is not None else None


def _freeze_optional(builder: LocaleStringBuilder | None) -> LocaleString | None:
    return builder.freeze() if builder is not None else None


def entry_type_from_tag(tag: str, fields: EntryBuilder) -> EntryType:
    """Build the EntryType variant for a Type value from the collected keys.

    Unknown values become Unknown rather than an error.
    """
    if tag == "Application":
        return Application(
            try_exec=fields.try_exec,
            exec=fields.exec,
            path=fields.path,
            terminal=fields.terminal,
            actions=_tuple(fields.actions),
            mime_type=_tuple(fields.mime_type),
            categories=_tuple(fields.categories),
            implements=_tuple(fields.implements),
            keywords=fields.keywords.freeze() if fields.keywords is not None else None,
            startup_notify=fields.startup_notify,
            startup_wm_class=fields.startup_wm_class,
            prefers_non_default_gpu=fields.prefers_non_default_gpu,
            single_main_window=fields.single_main_window,
        )
    if tag == "Link":
        if fields.url is None:
            raise ValueError("Link entry has no URL")
        return Link(fields.url)
    if tag == "Directory":
        return Directory()
    return Unknown(tag)


@dataclass
class EntryBuilder:
    """Accumulates the keys of the primary group, flat, whatever the Type."""
    entry_type: str | None = None
    version: str | None = None
    name: LocaleStringBuilder | None = None
    generic_name: LocaleStringBuilder | None = None
    no_display: bool | None = None
    comment: LocaleStringBuilder | None = None
    icon: IconSpec | None = None
    hidden: bool | None = None
    only_show_in: list[str] | None = None
    not_show_in: list[str] | None = None
    dbus_activatable: bool | None = None
    try_exec: str | None = None
    exec: str | None = None
    path: str | None = None
    terminal: bool | None = None
    actions: list[str] | None = None
    mime_type: list[str] | None = None
    categories: list[str] | None = None
    implements: list[str] | None = None
    keywords: LocaleStringListBuilder | None = None
    startup_notify: bool | None = None
    startup_wm_class: str | None = None
    url: str | None = None
    prefers_non_default_gpu: bool | None = None
    single_main_window: bool | None = None

    def freeze(self) -> DesktopEntry:
        """Convert to a DesktopEntry. Call only after validation."""
        if self.entry_type is None or self.name is None:
            raise ValueError("entry is missing Type or Name")
        return DesktopEntry(
            name=self.name.freeze(),
            entry_type=entry_type_from_tag(self.entry_type, self),
            version=self.version,
            generic_name=_freeze_optional(self.generic_name),
            no_display=self.no_display,
            comment=_freeze_optional(self.comment),
            icon=self.icon,
            hidden=self.hidden,
            only_show_in=_tuple(self.only_show_in),
            not_show_in=_tuple(self.not_show_in),
            dbus_activatable=self.dbus_activatable,
        )


@dataclass
class ActionBuilder:
    ref_name: str
    name: LocaleStringBuilder | None = None
    exec: str | None = None
    icon: IconSpec | None = None

    def freeze(self) -> DesktopAction:
        if self.name is None:
            raise ValueError(f"action {self.ref_name!r} has no Name")
        return DesktopAction(self.ref_name, self.name.freeze(), self.exec, self.icon)
