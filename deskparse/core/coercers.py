"""Typed value coercers and the key vocabulary of each group kind.

Each setter stores one KeyRecord into an attribute of a builder and raises
RepetitiveKeyError when that attribute (or that locale of it) is already set.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from deskparse.core.builders import LocaleStringBuilder, LocaleStringListBuilder
from deskparse.core.config import BOOL_LITERALS, LIST_SEPARATOR
from deskparse.core.errors import EntrySyntaxError, RepetitiveKeyError
from deskparse.core.models import IconSpec
from deskparse.core.tokenizer import KeyRecord


class FieldKind(Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"
    LOCALE_STRING = "locale_string"
    LOCALE_LIST = "locale_list"
    ICON = "icon"
    TYPE = "type"


# Key name -> (builder attribute, kind). Keys are case-sensitive.
ENTRY_KEYS: dict[str, tuple[str, FieldKind]] = {
    "Type": ("entry_type", FieldKind.TYPE),
    "Version": ("version", FieldKind.STRING),
    "Name": ("name", FieldKind.LOCALE_STRING),
    "GenericName": ("generic_name", FieldKind.LOCALE_STRING),
    "NoDisplay": ("no_display", FieldKind.BOOLEAN),
    "Comment": ("comment", FieldKind.LOCALE_STRING),
    "Icon": ("icon", FieldKind.ICON),
    "Hidden": ("hidden", FieldKind.BOOLEAN),
    "OnlyShowIn": ("only_show_in", FieldKind.LIST),
    "NotShowIn": ("not_show_in", FieldKind.LIST),
    "DBusActivatable": ("dbus_activatable", FieldKind.BOOLEAN),
    "TryExec": ("try_exec", FieldKind.STRING),
    "Exec": ("exec", FieldKind.STRING),
    "Path": ("path", FieldKind.STRING),
    "Terminal": ("terminal", FieldKind.BOOLEAN),
    "Actions": ("actions", FieldKind.LIST),
    "MimeType": ("mime_type", FieldKind.LIST),
    "Categories": ("categories", FieldKind.LIST),
    "Implements": ("implements", FieldKind.LIST),
    "Keywords": ("keywords", FieldKind.LOCALE_LIST),
    "StartupNotify": ("startup_notify", FieldKind.BOOLEAN),
    "StartupWMClass": ("startup_wm_class", FieldKind.STRING),
    "URL": ("url", FieldKind.STRING),
    "PrefersNonDefaultGPU": ("prefers_non_default_gpu", FieldKind.BOOLEAN),
    "SingleMainWindow": ("single_main_window", FieldKind.BOOLEAN),
}

ACTION_KEYS: dict[str, tuple[str, FieldKind]] = {
    "Name": ("name", FieldKind.LOCALE_STRING),
    "Exec": ("exec", FieldKind.STRING),
    "Icon": ("icon", FieldKind.ICON),
}


def split_list(value: str) -> list[str]:
    """Split on ';'. One trailing empty element is dropped, interior empties are kept."""
    items = value.split(LIST_SEPARATOR)
    if items[-1] == "":
        items.pop()
    return items


def _check_unset(target: Any, attr: str, record: KeyRecord) -> None:
    if getattr(target, attr) is not None:
        raise RepetitiveKeyError(record.key, record.line_number)


def set_string(target: Any, attr: str, record: KeyRecord) -> None:
    _check_unset(target, attr, record)
    setattr(target, attr, record.value)


def parse_bool(record: KeyRecord) -> bool:
    try:
        return BOOL_LITERALS[record.value]
    except KeyError:
        raise EntrySyntaxError(
            f'value of {record.key!r} must be "true" or "false", got {record.value!r}',
            record.line_number,
            0,
        ) from None


def set_bool(target: Any, attr: str, record: KeyRecord) -> None:
    _check_unset(target, attr, record)
    setattr(target, attr, parse_bool(record))


def set_list(target: Any, attr: str, record: KeyRecord) -> None:
    _check_unset(target, attr, record)
    setattr(target, attr, split_list(record.value))


def set_icon(target: Any, attr: str, record: KeyRecord) -> None:
    _check_unset(target, attr, record)
    setattr(target, attr, IconSpec(record.value))


def _set_localized(builder: LocaleStringBuilder | LocaleStringListBuilder, record: KeyRecord, value: Any) -> None:
    if record.locale is None:
        if builder.default is not None:
            raise RepetitiveKeyError(record.key, record.line_number)
        builder.default = value
    else:
        if record.locale in builder.variants:
            raise RepetitiveKeyError(record.key, record.line_number, locale=record.locale)
        builder.variants[record.locale] = value


def set_locale_string(target: Any, attr: str, record: KeyRecord) -> None:
    """Set the default or one locale variant; may be called once per locale."""
    builder = getattr(target, attr)
    if builder is None:
        builder = LocaleStringBuilder()
        setattr(target, attr, builder)
    _set_localized(builder, record, record.value)


def set_locale_string_list(target: Any, attr: str, record: KeyRecord) -> None:
    builder = getattr(target, attr)
    if builder is None:
        builder = LocaleStringListBuilder()
        setattr(target, attr, builder)
    _set_localized(builder, record, split_list(record.value))


def set_type(target: Any, attr: str, record: KeyRecord) -> None:
    """Store the raw Type value; it is mapped to an EntryType when the entry is frozen."""
    _check_unset(target, attr, record)
    setattr(target, attr, record.value)


SETTERS = {
    FieldKind.STRING: set_string,
    FieldKind.BOOLEAN: set_bool,
    FieldKind.LIST: set_list,
    FieldKind.LOCALE_STRING: set_locale_string,
    FieldKind.LOCALE_LIST: set_locale_string_list,
    FieldKind.ICON: set_icon,
    FieldKind.TYPE: set_type,
}


def apply_record(target: Any, record: KeyRecord, vocabulary: dict[str, tuple[str, FieldKind]]) -> bool:
    """Store ``record`` into ``target`` if its key is in ``vocabulary``.

    Returns False for an unrecognized key, which is ignored.
    """
    field = vocabulary.get(record.key)
    if field is None:
        return False
    attr, kind = field
    SETTERS[kind](target, attr, record)
    return True
