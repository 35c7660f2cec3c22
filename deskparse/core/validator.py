"""Post-scan checks for required and conditionally required keys."""

from __future__ import annotations

from typing import Sequence

from deskparse.core.builders import ActionBuilder, EntryBuilder, LocaleStringBuilder
from deskparse.core.errors import RequiredKeyError


def _require_default(value: LocaleStringBuilder | None, key: str, group: str) -> None:
    if value is not None and value.default is None:
        raise RequiredKeyError(f"{key} in {group} needs a default value without a locale")


def validate(entry: EntryBuilder, actions: Sequence[ActionBuilder] = ()) -> None:
    """Raise RequiredKeyError on the first violated rule."""
    if entry.entry_type is None:
        raise RequiredKeyError("Type is required")
    if entry.name is None or entry.name.default is None:
        raise RequiredKeyError("Name is required (with a default value)")
    if entry.entry_type == "Link" and entry.url is None:
        raise RequiredKeyError("URL is required for Link entries")

    _require_default(entry.generic_name, "GenericName", "[Desktop Entry]")
    _require_default(entry.comment, "Comment", "[Desktop Entry]")

    for action in actions:
        group = f"[Desktop Action {action.ref_name}]"
        if action.name is None:
            raise RequiredKeyError(f"Name is required in {group}")
        _require_default(action.name, "Name", group)
