"""Header parser — turns a ``[...]`` line into a group marker."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum

from deskparse.core.config import ACTION_GROUP_PREFIX, PRIMARY_GROUP
from deskparse.core.errors import EntrySyntaxError, InternalParseError, UnacceptableCharacterError
from deskparse.core.lines import RawLine


class HeaderKind(Enum):
    PRIMARY = "primary"
    ACTION = "action"
    OTHER = "other"


@dataclass(frozen=True)
class Header:
    kind: HeaderKind
    name: str = ""


def is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


def classify_group(name: str) -> Header:
    """Map a group name to its marker."""
    if name == PRIMARY_GROUP:
        return Header(HeaderKind.PRIMARY, name)
    if name.startswith(ACTION_GROUP_PREFIX):
        return Header(HeaderKind.ACTION, name[len(ACTION_GROUP_PREFIX):])
    return Header(HeaderKind.OTHER, name)


def parse_header(line: RawLine) -> Header:
    """Parse a header line.

    Raises UnacceptableCharacterError for a nested ``[`` or a control
    character, EntrySyntaxError when ``]`` is missing or not the last
    character.
    """
    if not line.chars or line.chars[0].value != "[":
        col = line.chars[0].col if line.chars else 0
        raise InternalParseError("line is mis-classified as a header", line.number, col)

    name: list[str] = []
    last = len(line.chars) - 1
    for index, ch in enumerate(line.chars[1:], start=1):
        if ch.value == "]":
            if index != last:
                raise EntrySyntaxError('nothing is expected after "]"', line.number, ch.col)
            return classify_group("".join(name))
        if ch.value == "[":
            raise UnacceptableCharacterError(
                ch.value, '"[" is not accepted in a group header', line.number, ch.col
            )
        if is_control(ch.value):
            raise UnacceptableCharacterError(
                ch.value, "control characters are not accepted in a group header", line.number, ch.col
            )
        name.append(ch.value)

    end = line.chars[last].col + 1
    raise EntrySyntaxError('group header is not closed with "]"', line.number, end)
