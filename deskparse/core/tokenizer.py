"""Key/value tokenizer — splits ``Key[locale]=value`` lines into a KeyRecord."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from deskparse.core.config import WHITESPACE
from deskparse.core.errors import EntrySyntaxError
from deskparse.core.lines import RawLine

KEY_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-")
BAD_KEY_MSG = "keys may only contain the characters A-Za-z0-9-"


class _State(Enum):
    KEY = "key"
    LOCALE = "locale"
    LOCALE_END = "locale_end"
    VALUE = "value"


@dataclass(frozen=True)
class KeyRecord:
    key: str
    locale: str | None
    value: str
    line_number: int


def tokenize(line: RawLine) -> KeyRecord:
    """Tokenize one key/value line.

    Spaces between the key (or its locale) and ``=`` are tolerated; the
    value is taken verbatim after ``=`` with leading whitespace removed. A
    line that ends before ``=`` gives an empty value.
    """
    state = _State.KEY
    key: list[str] = []
    locale: list[str] | None = None
    value: list[str] = []
    key_ended = False

    for ch in line.chars:
        if state is _State.KEY:
            if ch.value == "[":
                state = _State.LOCALE
                locale = []
            elif ch.value == "=":
                state = _State.VALUE
            elif ch.value == " ":
                key_ended = True
            elif ch.value in KEY_CHARS and not key_ended:
                key.append(ch.value)
            else:
                raise EntrySyntaxError(BAD_KEY_MSG, line.number, ch.col)
        elif state is _State.LOCALE:
            if ch.value == "]":
                state = _State.LOCALE_END
            else:
                locale.append(ch.value)
        elif state is _State.LOCALE_END:
            if ch.value != "=":
                raise EntrySyntaxError('expected "=" after "]"', line.number, ch.col)
            state = _State.VALUE
        else:
            value.append(ch.value)

    return KeyRecord(
        key="".join(key).rstrip(WHITESPACE),
        locale="".join(locale) if locale is not None else None,
        value="".join(value).lstrip(WHITESPACE),
        line_number=line.number,
    )
