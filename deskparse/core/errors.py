"""Parse errors. Every failure aborts the parse; there is no partial result."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    UNACCEPTABLE_CHARACTER = "unacceptable_character"
    SYNTAX = "syntax"
    REPETITIVE_ENTRY = "repetitive_entry"
    FORMAT = "format"
    REPETITIVE_KEY = "repetitive_key"
    INTERNAL = "internal"
    KEY = "key"


class ParseError(Exception):
    """Base class for all parse failures.

    ``row`` is the 1-based line number and ``col`` the 0-based character
    offset within that line. Both are ``None`` for post-scan validation
    failures, which have no single position.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    label = "Parse error"

    def __init__(self, msg: str, row: int | None = None, col: int | None = None) -> None:
        self.msg = msg
        self.row = row
        self.col = col
        super().__init__(self._format())

    def _format(self) -> str:
        if self.row is None:
            return f"{self.label}: {self.msg}"
        return f"{self.label} at line {self.row} column {self.col}: {self.msg}"


class UnacceptableCharacterError(ParseError):
    kind = ErrorKind.UNACCEPTABLE_CHARACTER
    label = "Unacceptable character"

    def __init__(self, char: str, msg: str, row: int, col: int) -> None:
        self.char = char
        super().__init__(msg, row, col)

    def _format(self) -> str:
        return f"{self.label} {self.char!r} at line {self.row} column {self.col}: {self.msg}"


class EntrySyntaxError(ParseError):
    kind = ErrorKind.SYNTAX
    label = "Syntax error"


class RepetitiveEntryError(ParseError):
    kind = ErrorKind.REPETITIVE_ENTRY
    label = "Repetitive entry"


class EntryFormatError(ParseError):
    kind = ErrorKind.FORMAT
    label = "Format error"


class RepetitiveKeyError(ParseError):
    kind = ErrorKind.REPETITIVE_KEY
    label = "Repetitive key"

    def __init__(self, key: str, row: int, col: int = 0, locale: str | None = None) -> None:
        self.key = key
        self.locale = locale
        name = key if locale is None else f"{key}[{locale}]"
        super().__init__(f"{name!r} is already set in this group", row, col)


class InternalParseError(ParseError):
    """An invariant of the parser itself was broken; indicates a bug."""

    kind = ErrorKind.INTERNAL
    label = "Internal error"


class RequiredKeyError(ParseError):
    kind = ErrorKind.KEY
    label = "Key error"
