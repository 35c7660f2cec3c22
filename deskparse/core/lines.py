"""Line classifier — splits text into position-tracked lines and tags them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from deskparse.core.config import COMMENT_PREFIX, WHITESPACE

BOM = "\ufeff"


class LineType(Enum):
    HEADER = "header"
    KEY_VALUE = "key_value"


@dataclass(frozen=True)
class Char:
    """One character of a line and its 0-based column."""
    value: str
    col: int


@dataclass(frozen=True)
class RawLine:
    """A retained line: 1-based number plus its characters."""
    number: int
    chars: tuple[Char, ...]

    @property
    def text(self) -> str:
        return "".join(ch.value for ch in self.chars)

    @property
    def line_type(self) -> LineType:
        if self.chars[0].value == "[":
            return LineType.HEADER
        return LineType.KEY_VALUE

    def __len__(self) -> int:
        return len(self.chars)


def _is_skipped(line: str) -> bool:
    stripped = line.strip(WHITESPACE)
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def to_raw_line(line: str, number: int) -> RawLine:
    """Trim trailing whitespace and drop a single indentation space at column 0."""
    chars = tuple(
        Char(ch, col)
        for col, ch in enumerate(line.rstrip(WHITESPACE))
        if not (col == 0 and ch == " ")
    )
    return RawLine(number, chars)


def split_lines(text: str) -> list[RawLine]:
    """Return the non-blank, non-comment lines of ``text`` in order.

    Only ``\\n`` separates lines, so any other control character stays inside
    its line where the header parser can reject it.
    """
    if text.startswith(BOM):
        text = text[len(BOM):]
    return [
        to_raw_line(line, number)
        for number, line in enumerate(text.split("\n"), start=1)
        if not _is_skipped(line)
    ]
