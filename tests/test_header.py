"""Tests for the group header parser."""

import pytest

from deskparse.core.errors import (
    EntrySyntaxError,
    ErrorKind,
    InternalParseError,
    UnacceptableCharacterError,
)
from deskparse.core.header import Header, HeaderKind, parse_header
from deskparse.core.lines import to_raw_line


def _header(text: str, number: int = 1) -> Header:
    return parse_header(to_raw_line(text, number))


class TestGroupNames:
    def test_primary(self) -> None:
        assert _header("[Desktop Entry]").kind is HeaderKind.PRIMARY

    def test_action(self) -> None:
        header = _header("[Desktop Action new-window]")
        assert header.kind is HeaderKind.ACTION
        assert header.name == "new-window"

    def test_other(self) -> None:
        header = _header("[X-Vendor Settings]")
        assert header == Header(HeaderKind.OTHER, "X-Vendor Settings")

    def test_primary_is_case_sensitive(self) -> None:
        assert _header("[desktop entry]").kind is HeaderKind.OTHER

    def test_action_prefix_needs_space(self) -> None:
        assert _header("[Desktop Actionfoo]").kind is HeaderKind.OTHER


class TestHeaderErrors:
    def test_nested_bracket(self) -> None:
        with pytest.raises(UnacceptableCharacterError) as exc:
            _header("[Desktop [Entry]", 4)
        assert exc.value.kind is ErrorKind.UNACCEPTABLE_CHARACTER
        assert exc.value.char == "["
        assert (exc.value.row, exc.value.col) == (4, 9)

    def test_control_character(self) -> None:
        with pytest.raises(UnacceptableCharacterError) as exc:
            _header("[Desktop\x07Entry]", 2)
        assert exc.value.char == "\x07"
        assert (exc.value.row, exc.value.col) == (2, 8)

    def test_text_after_closing_bracket(self) -> None:
        with pytest.raises(EntrySyntaxError) as exc:
            _header("[Desktop Entry] x", 3)
        assert exc.value.kind is ErrorKind.SYNTAX
        assert (exc.value.row, exc.value.col) == (3, 14)

    def test_missing_closing_bracket(self) -> None:
        with pytest.raises(EntrySyntaxError):
            _header("[Desktop Entry")

    def test_not_a_header(self) -> None:
        with pytest.raises(InternalParseError):
            _header("Name=X")
