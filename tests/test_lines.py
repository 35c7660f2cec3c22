"""Tests for the line classifier."""

from deskparse.core.lines import LineType, split_lines, to_raw_line


class TestSplitLines:
    def test_drops_blank_and_comment_lines_keeping_numbers(self) -> None:
        lines = split_lines("\n[Desktop Entry]\n\n# comment\n   # indented comment\nName=X\n")
        assert [line.number for line in lines] == [2, 6]
        assert [line.text for line in lines] == ["[Desktop Entry]", "Name=X"]

    def test_whitespace_only_line_is_dropped(self) -> None:
        assert split_lines("   \n\t\n") == []

    def test_trailing_whitespace_and_cr_trimmed(self) -> None:
        (line,) = split_lines("Name=X  \r\n")
        assert line.text == "Name=X"

    def test_single_leading_space_dropped(self) -> None:
        (line,) = split_lines(" Name=X")
        assert line.text == "Name=X"
        assert line.chars[0].col == 1

    def test_only_one_leading_space_dropped(self) -> None:
        (line,) = split_lines("  Name=X")
        assert line.text == " Name=X"

    def test_non_ascii_columns_count_characters(self) -> None:
        (line,) = split_lines("Name=你好")
        assert [ch.col for ch in line.chars] == list(range(7))

    def test_bom_removed(self) -> None:
        (line,) = split_lines("\ufeff[Desktop Entry]")
        assert line.line_type is LineType.HEADER

    def test_vertical_tab_does_not_split_lines(self) -> None:
        (line,) = split_lines("[Desktop\x0bEntry]")
        assert "\x0b" in line.text

    def test_trailing_control_characters_kept(self) -> None:
        (line,) = split_lines("[Desktop Entry]\x1f\t\x0c")
        assert line.text == "[Desktop Entry]\x1f"

    def test_trailing_unicode_space_trimmed(self) -> None:
        (line,) = split_lines("Name=X\u3000\xa0")
        assert line.text == "Name=X"


class TestClassification:
    def test_header(self) -> None:
        assert to_raw_line("[Desktop Entry]", 1).line_type is LineType.HEADER

    def test_key_value(self) -> None:
        assert to_raw_line("Name[de]=X", 1).line_type is LineType.KEY_VALUE

    def test_indented_header_is_header(self) -> None:
        assert to_raw_line(" [Desktop Entry]", 1).line_type is LineType.HEADER
