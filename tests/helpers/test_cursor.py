"""Tests for cursor marker helper."""

from __future__ import annotations

import pytest
from lsprotocol.types import Position

from tests.helpers.cursor import extract_cursor, extract_cursor_offset


class TestExtractCursor:
    """Tests for extract_cursor function."""

    @pytest.mark.parametrize(
        "text_with_cursor,character",
        [
            ("<CURSOR>bar --option1", 0),
            ("bar <CURSOR>--option1", 4),
            ("bar --option1<CURSOR>", 13),
        ],
    )
    def test_single_line(self, text_with_cursor: str, character: int) -> None:
        text, pos = extract_cursor(text_with_cursor=text_with_cursor)
        assert text == "bar --option1"
        assert pos == Position(line=0, character=character)

    def test_multiline_second_line(self) -> None:
        """Cursor on second line of multiline text."""
        text, pos = extract_cursor(text_with_cursor="foo\nbar <CURSOR>--x")
        assert text == "foo\nbar --x"
        assert pos == Position(line=1, character=4)

    def test_custom_marker(self) -> None:
        """Can use custom marker."""
        text, pos = extract_cursor(text_with_cursor="bar |--x", marker="|")
        assert text == "bar --x"
        assert pos == Position(line=0, character=4)

    def test_missing_marker_raises(self) -> None:
        with pytest.raises(ValueError, match="not found"):
            extract_cursor(text_with_cursor="bar --x")

    def test_multiple_markers_raises(self) -> None:
        with pytest.raises(ValueError, match="Multiple"):
            extract_cursor(text_with_cursor="<CURSOR>bar <CURSOR>--x")


class TestExtractCursorOffset:
    """Tests for extract_cursor_offset function."""

    def test_offset_in_middle(self) -> None:
        text, offset = extract_cursor_offset(text_with_cursor="bar <CURSOR>--x")
        assert text == "bar --x"
        assert offset == 4

    def test_multiline_offset(self) -> None:
        """Offset counts newlines."""
        text, offset = extract_cursor_offset(text_with_cursor="ab\ncd<CURSOR>ef")
        assert text == "ab\ncdef"
        assert offset == 5

    def test_missing_marker_raises(self) -> None:
        with pytest.raises(ValueError, match="not found"):
            extract_cursor_offset(text_with_cursor="bar")
