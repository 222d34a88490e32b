"""
Tests for core/document.py — line index and whole-line text access.
"""
import pytest

from core import Document


class TestLineIndex:

    def test_empty_text_has_one_empty_line(self):
        doc = Document("")
        assert doc.line_count == 1
        assert doc.line_text(0) == ""

    def test_lines_exclude_terminators(self):
        doc = Document("a\nbb\nccc")
        assert doc.line_count == 3
        assert [doc.line_text(i) for i in range(3)] == ["a", "bb", "ccc"]

    def test_trailing_newline_opens_empty_last_line(self):
        doc = Document("a\n")
        assert doc.line_count == 2
        assert doc.line_text(1) == ""

    def test_crlf_terminators(self):
        doc = Document("a\r\nbb\r\n")
        assert doc.line_text(0) == "a"
        assert doc.line_text(1) == "bb"
        assert doc.line_start(1) == 3

    def test_lone_carriage_return(self):
        doc = Document("a\rb")
        assert doc.line_count == 2
        assert doc.line_text(1) == "b"

    @pytest.mark.parametrize("text, eol", [
        ("", "\n"),
        ("a", "\n"),
        ("a\r\nb\r\n", "\r\n"),
        ("a\r\nb\r\nc\n", "\r\n"),
        ("a\r\nb\n", "\n"),
        ("a\rb\r", "\r"),
    ])
    def test_dominant_line_ending(self, text, eol):
        assert Document(text).eol == eol

    def test_out_of_range_line(self):
        doc = Document("a")
        with pytest.raises(IndexError):
            doc.line_start(1)
        with pytest.raises(IndexError):
            doc.line_end(-1)


class TestOffsets:

    def test_offset_at_clamps_column(self):
        doc = Document("abc\ndef")
        assert doc.offset_at(1, 1) == 5
        assert doc.offset_at(0, 99) == 3

    def test_position_at_round_trips(self):
        doc = Document("abc\ndef\n")
        for offset in range(len(doc) + 1):
            line, column = doc.position_at(offset)
            assert doc.offset_at(line, column) == offset

    def test_position_at_out_of_range(self):
        with pytest.raises(IndexError):
            Document("abc").position_at(4)


class TestGetText:

    def test_whole_lines(self):
        doc = Document("zero\none\ntwo\nthree\n")
        assert doc.get_text(1, 2) == "one\ntwo"

    def test_single_line(self):
        doc = Document("zero\none\n")
        assert doc.get_text(0, 0) == "zero"

    def test_reversed_range(self):
        with pytest.raises(ValueError):
            Document("a\nb").get_text(1, 0)
