"""Tests for source location tracking on tokens."""

from snippetlex.lexer import HTMLLexer
from snippetlex.tokens import BeginTag, EndTag, Text


def lex(source: str, source_file: str | None = None) -> list:
    return HTMLLexer().lex(source, source_file=source_file)


class TestSingleLineLocations:
    """Location tracking for single-line input."""

    def test_offsets(self) -> None:
        text, begin, inner, end = lex("ab<b>cd</b>")
        assert (text.start, text.end) == (0, 2)
        assert (begin.start, begin.end) == (2, 5)
        assert (inner.start, inner.end) == (5, 7)
        assert (end.start, end.end) == (7, 11)

    def test_columns(self) -> None:
        tokens = lex("ab<b>cd</b>")
        assert [t.col for t in tokens] == [1, 3, 6, 8]
        assert all(t.lineno == 1 for t in tokens)

    def test_end_columns(self) -> None:
        begin = lex("<b>")[0]
        assert begin.location.end_lineno == 1
        assert begin.location.end_col_offset == 4


class TestMultilineLocations:
    """Location tracking across lines."""

    def test_token_after_newline(self) -> None:
        text, begin, inner, end = lex("ab\n<b>cd</b>")
        assert text.location.lineno == 1
        assert text.location.end_lineno == 2
        assert text.location.end_col_offset == 1
        assert (begin.lineno, begin.col) == (2, 1)
        assert (inner.lineno, inner.col) == (2, 4)
        assert (end.lineno, end.col) == (2, 6)

    def test_multiline_comment_end(self) -> None:
        comment, text = lex("<!--\n\nx-->y")
        assert comment.location.lineno == 1
        assert comment.location.end_lineno == 3
        assert comment.location.end_col_offset == 5
        assert (text.lineno, text.col) == (3, 5)

    def test_multiline_tag(self) -> None:
        begin, text = lex('<a\nhref="x">z')
        assert begin == BeginTag("a", {"href": "x"})
        assert begin.location.end_lineno == 2
        assert (text.lineno, text.col) == (2, 10)


class TestSyntheticLocations:
    """Synthetic end tags sit at the end of their begin tag."""

    def test_zero_width(self) -> None:
        begin, end = lex("x\n<br/>")[1:]
        assert end == EndTag("br")
        assert end.location.offset == end.location.end_offset == begin.end
        assert (end.lineno, end.col) == (2, 6)
        assert end.location.length == 0


class TestSourceFile:
    """source_file is carried into every location."""

    def test_source_file_recorded(self) -> None:
        tokens = lex("a<b>", source_file="banner.html")
        assert all(t.location.source_file == "banner.html" for t in tokens)
        assert str(tokens[1].location) == "banner.html:1:2"

    def test_location_cached(self) -> None:
        token = lex("abc")[0]
        assert token.location is token.location
        assert token == Text("abc")
