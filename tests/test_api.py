"""Tests for the public scanning API: tokenize, lex, read and HTMLLexer."""

import types

import pytest

from snippetlex import (
    BeginTag,
    CommentTag,
    DocumentTag,
    EndTag,
    HTMLLexer,
    ListenerError,
    Text,
    lex,
    read,
    tokenize,
)


class TestTokenize:
    """Pull-style scanning."""

    def test_returns_lazy_iterator(self) -> None:
        result = tokenize("<b>x</b>")
        assert isinstance(result, types.GeneratorType)
        assert next(result) == BeginTag("b")

    def test_partial_consumption(self) -> None:
        stream = tokenize("a<br/>b")
        assert next(stream) == Text("a")
        assert next(stream) == BeginTag("br", {}, True)
        assert next(stream) == EndTag("br")
        assert list(stream) == [Text("b")]

    def test_rejects_non_string_eagerly(self) -> None:
        with pytest.raises(TypeError, match="expected str"):
            tokenize(b"<b>")  # type: ignore[arg-type]


class TestLex:
    """Eager scanning."""

    def test_full_document(self) -> None:
        source = '<!DOCTYPE html><!-- top --><p class="lead">Hi<br/>there</p>'
        assert lex(source) == [
            DocumentTag("DOCTYPE", "html"),
            CommentTag(" top "),
            BeginTag("p", {"class": "lead"}),
            Text("Hi"),
            BeginTag("br", {}, True),
            EndTag("br"),
            Text("there"),
            EndTag("p"),
        ]

    def test_source_file_passed_through(self) -> None:
        assert lex("x", source_file="a.html")[0].location.source_file == "a.html"

    def test_returns_list(self) -> None:
        assert lex("") == []


class TestRead:
    """Push-style scanning."""

    def test_listener_called_in_order(self) -> None:
        seen: list = []
        read("a<!-- hi -->b", seen.append)
        assert seen == [Text("a"), CommentTag(" hi "), Text("b")]

    def test_read_returns_none(self) -> None:
        assert read("<b>", lambda token: None) is None

    def test_listener_required(self) -> None:
        with pytest.raises(ListenerError):
            read("<b>", None)  # type: ignore[arg-type]

    def test_listener_exception_propagates_and_stops(self) -> None:
        seen: list = []

        def listener(token: object) -> None:
            seen.append(token)
            if isinstance(token, EndTag):
                raise RuntimeError("stop")

        with pytest.raises(RuntimeError, match="stop"):
            read("<b></b><i></i>", listener)
        assert seen == [BeginTag("b"), EndTag("b")]


class TestHTMLLexer:
    """Reusable lexer object."""

    def test_default_listener(self) -> None:
        seen: list = []
        lexer = HTMLLexer(seen.append)
        lexer.read("<b>")
        lexer.read("</b>")
        assert seen == [BeginTag("b"), EndTag("b")]
        assert lexer.listener == seen.append

    def test_call_listener_overrides_default(self) -> None:
        default: list = []
        override: list = []
        lexer = HTMLLexer(default.append)
        lexer.read("x", override.append)
        assert default == []
        assert override == [Text("x")]

    def test_read_without_any_listener(self) -> None:
        with pytest.raises(ListenerError, match="requires a listener"):
            HTMLLexer().read("<b>")

    def test_read_rejects_non_string(self) -> None:
        with pytest.raises(TypeError):
            HTMLLexer(print).read(None)  # type: ignore[arg-type]

    def test_tokenize_and_lex_agree(self) -> None:
        lexer = HTMLLexer()
        source = "<p>a<!--b--><!X y>c</p>"
        assert list(lexer.tokenize(source)) == lexer.lex(source)

    def test_pattern_matching(self) -> None:
        names = []
        for token in lex('<a href="/"></a>'):
            match token:
                case BeginTag(name=name, attributes={"href": href}):
                    names.append((name, href))
                case EndTag(name=name):
                    names.append((name, None))
        assert names == [("a", "/"), ("a", None)]
