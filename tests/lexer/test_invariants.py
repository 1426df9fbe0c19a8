"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from snippetlex.lexer import HTMLLexer
from snippetlex.tokens import BeginTag, EndTag, Text, TokenType

# Alphabet dense in markup punctuation so constructs actually form
MARKUP_ALPHABET = "<>!/-=\"' \nabé_1"

markup_text = st.text(alphabet=MARKUP_ALPHABET, max_size=200)


def lex(source: str) -> list:
    return HTMLLexer().lex(source)


class TestCoverage:
    """The raw extents of non-synthetic tokens tile the input exactly."""

    @given(markup_text)
    @settings(max_examples=300)
    def test_extents_reconstruct_source(self, source: str) -> None:
        tokens = lex(source)
        rebuilt = "".join(t.source_slice(source) for t in tokens if not t.synthetic)
        assert rebuilt == source

    @given(markup_text)
    @settings(max_examples=200)
    def test_extents_contiguous(self, source: str) -> None:
        """No gaps and no overlaps between consecutive extents."""
        position = 0
        for token in lex(source):
            if token.synthetic:
                assert token.start == token.end == position
                continue
            assert token.start == position
            assert token.end > token.start
            position = token.end
        assert position == len(source)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_text_content_equals_source_slice(self, source: str) -> None:
        for token in lex(source):
            if isinstance(token, Text):
                assert token.content == token.source_slice(source)


class TestTokenShape:
    """Shape invariants of the emitted stream."""

    @given(markup_text)
    @settings(max_examples=200)
    def test_no_empty_text(self, source: str) -> None:
        for token in lex(source):
            if isinstance(token, Text):
                assert token.content != ""

    @given(markup_text)
    @settings(max_examples=200)
    def test_no_adjacent_text_tokens(self, source: str) -> None:
        tokens = lex(source)
        for first, second in zip(tokens, tokens[1:]):
            assert not (isinstance(first, Text) and isinstance(second, Text))

    @given(markup_text)
    @settings(max_examples=200)
    def test_self_closing_followed_by_synthetic_end(self, source: str) -> None:
        tokens = lex(source)
        for index, token in enumerate(tokens):
            if isinstance(token, BeginTag) and token.is_self_closing:
                following = tokens[index + 1]
                assert following == EndTag(token.name)
                assert following.synthetic
            elif token.synthetic:
                previous = tokens[index - 1]
                assert isinstance(previous, BeginTag) and previous.is_self_closing

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_no_exceptions_on_arbitrary_text(self, source: str) -> None:
        lex(source)

    @given(markup_text)
    @settings(max_examples=100)
    def test_type_matches_class(self, source: str) -> None:
        for token in lex(source):
            assert token.type.name == {
                "BeginTag": "BEGIN_TAG",
                "EndTag": "END_TAG",
                "CommentTag": "COMMENT_TAG",
                "DocumentTag": "DOCUMENT_TAG",
                "Text": "TEXT",
            }[type(token).__name__]


class TestDeterminism:
    """Tokenization is deterministic and the lexer is reusable."""

    @given(markup_text)
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        lexer = HTMLLexer()
        assert lexer.lex(source) == lexer.lex(source)

    @given(markup_text, markup_text)
    @settings(max_examples=50)
    def test_reuse_does_not_leak_state(self, first: str, second: str) -> None:
        lexer = HTMLLexer()
        lexer.lex(first)
        assert lexer.lex(second) == HTMLLexer().lex(second)

    @given(markup_text)
    @settings(max_examples=50)
    def test_lazy_and_eager_agree(self, source: str) -> None:
        lexer = HTMLLexer()
        assert list(lexer.tokenize(source)) == lexer.lex(source)


# Fragments whose text parts cannot combine into new constructs
_FRAGMENTS = [
    "hello",
    " ",
    "a < b",
    "x",
    "\n",
    "<b>",
    "</b>",
    "<br/>",
    '<a href="/x">',
    "</a>",
    "<!-- note -->",
    "<!DOCTYPE html>",
]


class TestTextRelex:
    """Re-lexing extracted text yields no constructs."""

    @given(st.lists(st.sampled_from(_FRAGMENTS), max_size=30))
    @settings(max_examples=200)
    def test_text_only_relex_has_no_tags(self, fragments: list[str]) -> None:
        source = "".join(fragments)
        text = "".join(t.content for t in lex(source) if isinstance(t, Text))
        relexed = lex(text)
        assert all(t.type == TokenType.TEXT for t in relexed)
        assert "".join(t.content for t in relexed) == text


class TestBoundaryConditions:
    """Boundary conditions and edge cases."""

    def test_empty_input(self) -> None:
        assert lex("") == []

    @pytest.mark.parametrize("length", [1, 2, 10, 100, 1000])
    def test_plain_text_is_one_token(self, length: int) -> None:
        source = "a" * length
        assert lex(source) == [Text(source)]

    @pytest.mark.parametrize("length", [1, 2, 10, 1000])
    def test_angles_only(self, length: int) -> None:
        source = "<" * length
        assert lex(source) == [Text(source)]

    @given(st.integers(min_value=1, max_value=50))
    @settings(max_examples=20)
    def test_many_consecutive_tags(self, count: int) -> None:
        tokens = lex("<b>" * count)
        assert tokens == [BeginTag("b")] * count
