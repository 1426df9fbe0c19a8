"""
snippetlex — lenient single-pass lexer for simplified HTML snippets

Scans markup once, left to right, and produces a flat stream of tokens:
start/end/self-closing tags, comments, doctype-like declarations and text.
Never raises on malformed markup; anything that is not a recognized
construct stays in the surrounding text. O(n) guaranteed, no regex,
zero runtime dependencies.

Quick Start:
    >>> from snippetlex import lex
    >>> lex('Hello <b class="x">world</b><br/>')
    [Text(content='Hello '), BeginTag(name='b', attributes={'class': 'x'}, is_self_closing=False), Text(content='world'), EndTag(name='b'), BeginTag(name='br', attributes={}, is_self_closing=True), EndTag(name='br')]

    >>> # Pull style
    >>> from snippetlex import tokenize
    >>> for token in tokenize("<!DOCTYPE html>"):
    ...     print(token)
    DocumentTag(name='DOCTYPE', text='html')

    >>> # Push style
    >>> from snippetlex import read
    >>> read("a<!-- hi -->b", print)
    Text(content='a')
    CommentTag(text=' hi ')
    Text(content='b')

Installation:
    pip install snippetlex
"""

from collections.abc import Iterator

from snippetlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from snippetlex.errors import (
    LexerConfigError,
    ListenerError,
    SerializationError,
    SnippetlexError,
)
from snippetlex.lexer import HTMLLexer
from snippetlex.location import SourceLocation
from snippetlex.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from snippetlex.protocols import TokenListener
from snippetlex.render import render
from snippetlex.serialization import from_dict, from_json, to_dict, to_json
from snippetlex.text import extract_text
from snippetlex.tokens import (
    BeginTag,
    CommentTag,
    DocumentTag,
    EndTag,
    Text,
    Token,
    TokenType,
)

__version__ = "0.1.0"


def tokenize(html: str, *, source_file: str | None = None) -> Iterator[Token]:
    """Lazily tokenize markup with the context configuration.

    Args:
        html: Markup to scan
        source_file: Optional source file path recorded in token locations

    Returns:
        Iterator producing tokens in document order.

    Example:
        >>> next(tokenize("<i>x</i>"))
        BeginTag(name='i', attributes={}, is_self_closing=False)
    """
    return HTMLLexer().tokenize(html, source_file=source_file)


def lex(html: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize markup and return every token as a list."""
    return HTMLLexer().lex(html, source_file=source_file)


def read(html: str, listener: TokenListener, *, source_file: str | None = None) -> None:
    """Tokenize markup, calling listener once per token in document order.

    Args:
        html: Markup to scan
        listener: Callable receiving each token
        source_file: Optional source file path recorded in token locations

    Raises:
        ListenerError: If listener is None.
    """
    HTMLLexer().read(html, listener, source_file=source_file)


__all__ = [
    # Scanning
    "HTMLLexer",
    "lex",
    "read",
    "tokenize",
    # Tokens
    "BeginTag",
    "CommentTag",
    "DocumentTag",
    "EndTag",
    "SourceLocation",
    "Text",
    "Token",
    "TokenListener",
    "TokenType",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    # Errors
    "LexerConfigError",
    "ListenerError",
    "SerializationError",
    "SnippetlexError",
    # Helpers
    "LexAccumulator",
    "extract_text",
    "from_dict",
    "from_json",
    "get_lex_accumulator",
    "profiled_lex",
    "render",
    "to_dict",
    "to_json",
    # Version
    "__version__",
]
