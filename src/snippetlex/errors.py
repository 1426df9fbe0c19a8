"""Exception classes for snippetlex.

Scanning itself never raises: malformed markup degrades to text. These
exceptions cover misuse of the API around the scanner.
"""

from __future__ import annotations


class SnippetlexError(Exception):
    """Base exception for all snippetlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexerConfigError(SnippetlexError):
    """Invalid lexer configuration.

    Raised when a LexConfig is built with a value of the wrong kind.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending LexConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")


class ListenerError(SnippetlexError):
    """Push-style scan requested without a token listener."""

    pass


class SerializationError(SnippetlexError, ValueError):
    """Error converting tokens to or from their dict/JSON form."""

    pass
