"""Token definitions for the snippetlex scanner.

The scanner produces a flat stream of Token objects in document order.
Each concrete token class is one variant of the stream:

- BeginTag: ``<b>``, ``<a href="x">``, ``<br/>``
- EndTag: ``</b>`` (also synthesized after a self-closing BeginTag)
- CommentTag: ``<!-- note -->``
- DocumentTag: ``<!DOCTYPE html>``
- Text: any run of characters between those constructs

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Tokens store raw coordinates and lazily create SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from snippetlex.location import SourceLocation


class TokenType(Enum):
    """Discriminator for the token variants."""

    BEGIN_TAG = auto()  # <b> <a href="x"> <br/>
    END_TAG = auto()  # </b>
    COMMENT_TAG = auto()  # <!-- ... -->
    DOCUMENT_TAG = auto()  # <!DOCTYPE html>
    TEXT = auto()  # everything else


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for every token produced by the scanner.

    Only the variant-specific fields take part in equality, so a token
    built by hand compares equal to the one the scanner produced for the
    same construct regardless of where it was found.

    Attributes:
        _start_offset: Absolute start position of the raw extent
        _end_offset: Absolute end position of the raw extent (exclusive)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _end_lineno: End line number
        _end_col: End column
        _source_file: Optional source file path
        synthetic: True for tokens with no source text of their own
            (the EndTag that follows a self-closing BeginTag)

    """

    type: ClassVar[TokenType]

    _start_offset: int = field(default=0, kw_only=True, repr=False, compare=False)
    _end_offset: int = field(default=0, kw_only=True, repr=False, compare=False)
    _lineno: int = field(default=1, kw_only=True, repr=False, compare=False)
    _col: int = field(default=1, kw_only=True, repr=False, compare=False)
    _end_lineno: int | None = field(default=None, kw_only=True, repr=False, compare=False)
    _end_col: int | None = field(default=None, kw_only=True, repr=False, compare=False)
    _source_file: str | None = field(default=None, kw_only=True, repr=False, compare=False)
    synthetic: bool = field(default=False, kw_only=True, repr=False, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, kw_only=True, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def start(self) -> int:
        """Start offset of the raw extent."""
        return self._start_offset

    @property
    def end(self) -> int:
        """End offset of the raw extent (exclusive)."""
        return self._end_offset

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    def source_slice(self, source: str) -> str:
        """Return the raw text this token was scanned from.

        Synthetic tokens have a zero-width extent and return "".

        Args:
            source: The string that was scanned

        Returns:
            ``source[start:end]``
        """
        return source[self._start_offset : self._end_offset]


@dataclass(frozen=True, slots=True)
class BeginTag(Token):
    """Element start tag, e.g. ``<a href="x">`` or ``<br/>``."""

    type: ClassVar[TokenType] = TokenType.BEGIN_TAG

    name: str
    attributes: dict[str, str] = field(default_factory=dict, hash=False)
    is_self_closing: bool = False


@dataclass(frozen=True, slots=True)
class EndTag(Token):
    """Element end tag, e.g. ``</a>``."""

    type: ClassVar[TokenType] = TokenType.END_TAG

    name: str


@dataclass(frozen=True, slots=True)
class CommentTag(Token):
    """Comment, e.g. ``<!-- note -->``. ``text`` keeps its whitespace."""

    type: ClassVar[TokenType] = TokenType.COMMENT_TAG

    text: str


@dataclass(frozen=True, slots=True)
class DocumentTag(Token):
    """Doctype-like declaration, e.g. ``<!DOCTYPE html>``."""

    type: ClassVar[TokenType] = TokenType.DOCUMENT_TAG

    name: str
    text: str = ""


@dataclass(frozen=True, slots=True)
class Text(Token):
    """Literal run of characters between constructs. Never empty."""

    type: ClassVar[TokenType] = TokenType.TEXT

    content: str


__all__ = [
    "BeginTag",
    "CommentTag",
    "DocumentTag",
    "EndTag",
    "Text",
    "Token",
    "TokenType",
]
