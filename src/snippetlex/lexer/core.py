"""Single-pass scanner with O(n) guaranteed performance.

Finds each ``<`` with str.find, asks the matcher for the construct the
next character routes to, and emits text for whatever lies between
constructs. A ``<`` that matches nothing stays inside the surrounding
text run.

No regex anywhere. Closing-delimiter searches are memoized per scan, so
unterminated constructs cannot make the scan quadratic.

Thread Safety:
HTMLLexer holds only read-only state and may be shared across threads.
Scanner instances are single-use: HTMLLexer creates one per source string.

"""

from __future__ import annotations

from collections.abc import Iterator

from snippetlex.config import LexConfig, get_lex_config
from snippetlex.errors import ListenerError
from snippetlex.lexer.charsets import is_word_char
from snippetlex.lexer.match import ConstructMatch
from snippetlex.lexer.matchers import (
    CommentMatcherMixin,
    DocumentMatcherMixin,
    TagMatcherMixin,
)
from snippetlex.lexer.matchers.tag import TagClose
from snippetlex.profiling import get_lex_accumulator
from snippetlex.protocols import TokenListener
from snippetlex.tokens import BeginTag, DocumentTag, EndTag, Text, Token
from snippetlex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    CommentMatcherMixin,
    DocumentMatcherMixin,
    TagMatcherMixin,
):
    """Single-use scanner over one source string.

    Usage:
        >>> from snippetlex.config import LexConfig
        >>> for token in Scanner('a<br/>b', LexConfig()).scan():
        ...     print(token)
        Text(content='a')
        BeginTag(name='br', attributes={}, is_self_closing=True)
        EndTag(name='br')
        Text(content='b')

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_config",
        # Location tracking: line/column of _loc_offset
        "_loc_offset",
        "_lineno",
        "_col",
        # Memoized searches: needle -> (searched from, found at or -1)
        "_find_cache",
        # Memoized tag tails: checkpoint -> close result
        "_tag_tails",
        "_degraded",
        # Profiling accumulator active when the scanner was created
        "_accumulator",
    )

    def __init__(
        self,
        source: str,
        config: LexConfig,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Markup to scan
            config: Lexer configuration
            source_file: Optional source file path recorded in locations
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._config = config

        self._loc_offset = 0
        self._lineno = 1
        self._col = 1

        self._find_cache: dict[str, tuple[int, int]] = {}
        self._tag_tails: dict[int, TagClose | None] = {}
        self._degraded = 0
        self._accumulator = get_lex_accumulator()

    def scan(self) -> Iterator[Token]:
        """Scan the source into a token stream.

        Yields:
            Token objects in document order

        Complexity: O(n) where n = len(source)

        Profiling: the scan is recorded in the accumulator that was active
        when this Scanner was created, once the iterator is exhausted.
        Iterators abandoned before the end are not recorded.
        """
        source = self._source
        source_len = self._source_len
        pos = 0
        last_end = 0
        count = 0

        while True:
            pos = source.find("<", pos)
            if pos == -1 or pos + 1 >= source_len:
                break

            if source[pos + 1] == "!":
                match = self._match_comment(pos) or self._match_document(pos)
            else:
                match = self._match_tag(pos)

            if match is None:
                self._degraded += 1
                logger.debug("Unmatched '<' at offset %d kept as text", pos)
                pos += 1
                continue

            if pos > last_end:
                text = self._make_text(last_end, pos)
                if text is not None:
                    count += 1
                    yield text

            token = self._make_token(match, pos)
            count += 1
            yield token
            if isinstance(token, BeginTag) and token.is_self_closing:
                count += 1
                yield self._make_synthetic_end(token)

            pos = last_end = match.end

        if last_end < source_len:
            text = self._make_text(last_end, source_len)
            if text is not None:
                count += 1
                yield text

        logger.debug(
            "Scanned %d chars into %d tokens (%d unmatched '<')",
            source_len,
            count,
            self._degraded,
        )
        if self._accumulator is not None:
            self._accumulator.record_scan(source_len, count, self._degraded)

    # =========================================================================
    # Helpers shared by the matchers
    # =========================================================================

    def _find(self, needle: str, start: int) -> int:
        """Find the first needle at or after start, or -1.

        Remembers the last search per needle: a later search starting
        between that search's start and its hit (or anywhere after a miss)
        has the same answer.
        """
        cached = self._find_cache.get(needle)
        if cached is not None:
            searched_from, found = cached
            if searched_from <= start and (found == -1 or start <= found):
                return found
        found = self._source.find(needle, start)
        self._find_cache[needle] = (start, found)
        return found

    def _scan_word(self, start: int) -> int:
        """Return the end of the run of word characters at start."""
        source = self._source
        source_len = self._source_len
        i = start
        while i < source_len and is_word_char(source[i]):
            i += 1
        return i

    def _skip_space(self, start: int) -> int:
        """Return the end of the run of whitespace at start."""
        source = self._source
        source_len = self._source_len
        i = start
        while i < source_len and source[i].isspace():
            i += 1
        return i

    # =========================================================================
    # Token construction
    # =========================================================================

    def _advance_location(self, offset: int) -> tuple[int, int]:
        """Move the location cursor forward to offset.

        Offsets must be requested in non-decreasing order.

        Returns:
            (lineno, col) of offset, both 1-indexed.
        """
        if offset != self._loc_offset:
            segment = self._source[self._loc_offset : offset]
            newline_count = segment.count("\n")
            if newline_count:
                self._lineno += newline_count
                self._col = len(segment) - segment.rfind("\n")
            else:
                self._col += len(segment)
            self._loc_offset = offset
        return self._lineno, self._col

    def _make(self, token_cls: type[Token], start: int, end: int, **values: object) -> Token:
        lineno, col = self._advance_location(start)
        end_lineno, end_col = self._advance_location(end)
        return token_cls(
            **values,
            _start_offset=start,
            _end_offset=end,
            _lineno=lineno,
            _col=col,
            _end_lineno=end_lineno,
            _end_col=end_col,
            _source_file=self._source_file,
        )

    def _make_text(self, start: int, end: int) -> Token | None:
        """Text token for source[start:end], or None if the transformer empties it."""
        content = self._source[start:end]
        transformer = self._config.text_transformer
        if transformer is not None:
            content = transformer(content)
            if not content:
                return None
        return self._make(Text, start, end, content=content)

    def _make_token(self, match: ConstructMatch, start: int) -> Token:
        values = match.values
        if self._config.lowercase_names and match.token_cls in (BeginTag, EndTag, DocumentTag):
            values = dict(values, name=values["name"].lower())
            if "attributes" in values:
                values["attributes"] = {
                    key.lower(): value for key, value in values["attributes"].items()
                }
        return self._make(match.token_cls, start, match.end, **values)

    def _make_synthetic_end(self, begin: BeginTag) -> Token:
        """EndTag closing a self-closing BeginTag, zero-width at its end."""
        return self._make(EndTag, begin.end, begin.end, name=begin.name, synthetic=True)


class HTMLLexer:
    """Reusable lenient lexer for simplified HTML snippets.

    Holds only its configuration and an optional default listener, so one
    instance can serve any number of sequential or concurrent scans.

    Usage:
            >>> lexer = HTMLLexer()
            >>> lexer.lex('a<!-- hi -->b')
            [Text(content='a'), CommentTag(text=' hi '), Text(content='b')]

            >>> seen = []
            >>> HTMLLexer(seen.append).read("<b></b>")
            >>> [token.type.name for token in seen]
            ['BEGIN_TAG', 'END_TAG']

    """

    __slots__ = ("_config", "_listener")

    def __init__(
        self,
        listener: TokenListener | None = None,
        *,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer.

        Args:
            listener: Default listener for read()
            config: Lexer configuration (defaults to the context config)
        """
        self._config = config if config is not None else get_lex_config()
        self._listener = listener

    @property
    def config(self) -> LexConfig:
        """Configuration used by every scan of this lexer."""
        return self._config

    @property
    def listener(self) -> TokenListener | None:
        """Default listener for read()."""
        return self._listener

    def tokenize(self, html: str, *, source_file: str | None = None) -> Iterator[Token]:
        """Lazily tokenize html.

        Args:
            html: Markup to scan
            source_file: Optional source file path recorded in locations

        Returns:
            Iterator producing tokens on demand.

        Raises:
            TypeError: If html is not a str.
        """
        if not isinstance(html, str):
            raise TypeError(f"expected str, got {type(html).__name__}")
        return Scanner(html, self._config, source_file).scan()

    def lex(self, html: str, *, source_file: str | None = None) -> list[Token]:
        """Tokenize html and collect every token."""
        return list(self.tokenize(html, source_file=source_file))

    def read(
        self,
        html: str,
        listener: TokenListener | None = None,
        *,
        source_file: str | None = None,
    ) -> None:
        """Scan html, notifying a listener once per token.

        Args:
            html: Markup to scan
            listener: Listener for this call (defaults to the lexer's own)
            source_file: Optional source file path recorded in locations

        Raises:
            ListenerError: If neither this call nor the lexer has a listener.
            TypeError: If html is not a str.
        """
        target = listener if listener is not None else self._listener
        if target is None:
            raise ListenerError("read() requires a listener; pass one or use tokenize()")
        for token in self.tokenize(html, source_file=source_file):
            target(token)
