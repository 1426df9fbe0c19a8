"""Element tag matcher mixin."""

from __future__ import annotations

from snippetlex.lexer.charsets import ATTRIBUTE_QUOTES
from snippetlex.lexer.match import ConstructMatch
from snippetlex.tokens import BeginTag, EndTag

# (end offset, checkpoint the close was found at, self-closing)
TagClose = tuple[int, int, bool]


class TagMatcherMixin:
    """Mixin matching element start, end and self-closing tags.

    Grammar::

        tag       = "<" ["/"] name *(ws attribute) [ws] ["/"] ">"
        attribute = attr-name "=" ( '"' *not-dquote '"' / "'" *not-squote "'" )

    ``name`` is a run of word characters; ``attr-name`` is any run of
    characters other than whitespace and ``=``. Values may be empty.

    The position after the tag name and after each parsed attribute is a
    *checkpoint*. The tag closes at the last checkpoint in the chain that
    is followed by ``[ws] ["/"] ">"``, so trailing junk after a valid
    prefix of attributes makes the whole tag fail, while a bogus
    "attribute" that swallows the closing ``>`` falls back to the prefix
    before it. Each checkpoint's outcome is memoized for the rest of the
    scan, which keeps overlapping candidate tags linear.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _tag_tails: dict[int, TagClose | None]

    def _find(self, needle: str, start: int) -> int:
        """Find needle at or after start. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_word(self, start: int) -> int:
        """Return end of the word run at start. Implemented by Scanner."""
        raise NotImplementedError

    def _skip_space(self, start: int) -> int:
        """Return end of the whitespace run at start. Implemented by Scanner."""
        raise NotImplementedError

    def _match_tag(self, pos: int) -> ConstructMatch | None:
        """Try to match an element tag starting at pos.

        Args:
            pos: Offset of the ``<``

        Returns:
            ConstructMatch for a BeginTag or EndTag, or None.
        """
        source = self._source
        name_start = pos + 1
        is_end_tag = name_start < self._source_len and source[name_start] == "/"
        if is_end_tag:
            name_start += 1

        name_end = self._scan_word(name_start)
        if name_end == name_start:
            return None
        name = source[name_start:name_end]

        tail = self._resolve_tag_tail(name_end)
        if tail is None:
            return None
        end, last_checkpoint, is_self_closing = tail

        if is_end_tag:
            return ConstructMatch(EndTag, end, {"name": name})
        return ConstructMatch(
            BeginTag,
            end,
            {
                "name": name,
                "attributes": self._collect_attributes(name_end, last_checkpoint),
                "is_self_closing": is_self_closing,
            },
        )

    def _resolve_tag_tail(self, checkpoint: int) -> TagClose | None:
        """Find where the tag whose name ends at checkpoint closes.

        Walks the attribute chain forward until it breaks (or reaches a
        checkpoint resolved earlier in this scan), then settles each
        checkpoint from the back: a checkpoint closes wherever its
        successor closes, or at its own ``[ws] ["/"] ">"`` if the
        successor does not close.

        Returns:
            (end, closing checkpoint, self-closing) or None.
        """
        memo = self._tag_tails
        chain: list[int] = []
        current: int | None = checkpoint
        while current is not None and current not in memo:
            chain.append(current)
            attribute = self._scan_attribute(current)
            current = attribute[2] if attribute is not None else None

        result = memo[current] if current is not None else None
        for point in reversed(chain):
            if result is None:
                result = self._scan_tag_close(point)
            memo[point] = result
        return memo[checkpoint]

    def _scan_attribute(self, pos: int) -> tuple[str, str, int] | None:
        """Parse ``ws name="value"`` at pos.

        Returns:
            (name, value, next checkpoint) or None.
        """
        source = self._source
        name_start = self._skip_space(pos)
        if name_start == pos:
            return None

        i = name_start
        source_len = self._source_len
        while i < source_len:
            char = source[i]
            if char == "=" or char.isspace():
                break
            i += 1
        if i == name_start or i + 1 >= source_len or source[i] != "=":
            return None

        quote = source[i + 1]
        if quote not in ATTRIBUTE_QUOTES:
            return None
        value_start = i + 2
        value_end = self._find(quote, value_start)
        if value_end == -1:
            return None
        return source[name_start:i], source[value_start:value_end], value_end + 1

    def _scan_tag_close(self, pos: int) -> TagClose | None:
        """Match ``[ws] ["/"] ">"`` at pos."""
        source = self._source
        i = self._skip_space(pos)
        is_self_closing = i < self._source_len and source[i] == "/"
        if is_self_closing:
            i += 1
        if i < self._source_len and source[i] == ">":
            return i + 1, pos, is_self_closing
        return None

    def _collect_attributes(self, start: int, stop: int) -> dict[str, str]:
        """Re-read the attribute chain between two checkpoints.

        Later duplicates overwrite earlier ones.
        """
        attributes: dict[str, str] = {}
        pos = start
        while pos < stop:
            attribute = self._scan_attribute(pos)
            if attribute is None:
                break
            name, value, pos = attribute
            attributes[name] = value
        return attributes
