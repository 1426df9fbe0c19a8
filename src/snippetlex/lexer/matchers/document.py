"""Doctype-like declaration matcher mixin."""

from __future__ import annotations

from snippetlex.lexer.match import ConstructMatch
from snippetlex.tokens import DocumentTag


class DocumentMatcherMixin:
    """Mixin matching ``<!NAME>`` and ``<!NAME text>``.

    Grammar: ``<!`` word-chars, then either optional whitespace and ``>``,
    or whitespace, text up to the first ``>``, with trailing whitespace
    trimmed from the text.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int

    def _find(self, needle: str, start: int) -> int:
        """Find needle at or after start. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_word(self, start: int) -> int:
        """Return end of the word run at start. Implemented by Scanner."""
        raise NotImplementedError

    def _skip_space(self, start: int) -> int:
        """Return end of the whitespace run at start. Implemented by Scanner."""
        raise NotImplementedError

    def _match_document(self, pos: int) -> ConstructMatch | None:
        """Try to match a declaration starting at pos.

        Args:
            pos: Offset of the ``<`` (already known to be followed by ``!``)

        Returns:
            ConstructMatch for a DocumentTag, or None.
        """
        source = self._source
        name_start = pos + 2
        name_end = self._scan_word(name_start)
        if name_end == name_start:
            return None
        name = source[name_start:name_end]

        text_start = self._skip_space(name_end)
        if text_start < self._source_len and source[text_start] == ">":
            return ConstructMatch(DocumentTag, text_start + 1, {"name": name, "text": ""})
        if text_start == name_end:
            # Name must be separated from text by whitespace
            return None

        close = self._find(">", text_start)
        if close == -1:
            return None
        return ConstructMatch(
            DocumentTag,
            close + 1,
            {"name": name, "text": source[text_start:close].rstrip()},
        )
