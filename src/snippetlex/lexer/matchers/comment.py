"""Comment matcher mixin."""

from __future__ import annotations

from snippetlex.lexer.charsets import COMMENT_CLOSE, COMMENT_OPEN
from snippetlex.lexer.match import ConstructMatch
from snippetlex.tokens import CommentTag


class CommentMatcherMixin:
    """Mixin matching ``<!-- ... -->``.

    The comment ends at the first ``-->`` after the opener and may span
    lines. ``<!-->`` is not a complete comment: the closer cannot reuse the
    opener's dashes.

    """

    # These will be set by the Scanner class
    _source: str

    def _find(self, needle: str, start: int) -> int:
        """Find needle at or after start. Implemented by Scanner."""
        raise NotImplementedError

    def _match_comment(self, pos: int) -> ConstructMatch | None:
        """Try to match a comment starting at pos.

        Args:
            pos: Offset of the ``<``

        Returns:
            ConstructMatch for a CommentTag, or None if there is no opener
            at pos or no closer anywhere after it.
        """
        if not self._source.startswith(COMMENT_OPEN, pos):
            return None
        body_start = pos + len(COMMENT_OPEN)
        close = self._find(COMMENT_CLOSE, body_start)
        if close == -1:
            return None
        return ConstructMatch(
            CommentTag,
            close + len(COMMENT_CLOSE),
            {"text": self._source[body_start:close]},
        )
