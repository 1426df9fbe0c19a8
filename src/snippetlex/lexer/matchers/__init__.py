"""Construct matchers for the snippetlex scanner.

Each matcher is a mixin that recognizes one construct anchored at a ``<``
and returns a ConstructMatch, or None when the text there does not fit
the construct's grammar. Matchers never move the scanner position.
"""

from snippetlex.lexer.matchers.comment import CommentMatcherMixin
from snippetlex.lexer.matchers.document import DocumentMatcherMixin
from snippetlex.lexer.matchers.tag import TagMatcherMixin

__all__ = [
    "CommentMatcherMixin",
    "DocumentMatcherMixin",
    "TagMatcherMixin",
]
