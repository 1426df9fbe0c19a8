"""Result type shared by the construct matchers."""

from __future__ import annotations

from typing import Any, NamedTuple

from snippetlex.tokens import Token


class ConstructMatch(NamedTuple):
    """A construct recognized at a ``<``.

    Matchers are pure: they never move the scanner. The scanner turns a
    match into a token once the text before it has been emitted.

    Attributes:
        token_cls: Token variant to build
        end: Offset just past the construct
        values: Variant-specific constructor arguments

    """

    token_cls: type[Token]
    end: int
    values: dict[str, Any]
