"""Protocols for snippetlex.

Defines the contract for push-style token consumers.
"""

from __future__ import annotations

from typing import Protocol

from snippetlex.tokens import Token


class TokenListener(Protocol):
    """Callable notified once per token during HTMLLexer.read().

    Called synchronously on the scanning thread, in document order.
    Exceptions raised by the listener stop the scan and propagate to
    the caller of read().

    """

    def __call__(self, token: Token) -> None: ...
