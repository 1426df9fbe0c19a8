"""LexAccumulator — opt-in profiling for snippet scanning.

This module provides accumulated metrics during scanning:
- Total profiling time
- Source length
- Token count
- Number of ``<`` characters that degraded to text

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from snippetlex import lex
    from snippetlex.profiling import profiled_lex

    with profiled_lex() as metrics:
        tokens = lex("<b>Hello</b>")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 12, "token_count": 3, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources scanned.
        token_count: Number of tokens produced.
        degraded_count: Number of ``<`` characters that matched no construct.
        scan_calls: Number of completed scans recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    degraded_count: int = 0
    scan_calls: int = 0

    def record_scan(self, source_length: int, token_count: int, degraded_count: int) -> None:
        """Record a completed scan.

        Args:
            source_length: Length of the source string scanned.
            token_count: Number of tokens emitted.
            degraded_count: Number of unmatched ``<`` characters.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.degraded_count += degraded_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, source_length, token_count, degraded_count,
            scan_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "degraded_count": self.degraded_count,
            "scan_calls": self.scan_calls,
        }


# Module-level ContextVar
_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Context manager for profiled scanning.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator that will be populated by scans.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
