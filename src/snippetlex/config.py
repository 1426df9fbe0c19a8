"""ContextVar-based lexer configuration for snippetlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
An HTMLLexer built without an explicit config reads the context default at
construction time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Explicit config
    lexer = HTMLLexer(config=LexConfig(lowercase_names=True))

    # Context default
    with lex_config_context(LexConfig(lowercase_names=True)):
        tokens = lex("<B>bold</B>")

"""

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from snippetlex.errors import LexerConfigError


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is not part of the config; it is per-call state
    passed to tokenize()/lex()/read().

    Attributes:
        lowercase_names: Fold tag, declaration and attribute names to lower case
        text_transformer: Optional callback applied to the content of each
            Text token. Raw extents are not affected.

    """

    lowercase_names: bool = False
    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.lowercase_names, bool):
            raise LexerConfigError(
                "lowercase_names", f"expected bool, got {type(self.lowercase_names).__name__}"
            )
        if self.text_transformer is not None and not callable(self.text_transformer):
            raise LexerConfigError("text_transformer", "expected a callable or None")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LexConfig":
        """Create LexConfig from a mapping.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Mapping with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from the mapping.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "lowercase_names": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.lowercase_names
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lex_config_context(LexConfig(lowercase_names=True)):
        ...     tokens = lex("<P>hi</P>")
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
