"""ContextVar-based lexer configuration for Simian.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config once, when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from simian.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(distinct_increment=True)):
        tokens = list(Lexer("$i++;").tokens())

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Both switches default to off, which gives the language's standard
    token stream.

    Attributes:
        distinct_increment: Lex "++" as OP_INC instead of PLUS
        word_operators: Lex bare "and", "or", "not", "xor" and "x" as their
            operator types instead of IDENTIFIER

    """

    distinct_increment: bool = False
    word_operators: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> LexConfig.from_dict({"word_operators": True, "other": 1}).word_operators
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Only affects the current thread's context.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(word_operators=True)):
        ...     Lexer("x").next_token().type.name
        'OP_REPEAT'

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
