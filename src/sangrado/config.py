"""ContextVar-based lexer configuration for Sangrado.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from sangrado.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict_indentation=True)):
        tokens = tokenize(source)

    # Or pass it explicitly
    tokens = tokenize(source, config=LexConfig(emit_eof=True))

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Note: source_file is intentionally excluded; it's per-call state,
    not configuration.

    Attributes:
        strict_indentation: Reject indentation whose tabs and spaces are
            inconsistent with the enclosing blocks
        emit_eof: Append a single EOF token after the trailing DEDENTs

    """

    strict_indentation: bool = False
    emit_eof: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"emit_eof": True, "color": "red"})
            >>> config.emit_eof
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

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(emit_eof=True)):
        ...     tokens = tokenize("x = 1")
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
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
