"""ContextVar-based configuration for exprcheck.

The only knobs are diagnostic: whether the scanner logs each token it
produces and whether the recognizer logs each nonterminal it enters. Both
are read once when a Scanner or Recognizer is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from exprcheck.config import RecognizerConfig, config_context

    with config_context(RecognizerConfig(trace_tokens=True)):
        recognize("1 + x")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecognizerConfig:
    """Immutable scanner/recognizer configuration.

    Attributes:
        trace_tokens: Log every token produced by the scanner at DEBUG
        trace_rules: Log every nonterminal the recognizer enters at DEBUG

    """

    trace_tokens: bool = False
    trace_rules: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RecognizerConfig":
        """Create RecognizerConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> RecognizerConfig.from_dict({"trace_rules": True, "color": "red"})
            RecognizerConfig(trace_tokens=False, trace_rules=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RecognizerConfig = RecognizerConfig()

_config: ContextVar[RecognizerConfig] = ContextVar(
    "recognizer_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> RecognizerConfig:
    """Get current configuration (thread-local)."""
    return _config.get()


def set_config(config: RecognizerConfig) -> None:
    """Set configuration for current context."""
    _config.set(config)


def reset_config() -> None:
    """Reset to default configuration."""
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: RecognizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(RecognizerConfig(trace_tokens=True)):
        ...     get_config().trace_tokens
        True
        >>> get_config().trace_tokens
        False

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "RecognizerConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
]
