"""ContextVar-based configuration for innertext.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The active config seeds ``to_text`` calls that do not pass options
explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Per call
    to_text(node, whitespace="pre")

    # For a whole block of calls
    with text_config_context(TextConfig(whitespace="pre-wrap")):
        to_text(node)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from innertext.errors import ConfigError
from innertext.utils.logger import get_logger
from innertext.whitespace import WhiteSpace

logger = get_logger(__name__)

_WHITESPACE_VALUES: tuple[str, ...] = tuple(member.value for member in WhiteSpace)


def coerce_whitespace(value: WhiteSpace | str) -> WhiteSpace:
    """Turn a ``white-space`` name into a WhiteSpace member.

    Raises:
        ConfigError: If ``value`` is not a supported ``white-space`` value.
    """
    try:
        return WhiteSpace(value)
    except ValueError:
        raise ConfigError("whitespace", value, _WHITESPACE_VALUES) from None


@dataclass(frozen=True, slots=True)
class TextConfig:
    """Immutable text extraction configuration.

    Attributes:
        whitespace: ``white-space`` value assumed for the node passed to
            ``to_text``, as if its parent had computed it. Accepts the
            string names as well as WhiteSpace members.

    """

    whitespace: WhiteSpace = WhiteSpace.NORMAL

    def __post_init__(self) -> None:
        # Frozen: bypass __setattr__ to store the normalized member
        object.__setattr__(self, "whitespace", coerce_whitespace(self.whitespace))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "TextConfig":
        """Create TextConfig from a dictionary.

        Only includes keys that are valid TextConfig fields; unknown keys
        are ignored and logged at DEBUG.

        Example:
            >>> TextConfig.from_dict({"whitespace": "pre", "other": 1}).whitespace
            <WhiteSpace.PRE: 'pre'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        ignored = sorted(str(k) for k in config_dict if k not in valid_fields)
        if ignored:
            logger.debug("Ignoring unknown TextConfig keys: %s", ", ".join(ignored))
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TextConfig = TextConfig()

_text_config: ContextVar[TextConfig] = ContextVar(
    "text_config",
    default=_DEFAULT_CONFIG,
)


def get_text_config() -> TextConfig:
    """Get current text configuration (thread-local)."""
    return _text_config.get()


def set_text_config(config: TextConfig) -> None:
    """Set text configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _text_config.set(config)


def reset_text_config() -> None:
    """Reset to the default configuration."""
    _text_config.set(_DEFAULT_CONFIG)


@contextmanager
def text_config_context(config: TextConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with text_config_context(TextConfig(whitespace="pre")):
        ...     get_text_config().whitespace
        <WhiteSpace.PRE: 'pre'>

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _text_config.set(config)
    try:
        yield
    finally:
        _text_config.reset(token)


__all__ = [
    "TextConfig",
    "coerce_whitespace",
    "get_text_config",
    "set_text_config",
    "reset_text_config",
    "text_config_context",
]
