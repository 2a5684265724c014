import logging
import os
import sys
import contextvars
from typing import Optional

ENV_LOG_LEVEL = "WRAPPED_DEFAULTS_LOG_LEVEL"
ROOT_LOGGER_NAME = "wrapped_defaults"

# Context variable carrying the defaults key being read or written
_KEY: contextvars.ContextVar[str] = contextvars.ContextVar("defaults_key", default="-")


class _KeyFilter(logging.Filter):
    """Logging filter that injects the current defaults key from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.defaults_key = _KEY.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | key=%(defaults_key)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _resolve_level(level: Optional[str]) -> int:
    level = level or os.environ.get(ENV_LOG_LEVEL, "WARNING")
    return getattr(logging, level.upper(), logging.WARNING)


def configure_package_logger(level: Optional[str] = None) -> None:
    """
    Configure the wrapped_defaults logger.

    Only the package namespace is touched; the root logger and its handlers are
    left to the host application. The level comes from ``level`` or the
    WRAPPED_DEFAULTS_LOG_LEVEL environment variable (default WARNING).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(_resolve_level(level))

    for h in package_logger.handlers:
        if any(isinstance(f, _KeyFilter) for f in h.filters):
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_KeyFilter())
    package_logger.addHandler(handler)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a module-specific logger under the wrapped_defaults namespace."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not package_logger.handlers:
        configure_package_logger()
    return logging.getLogger(name)


def current_key() -> str:
    return _KEY.get()


def push_key(key: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current defaults key in context and return a token for later reset."""
    if not key:
        return None
    return _KEY.set(key)


def reset_key(token: Optional[contextvars.Token]) -> None:
    """Reset the defaults key context using the provided token (if any)."""
    if token is None:
        return
    _KEY.reset(token)
