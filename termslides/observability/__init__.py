"""Observability for termslides: loguru-based logging, off unless configured."""

from .logging import LOG_LEVELS, LogConfig, LogLevel, _setup_logging, _teardown_logging

__all__ = [
    "LOG_LEVELS",
    "LogConfig",
    "LogLevel",
    "_setup_logging",
    "_teardown_logging",
]
