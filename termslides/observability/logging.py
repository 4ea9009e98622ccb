"""Logging configuration for termslides.

Structured logging via loguru. Logging is disabled by default (library
behavior) and enabled for the duration of a presentation when a LogConfig is
given, or permanently with ``_setup_logging``.

Console logging is off by default: log lines written to the terminal would
land in the middle of the slides.

Example:
    from termslides import LogConfig, Presentation

    Presentation(
        slides,
        logging=LogConfig(level="DEBUG", file="termslides.log"),
    ).play()
"""

from __future__ import annotations

import sys
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from loguru import logger

logger.disable("termslides")

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVELS: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")

_CONTEXT_KEYS = ("component", "presentation", "slide", "action")


def _format_context(record: Any) -> str:
    extra = record.get("extra", {})
    parts = [f"{k}={extra[k]}" for k in _CONTEXT_KEYS if k in extra]
    return f" [{' '.join(parts)}]" if parts else ""


CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
    "<dim>{extra[_ctx]}</dim> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line}{extra[_ctx]} - {message}"
)


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Logging configuration for a presentation.

    Attributes:
        level: Minimum log level (TRACE, DEBUG, INFO, WARNING, ERROR).
        file: Path to log file. Defaults to .termslides/termslides.log.
            Empty string disables the file sink.
        console: Whether to log to stderr. Defaults to False.
        rotation: File rotation policy (e.g., "10 MB", "1 day").
        retention: Number of old log files to keep.
    """

    level: LogLevel = "INFO"
    file: str = ".termslides/termslides.log"
    console: bool = False
    rotation: str = "10 MB"
    retention: int = 5


def _setup_logging(config: LogConfig) -> list[int]:
    """Add sinks for ``config`` and return handler IDs for cleanup.

    Args:
        config: Logging configuration.

    Returns:
        List of handler IDs that were added (for later removal).
    """
    # Drop loguru's default stderr sink (ID=0); it would write over the slides
    with suppress(ValueError):
        logger.remove(0)

    logger.enable("termslides")
    handler_ids: list[int] = []

    logger.configure(patcher=lambda r: r["extra"].update(_ctx=_format_context(r)))

    if config.console:
        hid = logger.add(
            sys.stderr,
            level=config.level,
            format=CONSOLE_FORMAT,
            colorize=True,
            filter="termslides",
        )
        handler_ids.append(hid)

    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        hid = logger.add(
            config.file,
            level=config.level,
            format=FILE_FORMAT,
            filter="termslides",
            rotation=config.rotation,
            retention=config.retention,
            diagnose=False,
            enqueue=False,
        )
        handler_ids.append(hid)

    return handler_ids


def _teardown_logging(handler_ids: list[int]) -> None:
    """Remove handlers and disable logging.

    Args:
        handler_ids: List of handler IDs to remove.
    """
    for hid in handler_ids:
        logger.remove(hid)
    logger.disable("termslides")
