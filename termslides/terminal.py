"""Terminal control service.

The slide engine never touches stdout or termios directly; it goes through a
``Terminal`` handle. ``ConsoleTerminal`` is the real implementation:

- output through a ``rich.console.Console`` (styled characters included)
- raw mode via ``termios``/``tty`` on the input file descriptor
- blocking key reads decoded into ``termslides.events`` values

Raw mode is shared device state. ``raw_mode()`` scopes it: enabled on entry
when it isn't already, disabled on exit when it is, on every exit path.

Example:
    from termslides.terminal import ConsoleTerminal, raw_mode

    terminal = ConsoleTerminal()
    with raw_mode(terminal):
        event = terminal.read_event()
"""

from __future__ import annotations

import functools
import os
import sys
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from types import ModuleType
from typing import Any, Protocol

from loguru import logger
from rich.console import Console
from rich.text import Text

from termslides.events import InputEvent, decode_input
from termslides.exceptions import TerminalIOError

READ_CHUNK = 64

log = logger.bind(component="terminal")


class Terminal(Protocol):
    """Operations the slide engine needs from a terminal.

    Every method may raise ``TerminalIOError``.
    """

    def clear(self) -> None: ...
    def write(self, text: str) -> None: ...
    def write_styled(self, text: Text) -> None: ...
    def flush(self) -> None: ...
    def is_raw_mode_enabled(self) -> bool: ...
    def enable_raw_mode(self) -> None: ...
    def disable_raw_mode(self) -> None: ...
    def read_event(self) -> InputEvent: ...


@contextmanager
def raw_mode(terminal: Terminal) -> Iterator[None]:
    """Hold raw mode for the duration of the block.

    Query-then-toggle on both ends, so nested or back-to-back uses don't
    issue redundant mode switches. Raw mode is released even when the block
    raises.
    """
    if not terminal.is_raw_mode_enabled():
        terminal.enable_raw_mode()
    try:
        yield
    finally:
        if terminal.is_raw_mode_enabled():
            terminal.disable_raw_mode()


def _termios(operation: str) -> tuple[ModuleType, ModuleType]:
    try:
        import termios
        import tty
    except ImportError as exc:
        raise TerminalIOError(operation, "raw mode requires a POSIX terminal") from exc
    return termios, tty


class ConsoleTerminal:
    """Terminal backed by a rich Console for output and a tty fd for input.

    Args:
        console: Output console. Defaults to a console on stdout.
        input_fd: File descriptor to read keys from and put in raw mode.
            Defaults to stdin.
    """

    def __init__(self, console: Console | None = None, input_fd: int | None = None) -> None:
        self._console = console or Console(highlight=False)
        self._input_fd = input_fd
        self._saved_attrs: list[Any] | None = None
        self._pending: deque[InputEvent] = deque()

    @property
    def console(self) -> Console:
        return self._console

    def _fd(self, operation: str) -> int:
        if self._input_fd is not None:
            return self._input_fd
        try:
            return sys.stdin.fileno()
        except (AttributeError, ValueError, OSError) as exc:
            raise TerminalIOError(operation, "stdin has no file descriptor") from exc

    # --- Output ---

    def clear(self) -> None:
        try:
            self._console.clear(home=True)
        except (OSError, UnicodeError) as exc:
            raise TerminalIOError("clear", str(exc)) from exc

    def write(self, text: str) -> None:
        try:
            self._console.file.write(text)
        except (OSError, UnicodeError) as exc:
            raise TerminalIOError("write", str(exc)) from exc

    def write_styled(self, text: Text) -> None:
        try:
            self._console.print(text, end="", soft_wrap=True, highlight=False)
        except (OSError, UnicodeError) as exc:
            raise TerminalIOError("write", str(exc)) from exc

    def flush(self) -> None:
        try:
            self._console.file.flush()
        except (OSError, UnicodeError) as exc:
            raise TerminalIOError("flush", str(exc)) from exc

    # --- Raw mode ---

    def is_raw_mode_enabled(self) -> bool:
        return self._saved_attrs is not None

    def enable_raw_mode(self) -> None:
        termios, tty = _termios("enable raw mode")
        fd = self._fd("enable raw mode")
        try:
            saved = termios.tcgetattr(fd)
            tty.setraw(fd, termios.TCSANOW)
        except (OSError, termios.error) as exc:
            raise TerminalIOError("enable raw mode", str(exc)) from exc
        self._saved_attrs = saved
        log.trace("Raw mode enabled on fd {fd}", fd=fd)

    def disable_raw_mode(self) -> None:
        if self._saved_attrs is None:
            return
        termios, _ = _termios("disable raw mode")
        fd = self._fd("disable raw mode")
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_attrs)
        except (OSError, termios.error) as exc:
            raise TerminalIOError("disable raw mode", str(exc)) from exc
        self._saved_attrs = None
        log.trace("Raw mode disabled on fd {fd}", fd=fd)

    # --- Input ---

    def read_event(self) -> InputEvent:
        """Block until the next input event is available."""
        while not self._pending:
            fd = self._fd("read")
            try:
                data = os.read(fd, READ_CHUNK)
            except OSError as exc:
                raise TerminalIOError("read", str(exc)) from exc
            if not data:
                raise TerminalIOError("read", "end of input")
            self._pending.extend(decode_input(data))
        return self._pending.popleft()


@functools.cache
def default_terminal() -> ConsoleTerminal:
    """Shared terminal on stdout/stdin, so raw-mode state has a single owner."""
    return ConsoleTerminal()
