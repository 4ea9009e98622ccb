"""Algebraic Data Type (ADT) for slide actions.

An action is one unit of terminal work within a slide:
- PacedText: typewriter output of a value's string form
- PacedStyledText: typewriter output of rich styled text
- WaitForInteraction: block until Enter, Right arrow or Space
- WaitFor: block for a fixed time
- Raw: run a passthrough command verbatim

Every variant implements ``render(terminal, sleeper)``. Sleeping and waiting
happen inside ``raw_mode()`` so keypresses are neither echoed nor
line-buffered, and raw mode is always released afterwards.

Example:
    from termslides import PacedText, PacedStyledText, WaitFor, slide

    slide(
        PacedText("Welcome to ", 0.025),
        PacedStyledText("termslides", 0.05, style="bold"),
        WaitFor(0.5),
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, cast

from loguru import logger
from rich.style import Style
from rich.text import Text

from termslides.commands import Command
from termslides.events import is_qualifying
from termslides.terminal import raw_mode
from termslides.timer import Sleeper, standard_sleep

if TYPE_CHECKING:
    from termslides.terminal import Terminal

__all__ = [
    "Action",
    "PacedText",
    "PacedStyledText",
    "WaitForInteraction",
    "WaitFor",
    "Raw",
    "as_action",
]

type Seconds = float | timedelta

log = logger.bind(component="actions")


def _seconds(value: Seconds, name: str) -> float:
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    if seconds < 0:
        raise ValueError(f"{name} must be non-negative, got {seconds}")
    return seconds


def _pace[T](
    glyphs: Iterable[T],
    emit: Callable[[T], None],
    interval: float,
    terminal: Terminal,
    sleeper: Sleeper,
) -> None:
    for glyph in glyphs:
        emit(glyph)
        terminal.flush()
        with raw_mode(terminal):
            sleeper(interval)


@dataclass(frozen=True, slots=True)
class PacedText:
    """Print ``str(content)`` one character at a time, ``interval`` seconds apart."""

    content: object
    interval: Seconds

    def __post_init__(self) -> None:
        object.__setattr__(self, "interval", _seconds(self.interval, "interval"))

    def render(self, terminal: Terminal, sleeper: Sleeper = standard_sleep) -> None:
        _pace(str(self.content), terminal.write, self.interval, terminal, sleeper)


@dataclass(frozen=True, slots=True)
class PacedStyledText:
    """Print styled text one character at a time.

    Each character is written with the style it has in the original text, so
    a partially typed string always shows the right attributes.

    Attributes:
        content: Rich ``Text``, or a plain string styled with ``style``.
        interval: Delay after each character.
        style: Extra style applied over the whole content.
    """

    content: Text | str
    interval: Seconds
    style: Style | str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "interval", _seconds(self.interval, "interval"))
        match self.content:
            case str() as plain:
                text = Text(plain, style=self.style or "")
            case Text() as original if self.style is not None:
                text = original.copy()
                text.stylize(self.style)
            case Text() as original:
                text = original
            case other:
                raise TypeError(f"Styled content must be Text or str, got {type(other).__name__}")
        object.__setattr__(self, "content", text)

    @property
    def text(self) -> Text:
        return cast(Text, self.content)

    def glyphs(self) -> Iterator[Text]:
        """One single-character ``Text`` per character, carrying its style."""
        text = self.text
        for offset in range(len(text)):
            yield text[offset : offset + 1]

    def render(self, terminal: Terminal, sleeper: Sleeper = standard_sleep) -> None:
        _pace(self.glyphs(), terminal.write_styled, self.interval, terminal, sleeper)


@dataclass(frozen=True, slots=True)
class WaitForInteraction:
    """Block until Enter, Right arrow or Space is pressed. Other input is ignored."""

    def render(self, terminal: Terminal, sleeper: Sleeper = standard_sleep) -> None:
        terminal.flush()
        with raw_mode(terminal):
            while not is_qualifying(event := terminal.read_event()):
                log.trace("Ignoring input {event}", event=event)


@dataclass(frozen=True, slots=True)
class WaitFor:
    """Block for ``duration`` seconds without output."""

    duration: Seconds

    def __post_init__(self) -> None:
        object.__setattr__(self, "duration", _seconds(self.duration, "duration"))

    def render(self, terminal: Terminal, sleeper: Sleeper = standard_sleep) -> None:
        terminal.flush()
        with raw_mode(terminal):
            sleeper(self.duration)


@dataclass(frozen=True, slots=True)
class Raw:
    """Run a command the engine doesn't define, verbatim."""

    command: Command

    def render(self, terminal: Terminal, sleeper: Sleeper = standard_sleep) -> None:
        self.command.execute(terminal)


type Action = PacedText | PacedStyledText | WaitForInteraction | WaitFor | Raw


def as_action(value: Action | Command) -> Action:
    """Return ``value`` as an action, wrapping bare commands in ``Raw``.

    Raises:
        TypeError: ``value`` is neither an action nor a command.
    """
    match value:
        case PacedText() | PacedStyledText() | WaitForInteraction() | WaitFor() | Raw():
            return value
        case Command():
            return Raw(value)
        case _:
            raise TypeError(f"Not a slide action or command: {value!r}")
