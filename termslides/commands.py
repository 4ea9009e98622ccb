"""Passthrough terminal commands.

A command is anything with ``execute(terminal)``. Slides run commands verbatim
through the ``Raw`` action: no pacing, no flush, no raw-mode handling.

Example:
    from termslides import Print, slide

    slide(Print("This appears immediately.\\n"))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.control import Control
from rich.style import Style
from rich.text import Text

if TYPE_CHECKING:
    from termslides.terminal import Terminal

__all__ = [
    "Command",
    "Print",
    "PrintStyled",
    "Clear",
    "MoveTo",
    "ShowCursor",
]


@runtime_checkable
class Command(Protocol):
    """Protocol for a terminal command executed as-is."""

    def execute(self, terminal: Terminal) -> None: ...


@dataclass(frozen=True, slots=True)
class Print:
    """Write the string form of ``content`` at once."""

    content: object

    def execute(self, terminal: Terminal) -> None:
        terminal.write(str(self.content))


@dataclass(frozen=True, slots=True)
class PrintStyled:
    """Write styled content at once."""

    content: Text | str
    style: Style | str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, Text | str):
            raise TypeError(f"Styled content must be Text or str, got {type(self.content).__name__}")

    def execute(self, terminal: Terminal) -> None:
        match self.content:
            case Text() as text if self.style is None:
                terminal.write_styled(text)
            case Text() as text:
                styled = text.copy()
                styled.stylize(self.style)
                terminal.write_styled(styled)
            case str() as plain:
                terminal.write_styled(Text(plain, style=self.style or ""))


@dataclass(frozen=True, slots=True)
class Clear:
    """Clear the screen and home the cursor."""

    def execute(self, terminal: Terminal) -> None:
        terminal.clear()


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Move the cursor to a zero-based column and row."""

    column: int
    row: int

    def execute(self, terminal: Terminal) -> None:
        terminal.write(str(Control.move_to(self.column, self.row)))


@dataclass(frozen=True, slots=True)
class ShowCursor:
    """Show or hide the cursor."""

    visible: bool = True

    def execute(self, terminal: Terminal) -> None:
        terminal.write(str(Control.show_cursor(self.visible)))
