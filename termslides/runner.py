"""Slide runner and presentations.

A slide clears the screen, renders its actions strictly in order and then
waits for Enter, Right arrow or Space. The first failing action aborts the
slide; its exception propagates unchanged and nothing after it runs. Output
already on screen is left as-is.

Example:
    from termslides import PacedText, Print, present

    present(
        [PacedText("Hello", 0.05), Print("!")],
        [PacedText("Second slide", 0.02)],
    )
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from loguru import logger

from termslides.actions import Action, WaitForInteraction, as_action
from termslides.commands import Command
from termslides.observability import LogConfig, _setup_logging, _teardown_logging
from termslides.terminal import Terminal, default_terminal
from termslides.timer import Sleeper, standard_sleep

type SlideItem = Action | Command

log = logger.bind(component="runner")

# The terminal (raw-mode flag, output stream) is process-wide; one slide at a time.
_terminal_lock = threading.RLock()


def run_slide(
    actions: Iterable[SlideItem],
    *,
    terminal: Terminal | None = None,
    sleeper: Sleeper = standard_sleep,
) -> None:
    """Show one slide and wait for the user to move on.

    Args:
        actions: Actions to render in order. Bare commands are wrapped in Raw.
        terminal: Terminal to draw on. Defaults to the shared stdout terminal.
        sleeper: Sleep used for pacing and WaitFor.

    Raises:
        TypeError: An item is neither an action nor a command. Raised before
            the screen is cleared.
        TerminalIOError: The terminal failed; the slide stops there.
    """
    steps = [as_action(item) for item in actions]
    term = terminal if terminal is not None else default_terminal()

    with _terminal_lock:
        log.debug("Slide started with {count} actions", count=len(steps))
        term.clear()

        for index, action in enumerate(steps):
            with logger.contextualize(action=index):
                log.trace("Rendering {action}", action=action)
                try:
                    action.render(term, sleeper)
                except Exception as exc:
                    log.error(
                        "Action {index} ({kind}) failed: {error}",
                        index=index,
                        kind=type(action).__name__,
                        error=exc,
                    )
                    raise

        try:
            WaitForInteraction().render(term, sleeper)
        except Exception as exc:
            log.error("Waiting for interaction failed: {error}", error=exc)
            raise

        log.debug("Slide finished")


def slide(
    *actions: SlideItem,
    terminal: Terminal | None = None,
    sleeper: Sleeper = standard_sleep,
) -> None:
    """Variadic form of ``run_slide``.

    Example:
        slide(
            PacedText("Welcome to my presentation on ", 0.025),
            PacedStyledText("command line presentations", 0.05, style="bold"),
            Print("."),
        )
    """
    run_slide(actions, terminal=terminal, sleeper=sleeper)


@dataclass(slots=True)
class Presentation:
    """An ordered deck of slides played one after another.

    Attributes:
        slides: One action sequence per slide.
        terminal: Terminal to draw on. Defaults to the shared stdout terminal.
        sleeper: Sleep used for pacing and WaitFor.
        logging: When set, logging is enabled for the duration of ``play()``.
        name: Label attached to log records.
    """

    slides: Sequence[Sequence[SlideItem]]
    terminal: Terminal | None = None
    sleeper: Sleeper = standard_sleep
    logging: LogConfig | None = None
    name: str = "presentation"

    def __len__(self) -> int:
        return len(self.slides)

    def play(self) -> None:
        """Show every slide in order, stopping at the first failure."""
        handler_ids = _setup_logging(self.logging) if self.logging is not None else []
        try:
            with _terminal_lock, logger.contextualize(presentation=self.name):
                log.info("Playing {count} slides", count=len(self.slides))
                for number, actions in enumerate(self.slides, start=1):
                    with logger.contextualize(slide=number):
                        run_slide(actions, terminal=self.terminal, sleeper=self.sleeper)
                log.info("Presentation finished")
        finally:
            if self.logging is not None:
                _teardown_logging(handler_ids)


def present(
    *slides: Sequence[SlideItem],
    terminal: Terminal | None = None,
    sleeper: Sleeper = standard_sleep,
    logging: LogConfig | None = None,
) -> None:
    """Build a Presentation from ``slides`` and play it."""
    Presentation(list(slides), terminal=terminal, sleeper=sleeper, logging=logging).play()
