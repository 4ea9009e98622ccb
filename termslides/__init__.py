"""termslides - command line presentations.

A slide is an ordered list of actions rendered in a terminal: text typed out
one character at a time, styled text, pauses and keypress waits. Every slide
ends by waiting for Enter, Right arrow or Space.

Example:

    from rich.text import Text
    from termslides import PacedStyledText, PacedText, Print, slide

    slide(
        PacedText("Welcome to my presentation on ", 0.025),
        PacedStyledText(Text("command line presentations", style="bold"), 0.05),
        Print("."),
    )

    slide(PacedText("...there isn't much content on these slides.", 0.025))
"""

# Logging (imported first so the package logger starts disabled)
from termslides.observability import LogConfig

# Actions (ADT)
from termslides.actions import (
    Action,
    PacedStyledText,
    PacedText,
    Raw,
    WaitFor,
    WaitForInteraction,
    as_action,
)

# Passthrough commands
from termslides.commands import Clear, Command, MoveTo, Print, PrintStyled, ShowCursor

# Configuration
from termslides.config import Settings, load_config, load_settings

# Input events (ADT)
from termslides.events import InputEvent, KeyCode, KeyEvent, UnknownEvent, decode_input, is_qualifying

# Exceptions
from termslides.exceptions import ConfigurationError, TerminalIOError, TermslidesError

# Runner
from termslides.runner import Presentation, present, run_slide, slide

# Terminal
from termslides.terminal import ConsoleTerminal, Terminal, default_terminal, raw_mode

# Timing
from termslides.timer import PreciseSleeper, ScaledSleeper, Sleeper, get_sleeper, standard_sleep

__version__ = "0.1.0"

__all__ = [
    # Actions
    "Action",
    "PacedText",
    "PacedStyledText",
    "WaitForInteraction",
    "WaitFor",
    "Raw",
    "as_action",
    # Commands
    "Command",
    "Print",
    "PrintStyled",
    "Clear",
    "MoveTo",
    "ShowCursor",
    # Runner
    "run_slide",
    "slide",
    "Presentation",
    "present",
    # Terminal
    "Terminal",
    "ConsoleTerminal",
    "default_terminal",
    "raw_mode",
    # Input events
    "InputEvent",
    "KeyCode",
    "KeyEvent",
    "UnknownEvent",
    "decode_input",
    "is_qualifying",
    # Timing
    "Sleeper",
    "standard_sleep",
    "PreciseSleeper",
    "ScaledSleeper",
    "get_sleeper",
    # Configuration
    "Settings",
    "load_config",
    "load_settings",
    "LogConfig",
    # Exceptions
    "TermslidesError",
    "TerminalIOError",
    "ConfigurationError",
]
