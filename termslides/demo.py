"""Built-in demo deck, played by ``python -m termslides``."""

from __future__ import annotations

from rich.text import Text

from termslides.actions import PacedStyledText, PacedText, WaitFor, WaitForInteraction
from termslides.commands import Print
from termslides.runner import SlideItem

_LOGO_LINES = (
    r" _                           _ _     _",
    r"| |_ ___ _ __ _ __ ___  ___| (_) __| | ___  ___",
    r"| __/ _ \ '__| '_ ` _ \/ __| | |/ _` |/ _ \/ __|",
    r"| ||  __/ |  | | | | | \__ \ | | (_| |  __/\__ " "\\",
    r" \__\___|_|  |_| |_| |_|___/_|_|\__,_|\___||___/",
)


def _logo() -> str:
    return "\n".join(_LOGO_LINES) + "\n\n"


def _gradient_bar(width: int = 48) -> Text:
    bar = Text()
    for i in range(width):
        hue = int(255 * i / max(width - 1, 1))
        bar.append("█", style=f"rgb({hue},96,{255 - hue})")
    bar.append("\n")
    return bar


def demo_slides() -> list[list[SlideItem]]:
    return [
        [
            PacedText("Introducing...\n\n", 0.1),
            PacedText(_logo(), 0.002),
            PacedText(
                'A small library for "command line presentations".\n',
                0.05,
            ),
            PacedStyledText("(Press enter to go to the next slide.)", 0.01, style="italic"),
        ],
        [
            PacedText(
                "Command line presentations are like the ones you'd make in "
                "Keynote or PowerPoint, except it all runs in a terminal!\n\n"
                "Text is typed out one character at a time, ",
                0.02,
            ),
            PacedStyledText(
                Text.assemble(("styles ", "bold"), ("survive ", "italic cyan"), ("pacing", "underline")),
                0.05,
            ),
            Print(", and you can pause for effect"),
            WaitFor(0.8),
            Print("...\n\n"),
            PacedText("or wait for a keypress before showing the rest:\n", 0.02),
            WaitForInteraction(),
            PacedStyledText(_gradient_bar(), 0.005),
        ],
        [
            PacedText(
                "That bar was drawn one styled glyph at a time.\n\n"
                "Every slide ends by waiting for Enter, Right arrow or Space.",
                0.02,
            ),
        ],
    ]
