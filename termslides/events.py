"""Algebraic Data Type (ADT) for terminal input events.

Raw bytes read from the terminal are decoded into:
- KeyEvent: a recognized key, with a KeyCode and, for CHAR, the character
- UnknownEvent: an escape sequence nothing here understands

Use pattern matching to handle events in consumers:

    match event:
        case KeyEvent(code=KeyCode.ENTER | KeyCode.RIGHT):
            advance()
        case KeyEvent(code=KeyCode.CHAR, char="q"):
            quit()
        case UnknownEvent():
            pass
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

ESC = 0x1B
_CSI_FINAL = range(0x40, 0x7F)


class KeyCode(Enum):
    ENTER = auto()
    RIGHT = auto()
    LEFT = auto()
    UP = auto()
    DOWN = auto()
    ESC = auto()
    BACKSPACE = auto()
    TAB = auto()
    CHAR = auto()


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A key press."""

    code: KeyCode
    char: str | None = None
    ctrl: bool = False


@dataclass(frozen=True, slots=True)
class UnknownEvent:
    """Input that could not be mapped to a key."""

    data: bytes


type InputEvent = KeyEvent | UnknownEvent


_ARROWS: dict[int, KeyCode] = {
    ord("A"): KeyCode.UP,
    ord("B"): KeyCode.DOWN,
    ord("C"): KeyCode.RIGHT,
    ord("D"): KeyCode.LEFT,
}

_SINGLE_BYTE: dict[int, KeyCode] = {
    0x0D: KeyCode.ENTER,
    0x0A: KeyCode.ENTER,
    0x7F: KeyCode.BACKSPACE,
    0x08: KeyCode.BACKSPACE,
    0x09: KeyCode.TAB,
}


def is_qualifying(event: InputEvent) -> bool:
    """Whether the event advances a slide (Enter, Right arrow or Space)."""
    match event:
        case KeyEvent(code=KeyCode.ENTER | KeyCode.RIGHT):
            return True
        case KeyEvent(code=KeyCode.CHAR, char=" ", ctrl=False):
            return True
        case _:
            return False


def _decode_escape(data: bytes, start: int) -> tuple[InputEvent, int]:
    """Decode the sequence starting at the ESC byte; return event and next index."""
    n = len(data)
    if start + 1 >= n:
        return KeyEvent(KeyCode.ESC), start + 1

    introducer = data[start + 1]

    if introducer == ord("O"):
        if start + 2 >= n:
            return UnknownEvent(data[start:]), n
        final = data[start + 2]
        seq = data[start : start + 3]
        if code := _ARROWS.get(final):
            return KeyEvent(code), start + 3
        return UnknownEvent(seq), start + 3

    if introducer == ord("["):
        end = start + 2
        while end < n and data[end] not in _CSI_FINAL:
            end += 1
        if end >= n:
            return UnknownEvent(data[start:]), n
        seq = data[start : end + 1]
        # Modified arrows (e.g. ESC [ 1 ; 5 C) still count as arrows
        if code := _ARROWS.get(data[end]):
            return KeyEvent(code), end + 1
        return UnknownEvent(seq), end + 1

    # ESC followed by something else: a bare escape, the rest is decoded separately
    return KeyEvent(KeyCode.ESC), start + 1


def _decode_text(data: bytes, start: int) -> tuple[list[InputEvent], int]:
    end = start
    while end < len(data) and data[end] >= 0x20 and data[end] != 0x7F:
        end += 1
    text = data[start:end].decode("utf-8", errors="replace")
    return [KeyEvent(KeyCode.CHAR, char) for char in text], end


def decode_input(data: bytes) -> list[InputEvent]:
    """Decode a chunk of raw terminal input into events, in order.

    Args:
        data: Bytes as read from a terminal in raw mode.

    Returns:
        One event per key. A read may carry several keys when the user
        types faster than the reader polls.
    """
    events: list[InputEvent] = []
    i = 0
    while i < len(data):
        byte = data[i]

        if byte == ESC:
            event, i = _decode_escape(data, i)
            events.append(event)
        elif code := _SINGLE_BYTE.get(byte):
            events.append(KeyEvent(code))
            i += 1
        elif byte < 0x20:
            events.append(KeyEvent(KeyCode.CHAR, chr(byte + 0x40).lower(), ctrl=True))
            i += 1
        else:
            chars, i = _decode_text(data, i)
            events.extend(chars)

    return events
