from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable
from dataclasses import dataclass, field

import pytest
from rich.text import Text

from termslides.events import InputEvent, KeyCode, KeyEvent
from termslides.exceptions import TerminalIOError

ENTER = KeyEvent(KeyCode.ENTER)


@dataclass
class Journal:
    """Every terminal and sleeper call, in the order it happened."""

    entries: list[tuple[str, object]] = field(default_factory=list)

    def record(self, op: str, arg: object = None) -> None:
        self.entries.append((op, arg))

    def ops(self) -> list[str]:
        return [op for op, _ in self.entries]

    def args(self, op: str) -> list[object]:
        return [arg for name, arg in self.entries if name == op]

    def written(self) -> str:
        parts: list[str] = []
        for op, arg in self.entries:
            if op == "write":
                parts.append(str(arg))
            elif op == "write_styled":
                assert isinstance(arg, Text)
                parts.append(arg.plain)
        return "".join(parts)


class FakeTerminal:
    """In-memory terminal. ``fail_on`` makes the n-th call of an operation raise."""

    def __init__(
        self,
        journal: Journal,
        events: Iterable[InputEvent] = (),
        fail_on: str | None = None,
        fail_at: int = 1,
    ) -> None:
        self.journal = journal
        self.raw = False
        self.events: deque[InputEvent] = deque(events)
        self.fail_on = fail_on
        self.fail_at = fail_at
        self.calls: Counter[str] = Counter()
        self.error: TerminalIOError | None = None

    def feed(self, *events: InputEvent) -> None:
        self.events.extend(events)

    def _op(self, name: str, arg: object = None) -> None:
        self.journal.record(name, arg)
        self.calls[name] += 1
        if name == self.fail_on and self.calls[name] == self.fail_at:
            self.error = TerminalIOError(name, "injected failure")
            raise self.error

    def clear(self) -> None:
        self._op("clear")

    def write(self, text: str) -> None:
        self._op("write", text)

    def write_styled(self, text: Text) -> None:
        self._op("write_styled", text)

    def flush(self) -> None:
        self._op("flush")

    def is_raw_mode_enabled(self) -> bool:
        return self.raw

    def enable_raw_mode(self) -> None:
        self._op("raw_on")
        self.raw = True

    def disable_raw_mode(self) -> None:
        self._op("raw_off")
        self.raw = False

    def read_event(self) -> InputEvent:
        self._op("read")
        if not self.events:
            raise TerminalIOError("read", "end of input")
        return self.events.popleft()


class FakeSleeper:
    def __init__(self, journal: Journal) -> None:
        self.journal = journal

    def __call__(self, seconds: float, /) -> None:
        self.journal.record("sleep", seconds)


@pytest.fixture
def journal() -> Journal:
    return Journal()


@pytest.fixture
def sleeper(journal: Journal) -> FakeSleeper:
    return FakeSleeper(journal)


@pytest.fixture
def terminal(journal: Journal) -> FakeTerminal:
    """A terminal with one Enter press queued, enough for a single slide."""
    return FakeTerminal(journal, events=[ENTER])


@pytest.fixture
def make_terminal(journal: Journal):
    def factory(**kwargs: object) -> FakeTerminal:
        return FakeTerminal(journal, **kwargs)  # type: ignore[arg-type]

    return factory
