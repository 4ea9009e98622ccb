"""Blocking sleep implementations used for pacing.

Two flavours are available, with identical blocking semantics:

- ``standard``: ``time.sleep``, fine on most platforms
- ``precise``: sleeps most of the interval, then spins on ``time.perf_counter``
  for the remainder. Useful where the OS sleep granularity is coarse
  (notably Windows) and typewriter output runs slower than configured.

Example:
    from termslides.timer import get_sleeper

    sleep = get_sleeper("precise")
    sleep(0.025)
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Literal, Protocol

from termslides.exceptions import ConfigurationError

type TimerKind = Literal["standard", "precise"]

TIMER_KINDS: tuple[str, ...] = ("standard", "precise")
DEFAULT_SPIN_THRESHOLD = 0.002


class Sleeper(Protocol):
    def __call__(self, seconds: float, /) -> None: ...


def standard_sleep(seconds: float, /) -> None:
    if seconds > 0:
        time.sleep(seconds)


@dataclass(frozen=True, slots=True)
class PreciseSleeper:
    """Sleep then busy-wait so the call returns as close to the deadline as possible.

    Attributes:
        spin_threshold: Final stretch of every sleep, in seconds, spent spinning
            instead of sleeping.
    """

    spin_threshold: float = DEFAULT_SPIN_THRESHOLD

    def __call__(self, seconds: float, /) -> None:
        if seconds <= 0:
            return
        deadline = time.perf_counter() + seconds
        if seconds > self.spin_threshold:
            time.sleep(seconds - self.spin_threshold)
        while time.perf_counter() < deadline:
            pass


@dataclass(frozen=True, slots=True)
class ScaledSleeper:
    """Multiply every duration by ``factor`` before delegating."""

    inner: Sleeper
    factor: float = 1.0

    def __call__(self, seconds: float, /) -> None:
        self.inner(seconds * self.factor)


def get_sleeper(kind: str = "standard", *, speed: float = 1.0) -> Sleeper:
    """Return the sleeper for ``kind``.

    Args:
        kind: ``"standard"`` or ``"precise"``.
        speed: Playback speed; durations are divided by it. Must be positive and finite.

    Raises:
        ConfigurationError: Unknown kind, or a speed that is not a positive finite number.
    """
    match kind:
        case "standard":
            sleeper: Sleeper = standard_sleep
        case "precise":
            sleeper = PreciseSleeper()
        case _:
            raise ConfigurationError(
                f"Unknown timer '{kind}'. Valid: {', '.join(TIMER_KINDS)}"
            )

    if not math.isfinite(speed) or speed <= 0:
        raise ConfigurationError(f"Playback speed must be positive and finite, got {speed}")
    if speed != 1.0:
        return ScaledSleeper(sleeper, 1.0 / speed)
    return sleeper
