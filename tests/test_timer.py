from __future__ import annotations

import time

import pytest

from termslides.exceptions import ConfigurationError
from termslides.timer import PreciseSleeper, ScaledSleeper, get_sleeper, standard_sleep

pytestmark = [pytest.mark.unit]


class TestGetSleeper:
    def test_standard(self) -> None:
        assert get_sleeper("standard") is standard_sleep

    def test_precise(self) -> None:
        assert isinstance(get_sleeper("precise"), PreciseSleeper)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown timer 'spin'"):
            get_sleeper("spin")

    def test_speed_wraps_in_scaled_sleeper(self) -> None:
        sleeper = get_sleeper("precise", speed=2.0)
        assert isinstance(sleeper, ScaledSleeper)
        assert sleeper.factor == pytest.approx(0.5)

    @pytest.mark.parametrize("speed", [0, -1.5, float("nan"), float("inf")])
    def test_rejects_speed_that_is_not_positive_and_finite(self, speed: float) -> None:
        with pytest.raises(ConfigurationError, match="speed"):
            get_sleeper("standard", speed=speed)


class TestScaledSleeper:
    def test_multiplies_durations(self) -> None:
        calls: list[float] = []
        ScaledSleeper(calls.append, 0.25)(2.0)
        assert calls == [0.5]


class TestBlocking:
    @pytest.mark.parametrize("sleeper", [standard_sleep, PreciseSleeper()])
    def test_blocks_at_least_the_duration(self, sleeper) -> None:
        started = time.perf_counter()
        sleeper(0.02)
        assert time.perf_counter() - started >= 0.02

    @pytest.mark.parametrize("sleeper", [standard_sleep, PreciseSleeper()])
    def test_zero_returns_immediately(self, sleeper) -> None:
        started = time.perf_counter()
        sleeper(0)
        assert time.perf_counter() - started < 0.01
