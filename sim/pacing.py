"""Wall-clock pacing for live runs. Never touches the logical clock."""

from __future__ import annotations

import time
from typing import Callable

import numpy as np

DEFAULT_LANDING_PAUSE = 0.2  # seconds shown per landing
DEFAULT_WEATHER_PROBABILITY = 0.2
DEFAULT_WEATHER_PAUSE = 6.0
WEATHER_MESSAGE = "Weather delay! ALL flights postponed."


class Pacer:
    """Pauses between steps for display. Base class does nothing."""

    def pause(self, seconds: float) -> None:
        return None


class NullPacer(Pacer):
    pass


class WallClockPacer(Pacer):
    """Sleeps for real; `sleep` is injectable for tests."""

    def __init__(self, sleep: Callable[[float], None] = time.sleep):
        self.sleep = sleep
        self.total_paused = 0.0

    def pause(self, seconds: float) -> None:
        if seconds <= 0:
            return
        self.total_paused += seconds
        self.sleep(seconds)


class WeatherDelay:
    """
    Random weather hold-up shown to the viewer. Draws from its own generator,
    so enabling it cannot change the sequence of scheduling decisions.
    """

    def __init__(
        self,
        probability: float = DEFAULT_WEATHER_PROBABILITY,
        pause_seconds: float = DEFAULT_WEATHER_PAUSE,
        pacer: Pacer | None = None,
        seed: int | None = None,
        announce: Callable[[str], None] | None = None,
    ):
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {probability}")
        self.probability = probability
        self.pause_seconds = pause_seconds
        self.pacer = pacer or NullPacer()
        self.rng = np.random.default_rng(seed)
        self.announce = announce
        self.count = 0

    def maybe_delay(self) -> bool:
        if self.rng.random() >= self.probability:
            return False
        self.count += 1
        if self.announce is not None:
            self.announce(WEATHER_MESSAGE)
        self.pacer.pause(self.pause_seconds)
        return True
