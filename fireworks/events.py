"""
events.py

The closed set of events the driver consumes, the interval timer the
terminal backend uses to bound its input wait, and a paced source for
headless runs.
"""

from dataclasses import dataclass
from typing import Iterator, Union
import time


@dataclass(frozen=True)
class Tick:
    """Advance the simulation and redraw."""


@dataclass(frozen=True)
class LaunchTick:
    """Launch a rocket at a random position."""


@dataclass(frozen=True)
class Click:
    x: int
    y: int


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[Tick, LaunchTick, Click, Resize, Quit]


class IntervalTimer:
    """Fixed-period timer driven by polling.

    due() reports whether the period has elapsed and, if so, schedules the
    next deadline. Missed periods are not replayed; a late poll fires once.
    """

    def __init__(self, interval_ms: int, clock=time.monotonic):
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self._deadline = clock() + self.interval

    def remaining(self) -> float:
        """Seconds until the next deadline, never negative."""
        return max(0.0, self._deadline - self._clock())

    def due(self) -> bool:
        now = self._clock()
        if now < self._deadline:
            return False
        self._deadline += self.interval
        if self._deadline <= now:
            self._deadline = now + self.interval
        return True


class PacedEvents:
    """Tick and launch events in real time with no input, for headless runs."""

    def __init__(self, tick_ms: int, launch_ms: int, auto_launch: bool = True,
                 clock=time.monotonic, sleep=time.sleep):
        self.tick_ms = tick_ms
        self.launch_ms = launch_ms
        self.auto_launch = auto_launch
        self._clock = clock
        self._sleep = sleep

    def __iter__(self) -> Iterator[Event]:
        tick = IntervalTimer(self.tick_ms, self._clock)
        launch = IntervalTimer(self.launch_ms, self._clock) if self.auto_launch else None
        while True:
            wait = tick.remaining()
            if launch is not None:
                wait = min(wait, launch.remaining())
            if wait > 0:
                self._sleep(wait)
            if tick.due():
                yield Tick()
            if launch is not None and launch.due():
                yield LaunchTick()


# End of events.py
