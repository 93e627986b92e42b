"""
driver.py

The event loop. Consumes events from one source, queues spawn requests until
the next tick, advances the simulation and draws it onto a surface. Only
tick() touches the simulation's entity sets.
"""

from collections import deque
from functools import partial
from typing import Callable, Deque, Iterable
import logging

from fireworks import config
from fireworks.engine.simulation import Simulation
from fireworks.events import Click, Event, LaunchTick, Quit, Resize, Tick
from fireworks.visuals.surface import GridSurface

logger = logging.getLogger(__name__)


class Driver:
    def __init__(self, simulation: Simulation, surface: GridSurface, events: Iterable[Event], *,
                 click: str = config.CLICK_ROCKET, max_ticks: int = 0):
        if click not in config.CLICK_POLICIES:
            raise ValueError(f"unknown click policy {click!r}")
        self.simulation = simulation
        self.surface = surface
        self.events = events
        self.click = click
        self.max_ticks = max_ticks
        self._pending: Deque[Callable[[], object]] = deque()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def handle(self, event: Event) -> bool:
        """Apply one event. Returns False when the loop should stop."""
        if isinstance(event, Tick):
            self.tick()
            return not (self.max_ticks and self.simulation.ticks >= self.max_ticks)
        elif isinstance(event, LaunchTick):
            self._pending.append(self.simulation.random_launch)
        elif isinstance(event, Click):
            if self.click == config.CLICK_BURST:
                self._pending.append(partial(self.simulation.spawn_burst, event.x, event.y))
            else:
                self._pending.append(partial(self.simulation.spawn_rocket, event.x, event.y))
        elif isinstance(event, Resize):
            self.simulation.resize(event.width, event.height)
            self.surface.resize(event.width, event.height)
        elif isinstance(event, Quit):
            return False
        else:
            raise TypeError(f"unhandled event {event!r}")
        return True

    def tick(self) -> None:
        while self._pending:
            self._pending.popleft()()
        self.simulation.advance()
        self.draw()

    def draw(self) -> None:
        s = self.surface
        s.clear()
        for burst in self.simulation.bursts:
            for p in burst:
                x, y = p.cell()
                s.set_cell(x, y, p.glyph, p.color)
        for rocket in self.simulation.rockets:
            head, trail = rocket.cells()
            if trail is not None:
                s.set_cell(trail[0], trail[1], trail[2], rocket.color)
            s.set_cell(head[0], head[1], head[2], rocket.color)
        s.present()

    def run(self) -> int:
        """Run until Quit or max_ticks. Returns the number of ticks run."""
        stream = iter(self.events)
        try:
            for event in stream:
                if not self.handle(event):
                    break
        finally:
            # stops backend timers held by generator sources
            close = getattr(stream, "close", None)
            if close is not None:
                close()
        logger.info("show stopped after %d ticks", self.simulation.ticks)
        return self.simulation.ticks


# End of driver.py
