"""
engine/simulation.py

Owns every live rocket and burst and advances them one tick at a time. The
simulation never draws anything; the driver reads rockets and bursts after
each advance() and hands them to a surface.
"""

from typing import Iterator, List, Optional, Tuple
import logging
import random

from fireworks import config
from fireworks.engine.burst import Burst
from fireworks.engine.palette import random_color
from fireworks.engine.particle import Particle
from fireworks.engine.rocket import Rocket, RocketState

logger = logging.getLogger(__name__)


def _clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


class Simulation:
    """Aggregate root for the show.

    Responsibilities:
    - Hold the active rockets and bursts and the grid bounds.
    - Advance everything once per tick and retire what has finished.
    - Spawn rockets and bursts on request from the driver.
    """

    def __init__(self, width: int, height: int, *, cull_offscreen: bool = True,
                 gravity: float = config.GRAVITY, rng: Optional[random.Random] = None):
        self.width = int(width)
        self.height = int(height)
        self.cull_offscreen = cull_offscreen
        self.gravity = gravity
        self.rng = rng or random.Random()
        self.rockets: List[Rocket] = []
        self.bursts: List[Burst] = []
        self.ticks = 0

    @property
    def bottom_row(self) -> int:
        return max(0, self.height - 1)

    def resize(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        logger.debug("grid resized to %dx%d", self.width, self.height)

    def spawn_rocket(self, x: int, target_y: int) -> Optional[Rocket]:
        """Launch a rocket from the bottom row at column x.

        Columns and targets outside the grid are clamped onto it; on a grid
        with no cells the request is dropped.
        """
        if self.width <= 0 or self.height <= 0:
            return None
        x = _clamp(int(x), 0, self.width - 1)
        target_y = _clamp(int(target_y), 0, self.bottom_row)
        rocket = Rocket(x, self.bottom_row, target_y, random_color(self.rng))
        self.rockets.append(rocket)
        logger.debug("launched %r", rocket)
        return rocket

    def spawn_burst(self, x: float, y: float) -> Burst:
        """Explode immediately at (x, y)."""
        burst = Burst.explode(x, y, random_color(self.rng), rng=self.rng)
        self.bursts.append(burst)
        logger.debug("burst of %d at (%s, %s)", len(burst), x, y)
        return burst

    def random_launch(self) -> Optional[Rocket]:
        """Launch a rocket at a random column that explodes in the upper half."""
        if self.width <= 0 or self.height <= 0:
            return None
        margin = config.LAUNCH_MARGIN
        lo, hi = margin, self.width - 1 - margin
        if hi < lo:
            lo, hi = 0, self.width - 1
        x = self.rng.randint(lo, hi)
        top = self.height // 8
        target_y = self.rng.randint(top, max(top, self.height // 2 - 1))
        return self.spawn_rocket(x, target_y)

    def advance(self) -> None:
        """Advance every rocket and burst by one tick."""
        bounds = (self.width, self.height) if self.cull_offscreen else None

        rockets = []
        new_bursts = []
        for rocket in self.rockets:
            if rocket.step() is RocketState.EXPLODED:
                burst = Burst.explode(rocket.x, rocket.y, random_color(self.rng), rng=self.rng)
                new_bursts.append(burst)
                logger.debug("rocket exploded at (%d, %d) into %d particles",
                             rocket.x, rocket.y, len(burst))
            else:
                rockets.append(rocket)

        bursts = []
        for burst in self.bursts:
            burst.step(bounds, self.gravity)
            if burst.is_alive():
                bursts.append(burst)
            else:
                logger.debug("burst retired at age %d", burst.age)

        self.rockets = rockets
        self.bursts = bursts + new_bursts
        self.ticks += 1

    def particles(self) -> Iterator[Particle]:
        for burst in self.bursts:
            yield from burst

    def is_empty(self) -> bool:
        return not self.rockets and not self.bursts

    def counts(self) -> Tuple[int, int, int]:
        """(rockets, bursts, particles) currently alive."""
        return len(self.rockets), len(self.bursts), sum(len(b) for b in self.bursts)


# End of engine/simulation.py
