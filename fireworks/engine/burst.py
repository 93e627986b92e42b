"""
engine/burst.py

A Burst is the group of particles thrown out by one explosion. It steps its
particles, drops the dead ones and decides when the whole group is finished.
"""

from typing import Iterator, List, Optional, Tuple
import random

from fireworks import config
from fireworks.engine.palette import Color
from fireworks.engine.particle import Particle, spawn_burst_particles

Bounds = Tuple[int, int]  # (width, height) in cells


class Burst:
    """Particles from one explosion, aging together.

    When bounds are passed to step(), particles whose cell falls outside the
    grid are dropped on the same tick. Without bounds they are kept until
    their lifetime runs out and the surface clips them.
    """

    def __init__(self, particles: List[Particle], color: Color, *,
                 max_age: int = config.BURST_MAX_AGE, grace: int = config.BURST_GRACE):
        self.particles = particles
        self.color = color
        self.age = 0
        self.max_age = max_age
        self.grace = grace

    @classmethod
    def explode(cls, x: float, y: float, color: Color, count: Optional[int] = None,
                rng: Optional[random.Random] = None) -> "Burst":
        return cls(spawn_burst_particles((x, y), color, count, rng), color)

    def step(self, bounds: Optional[Bounds] = None, gravity: float = config.GRAVITY) -> None:
        survivors = []
        for p in self.particles:
            p.step(gravity)
            if not p.is_alive():
                continue
            if bounds is not None:
                cx, cy = p.cell()
                if not (0 <= cx < bounds[0] and 0 <= cy < bounds[1]):
                    continue
            survivors.append(p)
        self.particles = survivors
        self.age += 1

    def is_alive(self) -> bool:
        if self.age >= self.max_age:
            return False
        # A burst can start empty if the count range ever allows zero
        if self.age > self.grace and not self.particles:
            return False
        return True

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)


# End of engine/burst.py
