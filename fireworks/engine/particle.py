"""
engine/particle.py

A lightweight Particle class for the fireworks simulation. Handles fixed-step
Euler integration, gravity and aging in whole ticks. Particles are created in
batches by spawn_burst_particles and owned by the Burst that made them.
"""

from typing import List, Optional, Tuple
import math
import random

from fireworks import config
from fireworks.engine.palette import Color


def to_cell(v: float) -> int:
    """Round a continuous coordinate to its cell, halves away from zero."""
    return int(math.floor(v + 0.5)) if v >= 0 else -int(math.floor(-v + 0.5))


class Particle:
    """Simple particle with position, velocity, glyph, color and lifetime.

    Attributes:
        x, y: position in cells (sub-cell precision)
        vx, vy: velocity in cells per tick
        glyph: single character drawn at the particle's cell
        color: palette entry shared with the owning burst
        lifetime: ticks remaining before the particle is removed
    """

    __slots__ = ("x", "y", "vx", "vy", "glyph", "color", "lifetime")

    def __init__(self, x: float, y: float, vx: float = 0.0, vy: float = 0.0, *,
                 glyph: str = "*", color: Color = Color.WHITE, lifetime: int = 10):
        self.x = float(x)
        self.y = float(y)
        self.vx = float(vx)
        self.vy = float(vy)
        self.glyph = glyph
        self.color = color
        self.lifetime = int(lifetime)

    def step(self, gravity: float = config.GRAVITY) -> None:
        """Advance the particle by one tick."""
        self.x += self.vx
        self.y += self.vy
        self.vy += gravity
        self.lifetime -= 1

    def is_alive(self) -> bool:
        return self.lifetime > 0

    def cell(self) -> Tuple[int, int]:
        return to_cell(self.x), to_cell(self.y)

    def __repr__(self) -> str:
        return (f"Particle(x={self.x:.2f}, y={self.y:.2f}, vx={self.vx:.2f}, vy={self.vy:.2f}, "
                f"glyph={self.glyph!r}, lifetime={self.lifetime})")


def spawn_burst_particles(center: Tuple[float, float], color: Color, count: Optional[int] = None,
                          rng: Optional[random.Random] = None) -> List[Particle]:
    """Create the particles of one explosion at center.

    All particles share color. Directions are uniform around the circle with
    the vertical component compressed, so bursts read as round on a grid whose
    cells are about twice as tall as they are wide.
    """
    rng = rng or random.Random()
    if count is None:
        count = rng.randint(*config.PARTICLE_COUNT_RANGE)
    cx, cy = center
    lo, hi = config.SPEED_RANGE
    particles = []
    for _ in range(count):
        angle = rng.random() * 2.0 * math.pi
        speed = lo + rng.random() * (hi - lo)
        particles.append(Particle(
            cx, cy,
            speed * math.cos(angle),
            speed * math.sin(angle) * config.VERTICAL_SPREAD,
            glyph=rng.choice(config.PARTICLE_GLYPHS),
            color=color,
            lifetime=rng.randint(*config.PARTICLE_LIFETIME_RANGE),
        ))
    return particles


# End of engine/particle.py
