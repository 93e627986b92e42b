"""
engine/rocket.py

A Rocket climbs one cell per tick from the bottom row to its target altitude.
The tick it finds itself at or above the target it reports EXPLODED and the
simulation swaps it for a Burst.
"""

import enum
from typing import Optional, Tuple

from fireworks import config
from fireworks.engine.palette import Color


class RocketState(enum.Enum):
    ASCENDING = "ascending"
    EXPLODED = "exploded"


class Rocket:
    """A rocket climbing from the bottom row toward target_y."""

    def __init__(self, x: int, y: int, target_y: int, color: Color = Color.WHITE):
        self.x = int(x)
        self.y = int(y)
        self.target_y = int(target_y)
        self.color = color
        self.blink = 0

    @property
    def trail_visible(self) -> bool:
        """Whether the trail glyph is drawn below the rocket this frame."""
        return self.blink % 2 == 1

    def step(self) -> RocketState:
        if self.y > self.target_y:
            self.y -= 1
            self.blink += 1
            return RocketState.ASCENDING
        return RocketState.EXPLODED

    def cells(self) -> Tuple[Tuple[int, int, str], Optional[Tuple[int, int, str]]]:
        """Rocket head cell and, when blinking on, the trail cell below it."""
        head = (self.x, self.y, config.ROCKET_GLYPH)
        trail = (self.x, self.y + 1, config.TRAIL_GLYPH) if self.trail_visible else None
        return head, trail

    def __repr__(self) -> str:
        return f"Rocket(x={self.x}, y={self.y}, target_y={self.target_y}, color={self.color.name})"


# End of engine/rocket.py
