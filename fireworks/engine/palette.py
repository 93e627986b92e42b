"""
engine/palette.py

The fixed set of colors fireworks are drawn in. Each entry carries the RGB
value used by the window backend; the terminal backend maps entries to curses
color pairs by name.
"""

import enum
import random
from typing import Optional, Tuple


class Color(enum.Enum):
    RED = (230, 50, 50)
    GREEN = (60, 220, 80)
    YELLOW = (240, 220, 60)
    BLUE = (70, 110, 255)
    MAGENTA = (220, 70, 220)
    CYAN = (60, 220, 230)
    WHITE = (240, 240, 240)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.value


PALETTE = tuple(Color)


def random_color(rng: Optional[random.Random] = None) -> Color:
    """Pick a palette entry uniformly."""
    return (rng or random).choice(PALETTE)


# End of engine/palette.py
