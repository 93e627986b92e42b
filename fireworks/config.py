"""
config.py

Tunable constants for the fireworks show plus the per-run settings object.
The constants are the defaults; FireworksConfig is what the command line
fills in and what the driver and simulation read.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# --- Physics ---------------------------------------------------------------
GRAVITY = 0.1  # cells per tick squared, downward
VERTICAL_SPREAD = 0.5  # bursts are squashed vertically to look round in a terminal
SPEED_RANGE = (1.0, 3.0)  # [low, high)

# --- Bursts ----------------------------------------------------------------
PARTICLE_COUNT_RANGE = (20, 49)  # inclusive
PARTICLE_LIFETIME_RANGE = (10, 29)  # inclusive, in ticks
PARTICLE_GLYPHS = "*+ox."
BURST_MAX_AGE = 60
BURST_GRACE = 10

# --- Rockets ---------------------------------------------------------------
ROCKET_GLYPH = "^"
TRAIL_GLYPH = "|"
LAUNCH_MARGIN = 2  # keep auto launches this many cells from the side edges

# --- Timing ----------------------------------------------------------------
TICK_MS = 80
LAUNCH_MS = 1200

# --- Window backend --------------------------------------------------------
CELL_SIZE = (10, 18)  # pixels per character cell
WINDOW_GRID = (100, 40)  # initial window size in cells
FONT_NAME = "consolas"
BG_COLOR = (0, 0, 0)

# --- Click policies --------------------------------------------------------
CLICK_ROCKET = "rocket"
CLICK_BURST = "burst"
CLICK_POLICIES = (CLICK_ROCKET, CLICK_BURST)


@dataclass
class FireworksConfig:
    """Settings for one run of the show."""
    backend: str = "terminal"
    tick_ms: int = TICK_MS
    launch_ms: int = LAUNCH_MS
    click: str = CLICK_ROCKET
    cull_offscreen: bool = True
    auto_launch: bool = True
    max_ticks: int = 0  # 0 runs until quit
    seed: Optional[int] = None
    cell_size: Tuple[int, int] = CELL_SIZE
    window_grid: Tuple[int, int] = WINDOW_GRID

    def __post_init__(self):
        if self.click not in CLICK_POLICIES:
            raise ValueError(f"unknown click policy {self.click!r}, expected one of {CLICK_POLICIES}")
        if self.tick_ms <= 0 or self.launch_ms <= 0:
            raise ValueError("timer intervals must be positive")


# End of config.py
