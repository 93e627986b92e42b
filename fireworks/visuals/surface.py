"""
visuals/surface.py

The drawing boundary every backend implements: clear, set_cell, present and
size on a grid of character cells. Clipping lives here so backends only ever
see in-bounds cells.

Usage:
    s = MemorySurface(80, 24)
    s.clear()
    s.set_cell(3, 4, "*", Color.RED)
    s.present()
"""

from typing import Dict, List, Optional, Tuple

from fireworks.engine.palette import Color

Cell = Tuple[str, Color]


class SurfaceError(RuntimeError):
    """The drawing surface could not be set up."""


class GridSurface:
    """Base class for character-grid surfaces."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, glyph: str, color: Color) -> None:
        """Draw glyph at (x, y). Cells outside the grid are ignored."""
        if not self.contains(x, y):
            return
        self._draw(x, y, glyph, color)

    def clear(self) -> None:
        raise NotImplementedError

    def present(self) -> None:
        raise NotImplementedError

    def _draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        raise NotImplementedError

    def shutdown(self) -> None:
        pass


class MemorySurface(GridSurface):
    """Surface that keeps frames in memory. Used headless and in tests."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self._pending: Dict[Tuple[int, int], Cell] = {}
        self.frame: Dict[Tuple[int, int], Cell] = {}
        self.frames_presented = 0

    def clear(self) -> None:
        self._pending = {}

    def _draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        self._pending[(x, y)] = (glyph, color)

    def present(self) -> None:
        self.frame = dict(self._pending)
        self.frames_presented += 1

    def get(self, x: int, y: int) -> Optional[Cell]:
        return self.frame.get((x, y))

    def rows(self) -> List[str]:
        """The last presented frame as text, blanks for empty cells."""
        return ["".join(self.frame[(x, y)][0] if (x, y) in self.frame else " "
                        for x in range(self.width))
                for y in range(self.height)]

    def is_blank(self) -> bool:
        return not self.frame


# End of visuals/surface.py
