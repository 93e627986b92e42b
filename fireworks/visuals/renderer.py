"""
visuals/renderer.py

A pygame window laid out as a grid of character cells, plus the event source
that turns pygame timers, clicks and window resizes into show events. Frames
are drawn glyph by glyph from a small cache of pre-rendered text surfaces.

Usage:
    r = WindowRenderer(100, 40)
    r.clear()
    r.set_cell(10, 5, "*", Color.RED)
    r.present()
"""

import os
from typing import Dict, Iterator, Optional, Tuple

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
import pygame

from fireworks import config
from fireworks.engine.palette import Color
from fireworks.events import Click, Event, LaunchTick, Quit, Resize, Tick
from fireworks.visuals.surface import GridSurface, SurfaceError

TICK_EVENT = pygame.USEREVENT + 1
LAUNCH_EVENT = pygame.USEREVENT + 2
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class WindowRenderer(GridSurface):
    """Character grid drawn into a resizable pygame window."""

    def __init__(self, cols: int = config.WINDOW_GRID[0], rows: int = config.WINDOW_GRID[1],
                 cell_size: Tuple[int, int] = config.CELL_SIZE, caption: str = "Fireworks"):
        super().__init__(cols, rows)
        self.cell_w, self.cell_h = cell_size
        try:
            pygame.init()
            self._screen = pygame.display.set_mode((cols * self.cell_w, rows * self.cell_h),
                                                   pygame.RESIZABLE)
        except pygame.error as e:
            raise SurfaceError(f"cannot open a window: {e}") from e
        pygame.display.set_caption(caption)
        self._font = pygame.font.SysFont(config.FONT_NAME, self.cell_h)
        self._glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _glyph(self, glyph: str, color: Color) -> pygame.Surface:
        key = (glyph, color)
        surf = self._glyphs.get(key)
        if surf is None:
            surf = self._font.render(glyph, True, color.rgb)
            self._glyphs[key] = surf
        return surf

    def clear(self) -> None:
        self._screen.fill(config.BG_COLOR)

    def _draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        self._screen.blit(self._glyph(glyph, color), (x * self.cell_w, y * self.cell_h))

    def present(self) -> None:
        pygame.display.flip()

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)
        # pygame 2 resizes the display surface itself; pick up the new one
        self._screen = pygame.display.get_surface() or self._screen

    def shutdown(self) -> None:
        pygame.quit()


def translate(event: pygame.event.Event, cell_size: Tuple[int, int]) -> Optional[Event]:
    """Map a pygame event to a show event, or None if it is not one."""
    cell_w, cell_h = cell_size
    if event.type == pygame.QUIT:
        return Quit()
    if event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
        return Quit()
    if event.type == TICK_EVENT:
        return Tick()
    if event.type == LAUNCH_EVENT:
        return LaunchTick()
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        px, py = event.pos
        return Click(px // cell_w, py // cell_h)
    if event.type == pygame.VIDEORESIZE:
        return Resize(event.w // cell_w, event.h // cell_h)
    return None


class WindowEvents:
    """Blocks on pygame's queue; timers post tick and launch events into it."""

    def __init__(self, tick_ms: int = config.TICK_MS, launch_ms: int = config.LAUNCH_MS,
                 cell_size: Tuple[int, int] = config.CELL_SIZE, auto_launch: bool = True):
        self.tick_ms = tick_ms
        self.launch_ms = launch_ms
        self.cell_size = cell_size
        self.auto_launch = auto_launch

    def __iter__(self) -> Iterator[Event]:
        pygame.time.set_timer(TICK_EVENT, self.tick_ms)
        if self.auto_launch:
            pygame.time.set_timer(LAUNCH_EVENT, self.launch_ms)
        try:
            while True:
                event = translate(pygame.event.wait(), self.cell_size)
                if event is not None:
                    yield event
        finally:
            pygame.time.set_timer(TICK_EVENT, 0)
            pygame.time.set_timer(LAUNCH_EVENT, 0)


# End of visuals/renderer.py
