"""
visuals/terminal.py

curses backend: a surface drawing straight into the terminal and an event
source that waits on keyboard and mouse input with a timeout equal to the
nearest timer deadline, so one thread handles both input and ticks.
"""

import curses
import logging
import math
import time
from typing import Callable, Dict, Iterator, Optional, Tuple

from fireworks import config
from fireworks.engine.palette import Color
from fireworks.events import Click, Event, IntervalTimer, LaunchTick, Quit, Resize, Tick
from fireworks.visuals.surface import GridSurface, SurfaceError

logger = logging.getLogger(__name__)

ESCAPE = 27
QUIT_KEYS = (ord('q'), ord('Q'), ESCAPE)
CLICK_MASK = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED

CURSES_COLORS = {
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.BLUE: curses.COLOR_BLUE,
    Color.MAGENTA: curses.COLOR_MAGENTA,
    Color.CYAN: curses.COLOR_CYAN,
    Color.WHITE: curses.COLOR_WHITE,
}


class TerminalRenderer(GridSurface):
    """Draws the grid with curses. Expects a screen from curses.wrapper."""

    def __init__(self, stdscr):
        height, width = stdscr.getmaxyx()
        if width <= 0 or height <= 0:
            raise SurfaceError(f"terminal reports an unusable size {width}x{height}")
        super().__init__(width, height)
        self._scr = stdscr
        self._attrs: Dict[Color, int] = {c: 0 for c in Color}

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("terminal cannot hide the cursor")
        curses.mousemask(CLICK_MASK)
        curses.mouseinterval(0)

        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
                background = -1
            except curses.error:
                background = curses.COLOR_BLACK
            for i, color in enumerate(Color, start=1):
                curses.init_pair(i, CURSES_COLORS[color], background)
                self._attrs[color] = curses.color_pair(i) | curses.A_BOLD
        logger.info("terminal surface %dx%d, colors=%s", width, height, curses.has_colors())

    def clear(self) -> None:
        self._scr.erase()

    def _draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        try:
            self._scr.addstr(y, x, glyph, self._attrs[color])
        except curses.error:
            # curses draws the bottom-right cell and then fails to advance the cursor
            pass

    def present(self) -> None:
        self._scr.noutrefresh()
        curses.doupdate()

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)
        curses.resize_term(height, width)


def translate_key(ch: int, size: Callable[[], Tuple[int, int]],
                  getmouse: Callable = curses.getmouse) -> Optional[Event]:
    """Map a getch() result to a show event, or None if it is not one.

    size returns the terminal's (width, height); getmouse decodes KEY_MOUSE.
    """
    if ch in QUIT_KEYS:
        return Quit()
    if ch == curses.KEY_RESIZE:
        width, height = size()
        return Resize(width, height)
    if ch == curses.KEY_MOUSE:
        try:
            _, mx, my, _, bstate = getmouse()
        except curses.error:
            return None
        if bstate & CLICK_MASK:
            return Click(mx, my)
    return None


class TerminalEvents:
    """Single-threaded event source multiplexing input with two timers."""

    def __init__(self, stdscr, tick_ms: int = config.TICK_MS, launch_ms: int = config.LAUNCH_MS,
                 auto_launch: bool = True, clock=time.monotonic):
        self._scr = stdscr
        self._clock = clock
        self.tick_ms = tick_ms
        self.launch_ms = launch_ms
        self.auto_launch = auto_launch

    def _size(self) -> Tuple[int, int]:
        height, width = self._scr.getmaxyx()
        return width, height

    def __iter__(self) -> Iterator[Event]:
        tick = IntervalTimer(self.tick_ms, self._clock)
        launch = IntervalTimer(self.launch_ms, self._clock) if self.auto_launch else None
        while True:
            if tick.due():
                yield Tick()
            if launch is not None and launch.due():
                yield LaunchTick()

            wait = tick.remaining()
            if launch is not None:
                wait = min(wait, launch.remaining())
            self._scr.timeout(int(math.ceil(wait * 1000)))
            ch = self._scr.getch()
            if ch == -1:
                continue
            event = translate_key(ch, self._size)
            if event is not None:
                yield event


# End of visuals/terminal.py
