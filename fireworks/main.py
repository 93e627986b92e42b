"""
main.py

Command-line entry point for the fireworks show. Rockets launch on a timer
and on mouse clicks, explode into bursts and fade. Runs in the terminal with
curses, in a pygame window, or headless.

Quit with q, Escape or Ctrl-C.
"""

import argparse
import curses
import logging
import random
import signal
import sys
from typing import List, Optional

from fireworks import config
from fireworks.config import FireworksConfig
from fireworks.driver import Driver
from fireworks.engine.simulation import Simulation
from fireworks.events import PacedEvents
from fireworks.visuals.surface import GridSurface, MemorySurface, SurfaceError

logger = logging.getLogger("fireworks")

BACKENDS = ("terminal", "window", "headless")
HEADLESS_GRID = (80, 24)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _interrupt(signum, frame):
    raise KeyboardInterrupt


def _show(surface: GridSurface, events, cfg: FireworksConfig, rng: random.Random) -> int:
    width, height = surface.size()
    sim = Simulation(width, height, cull_offscreen=cfg.cull_offscreen, rng=rng)
    driver = Driver(sim, surface, events, click=cfg.click, max_ticks=cfg.max_ticks)
    try:
        return driver.run()
    except KeyboardInterrupt:
        logger.info("interrupted after %d ticks", sim.ticks)
        return sim.ticks
    finally:
        surface.shutdown()


def _terminal_session(stdscr, cfg: FireworksConfig, rng: random.Random) -> int:
    from fireworks.visuals.terminal import TerminalEvents, TerminalRenderer

    surface = TerminalRenderer(stdscr)
    events = TerminalEvents(stdscr, cfg.tick_ms, cfg.launch_ms, cfg.auto_launch)
    return _show(surface, events, cfg, rng)


def run_terminal(cfg: FireworksConfig, rng: random.Random) -> int:
    if not sys.stdout.isatty():
        raise SurfaceError("standard output is not a terminal")
    try:
        return curses.wrapper(_terminal_session, cfg, rng)
    except curses.error as e:
        raise SurfaceError(f"terminal setup failed: {e}") from e


def run_window(cfg: FireworksConfig, rng: random.Random) -> int:
    from fireworks.visuals.renderer import WindowEvents, WindowRenderer

    cols, rows = cfg.window_grid
    surface = WindowRenderer(cols, rows, cell_size=cfg.cell_size)
    events = WindowEvents(cfg.tick_ms, cfg.launch_ms, cfg.cell_size, cfg.auto_launch)
    return _show(surface, events, cfg, rng)


def run_headless(cfg: FireworksConfig, rng: random.Random) -> int:
    surface = MemorySurface(*HEADLESS_GRID)
    events = PacedEvents(cfg.tick_ms, cfg.launch_ms, cfg.auto_launch)
    ticks = _show(surface, events, cfg, rng)
    print("\n".join(surface.rows()))
    return ticks


RUNNERS = {
    "terminal": run_terminal,
    "window": run_window,
    "headless": run_headless,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fireworks",
        description="Animated fireworks on a character grid. Click to launch, q to quit.",
    )
    parser.add_argument("--backend", choices=BACKENDS, default="terminal",
                        help="where to draw (default: terminal)")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS,
                        help=f"simulation tick in milliseconds (default: {config.TICK_MS})")
    parser.add_argument("--launch-ms", type=int, default=config.LAUNCH_MS,
                        help=f"auto-launch interval in milliseconds (default: {config.LAUNCH_MS})")
    parser.add_argument("--click", choices=config.CLICK_POLICIES, default=config.CLICK_ROCKET,
                        help="what a click does: launch a rocket or burst in place")
    parser.add_argument("--keep-offscreen", action="store_true",
                        help="keep particles that leave the grid until their lifetime ends")
    parser.add_argument("--no-auto-launch", action="store_true",
                        help="only launch rockets on click")
    parser.add_argument("--max-ticks", type=int, default=0,
                        help="stop after this many ticks (default: run until quit)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a repeatable show")
    parser.add_argument("--log-file", default=None, help="write log messages to this file")
    parser.add_argument("--log-level", type=str.upper, default=None, choices=LOG_LEVELS,
                        help="log level (default: DEBUG with --log-file, WARNING otherwise)")
    return parser


def configure_logging(log_file: Optional[str], level: Optional[str]) -> None:
    # The terminal backend owns the screen, so only warnings reach stderr by default
    if level is None:
        level = "DEBUG" if log_file else "WARNING"
    logging.basicConfig(
        filename=log_file,
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def config_from_args(args: argparse.Namespace) -> FireworksConfig:
    return FireworksConfig(
        backend=args.backend,
        tick_ms=args.tick_ms,
        launch_ms=args.launch_ms,
        click=args.click,
        cull_offscreen=not args.keep_offscreen,
        auto_launch=not args.no_auto_launch,
        max_ticks=args.max_ticks,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    signal.signal(signal.SIGTERM, _interrupt)
    rng = random.Random(cfg.seed)
    logger.info("starting %s show (tick %d ms, launch %d ms, click=%s)",
                cfg.backend, cfg.tick_ms, cfg.launch_ms, cfg.click)
    try:
        RUNNERS[cfg.backend](cfg, rng)
    except SurfaceError as e:
        logger.error("cannot start the %s backend: %s", cfg.backend, e)
        # without a log file, stderr already carries the record unless ERROR is filtered out
        if args.log_file or not logger.isEnabledFor(logging.ERROR):
            print(f"fireworks: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())


# End of main.py
