import pytest

from fireworks import config
from fireworks.driver import Driver
from fireworks.engine.simulation import Simulation
from fireworks.events import Click, LaunchTick, Quit, Resize, Tick
from fireworks.visuals.surface import MemorySurface


def make_driver(rng, events=(), width=30, height=12, **kwargs):
    sim = Simulation(width, height, rng=rng)
    surface = MemorySurface(width, height)
    return Driver(sim, surface, events, **kwargs), sim, surface


def test_empty_frame_is_blank(rng):
    driver, sim, surface = make_driver(rng)
    driver.draw()
    assert surface.is_blank()
    assert surface.frames_presented == 1
    assert surface.rows() == [" " * 30] * 12


def test_click_waits_for_next_tick(rng):
    driver, sim, surface = make_driver(rng)
    assert driver.handle(Click(5, 3))
    assert sim.rockets == []
    assert driver.pending == 1
    driver.handle(Tick())
    assert driver.pending == 0
    assert len(sim.rockets) == 1


def test_click_launches_rocket_and_draws_it(rng):
    driver, sim, surface = make_driver(rng)
    driver.handle(Click(5, 3))
    driver.handle(Tick())
    rocket = sim.rockets[0]
    assert (rocket.x, rocket.y, rocket.target_y) == (5, 10, 3)
    assert surface.get(5, 10) == (config.ROCKET_GLYPH, rocket.color)
    assert surface.get(5, 11) == (config.TRAIL_GLYPH, rocket.color)


def test_click_bursts_in_place_with_burst_policy(rng):
    driver, sim, surface = make_driver(rng, click=config.CLICK_BURST)
    driver.handle(Click(15, 6))
    driver.handle(Tick())
    assert sim.rockets == []
    assert len(sim.bursts) == 1
    drawn = set(surface.frame)
    for p in sim.bursts[0]:
        assert p.cell() in drawn


def test_launch_tick_queues_one_rocket(rng):
    driver, sim, surface = make_driver(rng)
    driver.handle(LaunchTick())
    assert sim.rockets == []
    driver.handle(Tick())
    assert len(sim.rockets) == 1


def test_click_far_outside_grid_does_not_crash(rng):
    driver, sim, surface = make_driver(rng)
    driver.handle(Click(999, -40))
    for _ in range(100):
        driver.handle(Tick())
    assert sim.rockets == []


def test_resize_updates_simulation_and_surface(rng):
    driver, sim, surface = make_driver(rng)
    driver.handle(Resize(50, 20))
    assert (sim.width, sim.height) == (50, 20)
    assert surface.size() == (50, 20)


def test_run_stops_on_quit(rng):
    events = [Tick(), Tick(), Quit(), Tick()]
    driver, sim, surface = make_driver(rng, events)
    assert driver.run() == 2
    assert surface.frames_presented == 2


def test_run_stops_after_max_ticks(rng):
    events = iter([Tick()] * 10)
    driver, sim, surface = make_driver(rng, events, max_ticks=4)
    assert driver.run() == 4
    assert len(list(events)) == 6


def test_run_closes_generator_sources(rng):
    closed = []

    def source():
        try:
            while True:
                yield Tick()
        finally:
            closed.append(True)

    driver, sim, surface = make_driver(rng, source(), max_ticks=3)
    driver.run()
    assert closed == [True]


def test_unknown_event_is_rejected(rng):
    driver, sim, surface = make_driver(rng)
    with pytest.raises(TypeError):
        driver.handle("tick")


def test_unknown_click_policy_is_rejected(rng):
    with pytest.raises(ValueError):
        make_driver(rng, click="fountain")


def test_full_show_runs_dry(rng):
    events = [LaunchTick(), Click(3, 2), Click(20, 4)] + [Tick()] * 120
    driver, sim, surface = make_driver(rng, events)
    assert driver.run() == 120
    assert sim.is_empty()
    assert surface.is_blank()
