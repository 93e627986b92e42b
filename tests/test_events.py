from itertools import islice

from fireworks.events import IntervalTimer, LaunchTick, PacedEvents, Tick


def test_interval_timer_fires_on_deadline(clock):
    timer = IntervalTimer(250, clock)
    assert not timer.due()
    assert timer.remaining() == 0.25
    clock.sleep(0.25)
    assert timer.due()
    assert not timer.due()
    assert timer.remaining() == 0.25


def test_late_poll_fires_once_and_reschedules(clock):
    timer = IntervalTimer(125, clock)
    clock.sleep(1.0)
    assert timer.due()
    assert not timer.due()
    assert timer.remaining() == 0.125


def test_paced_events_interleave_tick_and_launch(clock):
    events = PacedEvents(125, 500, clock=clock, sleep=clock.sleep)
    got = list(islice(iter(events), 5))
    assert got == [Tick(), Tick(), Tick(), Tick(), LaunchTick()]
    assert clock.t == 0.5


def test_paced_events_without_auto_launch(clock):
    events = PacedEvents(125, 250, auto_launch=False, clock=clock, sleep=clock.sleep)
    assert list(islice(iter(events), 4)) == [Tick()] * 4
