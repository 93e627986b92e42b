from fireworks import config
from fireworks.engine.palette import Color
from fireworks.engine.rocket import Rocket, RocketState


def test_reaches_target_after_exact_number_of_steps():
    rocket = Rocket(4, 10, 3)
    for expected_y in range(9, 2, -1):
        assert rocket.step() is RocketState.ASCENDING
        assert rocket.y == expected_y
    assert rocket.y <= rocket.target_y
    assert rocket.step() is RocketState.EXPLODED
    assert rocket.y == 3


def test_rocket_at_target_explodes_immediately():
    rocket = Rocket(4, 3, 3)
    assert rocket.step() is RocketState.EXPLODED
    assert rocket.y == 3


def test_trail_blinks_without_touching_altitude():
    rocket = Rocket(4, 20, 0, Color.RED)
    visible = []
    for _ in range(6):
        rocket.step()
        visible.append(rocket.trail_visible)
    assert visible == [True, False, True, False, True, False]
    assert rocket.y == 14
    assert rocket.target_y == 0


def test_cells_put_trail_below_head():
    rocket = Rocket(7, 12, 2)
    rocket.step()
    head, trail = rocket.cells()
    assert head == (7, 11, config.ROCKET_GLYPH)
    assert trail == (7, 12, config.TRAIL_GLYPH)
    rocket.step()
    assert rocket.cells()[1] is None
