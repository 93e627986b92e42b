import pytest

from fireworks.engine.palette import Color
from fireworks.visuals.surface import GridSurface, MemorySurface


def test_clear_and_present_give_blank_frame():
    s = MemorySurface(6, 3)
    s.set_cell(1, 1, "*", Color.RED)
    s.present()
    s.clear()
    s.present()
    assert s.is_blank()
    assert s.rows() == ["      "] * 3


def test_cells_show_only_after_present():
    s = MemorySurface(6, 3)
    s.set_cell(2, 0, "o", Color.YELLOW)
    assert s.get(2, 0) is None
    s.present()
    assert s.get(2, 0) == ("o", Color.YELLOW)
    assert s.rows()[0] == "  o   "


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (6, 0), (0, 3), (100, 100)])
def test_out_of_bounds_cells_are_clipped(x, y):
    s = MemorySurface(6, 3)
    s.set_cell(x, y, "x", Color.BLUE)
    s.present()
    assert s.is_blank()


def test_resize_changes_clipping():
    s = MemorySurface(6, 3)
    s.resize(2, 2)
    s.set_cell(4, 1, "+", Color.GREEN)
    s.set_cell(1, 1, "+", Color.GREEN)
    s.present()
    assert s.size() == (2, 2)
    assert list(s.frame) == [(1, 1)]


def test_base_surface_needs_a_backend():
    s = GridSurface(4, 4)
    with pytest.raises(NotImplementedError):
        s.set_cell(0, 0, "*", Color.WHITE)
    s.set_cell(10, 10, "*", Color.WHITE)
