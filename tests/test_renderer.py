import pygame

from fireworks.events import Click, LaunchTick, Quit, Resize, Tick
from fireworks.visuals.renderer import LAUNCH_EVENT, TICK_EVENT, translate

CELL = (10, 18)


def ev(kind, **attrs):
    return pygame.event.Event(kind, attrs)


def test_window_close_and_quit_keys():
    assert translate(ev(pygame.QUIT), CELL) == Quit()
    assert translate(ev(pygame.KEYDOWN, key=pygame.K_ESCAPE), CELL) == Quit()
    assert translate(ev(pygame.KEYDOWN, key=pygame.K_q), CELL) == Quit()
    assert translate(ev(pygame.KEYDOWN, key=pygame.K_a), CELL) is None


def test_timer_events():
    assert translate(ev(TICK_EVENT), CELL) == Tick()
    assert translate(ev(LAUNCH_EVENT), CELL) == LaunchTick()


def test_left_click_maps_pixels_to_cells():
    assert translate(ev(pygame.MOUSEBUTTONDOWN, pos=(25, 40), button=1), CELL) == Click(2, 2)
    assert translate(ev(pygame.MOUSEBUTTONDOWN, pos=(0, 17), button=1), CELL) == Click(0, 0)
    assert translate(ev(pygame.MOUSEBUTTONDOWN, pos=(25, 40), button=3), CELL) is None


def test_window_resize_maps_to_grid_size():
    assert translate(ev(pygame.VIDEORESIZE, w=205, h=185, size=(205, 185)), CELL) == Resize(20, 10)
