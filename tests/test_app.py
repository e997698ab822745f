import dataclasses

import pygame
import pytest

from fractview.app import Viewer, main
from fractview.model import FractalState


@pytest.fixture
def viewer():
    return Viewer(FractalState(width=8, height=6, max_iter=10))


def test_arrow_press_and_release(viewer):
    viewer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert viewer.state.keys.up is True
    viewer.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP))
    assert viewer.state.keys.up is False


def test_escape_stops(viewer):
    viewer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert viewer.running is False


def test_quit_stops(viewer):
    viewer.handle_event(pygame.event.Event(pygame.QUIT))
    assert viewer.running is False


def test_other_key_ignored(viewer):
    viewer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert viewer.running is True
    assert viewer.state.keys == type(viewer.state.keys)()


def test_wheel_zooms_in(viewer):
    before = viewer.state.viewport.width
    viewer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(4, 3)))
    assert viewer.state.viewport.width == pytest.approx(before * 0.9)


def test_left_click_does_not_zoom(viewer):
    before = dataclasses.replace(viewer.state.viewport)
    viewer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(4, 3)))
    assert viewer.state.viewport == before


def test_step_pans_and_renders(viewer):
    viewer.state.keys.right = True
    start = viewer.state.viewport.x_min
    width = viewer.state.viewport.width
    viewer.step()
    assert viewer.state.viewport.x_min == pytest.approx(start + width * 0.005)
    assert viewer.state.frame == 1


def test_close_without_window(viewer):
    viewer.close()
    assert viewer.running is False


def test_main_rejects_bad_arguments(capsys):
    assert main(["nope"]) == 1
    assert "mandelbrol" in capsys.readouterr().out


def test_main_rejects_empty_arguments(capsys):
    assert main([]) == 1
    assert "Choose a type" in capsys.readouterr().out