"""
test_input_manager.py
---------------------
Unit tests for pygame event classification into FrameInput.
"""

import pygame
import pytest

from car_shoot.core.services.input_manager import InputManager, screen_to_world


@pytest.mark.parametrize("screen, world", [
    ((640, 360), (0.0, 0.0)),
    ((0, 0), (-640.0, 360.0)),
    ((1280, 720), (640.0, -360.0)),
])
def test_screen_to_world(screen, world):
    assert screen_to_world(screen, 1280, 720) == world


def test_left_click_is_a_fire_edge():
    manager = InputManager()
    manager.process_events([pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(740, 360))])

    frame_input = manager.consume()

    assert frame_input.fire_pressed is True
    assert frame_input.pointer == (100.0, 0.0)
    assert manager.consume().fire_pressed is False


def test_right_click_does_not_fire():
    manager = InputManager()
    manager.process_events([pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0))])

    assert manager.consume().fire_pressed is False


def test_pointer_persists_until_window_left():
    manager = InputManager()
    manager.process_events([pygame.event.Event(pygame.MOUSEMOTION, pos=(640, 100), rel=(0, 0), buttons=(0, 0, 0))])

    assert manager.consume().pointer == (0.0, 260.0)
    assert manager.consume().pointer == (0.0, 260.0)

    manager.process_events([pygame.event.Event(pygame.WINDOWLEAVE)])
    assert manager.consume().pointer is None


def test_restart_and_quit_keys():
    manager = InputManager()
    manager.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r)])

    assert manager.consume().restart_pressed is True
    assert manager.quit_requested is False

    manager.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)])
    assert manager.quit_requested is True


def test_window_close_requests_quit():
    manager = InputManager()
    manager.process_events([pygame.event.Event(pygame.QUIT)])
    assert manager.quit_requested is True
