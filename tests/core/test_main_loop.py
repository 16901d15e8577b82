"""
test_main_loop.py
-----------------
Frame driver timing: input edges reach exactly one fixed step.
"""

import pygame
import pytest

from car_shoot.core.runtime.main_loop import MainLoop


class FakeClock:
    """Returns scripted frame times in milliseconds."""

    def __init__(self, frame_ms):
        self.frame_ms = list(frame_ms)

    def tick(self, fps=0):
        return self.frame_ms.pop(0) if self.frame_ms else 10


def click(pos=(640, 360)):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


@pytest.fixture
def loop():
    return MainLoop()


@pytest.fixture
def drive(monkeypatch):
    """Run a MainLoop over scripted frames, then quit. Returns the step inputs."""
    def _drive(loop, frame_ms, frame_events):
        frames = list(frame_events)

        def fake_get():
            return frames.pop(0) if frames else [pygame.event.Event(pygame.QUIT)]

        monkeypatch.setattr(pygame.event, "get", fake_get)
        loop.clock = FakeClock(frame_ms)

        step_inputs = []
        original_step = loop.step

        def recording_step(dt, frame_input):
            step_inputs.append(frame_input)
            original_step(dt, frame_input)

        loop.step = recording_step
        loop.run()
        return step_inputs
    return _drive


def test_click_on_a_frame_without_steps_fires_on_the_next_step(loop, drive):
    # 10 ms frames: the first runs no fixed step, the second runs one
    step_inputs = drive(loop, [10, 10, 10], [[click()], [], []])

    assert [i.fire_pressed for i in step_inputs] == [True]
    assert loop.state.projectiles.available == 2


def test_click_reaches_only_the_first_of_several_steps(loop, drive):
    step_inputs = drive(loop, [40], [[click()]])

    assert [i.fire_pressed for i in step_inputs] == [True, False]
    assert loop.state.projectiles.available == 2


def test_pointer_persists_across_steps(loop, drive):
    step_inputs = drive(loop, [40], [[click(pos=(740, 360))]])

    assert [i.pointer for i in step_inputs] == [(100.0, 0.0), (100.0, 0.0)]
    assert loop.engine.sprites.get("player").translation.x == 100.0


def test_restart_edge_survives_idle_frames(loop, drive):
    restart = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r)

    step_inputs = drive(loop, [5, 5, 10], [[restart], [], []])

    assert [i.restart_pressed for i in step_inputs] == [True]
