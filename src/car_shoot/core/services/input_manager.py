"""
input_manager.py
----------------
Turns pygame events into the per-tick FrameInput.

Provides:
- Mouse position in world coordinates (None when the pointer left the window)
- Edge detection for fire (left click) and restart (R key)
- Quit requests
"""

import pygame

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.engine import FrameInput
from car_shoot.core.runtime.game_settings import Display


def screen_to_world(pos, width: int = Display.WIDTH, height: int = Display.HEIGHT):
    """Screen pixels (origin top-left, +y down) to world (origin center, +y up)."""
    return pos[0] - width / 2, height / 2 - pos[1]


class InputManager:
    """Collects edges between ticks; `consume()` hands them out once."""

    RESTART_KEYS = (pygame.K_r,)
    FIRE_BUTTON = 1  # left mouse button

    def __init__(self):
        self.quit_requested = False
        self._fire_pressed = False
        self._restart_pressed = False
        self._pointer = None

    def process_events(self, events) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == self.FIRE_BUTTON:
                self._fire_pressed = True
                self._pointer = screen_to_world(event.pos)
            elif event.type == pygame.MOUSEMOTION:
                self._pointer = screen_to_world(event.pos)
            elif event.type == pygame.WINDOWLEAVE:
                self._pointer = None
            elif event.type == pygame.KEYDOWN:
                if event.key in self.RESTART_KEYS:
                    self._restart_pressed = True
                elif event.key == pygame.K_ESCAPE:
                    self.quit_requested = True

    def consume(self) -> FrameInput:
        """Build this tick's input and clear the edges."""
        frame_input = FrameInput(
            pointer=self._pointer,
            fire_pressed=self._fire_pressed,
            restart_pressed=self._restart_pressed,
        )
        if self._fire_pressed or self._restart_pressed:
            DebugLogger.trace(
                f"Edges fire={self._fire_pressed} restart={self._restart_pressed}",
                category="input"
            )
        self._fire_pressed = False
        self._restart_pressed = False
        return frame_input
