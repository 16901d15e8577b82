"""
engine.py
---------
Per-frame context handed to the simulation.

The Engine bundles what the runtime owns and the simulation drives: sprites,
texts, the audio sink, this frame's input edges and collision events, and
frame timing. It holds no game rules.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from car_shoot.systems.entity_management.entity_registry import SpriteRegistry
from car_shoot.ui.text_display import TextDisplay


@dataclass
class FrameInput:
    """Input already classified by the runtime for one tick."""
    pointer: Optional[Tuple[float, float]] = None  # world coords, None when off-window
    fire_pressed: bool = False
    restart_pressed: bool = False


class Engine:
    """Runtime-owned state the simulation reads and commands."""

    def __init__(self, audio):
        """
        Args:
            audio: Sink with play_sfx(name, volume) and play_music(name, volume).
        """
        self.sprites = SpriteRegistry()
        self.texts = TextDisplay()
        self.audio = audio
        self.input = FrameInput()
        self.collision_events: List = []
        self.delta = 0.0
        self.time_since_startup = 0.0

    def begin_frame(self, dt: float, frame_input: FrameInput = None, collision_events=None):
        """Load timing, input and contacts for the next tick."""
        self.delta = dt
        self.time_since_startup += dt
        self.input = frame_input or FrameInput()
        if collision_events:
            self.collision_events.extend(collision_events)
