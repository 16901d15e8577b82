"""
main_loop.py
------------
pygame frame driver around the simulation.

Responsibilities:
- Initialize pygame, window and audio
- Maintain a fixed timestep update loop
- Feed input edges and collision events into each tick
- Render once per frame
"""

import pygame

from car_shoot.audio.sound_manager import SoundManager
from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.engine import Engine, FrameInput
from car_shoot.core.runtime.game_settings import AudioCues, Display, Physics
from car_shoot.core.runtime.game_state import GameState, setup_scene
from car_shoot.core.services.event_manager import RoundOverEvent
from car_shoot.core.services.input_manager import InputManager
from car_shoot.graphics.draw_manager import DrawManager
from car_shoot.scenes.game.game_logic import game_logic
from car_shoot.systems.collision.collision_detector import CollisionDetector


class MainLoop:
    """Owns the window and runs ticks until quit."""

    def __init__(self):
        DebugLogger.section("Initializing MainLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        DebugLogger.init_entry("Pygame")

        self.sound = SoundManager()
        self.engine = Engine(audio=self.sound)
        self.state = GameState()
        self.input_manager = InputManager()
        self.detector = CollisionDetector()
        self.draw_manager = DrawManager()

        setup_scene(self.engine, self.state.hud)
        self.state.events.subscribe(RoundOverEvent, self._on_round_over)

        self.clock = pygame.time.Clock()
        self.running = True
        DebugLogger.init_entry("Main Loop Runtime")

    def run(self):
        """
        Execute the game loop until quit.

        Uses a fixed timestep with an accumulator. Input edges go to the
        next fixed step only, so one click fires once even when a frame
        runs several steps or none.
        """
        DebugLogger.section("Game Loop")
        self.sound.play_music(*AudioCues.MUSIC)

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            frame_time = min(self.clock.tick(Display.FPS) / 1000.0, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self.input_manager.process_events(pygame.event.get())
            if self.input_manager.quit_requested:
                self.running = False
                break

            # Edges wait for the next step; consume() hands them to one step only
            while accumulator >= fixed_dt:
                self.step(fixed_dt, self.input_manager.consume())
                accumulator -= fixed_dt

            self.draw_manager.draw(self.screen, self.engine)
            pygame.display.flip()

        self.shutdown()

    def step(self, dt: float, frame_input: FrameInput):
        """Detect contacts on the current layout, then run one tick."""
        events = self.detector.detect(self.engine.sprites)
        self.engine.begin_frame(dt, frame_input, events)
        game_logic(self.engine, self.state)

    def _on_round_over(self, event: RoundOverEvent):
        DebugLogger.system(f"Final score {event.score} (best {event.high_score})", category="game_state")

    def shutdown(self):
        self.sound.stop_music()
        pygame.quit()
        DebugLogger.system("Shutdown complete")
