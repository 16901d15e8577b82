"""
power_up_manager.py
-------------------
One area-effect power-up per round.

The controller runs a retriggering countdown with a period drawn per round.
The first time it elapses while armed, a single power-up sprite enters from
the left edge. A projectile touching it wipes out every live enemy.
"""

import random

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import AudioCues, Bounds, Layers, PowerUpSettings
from car_shoot.core.services.event_manager import EnemyDestroyedEvent, PowerUpTriggeredEvent
from car_shoot.entities.entity_types import EntityCategory


class PowerUpController:
    """Armed flag plus countdown for the round's power-up."""

    def __init__(self, countdown_range=PowerUpSettings.COUNTDOWN_RANGE, rng=None):
        self.countdown_range = countdown_range
        self.rng = rng or random.Random()
        self.armed = True
        self.countdown = self.rng.uniform(*countdown_range)
        self.elapsed = 0.0

    def tick(self, dt: float) -> bool:
        """Advance the countdown. True only on the first elapse while armed."""
        self.elapsed += dt
        if self.elapsed < self.countdown:
            return False
        self.elapsed = 0.0
        if not self.armed:
            return False
        self.armed = False
        return True

    def rearm(self) -> None:
        """Arm for a new round with a fresh period."""
        self.armed = True
        self.elapsed = 0.0
        self.countdown = self.rng.uniform(*self.countdown_range)
        DebugLogger.state(f"Power-up re-armed ({self.countdown:.1f}s)", category="power_up")

    def spawn(self, engine):
        y = self.rng.uniform(Bounds.SPAWN_Y_MIN, Bounds.SPAWN_Y_MAX)
        sprite = engine.sprites.add(PowerUpSettings.LABEL, PowerUpSettings.PRESET,
                                    EntityCategory.POWER_UP, Bounds.SPAWN_LEFT, y)
        sprite.layer = Layers.POWER_UP
        sprite.collision = True
        DebugLogger.action(f"Power-up spawned at y={y:.0f}", category="power_up")
        return sprite


def area_kill(engine, state) -> int:
    """
    Destroy every live enemy at once, scoring each.

    Returns:
        Number of enemies destroyed.
    """
    destroyed = 0
    for sprite in engine.sprites.of_category(EntityCategory.ENEMY):
        engine.sprites.remove(sprite.label)
        record = state.enemies.remove(sprite.label)
        state.stats.add_kill()
        state.events.dispatch(EnemyDestroyedEvent(sprite.label, record.archetype, "power_up"))
        destroyed += 1

    engine.audio.play_sfx(*AudioCues.POWER_UP)
    state.events.dispatch(PowerUpTriggeredEvent(destroyed))
    DebugLogger.action(f"Power-up destroyed {destroyed} enemies", category="power_up")
    return destroyed


def run_power_up_controller(engine, state) -> None:
    """Tick phase: spawn the round's power-up once its countdown elapses."""
    if state.round_over:
        return
    if state.power_up.tick(engine.delta):
        state.power_up.spawn(engine)
