"""
movement.py
-----------
Per-tick motion and out-of-bounds cleanup.

Projectiles climb, enemies drive right (sinusoidal ones also weave
vertically), the power-up drifts right. Anything past the top or right edge
is destroyed and its bookkeeping released before later phases look at it.
"""

import math

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import (
    Bounds, EnemySettings, PowerUpSettings, ProjectileSettings
)
from car_shoot.entities.entity_types import Behavior, EntityCategory


def move_entities(engine, state) -> None:
    """Tick phase: advance projectiles, enemies and the power-up."""
    dt = engine.delta

    for marble in engine.sprites.of_category(EntityCategory.PROJECTILE):
        marble.translation.y += ProjectileSettings.SPEED * dt

    for car in engine.sprites.of_category(EntityCategory.ENEMY):
        record = state.enemies.get(car.label)
        car.translation.x += record.speed * dt
        if record.behavior is Behavior.SINUSOIDAL:
            car.translation.y = record.anchor_y + EnemySettings.SINE_AMPLITUDE * math.sin(
                EnemySettings.SINE_FREQUENCY * engine.time_since_startup
            )

    for power_up in engine.sprites.of_category(EntityCategory.POWER_UP):
        power_up.translation.x += PowerUpSettings.SPEED * dt


def is_out_of_bounds(sprite) -> bool:
    return sprite.translation.y > Bounds.CULL_TOP or sprite.translation.x > Bounds.CULL_RIGHT


def cull_out_of_bounds(engine, state) -> list:
    """
    Tick phase: destroy sprites that left the playfield.

    Returns:
        Labels removed this tick.
    """
    culled = [
        sprite for sprite in engine.sprites.values()
        if sprite.category is not EntityCategory.PLAYER and is_out_of_bounds(sprite)
    ]

    for sprite in culled:
        engine.sprites.remove(sprite.label)
        if sprite.category is EntityCategory.PROJECTILE:
            state.projectiles.release(sprite.label)
        elif sprite.category is EntityCategory.ENEMY:
            state.enemies.remove(sprite.label)
            DebugLogger.state(f"{sprite.label} escaped", category="entity_cleanup")

    return [sprite.label for sprite in culled]
