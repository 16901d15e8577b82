"""
player_controller.py
--------------------
Turret tracking and firing.
"""

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import AudioCues, Layers, PlayerSettings, ProjectileSettings
from car_shoot.entities.entity_types import EntityCategory


def update_player(engine, state) -> None:
    """Tick phase: follow the pointer horizontally when it is on the window."""
    player = engine.sprites.get(PlayerSettings.LABEL)
    if engine.input.pointer is not None:
        player.translation.x = engine.input.pointer[0]


def handle_fire(engine, state):
    """
    Tick phase: launch a projectile on a fresh fire press.

    Returns:
        The new projectile sprite, or None if nothing was fired.
    """
    if not engine.input.fire_pressed:
        return None

    label = state.projectiles.acquire()
    if label is None:
        return None

    player_x = engine.sprites.get(PlayerSettings.LABEL).translation.x
    marble = engine.sprites.add(label, ProjectileSettings.PRESET, EntityCategory.PROJECTILE,
                                player_x, ProjectileSettings.LAUNCH_Y)
    marble.layer = Layers.PROJECTILES
    marble.collision = True
    engine.audio.play_sfx(*AudioCues.LAUNCH)
    DebugLogger.trace(f"Fired {label} at x={player_x:.0f}", category="projectile")
    return marble
