"""
game_state.py
-------------
All mutable game bookkeeping, threaded through every tick.
"""

import random
from enum import Enum

from car_shoot.core.runtime.game_settings import (
    EnemySettings, PlayerSettings, PowerUpSettings, ProjectileSettings, Layers
)
from car_shoot.core.runtime.session_stats import SessionStats
from car_shoot.core.services.event_manager import EventManager
from car_shoot.entities.enemies.enemy_archetypes import load_archetypes
from car_shoot.entities.entity_types import EntityCategory
from car_shoot.systems.entity_management.enemy_directory import EnemyDirectory
from car_shoot.systems.entity_management.projectile_pool import ProjectilePool
from car_shoot.systems.entity_management.spawn_manager import SpawnController
from car_shoot.systems.items.power_up_manager import PowerUpController
from car_shoot.ui.hud_layout import HUD_LABELS, HudLayout


class RoundState(Enum):
    PLAYING = "playing"
    OVER = "over"


class GameState:
    """Durable game-state bookkeeping, one instance per process."""

    def __init__(self, archetypes=None, total_enemies: int = EnemySettings.TOTAL_PER_ROUND,
                 magazine_size: int = ProjectileSettings.MAGAZINE_SIZE,
                 spawn_interval_range=EnemySettings.SPAWN_INTERVAL_RANGE,
                 power_up_countdown_range=PowerUpSettings.COUNTDOWN_RANGE,
                 hud_layout: HudLayout = None, rng=None):
        self.rng = rng or random.Random()
        self.hud = hud_layout or HudLayout.load()
        self.enemies = EnemyDirectory()
        self.projectiles = ProjectilePool(magazine_size)
        self.spawner = SpawnController(
            archetypes or load_archetypes(),
            total=total_enemies,
            interval_range=spawn_interval_range,
            rng=self.rng,
        )
        self.power_up = PowerUpController(power_up_countdown_range, rng=self.rng)
        self.stats = SessionStats()
        self.events = EventManager()
        self.round_state = RoundState.PLAYING

    @property
    def round_over(self) -> bool:
        return self.round_state is RoundState.OVER


def setup_scene(engine, layout: HudLayout = None) -> None:
    """Create the player sprite and the HUD texts the tick keeps in sync."""
    layout = layout or HudLayout.load()
    player = engine.sprites.add(PlayerSettings.LABEL, PlayerSettings.PRESET,
                                EntityCategory.PLAYER, 0.0, PlayerSettings.Y)
    player.rotation = PlayerSettings.ROTATION
    player.scale = PlayerSettings.SCALE
    player.layer = Layers.PLAYER

    for label in HUD_LABELS:
        spec = layout[label]
        engine.texts.add(label, spec.render(0), spec.position, spec.font_size)
