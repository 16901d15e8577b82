"""
spawn_manager.py
----------------
Enemy spawning on an irregular, retriggering countdown.

Responsibilities
----------------
- Accumulate simulation time and fire when the countdown elapses.
- Redraw the countdown uniformly on every fire.
- Spawn one enemy per fire while the round still has enemies left,
  creating its sprite and its directory record together.
"""

import random

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import Bounds, EnemySettings, Layers
from car_shoot.entities.entity_types import EntityCategory
from car_shoot.systems.entity_management.enemy_directory import EnemyRecord


class SpawnController:
    """Countdown state for enemy spawning."""

    def __init__(self, archetypes, total: int = EnemySettings.TOTAL_PER_ROUND,
                 interval_range=EnemySettings.SPAWN_INTERVAL_RANGE, rng=None):
        if not archetypes:
            raise ValueError("SpawnController needs at least one archetype")
        self.archetypes = tuple(archetypes)
        self.total = total
        self.interval_range = interval_range
        self.rng = rng or random.Random()

        self.remaining_to_spawn = total
        self.countdown = 0.0  # first tick fires immediately
        self.elapsed = 0.0

    # ===========================================================
    # Timing
    # ===========================================================
    def tick(self, dt: float) -> bool:
        """Advance the countdown. Returns True on the tick it elapses."""
        self.elapsed += dt
        if self.elapsed < self.countdown:
            return False
        self.elapsed = 0.0
        self.countdown = self.rng.uniform(*self.interval_range)
        return True

    def reset(self) -> None:
        """Restore the round's full enemy count."""
        self.remaining_to_spawn = self.total
        self.elapsed = 0.0
        self.countdown = 0.0

    # ===========================================================
    # Spawning
    # ===========================================================
    def spawn(self, engine, directory):
        """
        Spawn one enemy if any remain this round.

        Returns:
            The new EnemyRecord, or None when the round is exhausted.
        """
        if self.remaining_to_spawn <= 0:
            return None

        self.remaining_to_spawn -= 1
        # Counts only decrease within a round, so labels are unique
        label = f"{EnemySettings.LABEL_PREFIX}{self.remaining_to_spawn}"
        archetype = self.rng.choice(self.archetypes)
        y = self.rng.uniform(Bounds.SPAWN_Y_MIN, Bounds.SPAWN_Y_MAX)

        record = directory.add(EnemyRecord(
            label=label,
            health=archetype.health,
            speed=archetype.speed,
            behavior=archetype.behavior,
            archetype=archetype.name,
            anchor_y=y,
        ))
        sprite = engine.sprites.add(label, archetype.preset, EntityCategory.ENEMY,
                                    Bounds.SPAWN_LEFT, y)
        sprite.layer = Layers.ENEMIES
        sprite.collision = True

        DebugLogger.action(
            f"Spawned {label} [{archetype.name}] hp={record.health} at y={y:.0f} "
            f"({self.remaining_to_spawn} left)",
            category="entity_spawn"
        )
        return record


def run_spawn_controller(engine, state) -> None:
    """Tick phase: advance the spawn countdown and spawn on fire."""
    if state.spawner.tick(engine.delta):
        state.spawner.spawn(engine, state.enemies)
