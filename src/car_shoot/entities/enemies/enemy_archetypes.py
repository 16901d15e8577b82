"""
enemy_archetypes.py
-------------------
Fixed stat templates for spawned enemies.

Responsibilities
----------------
- Define the built-in archetype table.
- Load archetypes from `enemies.json`, validating required fields.
- Fall back to the built-in table when the file yields nothing usable.
"""

import math
from dataclasses import dataclass

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import EnemySettings
from car_shoot.core.services.config_manager import load_config
from car_shoot.entities.entity_types import Behavior
from car_shoot.entities.sprite_presets import PRESETS


@dataclass(frozen=True)
class EnemyArchetype:
    name: str
    preset: str
    health: int
    speed: float
    behavior: Behavior


DEFAULT_ARCHETYPES = (
    EnemyArchetype("black", "racing_car_black", 2, 200.0, Behavior.LINEAR),
    EnemyArchetype("red", "racing_car_red", 1, 300.0, Behavior.LINEAR),
    EnemyArchetype("blue", "racing_car_blue", 1, 250.0, Behavior.LINEAR),
    EnemyArchetype("green", "racing_car_green", 1, 225.0, Behavior.SINUSOIDAL),
    EnemyArchetype("yellow", "racing_car_yellow", 1, 350.0, Behavior.LINEAR),
)

REQUIRED_FIELDS = ("preset", "health", "speed", "behavior")


def parse_archetype(name: str, data: dict):
    """
    Build an archetype from one config entry.

    Returns:
        EnemyArchetype, or None if the entry is unusable (logged).
    """
    missing = [f for f in REQUIRED_FIELDS if f not in data]
    if missing:
        DebugLogger.warn(f"Archetype '{name}' missing fields: {missing}", category="loading")
        return None

    try:
        behavior = Behavior(str(data["behavior"]).lower())
    except ValueError:
        DebugLogger.warn(
            f"Archetype '{name}' has unknown behavior '{data['behavior']}'",
            category="loading"
        )
        return None

    if data["preset"] not in PRESETS:
        DebugLogger.warn(f"Archetype '{name}' has unknown preset '{data['preset']}'", category="loading")
        return None

    try:
        health = float(data["health"])
        speed = float(data["speed"])
    except (TypeError, ValueError):
        DebugLogger.warn(
            f"Archetype '{name}' has non-numeric health or speed "
            f"({data['health']!r}, {data['speed']!r})",
            category="loading"
        )
        return None

    if not health.is_integer():
        DebugLogger.warn(f"Archetype '{name}' health must be a whole number, got {health}", category="loading")
        return None

    health = int(health)
    if health < 1 or not (0 < speed < math.inf):
        DebugLogger.warn(
            f"Archetype '{name}' needs health >= 1 and speed > 0 (got {health}, {speed})",
            category="loading"
        )
        return None

    return EnemyArchetype(name, data["preset"], health, speed, behavior)


def load_archetypes(config_path: str = EnemySettings.ARCHETYPE_CONFIG) -> tuple:
    """Load the archetype table, falling back to DEFAULT_ARCHETYPES."""
    data = load_config(config_path, default_dict={})

    archetypes = []
    for name, entry in data.items():
        if not isinstance(entry, dict):
            DebugLogger.warn(f"Archetype '{name}' is not an object", category="loading")
            continue
        archetype = parse_archetype(name, entry)
        if archetype is not None:
            archetypes.append(archetype)

    if not archetypes:
        DebugLogger.warn("No usable archetypes in config, using built-in table", category="loading")
        return DEFAULT_ARCHETYPES

    DebugLogger.system(f"Loaded {len(archetypes)} enemy archetype(s)", category="loading")
    return tuple(archetypes)
