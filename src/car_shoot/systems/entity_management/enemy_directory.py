"""
enemy_directory.py
------------------
Durable bookkeeping for live enemies.

The sprite registry only knows where a car is drawn. Health, speed and
movement behavior live here, keyed by the same label. Every ENEMY sprite has
exactly one record and every record has exactly one ENEMY sprite.
"""

from dataclasses import dataclass

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.debug.invariants import violation
from car_shoot.entities.entity_types import Behavior


@dataclass
class EnemyRecord:
    label: str
    health: int
    speed: float
    behavior: Behavior
    archetype: str = ""
    anchor_y: float = 0.0  # height the sinusoidal weave oscillates around

    def take_hit(self) -> bool:
        """Lose one health. Returns True when the enemy is destroyed."""
        if self.health > 0:
            self.health -= 1
        return self.health == 0


class EnemyDirectory:
    """Ordered collection of EnemyRecords keyed by label."""

    def __init__(self):
        self._records = {}

    def add(self, record: EnemyRecord) -> EnemyRecord:
        if record.label in self._records:
            raise violation(f"Enemy '{record.label}' already in directory", category="entity_spawn")
        self._records[record.label] = record
        return record

    def get(self, label: str) -> EnemyRecord:
        try:
            return self._records[label]
        except KeyError:
            raise violation(f"No enemy record for '{label}'") from None

    def remove(self, label: str) -> EnemyRecord:
        try:
            record = self._records.pop(label)
        except KeyError:
            raise violation(f"Cannot remove missing enemy record '{label}'", category="entity_cleanup") from None
        DebugLogger.trace(f"Enemy record '{label}' removed", category="entity_cleanup")
        return record

    def labels(self) -> list:
        return list(self._records)

    def verify_against(self, sprite_labels) -> None:
        """Check the record/sprite bijection against live ENEMY sprite labels."""
        sprites = set(sprite_labels)
        records = set(self._records)
        if sprites != records:
            raise violation(
                f"Enemy directory out of sync: sprites without record {sorted(sprites - records)}, "
                f"records without sprite {sorted(records - sprites)}",
                category="game_state"
            )

    def __contains__(self, label) -> bool:
        return label in self._records

    def __len__(self) -> int:
        return len(self._records)
