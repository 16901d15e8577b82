"""
collision_manager.py
--------------------
Resolves the collision events reported for a tick.

Responsibilities
----------------
- Drain `engine.collision_events`, keeping only BEGIN contacts.
- Process pairs that involve at least one projectile.
- Apply per-category outcomes: projectile consumed, enemy damaged or
  destroyed, power-up detonated.
- Skip labels that were already destroyed earlier in the tick, so an enemy
  is never removed or scored twice.
"""

from dataclasses import dataclass
from enum import Enum

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import AudioCues
from car_shoot.core.services.event_manager import EnemyDestroyedEvent
from car_shoot.entities.entity_types import EntityCategory
from car_shoot.systems.items.power_up_manager import area_kill


class CollisionPhase(Enum):
    BEGIN = "begin"
    END = "end"


@dataclass(frozen=True)
class CollisionEvent:
    label_a: str
    label_b: str
    phase: CollisionPhase = CollisionPhase.BEGIN

    @property
    def pair(self) -> tuple:
        return self.label_a, self.label_b


def resolve_collisions(engine, state) -> None:
    """Tick phase: drain and resolve every pending collision event."""
    events = engine.collision_events[:]
    engine.collision_events.clear()
    if not events:
        return

    # Categories as of the start of the drain; a projectile that touched two
    # cars on the same frame still qualifies both pairs after it is consumed.
    categories = {sprite.label: sprite.category for sprite in engine.sprites.values()}

    for event in events:
        if event.phase is not CollisionPhase.BEGIN:
            continue

        pair_categories = [categories.get(label) for label in event.pair]
        if EntityCategory.PROJECTILE not in pair_categories:
            continue

        DebugLogger.trace(f"Contact {event.label_a} <-> {event.label_b}", category="collision")
        for label, category in zip(event.pair, pair_categories):
            _resolve_label(engine, state, label, category)


def _resolve_label(engine, state, label, category) -> None:
    # Every label of a qualifying pair sounds the impact, live or not
    engine.audio.play_sfx(*AudioCues.IMPACT)

    if label not in engine.sprites:
        # Consumed, killed or culled earlier this tick
        DebugLogger.trace(f"{label} already resolved", category="collision")
        return

    if category is EntityCategory.PROJECTILE:
        engine.sprites.remove(label)
        state.projectiles.release(label)

    elif category is EntityCategory.ENEMY:
        record = state.enemies.get(label)
        if not record.take_hit():
            DebugLogger.trace(f"{label} hit, {record.health} health left", category="collision")
            return
        engine.sprites.remove(label)
        state.enemies.remove(label)
        state.stats.add_kill()
        engine.audio.play_sfx(*AudioCues.ENEMY_DESTROY)
        state.events.dispatch(EnemyDestroyedEvent(label, record.archetype, "projectile"))
        DebugLogger.action(f"{label} destroyed, score {state.stats.score}", category="score")

    elif category is EntityCategory.POWER_UP:
        engine.sprites.remove(label)
        area_kill(engine, state)
