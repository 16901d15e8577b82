"""
entity_registry.py
------------------
Label-keyed store of live sprites.

Responsibilities
----------------
- Create sprites under unique labels and hand them back for mutation.
- Look up and remove sprites by label; a miss is a broken invariant.
- List live labels per EntityCategory.
"""

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.debug.invariants import violation
from car_shoot.entities.entity_types import EntityCategory
from car_shoot.entities.sprite import Sprite


class SpriteRegistry:
    """Mapping from label to Sprite. Insertion ordered."""

    def __init__(self):
        self._sprites = {}

    # ===========================================================
    # Creation / Removal
    # ===========================================================
    def add(self, label: str, preset: str, category: EntityCategory,
            x: float = 0.0, y: float = 0.0) -> Sprite:
        """Create and register a sprite. Duplicate labels are fatal."""
        if label in self._sprites:
            raise violation(f"Sprite label '{label}' already registered", category="entity_spawn")

        sprite = Sprite(label, preset, category, x, y)
        self._sprites[label] = sprite
        DebugLogger.trace(f"Added {sprite!r}", category="entity_spawn")
        return sprite

    def remove(self, label: str) -> Sprite:
        """Remove and return a sprite. A missing label is fatal."""
        try:
            sprite = self._sprites.pop(label)
        except KeyError:
            raise violation(f"Cannot remove unknown sprite '{label}'", category="entity_cleanup") from None
        DebugLogger.trace(f"Removed {sprite!r}", category="entity_cleanup")
        return sprite

    # ===========================================================
    # Queries
    # ===========================================================
    def get(self, label: str) -> Sprite:
        try:
            return self._sprites[label]
        except KeyError:
            raise violation(f"Unknown sprite '{label}'") from None

    def labels(self, category: EntityCategory = None) -> list:
        """Live labels, optionally filtered by category."""
        if category is None:
            return list(self._sprites)
        return [label for label, s in self._sprites.items() if s.category is category]

    def of_category(self, category: EntityCategory) -> list:
        return [s for s in self._sprites.values() if s.category is category]

    def values(self):
        return self._sprites.values()

    def __contains__(self, label) -> bool:
        return label in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)
