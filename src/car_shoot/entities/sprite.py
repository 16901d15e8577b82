"""
sprite.py
---------
Positioned, optionally collidable game object identified by a unique label.

Coordinate System
-----------------
`translation` is the sprite center in world coordinates (origin at screen
center, +y up). `rotation` is in radians, counter-clockwise, 0 facing right.
"""

import math
import pygame

from car_shoot.entities.entity_types import EntityCategory
from car_shoot.entities.sprite_presets import get_preset


class Sprite:
    """Mutable sprite record owned by the SpriteRegistry."""

    __slots__ = (
        'label', 'category', 'preset',
        'translation', 'rotation', 'scale', 'layer', 'collision',
    )

    def __init__(self, label: str, preset: str, category: EntityCategory,
                 x: float = 0.0, y: float = 0.0):
        get_preset(preset)  # fail fast on typos
        self.label = label
        self.preset = preset
        self.category = category
        self.translation = pygame.Vector2(x, y)
        self.rotation = 0.0
        self.scale = 1.0
        self.layer = 0.0
        self.collision = False

    def collider_size(self) -> tuple:
        """Axis-aligned collider extent after scale and quarter-turn rotation."""
        width, height = get_preset(self.preset).size
        # Only quarter turns are used; swap extents when closer to vertical
        if abs(math.sin(self.rotation)) > abs(math.cos(self.rotation)):
            width, height = height, width
        return width * self.scale, height * self.scale

    def get_rect(self) -> pygame.Rect:
        """World-space collider rect centered on the translation."""
        width, height = self.collider_size()
        rect = pygame.Rect(0, 0, max(int(width), 1), max(int(height), 1))
        rect.center = (round(self.translation.x), round(self.translation.y))
        return rect

    def __repr__(self):
        return (f"Sprite({self.label!r}, {self.category.name}, "
                f"pos=({self.translation.x:.1f}, {self.translation.y:.1f}))")
