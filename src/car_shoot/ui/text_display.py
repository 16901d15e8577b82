"""
text_display.py
---------------
Named on-screen texts. The simulation writes values; the DrawManager renders.
"""

import pygame

from car_shoot.core.debug.invariants import violation
from car_shoot.core.runtime.game_settings import Layers, TextLayout
from car_shoot.entities.entity_types import EntityCategory


class Text:
    __slots__ = ('label', 'value', 'translation', 'font_size', 'category', 'layer')

    def __init__(self, label: str, value: str, position=(0.0, 0.0),
                 font_size: int = TextLayout.FONT_SIZE):
        self.label = label
        self.value = value
        self.translation = pygame.Vector2(position)
        self.font_size = font_size
        self.category = EntityCategory.UI_TEXT
        self.layer = Layers.UI


class TextDisplay:
    """Label-keyed texts. Lookup misses are fatal like sprite lookups."""

    def __init__(self):
        self._texts = {}

    def add(self, label: str, value: str, position=(0.0, 0.0),
            font_size: int = TextLayout.FONT_SIZE) -> Text:
        if label in self._texts:
            raise violation(f"Text '{label}' already displayed", category="render")
        text = Text(label, value, position, font_size)
        self._texts[label] = text
        return text

    def get(self, label: str) -> Text:
        try:
            return self._texts[label]
        except KeyError:
            raise violation(f"Unknown text '{label}'", category="render") from None

    def remove(self, label: str) -> Text:
        try:
            return self._texts.pop(label)
        except KeyError:
            raise violation(f"Cannot remove unknown text '{label}'", category="render") from None

    def values(self):
        return self._texts.values()

    def __contains__(self, label) -> bool:
        return label in self._texts

    def __len__(self) -> int:
        return len(self._texts)
