"""
draw_manager.py
---------------
Shape-based renderer for sprites and texts.

Responsibilities:
- Convert world coordinates (center origin, +y up) to screen pixels
- Draw sprites by preset shape and color, and texts, in one pass ordered by layer
- Render texts (UI_TEXT category, UI layer) with cached fonts
"""

import math

import pygame

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import Display
from car_shoot.entities.entity_types import EntityCategory
from car_shoot.entities.sprite_presets import get_preset


def world_to_screen(x: float, y: float, width: int = Display.WIDTH, height: int = Display.HEIGHT):
    return x + width / 2, height / 2 - y


def star_points(center, radius: float, points: int = 5):
    """Vertices of a star polygon around `center`."""
    cx, cy = center
    vertices = []
    for i in range(points * 2):
        r = radius if i % 2 == 0 else radius * 0.45
        angle = math.pi * i / points - math.pi / 2
        vertices.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    return vertices


class DrawManager:
    """Draws an Engine's sprites and texts onto a surface."""

    TEXT_COLOR = (240, 240, 240)

    def __init__(self):
        self._fonts = {}
        DebugLogger.init_entry("DrawManager")

    def _font(self, size: int):
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def draw(self, surface, engine):
        surface.fill(Display.BACKGROUND_COLOR)

        drawables = list(engine.sprites.values()) + list(engine.texts.values())
        for item in sorted(drawables, key=lambda d: d.layer):
            if item.category is EntityCategory.UI_TEXT:
                self._draw_text(surface, item)
            else:
                self._draw_sprite(surface, item)

    def _draw_text(self, surface, text):
        image = self._font(text.font_size).render(text.value, True, self.TEXT_COLOR)
        rect = image.get_rect(center=world_to_screen(text.translation.x, text.translation.y))
        surface.blit(image, rect)

    def _draw_sprite(self, surface, sprite):
        preset = get_preset(sprite.preset)
        center = world_to_screen(sprite.translation.x, sprite.translation.y)
        width, height = sprite.collider_size()

        if preset.shape == "circle":
            pygame.draw.circle(surface, preset.color, center, max(width, height) / 2)
        elif preset.shape == "star":
            pygame.draw.polygon(surface, preset.color, star_points(center, max(width, height) / 2))
        else:
            rect = pygame.Rect(0, 0, int(width), int(height))
            rect.center = (round(center[0]), round(center[1]))
            pygame.draw.rect(surface, preset.color, rect, border_radius=6)
