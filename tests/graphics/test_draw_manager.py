"""
test_draw_manager.py
--------------------
Coordinate conversion and headless drawing.
"""

import pygame
import pytest

from car_shoot.entities.entity_types import EntityCategory
from car_shoot.graphics.draw_manager import DrawManager, star_points, world_to_screen


@pytest.mark.parametrize("world, screen", [
    ((0.0, 0.0), (640.0, 360.0)),
    ((-640.0, 360.0), (0.0, 0.0)),
    ((0.0, -325.0), (640.0, 685.0)),
])
def test_world_to_screen(world, screen):
    assert world_to_screen(*world, 1280, 720) == screen


def test_star_has_alternating_radii():
    vertices = star_points((0.0, 0.0), 10.0)

    assert len(vertices) == 10
    assert vertices[0] == pytest.approx((0.0, -10.0))


def test_draws_scene_onto_surface(engine):
    pygame.font.init()
    engine.sprites.add("power_up", "power_up_star", EntityCategory.POWER_UP, 0.0, 0.0)
    surface = pygame.Surface((1280, 720))

    DrawManager().draw(surface, engine)

    assert tuple(surface.get_at((640, 360)))[:3] != (40, 40, 48)


def test_texts_draw_in_the_ui_layer(engine):
    pygame.font.init()
    engine.texts.add("game_over", "Game Over", (0.0, 0.0), 60)
    surface = pygame.Surface((1280, 720))

    DrawManager().draw(surface, engine)

    region = [tuple(surface.get_at((x, y)))[:3] for x in range(560, 720, 2) for y in range(345, 375, 2)]
    assert any(pixel != (40, 40, 48) for pixel in region)
