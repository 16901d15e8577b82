"""
sprite_presets.py
-----------------
Visual presets for sprites. Each preset fixes a drawn shape, a color and an
unscaled size; the size doubles as the collider extent.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SpritePreset:
    shape: str  # "rect", "circle" or "star"
    color: tuple
    size: tuple  # (width, height) before rotation and scale


PRESETS = {
    "racing_barrier_red": SpritePreset("rect", (200, 40, 40), (105, 30)),
    "rolling_ball_blue": SpritePreset("circle", (60, 120, 230), (28, 28)),
    "racing_car_black": SpritePreset("rect", (30, 30, 30), (110, 55)),
    "racing_car_red": SpritePreset("rect", (210, 50, 50), (110, 55)),
    "racing_car_blue": SpritePreset("rect", (50, 90, 210), (110, 55)),
    "racing_car_green": SpritePreset("rect", (40, 170, 70), (110, 55)),
    "racing_car_yellow": SpritePreset("rect", (230, 200, 40), (110, 55)),
    "power_up_star": SpritePreset("star", (255, 220, 90), (48, 48)),
}


def get_preset(name: str) -> SpritePreset:
    """Return the preset for `name`. Unknown presets are a programming error."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown sprite preset '{name}'. Known: {sorted(PRESETS)}") from None
