"""Entity types."""

from enum import Enum


class EntityCategory(Enum):
    """
    Kind of a sprite in the registry.

    Carried on every sprite so systems dispatch on the category instead of
    on label prefixes.
    """
    PLAYER = "player"
    PROJECTILE = "projectile"
    ENEMY = "enemy"
    POWER_UP = "power_up"
    UI_TEXT = "ui_text"


class Behavior(Enum):
    """Enemy movement pattern."""
    LINEAR = "linear"
    SINUSOIDAL = "sinusoidal"
