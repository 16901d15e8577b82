"""
game_settings.py
----------------
Centralized constants for all game systems.

World coordinates are centered on the screen with +y pointing up.
"""

import math


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Car Shoot"
    BACKGROUND_COLOR = (40, 40, 48)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Bounds
# ===========================================================

class Bounds:
    """Playfield limits in world coordinates."""
    CULL_TOP: float = 400.0
    CULL_RIGHT: float = 750.0

    SPAWN_LEFT: float = -740.0
    SPAWN_Y_MIN: float = -100.0
    SPAWN_Y_MAX: float = 325.0


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Draw order, higher draws on top."""
    ENEMIES: float = 0.0
    POWER_UP: float = 2.0
    PROJECTILES: float = 5.0
    PLAYER: float = 10.0
    UI: float = 100.0


# ===========================================================
# Entities
# ===========================================================

class PlayerSettings:
    LABEL: str = "player"
    PRESET: str = "racing_barrier_red"
    Y: float = -325.0
    SCALE: float = 0.5
    ROTATION: float = math.pi / 2  # facing up


class ProjectileSettings:
    LABEL_PREFIX: str = "marble"
    PRESET: str = "rolling_ball_blue"
    MAGAZINE_SIZE: int = 3
    SPEED: float = 600.0
    LAUNCH_Y: float = -275.0


class EnemySettings:
    LABEL_PREFIX: str = "car"
    TOTAL_PER_ROUND: int = 25
    SPAWN_INTERVAL_RANGE = (0.1, 1.25)
    SINE_AMPLITUDE: float = 50.0
    SINE_FREQUENCY: float = 3.0  # rad/s
    ARCHETYPE_CONFIG: str = "enemies.json"


class PowerUpSettings:
    LABEL: str = "power_up"
    PRESET: str = "power_up_star"
    SPEED: float = 150.0
    COUNTDOWN_RANGE = (4.0, 12.0)


# ===========================================================
# Text Display
# ===========================================================

class TextLayout:
    """Labels, positions and formats for on-screen text."""
    CARS_LEFT = ("cars_left", (540.0, -320.0), "Cars left: {}")
    SCORE = ("score", (540.0, -280.0), "Score: {}")
    HIGH_SCORE = ("high_score", (540.0, -240.0), "High score: {}")
    GAME_OVER = ("game_over", (0.0, 0.0), "Game Over - press R to restart")

    FONT_SIZE: int = 30
    GAME_OVER_FONT_SIZE: int = 60


# ===========================================================
# Audio
# ===========================================================

class AudioCues:
    """Named sound cues and their playback volumes."""
    LAUNCH = ("player_shoot", 0.4)
    IMPACT = ("impact", 0.2)
    ENEMY_DESTROY = ("enemy_destroy", 0.5)
    POWER_UP = ("power_up", 0.7)
    GAME_OVER = ("game_over", 0.6)

    MUSIC = ("game_bgm", 0.1)
