"""
conftest.py
-----------
Shared pytest configuration and fixtures for Car Shoot tests.

Contains:
- Headless SDL setup and quiet logging
- Engine / GameState fixtures with a mocked audio sink
- Helpers to place enemies and run ticks
"""

import os
import random
import sys

import pytest
from unittest.mock import MagicMock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from car_shoot.core.debug.debug_logger import LoggerConfig  # noqa: E402
from car_shoot.core.runtime.engine import Engine, FrameInput  # noqa: E402
from car_shoot.core.runtime.game_state import GameState, setup_scene  # noqa: E402
from car_shoot.entities.enemies.enemy_archetypes import DEFAULT_ARCHETYPES  # noqa: E402
from car_shoot.entities.entity_types import Behavior, EntityCategory  # noqa: E402
from car_shoot.scenes.game.game_logic import game_logic  # noqa: E402
from car_shoot.systems.entity_management.enemy_directory import EnemyRecord  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Silence console logging unless a test turns it back on."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Core Fixtures
# ===========================================================

@pytest.fixture
def mock_audio():
    """Audio sink recording play_sfx / play_music calls."""
    return MagicMock()


@pytest.fixture
def engine(mock_audio):
    """Engine with the player sprite and HUD texts in place."""
    engine = Engine(audio=mock_audio)
    setup_scene(engine)
    return engine


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game_state(rng):
    """Full-round state with the built-in archetypes and a seeded RNG."""
    return GameState(archetypes=DEFAULT_ARCHETYPES, rng=rng)


@pytest.fixture
def quiet_state(rng):
    """
    State that never spawns on its own: no enemies left to spawn and a
    power-up countdown far in the future. Scenario tests place enemies by hand.
    """
    return GameState(
        archetypes=DEFAULT_ARCHETYPES,
        total_enemies=0,
        power_up_countdown_range=(1000.0, 1000.0),
        rng=rng,
    )


# ===========================================================
# Helpers
# ===========================================================

@pytest.fixture
def place_enemy():
    """Create a matching enemy record and sprite."""
    def _place(engine, state, label, health=1, speed=250.0,
               behavior=Behavior.LINEAR, x=0.0, y=0.0, archetype="test"):
        record = state.enemies.add(EnemyRecord(label, health, speed, behavior, archetype, anchor_y=y))
        sprite = engine.sprites.add(label, "racing_car_blue", EntityCategory.ENEMY, x, y)
        sprite.collision = True
        return record, sprite
    return _place


@pytest.fixture
def run_tick():
    """Run one full tick with the given input and collision events."""
    def _tick(engine, state, dt=0.0, pointer=None, fire=False, restart=False, events=()):
        engine.begin_frame(dt, FrameInput(pointer, fire, restart), list(events))
        game_logic(engine, state)
    return _tick


# ===========================================================
# Invariant assertions
# ===========================================================

def assert_invariants(engine, state):
    """Bookkeeping invariants that must hold after every tick."""
    enemy_sprites = set(engine.sprites.labels(EntityCategory.ENEMY))
    assert enemy_sprites == set(state.enemies.labels())

    live_projectiles = engine.sprites.labels(EntityCategory.PROJECTILE)
    assert state.projectiles.available + len(live_projectiles) == state.projectiles.magazine_size

    assert state.stats.high_score >= state.stats.score >= 0


@pytest.fixture
def check_invariants():
    return assert_invariants


# Pytest configuration
def pytest_configure(config):
    config.addinivalue_line("markers", "scenario: end-to-end tick scenarios")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag tick scenario tests automatically; everything else is a unit test."""
    for item in items:
        if "scenes" in item.nodeid:
            item.add_marker(pytest.mark.scenario)
        else:
            item.add_marker(pytest.mark.unit)
