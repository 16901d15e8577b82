"""
test_hud_layout.py
------------------
YAML HUD layout loading and fallbacks.
"""

import pytest

from car_shoot.core.runtime.engine import Engine
from car_shoot.core.runtime.game_settings import TextLayout
from car_shoot.core.runtime.game_state import setup_scene
from car_shoot.ui.hud_layout import DEFAULT_SPECS, GAME_OVER_LABEL, HUD_LABELS, HudLayout


def test_packaged_layout_matches_defaults():
    layout = HudLayout.load()

    for label in HUD_LABELS + (GAME_OVER_LABEL,):
        assert layout[label] == DEFAULT_SPECS[label]


def test_game_over_uses_large_font():
    assert HudLayout()[GAME_OVER_LABEL].font_size == TextLayout.GAME_OVER_FONT_SIZE


def test_overrides_merge_with_defaults(tmp_path):
    (tmp_path / "hud.yaml").write_text(
        "score:\n"
        "  position: [0, 100]\n"
        "  format: 'Points {}'\n"
    )

    layout = HudLayout.load(base_path=tmp_path)

    assert layout["score"].position == (0.0, 100.0)
    assert layout["score"].render(7) == "Points 7"
    assert layout["score"].font_size == TextLayout.FONT_SIZE
    assert layout["cars_left"] == DEFAULT_SPECS["cars_left"]


def test_bad_entries_are_skipped(tmp_path):
    (tmp_path / "hud.yaml").write_text(
        "lives:\n"
        "  position: [0, 0]\n"
        "score: just text\n"
        "high_score:\n"
        "  position: [1, 2, 3]\n"
    )

    layout = HudLayout.load(base_path=tmp_path)

    assert "lives" not in layout.specs
    assert layout["score"] == DEFAULT_SPECS["score"]
    assert layout["high_score"] == DEFAULT_SPECS["high_score"]


@pytest.mark.parametrize("fmt", ["Score: {score}", "Score: {1}", "Score: {:d"])
def test_unrenderable_format_is_skipped(tmp_path, fmt):
    (tmp_path / "hud.yaml").write_text(f"score:\n  format: '{fmt}'\n")

    layout = HudLayout.load(base_path=tmp_path)

    assert layout["score"] == DEFAULT_SPECS["score"]


def test_unrenderable_format_does_not_break_the_scene(tmp_path, mock_audio):
    (tmp_path / "hud.yaml").write_text("score:\n  format: 'Score: {score}'\n")
    engine = Engine(audio=mock_audio)

    setup_scene(engine, HudLayout.load(base_path=tmp_path))

    assert engine.texts.get("score").value == "Score: 0"


def test_missing_or_broken_file_uses_defaults(tmp_path):
    assert HudLayout.load("absent.yaml", base_path=tmp_path).specs == DEFAULT_SPECS

    (tmp_path / "broken.yaml").write_text("score: [unclosed\n")
    assert HudLayout.load("broken.yaml", base_path=tmp_path).specs == DEFAULT_SPECS


def test_setup_scene_places_texts_from_layout(engine):
    score = engine.texts.get("score")

    assert (score.translation.x, score.translation.y) == DEFAULT_SPECS["score"].position
    assert score.value == "Score: 0"
