"""
hud_manager.py
--------------
Keeps the HUD texts in step with the scoreboard and spawn count.
"""

from car_shoot.core.runtime.game_settings import TextLayout


def sync_display_text(engine, state) -> None:
    """Tick phase: write cars left, score and high score into their texts."""
    values = (
        (TextLayout.CARS_LEFT[0], state.spawner.remaining_to_spawn),
        (TextLayout.SCORE[0], state.stats.score),
        (TextLayout.HIGH_SCORE[0], state.stats.high_score),
    )
    for label, value in values:
        engine.texts.get(label).value = state.hud[label].render(value)
