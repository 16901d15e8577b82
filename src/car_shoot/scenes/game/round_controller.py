"""
round_controller.py
-------------------
PLAYING -> OVER -> PLAYING round lifecycle.

A round ends once every enemy has been spawned and none is left on the
field. Restart input while the round is over starts the next one.
"""

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import AudioCues, PowerUpSettings
from car_shoot.core.runtime.game_state import RoundState
from car_shoot.core.services.event_manager import RoundOverEvent, RoundRestartedEvent
from car_shoot.entities.entity_types import EntityCategory
from car_shoot.ui.hud_layout import GAME_OVER_LABEL


def evaluate_round_over(engine, state) -> bool:
    """
    Tick phase: end the round when it is exhausted.

    Idempotent: an already finished round is left alone.

    Returns:
        True only on the tick the round ends.
    """
    live_enemies = engine.sprites.labels(EntityCategory.ENEMY)
    state.enemies.verify_against(live_enemies)

    if state.round_over or live_enemies or state.spawner.remaining_to_spawn > 0:
        return False

    state.round_state = RoundState.OVER
    spec = state.hud[GAME_OVER_LABEL]
    engine.texts.add(spec.label, spec.fmt, spec.position, spec.font_size)
    engine.audio.play_sfx(*AudioCues.GAME_OVER)
    state.events.dispatch(RoundOverEvent(state.stats.score, state.stats.high_score))
    DebugLogger.state(
        f"Round over: score {state.stats.score}, high score {state.stats.high_score}",
        category="game_state"
    )
    return True


def handle_restart(engine, state) -> bool:
    """
    Tick phase: start a new round on restart input while the round is over.

    Returns:
        True if a restart happened.
    """
    if not (engine.input.restart_pressed and state.round_over):
        return False

    state.round_state = RoundState.PLAYING
    state.spawner.reset()
    state.stats.reset()
    state.power_up.rearm()
    engine.texts.remove(GAME_OVER_LABEL)

    # A power-up still drifting from last round would clash with this round's label
    if PowerUpSettings.LABEL in engine.sprites:
        engine.sprites.remove(PowerUpSettings.LABEL)

    state.events.dispatch(RoundRestartedEvent())
    DebugLogger.state("Round restarted", category="game_state")
    return True
