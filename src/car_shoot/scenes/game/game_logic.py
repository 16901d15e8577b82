"""
game_logic.py
-------------
The per-tick update: a fixed pipeline of phases.

Order matters. Culling runs before spawning and collision resolution so an
escaped enemy is gone before anything indexes the directory; collisions
resolve before the round-over check so the last kill ends the round on the
same tick; restart runs last so a new round starts from a settled state.
"""

from car_shoot.scenes.game.round_controller import evaluate_round_over, handle_restart
from car_shoot.systems.collision.collision_manager import resolve_collisions
from car_shoot.systems.entity_management.spawn_manager import run_spawn_controller
from car_shoot.systems.items.power_up_manager import run_power_up_controller
from car_shoot.systems.movement import cull_out_of_bounds, move_entities
from car_shoot.systems.player_controller import handle_fire, update_player
from car_shoot.ui.hud_manager import sync_display_text


TICK_PHASES = (
    ("sync_text", sync_display_text),
    ("player", update_player),
    ("fire", handle_fire),
    ("move", move_entities),
    ("cull", cull_out_of_bounds),
    ("spawn", run_spawn_controller),
    ("power_up", run_power_up_controller),
    ("collisions", resolve_collisions),
    ("round_over", evaluate_round_over),
    ("restart", handle_restart),
)


def game_logic(engine, state, phases=TICK_PHASES) -> None:
    """Run one simulation tick over `engine` and `state`."""
    for _, phase in phases:
        phase(engine, state)
