"""logic/controls.py — Player movement from input intents."""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import Player, Velocity, Body, Animator
from core.constants import ANIM_LEFT, ANIM_TURN, ANIM_RIGHT
from core.events import EventBus, PlayerJumped
from logic.animation import play

if TYPE_CHECKING:
    from core.ecs import World
    from logic.input_manager import InputManager


def player_control_system(world: "World", input: "InputManager") -> None:
    """Run left/right at ``run_speed``, stand still otherwise.

    Jumping needs the player to be standing on something: a platform
    (``touching.down``) or the bottom of the world (``blocked.down``).
    """
    for eid, player, vel, body in world.query(Player, Velocity, Body):
        animator = world.get(eid, Animator)
        if input.held("move_left"):
            vel.x = -player.run_speed
            anim = ANIM_LEFT
        elif input.held("move_right"):
            vel.x = player.run_speed
            anim = ANIM_RIGHT
        else:
            vel.x = 0.0
            anim = ANIM_TURN
        if animator is not None:
            play(animator, anim)

        if input.held("jump") and body.on_floor:
            vel.y = -player.jump_speed
            bus = world.res(EventBus)
            if bus:
                bus.emit(PlayerJumped(eid=eid))
