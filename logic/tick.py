"""logic/tick.py — System tick orchestration.

The per-frame gameplay pipeline, in order:

    controls → physics (+ overlap callbacks) → animation → hit flash
    → event drain → particles → purge

While the game-over screen is up only the event drain, particles and
purge run, so the level stays frozen behind the modal.

Usage::

    from logic.tick import tick_systems
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import GameClock, GameState
from core.events import EventBus
from logic.animation import AnimationSet, animation_system
from logic.controls import player_control_system
from logic.particles import ParticleManager
from logic.physics import physics_system
from logic.rules import hit_flash_system

if TYPE_CHECKING:
    from core.ecs import World
    from logic.input_manager import InputManager


def tick_systems(world: "World", dt: float,
                 input: "InputManager | None" = None) -> None:
    """Run all gameplay systems for one frame.

    Parameters
    ----------
    world : World
        The ECS world.
    dt : float
        Seconds since the last frame.
    input : InputManager | None
        Intent source for the player; ``None`` leaves velocities alone
        (tests drive them directly).
    """
    state = world.res(GameState)
    running = state is None or not state.over

    if running:
        clock = world.res(GameClock)
        if clock:
            clock.time += dt

        if input is not None:
            player_control_system(world, input)

        physics_system(world, dt)

        anims = world.res(AnimationSet)
        if anims:
            animation_system(world, anims, dt)

        hit_flash_system(world, dt)

    # Event bus drain
    bus = world.res(EventBus)
    if bus:
        bus.drain()

    # Particles
    pm = world.res(ParticleManager)
    if pm:
        pm.update(dt)

    world.purge()
