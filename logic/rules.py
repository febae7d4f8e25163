"""logic/rules.py — Scoring, bombs, game over and restart.

These are the overlap callbacks the physics step fires, plus the
restart used by the game-over screen.  ``wire_physics`` registers them.

Bomb hits have two rule sets (``rules.bomb_mode``):

    game_over   hide the player and freeze the level until restart
    penalty     lose ``rules.bomb_penalty`` stars and keep playing
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import (
    Position, Velocity, Body, Sprite, Animator, HitFlash,
    Player, Star, Bomb, Platform, Score, GameState, GameClock,
)
from core.constants import ANIM_TURN
from core.events import (
    EventBus, StarCollected, BombHit, PlayerGrew, GameOver, GameRestarted,
)
from core.tuning import get as _tun
from logic.animation import play
from logic.physics import PhysicsWorld, set_scale
from logic.spawning import spawn_star, spawn_bomb, clear_bombs, player_colors

if TYPE_CHECKING:
    from core.ecs import World


def _emit(world: "World", event) -> None:
    bus = world.res(EventBus)
    if bus:
        bus.emit(event)


# ── Stars ───────────────────────────────────────────────────────────

def collect_star(world: "World", player: int, star: int) -> None:
    """Overlap callback for Player × Star."""
    if not (world.alive(star) and world.has(star, Star)):
        return
    pos = world.get(star, Position)
    body = world.get(star, Body)
    if body is not None:
        body.enabled = False
    sprite = world.get(star, Sprite)
    if sprite is not None:
        sprite.visible = False
    world.kill(star)

    score = world.res(Score)
    score.score += 1
    score.stars_collected += 1
    _emit(world, StarCollected(eid=star, score=score.score,
                               x=pos.x if pos else 0.0,
                               y=pos.y if pos else 0.0))

    every = int(_tun("bombs", "every", 10))
    if every > 0 and score.stars_collected % every == 0:
        spawn_bomb(world)
        increase_player_size(world, player)

    change_player_color(world, player)
    spawn_star(world)


def change_player_color(world: "World", player: int) -> tuple[int, int, int]:
    """Step the player's tint to the next palette colour (wraps)."""
    colors = player_colors()
    score = world.res(Score)
    score.color_index = (score.color_index + 1) % len(colors)
    tint = colors[score.color_index]
    sprite = world.get(player, Sprite)
    if sprite is not None:
        sprite.tint = tint
    return tint


def increase_player_size(world: "World", player: int) -> float:
    body = world.get(player, Body)
    if body is None:
        return 1.0
    step = float(_tun("player", "scale_step", 0.1))
    set_scale(world, player, body.scale_x + step, body.scale_y + step)
    _emit(world, PlayerGrew(eid=player, scale=body.scale_x))
    return body.scale_x


# ── Bombs ───────────────────────────────────────────────────────────

def hit_bomb(world: "World", player: int, bomb: int) -> None:
    """Overlap callback for Player × Bomb."""
    if not (world.alive(bomb) and world.has(bomb, Bomb)):
        return
    state = world.res(GameState)
    if state.over:
        return
    pos = world.get(bomb, Position)
    bx, by = (pos.x, pos.y) if pos else (0.0, 0.0)
    world.kill(bomb)

    score = world.res(Score)
    if state.bomb_mode == "penalty":
        lost = min(state.bomb_penalty, score.score)
        score.score -= lost
        world.add(player, HitFlash(
            remaining=float(_tun("rules", "flash_time", 0.3))))
        _emit(world, BombHit(bomb_eid=bomb, x=bx, y=by, penalty=lost))
        return

    sprite = world.get(player, Sprite)
    if sprite is not None:
        sprite.visible = False
    state.over = True
    pw = world.res(PhysicsWorld)
    if pw is not None:
        pw.paused = True
    print(f"[GAME] Game over — {score.score} stars collected")
    _emit(world, BombHit(bomb_eid=bomb, x=bx, y=by))
    _emit(world, GameOver(score=score.score))


def hit_flash_system(world: "World", dt: float) -> None:
    """Count down and drop HitFlash components."""
    for eid, flash in list(world.all_of(HitFlash)):
        flash.remaining -= dt
        if flash.remaining <= 0:
            world.remove(eid, HitFlash)


# ── Restart ─────────────────────────────────────────────────────────

def restart(world: "World") -> None:
    """Put the player back at the start and zero the score.

    Stars already in the level stay where they are.
    """
    sx, sy = _tun("player", "spawn", [100.0, 450.0])
    score = world.res(Score)
    score.score = 0
    score.stars_collected = 0
    score.color_index = 0

    res = world.query_one(Player, Position)
    if res is not None:
        pid, _, pos = res
        set_scale(world, pid, 1.0, 1.0)
        pos.x = float(sx)
        pos.y = float(sy)
        vel = world.get(pid, Velocity)
        if vel is not None:
            vel.x = vel.y = 0.0
        body = world.get(pid, Body)
        if body is not None:
            body.prev_x = body.prev_y = None
        sprite = world.get(pid, Sprite)
        if sprite is not None:
            sprite.visible = True
            sprite.tint = player_colors()[0]
        animator = world.get(pid, Animator)
        if animator is not None:
            play(animator, ANIM_TURN, ignore_if_playing=False)
        world.remove(pid, HitFlash)

    clear_bombs(world)
    state = world.res(GameState)
    state.over = False
    pw = world.res(PhysicsWorld)
    if pw is not None:
        pw.paused = False
    clock = world.res(GameClock)
    if clock is not None:
        clock.time = 0.0
    print("[GAME] Restarted")
    _emit(world, GameRestarted())


# ── Wiring ──────────────────────────────────────────────────────────

def wire_physics(world: "World") -> None:
    """Register the level's collider and overlap pairs."""
    pw = world.res(PhysicsWorld)
    pw.clear_pairs()
    pw.add_collider(Player, Platform)
    pw.add_collider(Star, Platform)
    pw.add_collider(Bomb, Platform)
    pw.add_overlap(Player, Star, collect_star)
    pw.add_overlap(Player, Bomb, hit_bomb)
