"""test_rules.py — Level construction, scoring, bombs and restart.

Builds the stock level in a bare World (no window) and drives the
rules directly: star pickups, the every-tenth-star bomb, both bomb
rule sets, and the restart that follows a game over.

Run:  python test_rules.py
"""
from __future__ import annotations
import sys, random, traceback

# ── Bootstrap ────────────────────────────────────────────────────────
import core.tuning as _tuning
_tuning.load()

from core.ecs import World
from core.events import EventBus
from components import (
    Position, Velocity, Body, Sprite, HitFlash,
    Star, Bomb, Platform, Score, GameState, GameClock,
)
from logic.animation import AnimationSet
from logic.physics import PhysicsWorld, physics_system
from logic.rules import (
    collect_star, hit_bomb, hit_flash_system, restart, wire_physics,
)
from logic.spawning import (
    create_platforms, create_player, create_star_row, spawn_star, spawn_bomb,
    clear_bombs, player_colors,
)
from logic.tick import tick_systems


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def approx(a: float, b: float, tol: float = 1e-6) -> bool:
    return abs(a - b) <= tol


# ── Scenario builders ────────────────────────────────────────────────

def _level(mode: str = "game_over", penalty: int = 1):
    """Stock platforms + player, physics wired, no stars yet."""
    w = World()
    bus = EventBus()
    w.set_res(bus)
    w.set_res(GameClock())
    w.set_res(Score())
    w.set_res(GameState(bomb_mode=mode, bomb_penalty=penalty))
    w.set_res(PhysicsWorld(width=1024, height=640))
    w.set_res(AnimationSet.from_tuning())
    create_platforms(w)
    player = create_player(w)
    wire_physics(w)
    return w, bus, player


def _record(bus: EventBus, *names: str) -> list:
    seen: list = []
    for name in names:
        bus.subscribe(name, seen.append)
    return seen


def _any_star(w: World) -> int:
    return next(eid for eid, _ in w.all_of(Star))


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  LEVEL CONSTRUCTION
# ═══════════════════════════════════════════════════════════════════════

def test_level_layout():
    print("\n=== 1: Level layout ===")
    random.seed(7)
    w, bus, player = _level()
    plats = list(w.query(Platform, Position, Body))
    assert len(plats) == 4
    assert all(b.static and not b.allow_gravity for _, _, _, b in plats)
    ground = min(plats, key=lambda p: -p[3].w)
    assert approx(ground[3].w, 660.0) and (ground[2].x, ground[2].y) == (400.0, 570.0)
    ok("Ground + three ledges, all static")

    pos = w.get(player, Position)
    body = w.get(player, Body)
    assert (pos.x, pos.y) == (100.0, 450.0)
    assert approx(body.bounce_y, 0.2) and body.collide_world_bounds
    assert w.get(player, Sprite).tint == (255, 0, 0)
    ok("Player at (100, 450), bounce 0.2, first palette colour")

    stars = create_star_row(w)
    assert len(stars) == 11
    xs = [w.get(s, Position).x for s in stars]
    assert xs == [12.0 + 70.0 * i for i in range(11)]
    assert all(w.get(s, Position).y == 0.0 for s in stars)
    assert all(0.4 <= w.get(s, Body).bounce_y <= 0.8 for s in stars)
    ok("Star row: 11 stars 70 px apart with bounce in [0.4, 0.8]")


def test_spawners():
    print("\n=== 2: Spawners ===")
    random.seed(3)
    w, bus, player = _level()
    spawned = _record(bus, "BombSpawned")
    s = spawn_star(w)
    assert 0 <= w.get(s, Position).x <= 1024 and w.get(s, Position).y == 0.0
    assert w.get(s, Body).collide_world_bounds
    ok("spawn_star drops from a random x on the top edge")

    b = spawn_bomb(w)
    vel, body = w.get(b, Velocity), w.get(b, Body)
    assert -200 <= vel.x <= 200 and vel.y == 20.0
    assert body.bounce_x == body.bounce_y == 1.0 and body.collide_world_bounds
    bus.drain()
    assert [e.eid for e in spawned] == [b]
    ok("spawn_bomb: bounce 1, vy 20, BombSpawned emitted")

    spawn_bomb(w)
    assert clear_bombs(w) == 2
    w.purge()
    assert w.count(Bomb) == 0
    ok("clear_bombs removes every bomb")


def test_empty_palette_rejected():
    print("\n=== 3: Empty colour palette ===")
    _tuning.override("player", "colors", [])
    try:
        player_colors()
    except ValueError:
        ok("player_colors raises ValueError on an empty palette")
    else:
        raise AssertionError("empty palette accepted")
    finally:
        _tuning.load()


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  STARS
# ═══════════════════════════════════════════════════════════════════════

def test_collect_star():
    print("\n=== 4: Collecting a star ===")
    random.seed(11)
    w, bus, player = _level()
    seen = _record(bus, "StarCollected")
    star = spawn_star(w)
    collect_star(w, player, star)
    w.purge()
    score = w.res(Score)

    assert not w.has(star, Star)
    assert w.count(Star) == 1
    ok("Star removed and a replacement spawned")

    assert (score.score, score.stars_collected, score.color_index) == (1, 1, 1)
    assert w.get(player, Sprite).tint == (255, 165, 0)
    ok("Score 1, tint moved to the second colour")

    bus.drain()
    assert len(seen) == 1 and seen[0].score == 1
    ok("StarCollected emitted with the new score")

    collect_star(w, player, star)
    assert score.score == 1
    ok("A removed star cannot be collected twice")


def test_tenth_star_spawns_bomb_and_grows_player():
    print("\n=== 5: Every tenth star ===")
    random.seed(5)
    w, bus, player = _level()
    grew = _record(bus, "PlayerGrew")
    spawn_star(w)
    for _ in range(9):
        collect_star(w, player, _any_star(w))
        w.purge()
    assert w.count(Bomb) == 0
    assert approx(w.get(player, Body).scale_x, 1.0)
    ok("No bomb after nine stars")

    collect_star(w, player, _any_star(w))
    w.purge()
    assert w.count(Bomb) == 1
    assert approx(w.get(player, Body).scale_x, 1.1)
    bus.drain()
    assert len(grew) == 1 and approx(grew[0].scale, 1.1)
    ok("Tenth star: one bomb, player scaled to 1.1")

    assert w.res(Score).color_index == 10 % 7
    ok("Tint index wrapped around the seven-colour palette")


def test_overlap_collects():
    print("\n=== 6: Overlap wiring ===")
    random.seed(2)
    w, bus, player = _level()
    pos = w.get(player, Position)
    star = spawn_star(w)
    w.get(star, Position).x, w.get(star, Position).y = pos.x, pos.y
    physics_system(w, 1 / 60)
    assert w.res(Score).score == 1
    assert not w.alive(star)
    ok("Player touching a star collects it during the physics step")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 3:  BOMBS
# ═══════════════════════════════════════════════════════════════════════

def test_bomb_game_over():
    print("\n=== 7: Bomb hit (game_over) ===")
    random.seed(9)
    w, bus, player = _level("game_over")
    seen = _record(bus, "BombHit", "GameOver")
    w.res(Score).score = 4
    bomb = spawn_bomb(w)
    hit_bomb(w, player, bomb)

    state = w.res(GameState)
    assert state.over and w.res(PhysicsWorld).paused
    assert not w.get(player, Sprite).visible
    assert not w.alive(bomb)
    ok("Game over: player hidden, bomb gone, physics paused")

    bus.drain()
    assert [type(e).__name__ for e in seen] == ["BombHit", "GameOver"]
    assert seen[1].score == 4
    ok("BombHit then GameOver(score=4)")

    before = (w.get(player, Position).x, w.get(player, Position).y)
    tick_systems(w, 0.5)
    assert (w.get(player, Position).x, w.get(player, Position).y) == before
    assert w.res(GameClock).time == 0.0
    ok("Level frozen while the game is over")


def test_bomb_penalty():
    print("\n=== 8: Bomb hit (penalty) ===")
    random.seed(9)
    w, bus, player = _level("penalty", penalty=2)
    seen = _record(bus, "BombHit")
    score = w.res(Score)
    score.score = 3
    hit_bomb(w, player, spawn_bomb(w))
    assert score.score == 1
    assert not w.res(GameState).over and not w.res(PhysicsWorld).paused
    assert w.has(player, HitFlash) and w.get(player, Sprite).visible
    ok("Penalty: 3 → 1, play continues, player flashes")

    hit_bomb(w, player, spawn_bomb(w))
    assert score.score == 0
    bus.drain()
    assert [e.penalty for e in seen] == [2, 1]
    ok("Score never goes below zero")

    hit_flash_system(w, 0.2)
    assert w.has(player, HitFlash)
    hit_flash_system(w, 0.2)
    assert not w.has(player, HitFlash)
    ok("HitFlash expires after flash_time")


def test_unknown_bomb_mode():
    print("\n=== 9: Invalid rules ===")
    try:
        GameState(bomb_mode="explode")
    except ValueError:
        ok("Unknown bomb_mode raises ValueError")
    else:
        raise AssertionError("bad bomb_mode accepted")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 4:  RESTART
# ═══════════════════════════════════════════════════════════════════════

def test_restart_after_game_over():
    print("\n=== 10: Restart ===")
    random.seed(4)
    w, bus, player = _level()
    restarted = _record(bus, "GameRestarted")
    create_star_row(w)
    spawn_star(w)
    for _ in range(10):
        collect_star(w, player, _any_star(w))
        w.purge()
    stars_before = w.count(Star)
    w.get(player, Position).x = 700.0
    hit_bomb(w, player, next(eid for eid, _ in w.all_of(Bomb)))
    tick_systems(w, 1 / 60)

    restart(w)
    w.purge()
    pos, body, sprite = (w.get(player, Position), w.get(player, Body),
                         w.get(player, Sprite))
    score, state = w.res(Score), w.res(GameState)
    assert (pos.x, pos.y) == (100.0, 450.0)
    assert approx(body.scale_x, 1.0) and w.get(player, Velocity).y == 0.0
    assert sprite.visible and sprite.tint == player_colors()[0]
    ok("Player back at spawn, normal size, visible, first colour")

    assert (score.score, score.stars_collected, score.color_index) == (0, 0, 0)
    assert not state.over and not w.res(PhysicsWorld).paused
    assert w.count(Bomb) == 0 and w.count(Star) == stars_before
    ok("Score zeroed, bombs cleared, stars left alone")

    bus.drain()
    assert len(restarted) == 1
    ok("GameRestarted emitted")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 5:  FULL TICK
# ═══════════════════════════════════════════════════════════════════════

def test_player_settles_on_ground():
    print("\n=== 11: Player settles on the ground ===")
    w, bus, player = _level()
    for _ in range(180):
        tick_systems(w, 1 / 60)
    pos, body = w.get(player, Position), w.get(player, Body)
    # ground top = 570 - 32 * 1.65 / 2
    assert approx(pos.y, 543.6 - 24.0, 1e-3)
    assert body.on_floor and w.get(player, Velocity).y == 0.0
    assert approx(w.res(GameClock).time, 3.0, 1e-6)
    ok("Player comes to rest on top of the ground")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Level layout", test_level_layout),
        ("Spawners", test_spawners),
        ("Empty palette", test_empty_palette_rejected),
        ("Collect star", test_collect_star),
        ("Tenth star", test_tenth_star_spawns_bomb_and_grows_player),
        ("Overlap wiring", test_overlap_collects),
        ("Bomb game over", test_bomb_game_over),
        ("Bomb penalty", test_bomb_penalty),
        ("Invalid rules", test_unknown_bomb_mode),
        ("Restart", test_restart_after_game_over),
        ("Settle", test_player_settles_on_ground),
    ]

    for name, fn in sections:
        try:
            fn()
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Rules Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
