"""test_physics.py — Arcade physics behaviour.

Gravity, the dt clamp, world bounds, landing on platforms, side hits,
overlap callbacks and body scaling, each in a bare World with one or
two bodies at known positions.

Run:  python test_physics.py
"""
from __future__ import annotations
import sys, traceback

# ── Bootstrap ────────────────────────────────────────────────────────
from core.tuning import load as _load_tuning
_load_tuning()

from core.ecs import World
from core.collision import aabb_of, aabb_overlap, overlap_amounts
from components import Position, Velocity, Body, Player, Star, Platform
from logic.physics import PhysicsWorld, physics_system, set_scale


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

def _world(gravity: float = 0.0, **kw) -> tuple[World, PhysicsWorld]:
    w = World()
    pw = PhysicsWorld(width=1024, height=640, gravity_y=gravity, **kw)
    w.set_res(pw)
    return w, pw


def _dynamic(w: World, x: float, y: float, size=(20.0, 20.0),
             vx: float = 0.0, vy: float = 0.0, tag=Player, **body_kw) -> int:
    eid = w.spawn()
    w.add(eid, Position(x, y))
    w.add(eid, Velocity(vx, vy))
    w.add(eid, Body(width=size[0], height=size[1], **body_kw))
    w.add(eid, tag())
    return eid


def _platform(w: World, x: float, y: float, size=(400.0, 32.0)) -> int:
    eid = w.spawn()
    w.add(eid, Position(x, y))
    w.add(eid, Body(width=size[0], height=size[1], allow_gravity=False,
                    static=True))
    w.add(eid, Platform())
    return eid


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  AABB PRIMITIVES
# ═══════════════════════════════════════════════════════════════════════

def test_aabb_helpers():
    print("\n=== 1: AABB helpers ===")
    assert aabb_of(100, 50, 20, 10) == (90, 45, 110, 55)
    ok("aabb_of is centred")

    a = aabb_of(0, 0, 10, 10)
    assert aabb_overlap(a, aabb_of(5, 5, 10, 10))
    assert not aabb_overlap(a, aabb_of(10, 0, 10, 10))
    ok("Touching edges are not an overlap")

    assert overlap_amounts(a, aabb_of(8, 3, 10, 10)) == (2, 7)
    assert overlap_amounts(a, aabb_of(50, 50, 10, 10)) == (0.0, 0.0)
    ok("overlap_amounts gives per-axis depth")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  INTEGRATION
# ═══════════════════════════════════════════════════════════════════════

def test_gravity_and_dt_clamp():
    print("\n=== 2: Gravity and dt clamp ===")
    w, pw = _world(gravity=300.0)
    e = _dynamic(w, 100.0, 100.0)
    physics_system(w, 0.05)
    vel, pos = w.get(e, Velocity), w.get(e, Position)
    assert approx(vel.y, 15.0)
    assert approx(pos.y, 100.75)
    ok("One 50 ms step: vy 15, y +0.75")

    w2, _ = _world(gravity=300.0)
    e2 = _dynamic(w2, 100.0, 100.0)
    physics_system(w2, 1.0)
    assert approx(w2.get(e2, Velocity).y, 15.0)
    ok("A 1 s hitch is clamped to max_dt")

    w3, _ = _world(gravity=300.0)
    e3 = _dynamic(w3, 100.0, 100.0, allow_gravity=False)
    physics_system(w3, 0.05)
    assert w3.get(e3, Velocity).y == 0.0
    ok("allow_gravity=False ignores gravity")


def test_paused_world_is_frozen():
    print("\n=== 3: Paused physics ===")
    w, pw = _world(gravity=300.0)
    e = _dynamic(w, 100.0, 100.0, vx=50.0)
    pw.paused = True
    physics_system(w, 0.05)
    pos = w.get(e, Position)
    assert (pos.x, pos.y) == (100.0, 100.0)
    ok("Nothing moves while paused")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 3:  WORLD BOUNDS
# ═══════════════════════════════════════════════════════════════════════

def test_world_bounds_bounce():
    print("\n=== 4: World bounds ===")
    w, _ = _world()
    e = _dynamic(w, 500.0, 628.0, vy=100.0, bounce_y=0.5,
                 collide_world_bounds=True)
    physics_system(w, 0.05)
    pos, vel, body = w.get(e, Position), w.get(e, Velocity), w.get(e, Body)
    assert approx(pos.y, 630.0)
    assert approx(vel.y, -50.0)
    assert body.blocked.down and body.on_floor
    ok("Floor hit clamps, reflects × bounce and sets blocked.down")

    w2, _ = _world()
    e2 = _dynamic(w2, 500.0, 629.5, vy=30.0, bounce_y=0.5,
                  collide_world_bounds=True)
    physics_system(w2, 0.05)
    assert w2.get(e2, Body).blocked.down
    assert approx(w2.get(e2, Position).y, 630.0)
    assert w2.get(e2, Velocity).y == 0.0
    ok("Rebound slower than rest_speed stops dead")

    w3, _ = _world()
    e3 = _dynamic(w3, 12.0, 300.0, vx=-200.0, bounce_x=1.0,
                  collide_world_bounds=True)
    physics_system(w3, 0.05)
    assert approx(w3.get(e3, Position).x, 10.0)
    assert approx(w3.get(e3, Velocity).x, 200.0)
    assert w3.get(e3, Body).blocked.left
    ok("Bounce 1 off the left wall keeps full speed")

    w4, _ = _world()
    e4 = _dynamic(w4, 12.0, 300.0, vx=-200.0)
    physics_system(w4, 0.05)
    assert approx(w4.get(e4, Position).x, 2.0)
    ok("Bodies without collide_world_bounds may leave the screen")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 4:  DYNAMIC vs STATIC
# ═══════════════════════════════════════════════════════════════════════

def test_landing_on_platform():
    print("\n=== 5: Landing on a platform ===")
    w, pw = _world()
    pw.add_collider(Player, Platform)
    plat = _platform(w, 400.0, 570.0)           # top edge at 554
    e = _dynamic(w, 400.0, 520.0, size=(32.0, 48.0), vy=400.0)
    physics_system(w, 0.05)
    pos, vel, body = w.get(e, Position), w.get(e, Velocity), w.get(e, Body)
    assert approx(pos.y, 530.0)
    assert vel.y == 0.0
    assert body.touching.down and body.on_floor
    ok("Lands on top, stops, touching.down set")

    ppos = w.get(plat, Position)
    assert (ppos.x, ppos.y) == (400.0, 570.0)
    assert w.get(plat, Body).touching.up
    ok("Static platform did not move")


def test_fast_fall_lands_on_top():
    print("\n=== 6: Deep penetration resolves from the previous position ===")
    w, pw = _world()
    pw.add_collider(Player, Platform)
    _platform(w, 500.0, 300.0, size=(200.0, 10.0))   # 295..305
    e = _dynamic(w, 500.0, 280.0, size=(10.0, 10.0), vy=400.0)
    physics_system(w, 0.05)                          # ends at y=300
    assert approx(w.get(e, Position).y, 290.0)
    ok("Body that sank past the middle still lands on top")


def test_side_hit():
    print("\n=== 7: Side hit ===")
    w, pw = _world()
    pw.add_collider(Player, Platform)
    _platform(w, 200.0, 300.0, size=(20.0, 200.0))   # left edge at 190
    e = _dynamic(w, 175.0, 300.0, vx=200.0, bounce_x=0.5)
    physics_system(w, 0.05)
    pos, vel, body = w.get(e, Position), w.get(e, Velocity), w.get(e, Body)
    assert approx(pos.x, 180.0)
    assert approx(vel.x, -100.0)
    assert body.touching.right and not body.touching.down
    ok("Pushed out to the left with velocity reflected × bounce")


def test_unregistered_pairs_pass_through():
    print("\n=== 8: No collider, no contact ===")
    w, _ = _world()
    _platform(w, 400.0, 570.0)
    e = _dynamic(w, 400.0, 520.0, size=(32.0, 48.0), vy=400.0)
    physics_system(w, 0.05)
    assert approx(w.get(e, Position).y, 540.0)
    assert not w.get(e, Body).touching.down
    ok("Bodies only collide with registered tag pairs")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 5:  OVERLAPS
# ═══════════════════════════════════════════════════════════════════════

def test_overlap_callbacks():
    print("\n=== 9: Overlap callbacks ===")
    w, pw = _world()
    hits: list[tuple[int, int]] = []
    pw.add_overlap(Player, Star, lambda world, a, b: hits.append((a, b)))
    p = _dynamic(w, 300.0, 300.0)
    s = _dynamic(w, 305.0, 305.0, tag=Star)
    _dynamic(w, 600.0, 300.0, tag=Star)
    physics_system(w, 0.016)
    assert hits == [(p, s)]
    ok("Callback fired once with (player, star); distant star ignored")

    hits.clear()
    w.get(s, Body).enabled = False
    physics_system(w, 0.016)
    assert hits == []
    ok("Disabled bodies do not overlap")

    w.get(s, Body).enabled = True
    w.kill(s)
    physics_system(w, 0.016)
    assert hits == []
    ok("Dead entities do not overlap")


def test_overlap_callback_can_pause():
    print("\n=== 10: A callback that pauses physics ends the pass ===")
    w, pw = _world()
    hits: list[int] = []

    def _stop(world, a, b):
        hits.append(b)
        pw.paused = True

    pw.add_overlap(Player, Star, _stop)
    _dynamic(w, 300.0, 300.0)
    _dynamic(w, 300.0, 300.0, tag=Star)
    _dynamic(w, 302.0, 300.0, tag=Star)
    physics_system(w, 0.016)
    assert len(hits) == 1
    ok("Only the first overlap is reported")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 6:  SCALING
# ═══════════════════════════════════════════════════════════════════════

def test_set_scale_keeps_feet_planted():
    print("\n=== 11: set_scale ===")
    w, _ = _world()
    e = _dynamic(w, 100.0, 500.0, size=(32.0, 48.0))
    set_scale(w, e, 1.1, 1.1)
    pos, body = w.get(e, Position), w.get(e, Body)
    assert approx(body.w, 35.2) and approx(body.h, 52.8)
    assert approx(pos.y + body.h / 2, 524.0)
    ok("Grown body keeps its bottom edge at y=524")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("AABB helpers", test_aabb_helpers),
        ("Gravity", test_gravity_and_dt_clamp),
        ("Paused", test_paused_world_is_frozen),
        ("World bounds", test_world_bounds_bounce),
        ("Landing", test_landing_on_platform),
        ("Fast fall", test_fast_fall_lands_on_top),
        ("Side hit", test_side_hit),
        ("Unregistered pairs", test_unregistered_pairs_pass_through),
        ("Overlaps", test_overlap_callbacks),
        ("Overlap pause", test_overlap_callback_can_pause),
        ("Scaling", test_set_scale_keeps_feet_planted),
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
    print(f"  Physics Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
