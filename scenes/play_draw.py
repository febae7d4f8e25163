"""scenes/play_draw.py — Rendering helpers for the play scene.

All pure-draw functions live here so that PlayScene.draw() stays thin.
Every function receives the data it needs as parameters — no implicit
coupling to the scene object.
"""

from __future__ import annotations
import pygame
from core.app import App
from core.assets import AssetStore
from core.collision import aabb_of
from core.constants import (
    TEX_BACKGROUND, FALLBACK_COLORS,
    DEBUG_DYNAMIC_COLOR, DEBUG_STATIC_COLOR, DEBUG_VELOCITY_COLOR,
)
from core.tuning import get as _tun
from core.colors import parse_color
from components import Position, Velocity, Body, Sprite, HitFlash, Score


# ── Background ─────────────────────────────────────────────────────

def draw_background(surface: pygame.Surface, assets: AssetStore):
    """Background image pinned at the top-left corner (origin 0, 0)."""
    surface.fill(FALLBACK_COLORS[TEX_BACKGROUND])
    bg = assets.image(TEX_BACKGROUND)
    if bg is not None:
        surface.blit(bg, (0, 0))


# ── Sprites ────────────────────────────────────────────────────────

def draw_sprites(surface: pygame.Surface, world, assets: AssetStore,
                 time: float = 0.0):
    """Every visible sprite, low layer first, centred on its body."""
    entries = []
    for eid, pos, sprite, body in world.query(Position, Sprite, Body):
        if sprite.visible:
            entries.append((sprite.layer, eid, pos, sprite, body))
    entries.sort(key=lambda e: (e[0], e[1]))

    for _, eid, pos, sprite, body in entries:
        tint = sprite.tint
        flash = world.get(eid, HitFlash)
        # blink at ~15 Hz while flashing
        if flash is not None and int(time * 30) % 2 == 0:
            tint = flash.color
        size = (max(1, round(body.w)), max(1, round(body.h)))
        img = assets.render(sprite.texture, sprite.frame, size, tint)
        if img is None:
            rect = pygame.Rect(0, 0, *size)
            rect.center = (round(pos.x), round(pos.y))
            pygame.draw.rect(surface, tint or (255, 0, 255), rect)
            continue
        surface.blit(img, img.get_rect(center=(round(pos.x), round(pos.y))))


# ── Particles ──────────────────────────────────────────────────────

def draw_particles(pm, surface: pygame.Surface):
    for p in pm.particles:
        t = p.alpha
        alpha = int(255 * t)
        r, g, b = p.color
        radius = max(1, int(p.size * t))
        sx, sy = int(p.x), int(p.y)
        if alpha >= 250:
            pygame.draw.circle(surface, (r, g, b), (sx, sy), radius)
        else:
            d = radius * 2 + 2
            dot = pygame.Surface((d, d), pygame.SRCALPHA)
            pygame.draw.circle(dot, (r, g, b, alpha), (d // 2, d // 2), radius)
            surface.blit(dot, (sx - d // 2, sy - d // 2))


# ── HUD ────────────────────────────────────────────────────────────

def score_label(score: Score) -> str:
    return f"{_tun('hud', 'label', 'Stars Collected')}: {score.score}"


def draw_hud(surface: pygame.Surface, app: App, score: Score):
    x, y = _tun("hud", "pos", [16, 16])
    font = app.get_font(int(_tun("hud", "size", 20)))
    color = parse_color(_tun("hud", "color", "#fff"))
    app.draw_text(surface, score_label(score), int(x), int(y), color, font=font)


# ── Debug ──────────────────────────────────────────────────────────

def draw_debug_bodies(surface: pygame.Surface, world):
    """Outline every enabled body; velocity as a short line."""
    for eid, pos, body in world.query(Position, Body):
        if not body.enabled:
            continue
        l, t, r, b = aabb_of(pos.x, pos.y, body.w, body.h)
        rect = pygame.Rect(round(l), round(t), max(1, round(r - l)), max(1, round(b - t)))
        color = DEBUG_STATIC_COLOR if body.static else DEBUG_DYNAMIC_COLOR
        pygame.draw.rect(surface, color, rect, 1)
        vel = world.get(eid, Velocity)
        if vel is not None and not body.static:
            start = (round(pos.x), round(pos.y))
            end = (round(pos.x + vel.x * 0.1), round(pos.y + vel.y * 0.1))
            pygame.draw.line(surface, DEBUG_VELOCITY_COLOR, start, end, 1)
