"""
scenes/play_scene.py — The level

One screen: ground and three ledges, a player who runs and jumps,
stars that fall and bounce, bombs that appear every tenth star.

    preload   images, spritesheet, sounds
    on_enter  build the level and wire physics / audio / particles
    update    input → systems tick; game-over modal when a bomb hits

Keys: ←/→ (A/D) run, ↑ (W/Space) jump, F3 body outlines, M mute,
F5 reload tuning (command-line flags are kept).  On the game-over screen:
click Restart or Enter.
"""

from __future__ import annotations
import os
import pygame

from core.app import App
from core.scene import Scene
from core import tuning as tuning_mod
from core.tuning import get as _tun
from core.constants import (
    TEX_BACKGROUND, TEX_GROUND, TEX_STAR, TEX_BOMB, TEX_PLAYER, SND_BGM,
)
from core.events import EventBus
from components import GameClock, GameState, Score
from logic.animation import AnimationSet
from logic.audio import SoundBank, load_level_sounds, wire_audio
from logic.input_manager import InputManager, InputContext
from logic.particles import ParticleManager, wire_particles
from logic.physics import PhysicsWorld
from logic.rules import wire_physics, restart
from logic.spawning import create_platforms, create_player, create_star_row
from logic.tick import tick_systems
from scenes.play_draw import (
    draw_background, draw_sprites, draw_particles, draw_hud, draw_debug_bodies,
)
from ui import ModalStack, GameOverModal, RestartGame


class PlayScene(Scene):
    def __init__(self, asset_root: str = ".", muted: bool = False):
        self.asset_root = asset_root
        self.input = InputManager()
        self.modals = ModalStack()
        self.sounds = SoundBank(muted=muted)
        self.player: int | None = None
        self._built = False

    # ── preload ──────────────────────────────────────────────────────

    def preload(self, app: App):
        root = self.asset_root
        a = app.assets

        def path(key: str, default: str) -> str:
            return os.path.join(root, _tun("assets", key, default))

        a.load_image(TEX_BACKGROUND, path("background", "assets/img/bg.png"),
                     fallback_size=(app.width, app.height))
        a.load_image(TEX_GROUND, path("ground", "assets/img/platform.png"),
                     fallback_size=tuple(_tun("platforms", "base_size", [400, 32])))
        a.load_image(TEX_STAR, path("star", "assets/img/star.png"),
                     fallback_size=tuple(_tun("stars", "size", [24, 22])))
        a.load_image(TEX_BOMB, path("bomb", "assets/img/bomb.png"),
                     fallback_size=tuple(_tun("bombs", "size", [14, 14])))
        fw, fh = _tun("assets", "player_frame", [32, 48])
        a.load_spritesheet(TEX_PLAYER, path("player", "assets/img/dude.png"),
                           int(fw), int(fh))
        load_level_sounds(self.sounds, root)

    # ── create ───────────────────────────────────────────────────────

    def on_enter(self, app: App):
        if self._built:
            # revealed again after a scene above it was popped
            self.sounds.loop(SND_BGM)
            return
        self._built = True
        self.build(app)

    def build(self, app: App):
        """Construct the level from scratch in ``app.world``."""
        w = app.world
        w.clear()
        self.modals.clear()
        self.input.context = InputContext.GAMEPLAY

        bus = EventBus()
        w.set_res(bus)
        w.set_res(GameClock())
        w.set_res(Score())
        w.set_res(GameState(
            bomb_mode=str(_tun("rules", "bomb_mode", "game_over")),
            bomb_penalty=int(_tun("rules", "bomb_penalty", 1)),
            show_debug=bool(_tun("physics", "debug", False)),
        ))
        w.set_res(PhysicsWorld(
            width=app.width, height=app.height,
            gravity_y=float(_tun("physics", "gravity_y", 300.0)),
            rest_speed=float(_tun("physics", "rest_speed", 20.0)),
            max_dt=float(_tun("physics", "max_dt", 0.05)),
        ))
        w.set_res(AnimationSet.from_tuning())
        pm = ParticleManager()
        w.set_res(pm)
        w.set_res(self.sounds)

        create_platforms(w)
        self.player = create_player(w)
        create_star_row(w)

        wire_physics(w)
        wire_audio(bus, self.sounds)
        wire_particles(bus, pm)
        bus.subscribe("GameOver", lambda e: self._on_game_over(app))

        self.sounds.loop(SND_BGM)

    def on_exit(self, app: App):
        self.sounds.stop(SND_BGM)

    # ── game over ────────────────────────────────────────────────────

    def _on_game_over(self, app: App):
        if self.modals.find(GameOverModal) is None:
            self.modals.push(GameOverModal(app, app.width, app.height))
        self.input.context = InputContext.UI

    def _apply(self, cmds: list, app: App):
        for cmd in cmds:
            if isinstance(cmd, RestartGame):
                self.modals.clear()
                restart(app.world)
                self.input.context = InputContext.GAMEPLAY

    # ── event handler ────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)
        if self.modals.is_open and event.type in (
                pygame.KEYDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            self._apply(self.modals.handle_event(event), app)

    # ── update ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        self.input.end_frame()
        state = app.world.res(GameState)

        if self.input.just("toggle_debug") and state:
            state.show_debug = not state.show_debug
        if self.input.just("toggle_mute"):
            self.sounds.toggle_mute()
        if self.input.just("reload_tuning"):
            tuning_mod.reload()

        self.modals.update(dt)
        playing = self.input.context == InputContext.GAMEPLAY
        tick_systems(app.world, dt, self.input if playing else None)
        self.input.begin_frame()

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        w = app.world
        draw_background(surface, app.assets)
        clock = w.res(GameClock)
        draw_sprites(surface, w, app.assets, clock.time if clock else 0.0)

        pm = w.res(ParticleManager)
        if pm:
            draw_particles(pm, surface)

        score = w.res(Score)
        if score:
            draw_hud(surface, app, score)

        state = w.res(GameState)
        if state and state.show_debug:
            draw_debug_bodies(surface, w)

        if self.modals.is_open:
            self.modals.draw(surface, app)
