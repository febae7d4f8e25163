"""
core/app.py — Pygame application shell

Owns the window, the main loop, the scene stack, the shared ECS world
and the asset store.  Everything is drawn to a fixed virtual surface
(the game's design resolution) that is scaled to the window each frame,
so resizing or F11 fullscreen never changes game coordinates.

    app = App(title="Star Catcher", width=1024, height=640)
    app.push_scene(PlayScene())
    app.run()
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.ecs import World
from core.assets import AssetStore


class App:
    def __init__(self, title: str = "Star Catcher", width: int = 1024,
                 height: int = 640, fps: int = 60):
        pygame.init()
        self._windowed_size = (width, height)
        # The virtual (design) resolution — all game rendering targets this.
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = fps
        self.dt = 0.0

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

        # The ECS world — shared across all scenes
        self.world = World()

        # Images / spritesheets, shared across scenes
        self.assets = AssetStore()

        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self.font = self.get_font(14)

    @property
    def width(self) -> int:
        return self._virtual_size[0]

    @property
    def height(self) -> int:
        return self._virtual_size[1]

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        if not scene.preloaded:
            scene.preload(self)
            scene.preloaded = True
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)

    # -- Coordinate mapping --

    def to_virtual(self, pos: tuple[int, int]) -> tuple[int, int]:
        """Map a window pixel to the virtual surface."""
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        return int(pos[0] * vw / sw), int(pos[1] * vh / sh)

    def _remap_mouse_event(self, event: pygame.event.Event) -> pygame.event.Event:
        attrs = dict(event.dict)
        attrs["pos"] = self.to_virtual(event.pos)
        return pygame.event.Event(event.type, attrs)

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    # Remap mouse positions to virtual surface coordinates
                    if event.type in (pygame.MOUSEBUTTONDOWN,
                                      pygame.MOUSEBUTTONUP,
                                      pygame.MOUSEMOTION):
                        event = self._remap_mouse_event(event)
                    self.scene.handle_event(event, self)

            # Update
            if self.scene:
                self.scene.update(self.dt, self)

            # Draw to the fixed-size virtual surface, then scale to screen
            if self.scene:
                self.scene.draw(self._render_surface, self)

            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Convenience --

    def get_font(self, size: int, bold: bool = False) -> pygame.font.Font:
        """Cached monospace font of *size* px."""
        key = (size, bold)
        f = self._fonts.get(key)
        if f is None:
            f = pygame.font.SysFont("monospace", size, bold=bold)
            self._fonts[key] = f
        return f

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        rect = surface.blit(img, (x, y))
        return rect

    def draw_text_centered(self, surface: pygame.Surface, text: str,
                           cx: int, cy: int, color=(255, 255, 255),
                           font=None) -> pygame.Rect:
        """Draw text with its centre at (cx, cy)."""
        f = font or self.font
        img = f.render(text, True, color)
        rect = img.get_rect(center=(cx, cy))
        return surface.blit(img, rect)
