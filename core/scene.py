"""
core/scene.py — Scene interface

The app holds a stack of scenes; only the top one gets events, updates
and draws.  A scene's life runs in three phases:

    preload    load images / sounds, once, before it first shows
    on_enter   build the world (create), or resume when revealed again
    update     advance one frame

``App.push_scene`` sets ``preloaded`` after the first preload.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    preloaded: bool = False

    def preload(self, app: App):
        pass

    def on_enter(self, app: App):
        """Pushed, or revealed by the scene above it being popped."""
        pass

    def on_exit(self, app: App):
        """Popped, or covered by a new scene."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        """*dt* is in seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
