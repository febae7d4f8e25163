"""ui/game_over_modal.py — "GAME OVER" banner with a Restart button."""

from __future__ import annotations
import pygame

from core.tuning import get as _tun
from core.colors import parse_color
from ui.button import Button, ButtonStyle
from ui.commands import RestartGame, UICommand
from ui.modal import Modal


def _style(name: str, fg: str, bg: str, pad: int) -> ButtonStyle:
    sec = f"ui.restart_button.{name}"
    return ButtonStyle(fg=_tun(sec, "fg", fg), bg=_tun(sec, "bg", bg),
                       pad=int(_tun(sec, "pad", pad)))


class GameOverModal(Modal):
    """Shown when a bomb ends the run.  Restart via click or Enter."""

    def __init__(self, app, width: int, height: int):
        self.width = width
        self.height = height
        self.title_font = app.get_font(int(_tun("ui", "game_over_size", 50)), bold=True)
        self.title_color = parse_color(_tun("ui", "game_over_color", "#fff"))
        offset = int(_tun("ui", "restart_offset", 100))
        self.button = Button(
            "Restart",
            center=(width // 2, height // 2 + offset),
            font=app.get_font(int(_tun("ui", "restart_size", 25)), bold=True),
            style=_style("initial", "#bf0000", "#f00", 10),
            hover_style=_style("hover", "#000", "#800000", 12),
            rest_style=_style("rest", "#fff", "#f00", 10),
        )

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN,
                                                          pygame.K_KP_ENTER):
            return [RestartGame()]
        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            if self.button.handle_event(event):
                return [RestartGame()]
        return []

    def draw(self, surface: pygame.Surface, app):
        app.draw_text_centered(surface, "GAME OVER", self.width // 2,
                               self.height // 2, self.title_color,
                               font=self.title_font)
        self.button.draw(surface)
