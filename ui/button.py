"""ui/button.py — Clickable text button with hover styling.

    btn = Button("Restart", center=(512, 420), font=app.get_font(25, bold=True),
                 style=ButtonStyle(fg="#bf0000", bg="#f00", pad=10),
                 hover_style=ButtonStyle(fg="#000", bg="#800000", pad=12),
                 rest_style=ButtonStyle(fg="#fff", bg="#f00", pad=10))

``style`` is used until the pointer first leaves the button, after
which ``rest_style`` takes over.  A left-button *release* over the
button counts as a click.
"""

from __future__ import annotations
from dataclasses import dataclass

import pygame

from core.colors import parse_color
from ui.helpers import draw_text_box


@dataclass(frozen=True)
class ButtonStyle:
    fg: object = "#fff"
    bg: object = "#f00"
    pad: int = 10

    @property
    def fg_rgb(self) -> tuple[int, int, int]:
        return parse_color(self.fg)

    @property
    def bg_rgb(self) -> tuple[int, int, int]:
        return parse_color(self.bg)


class Button:
    def __init__(self, text: str, center: tuple[int, int], font: pygame.font.Font,
                 style: ButtonStyle, hover_style: ButtonStyle | None = None,
                 rest_style: ButtonStyle | None = None):
        self.text = text
        self.center = center
        self.font = font
        self.style = style
        self.hover_style = hover_style or style
        self.rest_style = rest_style or style
        self.hovered = False
        self.rect = self._rect_for(self.style)

    @property
    def current_style(self) -> ButtonStyle:
        return self.hover_style if self.hovered else self.style

    def _rect_for(self, style: ButtonStyle) -> pygame.Rect:
        w, h = self.font.size(self.text)
        rect = pygame.Rect(0, 0, w + style.pad * 2, h + style.pad * 2)
        rect.center = self.center
        return rect

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track hover; return True when the button was clicked."""
        if event.type == pygame.MOUSEMOTION:
            self._set_hover(self.rect.collidepoint(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self.rect.collidepoint(event.pos)
        return False

    def _set_hover(self, inside: bool) -> None:
        if inside == self.hovered:
            return
        if not inside:
            # pointer out: settle on the resting style from now on
            self.style = self.rest_style
        self.hovered = inside
        self.rect = self._rect_for(self.current_style)

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        st = self.current_style
        self.rect = draw_text_box(surface, self.font, self.text, self.center,
                                  st.fg_rgb, st.bg_rgb, st.pad)
        return self.rect
