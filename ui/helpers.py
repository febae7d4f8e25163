"""ui.helpers — Shared drawing utilities for modals."""

from __future__ import annotations
import pygame


def draw_text_box(surface: pygame.Surface, font: pygame.font.Font, text: str,
                  center: tuple[int, int], fg: tuple, bg: tuple | None = None,
                  pad: int = 0) -> pygame.Rect:
    """Draw *text* centred on *center* inside an optional padded box.

    Returns the box rect (text rect grown by *pad* on every side).
    """
    img = font.render(text, True, fg)
    box = img.get_rect(center=center).inflate(pad * 2, pad * 2)
    if bg is not None:
        pygame.draw.rect(surface, bg, box)
    surface.blit(img, img.get_rect(center=box.center))
    return box
