"""core/assets.py — Image and spritesheet registry.

Keeps loaded surfaces by key so the rest of the code can refer to
``"star"`` or ``"dude"`` without juggling paths.  Loading never fails:
a missing or unreadable file is replaced by a generated placeholder and
reported once.

    assets = AssetStore()
    assets.load_image("star", "assets/img/star.png", fallback_size=(24, 22))
    assets.load_spritesheet("dude", "assets/img/dude.png", 32, 48)
    surf = assets.render("dude", frame=5, size=(32, 48), tint=(255, 0, 0))
"""

from __future__ import annotations
import os
import pygame
from core.constants import FALLBACK_COLORS


def _convert(surf: pygame.Surface) -> pygame.Surface:
    # convert_alpha() needs a display mode; headless tests have none.
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return surf.convert_alpha()
    return surf


class AssetStore:
    """Surfaces by key, plus a cache of scaled / tinted variants."""

    def __init__(self):
        self._images: dict[str, pygame.Surface] = {}
        self._frames: dict[str, list[pygame.Surface]] = {}
        self._cache: dict[tuple, pygame.Surface] = {}
        self.missing: set[str] = set()

    # ── loading ─────────────────────────────────────────────────────

    def load_image(self, key: str, path: str,
                   fallback_size: tuple[int, int] = (32, 32)) -> pygame.Surface:
        surf = self._read(key, path)
        if surf is None:
            surf = pygame.Surface(fallback_size, pygame.SRCALPHA)
            surf.fill(FALLBACK_COLORS.get(key, (200, 0, 200)))
        self._images[key] = surf
        self._frames[key] = [surf]
        return surf

    def load_spritesheet(self, key: str, path: str, frame_w: int, frame_h: int,
                         fallback_frames: int = 9) -> list[pygame.Surface]:
        """Cut *path* into a row-major list of frame_w×frame_h frames."""
        sheet = self._read(key, path)
        if sheet is None:
            frames = _placeholder_figure(frame_w, frame_h, fallback_frames,
                                         FALLBACK_COLORS.get(key, (235, 235, 235)))
        else:
            cols = max(1, sheet.get_width() // frame_w)
            rows = max(1, sheet.get_height() // frame_h)
            frames = [
                sheet.subsurface(pygame.Rect(c * frame_w, r * frame_h, frame_w, frame_h))
                for r in range(rows) for c in range(cols)
            ]
        self._images[key] = frames[0]
        self._frames[key] = frames
        return frames

    def _read(self, key: str, path: str) -> pygame.Surface | None:
        if not os.path.exists(path):
            print(f'[ASSETS] "{path}" not found for "{key}" — using placeholder')
            self.missing.add(key)
            return None
        try:
            return _convert(pygame.image.load(path))
        except pygame.error as ex:
            print(f'[ASSETS] failed to load "{path}" for "{key}": {ex}')
            self.missing.add(key)
            return None

    # ── lookup ──────────────────────────────────────────────────────

    def image(self, key: str) -> pygame.Surface | None:
        return self._images.get(key)

    def frames(self, key: str) -> list[pygame.Surface]:
        return self._frames.get(key, [])

    def frame_count(self, key: str) -> int:
        return len(self._frames.get(key, []))

    def render(self, key: str, frame: int = 0,
               size: tuple[int, int] | None = None,
               tint: tuple[int, int, int] | None = None) -> pygame.Surface | None:
        """Return frame *frame* of *key*, scaled to *size* and tinted.

        Tinting multiplies RGB channels and keeps alpha, so a white
        pixel takes the tint colour exactly.
        """
        frames = self._frames.get(key)
        if not frames:
            return None
        frame = frame % len(frames)
        cache_key = (key, frame, size, tint)
        surf = self._cache.get(cache_key)
        if surf is not None:
            return surf
        surf = frames[frame]
        if size is not None and size != surf.get_size():
            w, h = max(1, int(size[0])), max(1, int(size[1]))
            if surf.get_bitsize() in (24, 32):
                surf = pygame.transform.smoothscale(surf, (w, h))
            else:
                # paletted images can't be smoothscaled
                surf = pygame.transform.scale(surf, (w, h))
        else:
            surf = surf.copy()
        if tint is not None:
            surf.fill((*tint, 255), special_flags=pygame.BLEND_RGBA_MULT)
        self._cache[cache_key] = surf
        return surf


def _placeholder_figure(w: int, h: int, count: int,
                        color: tuple[int, int, int]) -> list[pygame.Surface]:
    """Simple stick-box figure: frames 0-3 face left, 4 front, 5+ right."""
    frames: list[pygame.Surface] = []
    mid = count // 2
    for i in range(count):
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        body = pygame.Rect(w // 4, h // 4, w // 2, h // 2)
        pygame.draw.rect(surf, color, body)
        pygame.draw.circle(surf, color, (w // 2, h // 6), max(2, w // 6))
        if i < mid:
            eye_x = w // 2 - w // 8
        elif i == mid:
            eye_x = w // 2
        else:
            eye_x = w // 2 + w // 8
        pygame.draw.circle(surf, (20, 20, 20), (eye_x, h // 6), 2)
        # legs alternate for the walk cycles
        step = (i % 2) * (w // 8) if i != mid else 0
        pygame.draw.line(surf, color, (w // 2 - 3, h * 3 // 4),
                         (w // 2 - 3 - step, h - 1), 3)
        pygame.draw.line(surf, color, (w // 2 + 3, h * 3 // 4),
                         (w // 2 + 3 + step, h - 1), 3)
        frames.append(surf)
    return frames
