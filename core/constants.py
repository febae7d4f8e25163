"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers that are *not* tuning knobs (those live in
``data/tuning.toml``).  Everything here is structural: texture keys,
draw layers, animation names, fallback colours.

Coordinate System
-----------------
All positions are in **pixels** on the 1024×640 virtual surface,
origin top-left, +y down.  An entity's ``Position`` is the *centre* of
its body, matching the placement numbers in ``[platforms]`` and
``[player]``.
"""

# ── Texture keys ────────────────────────────────────────────────────
TEX_BACKGROUND = "bg"
TEX_GROUND     = "ground"
TEX_STAR       = "star"
TEX_BOMB       = "bomb"
TEX_PLAYER     = "dude"

# ── Sound keys ──────────────────────────────────────────────────────
SND_COIN = "coinSound"
SND_JUMP = "jumpSound"
SND_BOMB = "bombSound"
SND_BGM  = "bgm"

# ── Animation keys ──────────────────────────────────────────────────
ANIM_LEFT  = "left"
ANIM_TURN  = "turn"
ANIM_RIGHT = "right"

# ── Draw layers (low → high) ────────────────────────────────────────
LAYER_PLATFORM = 0
LAYER_STAR     = 1
LAYER_BOMB     = 2
LAYER_PLAYER   = 3

# ── Placeholder colours (used when an image file is missing) ────────
FALLBACK_COLORS = {
    TEX_BACKGROUND: (24, 32, 64),
    TEX_GROUND:     (70, 160, 60),
    TEX_STAR:       (255, 220, 40),
    TEX_BOMB:       (60, 60, 60),
    TEX_PLAYER:     (235, 235, 235),
}

# Debug body outlines
DEBUG_DYNAMIC_COLOR = (255, 0, 255)
DEBUG_STATIC_COLOR  = (0, 0, 255)
DEBUG_VELOCITY_COLOR = (0, 255, 0)
