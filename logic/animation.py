"""logic/animation.py — Spritesheet frame animations.

An ``Animation`` is a named list of frame indices played at a fixed
frame rate.  ``repeat = -1`` loops forever; ``repeat = 0`` plays once
and holds the last frame.

    anims = AnimationSet.from_tuning()
    play(world.get(player, Animator), "left")
    animation_system(world, anims, dt)      # writes Sprite.frame
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from components import Sprite, Animator
from core.constants import ANIM_LEFT, ANIM_TURN, ANIM_RIGHT
from core.tuning import get as _tun

if TYPE_CHECKING:
    from core.ecs import World


@dataclass
class Animation:
    key: str
    frames: list[int]
    frame_rate: float = 10.0
    repeat: int = 0

    def __post_init__(self):
        if not self.frames:
            raise ValueError(f"animation {self.key!r} has no frames")
        if self.frame_rate <= 0:
            raise ValueError(f"animation {self.key!r} needs a positive frame_rate")


def frame_range(start: int, end: int) -> list[int]:
    """Inclusive frame numbers, like a spritesheet's start..end."""
    return list(range(start, end + 1))


@dataclass
class AnimationSet:
    """Animations by key (a world resource)."""
    anims: dict[str, Animation] = field(default_factory=dict)

    def add(self, anim: Animation) -> None:
        self.anims[anim.key] = anim

    def get(self, key: str) -> Animation | None:
        return self.anims.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.anims

    @classmethod
    def from_tuning(cls) -> "AnimationSet":
        """Player walk cycle: left 0-3, turn 4, right 5-8."""
        s = cls()
        for key, start, end, rate, repeat in (
            (ANIM_LEFT, 0, 3, 10.0, -1),
            (ANIM_TURN, 4, 4, 20.0, 0),
            (ANIM_RIGHT, 5, 8, 10.0, -1),
        ):
            sec = f"animations.{key}"
            s.add(Animation(
                key=key,
                frames=frame_range(int(_tun(sec, "start", start)),
                                   int(_tun(sec, "end", end))),
                frame_rate=float(_tun(sec, "frame_rate", rate)),
                repeat=int(_tun(sec, "repeat", repeat)),
            ))
        return s


def play(animator: Animator, key: str, ignore_if_playing: bool = True) -> None:
    """Start *key* on *animator*.

    With ``ignore_if_playing`` a call for the animation that is already
    running keeps its current frame, so calling this every frame while
    a key is held does not restart the cycle.
    """
    if ignore_if_playing and animator.current == key and not animator.finished:
        return
    animator.current = key
    animator.elapsed = 0.0
    animator.index = 0
    animator.finished = False


def step(animator: Animator, anim: Animation, dt: float) -> int:
    """Advance *animator* by *dt*; return the spritesheet frame to show."""
    if animator.finished:
        return anim.frames[-1]
    animator.elapsed += dt
    period = 1.0 / anim.frame_rate
    while animator.elapsed >= period:
        animator.elapsed -= period
        if animator.index + 1 < len(anim.frames):
            animator.index += 1
        elif anim.repeat == -1:
            animator.index = 0
        else:
            animator.finished = True
            animator.index = len(anim.frames) - 1
            break
    return anim.frames[animator.index]


def animation_system(world: "World", anims: AnimationSet, dt: float) -> None:
    for eid, sprite, animator in world.query(Sprite, Animator):
        anim = anims.get(animator.current)
        if anim is None:
            continue
        sprite.frame = step(animator, anim, dt)
