"""ui.commands — Command objects emitted by modals.

Modals return these instead of directly mutating game state that lives
outside their scope.  The scene reads the list and applies each effect.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RestartGame:
    """Reset the level and close the game-over screen."""


# Every command a modal can return.
UICommand = RestartGame
