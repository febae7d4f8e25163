"""ui — Modal UI framework.

Provides a ``ModalStack`` that manages layered modal overlays.  Each
modal is a self-contained ``Modal`` subclass with its own input / draw,
returning ``UICommand`` objects for the scene to apply.
"""

from ui.modal import Modal, ModalStack
from ui.commands import RestartGame, UICommand
from ui.button import Button, ButtonStyle
from ui.game_over_modal import GameOverModal

__all__ = [
    "Modal", "ModalStack",
    "RestartGame", "UICommand",
    "Button", "ButtonStyle",
    "GameOverModal",
]
