"""ui.modal — Modal base class and the stack that layers them.

A modal is an overlay drawn above the level (the game-over screen).
While any modal is open the scene routes input to the topmost one
instead of the player, and acts on the ``UICommand`` list it returns.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

import pygame

if TYPE_CHECKING:
    from ui.commands import UICommand

M = TypeVar("M", bound="Modal")


class Modal(ABC):
    """Base class for all UI modals."""

    def on_open(self) -> None:
        """Called when this modal is pushed onto the stack."""

    def on_close(self) -> None:
        """Called when this modal is popped from the stack."""

    def update(self, dt: float) -> None:
        """Tick timers / animations.  Most modals have none."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        """Process one pygame event; return commands for the scene."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, app) -> None:
        """Render the modal onto *surface*."""


class ModalStack:
    """Ordered modals: events/update go to the top, draw goes to all."""

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[Modal] = []

    @property
    def active(self) -> Modal | None:
        return self._stack[-1] if self._stack else None

    @property
    def is_open(self) -> bool:
        return bool(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def find(self, kind: type[M]) -> M | None:
        """Topmost open modal of type *kind*, if any."""
        for modal in reversed(self._stack):
            if isinstance(modal, kind):
                return modal
        return None

    def push(self, modal: Modal) -> None:
        self._stack.append(modal)
        modal.on_open()

    def pop(self) -> Modal | None:
        if not self._stack:
            return None
        modal = self._stack.pop()
        modal.on_close()
        return modal

    def clear(self) -> None:
        while self._stack:
            self.pop()

    def handle_event(self, event: pygame.event.Event) -> list:
        if self._stack:
            return self._stack[-1].handle_event(event)
        return []

    def update(self, dt: float) -> None:
        if self._stack:
            self._stack[-1].update(dt)

    def draw(self, surface: pygame.Surface, app) -> None:
        for modal in self._stack:
            modal.draw(surface, app)
