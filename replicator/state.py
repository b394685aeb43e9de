"""Game states driven by the engine loop, and frame timing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from replicator.action import ActionEvent


class Transition(Enum):
    """What the engine should do after a state callback."""

    NONE = auto()
    QUIT = auto()


class State:
    """Base state; subclasses override the callbacks they care about."""

    def on_start(self, registry: Any) -> Transition:
        """Called once when the state becomes active."""
        return Transition.NONE

    def update(self, registry: Any) -> Transition:
        """Called once per frame."""
        return Transition.NONE

    def on_close(self, registry: Any) -> Transition:
        """Called when the window is asked to close."""
        return Transition.QUIT

    def on_action(self, registry: Any, action: ActionEvent) -> Transition:
        """Called for every triggered action."""
        return Transition.NONE

    def on_mouse_move(self, registry: Any, mouse_x: float, mouse_y: float) -> Transition:
        """Called when the mouse moves."""
        return Transition.NONE


@dataclass
class DeltaTime:
    """Time elapsed since the previous frame, in seconds."""

    value: float