"""Named actions triggered by bound input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ActionType(Enum):
    """Whether an action started or stopped."""

    ON = auto()
    OFF = auto()
    NONE = auto()


@dataclass(frozen=True)
class ActionEvent:
    """An action of a given type, identified by name."""

    type: ActionType
    name: str