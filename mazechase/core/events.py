from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Literal


class Direction(StrEnum):
    up = "UP"
    down = "DOWN"
    right = "RIGHT"
    left = "LEFT"


InputEventType = Literal["MOVE", "CANCEL"]


@dataclass(frozen=True, slots=True)
class InputEvent:
    """A decoded keypress delivered by the input reader."""

    type: InputEventType
    direction: Direction | None = None

    @staticmethod
    def move(direction: Direction) -> "InputEvent":
        return InputEvent(type="MOVE", direction=direction)

    @staticmethod
    def cancel() -> "InputEvent":
        return InputEvent(type="CANCEL")

    @property
    def is_cancel(self) -> bool:
        return self.type == "CANCEL"


EventType = Literal[
    "DOT_EATEN",
    "PILL_EATEN",
    "PLAYER_CAUGHT",
    "GAME_OVER",
]


@dataclass(frozen=True, slots=True)
class GameEvent:
    type: EventType
    tick: int
    payload: dict[str, Any]
