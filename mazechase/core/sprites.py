from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class GhostMode(StrEnum):
    normal = "Normal"
    blue = "Blue"


@dataclass(slots=True)
class Sprite:
    """A positioned actor with a fixed respawn location."""

    row: int
    col: int
    start_row: int
    start_col: int

    @staticmethod
    def at(row: int, col: int) -> "Sprite":
        return Sprite(row=row, col=col, start_row=row, start_col=col)

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def move_to(self, row: int, col: int) -> None:
        self.row, self.col = row, col

    def respawn(self) -> None:
        self.row, self.col = self.start_row, self.start_col


@dataclass(slots=True)
class Ghost:
    sprite: Sprite
    mode: GhostMode = GhostMode.normal


@dataclass(slots=True)
class GhostCohort:
    """The fixed ghost collection plus the lock guarding ghost mode.

    Contract:
      - positions are only touched by the game loop thread, so they're read directly.
      - mode is written by the power-up timer thread; every mode read/write goes
        through `set_mode()` / `modes()` which hold the lock for the whole cohort.
    """

    ghosts: tuple[Ghost, ...]
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @staticmethod
    def from_starts(starts: list[tuple[int, int]]) -> "GhostCohort":
        return GhostCohort(ghosts=tuple(Ghost(sprite=Sprite.at(r, c)) for r, c in starts))

    def __iter__(self) -> Iterator[Ghost]:
        return iter(self.ghosts)

    def __len__(self) -> int:
        return len(self.ghosts)

    def set_mode(self, mode: GhostMode) -> None:
        with self._lock:
            for g in self.ghosts:
                g.mode = mode

    def modes(self) -> list[GhostMode]:
        with self._lock:
            return [g.mode for g in self.ghosts]
