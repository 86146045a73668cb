from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum

from mazechase.assets.loader import MazeLayout
from mazechase.core.events import GameEvent
from mazechase.core.maze import Maze
from mazechase.core.sprites import GhostCohort, Sprite


class GamePhase(StrEnum):
    running = "running"
    won = "won"
    lost = "lost"


@dataclass(slots=True)
class GameState:
    """Everything a game tick reads or mutates.

    Only the game loop thread touches these fields, except ghost mode which is
    guarded inside `ghosts` (see GhostCohort).
    """

    maze: Maze
    player: Sprite
    ghosts: GhostCohort
    dots_remaining: int
    lives: int = 3
    score: int = 0
    phase: GamePhase = GamePhase.running
    tick: int = 0
    history: list[GameEvent] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.phase != GamePhase.running

    def summary(self) -> str:
        """One-line end-of-game report built from the event history."""

        counts = Counter(e.type for e in self.history)
        outcome = "You won!" if self.phase == GamePhase.won else "Game over."
        return (
            f"{outcome} Score: {self.score} \tTicks: {self.tick} \t"
            f"Dots: {counts['DOT_EATEN']} \tPills: {counts['PILL_EATEN']} \tCaught: {counts['PLAYER_CAUGHT']}"
        )


def new_game(*, layout: MazeLayout, lives: int = 3) -> GameState:
    return GameState(
        maze=layout.maze,
        player=Sprite.at(*layout.player_start),
        ghosts=GhostCohort.from_starts(list(layout.ghost_starts)),
        dots_remaining=layout.num_dots,
        lives=lives,
    )
