from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from mazechase.config import GameConfig
from mazechase.core.maze import Cell, Maze


class AssetLoadError(RuntimeError):
    pass


class MazeLoadError(AssetLoadError):
    pass


class ConfigLoadError(AssetLoadError):
    pass


@dataclass(frozen=True, slots=True)
class MazeLayout:
    """A decoded maze plus the spawn data derived from it."""

    maze: Maze
    player_start: tuple[int, int]
    ghost_starts: tuple[tuple[int, int], ...]
    num_dots: int


def parse_maze(text: str, *, source: str = "<string>") -> MazeLayout:
    rows = text.splitlines()
    while rows and rows[-1] == "":
        rows.pop()

    if not rows:
        raise MazeLoadError(f"Empty maze: {source}")

    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise MazeLoadError(f"Maze rows must be equal length in {source}: row {i} has {len(row)}, expected {width}")

    maze = Maze(rows=rows)

    players = maze.positions_of(Cell.player_spawn)
    if not players:
        raise MazeLoadError(f"No player spawn ('{Cell.player_spawn}') in {source}")

    return MazeLayout(
        maze=maze,
        player_start=players[0],
        ghost_starts=tuple(maze.positions_of(Cell.ghost_spawn)),
        num_dots=maze.count(Cell.dot),
    )


def load_maze(path: Path) -> MazeLayout:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MazeLoadError(f"Maze file not readable: {path}") from e
    return parse_maze(raw, source=str(path))


def load_config(path: Path) -> GameConfig:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Config file not readable: {path}") from e

    try:
        return GameConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid config in {path}: {e}") from e
