from __future__ import annotations

import random

from mazechase.core.events import Direction
from mazechase.core.maze import Maze


_DIRECTIONS: tuple[Direction, ...] = (Direction.up, Direction.down, Direction.right, Direction.left)


def resolve(row: int, col: int, direction: Direction | None, maze: Maze) -> tuple[int, int]:
    """Return the position reached by stepping once in `direction`.

    Each axis wraps independently. Stepping into a wall leaves the position unchanged,
    and so does `direction=None` (no input this tick).
    """

    new_row, new_col = row, col

    match direction:
        case Direction.up:
            new_row = (row - 1) % maze.height
        case Direction.down:
            new_row = (row + 1) % maze.height
        case Direction.right:
            new_col = (col + 1) % maze.width
        case Direction.left:
            new_col = (col - 1) % maze.width
        case None:
            return row, col

    if maze.is_wall(new_row, new_col):
        return row, col
    return new_row, new_col


def random_direction(rng: random.Random) -> Direction:
    return rng.choice(_DIRECTIONS)
