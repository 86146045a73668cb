from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Cell(StrEnum):
    wall = "#"
    empty = " "
    dot = "."
    pill = "X"
    player_spawn = "P"
    ghost_spawn = "G"


@dataclass(slots=True)
class Maze:
    """Rectangular grid of single-character cells.

    Rows are assumed equal length; the loader validates that before a Maze is built.
    The only mutation is `clear()`, used when an actor consumes a dot or pill.
    """

    rows: list[str]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        # Rectangular grid: any row's width will do.
        return len(self.rows[0])

    def cell_at(self, row: int, col: int) -> Cell:
        try:
            return Cell(self.rows[row][col])
        except ValueError:
            return Cell.empty

    def is_wall(self, row: int, col: int) -> bool:
        return self.rows[row][col] == Cell.wall

    def clear(self, row: int, col: int) -> None:
        line = self.rows[row]
        self.rows[row] = line[:col] + Cell.empty + line[col + 1 :]

    def count(self, cell: Cell) -> int:
        return sum(line.count(cell) for line in self.rows)

    def positions_of(self, cell: Cell) -> list[tuple[int, int]]:
        return [(r, c) for r, line in enumerate(self.rows) for c, ch in enumerate(line) if ch == cell]
