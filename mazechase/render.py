from __future__ import annotations

from typing import TextIO

from mazechase.config import GameConfig
from mazechase.core.maze import Cell
from mazechase.core.sprites import GhostMode
from mazechase.game_state import GameState
from mazechase.terminal import clear_screen, move_cursor, with_blue_background


class Renderer:
    """Full-screen ANSI redraw of the maze, actors, and score line."""

    def __init__(self, *, out: TextIO, config: GameConfig) -> None:
        self._out = out
        self._cfg = config

    def cursor(self, row: int, col: int) -> str:
        # Emoji glyphs take two terminal columns.
        if self._cfg.use_emoji:
            return move_cursor(row, col * 2)
        return move_cursor(row, col)

    def lives_text(self, lives: int) -> str:
        if self._cfg.use_emoji:
            return self._cfg.player * max(lives, 0)
        return str(lives)

    def frame(self, state: GameState) -> str:
        cfg = self._cfg
        parts: list[str] = [clear_screen()]

        for line in state.maze.rows:
            for ch in line:
                if ch == Cell.wall:
                    parts.append(with_blue_background(cfg.wall))
                elif ch == Cell.dot:
                    parts.append(cfg.dot)
                elif ch == Cell.pill:
                    parts.append(cfg.pill)
                else:
                    parts.append(cfg.space)
            parts.append("\n")

        parts.append(self.cursor(state.player.row, state.player.col))
        parts.append(cfg.player)

        for ghost, mode in zip(state.ghosts, state.ghosts.modes()):
            parts.append(self.cursor(ghost.sprite.row, ghost.sprite.col))
            parts.append(cfg.ghost_blue if mode == GhostMode.blue else cfg.ghost)

        parts.append(self.cursor(state.maze.height + 1, 0))
        parts.append(f"Score: {state.score} \tLives: {self.lives_text(state.lives)}\n")
        return "".join(parts)

    def draw(self, state: GameState) -> None:
        self._out.write(self.frame(state))
        self._out.flush()

    def draw_death(self, state: GameState) -> None:
        self._out.write(self.cursor(state.player.row, state.player.col) + self._cfg.death)
        self._out.write(self.cursor(state.maze.height + 2, 0))
        self._out.flush()
