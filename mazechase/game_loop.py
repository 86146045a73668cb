from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from typing import Protocol

from mazechase.config import LoopConfig
from mazechase.core.events import Direction, GameEvent, InputEvent
from mazechase.core.maze import Cell
from mazechase.core.movement import random_direction, resolve
from mazechase.fsm import GameFSM
from mazechase.game_state import GamePhase, GameState
from mazechase.powerup import PowerUpCoordinator

logger = logging.getLogger(__name__)

DOT_POINTS = 1
PILL_POINTS = 10


class FrameSink(Protocol):
    def draw(self, state: GameState) -> None:  # pragma: no cover
        ...

    def draw_death(self, state: GameState) -> None:  # pragma: no cover
        ...


def move_player(*, state: GameState, direction: Direction | None, powerup: PowerUpCoordinator) -> None:
    """Step the player and apply whatever pickup sits on the destination cell."""

    player = state.player
    player.move_to(*resolve(player.row, player.col, direction, state.maze))

    match state.maze.cell_at(player.row, player.col):
        case Cell.dot:
            state.dots_remaining -= 1
            state.score += DOT_POINTS
            state.maze.clear(player.row, player.col)
            state.history.append(
                GameEvent(type="DOT_EATEN", tick=state.tick, payload={"row": player.row, "col": player.col})
            )
        case Cell.pill:
            state.score += PILL_POINTS
            state.maze.clear(player.row, player.col)
            state.history.append(
                GameEvent(type="PILL_EATEN", tick=state.tick, payload={"row": player.row, "col": player.col})
            )
            logger.debug("pill eaten at (%s, %s)", player.row, player.col)
            powerup.activate()
        case _:
            pass


def move_ghosts(*, state: GameState, rng: random.Random) -> None:
    for ghost in state.ghosts:
        pos = ghost.sprite
        pos.move_to(*resolve(pos.row, pos.col, random_direction(rng), state.maze))


class GameLoop:
    """Drives the game one tick at a time until the FSM reaches won or lost.

    Per tick: render, consume at most one input event, move ghosts, resolve
    collisions, check for game over, then sleep for the tick interval.
    """

    def __init__(
        self,
        *,
        state: GameState,
        renderer: FrameSink,
        poll: Callable[[], InputEvent | None],
        powerup: PowerUpCoordinator,
        rng: random.Random | None = None,
        config: LoopConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.state = state
        self.fsm = GameFSM(state)
        self._renderer = renderer
        self._poll = poll
        self._powerup = powerup
        self._rng = rng or random.Random()
        self._cfg = config or LoopConfig()
        self._sleep = sleep

    def handle_input(self) -> None:
        event = self._poll()
        if event is None:
            return
        if event.is_cancel:
            logger.info("cancel requested; forcing game over")
            self.state.lives = 0
            return
        move_player(state=self.state, direction=event.direction, powerup=self._powerup)

    def resolve_collisions(self) -> None:
        state = self.state
        for ghost in state.ghosts:
            if ghost.sprite.position != state.player.position:
                continue
            state.lives -= 1
            state.history.append(
                GameEvent(
                    type="PLAYER_CAUGHT",
                    tick=state.tick,
                    payload={"row": state.player.row, "col": state.player.col, "lives": state.lives},
                )
            )
            logger.info("player caught at %s; lives=%s", state.player.position, state.lives)
            if state.lives > 0:
                self._renderer.draw_death(state)
                self._sleep(self._cfg.death_pause_s)
                state.player.respawn()

    def check_game_over(self) -> None:
        state = self.state
        if state.lives <= 0:
            self._renderer.draw_death(state)
            self.fsm.lose()
        elif state.dots_remaining == 0:
            self.fsm.win()
        else:
            return

        self.fsm.sync_phase_to_model()
        state.history.append(
            GameEvent(
                type="GAME_OVER",
                tick=state.tick,
                payload={"phase": state.phase.value, "score": state.score, "lives": state.lives},
            )
        )
        logger.info("game over: %s score=%s", state.phase.value, state.score)

    def tick(self) -> GamePhase:
        if self.state.is_over:
            return self.state.phase

        self._renderer.draw(self.state)
        self.handle_input()
        move_ghosts(state=self.state, rng=self._rng)
        self.resolve_collisions()
        self.check_game_over()
        self.state.tick += 1

        if not self.state.is_over:
            self._sleep(self._cfg.tick_interval_s)
        return self.state.phase

    def run(self) -> GamePhase:
        while not self.state.is_over:
            self.tick()
        return self.state.phase
