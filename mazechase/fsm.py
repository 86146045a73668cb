from __future__ import annotations

from statemachine import State, StateMachine

from mazechase.game_state import GamePhase, GameState


class GameFSM(StateMachine):
    """FSM wrapper around GameState.

    - phases: running -> won | lost
    - counters are mutated by the game loop; the FSM only guards the terminal transition.
    """

    running = State(GamePhase.running.value, value=GamePhase.running.value, initial=True)
    won = State(GamePhase.won.value, value=GamePhase.won.value, final=True)
    lost = State(GamePhase.lost.value, value=GamePhase.lost.value, final=True)

    win = running.to(won)
    lose = running.to(lost)

    def __init__(self, game: GameState):
        self.game = game
        super().__init__(start_value=game.phase.value)

    def sync_phase_to_model(self) -> None:
        self.game.phase = GamePhase(str(self.current_state.value))
