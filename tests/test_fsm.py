from __future__ import annotations

from collections.abc import Callable

import pytest
from statemachine.exceptions import TransitionNotAllowed

from mazechase.fsm import GameFSM
from mazechase.game_state import GamePhase, GameState


def test_fsm_starts_running_and_wins(make_state: Callable[..., GameState]) -> None:
    state = make_state("####", "#P.#", "####")
    fsm = GameFSM(state)

    assert fsm.current_state.value == GamePhase.running.value

    fsm.win()
    fsm.sync_phase_to_model()

    assert state.phase == GamePhase.won
    assert state.is_over


def test_fsm_final_states_reject_further_transitions(make_state: Callable[..., GameState]) -> None:
    state = make_state("####", "#P.#", "####")
    fsm = GameFSM(state)
    fsm.lose()

    with pytest.raises(TransitionNotAllowed):
        fsm.win()


def test_fsm_resumes_from_model_phase(make_state: Callable[..., GameState]) -> None:
    state = make_state("####", "#P.#", "####")
    state.phase = GamePhase.lost

    fsm = GameFSM(state)

    assert fsm.current_state.value == GamePhase.lost.value
