from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from mazechase.assets.loader import parse_maze
from mazechase.game_state import GameState, new_game


@dataclass
class FakeTimer:
    """Stand-in for threading.Timer that only fires when a test says so."""

    interval: float
    fn: Callable[[], None]
    started: bool = False
    cancelled: bool = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        # Fires even if cancelled: a real timer may already be running its callback.
        self.fn()


@dataclass
class FakeTimerFactory:
    timers: list[FakeTimer] = field(default_factory=list)

    def __call__(self, interval: float, fn: Callable[[], None]) -> FakeTimer:
        t = FakeTimer(interval=interval, fn=fn)
        self.timers.append(t)
        return t


@pytest.fixture()
def timers() -> FakeTimerFactory:
    """Injectable timer factory for PowerUpCoordinator."""

    return FakeTimerFactory()


@pytest.fixture()
def make_state() -> Callable[..., GameState]:
    """Build a GameState from literal maze rows, e.g. make_state("#####", "#P.G#", "#####")."""

    def _make(*rows: str, lives: int = 3) -> GameState:
        return new_game(layout=parse_maze("\n".join(rows)), lives=lives)

    return _make
