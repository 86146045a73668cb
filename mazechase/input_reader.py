from __future__ import annotations

import logging
import os
import queue
import sys
import threading
from collections.abc import Callable

from mazechase.core.events import Direction, InputEvent

logger = logging.getLogger(__name__)

ESC = 0x1B
READ_SIZE = 100

_ARROWS: dict[int, Direction] = {
    ord("A"): Direction.up,
    ord("B"): Direction.down,
    ord("C"): Direction.right,
    ord("D"): Direction.left,
}


def decode_input(buf: bytes) -> InputEvent | None:
    """Decode one raw read from a cbreak-mode terminal.

    A lone ESC cancels; `ESC [ A..D` are the arrow keys. Everything else is ignored.
    """

    if len(buf) == 1 and buf[0] == ESC:
        return InputEvent.cancel()
    if len(buf) >= 3 and buf[0] == ESC and buf[1] == ord("["):
        direction = _ARROWS.get(buf[2])
        if direction is not None:
            return InputEvent.move(direction)
    return None


def stdin_reader(fd: int | None = None) -> Callable[[], bytes]:
    fileno = sys.stdin.fileno() if fd is None else fd

    def _read() -> bytes:
        return os.read(fileno, READ_SIZE)

    return _read


class InputReader:
    """Background thread turning raw terminal bytes into queued InputEvents.

    The read blocks; the game loop never waits on it and instead polls the queue
    with `poll()`, taking at most one event per call.

    A failed read (or end of stream) is fatal for the reader: it is logged, a cancel
    event is queued so the game ends cleanly, and the thread exits.
    """

    def __init__(self, *, read: Callable[[], bytes], events: queue.Queue[InputEvent] | None = None) -> None:
        self._read = read
        self._events: queue.Queue[InputEvent] = events if events is not None else queue.Queue()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def events(self) -> queue.Queue[InputEvent]:
        return self._events

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="input-reader", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def poll(self) -> InputEvent | None:
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                buf = self._read()
            except Exception:
                logger.exception("Error reading input")
                self._events.put(InputEvent.cancel())
                return

            if not buf:
                logger.error("Input stream closed")
                self._events.put(InputEvent.cancel())
                return

            event = decode_input(buf)
            if event is not None:
                self._events.put(event)
