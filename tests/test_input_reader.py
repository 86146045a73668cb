from __future__ import annotations

import queue
from collections.abc import Callable, Iterable

import pytest

from mazechase.core.events import Direction, InputEvent
from mazechase.input_reader import InputReader, decode_input


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b"\x1b[A", Direction.up),
        (b"\x1b[B", Direction.down),
        (b"\x1b[C", Direction.right),
        (b"\x1b[D", Direction.left),
    ],
)
def test_decode_arrow_keys(raw: bytes, expected: Direction) -> None:
    assert decode_input(raw) == InputEvent.move(expected)


def test_decode_lone_escape_is_cancel() -> None:
    event = decode_input(b"\x1b")
    assert event is not None
    assert event.is_cancel


@pytest.mark.parametrize("raw", [b"a", b"\x1b\x1b", b"\x1b[Z", b"[A", b"\x1b[", b"q\x1b[A"])
def test_decode_ignores_everything_else(raw: bytes) -> None:
    assert decode_input(raw) is None


def _scripted(chunks: Iterable[bytes | Exception]) -> Callable[[], bytes]:
    it = iter(chunks)

    def _read() -> bytes:
        item = next(it)
        if isinstance(item, Exception):
            raise item
        return item

    return _read


def _drain(q: queue.Queue[InputEvent]) -> list[InputEvent]:
    out: list[InputEvent] = []
    while True:
        try:
            out.append(q.get_nowait())
        except queue.Empty:
            return out


def test_reader_queues_events_in_read_order_then_cancels_on_failure() -> None:
    reader = InputReader(read=_scripted([b"\x1b[A", b"x", b"\x1b[D", b"\x1b[A", OSError("tty gone")]))
    reader.start()
    reader.join(timeout=2)

    events = _drain(reader.events)

    assert events == [
        InputEvent.move(Direction.up),
        InputEvent.move(Direction.left),
        InputEvent.move(Direction.up),
        InputEvent.cancel(),
    ]


def test_reader_treats_end_of_stream_as_failure() -> None:
    reader = InputReader(read=_scripted([b""]))
    reader.start()
    reader.join(timeout=2)

    assert _drain(reader.events) == [InputEvent.cancel()]


def test_poll_is_non_blocking_and_takes_one_event() -> None:
    q: queue.Queue[InputEvent] = queue.Queue()
    reader = InputReader(read=_scripted([]), events=q)

    assert reader.poll() is None

    q.put(InputEvent.move(Direction.down))
    q.put(InputEvent.move(Direction.right))

    assert reader.poll() == InputEvent.move(Direction.down)
    assert q.qsize() == 1
