from __future__ import annotations

import logging
import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

logger = logging.getLogger(__name__)

CSI = "\x1b["
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"


def clear_screen() -> str:
    return f"{CSI}2J" + move_cursor(0, 0)


def move_cursor(row: int, col: int) -> str:
    # ANSI positions are 1-based.
    return f"{CSI}{row + 1};{col + 1}f"


def with_blue_background(text: str) -> str:
    return f"{CSI}44m{text}{CSI}0m"


@contextmanager
def cbreak_mode(*, stdin: TextIO | None = None, stdout: TextIO | None = None) -> Iterator[None]:
    """Put the terminal in cbreak/no-echo mode for the duration of the block.

    The previous settings are restored on exit, including when the game loop raises.
    """

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    fd = stdin.fileno()

    old = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~termios.ECHO
    termios.tcsetattr(fd, termios.TCSADRAIN, new)
    stdout.write(HIDE_CURSOR)
    stdout.flush()
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
        stdout.write(SHOW_CURSOR)
        stdout.flush()
        logger.debug("terminal restored")
