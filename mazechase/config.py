from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Glyphs and timings read from the JSON config file."""

    player: str = "P"
    ghost: str = "G"
    ghost_blue: str = "B"
    wall: str = "#"
    dot: str = "."
    pill: str = "X"
    death: str = "X"
    space: str = " "

    # Emoji glyphs are two columns wide; the renderer doubles cursor columns.
    use_emoji: bool = False

    pill_duration_secs: float = Field(10, ge=0)


@dataclass(frozen=True, slots=True)
class LoopConfig:
    # Delay between ticks.
    tick_interval_s: float = 0.1
    # Pause after losing a life, before the player respawns.
    death_pause_s: float = 1.0
    starting_lives: int = 3


@dataclass(frozen=True, slots=True)
class Settings:
    maze_file: Path
    config_file: Path
    log_file: Path
    log_level: str


def project_root() -> Path:
    # mazechase/config.py -> mazechase/ -> project root
    return Path(__file__).resolve().parents[1]


def settings_from_env() -> Settings:
    root = project_root()
    return Settings(
        maze_file=Path(os.environ.get("MAZECHASE_MAZE_FILE", root / "mazes" / "maze01.txt")),
        config_file=Path(os.environ.get("MAZECHASE_CONFIG_FILE", root / "mazes" / "config.json")),
        log_file=Path(os.environ.get("MAZECHASE_LOG_FILE", "mazechase.log")),
        log_level=os.environ.get("MAZECHASE_LOG_LEVEL", "WARNING").upper(),
    )
