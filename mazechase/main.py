from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from mazechase.assets.loader import AssetLoadError, load_config, load_maze
from mazechase.config import LoopConfig, settings_from_env
from mazechase.game_loop import GameLoop
from mazechase.game_state import new_game
from mazechase.input_reader import InputReader, stdin_reader
from mazechase.powerup import PowerUpCoordinator
from mazechase.render import Renderer
from mazechase.terminal import cbreak_mode

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = settings_from_env()
    parser = argparse.ArgumentParser(prog="mazechase", description="Terminal maze-chase arcade game.")
    parser.add_argument("--config-file", type=Path, default=settings.config_file, help="path to custom configuration file")
    parser.add_argument("--maze-file", type=Path, default=settings.maze_file, help="path to a custom maze file")
    parser.add_argument("--log-file", type=Path, default=settings.log_file, help="where to write logs")
    parser.add_argument("--log-level", default=settings.log_level, help="logging level (default: WARNING)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    # Pick up MAZECHASE_* settings from a local .env before reading defaults.
    load_dotenv(override=False)

    args = build_parser().parse_args(argv)

    # Logs go to a file; stdout belongs to the renderer.
    logging.basicConfig(
        filename=str(args.log_file),
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s",
    )

    try:
        layout = load_maze(args.maze_file)
        config = load_config(args.config_file)
    except AssetLoadError as e:
        logger.error("failed to load game assets: %s", e)
        print(f"mazechase: {e}", file=sys.stderr)
        return 1

    state = new_game(layout=layout, lives=LoopConfig().starting_lives)
    powerup = PowerUpCoordinator(ghosts=state.ghosts, duration_s=config.pill_duration_secs)
    reader = InputReader(read=stdin_reader())
    renderer = Renderer(out=sys.stdout, config=config)

    with cbreak_mode():
        reader.start()
        try:
            phase = GameLoop(state=state, renderer=renderer, poll=reader.poll, powerup=powerup).run()
        finally:
            reader.stop()
            powerup.shutdown()

    logger.info("exiting: phase=%s score=%s", phase.value, state.score)
    print(state.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
