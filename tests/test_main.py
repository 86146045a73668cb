from __future__ import annotations

from pathlib import Path

from mazechase.main import build_parser, main


def test_missing_maze_aborts_before_game_starts(tmp_path: Path) -> None:
    rc = main(
        [
            "--maze-file",
            str(tmp_path / "missing.txt"),
            "--config-file",
            str(tmp_path / "missing.json"),
            "--log-file",
            str(tmp_path / "mazechase.log"),
        ]
    )
    assert rc == 1


def test_parser_defaults_follow_environment(tmp_path: Path, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("MAZECHASE_MAZE_FILE", str(tmp_path / "custom.txt"))
    monkeypatch.setenv("MAZECHASE_LOG_LEVEL", "debug")

    args = build_parser().parse_args([])

    assert args.maze_file == tmp_path / "custom.txt"
    assert args.log_level == "DEBUG"
