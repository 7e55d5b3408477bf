"""Console driver and command line entry point."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from loguru import logger

from game_of_life import LifeEngine
from game_of_life.life import EXIT_INTERRUPTED, main, run_console


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    logger.disable("game_of_life")


def test_run_console_stops_at_generation_limit() -> None:
    engine = LifeEngine(5, 4, seed=1)
    engine.randomize(True)
    out = io.StringIO()
    pauses: list[float] = []

    code = run_console(engine, generations=3, pause=0.5, out=out, sleep=pauses.append)
    assert code == 0

    text = out.getvalue()
    assert "Generation 1\n" in text
    assert "Generation 2\n" in text
    assert "Generation 3\n" not in text
    assert pauses == [0.5, 0.5]
    assert engine.get_generation() == 3


def test_run_console_interrupted_during_pause() -> None:
    engine = LifeEngine(3, 3)

    def interrupt(_: float) -> None:
        raise KeyboardInterrupt

    out = io.StringIO()
    code = run_console(engine, generations=10, pause=0.1, out=out, sleep=interrupt)
    assert code == EXIT_INTERRUPTED
    assert engine.get_generation() == 1
    assert out.getvalue().startswith("Generation 1\n")


def test_main_run(capsys) -> None:
    argv = ["run", "--width", "6", "--height", "3", "--generations", "3"]
    assert main([*argv, "--pause", "0", "--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "Generation 2" in out
    assert "--------\n" in out


def test_main_run_from_config(tmp_path: Path, capsys) -> None:
    config = tmp_path / "life.toml"
    config.write_text(
        "[board]\nwidth = 4\nheight = 2\ntoroidal = true\n"
        "[run]\ngenerations = 2\npause = 0\n"
        '[output]\nlog_level = "WARNING"\nlog_file = "life.log"\n'
    )
    assert main(["--config", str(config), "run", "--width", "7"]) == 0
    out = capsys.readouterr().out
    assert "---------\n" in out  # 7 cells wide plus two border columns
    assert (tmp_path / "life.log").exists()


def test_main_missing_config(tmp_path: Path) -> None:
    assert main(["--config", str(tmp_path / "missing.toml"), "run"]) == 1


def test_main_invalid_board() -> None:
    assert main(["run", "--width", "0", "--generations", "2", "--pause", "0"]) == 1


@pytest.mark.parametrize("extra", [[], ["--toroidal"]])
def test_main_verify(extra: list[str]) -> None:
    argv = ["verify", "--width", "10", "--height", "8", "--generations", "5"]
    assert main([*argv, *extra]) == 0


def test_main_unknown_log_level() -> None:
    assert main(["--log-level", "chatty", "run", "--generations", "1"]) == 1


def test_main_verify_degenerate_torus() -> None:
    argv = ["verify", "--toroidal", "--width", "1", "--height", "5"]
    assert main([*argv, "--generations", "2"]) == 1


@pytest.mark.parametrize(
    "flags",
    [
        ["--pause", "-1"],
        ["--generations", "-5"],
        ["--generations", "0"],
        ["--height", "-2"],
        ["--history-limit", "-1"],
    ],
)
def test_main_rejects_out_of_range_flags(flags: list[str]) -> None:
    assert main(["run", "--width", "4", "--height", "3", *flags]) == 1


def test_main_flags_are_checked_after_config(tmp_path: Path) -> None:
    config = tmp_path / "life.toml"
    config.write_text("[run]\ngenerations = 3\npause = 0\n")
    assert main(["--config", str(config), "run", "--pause", "-0.5"]) == 1


@pytest.mark.parametrize("limit", ["0", "2"])
def test_main_history_limit_flag(limit: str, capsys) -> None:
    argv = ["run", "--width", "4", "--height", "3", "--generations", "4"]
    assert main([*argv, "--pause", "0", "--history-limit", limit]) == 0
    assert "Generation 3" in capsys.readouterr().out
