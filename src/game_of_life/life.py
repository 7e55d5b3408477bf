#!/usr/bin/env python3
"""
Conway's Game of Life: command line driver

Usage:
    life run                      # random 50×20 board printed every 0.25 s
    life run --toroidal --seed 7  # wrap-around board, reproducible seed
    life display --cell-size 16   # pygame window (needs the `display` extra)
    life verify --toroidal        # cross-check the engine against numpy
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger

from .config import LifeConfig, load_config, validate
from .engine import LifeEngine
from .exceptions import LifeError
from .reference import verify_engine
from .render import render

EXIT_INTERRUPTED = 130


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG")


def run_console(
    engine: LifeEngine,
    generations: int,
    pause: float,
    out: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Print, pause and step until ``generations`` is reached. Returns an exit code."""
    out = out or sys.stdout
    try:
        while engine.get_generation() < generations:
            print(render(engine), file=out)
            sleep(pause)
            engine.step()
    except KeyboardInterrupt:
        logger.warning(f"Interrupted at generation {engine.get_generation()}")
        return EXIT_INTERRUPTED

    logger.info(
        f"Finished at generation {engine.get_generation()}, "
        f"population {engine.population()}"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="life", description="Conway's Game of Life")
    parser.add_argument(
        "--config",
        type=Path,
        help="TOML file with [board], [run] and [output] sections",
    )
    parser.add_argument("--log-level", help="Override [output] log_level")

    board = argparse.ArgumentParser(add_help=False)
    board.add_argument("--width", type=int)
    board.add_argument("--height", type=int)
    board.add_argument(
        "--toroidal",
        action="store_true",
        default=None,
        help="Wrap neighbours around the edges",
    )
    board.add_argument("--seed", type=int)
    board.add_argument(
        "--generations", type=int, help="Stop once this generation is reached"
    )
    board.add_argument(
        "--history-limit", type=int, help="Generations to keep in memory (0 = all)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser(
        "run", parents=[board], help="Print generations to the terminal"
    )
    run.add_argument("--pause", type=float, help="Seconds between generations")

    display = sub.add_parser(
        "display", parents=[board], help="Show generations in a pygame window"
    )
    display.add_argument("--pause", type=float, help="Seconds between generations")
    display.add_argument("--cell-size", type=int, default=12)

    sub.add_parser(
        "verify", parents=[board], help="Compare the engine against the numpy reference"
    )

    return parser


def merge_args(config: LifeConfig, args: argparse.Namespace) -> LifeConfig:
    """Command line flags win over the config file."""
    for name in (
        "width",
        "height",
        "toroidal",
        "seed",
        "history_limit",
        "generations",
        "pause",
        "log_level",
    ):
        value = getattr(args, name, None)
        if value is not None:
            setattr(config, name, value)
    if config.history_limit == 0:
        config.history_limit = None
    return validate(config)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger.enable("game_of_life")

    try:
        config = merge_args(load_config(args.config), args)
        configure_logging(config.log_level, config.log_file)

        if args.command == "verify":
            seed = 42 if config.seed is None else config.seed
            ok = verify_engine(
                config.width, config.height, config.toroidal, config.generations, seed
            )
            return 0 if ok else 1

        engine = LifeEngine(
            config.width,
            config.height,
            config.toroidal,
            seed=config.seed,
            history_limit=config.history_limit,
        )
        engine.randomize(True)

        if args.command == "display":
            from .display import run_display

            run_display(
                engine,
                cell_size=args.cell_size,
                pause=config.pause,
                generations=config.generations,
            )
            return 0

        return run_console(engine, config.generations, config.pause)
    except LifeError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
