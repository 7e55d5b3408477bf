"""Load board, run and output settings from a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from .engine import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH
from .exceptions import ConfigError

DEFAULT_GENERATIONS = 1000
DEFAULT_PAUSE = 0.25
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LifeConfig:
    # [board]
    width: int = DEFAULT_BOARD_WIDTH
    height: int = DEFAULT_BOARD_HEIGHT
    toroidal: bool = False
    seed: int | None = None
    history_limit: int | None = None
    # [run]
    generations: int = DEFAULT_GENERATIONS
    pause: float = DEFAULT_PAUSE
    # [output]
    log_level: str = "INFO"
    log_file: Path | None = None


def _section(cfg: dict, name: str) -> dict:
    section = cfg.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {section!r}")
    return section


def _get(section: dict, key: str, kind, default, section_name: str):
    if key not in section:
        return default
    value = section[key]
    # bool is an int subclass; reject it where a number is expected
    if isinstance(value, bool) and kind is not bool:
        raise ConfigError(
            f"[{section_name}] {key} must be {kind.__name__}, got {value!r}"
        )
    if kind is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, kind):
        raise ConfigError(
            f"[{section_name}] {key} must be {kind.__name__}, got {value!r}"
        )
    return value


def validate(config: LifeConfig) -> LifeConfig:
    """Range-check a config after the file and the command line have been merged."""
    if config.width < 1 or config.height < 1:
        raise ConfigError(
            f"width and height must be positive, got {config.width}×{config.height}"
        )
    if config.history_limit is not None and config.history_limit < 1:
        raise ConfigError(
            "history_limit must be positive (0 for unbounded), "
            f"got {config.history_limit}"
        )
    if config.generations < 1:
        raise ConfigError(f"generations must be positive, got {config.generations}")
    if config.pause < 0:
        raise ConfigError(f"pause must not be negative, got {config.pause}")

    config.log_level = config.log_level.upper()
    if config.log_level not in LOG_LEVELS:
        raise ConfigError(f"unknown log_level {config.log_level!r}")
    return config


def load_config(path: str | Path | None = None) -> LifeConfig:
    """Read ``path`` into a ``LifeConfig``; ``None`` returns the defaults."""
    if path is None:
        return LifeConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"{path} not found")

    try:
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path} is not valid TOML: {e}") from e

    b = _section(cfg, "board")
    r = _section(cfg, "run")
    o = _section(cfg, "output")

    defaults = LifeConfig()
    history_limit = _get(b, "history_limit", int, None, "board")
    config = LifeConfig(
        width=_get(b, "width", int, defaults.width, "board"),
        height=_get(b, "height", int, defaults.height, "board"),
        toroidal=_get(b, "toroidal", bool, defaults.toroidal, "board"),
        seed=_get(b, "seed", int, None, "board"),
        history_limit=None if history_limit == 0 else history_limit,
        generations=_get(r, "generations", int, defaults.generations, "run"),
        pause=_get(r, "pause", float, defaults.pause, "run"),
        log_level=_get(o, "log_level", str, defaults.log_level, "output"),
        log_file=None,
    )

    log_file = _get(o, "log_file", str, None, "output")
    if log_file:
        # Relative log paths sit next to the config file.
        config.log_file = path.parent / log_file

    return validate(config)
