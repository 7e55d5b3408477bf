"""Conway's Game of Life on a fixed-size bounded or toroidal board."""

from loguru import logger

from .engine import LifeEngine
from .exceptions import BoardSizeError, CellOutOfRangeError, ConfigError, LifeError
from .render import render

# Library code stays quiet until a driver opts in with logger.enable().
logger.disable("game_of_life")

__all__ = [
    "BoardSizeError",
    "CellOutOfRangeError",
    "ConfigError",
    "LifeEngine",
    "LifeError",
    "render",
]
