"""Errors raised by the Game of Life engine and its drivers."""


class LifeError(Exception):
    """Base class for every error raised by this package."""


class CellOutOfRangeError(LifeError, IndexError):
    """A cell coordinate falls outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid cell coordinate ({x}, {y}) for a {width}×{height} board"
        )


class BoardSizeError(LifeError, ValueError):
    """Board dimensions or seed data do not describe a valid grid."""


class ConfigError(LifeError, ValueError):
    """The configuration file is missing, malformed or out of range."""
