"""
Game of Life engine.

Owns the board dimensions, the topology (bounded or toroidal) and the
ordered history of generations. The last grid in the history is the
current generation; ``step`` appends a freshly computed grid and freezes the
previous one, while ``cycle_cell``, ``randomize`` and ``invert`` edit the
current grid in place.

Grids are numpy ``bool`` arrays of shape ``(height, width)`` indexed
``[y, x]``. Callers only ever address cells by ``(x, y)``.
"""

from __future__ import annotations

import hashlib
from collections import deque
from numbers import Integral
from typing import Iterable, Self, Sequence

import numpy as np
from loguru import logger

from .exceptions import BoardSizeError, CellOutOfRangeError

DEFAULT_BOARD_WIDTH = 50
DEFAULT_BOARD_HEIGHT = 20

ALIVE = True
DEAD = False

NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if not (dx == 0 and dy == 0)
)


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise BoardSizeError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def _wrap(coord: int, dimension: int) -> int:
    """Wrap a coordinate that is at most one step outside ``[0, dimension)``."""
    if coord < 0:
        return dimension + coord
    if coord >= dimension:
        return coord - dimension
    return coord


class LifeEngine:
    def __init__(
        self,
        width: int = DEFAULT_BOARD_WIDTH,
        height: int = DEFAULT_BOARD_HEIGHT,
        toroidal: bool = False,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        history_limit: int | None = None,
    ):
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._toroidal = bool(toroidal)

        if history_limit is not None:
            history_limit = _check_dimension("history_limit", history_limit)
        self._history_limit = history_limit

        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._history: deque[np.ndarray] = deque(maxlen=history_limit)
        self._history.append(self._blank())
        self._generation = 1

        logger.debug(f"Created {self!r}")

    @classmethod
    def from_cells(
        cls, rows: Iterable[Sequence], toroidal: bool = False, **kwargs
    ) -> Self:
        """Build an engine whose first generation is ``rows`` (truthy = alive)."""
        data = [list(row) for row in rows]
        if not data or not data[0]:
            raise BoardSizeError("Seed data must contain at least one cell")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise BoardSizeError("Seed data rows must all have the same length")

        engine = cls(width, len(data), toroidal, **kwargs)
        engine._current[:] = np.array(data, dtype=bool)
        return engine

    # -- read accessors -----------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def toroidal(self) -> bool:
        return self._toroidal

    @property
    def history_limit(self) -> int | None:
        return self._history_limit

    @property
    def generation(self) -> int:
        return self._generation

    def get_generation(self) -> int:
        return self._generation

    @property
    def history(self) -> tuple[np.ndarray, ...]:
        """Retained generations, oldest first. Every array is read-only."""
        *past, current = self._history
        view = current.view()
        view.flags.writeable = False
        return (*past, view)

    @property
    def cells(self) -> np.ndarray:
        """A copy of the current generation as a ``(height, width)`` array."""
        return self._current.copy()

    @property
    def _current(self) -> np.ndarray:
        return self._history[-1]

    def is_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _require_valid(self, x: int, y: int) -> None:
        if not self.is_valid(x, y):
            raise CellOutOfRangeError(x, y, self._width, self._height)

    def get_cell(self, x: int, y: int) -> bool:
        self._require_valid(x, y)
        return bool(self._current[y, x])

    def population(self) -> int:
        return int(np.count_nonzero(self._current))

    def count_neighbors(self, x: int, y: int) -> int:
        """
        Count live cells among the eight surrounding ``(x, y)``.

        Bounded boards skip neighbours that fall off the edge. Toroidal boards
        wrap each neighbour once around the opposite edge; a neighbour that
        wraps back onto ``(x, y)`` itself (only possible on a board one cell
        wide or tall) is not counted.
        """
        self._require_valid(x, y)
        grid = self._current
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self._toroidal:
                nx, ny = _wrap(nx, self._width), _wrap(ny, self._height)
            if not self.is_valid(nx, ny) or (nx == x and ny == y):
                continue
            if grid[ny, nx]:
                count += 1
        return count

    def fingerprint(self) -> str:
        """Return SHA-256 hex digest of the current grid as a flat 0/1 string."""
        flat_str = "".join("1" if cell else "0" for cell in self._current.flat)
        return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()

    # -- mutation -----------------------------------------------------------

    def cycle_cell(self, x: int, y: int) -> bool:
        """Toggle a cell of the current generation and return its new value."""
        self._require_valid(x, y)
        grid = self._current
        grid[y, x] = not grid[y, x]
        return bool(grid[y, x])

    def step(self) -> int:
        """Advance one generation (B3/S23) and return the new generation number."""
        current = self._current
        next_gen = self._blank()
        for y in range(self._height):
            for x in range(self._width):
                num_neighbors = self.count_neighbors(x, y)
                if current[y, x]:
                    next_gen[y, x] = ALIVE if num_neighbors in (2, 3) else DEAD
                else:
                    next_gen[y, x] = ALIVE if num_neighbors == 3 else DEAD

        current.flags.writeable = False
        self._history.append(next_gen)
        self._generation += 1
        logger.debug(
            f"Generation {self._generation}: population {self.population()}"
        )
        return self._generation

    def extinction(self) -> None:
        """Drop the whole history and start again from an empty board."""
        self._history.clear()
        self._history.append(self._blank())
        self._generation = 1
        logger.debug("Extinction: history cleared, back to generation 1")

    def randomize(self, clear_history: bool = True) -> None:
        """
        Flip a fair coin for every cell and toggle the cell on heads.

        With ``clear_history`` the board is wiped first, so each cell ends up
        alive with probability 1/2. Without it the coin toggles whatever the
        current generation already holds. No new generation is pushed.
        """
        if clear_history:
            self.extinction()
        heads = self._rng.random((self._height, self._width)) < 0.5
        self._current[heads] ^= True
        logger.debug(
            f"Randomized generation {self._generation}: population {self.population()}"
        )

    def invert(self) -> None:
        """Toggle every cell of the current generation."""
        np.logical_not(self._current, out=self._current)
        logger.debug(f"Inverted generation {self._generation}")

    def _blank(self) -> np.ndarray:
        return np.zeros((self._height, self._width), dtype=bool)

    def __repr__(self) -> str:
        topology = "toroidal" if self._toroidal else "bounded"
        return (
            f"LifeEngine({self._width}×{self._height}, {topology}, "
            f"generation={self._generation}, alive={self.population()})"
        )
