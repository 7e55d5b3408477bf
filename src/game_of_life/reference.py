"""
Vectorised Game of Life step used to cross-check ``LifeEngine``.

The engine counts neighbours cell by cell; this module does the same work
with whole-array numpy operations, in the style of the NumPy grid variant the
engine was benchmarked against. Fingerprints of the two are compared after
every generation by ``verify_engine``.
"""

from __future__ import annotations

import hashlib

import numpy as np
from loguru import logger

from .engine import LifeEngine
from .exceptions import BoardSizeError


def reference_step(cells: np.ndarray, toroidal: bool) -> np.ndarray:
    """Return the next generation of a ``(height, width)`` bool array."""
    height, width = cells.shape
    data = cells.astype(np.uint8)

    if toroidal:
        # A one-cell-wide torus wraps neighbours onto the cell itself, which
        # the engine excludes and np.roll does not.
        if width < 2 or height < 2:
            raise BoardSizeError(
                f"Toroidal reference needs both dimensions >= 2, got {width}×{height}"
            )
        neighbors = sum(
            np.roll(np.roll(data, dr, 0), dc, 1)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if not (dr == 0 and dc == 0)
        )
    else:
        padded = np.pad(data, 1, mode="constant")
        neighbors = (
            padded[:-2, :-2] + padded[:-2, 1:-1] + padded[:-2, 2:]
            + padded[1:-1, :-2] + padded[1:-1, 2:]
            + padded[2:, :-2] + padded[2:, 1:-1] + padded[2:, 2:]
        )

    alive = cells.astype(bool)
    return (alive & ((neighbors == 2) | (neighbors == 3))) | (~alive & (neighbors == 3))


def fingerprint(cells: np.ndarray) -> str:
    flat_str = "".join("1" if cell else "0" for cell in cells.flat)
    return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()


def verify_engine(
    width: int, height: int, toroidal: bool, generations: int, seed: int = 42
) -> bool:
    """Run the engine and the reference side by side from the same random seed."""
    engine = LifeEngine(width, height, toroidal, seed=seed)
    engine.randomize(True)
    expected = engine.cells
    logger.info(
        f"Verifying {engine!r} against the numpy reference "
        f"for {generations} generations"
    )

    all_match = True
    for _ in range(generations):
        engine.step()
        expected = reference_step(expected, toroidal)
        if engine.fingerprint() != fingerprint(expected):
            logger.error(f"Generation {engine.generation}: fingerprint mismatch")
            all_match = False
            expected = engine.cells

    if all_match:
        logger.info("Correctness verification passed")
    else:
        logger.error("Correctness verification failed")
    return all_match
