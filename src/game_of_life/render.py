"""Text rendering of the current generation as a bordered block."""

from __future__ import annotations

from typing import Protocol


class Board(Protocol):
    width: int
    height: int

    def get_generation(self) -> int: ...

    def get_cell(self, x: int, y: int) -> bool: ...


def render(board: Board, alive: str = "@", dead: str = " ") -> str:
    """Pretty-print the board with a generation header and a dashed/piped border."""
    border = "-" * (board.width + 2)
    lines = [f"Generation {board.get_generation()}", border]
    for y in range(board.height):
        row = "".join(
            alive if board.get_cell(x, y) else dead for x in range(board.width)
        )
        lines.append(f"|{row}|")
    lines.append(border)
    return "\n".join(lines) + "\n"
