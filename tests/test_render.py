"""Bordered text rendering of a board."""

from __future__ import annotations

from game_of_life import LifeEngine, render


def test_render_bordered_block() -> None:
    engine = LifeEngine(3, 2)
    engine.cycle_cell(0, 0)
    engine.cycle_cell(2, 1)

    assert render(engine) == (
        "Generation 1\n"
        "-----\n"
        "|@  |\n"
        "|  @|\n"
        "-----\n"
    )


def test_render_reports_generation_and_custom_symbols() -> None:
    engine = LifeEngine(2, 1)
    engine.step()
    engine.step()
    engine.invert()

    lines = render(engine, alive="#", dead=".").splitlines()
    assert lines == ["Generation 3", "----", "|##|", "----"]


def test_render_only_needs_read_accessors() -> None:
    class Checkerboard:
        width = 4
        height = 2

        def get_generation(self) -> int:
            return 7

        def get_cell(self, x: int, y: int) -> bool:
            return (x + y) % 2 == 0

    assert render(Checkerboard()).splitlines()[1:4] == ["------", "|@ @ |", "| @ @|"]
