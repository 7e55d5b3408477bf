import time

import pygame
from loguru import logger

from .engine import LifeEngine


def run_display(
    engine: LifeEngine,
    cell_size: int = 12,
    background_color: str = "black",
    cell_color: str = "green",
    pause: float = 0.1,
    generations: int | None = None,
) -> None:
    """
    Show the board in a pygame window and advance it until closed.

    Keys: q/Esc quit, Space pause, r reseed, c clear, i invert.
    Clicking a cell toggles it.
    """
    # Initialise pygame
    pygame.init()

    window = pygame.display.set_mode(
        (engine.width * cell_size, engine.height * cell_size)
    )
    pygame.display.set_caption("Conway's Game of Life")

    border_size = 1
    cell_fill_color = pygame.Color(cell_color)
    background_fill_color = pygame.Color(background_color)

    running = True
    paused = False
    logger.info(f"Opened display for {engine!r}")

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    engine.randomize(True)
                elif event.key == pygame.K_c:
                    engine.extinction()
                elif event.key == pygame.K_i:
                    engine.invert()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos[0] // cell_size, event.pos[1] // cell_size
                if engine.is_valid(x, y):
                    engine.cycle_cell(x, y)

        window.fill(background_fill_color)

        # Draw live cells
        for y in range(engine.height):
            for x in range(engine.width):
                if engine.get_cell(x, y):
                    size = cell_size - 2 * border_size
                    # Avoid drawing zero-size or negative rectangles
                    if size > 0:
                        pygame.draw.rect(
                            window,
                            cell_fill_color,
                            (
                                x * cell_size + border_size,
                                y * cell_size + border_size,
                                size,
                                size,
                            ),
                        )

        pygame.display.set_caption(
            f"Conway's Game of Life - generation {engine.generation}"
        )
        pygame.display.flip()

        time.sleep(pause)

        if not paused:
            engine.step()
            if generations is not None and engine.generation >= generations:
                running = False

    logger.info(f"Display closed at generation {engine.generation}")
    pygame.quit()
