"""
spawner.py — Placement of new grid entities.

Draws uniformly random cells until one is free. The draw budget is bounded;
once it is spent the grid is scanned row by row for the first free cell, so
placement stays bounded even when the snake fills most of the field. A full
field yields None.
"""

import logging
import random
from collections.abc import Container
from typing import Optional

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


def spawn_cell(
    rng: random.Random,
    cols: int,
    rows: int,
    occupied: Container[Cell],
    max_attempts: int,
) -> Optional[Cell]:
    """
    Return a cell of the cols x rows grid that is not in `occupied`,
    or None if every cell is taken.
    """
    for _ in range(max_attempts):
        pos = (rng.randrange(cols), rng.randrange(rows))
        if pos not in occupied:
            return pos

    logger.warning(
        "no free cell after %d random draws, scanning %dx%d grid", max_attempts, cols, rows
    )
    return first_free_cell(cols, rows, occupied)


def first_free_cell(cols: int, rows: int, occupied: Container[Cell]) -> Optional[Cell]:
    for y in range(rows):
        for x in range(cols):
            if (x, y) not in occupied:
                return (x, y)
    return None
