"""Randomized depth-first carving and braiding of a maze grid."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Set

from .grid import DIRECTIONS, Cell, Coord, Grid

logger = logging.getLogger(__name__)

IMPERFECTION_RATIO = 0.1


def _carve_from(grid: Grid, start: Cell, visited: Set[Coord], rng: random.Random) -> None:
    visited.add(start.coord)
    stack: List[Cell] = [start]
    while stack:
        current = stack[-1]
        candidates = [
            (direction, neighbor)
            for direction, neighbor in grid.neighbors(current.x, current.y)
            if neighbor.coord not in visited
        ]
        if not candidates:
            stack.pop()
            continue
        direction, chosen = candidates[rng.randrange(len(candidates))]
        visited.add(chosen.coord)
        grid.open_wall(current.x, current.y, direction)
        stack.append(chosen)


def carve(grid: Grid, rng: Optional[random.Random] = None) -> Set[Coord]:
    """Turn a fully walled grid into a perfect maze in place.

    Carving starts at the first masked-in cell in row-major order. When the
    mask splits into several disconnected regions, each remaining region is
    carved from its own first row-major cell, so every cell ends up in some
    spanning tree. Returns the set of visited coordinates.
    """

    rng = rng or random.Random()
    visited: Set[Coord] = set()
    components = 0
    for cell in grid.cells():
        if cell.coord in visited:
            continue
        _carve_from(grid, cell, visited, rng)
        components += 1
    logger.debug("Carved %d cells in %d component(s) on %r", len(visited), components, grid)
    return visited


def add_imperfections(
    grid: Grid,
    rng: Optional[random.Random] = None,
    *,
    ratio: float = IMPERFECTION_RATIO,
) -> int:
    """Open random extra wall pairs to introduce loops.

    Runs ``floor(width * height * ratio)`` trials. A trial that lands on a
    hole, points off the grid or towards a hole, or hits an already open wall
    changes nothing. Returns how many walls were newly opened.
    """

    rng = rng or random.Random()
    trials = int(grid.width * grid.height * ratio)
    opened = 0
    for _ in range(trials):
        y = rng.randrange(grid.height)
        x = rng.randrange(grid.width)
        if grid.is_hole(x, y):
            continue
        direction = rng.randrange(len(DIRECTIONS))
        if grid.open_wall(x, y, direction):
            opened += 1
    logger.debug("Imperfection pass: %d trials, %d new openings", trials, opened)
    return opened


__all__ = ["carve", "add_imperfections", "IMPERFECTION_RATIO"]
