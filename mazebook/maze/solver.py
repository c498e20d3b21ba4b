"""Depth-first path search over the open passages of a carved grid."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Set

from .grid import Coord, Grid

logger = logging.getLogger(__name__)


def solve_maze(grid: Grid, start: Sequence[int], end: Sequence[int]) -> bool:
    """Find a path from ``start`` to ``end`` and mark it on ``grid``.

    Both endpoints must be masked-in cells, otherwise
    :class:`~mazebook.errors.InvalidCoordinate` is raised. Any previous
    solution is cleared first. The path found follows depth-first order and is
    not necessarily the shortest one. Returns False when the two cells are not
    connected.
    """

    start_cell = grid.require_cell(start)
    end_cell = grid.require_cell(end)
    grid.clear_path()

    visited: Set[Coord] = {start_cell.coord}
    previous: Dict[Coord, Optional[Coord]] = {start_cell.coord: None}
    stack: List[Coord] = [start_cell.coord]

    while stack:
        current = stack.pop()
        if current == end_cell.coord:
            path: List[Coord] = []
            node: Optional[Coord] = current
            while node is not None:
                path.append(node)
                node = previous[node]
            path.reverse()
            grid.set_path(path)
            logger.debug("Solved %s -> %s in %d steps", start_cell.coord, end_cell.coord, len(path))
            return True
        for neighbor in grid.open_neighbors(*current):
            if neighbor.coord not in visited:
                visited.add(neighbor.coord)
                previous[neighbor.coord] = current
                stack.append(neighbor.coord)

    logger.debug("No path between %s and %s", start_cell.coord, end_cell.coord)
    return False


__all__ = ["solve_maze"]
