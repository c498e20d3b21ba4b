"""Shape-masked maze lattice with paired walls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import DimensionError, InvalidCoordinate
from .shapes import ShapeMask, get_shape

Coord = Tuple[int, int]

TOP, RIGHT, BOTTOM, LEFT = range(4)
# (dx, dy) per wall index: top, right, bottom, left
DIRECTIONS: Tuple[Coord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def opposite(direction: int) -> int:
    return (direction + 2) % 4


@dataclass
class Cell:
    x: int
    y: int
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "walls": list(self.walls)}


class Grid:
    """A fixed ``height`` x ``width`` lattice of cells and holes.

    Holes are stored as ``None``. Walls between two cells are only ever
    changed together through :meth:`open_wall`, which keeps both sides of a
    shared boundary in agreement. The solution path is per-solve scratch
    state and is replaced by every call to :func:`~mazebook.maze.solver.solve_maze`.
    """

    def __init__(self, width: int, height: int, rows: List[List[Optional[Cell]]]) -> None:
        self.width = width
        self.height = height
        self.rows = rows
        self._path: List[Coord] = []
        self._path_set: set = set()

    # ------------------------------------------------------------------
    # lookup

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Optional[Cell]:
        if not self.in_bounds(x, y):
            return None
        return self.rows[y][x]

    def is_hole(self, x: int, y: int) -> bool:
        return self.cell(x, y) is None

    def require_cell(self, coord: Sequence[int]) -> Cell:
        x, y = coord[0], coord[1]
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidCoordinate(tuple(coord), "coordinates must be integers")
        x, y = int(x), int(y)
        if not self.in_bounds(x, y):
            raise InvalidCoordinate((x, y), f"outside {self.width}x{self.height} grid")
        cell = self.rows[y][x]
        if cell is None:
            raise InvalidCoordinate((x, y), "position is masked out")
        return cell

    def cells(self) -> Iterator[Cell]:
        """Iterate masked-in cells in row-major order."""

        for row in self.rows:
            for cell in row:
                if cell is not None:
                    yield cell

    @property
    def cell_count(self) -> int:
        return sum(1 for _ in self.cells())

    def first_cell(self) -> Optional[Cell]:
        return next(self.cells(), None)

    # ------------------------------------------------------------------
    # adjacency

    def neighbors(self, x: int, y: int) -> List[Tuple[int, Cell]]:
        """Masked-in 4-neighbours regardless of walls, as ``(direction, cell)``."""

        result: List[Tuple[int, Cell]] = []
        for direction, (dx, dy) in enumerate(DIRECTIONS):
            neighbor = self.cell(x + dx, y + dy)
            if neighbor is not None:
                result.append((direction, neighbor))
        return result

    def open_neighbors(self, x: int, y: int) -> List[Cell]:
        """Masked-in 4-neighbours reachable without crossing a wall."""

        cell = self.cell(x, y)
        if cell is None:
            return []
        return [neighbor for direction, neighbor in self.neighbors(x, y) if not cell.walls[direction]]

    def open_wall(self, x: int, y: int, direction: int) -> bool:
        """Open the wall pair between ``(x, y)`` and its neighbour in ``direction``.

        Returns True when the pair was closed before. Out-of-bounds and hole
        neighbours are ignored.
        """

        cell = self.cell(x, y)
        dx, dy = DIRECTIONS[direction]
        neighbor = self.cell(x + dx, y + dy)
        if cell is None or neighbor is None:
            return False
        was_closed = cell.walls[direction]
        cell.walls[direction] = False
        neighbor.walls[opposite(direction)] = False
        return was_closed

    def is_open(self, a: Sequence[int], b: Sequence[int]) -> bool:
        """True when ``a`` and ``b`` are adjacent cells with no wall between them."""

        ax, ay = int(a[0]), int(a[1])
        bx, by = int(b[0]), int(b[1])
        cell = self.cell(ax, ay)
        if cell is None or self.cell(bx, by) is None:
            return False
        try:
            direction = DIRECTIONS.index((bx - ax, by - ay))
        except ValueError:
            return False
        return not cell.walls[direction]

    def wall_pairs(self) -> Iterator[Tuple[Cell, Cell, bool]]:
        """Each shared boundary between masked-in cells once, with its open state."""

        for cell in self.cells():
            for direction in (RIGHT, BOTTOM):
                dx, dy = DIRECTIONS[direction]
                neighbor = self.cell(cell.x + dx, cell.y + dy)
                if neighbor is not None:
                    yield cell, neighbor, not cell.walls[direction]

    def open_wall_count(self) -> int:
        return sum(1 for _, _, is_open in self.wall_pairs() if is_open)

    # ------------------------------------------------------------------
    # solution path

    @property
    def path(self) -> List[Coord]:
        return list(self._path)

    def in_path(self, x: int, y: int) -> bool:
        return (x, y) in self._path_set

    def set_path(self, path: Sequence[Coord]) -> None:
        self._path = [tuple(coord) for coord in path]
        self._path_set = set(self._path)

    def clear_path(self) -> None:
        self._path = []
        self._path_set = set()

    # ------------------------------------------------------------------
    # array export

    def mask_array(self) -> np.ndarray:
        mask = np.zeros((self.height, self.width), dtype=bool)
        for cell in self.cells():
            mask[cell.y, cell.x] = True
        return mask

    def wall_array(self) -> np.ndarray:
        walls = np.zeros((self.height, self.width, 4), dtype=bool)
        for cell in self.cells():
            walls[cell.y, cell.x] = cell.walls
        return walls

    def path_array(self) -> np.ndarray:
        path = np.zeros((self.height, self.width), dtype=bool)
        for x, y in self._path:
            path[y, x] = True
        return path

    @classmethod
    def from_arrays(cls, mask: Union[np.ndarray, Sequence], walls: Union[np.ndarray, Sequence]) -> "Grid":
        mask_arr = np.asarray(mask, dtype=bool)
        walls_arr = np.asarray(walls, dtype=bool)
        if mask_arr.ndim != 2 or walls_arr.shape != mask_arr.shape + (4,):
            raise ValueError(
                f"Wall array shape {walls_arr.shape} does not match mask shape {mask_arr.shape}"
            )
        height, width = mask_arr.shape
        _check_dimensions(width, height)
        rows: List[List[Optional[Cell]]] = []
        for y in range(height):
            row: List[Optional[Cell]] = []
            for x in range(width):
                if mask_arr[y, x]:
                    row.append(Cell(x, y, [bool(v) for v in walls_arr[y, x]]))
                else:
                    row.append(None)
            rows.append(row)
        return cls(width, height, rows)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, cells={self.cell_count})"


def _check_dimensions(width: object, height: object) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise DimensionError(width, height)


def build_grid(width: int, height: int, shape: Union[str, ShapeMask] = "square") -> Grid:
    """Allocate a fully walled lattice, leaving holes where ``shape`` rejects a position."""

    _check_dimensions(width, height)
    width, height = int(width), int(height)
    is_inside = get_shape(shape)
    rows: List[List[Optional[Cell]]] = []
    for y in range(height):
        rows.append([Cell(x, y) if is_inside(x, y, width, height) else None for x in range(width)])
    return Grid(width, height, rows)


__all__ = [
    "Cell",
    "Coord",
    "Grid",
    "build_grid",
    "opposite",
    "DIRECTIONS",
    "TOP",
    "RIGHT",
    "BOTTOM",
    "LEFT",
]
