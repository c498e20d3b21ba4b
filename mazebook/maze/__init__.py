"""Maze engine: shape masks, grid, carving, solving, and book tooling."""

__all__ = [
    "Cell",
    "Grid",
    "build_grid",
    "SHAPES",
    "get_shape",
    "carve",
    "add_imperfections",
    "solve_maze",
    "BookSettings",
    "MazeGenerator",
    "MazeBookGenerator",
    "MazeRecord",
    "MazeEvaluator",
    "MazeEvaluationResult",
]

from .shapes import SHAPES, get_shape
from .grid import Cell, Grid, build_grid
from .carver import add_imperfections, carve
from .solver import solve_maze
from .settings import BookSettings
from .generator import MazeGenerator, MazeBookGenerator, MazeRecord
from .evaluator import MazeEvaluator, MazeEvaluationResult
