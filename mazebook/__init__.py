"""Shaped maze generation, solving and maze book tooling."""

__all__ = [
    "AbstractBookGenerator",
    "AbstractMazeEvaluator",
    "MazeError",
    "DimensionError",
    "InvalidCoordinate",
    "SettingsError",
    "BookSettings",
    "Grid",
    "MazeGenerator",
    "MazeBookGenerator",
    "MazeRecord",
    "MazeEvaluator",
    "MazeEvaluationResult",
]

from .base import AbstractBookGenerator, AbstractMazeEvaluator
from .errors import DimensionError, InvalidCoordinate, MazeError, SettingsError
from .maze import (
    BookSettings,
    Grid,
    MazeGenerator,
    MazeBookGenerator,
    MazeRecord,
    MazeEvaluator,
    MazeEvaluationResult,
)
