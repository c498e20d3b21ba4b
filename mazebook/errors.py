"""Exception types raised by the maze engine and book tooling."""

from __future__ import annotations

from typing import Optional, Tuple


class MazeError(ValueError):
    """Base class for maze construction and solving errors."""


class DimensionError(MazeError):
    """Raised when a maze is requested with a non-positive width or height."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(f"Maze dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class InvalidCoordinate(MazeError):
    """Raised when a coordinate is out of bounds or lands on a hole."""

    def __init__(self, coord: Tuple[int, int], reason: Optional[str] = None) -> None:
        message = f"Invalid maze coordinate {tuple(coord)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.coord = tuple(coord)


class SettingsError(MazeError):
    """Raised when book settings name an unknown option."""


__all__ = ["MazeError", "DimensionError", "InvalidCoordinate", "SettingsError"]
