"""Maze construction facade and maze book builder."""

from __future__ import annotations

import argparse
import logging
import random
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..base import AbstractBookGenerator, PathLike
from .carver import add_imperfections, carve
from .grid import Coord, Grid, build_grid
from .settings import (
    DIFFICULTY_SIZES,
    END_PRESETS,
    MAZE_TYPES,
    START_PRESETS,
    BookSettings,
)
from .shapes import SHAPES
from .solver import solve_maze

logger = logging.getLogger(__name__)


class MazeGenerator:
    """One maze instance: owns its grid, carves it once and solves it on demand."""

    def __init__(
        self,
        width: int,
        height: int,
        settings: Optional[BookSettings] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.settings = settings or BookSettings()
        self.settings.validate()
        self.grid: Grid = build_grid(width, height, self.settings.shape_mask())
        self.width = self.grid.width
        self.height = self.grid.height
        self._rng = rng or random.Random(seed)
        self._generated = False

    def generate(self) -> Grid:
        """Carve the maze, braiding it for the imperfect variant. Repeat calls are no-ops."""

        if not self._generated:
            carve(self.grid, self._rng)
            if self.settings.maze_type == "imperfect":
                add_imperfections(self.grid, self._rng)
            self._generated = True
        return self.grid

    def solve_maze(self, start: Sequence[int], end: Sequence[int]) -> bool:
        return solve_maze(self.grid, start, end)

    def start_point(self) -> Coord:
        if self.settings.start_point == "custom":
            return tuple(self.settings.custom_start_point)
        if self.settings.start_point == "bottom-left":
            return self._nearest_cell((0, self.height - 1))
        return self._nearest_cell((0, 0))

    def end_point(self) -> Coord:
        if self.settings.end_point == "custom":
            return tuple(self.settings.custom_end_point)
        if self.settings.end_point == "top-right":
            return self._nearest_cell((self.width - 1, 0))
        return self._nearest_cell((self.width - 1, self.height - 1))

    def _nearest_cell(self, corner: Coord) -> Coord:
        # Shaped masks often cut the corners off; fall back to the closest cell.
        cx, cy = corner
        if not self.grid.is_hole(cx, cy):
            return corner
        best = min(
            self.grid.cells(),
            key=lambda cell: (abs(cell.x - cx) + abs(cell.y - cy), cell.y, cell.x),
            default=None,
        )
        return corner if best is None else best.coord


@dataclass
class MazeRecord:
    id: str
    width: int
    height: int
    shape: str
    maze_type: str
    start: Tuple[int, int]
    end: Tuple[int, int]
    mask: List[List[bool]]
    walls: List[List[List[bool]]]
    solved: Optional[bool] = None
    solution: List[Tuple[int, int]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "shape": self.shape,
            "maze_type": self.maze_type,
            "start": list(self.start),
            "end": list(self.end),
            "mask": self.mask,
            "walls": self.walls,
            "solved": self.solved,
            "solution": [list(coord) for coord in self.solution],
        }


class MazeBookGenerator(AbstractBookGenerator[MazeRecord]):
    """Generate a book of independent mazes sharing one set of settings."""

    def __init__(
        self,
        output_dir: PathLike = "data/mazes",
        *,
        settings: Optional[BookSettings] = None,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(output_dir)
        self.settings = settings or BookSettings()
        self.settings.validate()
        self._rng = random.Random(seed if seed is not None else self.settings.seed)
        self.metadata_path = self.output_dir / "mazes.json"

    def create_maze(self, *, maze_id: Optional[str] = None) -> MazeRecord:
        maze_uuid = maze_id or str(uuid.uuid4())
        width, height = self.settings.dimensions()
        maze = MazeGenerator(width, height, self.settings, seed=self._rng.getrandbits(64))
        grid = maze.generate()
        start = maze.start_point()
        end = maze.end_point()

        solved: Optional[bool] = None
        if self.settings.show_solution and grid.cell_count == 0:
            solved = False
            logger.warning("Maze %s has no cells inside its %s mask", maze_uuid, self.settings.shape)
        elif self.settings.show_solution:
            solved = maze.solve_maze(start, end)
            if not solved:
                logger.warning("Maze %s has no path from %s to %s", maze_uuid, start, end)

        logger.info(
            "Created %s %s maze %s (%dx%d, %d cells, %d open walls)",
            self.settings.maze_type,
            self.settings.shape,
            maze_uuid,
            width,
            height,
            grid.cell_count,
            grid.open_wall_count(),
        )
        return MazeRecord(
            id=maze_uuid,
            width=width,
            height=height,
            shape=self.settings.shape,
            maze_type=self.settings.maze_type,
            start=start,
            end=end,
            mask=grid.mask_array().tolist(),
            walls=grid.wall_array().tolist(),
            solved=solved,
            solution=grid.path,
        )

    def generate_book(
        self,
        *,
        metadata_path: Optional[PathLike] = None,
        append: bool = True,
    ) -> List[MazeRecord]:
        """Generate ``settings.maze_count`` mazes and write their metadata."""

        return self.generate_dataset(
            self.settings.maze_count,
            metadata_path=metadata_path or self.metadata_path,
            append=append,
        )


__all__ = ["MazeGenerator", "MazeBookGenerator", "MazeRecord"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a book of mazes")
    parser.add_argument("--count", type=int, default=None, help="Number of mazes (overrides settings)")
    parser.add_argument("--output-dir", type=Path, default=Path("data/mazes"), help="Where to save metadata")
    parser.add_argument("--settings", type=Path, default=None, help="JSON settings file")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTY_SIZES), default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--shape", choices=sorted(SHAPES), default=None)
    parser.add_argument("--maze-type", choices=MAZE_TYPES, default=None)
    parser.add_argument("--show-solution", action="store_true", help="Solve each maze and store the path")
    parser.add_argument("--start-point", choices=START_PRESETS, default=None)
    parser.add_argument("--end-point", choices=END_PRESETS, default=None)
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None, help="Custom start cell")
    parser.add_argument("--end", type=int, nargs=2, metavar=("X", "Y"), default=None, help="Custom end cell")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--overwrite", action="store_true", help="Replace existing metadata instead of appending")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> BookSettings:
    settings = BookSettings.from_json(args.settings) if args.settings else BookSettings()
    overrides = {
        "maze_count": args.count,
        "difficulty": args.difficulty,
        "width": args.width,
        "height": args.height,
        "shape": args.shape,
        "maze_type": args.maze_type,
        "start_point": args.start_point,
        "end_point": args.end_point,
        "seed": args.seed,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(settings, name, value)
    if args.show_solution:
        settings.show_solution = True
    if args.start is not None:
        settings.start_point = "custom"
        settings.custom_start_point = tuple(args.start)
    if args.end is not None:
        settings.end_point = "custom"
        settings.custom_end_point = tuple(args.end)
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    generator = MazeBookGenerator(output_dir=args.output_dir, settings=_settings_from_args(args))
    records = generator.generate_book(append=not args.overwrite)
    logger.info("Wrote %d maze(s) to %s", len(records), generator.metadata_path)


if __name__ == "__main__":
    main()
