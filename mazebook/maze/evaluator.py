"""Check candidate solution paths against stored mazes."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..base import AbstractMazeEvaluator
from .grid import Grid


@dataclass
class MazeEvaluationResult:
    puzzle_id: str
    connected: bool
    touches_goal: bool
    crosses_walls: bool
    steps: int
    message: str

    @property
    def is_valid_solution(self) -> bool:
        return self.connected and self.touches_goal and not self.crosses_walls

    def to_dict(self) -> dict:
        return {
            "puzzle_id": self.puzzle_id,
            "connected": self.connected,
            "touches_goal": self.touches_goal,
            "crosses_walls": self.crosses_walls,
            "steps": self.steps,
            "is_valid_solution": self.is_valid_solution,
            "message": self.message,
        }


class MazeEvaluator(AbstractMazeEvaluator):
    """Evaluate a path by walking it through the stored maze walls."""

    def evaluate(self, puzzle_id: str, candidate: Sequence[Sequence[int]]) -> MazeEvaluationResult:
        record = self.get_record(puzzle_id)
        grid = Grid.from_arrays(record["mask"], record["walls"])
        start = tuple(map(int, record["start"]))
        goal = tuple(map(int, record["end"]))
        path: List[Tuple[int, int]] = [(int(x), int(y)) for x, y in candidate]

        crosses_walls = False
        broken_at: Optional[int] = None
        for index, (a, b) in enumerate(zip(path, path[1:])):
            if abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1 or grid.is_hole(*a) or grid.is_hole(*b):
                broken_at = index
                break
            if not grid.is_open(a, b):
                crosses_walls = True
        if path and grid.is_hole(*path[0]):
            broken_at = 0

        starts_at_start = bool(path) and path[0] == start
        touches_goal = goal in path
        connected = starts_at_start and broken_at is None and bool(path) and path[-1] == goal

        if not path:
            message = "Candidate path is empty."
        elif not starts_at_start:
            message = "Path does not begin at the start cell."
        elif broken_at is not None:
            message = f"Path is not continuous after step {broken_at}."
        elif crosses_walls:
            message = "Path passes through a wall."
        elif not touches_goal:
            message = "Path does not reach the goal."
        elif not connected:
            message = "Path does not end at the goal."
        else:
            message = "Path successfully connects start to goal."

        return MazeEvaluationResult(
            puzzle_id=puzzle_id,
            connected=connected,
            touches_goal=touches_goal,
            crosses_walls=crosses_walls,
            steps=max(len(path) - 1, 0),
            message=message,
        )


__all__ = ["MazeEvaluator", "MazeEvaluationResult"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a maze solution path")
    parser.add_argument("metadata", type=Path, help="Path to maze metadata JSON")
    parser.add_argument("puzzle_id", type=str, help="Identifier of the maze to evaluate")
    parser.add_argument("candidate", type=Path, help="JSON file holding a list of [x, y] cells")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    evaluator = MazeEvaluator(args.metadata)
    candidate = json.loads(args.candidate.read_text(encoding="utf-8"))
    result = evaluator.evaluate(args.puzzle_id, candidate)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
