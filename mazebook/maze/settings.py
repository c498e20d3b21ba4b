"""Maze book settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..base import PathLike
from ..errors import SettingsError
from .shapes import SHAPES, ShapeMask

DIFFICULTY_SIZES: Dict[str, Tuple[int, int]] = {
    "easy": (10, 10),
    "medium": (15, 15),
    "hard": (20, 20),
}
MAZE_TYPES = ("perfect", "imperfect")
START_PRESETS = ("top-left", "bottom-left", "custom")
END_PRESETS = ("bottom-right", "top-right", "custom")

_CAMEL_KEYS = {
    "mazeCount": "maze_count",
    "showSolution": "show_solution",
    "mazeType": "maze_type",
    "startPoint": "start_point",
    "endPoint": "end_point",
    "customStartPoint": "custom_start_point",
    "customEndPoint": "custom_end_point",
}


def _as_point(value: Any) -> Tuple[int, int]:
    if isinstance(value, dict):
        return int(value["x"]), int(value["y"])
    x, y = value
    return int(x), int(y)


@dataclass
class BookSettings:
    maze_count: int = 1
    difficulty: str = "medium"
    width: Optional[int] = None
    height: Optional[int] = None
    shape: str = "square"
    maze_type: str = "perfect"
    show_solution: bool = False
    start_point: str = "top-left"
    end_point: str = "bottom-right"
    custom_start_point: Tuple[int, int] = (0, 0)
    custom_end_point: Tuple[int, int] = (0, 0)
    seed: Optional[int] = None
    custom_mask: Optional[ShapeMask] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BookSettings":
        """Build settings from snake_case or camelCase keys, ignoring unknown ones."""

        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in payload.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known:
                kwargs[name] = value
        for key in ("custom_start_point", "custom_end_point"):
            if key in kwargs:
                kwargs[key] = _as_point(kwargs[key])
        return cls(**kwargs)

    @classmethod
    def from_json(cls, path: PathLike) -> "BookSettings":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise SettingsError("Settings file must contain a JSON object")
        return cls.from_dict(payload)

    def validate(self) -> None:
        if self.maze_count < 1:
            raise SettingsError("maze_count must be at least 1")
        if self.difficulty not in DIFFICULTY_SIZES:
            raise SettingsError(f"Unknown difficulty '{self.difficulty}'")
        if self.shape == "custom":
            if self.custom_mask is None:
                raise SettingsError("shape 'custom' requires a custom_mask predicate")
        elif self.shape not in SHAPES:
            raise SettingsError(f"Unknown shape '{self.shape}'")
        if self.maze_type not in MAZE_TYPES:
            raise SettingsError(f"Unknown maze type '{self.maze_type}'")
        if self.start_point not in START_PRESETS:
            raise SettingsError(f"Unknown start point '{self.start_point}'")
        if self.end_point not in END_PRESETS:
            raise SettingsError(f"Unknown end point '{self.end_point}'")

    def dimensions(self) -> Tuple[int, int]:
        """Return ``(width, height)``; explicit sizes override the difficulty preset."""

        default_width, default_height = DIFFICULTY_SIZES.get(self.difficulty, DIFFICULTY_SIZES["medium"])
        width = self.width if self.width is not None else default_width
        height = self.height if self.height is not None else default_height
        return width, height

    def shape_mask(self) -> ShapeMask:
        if self.shape == "custom":
            if self.custom_mask is None:
                raise SettingsError("shape 'custom' requires a custom_mask predicate")
            return self.custom_mask
        try:
            return SHAPES[self.shape]
        except KeyError as exc:
            raise SettingsError(f"Unknown shape '{self.shape}'") from exc

    def to_dict(self) -> dict:
        return {
            "maze_count": self.maze_count,
            "difficulty": self.difficulty,
            "width": self.width,
            "height": self.height,
            "shape": self.shape,
            "maze_type": self.maze_type,
            "show_solution": self.show_solution,
            "start_point": self.start_point,
            "end_point": self.end_point,
            "custom_start_point": list(self.custom_start_point),
            "custom_end_point": list(self.custom_end_point),
            "seed": self.seed,
        }


__all__ = [
    "BookSettings",
    "DIFFICULTY_SIZES",
    "MAZE_TYPES",
    "START_PRESETS",
    "END_PRESETS",
]
