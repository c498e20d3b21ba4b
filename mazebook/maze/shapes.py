"""Boundary predicates deciding which lattice positions belong to a maze."""

from __future__ import annotations

import math
from typing import Callable, Dict, Union

from ..errors import SettingsError

ShapeMask = Callable[[int, int, int, int], bool]

STAR_SPIKES = 5
STAR_INNER_RATIO = 0.5


def square(x: int, y: int, width: int, height: int) -> bool:
    return True


def circle(x: int, y: int, width: int, height: int) -> bool:
    """Inside the circle inscribed in the bounding box."""

    center_x = width / 2
    center_y = height / 2
    radius = min(width, height) / 2
    dx = x - center_x
    dy = y - center_y
    return dx * dx + dy * dy <= radius * radius


def triangle(x: int, y: int, width: int, height: int) -> bool:
    """Isoceles triangle with its base on the bottom edge and apex at the top."""

    normalized_x = (x - width / 2) / (width / 2)
    normalized_y = (y - height) / height
    return -1 <= normalized_y <= 0 and abs(normalized_x) <= 1 + normalized_y


def star(x: int, y: int, width: int, height: int) -> bool:
    """Five-lobed star: the allowed radius alternates with the polar angle."""

    dx = x - width / 2
    dy = y - height / 2
    r = math.hypot(dx, dy)
    theta = math.atan2(dy, dx)
    radius = min(width, height) / 2
    # fmod keeps the sign of theta, so the lower half-plane always gets the outer radius
    lobe = math.fmod(theta * STAR_SPIKES / math.pi, 2)
    limit = radius if lobe < 1 else radius * STAR_INNER_RATIO
    return r <= limit


SHAPES: Dict[str, ShapeMask] = {
    "square": square,
    "circle": circle,
    "triangle": triangle,
    "star": star,
}


def get_shape(shape: Union[str, ShapeMask]) -> ShapeMask:
    """Resolve a shape name or pass a custom predicate through unchanged."""

    if callable(shape):
        return shape
    try:
        return SHAPES[shape]
    except KeyError as exc:
        raise SettingsError(f"Unknown maze shape '{shape}'. Known shapes: {sorted(SHAPES)}") from exc


__all__ = ["ShapeMask", "SHAPES", "get_shape", "square", "circle", "triangle", "star"]
