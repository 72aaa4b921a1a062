"""Geometric primitives for the drawing canvas."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """Point on the drawing canvas, in pixels (y grows downwards)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def cross(self, other: Point) -> float:
        """Z component of the cross product of the two position vectors."""
        return self.x * other.y - other.x * self.y

    def __sub__(self, other: Point) -> Point:
        return Point(x=self.x - other.x, y=self.y - other.y)


def edges(points: list[Point]) -> list[tuple[Point, Point]]:
    """Consecutive point pairs of the closed polygon, last back to first."""
    n = len(points)
    return [(points[i], points[(i + 1) % n]) for i in range(n)]
