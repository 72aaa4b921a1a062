"""Outline analysis: detects facet outlines that cross themselves."""

from __future__ import annotations
from collections.abc import Sequence

from shapely.geometry import LinearRing, Polygon
from shapely.validation import explain_validity

from roofmeasure.models.geometry import Point


TOLERANCE = 1e-9  # Canvas pixels; taps are never this close on purpose


class PolygonAnalyzer:
    """Checks whether a drawn outline is a simple polygon."""

    def find_crossing(self, points: Sequence[Point]) -> str | None:
        """
        Describe where the outline touches or crosses itself, or return
        None when it is simple.

        Consecutive repeated taps are collapsed first.
        """
        pts = self._dedupe(points)
        # A triangle can't cross itself
        if len(pts) < 4:
            return None

        coords = [(p.x, p.y) for p in pts]
        if LinearRing(coords).is_simple:
            return None

        reason = explain_validity(Polygon(coords))
        if reason == "Valid Geometry":
            return "Ring self-touching"
        return reason

    def is_simple(self, points: Sequence[Point]) -> bool:
        return self.find_crossing(points) is None

    def _dedupe(self, points: Sequence[Point]) -> list[Point]:
        pts: list[Point] = []
        for p in points:
            if pts and p.distance_to(pts[-1]) <= TOLERANCE:
                continue
            pts.append(p)
        while len(pts) > 1 and pts[0].distance_to(pts[-1]) <= TOLERANCE:
            pts.pop()
        return pts
