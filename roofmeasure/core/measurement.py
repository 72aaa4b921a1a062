"""Facet geometry: area, bounding box and perimeter in real-world feet.

Every function takes the canvas calibration explicitly; there is no
module-level scale. All functions are pure.
"""

from __future__ import annotations
from collections.abc import Sequence

from roofmeasure.models.facet import FacetMeasurements, recompute_total_area
from roofmeasure.models.geometry import Point, edges
from roofmeasure.models.parameters import Calibration


__all__ = ["MIN_FACET_POINTS", "compute_area", "compute_measurements", "recompute_total_area"]

MIN_FACET_POINTS = 3


def compute_area(
    points: Sequence[Point], calibration: Calibration | None = None,
) -> float:
    """
    Plan area of the closed polygon in square feet (shoelace formula).

    Returns 0 for fewer than 3 points. Winding order does not matter.
    Self-intersecting outlines are not detected here.
    """
    if calibration is None:
        calibration = Calibration()
    if len(points) < MIN_FACET_POINTS:
        return 0.0

    twice_area = sum(a.cross(b) for a, b in edges(list(points)))
    return calibration.to_square_feet(abs(twice_area) / 2)


def compute_measurements(
    points: Sequence[Point], calibration: Calibration | None = None,
) -> FacetMeasurements:
    """Axis-aligned bounding width/height and closed perimeter, in feet."""
    if calibration is None:
        calibration = Calibration()
    if len(points) < 2:
        return FacetMeasurements()

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    perimeter = sum(a.distance_to(b) for a, b in edges(list(points)))

    return FacetMeasurements(
        width=calibration.to_feet(max(xs) - min(xs)),
        height=calibration.to_feet(max(ys) - min(ys)),
        perimeter=calibration.to_feet(perimeter),
    )
