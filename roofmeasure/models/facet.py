"""Roof facet models."""

from __future__ import annotations
from collections.abc import Iterable
from pydantic import BaseModel, ConfigDict

from .geometry import Point


class FacetMeasurements(BaseModel):
    """Bounding dimensions and perimeter of a facet, in feet."""
    model_config = ConfigDict(frozen=True)

    width: float = 0.0       # Axis-aligned, not the true width of a rotated facet
    height: float = 0.0
    perimeter: float = 0.0


class RoofFacet(BaseModel):
    """One planar roof section. Never edited after creation."""
    model_config = ConfigDict(frozen=True)

    id: str
    points: tuple[Point, ...]
    pitch: float            # Rise per 12 run
    label: str
    area: float             # Square feet, plan view
    measurements: FacetMeasurements


def recompute_total_area(facets: Iterable[RoofFacet]) -> float:
    """Sum of facet areas. Always recomputed from the facets themselves."""
    return sum((f.area for f in facets), 0.0)
