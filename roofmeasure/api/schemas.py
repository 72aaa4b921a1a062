"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field, StrictFloat, StrictStr

from roofmeasure.models import FacetMeasurements
from roofmeasure.models.geometry import Point


class MeasureRequest(BaseModel):
    """Outline to measure without saving it."""
    points: list[Point]
    pixels_per_foot: float | None = Field(default=None, gt=0)


class MeasureResponse(BaseModel):
    area: float
    measurements: FacetMeasurements
    point_count: int


class CreateDiagramRequest(BaseModel):
    map_snapshot: str | None = None


class FacetInput(BaseModel):
    """Facet as sent from the drawing tool."""
    points: list[Point]
    pitch: StrictFloat | StrictStr | None = None    # Raw text field value is accepted
    label: str | None = None
    pixels_per_foot: float | None = Field(default=None, gt=0)


class ErrorResponse(BaseModel):
    error: str
    detail: str
