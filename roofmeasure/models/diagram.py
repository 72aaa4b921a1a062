"""Roof diagram — the set of facets drawn for one property."""

from __future__ import annotations
import uuid
from datetime import datetime, timezone
from pydantic import BaseModel, Field, computed_field

from .facet import RoofFacet, recompute_total_area


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_diagram_id() -> str:
    return f"diagram-{uuid.uuid4().hex}"


class RoofDiagram(BaseModel):
    """
    Aggregate of facets for one property.

    The total area is derived from the current facets on every read and
    is never stored on its own. Facets are added and removed whole;
    changing a facet's outline means removing it and adding a new one.
    """
    id: str = Field(default_factory=new_diagram_id)
    facets: list[RoofFacet] = []
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
    map_snapshot: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_area(self) -> float:
        return recompute_total_area(self.facets)

    def add_facet(self, facet: RoofFacet) -> None:
        self.facets.append(facet)
        self.updated_at = _now()

    def remove_facet(self, facet_id: str) -> RoofFacet | None:
        """Remove a facet by id. Returns the removed facet, or None."""
        for i, f in enumerate(self.facets):
            if f.id == facet_id:
                removed = self.facets.pop(i)
                self.updated_at = _now()
                return removed
        return None

    def get_facet(self, facet_id: str) -> RoofFacet | None:
        for f in self.facets:
            if f.id == facet_id:
                return f
        return None

    def clear(self) -> None:
        self.facets = []
        self.updated_at = _now()


class FacetRow(BaseModel):
    """One line of the facet details table."""
    id: str
    label: str
    area: float
    pitch: float
    width: float
    height: float
    perimeter: float


class DiagramSummary(BaseModel):
    """Report-ready overview of a diagram."""
    diagram_id: str
    total_area: float
    facet_count: int
    average_pitch: float
    created_at: datetime
    facets: list[FacetRow]

    @classmethod
    def from_diagram(cls, diagram: RoofDiagram) -> DiagramSummary:
        facets = diagram.facets
        avg_pitch = sum(f.pitch for f in facets) / len(facets) if facets else 0.0
        return cls(
            diagram_id=diagram.id,
            total_area=diagram.total_area,
            facet_count=len(facets),
            average_pitch=avg_pitch,
            created_at=diagram.created_at,
            facets=[
                FacetRow(
                    id=f.id,
                    label=f.label,
                    area=f.area,
                    pitch=f.pitch,
                    width=f.measurements.width,
                    height=f.measurements.height,
                    perimeter=f.measurements.perimeter,
                )
                for f in facets
            ],
        )
