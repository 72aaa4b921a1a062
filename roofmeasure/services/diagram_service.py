"""High-level diagram service — facade for the API layer."""

from __future__ import annotations
import logging
from collections.abc import Sequence

from roofmeasure.models import (
    Point, RoofFacet, RoofDiagram, DiagramSummary,
    FacetMeasurements, Calibration, MeasurementConfig,
)
from roofmeasure.core.engine import FacetMeasurementEngine
from roofmeasure.core.errors import DiagramNotFoundError, FacetNotFoundError
from roofmeasure.core.measurement import compute_area, compute_measurements

logger = logging.getLogger(__name__)


class DiagramService:
    """Keeps diagrams in memory and delegates measurement to the engine."""

    def __init__(self, config: MeasurementConfig | None = None) -> None:
        self.config = config or MeasurementConfig()
        self.engine = FacetMeasurementEngine(self.config)
        self._diagrams: dict[str, RoofDiagram] = {}

    def _engine_for(self, pixels_per_foot: float | None) -> FacetMeasurementEngine:
        if pixels_per_foot is None:
            return self.engine
        config = self.config.model_copy(
            update={"calibration": Calibration(pixels_per_foot=pixels_per_foot)},
        )
        return FacetMeasurementEngine(config)

    def measure(
        self, points: Sequence[Point], pixels_per_foot: float | None = None,
    ) -> tuple[float, FacetMeasurements]:
        """Area and measurements of an outline without storing anything."""
        calibration = self._engine_for(pixels_per_foot).config.calibration
        return (
            compute_area(points, calibration),
            compute_measurements(points, calibration),
        )

    def create_diagram(self, map_snapshot: str | None = None) -> RoofDiagram:
        diagram = RoofDiagram(map_snapshot=map_snapshot)
        self._diagrams[diagram.id] = diagram
        logger.info("Created diagram %s", diagram.id)
        return diagram

    def list_diagrams(self) -> list[RoofDiagram]:
        return list(self._diagrams.values())

    def get_diagram(self, diagram_id: str) -> RoofDiagram:
        diagram = self._diagrams.get(diagram_id)
        if diagram is None:
            raise DiagramNotFoundError(diagram_id)
        return diagram

    def delete_diagram(self, diagram_id: str) -> None:
        if self._diagrams.pop(diagram_id, None) is None:
            raise DiagramNotFoundError(diagram_id)
        logger.info("Deleted diagram %s", diagram_id)

    def add_facet(
        self,
        diagram_id: str,
        points: Sequence[Point],
        pitch: object = None,
        label: str | None = None,
        pixels_per_foot: float | None = None,
    ) -> RoofFacet:
        diagram = self.get_diagram(diagram_id)
        facet = self._engine_for(pixels_per_foot).finalize_facet(
            points, pitch, label, existing_facet_count=len(diagram.facets),
        )
        diagram.add_facet(facet)
        logger.info(
            "Added %s (%.2f sq ft) to diagram %s, total %.2f sq ft",
            facet.id, facet.area, diagram_id, diagram.total_area,
        )
        return facet

    def remove_facet(self, diagram_id: str, facet_id: str) -> RoofFacet:
        diagram = self.get_diagram(diagram_id)
        facet = diagram.remove_facet(facet_id)
        if facet is None:
            raise FacetNotFoundError(diagram_id, facet_id)
        logger.info("Removed %s from diagram %s", facet_id, diagram_id)
        return facet

    def clear_facets(self, diagram_id: str) -> RoofDiagram:
        diagram = self.get_diagram(diagram_id)
        diagram.clear()
        logger.info("Cleared all facets from diagram %s", diagram_id)
        return diagram

    def summarize(self, diagram_id: str) -> DiagramSummary:
        return DiagramSummary.from_diagram(self.get_diagram(diagram_id))
