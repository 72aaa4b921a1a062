"""Tests for RoofDiagram bookkeeping and the DiagramService facade."""

from __future__ import annotations

import pytest

from roofmeasure.core.errors import (
    DiagramNotFoundError, FacetNotFoundError, InsufficientPointsError,
)
from roofmeasure.models import MeasurementConfig, Point, RoofDiagram
from roofmeasure.services.diagram_service import DiagramService


def _rect(w: float, h: float) -> list[Point]:
    return [Point(x=0, y=0), Point(x=w, y=0), Point(x=w, y=h), Point(x=0, y=h)]


@pytest.fixture
def service() -> DiagramService:
    return DiagramService()


# ---------------------------------------------------------------------------
# RoofDiagram
# ---------------------------------------------------------------------------

class TestRoofDiagram:

    def test_new_diagram_is_empty(self):
        diagram = RoofDiagram()
        assert diagram.facets == []
        assert diagram.total_area == 0
        assert diagram.id.startswith("diagram-")

    def test_total_area_follows_facets(self, service):
        diagram = service.create_diagram()
        first = service.add_facet(diagram.id, _rect(100, 100))     # 100 sq ft
        service.add_facet(diagram.id, _rect(250, 100))             # 250 sq ft
        assert diagram.total_area == pytest.approx(350.0)

        service.remove_facet(diagram.id, first.id)
        assert diagram.total_area == pytest.approx(250.0)

    def test_snapshot_includes_total_area(self, service):
        diagram = service.create_diagram()
        service.add_facet(diagram.id, _rect(100, 100))
        snapshot = diagram.model_dump()
        assert snapshot["total_area"] == pytest.approx(100.0)
        assert len(snapshot["facets"]) == 1

    def test_updated_at_moves_on_change(self, service):
        diagram = service.create_diagram()
        before = diagram.updated_at
        service.add_facet(diagram.id, _rect(10, 10))
        assert diagram.updated_at >= before
        assert diagram.created_at <= diagram.updated_at

    def test_remove_unknown_facet_returns_none(self):
        assert RoofDiagram().remove_facet("nope") is None


# ---------------------------------------------------------------------------
# DiagramService
# ---------------------------------------------------------------------------

class TestDiagramService:

    def test_labels_number_facets_in_order(self, service):
        diagram = service.create_diagram()
        a = service.add_facet(diagram.id, _rect(10, 10))
        b = service.add_facet(diagram.id, _rect(10, 10), label="Garage")
        c = service.add_facet(diagram.id, _rect(10, 10))
        assert [a.label, b.label, c.label] == ["Facet 1", "Garage", "Facet 3"]

    def test_get_unknown_diagram(self, service):
        with pytest.raises(DiagramNotFoundError):
            service.get_diagram("missing")

    def test_remove_unknown_facet(self, service):
        diagram = service.create_diagram()
        with pytest.raises(FacetNotFoundError):
            service.remove_facet(diagram.id, "facet-missing")

    def test_delete_diagram(self, service):
        diagram = service.create_diagram()
        service.delete_diagram(diagram.id)
        assert service.list_diagrams() == []
        with pytest.raises(DiagramNotFoundError):
            service.delete_diagram(diagram.id)

    def test_clear_facets(self, service):
        diagram = service.create_diagram()
        service.add_facet(diagram.id, _rect(10, 10))
        service.clear_facets(diagram.id)
        assert diagram.facets == []
        assert diagram.total_area == 0

    def test_per_request_calibration(self, service):
        diagram = service.create_diagram()
        facet = service.add_facet(diagram.id, _rect(100, 100), pixels_per_foot=5)
        assert facet.area == pytest.approx(400.0)
        # Service default is untouched
        assert service.config.calibration.pixels_per_foot == 10.0

    def test_measure(self, service):
        area, m = service.measure(_rect(100, 50))
        assert area == pytest.approx(50.0)
        assert m.width == pytest.approx(10.0)
        assert m.height == pytest.approx(5.0)
        assert m.perimeter == pytest.approx(30.0)

    def test_strict_service_rejects_short_outline(self):
        service = DiagramService(MeasurementConfig(strict=True))
        diagram = service.create_diagram()
        with pytest.raises(InsufficientPointsError):
            service.add_facet(diagram.id, _rect(10, 10)[:2])
        assert diagram.facets == []

    def test_summary(self, service):
        diagram = service.create_diagram()
        service.add_facet(diagram.id, _rect(100, 100), pitch=4)
        service.add_facet(diagram.id, _rect(250, 100), pitch="8")
        summary = service.summarize(diagram.id)
        assert summary.facet_count == 2
        assert summary.total_area == pytest.approx(350.0)
        assert summary.average_pitch == pytest.approx(6.0)
        assert [row.label for row in summary.facets] == ["Facet 1", "Facet 2"]
        assert summary.facets[1].width == pytest.approx(25.0)

    def test_summary_of_empty_diagram(self, service):
        diagram = service.create_diagram()
        summary = service.summarize(diagram.id)
        assert summary.facet_count == 0
        assert summary.average_pitch == 0.0

    def test_diagram_total_matches_recomputed_total(self, service):
        from roofmeasure.core.measurement import recompute_total_area

        diagram = service.create_diagram()
        service.add_facet(diagram.id, _rect(100, 100))
        service.add_facet(diagram.id, _rect(30, 70))
        assert diagram.total_area == pytest.approx(recompute_total_area(diagram.facets))
