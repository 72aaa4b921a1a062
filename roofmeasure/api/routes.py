"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from roofmeasure.models import RoofFacet, RoofDiagram, DiagramSummary
from roofmeasure.services.diagram_service import DiagramService
from roofmeasure.api.schemas import (
    MeasureRequest, MeasureResponse, CreateDiagramRequest, FacetInput,
)

router = APIRouter()

# Shared service instance
_service = DiagramService()


def get_service() -> DiagramService:
    return _service


@router.post("/measure", response_model=MeasureResponse)
async def measure(request: MeasureRequest) -> MeasureResponse:
    """Measure an outline without adding it to a diagram."""
    area, measurements = _service.measure(request.points, request.pixels_per_foot)
    return MeasureResponse(
        area=area,
        measurements=measurements,
        point_count=len(request.points),
    )


@router.post(
    "/diagrams", response_model=RoofDiagram, status_code=status.HTTP_201_CREATED,
)
async def create_diagram(request: CreateDiagramRequest | None = None) -> RoofDiagram:
    map_snapshot = request.map_snapshot if request else None
    return _service.create_diagram(map_snapshot=map_snapshot)


@router.get("/diagrams", response_model=list[RoofDiagram])
async def list_diagrams() -> list[RoofDiagram]:
    return _service.list_diagrams()


@router.get("/diagrams/{diagram_id}", response_model=RoofDiagram)
async def get_diagram(diagram_id: str) -> RoofDiagram:
    return _service.get_diagram(diagram_id)


@router.delete("/diagrams/{diagram_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_diagram(diagram_id: str) -> Response:
    _service.delete_diagram(diagram_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/diagrams/{diagram_id}/facets",
    response_model=RoofFacet,
    status_code=status.HTTP_201_CREATED,
)
async def add_facet(diagram_id: str, request: FacetInput) -> RoofFacet:
    """Finalize a drawn outline and append it to the diagram."""
    return _service.add_facet(
        diagram_id,
        request.points,
        pitch=request.pitch,
        label=request.label,
        pixels_per_foot=request.pixels_per_foot,
    )


@router.delete("/diagrams/{diagram_id}/facets", response_model=RoofDiagram)
async def clear_facets(diagram_id: str) -> RoofDiagram:
    return _service.clear_facets(diagram_id)


@router.delete("/diagrams/{diagram_id}/facets/{facet_id}", response_model=RoofDiagram)
async def remove_facet(diagram_id: str, facet_id: str) -> RoofDiagram:
    _service.remove_facet(diagram_id, facet_id)
    return _service.get_diagram(diagram_id)


@router.get("/diagrams/{diagram_id}/summary", response_model=DiagramSummary)
async def summarize(diagram_id: str) -> DiagramSummary:
    return _service.summarize(diagram_id)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
