"""Drawing session — accumulates canvas taps until a facet is completed."""

from __future__ import annotations
from enum import Enum

from roofmeasure.models import Point, RoofFacet
from roofmeasure.core.engine import FacetMeasurementEngine
from roofmeasure.core.errors import InsufficientPointsError, InvalidSessionStateError
from roofmeasure.core.measurement import MIN_FACET_POINTS


class DrawingState(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DrawingSession:
    """
    One facet being drawn.

    IDLE -> DRAWING -> COMPLETED | CANCELLED. Completing requires at
    least three points; cancelling is always allowed while drawing.
    `start()` always begins a fresh outline, discarding any points.
    """

    def __init__(self, engine: FacetMeasurementEngine | None = None) -> None:
        self.engine = engine or FacetMeasurementEngine()
        self.state = DrawingState.IDLE
        self.points: list[Point] = []
        self.facet: RoofFacet | None = None

    @property
    def can_complete(self) -> bool:
        return self.state == DrawingState.DRAWING and len(self.points) >= MIN_FACET_POINTS

    def start(self) -> None:
        """Begin a new outline. Starting again mid-drawing discards the points."""
        self.state = DrawingState.DRAWING
        self.points = []
        self.facet = None

    def add_point(self, x: float, y: float) -> Point:
        self._require_drawing("add a point")
        point = Point(x=x, y=y)
        self.points.append(point)
        return point

    def undo_point(self) -> Point | None:
        self._require_drawing("undo a point")
        return self.points.pop() if self.points else None

    def complete(
        self,
        pitch: object = None,
        label: str | None = None,
        existing_facet_count: int = 0,
    ) -> RoofFacet:
        """Finalize the outline into a facet. The session stays DRAWING on error."""
        self._require_drawing("complete")
        if len(self.points) < MIN_FACET_POINTS:
            raise InsufficientPointsError(len(self.points), MIN_FACET_POINTS)

        facet = self.engine.finalize_facet(
            self.points, pitch, label, existing_facet_count,
        )
        self.facet = facet
        self.points = []
        self.state = DrawingState.COMPLETED
        return facet

    def cancel(self) -> None:
        self._require_drawing("cancel")
        self.points = []
        self.state = DrawingState.CANCELLED

    def _require_drawing(self, action: str) -> None:
        if self.state != DrawingState.DRAWING:
            raise InvalidSessionStateError(
                f"Cannot {action} while {self.state.value}"
            )
