"""Errors raised while measuring and drawing roof facets."""

from __future__ import annotations


class MeasurementError(ValueError):
    """Base class for rejected facet input. `code` is stable for API clients."""
    code: str = "measurement_error"


class InsufficientPointsError(MeasurementError):
    code = "insufficient_points"

    def __init__(self, count: int, required: int = 3) -> None:
        self.count = count
        self.required = required
        super().__init__(
            f"A facet needs at least {required} points, got {count}"
        )


class InvalidPitchError(MeasurementError):
    code = "invalid_pitch"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Pitch must be a positive number, got {value!r}")


class SelfIntersectingPolygonError(MeasurementError):
    code = "self_intersecting_polygon"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Facet outline crosses itself: {reason}")


class InvalidSessionStateError(MeasurementError):
    code = "invalid_session_state"


class DiagramNotFoundError(KeyError):
    def __init__(self, diagram_id: str) -> None:
        self.diagram_id = diagram_id
        super().__init__(diagram_id)

    def __str__(self) -> str:
        return f"Diagram not found: {self.diagram_id}"


class FacetNotFoundError(KeyError):
    def __init__(self, diagram_id: str, facet_id: str) -> None:
        self.diagram_id = diagram_id
        self.facet_id = facet_id
        super().__init__(facet_id)

    def __str__(self) -> str:
        return f"Facet {self.facet_id} not found in diagram {self.diagram_id}"
