"""Facet measurement engine — turns drawn outlines into roof facets."""

from __future__ import annotations
import logging
import math
import uuid
from collections.abc import Sequence

from roofmeasure.models import (
    Point, RoofFacet, FacetMeasurements, MeasurementConfig,
)
from roofmeasure.core.analyzer import PolygonAnalyzer
from roofmeasure.core.errors import (
    InsufficientPointsError, InvalidPitchError, SelfIntersectingPolygonError,
)
from roofmeasure.core.measurement import (
    MIN_FACET_POINTS, compute_area, compute_measurements,
)

logger = logging.getLogger(__name__)


def new_facet_id() -> str:
    return f"facet-{uuid.uuid4().hex}"


class FacetMeasurementEngine:
    """
    Stateless facet builder.

    Takes an outline + pitch + label, measures it with the configured
    calibration and returns a new RoofFacet. Appending the facet to a
    diagram is left to the caller.

    In lenient mode (the default) malformed input degrades quietly: a
    short outline gives a zero-area facet and a bad pitch falls back to
    the default. Strict mode raises a MeasurementError instead.
    """

    def __init__(self, config: MeasurementConfig | None = None) -> None:
        self.config = config or MeasurementConfig()
        self.analyzer = PolygonAnalyzer()

    def parse_pitch(self, value: object) -> float:
        """Parse a user-entered pitch ("6", 6.5, ...) into rise per 12 run."""
        default = self.config.defaults.pitch
        if value is None or (isinstance(value, str) and not value.strip()):
            return default

        try:
            pitch = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            pitch = math.nan

        if isinstance(value, bool) or not math.isfinite(pitch) or pitch <= 0:
            if self.config.strict:
                raise InvalidPitchError(value)
            logger.debug("Invalid pitch %r, using default %s", value, default)
            return default
        return pitch

    def resolve_label(self, label: str | None, existing_facet_count: int) -> str:
        if label is not None and label.strip():
            return label.strip()
        return f"{self.config.defaults.label_prefix} {existing_facet_count + 1}"

    def validate_points(self, points: Sequence[Point]) -> None:
        """Raise if the outline can't form a facet under the current config."""
        if self.config.strict and len(points) < MIN_FACET_POINTS:
            raise InsufficientPointsError(len(points), MIN_FACET_POINTS)

        if self.config.validate_simple_polygon:
            crossing = self.analyzer.find_crossing(points)
            if crossing is not None:
                raise SelfIntersectingPolygonError(crossing)

    def finalize_facet(
        self,
        points: Sequence[Point],
        pitch: object = None,
        label: str | None = None,
        existing_facet_count: int = 0,
    ) -> RoofFacet:
        self.validate_points(points)

        calibration = self.config.calibration
        if len(points) < MIN_FACET_POINTS:
            # Not a closed shape yet: no area and no dimensions
            logger.debug(
                "Finalizing degenerate facet with %d point(s)", len(points),
            )
            measurements = FacetMeasurements()
        else:
            measurements = compute_measurements(points, calibration)

        return RoofFacet(
            id=new_facet_id(),
            points=tuple(points),
            pitch=self.parse_pitch(pitch),
            label=self.resolve_label(label, existing_facet_count),
            area=compute_area(points, calibration),
            measurements=measurements,
        )
