from .geometry import Point, edges
from .facet import FacetMeasurements, RoofFacet, recompute_total_area
from .diagram import RoofDiagram, DiagramSummary, FacetRow
from .parameters import (
    Calibration, FacetDefaults, MeasurementConfig, PIXELS_PER_FOOT, DEFAULT_PITCH,
)

__all__ = [
    "Point", "edges",
    "FacetMeasurements", "RoofFacet", "recompute_total_area",
    "RoofDiagram", "DiagramSummary", "FacetRow",
    "Calibration", "FacetDefaults", "MeasurementConfig",
    "PIXELS_PER_FOOT", "DEFAULT_PITCH",
]
