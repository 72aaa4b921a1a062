"""Measurement calibration and configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field

# Canvas scale: 10 pixels = 1 foot
PIXELS_PER_FOOT = 10.0

DEFAULT_PITCH = 6.0


class Calibration(BaseModel):
    """Pixel-to-foot scale of a drawing canvas."""
    pixels_per_foot: float = Field(default=PIXELS_PER_FOOT, gt=0)

    def to_feet(self, pixels: float) -> float:
        return pixels / self.pixels_per_foot

    def to_square_feet(self, square_pixels: float) -> float:
        return square_pixels / (self.pixels_per_foot * self.pixels_per_foot)


class FacetDefaults(BaseModel):
    """Values used when the user leaves a facet field blank."""
    pitch: float = Field(default=DEFAULT_PITCH, gt=0)   # Rise per 12 run
    label_prefix: str = "Facet"                         # "Facet 1", "Facet 2", ...


class MeasurementConfig(BaseModel):
    """Controls how strictly drawn facets are validated."""
    calibration: Calibration = Field(default_factory=Calibration)
    defaults: FacetDefaults = Field(default_factory=FacetDefaults)
    strict: bool = False                    # Raise instead of defaulting
    validate_simple_polygon: bool = False   # Reject self-intersecting outlines
