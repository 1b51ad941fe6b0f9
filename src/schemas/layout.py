"""
Layout schemas - Pydantic models for layout configuration files

Raw YAML data is validated against these models before any domain object
is built from it.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, List, Optional, Union

from utils.colors import parse_color


class SweepSchema(BaseModel):
    """Default plane sweep settings"""
    rotation_degrees: List[float] = Field(
        default_factory=lambda: [0.0, 0.0, 0.0],
        min_length=3,
        max_length=3,
        description="Rotation of the sweep plane around X, Y, Z in degrees"
    )
    step_size: float = Field(
        1.0,
        gt=0,
        description="Width of each sweep step in location units"
    )


class LayoutSchema(BaseModel):
    """Pixel layout of one installation"""
    num_leds: int = Field(gt=0, description="Number of pixels")
    locations: Optional[List[List[float]]] = Field(
        None,
        description="[x, y, z] per pixel (1-3 coordinates); omit for a 1-D strip"
    )
    palettes: Dict[str, List[Union[int, str]]] = Field(
        default_factory=dict,
        description="Named palettes of packed ints or hex strings"
    )
    sweep: SweepSchema = Field(default_factory=SweepSchema)

    @field_validator("palettes")
    @classmethod
    def parse_palette_colors(cls, palettes):
        return {name: [parse_color(c) for c in colors] for name, colors in palettes.items()}

    @model_validator(mode="after")
    def validate_locations(self):
        if self.locations is None:
            return self
        for index, coords in enumerate(self.locations):
            if not 1 <= len(coords) <= 3:
                raise ValueError(f"Location {index} needs 1-3 coordinates, got {len(coords)}")
        return self
