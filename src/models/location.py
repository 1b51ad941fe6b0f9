"""
Location models - physical coordinates of pixels

Location and PixelLocation are immutable value types; equality and hash
are structural. Rotation describes a rotation of the sweep plane.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rotation:
    """
    Rotation around the X, Y and Z axes, in radians

    Rotations are always applied in X, then Y, then Z order.
    """
    x_rotation: float = 0.0
    y_rotation: float = 0.0
    z_rotation: float = 0.0

    @classmethod
    def from_degrees(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> 'Rotation':
        return cls(math.radians(x), math.radians(y), math.radians(z))


@dataclass(frozen=True, init=False)
class Location:
    """
    Location of a pixel in three dimensional space

    Examples:
        Location()          # origin
        Location(5)         # (5, 0, 0), position on a one dimensional strip
        Location(1, 2, 3)
    """
    x: float
    y: float
    z: float

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        # Coordinates are always stored as floats
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def rotated(self, rotation: Rotation) -> 'Location':
        """
        Rotate this location around the origin

        Applies the X rotation first, then Y, then Z (counter-clockwise
        positive, right-handed axes).

        Args:
            rotation: Angles in radians

        Returns:
            New Location in the rotated frame
        """
        x, y, z = self.coordinates

        # About X
        cos_a, sin_a = math.cos(rotation.x_rotation), math.sin(rotation.x_rotation)
        y, z = y * cos_a - z * sin_a, y * sin_a + z * cos_a

        # About Y
        cos_b, sin_b = math.cos(rotation.y_rotation), math.sin(rotation.y_rotation)
        x, z = x * cos_b + z * sin_b, -x * sin_b + z * cos_b

        # About Z
        cos_c, sin_c = math.cos(rotation.z_rotation), math.sin(rotation.z_rotation)
        x, y = x * cos_c - y * sin_c, x * sin_c + y * cos_c

        return Location(x, y, z)

    def __str__(self) -> str:
        return f"{self.x}, {self.y}, {self.z}"


@dataclass(frozen=True)
class PixelLocation:
    """A pixel index paired with its physical location"""
    index: int
    location: Location

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Pixel index must be non-negative, got {self.index}")
