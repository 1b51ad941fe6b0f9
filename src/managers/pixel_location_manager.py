"""
Pixel Location Manager - physical layout of the pixels in an installation

Owns the location of every pixel, the bounds of the installation and the
spatial queries animations run against it (random points, plane sweeps).
Read-only after construction.
"""

import math
import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from models.enums import Dimensionality, LogCategory
from models.errors import InvalidConfigurationError, OutOfRangeError
from models.location import Location, PixelLocation, Rotation
from utils.logger import Logger

LOG_SOURCE = "Pixel Location Manager"
NO_LOCATIONS_MESSAGE = "No LED locations defined, assuming LEDs are in one dimensional strip with equal spacing"

# Ratios this close to an integer count as that integer when sizing buckets
_BUCKET_EPSILON = 1e-9


class PixelLocationManager:
    """
    Pixel locations and the bounds derived from them

    Usage:
        manager = PixelLocationManager([Location(0, 0, 0), Location(1, 2, 0)], 2)
        manager.x_max                   # 1.0
        manager.default_location        # Location(0.5, 1.0, 0.0)
        manager.group_pixels_by_axis(Rotation(), 0.5)

        strip = PixelLocationManager(None, 60)   # pixel i at (i, 0, 0)
    """

    def __init__(
        self,
        locations: Optional[Sequence[Location]],
        num_leds: int,
        logger: Optional[Logger] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            locations: Location of each pixel in pixel order, or None for a
                       one dimensional strip. Only the first num_leds are used.
            num_leds: Number of pixels in the installation
            logger: Logger to report through (defaults to a silent logger)
            rng: Random source for random_location()

        Raises:
            InvalidConfigurationError: num_leds is not positive, or two of
                                       the used locations are identical
            OutOfRangeError: fewer locations than num_leds
        """
        self._log = (logger or Logger(echo=False)).for_category(LogCategory.LOCATION, source=LOG_SOURCE)
        self._rng = rng or random.Random()

        if num_leds <= 0:
            raise InvalidConfigurationError(
                f"Pixel count must be positive, got {num_leds}",
                num_leds=num_leds,
            )
        self.num_leds = num_leds

        if locations is None:
            self._log.warn(NO_LOCATIONS_MESSAGE)
            used = [Location(i) for i in range(num_leds)]
        else:
            if len(locations) < num_leds:
                raise OutOfRangeError(expected=num_leds, actual=len(locations))
            used = list(locations[:num_leds])
            self._check_unique(used)

        self.pixel_locations: Tuple[PixelLocation, ...] = tuple(
            PixelLocation(index, location) for index, location in enumerate(used)
        )

        self._compute_bounds(used)
        self._log.debug(
            "Pixel locations ready",
            pixels=num_leds,
            dimensionality=self.dimensionality.name,
        )

    @staticmethod
    def _check_unique(locations: List[Location]) -> None:
        seen = {}
        for index, location in enumerate(locations):
            if location in seen:
                raise InvalidConfigurationError(
                    f"Pixels {seen[location]} and {index} share location ({location})",
                    first_index=seen[location],
                    second_index=index,
                    location=str(location),
                )
            seen[location] = index

    def _compute_bounds(self, locations: Iterable[Location]) -> None:
        x_min = y_min = z_min = math.inf
        x_max = y_max = z_max = -math.inf
        for loc in locations:
            x_min, x_max = min(x_min, loc.x), max(x_max, loc.x)
            y_min, y_max = min(y_min, loc.y), max(y_max, loc.y)
            z_min, z_max = min(z_min, loc.z), max(z_max, loc.z)

        self.x_min, self.x_max = x_min, x_max
        self.y_min, self.y_max = y_min, y_max
        self.z_min, self.z_max = z_min, z_max

        self.x_avg = (x_min + x_max) / 2
        self.y_avg = (y_min + y_max) / 2
        self.z_avg = (z_min + z_max) / 2

        self.x_distance = abs(x_min) + abs(x_max)
        self.y_distance = abs(y_min) + abs(y_max)
        self.z_distance = abs(z_min) + abs(z_max)

    # === DERIVED REFERENCE POINTS ===

    @property
    def default_location(self) -> Location:
        """Center of the bounding box"""
        return Location(self.x_avg, self.y_avg, self.z_avg)

    @property
    def default_distance(self) -> Location:
        """|min| + |max| for each axis"""
        return Location(self.x_distance, self.y_distance, self.z_distance)

    @property
    def dimensionality(self) -> Dimensionality:
        """Number of axes along which pixel locations actually vary"""
        spread = sum(
            1 for lo, hi in ((self.x_min, self.x_max), (self.y_min, self.y_max), (self.z_min, self.z_max))
            if hi > lo
        )
        return Dimensionality(max(1, spread))

    # === QUERIES ===

    def random_location(self) -> Location:
        """A point drawn uniformly from the bounding box (not necessarily a pixel)"""
        return Location(
            self._uniform(self.x_min, self.x_max),
            self._uniform(self.y_min, self.y_max),
            self._uniform(self.z_min, self.z_max),
        )

    def _uniform(self, low: float, high: float) -> float:
        # uniform() may round one ulp past high
        return min(max(self._rng.uniform(low, high), low), high)

    def group_pixels_by_axis(self, rotation: Rotation, step_size: float) -> List[Set[int]]:
        """
        Group pixels into slices perpendicular to the rotated X axis

        Every location is rotated (X, then Y, then Z) and the rotated X
        coordinate is cut into buckets of width step_size, starting at the
        smallest rotated coordinate. Bucket k covers
        [min + k * step_size, min + (k + 1) * step_size); the last bucket
        also includes the largest coordinate. Empty buckets are kept so a
        sweep takes one step per bucket.

        Args:
            rotation: Rotation of the sweep plane
            step_size: Width of each bucket

        Returns:
            Sets of pixel indices, ordered by increasing coordinate

        Raises:
            InvalidConfigurationError: If step_size is not positive
        """
        if step_size <= 0:
            raise InvalidConfigurationError(
                f"Step size must be positive, got {step_size}",
                step_size=step_size,
            )

        rotated = [(p.index, p.location.rotated(rotation).x) for p in self.pixel_locations]
        low = min(x for _, x in rotated)
        high = max(x for _, x in rotated)

        ratio = (high - low) / step_size
        bucket_count = max(1, math.ceil(ratio - _BUCKET_EPSILON))

        buckets: List[Set[int]] = [set() for _ in range(bucket_count)]
        for index, x in rotated:
            bucket = min(int((x - low) / step_size), bucket_count - 1)
            buckets[bucket].add(index)
        return buckets

    def group_pixels_by_x_location(self, rotation: Rotation, step_size: float) -> List[List[int]]:
        """group_pixels_by_axis() with each bucket as a sorted list"""
        return [sorted(bucket) for bucket in self.group_pixels_by_axis(rotation, step_size)]

    def __len__(self) -> int:
        return self.num_leds
