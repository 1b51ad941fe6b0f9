"""
Serialization utilities - conversion of domain models for config and JSON

Provides bidirectional conversion between:
- Enums ↔ Strings (Dimensionality, LogLevel, ...)
- ColorContainer ↔ list of packed ints ↔ JSON array
- Location ↔ [x, y, z]
"""

import json
from enum import Enum
from typing import Any, List, Optional, Sequence, Type, TypeVar, Union

from models.color_container import ColorContainer, PreparedColorContainer
from models.location import Location, Rotation
from utils.colors import parse_color
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.GENERAL)

T = TypeVar('T', bound=Enum)


class Serializer:
    """Central model serialization for config files and JSON"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    @staticmethod
    def str_to_enum(value: str, enum_type: Type[T]) -> T:
        """Convert string to enum, raise ValueError if invalid"""
        try:
            return enum_type[value]
        except KeyError:
            raise ValueError(f"Invalid {enum_type.__name__}: {value}")

    # ========================================================================
    # COLOR SERIALIZATION
    # ========================================================================

    @staticmethod
    def color_container_to_list(container: Union[ColorContainer, PreparedColorContainer]) -> List[int]:
        """Ordered packed colors of a palette or prepared buffer"""
        return list(container.colors)

    @staticmethod
    def color_container_from_list(data: Sequence[Union[int, str]]) -> ColorContainer:
        """
        Deserialize a palette

        Args:
            data: Packed ints or hex strings ("#FF8000", "0xff8000")

        Returns:
            ColorContainer with the colors in order
        """
        try:
            return ColorContainer.from_list(parse_color(c) for c in data)
        except (TypeError, ValueError) as e:
            log.error(f"Failed to deserialize colors: {e}")
            raise

    @staticmethod
    def color_container_to_json(container: Union[ColorContainer, PreparedColorContainer]) -> str:
        return json.dumps(Serializer.color_container_to_list(container))

    @staticmethod
    def color_container_from_json(text: str) -> ColorContainer:
        """Deserialize a JSON array of colors"""
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"Expected JSON array of colors, got {type(data).__name__}")
        return Serializer.color_container_from_list(data)

    # ========================================================================
    # LOCATION SERIALIZATION
    # ========================================================================

    @staticmethod
    def location_to_list(location: Location) -> List[float]:
        return [location.x, location.y, location.z]

    @staticmethod
    def location_from_list(data: Sequence[float]) -> Location:
        """
        Deserialize a location

        Accepts one to three coordinates; missing ones are 0, so [5] is
        the same as Location(5).
        """
        if not 1 <= len(data) <= 3:
            raise ValueError(f"Location needs 1-3 coordinates, got {len(data)}")
        return Location(*data)

    @staticmethod
    def rotation_from_degrees(data: Sequence[float]) -> Rotation:
        """[x, y, z] in degrees → Rotation"""
        if len(data) != 3:
            raise ValueError(f"Rotation needs 3 angles, got {len(data)}")
        return Rotation.from_degrees(*data)

    @staticmethod
    def to_json(obj: Any):
        """json.dumps default= hook for enums and locations"""
        if isinstance(obj, Enum):
            return obj.name
        if isinstance(obj, Location):
            return Serializer.location_to_list(obj)
        if isinstance(obj, (ColorContainer, PreparedColorContainer)):
            return Serializer.color_container_to_list(obj)
        raise TypeError(f"Type {type(obj)} not serializable")
