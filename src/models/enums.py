"""
Enums for pixel layout and color preparation
"""

from enum import Enum, auto


class Dimensionality(Enum):
    """
    Physical arrangement of an installation

    Derived from the spread of pixel locations: a strip only varies
    along one axis, a panel along two, a volume along all three.
    """
    ONE_DIMENSIONAL = 1
    TWO_DIMENSIONAL = 2
    THREE_DIMENSIONAL = 3


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    COLOR = auto()       # Palettes, preparation
    LOCATION = auto()    # Pixel locations, spatial grouping
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
