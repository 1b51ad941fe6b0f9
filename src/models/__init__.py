"""
Models package - Data models for pixel layout and color preparation
"""

from .enums import Dimensionality, LogLevel, LogCategory
from .errors import DomainError, InvalidConfigurationError, OutOfRangeError
from .location import Location, PixelLocation, Rotation

__all__ = [
    'Dimensionality',
    'LogLevel',
    'LogCategory',
    'DomainError',
    'InvalidConfigurationError',
    'OutOfRangeError',
    'Location',
    'PixelLocation',
    'Rotation',
]
