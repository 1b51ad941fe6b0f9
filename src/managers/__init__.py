"""
Managers for layout configuration and pixel locations
"""

from .pixel_location_manager import PixelLocationManager
from .config_manager import ConfigManager

__all__ = ['PixelLocationManager', 'ConfigManager']
