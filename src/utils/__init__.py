"""
Utility functions for pixel layout and color preparation
"""

from .colors import (
    pack_rgb,
    unpack_rgb,
    round_half_up,
    blend,
    color_to_hex,
    parse_color,
)

__all__ = [
    'pack_rgb',
    'unpack_rgb',
    'round_half_up',
    'blend',
    'color_to_hex',
    'parse_color',
]
