"""
Packed color utilities

Pure functions for working with 24-bit packed RGB integers (0xRRGGBB).
Values outside 0..0xFFFFFF are not rejected; results for them are undefined.
"""

import math
from typing import Tuple, Union


def pack_rgb(r: int, g: int, b: int) -> int:
    """
    Pack RGB channels (0-255) into a 24-bit integer

    Example:
        pack_rgb(255, 128, 0)  # 0xFF8000
    """
    return (r << 16) | (g << 8) | b


def unpack_rgb(color: int) -> Tuple[int, int, int]:
    """
    Split a 24-bit integer into (r, g, b)

    Example:
        unpack_rgb(0xFF8000)  # (255, 128, 0)
    """
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity"""
    return int(math.floor(value + 0.5))


def blend(low: int, high: int, amount: int) -> int:
    """
    Blend two packed colors channel by channel

    Each channel is interpolated as low + (high - low) * amount / 255,
    truncated toward zero.

    Args:
        low: Color returned at amount 0
        high: Color returned at amount 255
        amount: Blend amount (0-255)

    Returns:
        Packed blended color

    Example:
        blend(0xFF0000, 0x0000FF, 128)  # 0x7F0080
    """
    blended = (
        lo + int((hi - lo) * amount / 255)
        for lo, hi in zip(unpack_rgb(low), unpack_rgb(high))
    )
    return pack_rgb(*blended)


def color_to_hex(color: int) -> str:
    """Lowercase hex without prefix, as used in container string forms"""
    return format(color, 'x')


def parse_color(value: Union[int, str]) -> int:
    """
    Parse a color from config or JSON input

    Accepts packed integers as well as hex strings ("#FF8000", "0xff8000",
    "ff8000").

    Raises:
        ValueError: If value is neither an int nor a hex string
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text.startswith('#'):
            text = text[1:]
        elif text.startswith('0x'):
            text = text[2:]
        return int(text, 16)
    raise ValueError(f"Invalid color: {value!r}")
