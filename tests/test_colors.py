"""
Unit tests for packed color utilities
"""

import pytest

from utils.colors import blend, color_to_hex, pack_rgb, parse_color, round_half_up, unpack_rgb


def test_pack_unpack():
    assert pack_rgb(255, 128, 0) == 0xFF8000
    assert unpack_rgb(0xFF8000) == (255, 128, 0)
    assert unpack_rgb(0) == (0, 0, 0)


@pytest.mark.parametrize("value, expected", [
    (0.5, 1),
    (1.5, 2),
    (2.5, 3),
    (2.49, 2),
    (127.5, 128),
    (0.0, 0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


class TestBlend:
    """Per-channel linear interpolation on a 0-255 scale."""

    def test_endpoints(self):
        assert blend(0x102030, 0xA0B0C0, 0) == 0x102030
        assert blend(0x102030, 0xA0B0C0, 255) == 0xA0B0C0

    def test_midpoint(self):
        assert blend(0xFF0000, 0x0000FF, 128) == 0x7F0080
        assert blend(0x0000FF, 0xFF0000, 128) == 0x80007F

    def test_channels_are_independent(self):
        assert blend(0x000000, 0xFFFFFF, 51) == 0x333333

    def test_same_color(self):
        assert blend(0x123456, 0x123456, 200) == 0x123456


def test_color_to_hex():
    assert color_to_hex(0xFF8000) == "ff8000"
    assert color_to_hex(0xFF) == "ff"


class TestParseColor:
    """Colors from config/JSON input."""

    @pytest.mark.parametrize("value", [0xFF8000, "#FF8000", "0xff8000", "ff8000", " #ff8000 "])
    def test_accepted_forms(self, value):
        assert parse_color(value) == 0xFF8000

    @pytest.mark.parametrize("value", ["orange", 1.5, None, True, [255, 128, 0]])
    def test_rejected_forms(self, value):
        with pytest.raises(ValueError):
            parse_color(value)
