"""
Tests for Serializer - palettes, locations and enums to/from plain data.
"""

import json
import math

import pytest

from models.color_container import ColorContainer
from models.enums import Dimensionality
from models.location import Location, Rotation
from utils.serialization import Serializer


class TestColorContainerSerialization:

    def test_to_list_and_json(self):
        palette = ColorContainer(0xFF0000, 0x00FF00)
        assert Serializer.color_container_to_list(palette) == [0xFF0000, 0x00FF00]
        assert json.loads(Serializer.color_container_to_json(palette)) == [16711680, 65280]

    def test_prepared_to_list(self):
        prepared = ColorContainer(0xFF0000, 0x0000FF).prepare(4)
        assert Serializer.color_container_to_list(prepared) == [0xFF0000, 0x7F0080, 0x0000FF, 0x80007F]

    def test_from_json(self):
        palette = Serializer.color_container_from_json("[16711680, 65280, 255]")
        assert palette == ColorContainer(0xFF0000, 0x00FF00, 0x0000FF)

    def test_from_list_with_hex_strings(self):
        palette = Serializer.color_container_from_list(["#FF0000", 0x00FF00, "0x0000ff"])
        assert palette.colors == [0xFF0000, 0x00FF00, 0x0000FF]

    def test_from_json_rejects_objects(self):
        with pytest.raises(ValueError):
            Serializer.color_container_from_json('{"colors": [1]}')

    def test_from_list_rejects_bad_colors(self):
        with pytest.raises(ValueError):
            Serializer.color_container_from_list(["#FF0000", "not-a-color"])


class TestLocationSerialization:

    def test_location_to_list(self):
        assert Serializer.location_to_list(Location(1, 2.5, -3)) == [1.0, 2.5, -3.0]

    @pytest.mark.parametrize("data, expected", [
        ([4], Location(4)),
        ([1, 2], Location(1, 2, 0)),
        ([1, 2, 3], Location(1, 2, 3)),
    ])
    def test_location_from_list(self, data, expected):
        assert Serializer.location_from_list(data) == expected

    @pytest.mark.parametrize("data", [[], [1, 2, 3, 4]])
    def test_location_from_list_rejects_bad_length(self, data):
        with pytest.raises(ValueError):
            Serializer.location_from_list(data)

    def test_rotation_from_degrees(self):
        rotation = Serializer.rotation_from_degrees([90, 0, 180])
        assert rotation == Rotation(math.radians(90), 0.0, math.radians(180))
        with pytest.raises(ValueError):
            Serializer.rotation_from_degrees([90])


class TestEnumSerialization:

    def test_round_trip(self):
        assert Serializer.enum_to_str(Dimensionality.TWO_DIMENSIONAL) == "TWO_DIMENSIONAL"
        assert Serializer.str_to_enum("TWO_DIMENSIONAL", Dimensionality) is Dimensionality.TWO_DIMENSIONAL
        assert Serializer.enum_to_str(None) is None

    def test_invalid_name(self):
        with pytest.raises(ValueError):
            Serializer.str_to_enum("FOUR_DIMENSIONAL", Dimensionality)

    def test_json_default_hook(self):
        payload = {
            "dimensionality": Dimensionality.ONE_DIMENSIONAL,
            "center": Location(1, 2, 3),
            "palette": ColorContainer(0xFF),
        }
        assert json.loads(json.dumps(payload, default=Serializer.to_json)) == {
            "dimensionality": "ONE_DIMENSIONAL",
            "center": [1.0, 2.0, 3.0],
            "palette": [255],
        }
