"""Tests for hue angles."""

import math

import pytest

from color_spaces.hue import LabHue, LuvHue, RgbHue, normalize_angle, positive_degrees


class TestAngleHelpers:
    """Wrapping into (-180, 180] and [0, 360)."""

    @pytest.mark.parametrize("degrees, expected", [
        (0.0, 0.0),
        (180.0, 180.0),
        (-180.0, 180.0),
        (190.0, -170.0),
        (720.0, 0.0),
        (-190.0, 170.0),
    ])
    def test_normalize(self, degrees, expected):
        assert normalize_angle(degrees) == pytest.approx(expected)

    @pytest.mark.parametrize("degrees, expected", [
        (-90.0, 270.0),
        (360.0, 0.0),
        (725.0, 5.0),
    ])
    def test_positive(self, degrees, expected):
        assert positive_degrees(degrees) == pytest.approx(expected)


class TestHue:
    """Hue values keep their raw angle and compare normalized."""

    def test_accessors(self):
        hue = LabHue(190.0)
        assert hue.to_degrees() == pytest.approx(-170.0)
        assert hue.to_positive_degrees() == pytest.approx(190.0)
        assert hue.to_raw_degrees() == 190.0
        assert float(hue) == 190.0

    def test_radians(self):
        assert LabHue.from_radians(math.pi).to_degrees() == pytest.approx(180.0)
        assert LabHue(90.0).to_radians() == pytest.approx(math.pi / 2)
        assert LabHue(-90.0).to_positive_radians() == pytest.approx(3 * math.pi / 2)

    def test_equality_is_modulo_turns(self):
        assert LabHue(10.0) == LabHue(370.0)
        assert LabHue(10.0) == 10.0
        assert hash(LabHue(10.0)) == hash(LabHue(370.0))

    def test_hue_families_do_not_mix(self):
        assert LabHue(10.0) != RgbHue(10.0)
        with pytest.raises(TypeError):
            LabHue(10.0) + RgbHue(5.0)
        with pytest.raises(TypeError):
            LuvHue(10.0) - LabHue(5.0)

    def test_arithmetic(self):
        assert (LabHue(350.0) - LabHue(10.0)).to_degrees() == pytest.approx(-20.0)
        assert isinstance(5.0 + LabHue(10.0), LabHue)
        assert (5.0 + LabHue(10.0)).to_raw_degrees() == 15.0
        assert (30.0 - RgbHue(10.0)).to_raw_degrees() == 20.0
