"""Tests for the shared color machinery: parameters, channels, bounds and mixing."""

import operator

import numpy as np
import pytest

import tint_encoding as enc
from __about__ import metadata_summary
from color_spaces import (
    Alpha, Hsl, Hsv, Lab, Lch, Lchuv, LinSrgb, Luv, Rgb, Srgb, Xyz, Yxy,
)
from tint_whitepoint import D50, D65


def out_of_range_colors():
    return [
        Srgb(2.0, -1.0, 0.5),
        LinSrgb(1.5, 0.5, -0.5),
        Xyz(5.0, -5.0, 2.0),
        Lab(150.0, -300.0, 300.0),
        Luv(-5.0, 300.0, -300.0),
        Lch(150.0, -5.0, 720.0),
        Lchuv(-1.0, -5.0, 30.0),
        Hsv(-30.0, 2.0, -1.0),
        Hsl(400.0, -1.0, 2.0),
        Yxy(2.0, -1.0, 3.0),
        Alpha[Lab](150.0, 0.0, 0.0, 3.0),
    ]


def mixable_colors():
    return [
        LinSrgb(0.1, 0.5, 0.9),
        Xyz(0.2, 0.3, 0.4),
        Lab(50.0, 10.0, -20.0),
        Luv(40.0, 30.0, -10.0),
        Lch(50.0, 30.0, 30.0),
        Lchuv(50.0, 30.0, 200.0),
        Hsv(120.0, 0.5, 0.5),
        Hsl(240.0, 0.5, 0.5),
        Yxy(0.3, 0.3, 0.5),
        Alpha[Lab](50.0, 10.0, -20.0, 0.5),
    ]


class TestParameters:
    """Specialization by subscription."""

    def test_default_specialization(self):
        assert type(Lab(50.0, 0.0, 0.0)) is Lab[D65, np.float64]
        assert type(Srgb(0.5, 0.5, 0.5)) is Rgb[enc.Srgb, np.float64]
        assert type(Rgb()) is Rgb[enc.Srgb, np.float64]

    def test_partial_parameters(self):
        assert Lab[D65] is Lab[D65, np.float64]
        assert Lab[np.float32] is Lab[D65, np.float32]
        assert Lab[D65, float] is Lab[D65, np.float64]

    def test_bound_attributes(self):
        cls = Rgb[enc.Srgb, np.uint8]
        assert cls.standard is enc.Srgb
        assert cls.white_point is D65
        assert cls.component is np.uint8

    def test_bad_parameters(self):
        with pytest.raises(TypeError):
            Lab[D65][D50]
        with pytest.raises(TypeError):
            Lab[np.int16]
        with pytest.raises(TypeError):
            Lab[np.uint8]
        with pytest.raises(TypeError):
            Lab[enc.Srgb]
        with pytest.raises(TypeError):
            Rgb[D65]
        with pytest.raises(TypeError):
            Lab[D65, np.float32, 1]

    def test_names(self):
        assert Lab[D65, np.float32].__name__ == "Lab[D65, float32]"
        assert repr(Lab(50.0, 1.0, 2.0)) == "Lab[D65, float64](l=50.0, a=1.0, b=2.0)"


class TestChannels:
    """Channel storage and coercion."""

    def test_coercion(self):
        lab = Lab[np.float32](50.1, 0.0, 0.0)
        assert type(lab.l) is np.float32
        lab.l = 5
        assert type(lab.l) is np.float32

    def test_hue_coercion(self):
        assert Lch(50.0, 10.0, 30.0).hue.to_raw_degrees() == 30.0

    def test_no_extra_attributes(self):
        with pytest.raises(AttributeError):
            Lab().foo = 1

    def test_wrong_arity(self):
        with pytest.raises(TypeError):
            Lab[D65](1.0, 2.0, 3.0, 4.0)

    def test_components(self):
        lab = Lab(1.0, 2.0, 3.0)
        assert lab.into_components() == (1.0, 2.0, 3.0)
        assert tuple(lab) == (1.0, 2.0, 3.0)
        assert Lab[D65].from_components((1.0, 2.0, 3.0)) == lab

    def test_copy_is_independent(self):
        lab = Lab(1.0, 2.0, 3.0)
        other = lab.copy()
        other.l = 9.0
        assert lab.l == 1.0

    def test_default(self):
        assert Lab.default() == Lab(0.0, 0.0, 0.0)
        assert Hsv.default() == Hsv(0.0, 0.0, 0.0)

    def test_equality(self):
        assert Lab(1.0, 2.0, 3.0) == Lab(1.0, 2.0, 3.0)
        assert Lab(1.0, 2.0, 3.0) != Lab(1.0, 2.0, 4.0)
        assert Lab(1.0, 2.0, 3.0) != Lab[D50](1.0, 2.0, 3.0)
        with pytest.raises(TypeError):
            hash(Lab())


class TestBounds:
    """Clamping and bound checks."""

    @pytest.mark.parametrize("color", out_of_range_colors(), ids=lambda c: type(c).__name__)
    def test_clamp_is_within_bounds(self, color):
        assert not color.is_within_bounds()
        clamped = color.clamp()
        assert clamped.is_within_bounds()
        assert not color.is_within_bounds()

    def test_clamp_assign(self):
        lab = Lab(150.0, 0.0, 0.0)
        lab.clamp_assign()
        assert lab.l == 100.0

    def test_nan_is_out_of_bounds(self):
        assert not Lab(float("nan"), 0.0, 0.0).is_within_bounds()


class TestComponentWise:
    """Channel-wise functions."""

    def test_pairs(self):
        result = Lab(1.0, 2.0, 3.0).component_wise(Lab(1.0, 1.0, 1.0), operator.sub)
        assert result == Lab(0.0, 1.0, 2.0)

    def test_self(self):
        assert Lab(1.0, 2.0, 3.0).component_wise_self(lambda v: v * 2) == Lab(2.0, 4.0, 6.0)

    def test_type_mismatch(self):
        with pytest.raises(TypeError):
            Lab(1.0, 2.0, 3.0).component_wise(Xyz(1.0, 2.0, 3.0), operator.add)


class TestMix:
    """Interpolation."""

    @pytest.mark.parametrize("color", mixable_colors(), ids=lambda c: type(c).__name__)
    @pytest.mark.parametrize("factor", [0.0, 0.3, 1.0])
    def test_mix_with_self(self, color, factor):
        assert color.mix(color, factor) == color

    def test_factor_is_clamped(self):
        assert Lab(0.0, 0.0, 0.0).mix(Lab(100.0, 0.0, 0.0), 2.0) == Lab(100.0, 0.0, 0.0)
        assert Lab(0.0, 0.0, 0.0).mix(Lab(100.0, 0.0, 0.0), -1.0) == Lab(0.0, 0.0, 0.0)

    def test_mix_assign(self):
        lab = Lab(0.0, 0.0, 0.0)
        lab.mix_assign(Lab(100.0, 50.0, -50.0), 0.5)
        assert lab == Lab(50.0, 25.0, -25.0)

    def test_mix_needs_same_type(self):
        with pytest.raises(TypeError):
            Lab(0.0, 0.0, 0.0).mix(Lab[D50](0.0, 0.0, 0.0), 0.5)


class TestArithmetic:
    """Channel-wise operators of the always-linear spaces."""

    def test_lab(self):
        assert Lab(1.0, 2.0, 3.0) + Lab(1.0, 1.0, 1.0) == Lab(2.0, 3.0, 4.0)
        assert Lab(1.0, 2.0, 3.0) * 2 == Lab(2.0, 4.0, 6.0)
        assert Lab(2.0, 4.0, 6.0) / 2 == Lab(1.0, 2.0, 3.0)
        assert Lab(1.0, 2.0, 3.0).sub(Lab(1.0, 1.0, 1.0)) == Lab(0.0, 1.0, 2.0)

    def test_polar_has_no_arithmetic(self):
        with pytest.raises(TypeError):
            Lch(50.0, 10.0, 30.0) + Lch(50.0, 10.0, 30.0)


class TestMetadata:
    """Project metadata."""

    def test_summary(self):
        summary = metadata_summary()
        assert summary["title"] == "Tint"
        assert summary["license"] == "LGPL-3.0-or-later"
