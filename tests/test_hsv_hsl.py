"""Tests for the cylindrical RGB models Hsv and Hsl."""

import numpy as np
import pytest

import tint_encoding as enc
from color_spaces import Hsl, Hsv, LinSrgb, Rgb, RgbHue, Srgb
from tint_convert import conversion_path


class TestHsv:
    """Hue, saturation, value."""

    def test_from_rgb(self):
        hsv = Srgb(1.0, 0.0, 0.0).into_color(Hsv)
        assert type(hsv) is Hsv[enc.Srgb, np.float64]
        assert hsv.hue == RgbHue(0.0)
        assert (hsv.saturation, hsv.value) == (1.0, 1.0)

    def test_to_rgb(self):
        rgb = Hsv(120.0, 1.0, 1.0).into_color(Srgb)
        np.testing.assert_allclose(rgb.into_components(), (0.0, 1.0, 0.0), atol=1e-12)

    def test_keeps_standard(self):
        hsv = LinSrgb(0.2, 0.4, 0.6).into_color(Hsv)
        assert hsv.standard is enc.LinearSrgb
        back = hsv.into_color(Rgb)
        assert type(back) is LinSrgb[np.float64]
        np.testing.assert_allclose(back.into_components(), (0.2, 0.4, 0.6), atol=1e-12)

    @pytest.mark.parametrize("rgb", [(0.2, 0.4, 0.6), (0.9, 0.1, 0.3), (0.5, 0.5, 0.1)])
    def test_round_trip(self, rgb):
        back = Srgb(*rgb).into_color(Hsv).into_color(Srgb)
        np.testing.assert_allclose(back.into_components(), rgb, atol=1e-12)

    def test_achromatic(self):
        assert Hsv(30.0, 0.0, 1.0).get_hue() is None
        assert Hsv(30.0, 0.5, 0.0).get_hue() is None
        assert Hsv(30.0, 0.5, 0.5).get_hue() == RgbHue(30.0)

    def test_saturate(self):
        hsv = Hsv(0.0, 0.5, 0.5)
        assert hsv.saturate(0.5).saturation == pytest.approx(0.75)
        assert hsv.desaturate(0.5).saturation == pytest.approx(0.25)
        assert hsv.saturate_fixed(0.1).saturation == pytest.approx(0.6)
        assert hsv.saturate(0.5).value == 0.5

    def test_bounds(self):
        clamped = Hsv(400.0, 2.0, -1.0).clamp()
        assert clamped.hue.to_raw_degrees() == 400.0
        assert (clamped.saturation, clamped.value) == (1.0, 0.0)

    def test_mix(self):
        mixed = Hsv(350.0, 0.0, 0.0).mix(Hsv(10.0, 1.0, 1.0), 0.5)
        assert mixed.hue.to_degrees() == pytest.approx(0.0)
        assert (mixed.saturation, mixed.value) == (0.5, 0.5)

    def test_float_only(self):
        with pytest.raises(TypeError):
            Hsv[enc.Srgb, np.uint8]


class TestHsl:
    """Hue, saturation, lightness."""

    def test_to_rgb(self):
        rgb = Hsl(0.0, 1.0, 0.5).into_color(Srgb)
        np.testing.assert_allclose(rgb.into_components(), (1.0, 0.0, 0.0), atol=1e-12)

    @pytest.mark.parametrize("rgb", [(0.2, 0.4, 0.6), (0.9, 0.1, 0.3), (0.8, 0.8, 0.2)])
    def test_round_trip(self, rgb):
        back = Srgb(*rgb).into_color(Hsl).into_color(Srgb)
        np.testing.assert_allclose(back.into_components(), rgb, atol=1e-12)

    def test_lighten(self):
        assert Hsl(0.0, 0.5, 0.4).lighten(0.5).lightness == pytest.approx(0.7)
        assert Hsl(0.0, 0.5, 0.4).darken(0.5).lightness == pytest.approx(0.2)

    def test_direct_hsv_rule(self):
        path = conversion_path(Hsv[enc.Srgb], Hsl)
        assert [cls._template for cls in path] == [Hsv, Hsl]
        hsl = Hsv(0.0, 1.0, 1.0).into_color(Hsl)
        np.testing.assert_allclose(
            (hsl.hue.to_degrees(), hsl.saturation, hsl.lightness), (0.0, 1.0, 0.5)
        )

    def test_matches_path_through_rgb(self):
        hsv = Hsv(200.0, 0.6, 0.7)
        direct = hsv.into_color(Hsl)
        via_rgb = hsv.into_color(Srgb).into_color(Hsl)
        np.testing.assert_allclose(
            (direct.saturation, direct.lightness), (via_rgb.saturation, via_rgb.lightness), atol=1e-12
        )
        assert direct.hue.to_degrees() == pytest.approx(via_rgb.hue.to_degrees())
