"""Tests for Rgb: formats, encodings, hex text and packed integers."""

import numpy as np
import pytest

import tint_encoding as enc
from color_spaces import (
    FromHexError,
    GammaSrgb,
    HexFormatError,
    HexParseIntError,
    LinSrgb,
    Rec2020Rgb,
    Rgb,
    Srgb,
    Srgba,
)
from tint_packed import ChannelOrder
from tint_transfer import SrgbFn


def srgb_to_linear(v):
    return ((v + 0.055) / 1.055) ** 2.4


class TestHexParsing:
    """``from_hex`` / ``from_str``."""

    @pytest.mark.parametrize("code, expected", [
        ("#123456", (18, 52, 86)),
        ("abc", (170, 187, 204)),
        ("#08f", (0, 136, 255)),
        ("da0bce", (218, 11, 206)),
        ("f034e6", (240, 52, 230)),
    ])
    def test_parse(self, code, expected):
        assert Srgb[np.uint8].from_hex(code).into_components() == expected

    @pytest.mark.parametrize("code", ["#ffffff", "fff", "ffffff", "#fff"])
    def test_white_spellings(self, code):
        assert Srgb[np.uint8].from_str(code).into_components() == (255, 255, 255)

    @pytest.mark.parametrize("code", ["", "#12", "#1234", "1234567"])
    def test_bad_length(self, code):
        with pytest.raises(HexFormatError):
            Srgb[np.uint8].from_hex(code)

    @pytest.mark.parametrize("code", ["#iii", "#gggggg", "+12345", "12 456"])
    def test_bad_digit(self, code):
        with pytest.raises(HexParseIntError, match="invalid digit"):
            Srgb[np.uint8].from_hex(code)

    def test_errors_are_value_errors(self):
        assert issubclass(HexFormatError, FromHexError)
        assert issubclass(HexParseIntError, ValueError)

    def test_float_target(self):
        color = Srgb.from_hex("#ff0000")
        assert type(color) is Rgb[enc.Srgb, np.float64]
        assert color.into_components() == (1.0, 0.0, 0.0)


class TestHexFormatting:
    """``format(color, "x")``."""

    def test_lower_and_upper(self):
        color = Srgb[np.uint8](171, 193, 35)
        assert format(color, "x") == "abc123"
        assert f"{color:X}" == "ABC123"

    def test_width(self):
        assert format(Srgb[np.uint8](1, 2, 3), "03x") == "001002003"
        assert format(Srgb[np.uint16](1, 2, 3), "x") == "000100020003"

    def test_with_alpha(self):
        assert format(Srgba[np.uint8](171, 193, 35, 161), "x") == "abc123a1"

    def test_float_is_rejected(self):
        with pytest.raises(ValueError):
            format(Srgb(0.5, 0.5, 0.5), "x")

    def test_unknown_spec(self):
        with pytest.raises(ValueError):
            format(Srgb[np.uint8](1, 2, 3), "q")

    def test_empty_spec_is_str(self):
        color = Srgb[np.uint8](1, 2, 3)
        assert format(color, "") == str(color)


class TestPackedU32:
    """Packing into and out of 32-bit integers."""

    def test_argb_default(self):
        color = Srgb[np.uint8].from_u32(0x11007FFF)
        assert color.into_components() == (0, 127, 255)
        assert color.into_u32() == 0xFF007FFF

    def test_rgba_default_with_alpha(self):
        assert Srgba[np.uint8].from_u32(0x007FFF80).into_components() == (0, 127, 255, 128)

    def test_same_word_both_defaults(self):
        assert Srgb[np.uint8].from_u32(0x7FFFFF80).into_components() == (255, 255, 128)
        assert Srgba[np.uint8].from_u32(0x7FFFFF80).into_components() == (127, 255, 255, 128)

    @pytest.mark.parametrize("order, packed", [
        (ChannelOrder.RGBA, 0x607F00FF),
        (ChannelOrder.ARGB, 0xFF607F00),
        (ChannelOrder.ABGR, 0xFF007F60),
        (ChannelOrder.BGRA, 0x007F60FF),
    ])
    def test_orders(self, order, packed):
        color = Srgb[np.uint8](96, 127, 0)
        assert color.into_u32(order) == packed
        assert Srgb[np.uint8].from_u32(packed, order) == color

    def test_float_color_is_quantized(self):
        assert Srgb(1.0, 0.0, 0.5).into_u32(ChannelOrder.RGBA) == 0xFF0080FF

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            Srgb[np.uint8].from_u32(2**32)


class TestFormatsAndEncodings:
    """Component format and transfer function changes."""

    def test_into_format(self):
        color = Srgb(1.0, 0.5, 0.0).into_format(np.uint8)
        assert type(color) is Srgb[np.uint8]
        assert color.into_components() == (255, 128, 0)

    def test_into_float_format(self):
        color = Srgb[np.uint8](255, 128, 0).into_format(np.float32)
        assert type(color.red) is np.float32
        np.testing.assert_allclose(color.into_components(), (1.0, 128 / 255, 0.0), rtol=1e-6)

    def test_from_format(self):
        assert Srgb[np.uint8].from_format(Srgb(1.0, 0.0, 0.0)) == Srgb[np.uint8](255, 0, 0)
        with pytest.raises(TypeError):
            LinSrgb[np.uint8].from_format(Srgb(1.0, 0.0, 0.0))

    def test_into_linear(self):
        linear = Srgb(0.5, 0.5, 0.5).into_linear()
        assert type(linear) is LinSrgb[np.float64]
        np.testing.assert_allclose(linear.into_components(), [srgb_to_linear(0.5)] * 3)

    def test_from_linear(self):
        color = Srgb.from_linear(LinSrgb(srgb_to_linear(0.5), 0.0, 1.0))
        np.testing.assert_allclose(color.into_components(), (0.5, 0.0, 1.0), atol=1e-9)
        with pytest.raises(TypeError):
            Srgb.from_linear(Srgb(0.5, 0.5, 0.5))

    def test_integer_linear_is_rejected(self):
        with pytest.raises(TypeError):
            Srgb[np.uint8](1, 2, 3).into_linear()

    def test_into_encoding(self):
        color = Srgb(0.5, 0.25, 0.75).into_encoding(enc.GammaSrgb)
        assert type(color) is GammaSrgb[np.float64]
        expected = [enc.GammaSrgb.transfer.from_linear(SrgbFn.into_linear(v)) for v in (0.5, 0.25, 0.75)]
        np.testing.assert_allclose(color.into_components(), expected)
        back = Srgb.from_encoding(color)
        np.testing.assert_allclose(back.into_components(), (0.5, 0.25, 0.75), atol=1e-9)

    def test_encoding_keeps_space(self):
        with pytest.raises(TypeError):
            Srgb(0.5, 0.5, 0.5).into_encoding(enc.Rec2020)

    def test_rgb_to_rgb_through_xyz(self):
        white = Srgb(1.0, 1.0, 1.0).into_color_unclamped(Rec2020Rgb)
        np.testing.assert_allclose(white.into_components(), (1.0, 1.0, 1.0), atol=1e-6)


class TestRgbHue:
    """``get_hue`` from the RGB hexagon."""

    def test_gray_has_no_hue(self):
        assert Srgb(0.5, 0.5, 0.5).get_hue() is None

    @pytest.mark.parametrize("rgb, degrees", [
        ((1.0, 0.0, 0.0), 0.0),
        ((0.0, 1.0, 0.0), 120.0),
        ((0.0, 0.0, 1.0), -120.0),
    ])
    def test_primaries(self, rgb, degrees):
        assert Srgb(*rgb).get_hue().to_degrees() == pytest.approx(degrees, abs=1e-6)


class TestCapabilities:
    """Arithmetic and blending only exist in linear light."""

    def test_linear_arithmetic(self):
        total = LinSrgb(0.1, 0.2, 0.3) + LinSrgb(0.1, 0.1, 0.1)
        np.testing.assert_allclose(total.into_components(), (0.2, 0.3, 0.4))
        np.testing.assert_allclose((LinSrgb(0.2, 0.4, 0.6) * 0.5).into_components(), (0.1, 0.2, 0.3))
        np.testing.assert_allclose((2 * LinSrgb(0.1, 0.2, 0.3)).into_components(), (0.2, 0.4, 0.6))
        np.testing.assert_allclose((1 - LinSrgb(0.2, 0.4, 0.6)).into_components(), (0.8, 0.6, 0.4))
        np.testing.assert_allclose(LinSrgb(0.2, 0.4, 0.6).div(2).into_components(), (0.1, 0.2, 0.3))

    def test_encoded_has_no_arithmetic(self):
        with pytest.raises(TypeError):
            Srgb(0.1, 0.2, 0.3) + Srgb(0.1, 0.1, 0.1)
        with pytest.raises(AttributeError):
            Srgb(0.1, 0.2, 0.3).add(Srgb(0.1, 0.1, 0.1))
        assert not hasattr(Srgb(0.1, 0.2, 0.3), "mix")

    def test_integer_linear_has_arithmetic_only(self):
        color = LinSrgb[np.uint8](1, 2, 3) + LinSrgb[np.uint8](1, 1, 1)
        assert color.into_components() == (2, 3, 4)
        assert not hasattr(color, "mix")
        assert not hasattr(color, "lighten")

    def test_mixed_operands(self):
        with pytest.raises(TypeError):
            LinSrgb(0.1, 0.2, 0.3) + LinSrgb[np.float32](0.1, 0.2, 0.3)
        with pytest.raises(TypeError):
            LinSrgb(0.1, 0.2, 0.3).add("red")

    def test_lighten(self):
        color = LinSrgb(0.2, 0.5, 0.8)
        np.testing.assert_allclose(color.lighten(0.5).into_components(), (0.6, 0.75, 0.9))
        np.testing.assert_allclose(color.darken(0.5).into_components(), (0.1, 0.25, 0.4))
        np.testing.assert_allclose(color.lighten_fixed(0.1).into_components(), (0.3, 0.6, 0.9))
        assert color.darken_fixed(1.0).into_components() == (0.0, 0.0, 0.0)

    def test_mix(self):
        mixed = LinSrgb(0.0, 0.0, 0.0).mix(LinSrgb(1.0, 0.5, 0.25), 0.5)
        np.testing.assert_allclose(mixed.into_components(), (0.5, 0.25, 0.125))
