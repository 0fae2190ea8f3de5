# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

RGB
===
``Rgb[standard, component]``: red, green and blue encoded with an RGB
standard (primaries, white point and transfer function).

Unlike the CIE spaces, Rgb accepts unsigned integer components.  Integer
values can be formatted as hex, packed into a u32 and converted between
formats, but everything that involves colorimetry (conversions, transfer
functions) needs a float component; use ``into_format`` to switch.

Arithmetic is only attached to linear-light specializations, and mix and
lighten additionally need a float component::

    LinSrgb(0.2, 0.3, 0.4) + LinSrgb(0.1, 0.1, 0.1)   # fine
    Srgb(0.2, 0.3, 0.4) + Srgb(0.1, 0.1, 0.1)         # TypeError
"""

import math
import re
import string
import numpy as np
from typing import Any, Final

import tint_encoding as enc
from color_spaces.base import Arithmetic, Color, Lighten, Mix
from color_spaces.hue import RgbHue
from color_spaces.xyz import Xyz
from tint_component import (
    DEFAULT_COMPONENT, check_component, convert_components, is_float_component,
    max_intensity, zero,
)
from tint_convert import conversion
from tint_kernels import SQRT_3, ColorEngine
from tint_packed import ChannelOrder

__all__ = [
    "Rgb",
    "FromHexError",
    "HexParseIntError",
    "HexFormatError",
    "parse_hex",
]

_HEX_FORMAT_SPEC: Final = re.compile(r"^(0?)(\d*)([xX])$")


# =============================================================================
# 1. HEX TEXT
# =============================================================================

class FromHexError(ValueError):
    """A hex color code that could not be parsed."""


class HexParseIntError(FromHexError):
    def __init__(self, message: str = "invalid digit found in string"):
        super().__init__(message)


class HexFormatError(FromHexError):
    def __init__(
        self,
        message: str = "invalid hex code format, please use format '#fff', 'fff', '#ffffff' or 'ffffff'.",
    ):
        super().__init__(message)


def parse_hex(hex_code: str) -> tuple[int, int, int]:
    """
    Parses ``#rgb``, ``rgb``, ``#rrggbb`` or ``rrggbb`` into three bytes.

    Raises:
        HexFormatError: If there are not 3 or 6 digits after the optional ``#``.
        HexParseIntError: If a digit is not hexadecimal.
    """
    code = hex_code[1:] if hex_code.startswith("#") else hex_code
    if len(code) not in (3, 6):
        raise HexFormatError()
    # int(..., 16) alone would also accept signs, underscores and whitespace
    if any(char not in string.hexdigits for char in code):
        raise HexParseIntError()
    if len(code) == 3:
        return tuple(int(char, 16) * 17 for char in code)  # type: ignore[return-value]
    return tuple(int(code[i:i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


def hex_format_spec(spec: str, component: type) -> tuple[int, bool]:
    """
    Parses a hex format spec (``x``, ``X``, ``04x``, ...).

    Returns:
        (width per channel, uppercase)
    """
    match = _HEX_FORMAT_SPEC.match(spec)
    if match is None:
        raise ValueError(f"Unknown format code {spec!r} for a color; use 'x', 'X' or '0<width>x'")
    if is_float_component(component):
        raise ValueError(
            f"Hex formatting needs an unsigned integer component, got {np.dtype(component).name}"
        )
    width = int(match.group(2)) if match.group(2) else 2 * np.dtype(component).itemsize
    return width, match.group(3) == "X"


def format_hex_channel(value: Any, width: int, upper: bool) -> str:
    return format(int(value), f"0{width}{'X' if upper else 'x'}")


# =============================================================================
# 2. RGB
# =============================================================================

class Rgb(Color):
    """
    RGB color, ``Rgb[standard, component]``.

    Every channel is in [0, max_intensity(component)].
    """
    __slots__ = ("red", "green", "blue")
    _channels = ("red", "green", "blue")
    _param_kind = "standard"
    _default_params = (enc.Srgb, DEFAULT_COMPONENT)
    _float_only = False
    hub_parent = Xyz

    def __init__(self, red: Any = 0, green: Any = 0, blue: Any = 0):
        super().__init__(red, green, blue)

    @classmethod
    def _capabilities(cls, params: tuple) -> tuple[type, ...]:
        standard, component = params
        if not standard.transfer.is_linear():
            return ()
        if is_float_component(component):
            return (Arithmetic, Mix, Lighten)
        return (Arithmetic,)

    @classmethod
    def _require_float(cls, operation: str) -> None:
        if not is_float_component(cls.component):
            raise TypeError(
                f"{cls.__name__}.{operation} needs a floating point component; "
                "use into_format first"
            )

    # --- Bounds ---

    @classmethod
    def min_red(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_red(cls) -> Any:
        return max_intensity(cls.component)

    @classmethod
    def min_green(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_green(cls) -> Any:
        return max_intensity(cls.component)

    @classmethod
    def min_blue(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_blue(cls) -> Any:
        return max_intensity(cls.component)

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (cls.min_red(), cls.max_red()),
            (cls.min_green(), cls.max_green()),
            (cls.min_blue(), cls.max_blue()),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        low, high = zero(cls.component), max_intensity(cls.component)
        return tuple((name, low, high) for name in cls._channels)

    # --- Hue ---

    def get_hue(self) -> RgbHue | None:
        """
        Hue angle of the color, or ``None`` when all channels are equal.
        """
        red, green, blue = (float(v) for v in self.into_components())
        if red == green and red == blue:
            return None
        return RgbHue.from_radians(math.atan2(SQRT_3 * (green - blue), 2.0 * red - green - blue))

    # --- Component format ---

    def into_format(self, component: Any) -> "Rgb":
        """Same color with another component type, e.g. float64 -> uint8."""
        component = check_component(component)
        values = convert_components(np.array(self.into_components(), dtype=self.component),
                                    self.component, component)
        return Rgb[self.standard, component]._from_raw_values(tuple(values))

    @classmethod
    def from_format(cls, color: "Rgb") -> "Rgb":
        cls = cls._concrete()
        if color.standard is not cls.standard:
            raise TypeError(
                f"from_format keeps the RGB standard: {color.standard.__name__} "
                f"is not {cls.standard.__name__}"
            )
        return color.into_format(cls.component)

    # --- Encoding ---

    def into_linear(self) -> "Rgb":
        """Decodes into linear light over the same RGB space."""
        self._require_float("into_linear")
        target = Rgb[enc.Linear[self.standard.space], self.component]
        return target._from_batch(self.standard.transfer.into_linear(self._as_batch()))

    @classmethod
    def from_linear(cls, color: "Rgb") -> "Rgb":
        cls = cls._concrete()
        cls._require_float("from_linear")
        expected = Rgb[enc.Linear[cls.standard.space], cls.component]
        if type(color) is not expected:
            raise TypeError(f"{cls.__name__}.from_linear expects {expected.__name__}, got {type(color).__name__}")
        return cls._from_batch(cls.standard.transfer.from_linear(color._as_batch()))

    def into_encoding(self, standard: type) -> "Rgb":
        """
        Re-encodes with another standard over the same RGB space.

        The value is decoded to linear light and encoded again in one pass;
        no XYZ round trip is involved.
        """
        self._require_float("into_encoding")
        if not (isinstance(standard, type) and issubclass(standard, enc.RgbStandard)):
            raise TypeError(f"Expected an RGB standard, got {standard!r}")
        if standard.space is not self.standard.space:
            raise TypeError(
                f"into_encoding keeps the RGB space: {standard.space.__name__} "
                f"is not {self.standard.space.__name__}"
            )
        linear = self.standard.transfer.into_linear(self._as_batch())
        return Rgb[standard, self.component]._from_batch(standard.transfer.from_linear(linear))

    @classmethod
    def from_encoding(cls, color: "Rgb") -> "Rgb":
        cls = cls._concrete()
        if color.component is not cls.component:
            raise TypeError("from_encoding keeps the component type; use into_format first")
        return color.into_encoding(cls.standard)

    # --- Hex ---

    @classmethod
    def from_hex(cls, hex_code: str) -> "Rgb":
        """
        Parses a hex code into this type.

        Raises:
            HexFormatError: For a code of the wrong length.
            HexParseIntError: For a non-hex digit.
        """
        cls = cls._concrete()
        red, green, blue = parse_hex(hex_code)
        return Rgb[cls.standard, np.uint8](red, green, blue).into_format(cls.component)

    from_str = from_hex

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        width, upper = hex_format_spec(spec, self.component)
        return "".join(format_hex_channel(v, width, upper) for v in self.into_components())

    # --- Packed u32 ---

    def into_u32(self, order: ChannelOrder = ChannelOrder.ARGB) -> int:
        """Packs the 8-bit version of this color, fully opaque."""
        color = self.into_format(np.uint8)
        return order.pack(color.red, color.green, color.blue, 0xFF)

    @classmethod
    def from_u32(cls, packed: int, order: ChannelOrder = ChannelOrder.ARGB) -> "Rgb":
        """Unpacks a u32; the alpha byte is ignored."""
        cls = cls._concrete()
        red, green, blue, _ = order.unpack(packed)
        return Rgb[cls.standard, np.uint8](red, green, blue).into_format(cls.component)


# =============================================================================
# 3. CONVERSION RULES
# =============================================================================

@conversion(Rgb, Xyz)
def _rgb_to_xyz(color: Rgb, target: type) -> Xyz:
    return target._from_batch(ColorEngine._rgb_to_xyz_raw(color._as_batch(), color.standard))


@conversion(Xyz, Rgb)
def _xyz_to_rgb(color: Xyz, target: type) -> Rgb:
    return target._from_batch(ColorEngine._xyz_to_rgb_raw(color._as_batch(), target.standard))


@conversion(Rgb, Rgb)
def _rgb_to_rgb(color: Rgb, target: type) -> Rgb:
    source, dest = color.standard, target.standard
    if source is dest:
        return target._from_raw_values(color._raw_values())

    batch = color._as_batch()
    if source.space.primaries is dest.space.primaries:
        return target._from_batch(dest.transfer.from_linear(source.transfer.into_linear(batch)))

    xyz = ColorEngine._rgb_to_xyz_raw(batch, source)
    return target._from_batch(ColorEngine._xyz_to_rgb_raw(xyz, dest))
