# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Hue Angles
==========
Hue channels are stored as raw angles in degrees.  The raw value is kept
verbatim (no wrapping on construction) so that conversions between families
sharing a hue concept can reuse the angle unchanged; normalization happens
only when a hue is read back or compared.

    to_degrees()           (-180, 180]
    to_positive_degrees()  [0, 360)
    to_raw_degrees()       as stored

Each color family has its own hue type.  Hues of different types never
compare equal and cannot be added to each other.
"""

import math
import numbers
from typing import Any, Union

__all__ = [
    "normalize_angle",
    "positive_degrees",
    "RgbHue",
    "LabHue",
    "LuvHue",
]


def normalize_angle(degrees: float) -> float:
    """Wraps an angle into (-180, 180]."""
    degrees = float(degrees)
    return degrees - math.ceil((degrees + 180.0) / 360.0 - 1.0) * 360.0


def positive_degrees(degrees: float) -> float:
    """Wraps an angle into [0, 360)."""
    degrees = float(degrees)
    return degrees - math.floor(degrees / 360.0) * 360.0


class _Hue:
    __slots__ = ("_degrees",)

    def __init__(self, degrees: Any = 0.0):
        self._degrees = float(degrees)

    @classmethod
    def from_degrees(cls, degrees: float) -> "_Hue":
        return cls(degrees)

    @classmethod
    def from_radians(cls, radians: float) -> "_Hue":
        return cls(math.degrees(float(radians)))

    def to_degrees(self) -> float:
        return normalize_angle(self._degrees)

    def to_radians(self) -> float:
        return math.radians(self.to_degrees())

    def to_positive_degrees(self) -> float:
        return positive_degrees(self._degrees)

    def to_positive_radians(self) -> float:
        return math.radians(self.to_positive_degrees())

    def to_raw_degrees(self) -> float:
        return self._degrees

    def __float__(self) -> float:
        return self._degrees

    def _operand(self, other: Any) -> Union[float, None]:
        if isinstance(other, _Hue):
            return other._degrees if type(other) is type(self) else None
        if isinstance(other, numbers.Real):
            return float(other)
        return None

    def __add__(self, other: Any) -> "_Hue":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return type(self)(self._degrees + value)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "_Hue":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return type(self)(self._degrees - value)

    def __rsub__(self, other: Any) -> "_Hue":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return type(self)(value - self._degrees)

    def __eq__(self, other: Any) -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return normalize_angle(self._degrees) == normalize_angle(value)

    def __hash__(self) -> int:
        return hash(normalize_angle(self._degrees))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._degrees!r})"


class RgbHue(_Hue):
    """Hue of the RGB family (Rgb, Hsv, Hsl)."""
    __slots__ = ()


class LabHue(_Hue):
    """Hue of CIE L*a*b* / LCh."""
    __slots__ = ()


class LuvHue(_Hue):
    """Hue of CIE L*u*v* / LChuv."""
    __slots__ = ()
