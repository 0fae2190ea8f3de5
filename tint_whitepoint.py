# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

White Points
============
Reference whites as marker classes.

A white point is never instantiated: the class itself is the type
parameter of the XYZ family (``Xyz[D50]``, ``Lab[D65]``, ...).  It carries the
tristimulus values of the illuminant for the CIE 1931 2 degree observer,
normalized to Y = 1.
"""

import numpy as np
import numpy.typing as npt
from typing import ClassVar, TypeAlias

__all__ = [
    "WhitePoint",
    "A", "B", "C", "D50", "D55", "D65", "D75", "E", "F2", "F7", "F11",
    "WHITE_POINTS",
]

ArrayFloat: TypeAlias = npt.NDArray[np.floating]


class WhitePoint:
    """Base marker for reference whites."""
    XYZ: ClassVar[tuple[float, float, float]]

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a white point marker and cannot be instantiated")

    @classmethod
    def xyz_array(cls) -> ArrayFloat:
        return np.array(cls.XYZ, dtype=np.float64)

    @classmethod
    def chromaticity(cls) -> tuple[float, float]:
        """xy chromaticity coordinates of the white point."""
        x, y, z = cls.XYZ
        total = x + y + z
        return x / total, y / total


# Incandescent / tungsten
class A(WhitePoint):
    XYZ = (1.09850, 1.0, 0.35585)

# Obsolete, direct sunlight at noon
class B(WhitePoint):
    XYZ = (0.99072, 1.0, 0.85223)

# Obsolete, average / north sky daylight
class C(WhitePoint):
    XYZ = (0.98074, 1.0, 1.18232)

# Horizon light, ICC profile PCS
class D50(WhitePoint):
    XYZ = (0.96422, 1.0, 0.82521)

# Mid-morning / mid-afternoon daylight
class D55(WhitePoint):
    XYZ = (0.95682, 1.0, 0.92149)

# Noon daylight: television, sRGB color space
class D65(WhitePoint):
    XYZ = (0.95047, 1.0, 1.08883)

# North sky daylight
class D75(WhitePoint):
    XYZ = (0.94972, 1.0, 1.22638)

# Equal energy
class E(WhitePoint):
    XYZ = (1.0, 1.0, 1.0)

# Cool white fluorescent
class F2(WhitePoint):
    XYZ = (0.99186, 1.0, 0.67393)

# D65 simulator, daylight simulator
class F7(WhitePoint):
    XYZ = (0.95041, 1.0, 1.08747)

# Philips TL84, Ultralume 40
class F11(WhitePoint):
    XYZ = (1.00962, 1.0, 0.64350)


WHITE_POINTS: dict[str, type[WhitePoint]] = {
    wp.__name__: wp for wp in (A, B, C, D50, D55, D65, D75, E, F2, F7, F11)
}
