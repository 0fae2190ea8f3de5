# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIE xyY
=======
Chromaticity coordinates plus luminance, stored as (x, y, luma).
"""

from typing import Any

from color_spaces.base import Arithmetic, Color, Lighten, Mix, WithWhitePoint
from color_spaces.xyz import Xyz
from tint_component import max_intensity, zero
from tint_convert import conversion
from tint_kernels import ColorEngine

__all__ = ["Yxy"]


class Yxy(Arithmetic, Mix, Lighten, WithWhitePoint, Color):
    """
    ``Yxy[white_point, component]``.  All channels are in [0, 1].

    Black has no chromaticity of its own and is given the white point's.
    """
    __slots__ = ("x", "y", "luma")
    _channels = ("x", "y", "luma")
    hub_parent = Xyz

    def __init__(self, x: Any = 0.0, y: Any = 0.0, luma: Any = 0.0):
        super().__init__(x, y, luma)

    @classmethod
    def min_x(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_x(cls) -> Any:
        return max_intensity(cls.component)

    @classmethod
    def min_y(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_y(cls) -> Any:
        return max_intensity(cls.component)

    @classmethod
    def min_luma(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_luma(cls) -> Any:
        return max_intensity(cls.component)

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (cls.min_x(), cls.max_x()),
            (cls.min_y(), cls.max_y()),
            (cls.min_luma(), cls.max_luma()),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        return (("luma", cls.min_luma(), cls.max_luma()),)


@conversion(Xyz, Yxy)
def _xyz_to_yxy(color: Xyz, target: type) -> Yxy:
    return target._from_batch(ColorEngine._xyz_to_yxy_raw(color._as_batch(), color.white_point))


@conversion(Yxy, Xyz)
def _yxy_to_xyz(color: Yxy, target: type) -> Xyz:
    return target._from_batch(ColorEngine._yxy_to_xyz_raw(color._as_batch()))
