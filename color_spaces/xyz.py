# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIE XYZ
=======
The hub of the conversion graph.  Every other template reaches Xyz through
its chain of ``hub_parent`` links, so Xyz itself has no parent.
"""

from typing import Any

from color_spaces.base import Arithmetic, Color, Lighten, Mix, WithWhitePoint
from tint_component import zero

__all__ = ["Xyz"]


class Xyz(Arithmetic, Mix, Lighten, WithWhitePoint, Color):
    """
    CIE 1931 XYZ tristimulus values, ``Xyz[white_point, component]``.

    Each axis is bounded by the white point's tristimulus value, with Y = 1
    for all white points provided.
    """
    __slots__ = ("x", "y", "z")
    _channels = ("x", "y", "z")

    def __init__(self, x: Any = 0.0, y: Any = 0.0, z: Any = 0.0):
        super().__init__(x, y, z)

    @classmethod
    def min_x(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_x(cls) -> Any:
        return cls.component(cls.white_point.XYZ[0])

    @classmethod
    def min_y(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_y(cls) -> Any:
        return cls.component(cls.white_point.XYZ[1])

    @classmethod
    def min_z(cls) -> Any:
        return zero(cls.component)

    @classmethod
    def max_z(cls) -> Any:
        return cls.component(cls.white_point.XYZ[2])

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (cls.min_x(), cls.max_x()),
            (cls.min_y(), cls.max_y()),
            (cls.min_z(), cls.max_z()),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        return (("y", cls.min_y(), cls.max_y()),)
