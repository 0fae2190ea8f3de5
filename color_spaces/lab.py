# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIE L*a*b*
==========
Lab relative to a white point, converted from and to Xyz with the CIE
piecewise cube root (see ``tint_kernels`` for the constants).
"""

from typing import Any

from color_spaces.base import (
    Arithmetic, Color, Lighten, Mix, WithWhitePoint, hue_from_atan2,
)
from color_spaces.hue import LabHue
from color_spaces.xyz import Xyz
from tint_convert import conversion
from tint_kernels import ColorEngine

__all__ = ["Lab"]


class Lab(Arithmetic, Mix, Lighten, WithWhitePoint, Color):
    """
    CIE L*a*b*, ``Lab[white_point, component]``.

    L is in [0, 100]; a and b are nominally in [-128, 127].
    """
    __slots__ = ("l", "a", "b")
    _channels = ("l", "a", "b")
    hub_parent = Xyz

    def __init__(self, l: Any = 0.0, a: Any = 0.0, b: Any = 0.0):
        super().__init__(l, a, b)

    @classmethod
    def min_l(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_l(cls) -> Any:
        return cls.component(100.0)

    @classmethod
    def min_a(cls) -> Any:
        return cls.component(-128.0)

    @classmethod
    def max_a(cls) -> Any:
        return cls.component(127.0)

    @classmethod
    def min_b(cls) -> Any:
        return cls.component(-128.0)

    @classmethod
    def max_b(cls) -> Any:
        return cls.component(127.0)

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (cls.min_l(), cls.max_l()),
            (cls.min_a(), cls.max_a()),
            (cls.min_b(), cls.max_b()),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        return (("l", cls.min_l(), cls.max_l()),)

    def get_hue(self) -> LabHue | None:
        """``LabHue`` of ``atan2(b, a)``; ``None`` when a = b = 0."""
        return hue_from_atan2(LabHue, self.b, self.a)


@conversion(Xyz, Lab)
def _xyz_to_lab(color: Xyz, target: type) -> Lab:
    return target._from_batch(ColorEngine._xyz_to_lab_raw(color._as_batch(), color.white_point))


@conversion(Lab, Xyz)
def _lab_to_xyz(color: Lab, target: type) -> Xyz:
    return target._from_batch(ColorEngine._lab_to_xyz_raw(color._as_batch(), color.white_point))
