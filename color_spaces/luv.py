# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIE L*u*v*
==========
Luv relative to a white point.  The u'/v' singularities are handled in the
kernels: a zero denominator gives the zero color in both directions.
"""

from typing import Any

from color_spaces.base import (
    Arithmetic, Color, Lighten, Mix, WithWhitePoint, hue_from_atan2,
)
from color_spaces.hue import LuvHue
from color_spaces.xyz import Xyz
from tint_convert import conversion
from tint_kernels import ColorEngine

__all__ = ["Luv"]


class Luv(Arithmetic, Mix, Lighten, WithWhitePoint, Color):
    """CIE L*u*v*, ``Luv[white_point, component]``."""
    __slots__ = ("l", "u", "v")
    _channels = ("l", "u", "v")
    hub_parent = Xyz

    def __init__(self, l: Any = 0.0, u: Any = 0.0, v: Any = 0.0):
        super().__init__(l, u, v)

    @classmethod
    def min_l(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_l(cls) -> Any:
        return cls.component(100.0)

    @classmethod
    def min_u(cls) -> Any:
        return cls.component(-84.0)

    @classmethod
    def max_u(cls) -> Any:
        return cls.component(176.0)

    @classmethod
    def min_v(cls) -> Any:
        return cls.component(-135.0)

    @classmethod
    def max_v(cls) -> Any:
        return cls.component(108.0)

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (cls.min_l(), cls.max_l()),
            (cls.min_u(), cls.max_u()),
            (cls.min_v(), cls.max_v()),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        return (("l", cls.min_l(), cls.max_l()),)

    def get_hue(self) -> LuvHue | None:
        return hue_from_atan2(LuvHue, self.v, self.u)


@conversion(Xyz, Luv)
def _xyz_to_luv(color: Xyz, target: type) -> Luv:
    return target._from_batch(ColorEngine._xyz_to_luv_raw(color._as_batch(), color.white_point))


@conversion(Luv, Xyz)
def _luv_to_xyz(color: Luv, target: type) -> Xyz:
    return target._from_batch(ColorEngine._luv_to_xyz_raw(color._as_batch(), color.white_point))
