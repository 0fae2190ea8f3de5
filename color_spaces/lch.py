# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Polar CIE Spaces
================
LCh (polar Lab) and LChuv (polar Luv).  The hue is ``atan2`` of the two
chroma axes, stored as returned (no wrapping), and is carried back
unchanged on the way to Lab / Luv.
"""

from typing import Any

from color_spaces.base import Color, HueShift, Lighten, Mix, Saturate, WithWhitePoint
from color_spaces.hue import LabHue, LuvHue
from color_spaces.lab import Lab
from color_spaces.luv import Luv
from tint_convert import conversion
from tint_kernels import ColorEngine

__all__ = ["Lch", "Lchuv"]


class _Polar(Mix, Lighten, Saturate, HueShift, WithWhitePoint, Color):
    # L in [0, 100], chroma >= 0, hue unbounded
    __slots__ = ()
    _hue_channel = "hue"
    _MAX_CHROMA: float

    def __init__(self, l: Any = 0.0, chroma: Any = 0.0, hue: Any = 0.0):
        super().__init__(l, chroma, hue)

    @classmethod
    def min_l(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_l(cls) -> Any:
        return cls.component(100.0)

    @classmethod
    def min_chroma(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_chroma(cls) -> Any:
        """Nominal chroma limit; used by ``saturate`` but not by clamping."""
        return cls.component(cls._MAX_CHROMA)

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (cls.min_l(), cls.max_l()),
            (cls.min_chroma(), None),
            (None, None),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        return (("l", cls.min_l(), cls.max_l()),)

    @classmethod
    def _saturate_targets(cls) -> tuple:
        return (("chroma", cls.min_chroma(), cls.max_chroma()),)

    def _is_achromatic(self) -> bool:
        return self.chroma <= 0


class Lch(_Polar):
    """CIE LCh(ab), ``Lch[white_point, component]``."""
    __slots__ = ("l", "chroma", "hue")
    _channels = ("l", "chroma", "hue")
    _hue_type = LabHue
    _MAX_CHROMA = 128.0
    hub_parent = Lab


class Lchuv(_Polar):
    """CIE LCh(uv), ``Lchuv[white_point, component]``."""
    __slots__ = ("l", "chroma", "hue")
    _channels = ("l", "chroma", "hue")
    _hue_type = LuvHue
    _MAX_CHROMA = 180.0
    hub_parent = Luv


@conversion(Lab, Lch)
def _lab_to_lch(color: Lab, target: type) -> Lch:
    return target._from_batch(ColorEngine._to_polar_raw(color._as_batch()))


@conversion(Lch, Lab)
def _lch_to_lab(color: Lch, target: type) -> Lab:
    return target._from_batch(ColorEngine._from_polar_raw(color._as_batch()))


@conversion(Luv, Lchuv)
def _luv_to_lchuv(color: Luv, target: type) -> Lchuv:
    return target._from_batch(ColorEngine._to_polar_raw(color._as_batch()))


@conversion(Lchuv, Luv)
def _lchuv_to_luv(color: Lchuv, target: type) -> Luv:
    return target._from_batch(ColorEngine._from_polar_raw(color._as_batch()))
