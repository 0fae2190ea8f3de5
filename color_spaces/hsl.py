# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

HSL
===
Cylindrical form of an RGB standard: hue, saturation, lightness.  Hsv and
Hsl convert into each other directly, reusing the hue unchanged.
"""

from typing import Any

import tint_encoding as enc
from color_spaces.base import Color, HueShift, Lighten, Mix, Saturate
from color_spaces.hsv import Hsv
from color_spaces.hue import RgbHue
from color_spaces.rgb import Rgb
from tint_component import DEFAULT_COMPONENT
from tint_convert import conversion
from tint_kernels import ColorEngine

__all__ = ["Hsl"]


class Hsl(Mix, Lighten, Saturate, HueShift, Color):
    """``Hsl[standard, component]``.  Saturation and lightness are in [0, 1]."""
    __slots__ = ("hue", "saturation", "lightness")
    _channels = ("hue", "saturation", "lightness")
    _hue_channel = "hue"
    _hue_type = RgbHue
    _param_kind = "standard"
    _default_params = (enc.Srgb, DEFAULT_COMPONENT)
    hub_parent = Rgb

    def __init__(self, hue: Any = 0.0, saturation: Any = 0.0, lightness: Any = 0.0):
        super().__init__(hue, saturation, lightness)

    @classmethod
    def min_saturation(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_saturation(cls) -> Any:
        return cls.component(1.0)

    @classmethod
    def min_lightness(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_lightness(cls) -> Any:
        return cls.component(1.0)

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (None, None),
            (cls.min_saturation(), cls.max_saturation()),
            (cls.min_lightness(), cls.max_lightness()),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        return (("lightness", cls.min_lightness(), cls.max_lightness()),)

    @classmethod
    def _saturate_targets(cls) -> tuple:
        return (("saturation", cls.min_saturation(), cls.max_saturation()),)

    def _is_achromatic(self) -> bool:
        return self.saturation <= 0 or self.lightness <= 0


@conversion(Rgb, Hsl)
def _rgb_to_hsl(color: Rgb, target: type) -> Hsl:
    return target._from_batch(ColorEngine._rgb_to_hsl_raw(color._as_batch()))


@conversion(Hsl, Rgb)
def _hsl_to_rgb(color: Hsl, target: type) -> Rgb:
    return target._from_batch(ColorEngine._hsl_to_rgb_raw(color._as_batch()))


@conversion(Hsv, Hsl)
def _hsv_to_hsl(color: Hsv, target: type) -> Hsl:
    return target._from_batch(ColorEngine._hsv_to_hsl_raw(color._as_batch()))


@conversion(Hsl, Hsv)
def _hsl_to_hsv(color: Hsl, target: type) -> Hsv:
    return target._from_batch(ColorEngine._hsl_to_hsv_raw(color._as_batch()))
