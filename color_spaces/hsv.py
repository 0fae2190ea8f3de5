# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

HSV
===
Cylindrical form of an RGB standard: hue, saturation, value.
"""

from typing import Any

import tint_encoding as enc
from color_spaces.base import Color, HueShift, Lighten, Mix, Saturate
from color_spaces.hue import RgbHue
from color_spaces.rgb import Rgb
from tint_component import DEFAULT_COMPONENT
from tint_convert import conversion
from tint_kernels import ColorEngine

__all__ = ["Hsv"]


class Hsv(Mix, Lighten, Saturate, HueShift, Color):
    """
    ``Hsv[standard, component]``.  Saturation and value are in [0, 1].
    """
    __slots__ = ("hue", "saturation", "value")
    _channels = ("hue", "saturation", "value")
    _hue_channel = "hue"
    _hue_type = RgbHue
    _param_kind = "standard"
    _default_params = (enc.Srgb, DEFAULT_COMPONENT)
    hub_parent = Rgb

    def __init__(self, hue: Any = 0.0, saturation: Any = 0.0, value: Any = 0.0):
        super().__init__(hue, saturation, value)

    @classmethod
    def min_saturation(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_saturation(cls) -> Any:
        return cls.component(1.0)

    @classmethod
    def min_value(cls) -> Any:
        return cls.component(0.0)

    @classmethod
    def max_value(cls) -> Any:
        return cls.component(1.0)

    @classmethod
    def _bounds(cls) -> tuple:
        return (
            (None, None),
            (cls.min_saturation(), cls.max_saturation()),
            (cls.min_value(), cls.max_value()),
        )

    @classmethod
    def _lighten_targets(cls) -> tuple:
        return (("value", cls.min_value(), cls.max_value()),)

    @classmethod
    def _saturate_targets(cls) -> tuple:
        return (("saturation", cls.min_saturation(), cls.max_saturation()),)

    def _is_achromatic(self) -> bool:
        return self.saturation <= 0 or self.value <= 0


@conversion(Rgb, Hsv)
def _rgb_to_hsv(color: Rgb, target: type) -> Hsv:
    return target._from_batch(ColorEngine._rgb_to_hsv_raw(color._as_batch()))


@conversion(Hsv, Rgb)
def _hsv_to_rgb(color: Hsv, target: type) -> Rgb:
    return target._from_batch(ColorEngine._hsv_to_rgb_raw(color._as_batch()))
