# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color Space Types
=================
Importing this package registers every conversion rule with
``tint_convert``; the submodules are imported in hub order.
"""

from color_spaces.base import Color
from color_spaces.hue import RgbHue, LabHue, LuvHue
from color_spaces.xyz import Xyz
from color_spaces.lab import Lab
from color_spaces.luv import Luv
from color_spaces.yxy import Yxy
from color_spaces.lch import Lch, Lchuv
from color_spaces.rgb import Rgb, FromHexError, HexFormatError, HexParseIntError
from color_spaces.hsv import Hsv
from color_spaces.hsl import Hsl
from color_spaces.alpha import Alpha
from color_spaces.alias import (
    ColorAlias,
    Srgb, LinSrgb, GammaSrgb, Rec2020Rgb, LinRec2020Rgb,
    Srgba, LinSrgba, Rgba,
    Xyza, Laba, Luva, Lcha, Lchuva, Hsva, Hsla, Yxya,
)

__all__ = [
    # --- Base ---
    "Color",
    "ColorAlias",

    # --- Hues ---
    "RgbHue",
    "LabHue",
    "LuvHue",

    # --- Color types ---
    "Xyz",
    "Lab",
    "Luv",
    "Yxy",
    "Lch",
    "Lchuv",
    "Rgb",
    "Hsv",
    "Hsl",
    "Alpha",

    # --- Errors ---
    "FromHexError",
    "HexFormatError",
    "HexParseIntError",

    # --- Aliases ---
    "Srgb", "LinSrgb", "GammaSrgb", "Rec2020Rgb", "LinRec2020Rgb",
    "Srgba", "LinSrgba", "Rgba",
    "Xyza", "Laba", "Luva", "Lcha", "Lchuva", "Hsva", "Hsla", "Yxya",
]
