# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Type Aliases
============
Partially applied color templates::

    Srgb[np.uint8]          -> Rgb[Srgb, uint8]
    Srgb(1.0, 0.5, 0.0)     -> Rgb[Srgb, float64](...)
    Laba[D50]               -> Alpha[Lab[D50, float64]]

An alias behaves like its default specialization for attribute access, so
``Srgb.from_hex("#fff")`` works without a subscription.
"""

from typing import Any

import tint_encoding as enc
from color_spaces.alpha import Alpha
from color_spaces.hsl import Hsl
from color_spaces.hsv import Hsv
from color_spaces.lab import Lab
from color_spaces.lch import Lch, Lchuv
from color_spaces.luv import Luv
from color_spaces.rgb import Rgb
from color_spaces.xyz import Xyz
from color_spaces.yxy import Yxy

__all__ = [
    "ColorAlias",
    "Srgb", "LinSrgb", "GammaSrgb", "Rec2020Rgb", "LinRec2020Rgb",
    "Srgba", "LinSrgba", "Rgba",
    "Xyza", "Laba", "Luva", "Lcha", "Lchuva", "Hsva", "Hsla", "Yxya",
]


class ColorAlias:
    """A color template with some leading parameters fixed."""

    def __init__(self, name: str, template: type, *fixed: Any, alpha: bool = False):
        self.__name__ = name
        self._template = template
        self._fixed = fixed
        self._alpha = alpha

    def __getitem__(self, params: Any) -> type:
        if not isinstance(params, tuple):
            params = (params,)
        cls = self._template[self._fixed + params]
        return Alpha[cls] if self._alpha else cls

    def resolve(self) -> type:
        """The default specialization of the alias."""
        return self[()]

    def __call__(self, *args: Any) -> Any:
        return self.resolve()(*args)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in ("_template", "_fixed", "_alpha"):
            raise AttributeError(name)
        return getattr(self.resolve(), name)

    def __repr__(self) -> str:
        return f"<color alias {self.__name__}>"


Srgb = ColorAlias("Srgb", Rgb, enc.Srgb)
LinSrgb = ColorAlias("LinSrgb", Rgb, enc.LinearSrgb)
GammaSrgb = ColorAlias("GammaSrgb", Rgb, enc.GammaSrgb)
Rec2020Rgb = ColorAlias("Rec2020Rgb", Rgb, enc.Rec2020)
LinRec2020Rgb = ColorAlias("LinRec2020Rgb", Rgb, enc.Linear[enc.Rec2020Space])

Srgba = ColorAlias("Srgba", Rgb, enc.Srgb, alpha=True)
LinSrgba = ColorAlias("LinSrgba", Rgb, enc.LinearSrgb, alpha=True)
Rgba = ColorAlias("Rgba", Rgb, alpha=True)
Xyza = ColorAlias("Xyza", Xyz, alpha=True)
Laba = ColorAlias("Laba", Lab, alpha=True)
Luva = ColorAlias("Luva", Luv, alpha=True)
Lcha = ColorAlias("Lcha", Lch, alpha=True)
Lchuva = ColorAlias("Lchuva", Lchuv, alpha=True)
Hsva = ColorAlias("Hsva", Hsv, alpha=True)
Hsla = ColorAlias("Hsla", Hsl, alpha=True)
Yxya = ColorAlias("Yxya", Yxy, alpha=True)
