# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

RGB Encodings
=============
Marker classes selecting the constants of an RGB color:

    Primaries    xy chromaticities of the red, green and blue primaries
    RgbSpace     primaries + white point (determines the XYZ matrix)
    RgbStandard  RgbSpace + transfer function (determines the encoding)

``Linear[space]`` and ``Gamma[space, gamma]`` build standards on demand.
Subscriptions are cached, so equal parameters always give the identical
class and standards can be compared with ``is``.
"""

import functools
from typing import Any, ClassVar

from tint_transfer import TransferFn, LinearFn, SrgbFn, GammaFn, Rec2020Fn
from tint_whitepoint import WhitePoint, D65

__all__ = [
    "Primaries",
    "SrgbPrimaries",
    "Rec2020Primaries",
    "RgbSpace",
    "SrgbSpace",
    "Rec2020Space",
    "RgbStandard",
    "Srgb",
    "Rec2020",
    "Linear",
    "Gamma",
    "LinearSrgb",
    "GammaSrgb",
]


class _Marker:
    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a marker class and cannot be instantiated")


class Primaries(_Marker):
    RED: ClassVar[tuple[float, float]]
    GREEN: ClassVar[tuple[float, float]]
    BLUE: ClassVar[tuple[float, float]]


class SrgbPrimaries(Primaries):
    """ITU-R BT.709 / sRGB primaries."""
    RED = (0.6400, 0.3300)
    GREEN = (0.3000, 0.6000)
    BLUE = (0.1500, 0.0600)


class Rec2020Primaries(Primaries):
    """ITU-R BT.2020 primaries."""
    RED = (0.708, 0.292)
    GREEN = (0.170, 0.797)
    BLUE = (0.131, 0.046)


class RgbSpace(_Marker):
    primaries: ClassVar[type[Primaries]]
    white_point: ClassVar[type[WhitePoint]]


class SrgbSpace(RgbSpace):
    primaries = SrgbPrimaries
    white_point = D65


class Rec2020Space(RgbSpace):
    primaries = Rec2020Primaries
    white_point = D65


class RgbStandard(_Marker):
    space: ClassVar[type[RgbSpace]]
    transfer: ClassVar[type[TransferFn]]


class Srgb(RgbStandard):
    """The sRGB standard: sRGB primaries, D65, IEC 61966-2-1 curve."""
    space = SrgbSpace
    transfer = SrgbFn


class Rec2020(RgbStandard):
    """ITU-R BT.2020 with its own transfer curve."""
    space = Rec2020Space
    transfer = Rec2020Fn


def _as_space(space: Any) -> type[RgbSpace]:
    if isinstance(space, type) and issubclass(space, RgbStandard):
        return space.space
    if isinstance(space, type) and issubclass(space, RgbSpace):
        return space
    raise TypeError(f"Expected an RGB space or standard, got {space!r}")


@functools.lru_cache(maxsize=None)
def _linear_standard(space: type[RgbSpace]) -> type[RgbStandard]:
    return type(f"Linear[{space.__name__}]", (RgbStandard,), {
        "space": space,
        "transfer": LinearFn,
        "__module__": __name__,
    })


@functools.lru_cache(maxsize=None)
def _gamma_standard(space: type[RgbSpace], gamma: float) -> type[RgbStandard]:
    name = f"Gamma[{space.__name__}]" if gamma == GammaFn.GAMMA else f"Gamma[{space.__name__}, {gamma:g}]"
    return type(name, (RgbStandard,), {
        "space": space,
        "transfer": GammaFn.with_gamma(gamma),
        "__module__": __name__,
    })


class Linear(_Marker):
    """
    Linear-light standard over an RGB space: ``Linear[SrgbSpace]``.

    A full standard may be given instead of a space; its space is used, so
    ``Linear[Srgb] is Linear[SrgbSpace]``.
    """

    def __class_getitem__(cls, space: Any) -> type[RgbStandard]:
        return _linear_standard(_as_space(space))


class Gamma(_Marker):
    """Power-law standard: ``Gamma[SrgbSpace]`` (2.2) or ``Gamma[SrgbSpace, 2.4]``."""

    def __class_getitem__(cls, params: Any) -> type[RgbStandard]:
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) == 1:
            space, gamma = params[0], GammaFn.GAMMA
        elif len(params) == 2:
            space, gamma = params
        else:
            raise TypeError(f"Gamma takes [space] or [space, gamma], got {len(params)} parameters")
        return _gamma_standard(_as_space(space), float(gamma))


LinearSrgb = Linear[SrgbSpace]
GammaSrgb = Gamma[SrgbSpace]
