# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Transfer Functions
==================
Encode/decode pairs between display-encoded values and linear light.

A transfer function is a marker class with two classmethods:

    into_linear(x)  encoded -> linear
    from_linear(x)  linear  -> encoded

Both accept a scalar or an array and return the same shape (scalars come
back as numpy float64 scalars).  Inputs outside [0, 1] are not rejected; the
curves are applied as-is, e.g. a gamma curve on a negative base yields NaN.
"""

import functools
import numpy as np
from typing import Any, ClassVar, Final, TypeAlias

from tint_kernels import gamma_srgb, inverse_gamma_srgb

__all__ = [
    "TransferFn",
    "LinearFn",
    "SrgbFn",
    "GammaFn",
    "Rec2020Fn",
]

ArrayLike: TypeAlias = Any

DEFAULT_GAMMA: Final[float] = 2.2


def _as_float_array(x: ArrayLike) -> np.ndarray:
    return np.asarray(x, dtype=np.float64)


def _restore_shape(out: np.ndarray, template: np.ndarray) -> Any:
    # 0-d inputs come back as scalars
    return out.reshape(template.shape)[()]


class TransferFn:
    """Base marker for transfer functions.  Never instantiated."""

    @classmethod
    def into_linear(cls, x: ArrayLike) -> Any:
        raise NotImplementedError

    @classmethod
    def from_linear(cls, x: ArrayLike) -> Any:
        raise NotImplementedError

    @classmethod
    def is_linear(cls) -> bool:
        return False


class LinearFn(TransferFn):
    """The identity: values are already linear light."""

    @classmethod
    def into_linear(cls, x: ArrayLike) -> Any:
        arr = _as_float_array(x)
        return arr.copy()[()]

    @classmethod
    def from_linear(cls, x: ArrayLike) -> Any:
        arr = _as_float_array(x)
        return arr.copy()[()]

    @classmethod
    def is_linear(cls) -> bool:
        return True


class SrgbFn(TransferFn):
    """
    IEC 61966-2-1 piecewise sRGB curve.

    Arrays are evaluated by the Numba kernels of ``tint_kernels`` and follow
    its strict-IEEE switch.
    """

    @classmethod
    def into_linear(cls, x: ArrayLike) -> Any:
        arr = _as_float_array(x)
        flat = np.ascontiguousarray(np.atleast_1d(arr))
        return _restore_shape(inverse_gamma_srgb(flat), arr)

    @classmethod
    def from_linear(cls, x: ArrayLike) -> Any:
        arr = _as_float_array(x)
        flat = np.ascontiguousarray(np.atleast_1d(arr))
        return _restore_shape(gamma_srgb(flat), arr)


class GammaFn(TransferFn):
    """
    Pure power-law encoding with exponent ``GAMMA`` (2.2 by default).

    ``into_linear(x) = x ** (1 / GAMMA)`` and ``from_linear(x) = x ** GAMMA``.
    """
    GAMMA: ClassVar[float] = DEFAULT_GAMMA

    @classmethod
    def into_linear(cls, x: ArrayLike) -> Any:
        with np.errstate(invalid="ignore"):
            return np.power(_as_float_array(x), 1.0 / cls.GAMMA)[()]

    @classmethod
    def from_linear(cls, x: ArrayLike) -> Any:
        with np.errstate(invalid="ignore"):
            return np.power(_as_float_array(x), cls.GAMMA)[()]

    @classmethod
    def with_gamma(cls, gamma: float) -> type["GammaFn"]:
        """Returns the (cached) power-law transfer function for ``gamma``."""
        return _gamma_fn(float(gamma))


@functools.lru_cache(maxsize=16)
def _gamma_fn(gamma: float) -> type[GammaFn]:
    if gamma == DEFAULT_GAMMA:
        return GammaFn
    if not gamma > 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")
    return type(f"GammaFn[{gamma:g}]", (GammaFn,), {"GAMMA": gamma, "__module__": __name__})


class Rec2020Fn(TransferFn):
    """
    ITU-R BT.2020 curve: linear segment below beta, 0.45 power law above.
    """
    ALPHA: ClassVar[float] = 1.09929682680944
    BETA: ClassVar[float] = 0.018053968510807

    @classmethod
    def into_linear(cls, x: ArrayLike) -> Any:
        arr = _as_float_array(x)
        with np.errstate(invalid="ignore"):
            curve = np.power((arr + (cls.ALPHA - 1.0)) / cls.ALPHA, 1.0 / 0.45)
        return np.where(arr < 4.5 * cls.BETA, arr / 4.5, curve)[()]

    @classmethod
    def from_linear(cls, x: ArrayLike) -> Any:
        arr = _as_float_array(x)
        with np.errstate(invalid="ignore"):
            curve = cls.ALPHA * np.power(arr, 0.45) - (cls.ALPHA - 1.0)
        return np.where(arr < cls.BETA, 4.5 * arr, curve)[()]
