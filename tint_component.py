# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Component Model
===============
Numeric contract shared by every color channel.

A component type is a numpy scalar type.  Two encodings are supported:

1. Normalized floating point (float16/32/64): zero is ``0.0`` and full
   intensity is ``1.0``.
2. Fixed-width unsigned integers (uint8/16/32/64): zero is ``0`` and full
   intensity is the largest representable value.

Signed integers, booleans, complex numbers and Python objects carry no
intensity scale and are rejected with ``TypeError`` wherever a component
type is declared.
"""

import functools
import numpy as np
from typing import Any, Final, TypeAlias

__all__ = [
    "ComponentType",
    "SUPPORTED_COMPONENTS",
    "DEFAULT_COMPONENT",
    "check_component",
    "is_float_component",
    "zero",
    "max_intensity",
    "from_component",
    "convert_components",
]

ComponentType: TypeAlias = type

FLOAT_COMPONENTS: Final[tuple[type, ...]] = (np.float16, np.float32, np.float64)
UINT_COMPONENTS: Final[tuple[type, ...]] = (np.uint8, np.uint16, np.uint32, np.uint64)
SUPPORTED_COMPONENTS: Final[tuple[type, ...]] = FLOAT_COMPONENTS + UINT_COMPONENTS

DEFAULT_COMPONENT: Final[type] = np.float64


@functools.lru_cache(maxsize=64)
def _normalize(component: Any) -> type:
    try:
        scalar_type = np.dtype(component).type
    except TypeError as err:
        raise TypeError(f"{component!r} is not a numeric component type") from err
    if scalar_type not in SUPPORTED_COMPONENTS:
        raise TypeError(
            f"{np.dtype(scalar_type).name} is not a supported component type; "
            "use a float (float16/32/64) or an unsigned integer (uint8/16/32/64)"
        )
    return scalar_type


def check_component(component: Any) -> type:
    """
    Validate and normalize a component type.

    Accepts numpy scalar types, dtypes and the Python ``float`` builtin,
    which maps to ``np.float64``.

    Returns:
        The numpy scalar type, e.g. ``np.uint8``.

    Raises:
        TypeError: If the type has no intensity scale.
    """
    return _normalize(component)


def is_float_component(component: Any) -> bool:
    return check_component(component) in FLOAT_COMPONENTS


def zero(component: Any) -> np.generic:
    t = check_component(component)
    return t(0)


def max_intensity(component: Any) -> np.generic:
    """Full intensity: ``1.0`` for floats, ``2**W - 1`` for W-bit unsigned ints."""
    t = check_component(component)
    if t in FLOAT_COMPONENTS:
        return t(1.0)
    return t(np.iinfo(t).max)


def _int_max(t: type) -> int:
    return int(np.iinfo(t).max)


def from_component(value: Any, src: Any, dst: Any) -> np.generic:
    """
    Convert a single channel value between component types.

    The endpoints map exactly: ``zero(src) -> zero(dst)`` and
    ``max_intensity(src) -> max_intensity(dst)``.

    Args:
        value: Channel value encoded as ``src``.
        src: Source component type.
        dst: Destination component type.

    Returns:
        The value as a ``dst`` scalar.
    """
    src_t = check_component(src)
    dst_t = check_component(dst)
    if src_t is dst_t:
        return src_t(value)

    src_float = src_t in FLOAT_COMPONENTS
    dst_float = dst_t in FLOAT_COMPONENTS

    if src_float and dst_float:
        return dst_t(value)

    if src_float:
        v = float(value)
        if v != v:
            return dst_t(0)
        v = min(max(v, 0.0), 1.0)
        dst_max = _int_max(dst_t)
        # Round half away from zero on a non-negative value
        return dst_t(min(int(np.floor(v * dst_max + 0.5)), dst_max))

    src_max = _int_max(src_t)
    if dst_float:
        return dst_t(int(value) / src_max)

    dst_max = _int_max(dst_t)
    return dst_t((int(value) * dst_max + src_max // 2) // src_max)


def convert_components(values: Any, src: Any, dst: Any) -> np.ndarray:
    """
    Vectorized :func:`from_component` over an array of channel values.

    Integer to integer scaling runs through float64 for widths up to 32 bits
    and element-wise on Python ints for uint64 so the endpoints stay exact.
    """
    src_t = check_component(src)
    dst_t = check_component(dst)
    arr = np.asarray(values, dtype=src_t)
    if src_t is dst_t:
        return arr.copy()

    src_float = src_t in FLOAT_COMPONENTS
    dst_float = dst_t in FLOAT_COMPONENTS

    if src_float and dst_float:
        return arr.astype(dst_t)

    if src_float:
        if dst_t is np.uint64:
            flat = [from_component(v, src_t, dst_t) for v in arr.ravel()]
            return np.array(flat, dtype=dst_t).reshape(arr.shape)
        dst_max = _int_max(dst_t)
        v = np.nan_to_num(arr.astype(np.float64), nan=0.0)
        v = np.clip(v, 0.0, 1.0)
        return np.floor(v * dst_max + 0.5).astype(dst_t)

    src_max = _int_max(src_t)
    if dst_float:
        return (arr.astype(np.float64) / src_max).astype(dst_t)

    if np.uint64 in (src_t, dst_t):
        flat = [from_component(v, src_t, dst_t) for v in arr.ravel()]
        return np.array(flat, dtype=dst_t).reshape(arr.shape)

    dst_max = _int_max(dst_t)
    scaled = (arr.astype(np.uint64) * dst_max + src_max // 2) // src_max
    return scaled.astype(dst_t)
