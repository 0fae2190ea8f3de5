# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Array-Cast Contract
===================
Reinterpretation of color values as flat arrays of their component type.

A color class is array-castable to ``T[N]`` iff its instances store exactly
its N channels, in declaration order, all of component type T, and nothing
else.  In Python terms:

1. Every class in the MRO declares ``__slots__`` (no instance ``__dict__``).
2. The union of those slots, base first, equals the declared channels.
3. The aligned structured dtype of the channels has itemsize ``N * sizeof(T)``.

``check_layout`` is run from ``Color.__init_subclass__``, i.e. exactly once
when a class (or a parameter specialization) is defined.  A class that breaks
rule 1 or 2 is a programming error and fails at definition time with
``ArrayCastError``.  A specialization whose channels mix component types
(e.g. ``Alpha[Srgb[float32], uint8]``) is valid but not castable.
"""

import warnings
import numpy as np
from typing import Any, Iterable, Sequence

__all__ = [
    "ArrayCastError",
    "stored_fields",
    "check_layout",
    "layout_dtype",
    "into_array",
    "from_array",
    "into_component_array",
    "from_component_array",
    "as_records",
    "as_component_array",
]


class ArrayCastError(TypeError):
    """A color layout that does not match its channel array."""


def stored_fields(cls: type) -> tuple[str, ...]:
    """
    Instance fields of ``cls``: the union of ``__slots__`` along its MRO.

    Raises:
        ArrayCastError: If any class in the MRO lacks ``__slots__``, which
            would give instances a ``__dict__`` of extra state.
    """
    fields: list[str] = []
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        if "__slots__" not in vars(klass):
            raise ArrayCastError(
                f"{cls.__name__}: base {klass.__name__} does not declare __slots__; "
                "instances would carry state outside their channels"
            )
        slots = vars(klass)["__slots__"]
        if isinstance(slots, str):
            slots = (slots,)
        fields.extend(slots)
    return tuple(fields)


def layout_dtype(cls: type) -> np.dtype:
    """Aligned structured dtype with one field per channel."""
    return np.dtype(
        [(name, comp) for name, comp in zip(cls._channels, cls._channel_components())],
        align=True,
    )


def check_layout(cls: type) -> bool:
    """
    Validates the layout of a color class.

    Returns:
        True if the class is a fully specialized, array-castable color.

    Raises:
        ArrayCastError: If the stored fields do not match the channels, or the
            layout contains padding.
    """
    fields = cls._stored_fields()
    if fields != tuple(cls._channels):
        raise ArrayCastError(
            f"{cls.__name__}: stored fields {fields} do not match channels {tuple(cls._channels)}"
        )
    if cls._params is None:
        return False

    components = cls._channel_components()
    if len(set(components)) != 1:
        return False

    dtype = layout_dtype(cls)
    expected = len(fields) * np.dtype(components[0]).itemsize
    if dtype.itemsize != expected:
        raise ArrayCastError(
            f"{cls.__name__}: layout is {dtype.itemsize} bytes, expected {expected}"
        )
    return True


def _require_castable(cls: type) -> type:
    if not getattr(cls, "_array_castable", False):
        raise ArrayCastError(f"{cls.__name__} is not array-castable")
    return cls._channel_components()[0]


def into_array(color: Any) -> np.ndarray:
    """Channels of ``color`` as a ``(N,)`` array of its component type."""
    component = _require_castable(type(color))
    return np.array(color._raw_values(), dtype=component)


def from_array(cls: type, array: Any) -> Any:
    """Inverse of :func:`into_array`."""
    component = _require_castable(cls)
    arr = np.asarray(array)
    if arr.shape != (len(cls._channels),):
        raise ValueError(f"{cls.__name__} expects shape ({len(cls._channels)},), got {arr.shape}")
    return cls._from_raw_values(tuple(arr.astype(component, copy=False)))


def into_component_array(colors: Iterable[Any]) -> np.ndarray:
    """
    Packs a sequence of same-typed colors into an ``(M, N)`` array.
    """
    colors = list(colors)
    if not colors:
        raise ValueError("Cannot infer a color layout from an empty sequence")
    cls = type(colors[0])
    component = _require_castable(cls)
    for c in colors:
        if type(c) is not cls:
            raise TypeError(f"Mixed color types: {cls.__name__} and {type(c).__name__}")
    return np.array([c._raw_values() for c in colors], dtype=component)


def from_component_array(cls: type, array: Any) -> list[Any]:
    """Unpacks an ``(M, N)`` component array into a list of ``cls`` values."""
    component = _require_castable(cls)
    arr = np.asarray(array)
    n = len(cls._channels)
    if arr.ndim != 2 or arr.shape[1] != n:
        raise ValueError(f"{cls.__name__} expects shape (M, {n}), got {arr.shape}")
    arr = arr.astype(component, copy=False)
    return [cls._from_raw_values(tuple(row)) for row in arr]


def as_records(array: Any, cls: type) -> np.ndarray:
    """
    Zero-copy view of an ``(..., N)`` component buffer as records of ``cls``.

    The view has one named field per channel and shape ``array.shape[:-1]``;
    writes through the view land in the original buffer.  Non-contiguous
    input cannot be reinterpreted in place and is copied with a warning.
    """
    component = _require_castable(cls)
    arr = np.asarray(array)
    n = len(cls._channels)
    if arr.dtype != np.dtype(component) or arr.ndim < 1 or arr.shape[-1] != n:
        raise ValueError(
            f"{cls.__name__} records need a {np.dtype(component).name} buffer "
            f"with last dimension {n}, got {arr.dtype.name} {arr.shape}"
        )
    if not arr.flags.c_contiguous:
        warnings.warn(
            f"as_records({cls.__name__}): input buffer is not C-contiguous; "
            "a contiguous copy is reinterpreted instead of the original.",
            stacklevel=2,
        )
        arr = np.ascontiguousarray(arr)
    return arr.view(layout_dtype(cls)).reshape(arr.shape[:-1])


def as_component_array(records: np.ndarray) -> np.ndarray:
    """Zero-copy inverse of :func:`as_records`: shape ``records.shape + (N,)``."""
    names: Sequence[str] = records.dtype.names or ()
    if not names:
        raise ValueError("Expected a structured record array")
    bases = {records.dtype.fields[name][0] for name in names}
    if len(bases) != 1:
        raise ArrayCastError("Record fields do not share one component type")
    base = bases.pop()
    if records.dtype.itemsize != len(names) * base.itemsize:
        raise ArrayCastError("Record layout contains padding")
    return np.ascontiguousarray(records).view(base).reshape(records.shape + (len(names),))
