# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Primaries Matrices
==================
Derivation of the 3x3 linear RGB <-> XYZ matrices from an RGB space's xy
chromaticities and white point.

Derivation:
    Each primary (x, y) is lifted to XYZ at unit luminance,
    ``(x/y, 1, (1-x-y)/y)``, giving the column matrix P.  The per-primary
    scale S solves ``P @ S = W`` for the white point W, and the final matrix
    is ``P @ diag(S)``, so that linear RGB (1, 1, 1) lands exactly on W.

Matrices are derived once per RGB space and cached; they are returned as
read-only arrays to keep the cache entries immutable.
"""

import functools
import numpy as np
import numpy.typing as npt
from scipy import linalg
from typing import Any, Final, TypeAlias

__all__ = [
    "rgb_to_xyz_matrix",
    "xyz_to_rgb_matrix",
    "primary_to_xyz",
]

ArrayFloat: TypeAlias = npt.NDArray[np.floating]

_CACHE_SIZE: Final[int] = 32


def primary_to_xyz(xy: tuple[float, float]) -> ArrayFloat:
    """Lifts an xy chromaticity to XYZ with Y = 1."""
    x, y = xy
    return np.array([x / y, 1.0, (1.0 - x - y) / y], dtype=np.float64)


def _freeze(matrix: ArrayFloat) -> ArrayFloat:
    matrix.setflags(write=False)
    return matrix


@functools.lru_cache(maxsize=_CACHE_SIZE)
def rgb_to_xyz_matrix(space: Any) -> ArrayFloat:
    """
    Linear RGB -> XYZ matrix of an RGB space (column-vector convention).

    Args:
        space: RGB space marker carrying ``primaries`` and ``white_point``.

    Returns:
        Read-only (3, 3) float64 matrix M with ``xyz = M @ rgb``.
    """
    primaries = space.primaries
    p = np.column_stack([
        primary_to_xyz(primaries.RED),
        primary_to_xyz(primaries.GREEN),
        primary_to_xyz(primaries.BLUE),
    ])
    white = np.asarray(space.white_point.XYZ, dtype=np.float64)

    scale = linalg.solve(p, white)
    return _freeze(p * scale[np.newaxis, :])


@functools.lru_cache(maxsize=_CACHE_SIZE)
def xyz_to_rgb_matrix(space: Any) -> ArrayFloat:
    """Inverse of :func:`rgb_to_xyz_matrix`, with ``rgb = M @ xyz``."""
    return _freeze(linalg.inv(rgb_to_xyz_matrix(space)))
