# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color Kernels
=============
JIT-compiled math behind every color conversion rule.

Every pairwise formula of the conversion graph lives here exactly once, as a
Numba kernel over ``(N, 3)`` float64 buffers.  Single color values are pushed
through the same kernels as one-row batches, so per-color conversions and
bulk pixel conversions cannot drift apart.

Architecture:
    ``ColorEngine`` exposes two layers.  The ``_raw`` methods assume a
    validated, contiguous ``(N, 3)`` float64 array and are what the
    conversion rules call.  The public methods are wrapped in
    ``handle_shapes`` and accept a single ``(3,)`` pixel or an ``(N, 3)``
    batch of any float dtype.

Edge-case policy:
    Singularities are resolved by explicit branches inside the kernels
    (zero XYZ denominator, vanishing lightness, zero chromaticity y), never by
    raising.  ``set_strict_ieee(True)`` swaps the transfer-curve kernels to
    ``fastmath=False`` variants for IEEE 754 debugging.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
    - A. R. Smith (1978). "Color gamut transform pairs" (HSV)
"""

import functools
import math
import numpy as np
import numpy.typing as npt
from numba import njit
from typing import Any, Callable, Final, TypeAlias

from tint_matrix import rgb_to_xyz_matrix, xyz_to_rgb_matrix

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Constants ---
    "LAB_EPSILON",
    "LAB_SLOPE",
    "LAB_OFFSET",
    "LUV_KAPPA",
    "SQRT_3",
    "DEG2RAD",
    "RAD2DEG",

    # --- Configuration ---
    "set_strict_ieee",
    "is_strict_ieee",

    # --- Decorators ---
    "handle_shapes",

    # --- Classes ---
    "ColorEngine",
]

# --- Type Aliases ---
# Kernels compile for float64.  float16/float32 inputs are upcast once by
# ``handle_shapes`` before entering a kernel.
ArrayFloat: TypeAlias = npt.NDArray[np.floating]

# --- Exact Rational Math Constants ---
# CIE 1976 L*a*b*: the cube root is replaced by a straight line below
# epsilon = (6/29)^3.  slope = 841/108 and offset = 4/29 join it with C1
# continuity at the break point.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = _LAB_DELTA * _LAB_DELTA * _LAB_DELTA  # ~0.008856
LAB_SLOPE: Final[float] = 841.0 / 108.0                           # ~7.787
LAB_OFFSET: Final[float] = 4.0 / 29.0

# CIE 1976 L*u*v*: kappa = (29/3)^3 is the slope of L* below epsilon.
LUV_KAPPA: Final[float] = (29.0 / 3.0) ** 3                       # ~903.296
# Below this lightness the u'/v' back-substitution divides by ~0.
LUV_MIN_L: Final[float] = 1e-5

SQRT_3: Final[float] = 1.73205081
DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi

_MIN_NORMAL: Final[float] = float(np.finfo(np.float64).tiny)
_MAX_FINITE: Final[float] = float(np.finfo(np.float64).max)


# --- Runtime Configuration ---
# When True, transfer-curve kernels use fastmath=False variants that keep
# strict IEEE 754 semantics (inf / NaN propagation, no FP reassociation).
#
# Toggle at runtime via:
#     import tint_kernels
#     tint_kernels.set_strict_ieee(True)   # enable strict mode
#     tint_kernels.set_strict_ieee(False)  # back to fast mode (default)
_STRICT_IEEE: bool = False

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between fast (default) and strict IEEE 754 Numba kernels.

    When ``enabled=True``, the sRGB and Lab transfer curves use
    ``fastmath=False`` kernels that guarantee correct inf/NaN propagation
    at the cost of throughput.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)

def is_strict_ieee() -> bool:
    return _STRICT_IEEE


# =============================================================================
# 1. ROBUST DECORATORS
# =============================================================================

def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize inputs to contiguous float64 (N, 3) batches.

    Single pixels are treated as one-row batches internally, which keeps the
    kernels free of shape special cases.

    Args:
        func: The function to decorate.

    Returns:
        The wrapped function with shape handling.
        - If input is (3,), returns (3,)
        - If input is (N, 3), returns (N, 3)
    """
    @functools.wraps(func)
    def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr = np.asarray(arr)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr), dtype=np.float64)

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ValueError(f"Expected shape (3,) or (N, 3), got {arr.shape}")

        res = func(arr_in, *args, **kwargs)

        if arr.ndim == 1:
            return res[0]
        return res
    return wrapper


# =============================================================================
# 2. TRANSFER CURVE KERNELS (Numba Optimized)
# =============================================================================
# NOTE: fastmath=True allows reassociation and relaxed IEEE compliance.
# Results may differ from strict IEEE references in the last few ulps.

@njit(cache=True, fastmath=True)
def _fast_gamma_srgb(linear: ArrayFloat) -> ArrayFloat:
    """
    Applies the sRGB OETF (linear -> encoded).

    Standard: IEC 61966-2-1
    """
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()

    for i in range(linear.size):
        v = linear_flat[i]
        if v <= 0.0031308:
            out_flat[i] = 12.92 * v
        else:
            out_flat[i] = 1.055 * (v ** (1.0/2.4)) - 0.055
    return out

@njit(cache=True, fastmath=True)
def _fast_inverse_gamma_srgb(srgb: ArrayFloat) -> ArrayFloat:
    """
    Applies the sRGB EOTF (encoded -> linear).

    Standard: IEC 61966-2-1
    """
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()

    for i in range(srgb.size):
        v = srgb_flat[i]
        if v <= 0.04045:
            out_flat[i] = v / 12.92
        else:
            out_flat[i] = ((v + 0.055) / 1.055) ** 2.4
    return out

@njit(cache=True, fastmath=True)
def _xyz_to_lab_f(t: ArrayFloat) -> ArrayFloat:
    """
    Non-linear compression f(t) of CIELAB.

    Cube root above epsilon, the tangent line ``slope * t + offset`` below.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0/3.0)
        else:
            out_flat[i] = LAB_SLOPE * v + LAB_OFFSET
    return out

@njit(cache=True, fastmath=True)
def _lab_to_xyz_f_inv(t: ArrayFloat) -> ArrayFloat:
    """
    Inverse compression f^-1(t) of CIELAB.

    The break point is delta = 6/29, i.e. f(epsilon).
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        if v > _LAB_DELTA:
            out_flat[i] = v * v * v
        else:
            out_flat[i] = (v - LAB_OFFSET) / LAB_SLOPE
    return out


# --- Strict IEEE 754 kernel variants (fastmath=False) ---

@njit(cache=True, fastmath=False)
def _fast_gamma_srgb_strict(linear: ArrayFloat) -> ArrayFloat:
    """sRGB OETF, strict IEEE 754 variant."""
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()
    for i in range(linear.size):
        v = linear_flat[i]
        if v <= 0.0031308:
            out_flat[i] = 12.92 * v
        else:
            out_flat[i] = 1.055 * (v ** (1.0/2.4)) - 0.055
    return out

@njit(cache=True, fastmath=False)
def _fast_inverse_gamma_srgb_strict(srgb: ArrayFloat) -> ArrayFloat:
    """sRGB EOTF, strict IEEE 754 variant."""
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()
    for i in range(srgb.size):
        v = srgb_flat[i]
        if v <= 0.04045:
            out_flat[i] = v / 12.92
        else:
            out_flat[i] = ((v + 0.055) / 1.055) ** 2.4
    return out

@njit(cache=True, fastmath=False)
def _xyz_to_lab_f_strict(t: ArrayFloat) -> ArrayFloat:
    """Lab f(t), strict IEEE 754 variant."""
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0/3.0)
        else:
            out_flat[i] = LAB_SLOPE * v + LAB_OFFSET
    return out

@njit(cache=True, fastmath=False)
def _lab_to_xyz_f_inv_strict(t: ArrayFloat) -> ArrayFloat:
    """Lab f^-1(t), strict IEEE 754 variant."""
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > _LAB_DELTA:
            out_flat[i] = v * v * v
        else:
            out_flat[i] = (v - LAB_OFFSET) / LAB_SLOPE
    return out


# --- Kernel dispatchers ---
# Thin wrappers that read _STRICT_IEEE and delegate to the compiled variant.

def gamma_srgb(linear: ArrayFloat) -> ArrayFloat:
    """Dispatch sRGB OETF to fast or strict kernel."""
    if _STRICT_IEEE:
        return _fast_gamma_srgb_strict(linear)
    return _fast_gamma_srgb(linear)

def inverse_gamma_srgb(srgb: ArrayFloat) -> ArrayFloat:
    """Dispatch sRGB EOTF to fast or strict kernel."""
    if _STRICT_IEEE:
        return _fast_inverse_gamma_srgb_strict(srgb)
    return _fast_inverse_gamma_srgb(srgb)

def _lab_f(t: ArrayFloat) -> ArrayFloat:
    """Dispatch Lab f(t) to fast or strict kernel."""
    if _STRICT_IEEE:
        return _xyz_to_lab_f_strict(t)
    return _xyz_to_lab_f(t)

def _lab_f_inv(t: ArrayFloat) -> ArrayFloat:
    """Dispatch Lab f_inv(t) to fast or strict kernel."""
    if _STRICT_IEEE:
        return _lab_to_xyz_f_inv_strict(t)
    return _lab_to_xyz_f_inv(t)


# =============================================================================
# 3. COLOR SPACE KERNELS
# =============================================================================

@njit(cache=True, fastmath=True)
def _xyz_to_luv_kernel(xyz: ArrayFloat, wx: float, wy: float, wz: float) -> ArrayFloat:
    """
    XYZ -> CIE 1976 L*u*v* via the u'/v' prime chromaticities.

    A zero denominator X + 15Y + 3Z (black) yields the zero color.
    """
    n = xyz.shape[0]
    out = np.zeros_like(xyz)

    w_denom = wx + 15.0 * wy + 3.0 * wz
    u_ref = 4.0 * wx / w_denom
    v_ref = 9.0 * wy / w_denom

    for i in range(n):
        x, y, z = xyz[i, 0], xyz[i, 1], xyz[i, 2]
        denom = x + 15.0 * y + 3.0 * z
        if denom == 0.0:
            continue

        y_r = y / wy
        if y_r > LAB_EPSILON:
            L = 116.0 * y_r ** (1.0/3.0) - 16.0
        else:
            L = LUV_KAPPA * y_r

        u_prime = 4.0 * x / denom
        v_prime = 9.0 * y / denom
        out[i, 0] = L
        out[i, 1] = 13.0 * L * (u_prime - u_ref)
        out[i, 2] = 13.0 * L * (v_prime - v_ref)
    return out

@njit(cache=True, fastmath=True)
def _luv_to_xyz_kernel(luv: ArrayFloat, wx: float, wy: float, wz: float) -> ArrayFloat:
    """
    CIE 1976 L*u*v* -> XYZ.

    Lightness below ``LUV_MIN_L`` short-circuits to the zero color, since
    u/(13L) would blow up.  A vanishing v' (only reachable far outside any
    gamut) yields X = Z = 0.
    """
    n = luv.shape[0]
    out = np.zeros_like(luv)

    w_denom = wx + 15.0 * wy + 3.0 * wz
    u_ref = 4.0 * wx / w_denom
    v_ref = 9.0 * wy / w_denom

    for i in range(n):
        L, u, v = luv[i, 0], luv[i, 1], luv[i, 2]
        if L < LUV_MIN_L:
            continue

        if L > 8.0:
            f = (L + 16.0) / 116.0
            y = f * f * f
        else:
            y = L / LUV_KAPPA
        y *= wy

        inv_13L = 1.0 / (13.0 * L)
        u_prime = u * inv_13L + u_ref
        v_prime = v * inv_13L + v_ref

        out[i, 1] = y
        if v_prime != 0.0:
            out[i, 0] = y * 2.25 * u_prime / v_prime
            out[i, 2] = y * (3.0 - 0.75 * u_prime - 5.0 * v_prime) / v_prime
    return out

@njit(cache=True, fastmath=True)
def _cartesian_to_polar_kernel(lab: ArrayFloat) -> ArrayFloat:
    """
    Lab -> LCh (and Luv -> LChuv): chroma and hue angle in degrees.
    Input shape (N, 3), Output shape (N, 3).
    """
    n = lab.shape[0]
    lch = np.empty_like(lab)

    for i in range(n):
        L, a, b = lab[i, 0], lab[i, 1], lab[i, 2]
        lch[i, 0] = L
        lch[i, 1] = np.hypot(a, b)
        lch[i, 2] = np.arctan2(b, a) * RAD2DEG
    return lch

@njit(cache=True, fastmath=True)
def _polar_to_cartesian_kernel(lch: ArrayFloat) -> ArrayFloat:
    """
    LCh -> Lab (and LChuv -> Luv).  Negative chroma is clipped to zero.
    Input shape (N, 3), Output shape (N, 3).
    """
    n = lch.shape[0]
    lab = np.empty_like(lch)

    for i in range(n):
        L, C, h_deg = lch[i, 0], lch[i, 1], lch[i, 2]
        if C < 0.0:
            C = 0.0
        h_rad = h_deg * DEG2RAD
        lab[i, 0] = L
        lab[i, 1] = C * np.cos(h_rad)
        lab[i, 2] = C * np.sin(h_rad)
    return lab

@njit(cache=True, fastmath=True)
def _rgb_hue_terms(r: float, g: float, b: float) -> tuple:
    """Returns (hue_degrees, max, min) of an RGB triplet."""
    if r > g:
        c_max, c_min, sep, coeff = r, g, g - b, 0.0
    else:
        c_max, c_min, sep, coeff = g, r, b - r, 2.0

    if b > c_max:
        c_max, sep, coeff = b, r - g, 4.0
    elif b < c_min:
        c_min = b

    if c_max != c_min:
        hue = 60.0 * (sep / (c_max - c_min) + coeff)
    else:
        hue = 0.0
    return hue, c_max, c_min

@njit(cache=True, fastmath=True)
def _rgb_to_hsv_kernel(rgb: ArrayFloat) -> ArrayFloat:
    """RGB -> HSV, hue in degrees."""
    n = rgb.shape[0]
    out = np.empty_like(rgb)

    for i in range(n):
        hue, c_max, c_min = _rgb_hue_terms(rgb[i, 0], rgb[i, 1], rgb[i, 2])
        out[i, 0] = hue
        if c_max == 0.0:
            out[i, 1] = 0.0
        else:
            out[i, 1] = (c_max - c_min) / c_max
        out[i, 2] = c_max
    return out

@njit(cache=True, fastmath=True)
def _rgb_to_hsl_kernel(rgb: ArrayFloat) -> ArrayFloat:
    """RGB -> HSL, hue in degrees."""
    n = rgb.shape[0]
    out = np.empty_like(rgb)

    for i in range(n):
        hue, c_max, c_min = _rgb_hue_terms(rgb[i, 0], rgb[i, 1], rgb[i, 2])
        diff = c_max - c_min
        total = c_max + c_min
        out[i, 0] = hue
        if c_max == c_min:
            out[i, 1] = 0.0
        elif total > 1.0:
            out[i, 1] = diff / (2.0 - total)
        elif total != 0.0:
            out[i, 1] = diff / total
        else:
            out[i, 1] = 0.0
        out[i, 2] = total / 2.0
    return out

@njit(cache=True, fastmath=True)
def _sector_to_rgb(h_deg: float, c: float, m: float) -> tuple:
    """
    Shared tail of HSV/HSL -> RGB.

    The hue is split into six half-open sectors [k, k+1) of 60 degrees; the
    last branch catches [5, 6).
    """
    h = (h_deg - math.floor(h_deg / 360.0) * 360.0) / 60.0
    x = c * (1.0 - abs(h % 2.0 - 1.0))

    if h >= 0.0 and h < 1.0:
        r, g, b = c, x, 0.0
    elif h >= 1.0 and h < 2.0:
        r, g, b = x, c, 0.0
    elif h >= 2.0 and h < 3.0:
        r, g, b = 0.0, c, x
    elif h >= 3.0 and h < 4.0:
        r, g, b = 0.0, x, c
    elif h >= 4.0 and h < 5.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return r + m, g + m, b + m

@njit(cache=True, fastmath=True)
def _hsv_to_rgb_kernel(hsv: ArrayFloat) -> ArrayFloat:
    n = hsv.shape[0]
    out = np.empty_like(hsv)

    for i in range(n):
        h, s, v = hsv[i, 0], hsv[i, 1], hsv[i, 2]
        c = v * s
        r, g, b = _sector_to_rgb(h, c, v - c)
        out[i, 0], out[i, 1], out[i, 2] = r, g, b
    return out

@njit(cache=True, fastmath=True)
def _hsl_to_rgb_kernel(hsl: ArrayFloat) -> ArrayFloat:
    n = hsl.shape[0]
    out = np.empty_like(hsl)

    for i in range(n):
        h, s, l = hsl[i, 0], hsl[i, 1], hsl[i, 2]
        c = (1.0 - abs(2.0 * l - 1.0)) * s
        r, g, b = _sector_to_rgb(h, c, l - 0.5 * c)
        out[i, 0], out[i, 1], out[i, 2] = r, g, b
    return out

@njit(cache=True, fastmath=True)
def _is_normal(v: float) -> bool:
    a = abs(v)
    return a >= _MIN_NORMAL and a <= _MAX_FINITE

@njit(cache=True, fastmath=True)
def _hsv_to_hsl_kernel(hsv: ArrayFloat) -> ArrayFloat:
    """HSV -> HSL without leaving the cylinder; the hue passes through."""
    n = hsv.shape[0]
    out = np.empty_like(hsv)

    for i in range(n):
        h, s, v = hsv[i, 0], hsv[i, 1], hsv[i, 2]
        x = (2.0 - s) * v
        if not _is_normal(v):
            sat = 0.0
        elif x < 1.0:
            sat = s * v / x if _is_normal(x) else 0.0
        else:
            denom = 2.0 - x
            sat = s * v / denom if _is_normal(denom) else 0.0
        out[i, 0] = h
        out[i, 1] = sat
        out[i, 2] = x / 2.0
    return out

@njit(cache=True, fastmath=True)
def _hsl_to_hsv_kernel(hsl: ArrayFloat) -> ArrayFloat:
    """HSL -> HSV without leaving the cylinder; the hue passes through."""
    n = hsl.shape[0]
    out = np.empty_like(hsl)

    for i in range(n):
        h, s, l = hsl[i, 0], hsl[i, 1], hsl[i, 2]
        if l < 0.5:
            x = s * l
        else:
            x = s * (1.0 - l)
        total = l + x
        out[i, 0] = h
        out[i, 1] = 2.0 * x / total if _is_normal(total) else 0.0
        out[i, 2] = total
    return out

@njit(cache=True, fastmath=True)
def _xyz_to_yxy_kernel(xyz: ArrayFloat, white_x: float, white_y: float) -> ArrayFloat:
    """
    XYZ -> Yxy (x, y, luma).

    NOTE (Design Decision): zero-sum (black) pixels take the chromaticity
    of the white point instead of 0/0, which keeps the output NaN-free and
    round-trips to black because luma stays 0.
    """
    n = xyz.shape[0]
    out = np.empty_like(xyz)

    for i in range(n):
        X, Y, Z = xyz[i, 0], xyz[i, 1], xyz[i, 2]
        total = X + Y + Z
        if total > 1e-12:
            out[i, 0] = X / total
            out[i, 1] = Y / total
        else:
            out[i, 0] = white_x
            out[i, 1] = white_y
        out[i, 2] = Y
    return out

@njit(cache=True, fastmath=True)
def _yxy_to_xyz_kernel(yxy: ArrayFloat) -> ArrayFloat:
    """Yxy -> XYZ.  A chromaticity y of zero yields the zero color."""
    n = yxy.shape[0]
    out = np.zeros_like(yxy)

    for i in range(n):
        x, y, luma = yxy[i, 0], yxy[i, 1], yxy[i, 2]
        if y > 1e-12:
            factor = luma / y
            out[i, 0] = x * factor
            out[i, 1] = luma
            out[i, 2] = (1.0 - x - y) * factor
    return out


# =============================================================================
# 4. COLOR ENGINE
# =============================================================================

def _white_array(white_point: Any) -> ArrayFloat:
    """Accepts a white point marker class or a plain XYZ triple."""
    if hasattr(white_point, "xyz_array"):
        return white_point.xyz_array()
    return np.asarray(white_point, dtype=np.float64).reshape(3)


class ColorEngine:
    """Static utility class for batch color space transformations.

    Conversion rules hand over one-row batches to the ``_raw`` methods;
    pixel-buffer callers use the public, shape-checked methods.
    """

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated (N, 3) float64)
    # =====================================================================

    @staticmethod
    def _rgb_to_xyz_raw(rgb_array: ArrayFloat, standard: Any) -> ArrayFloat:
        """Raw encoded RGB -> XYZ for the given RGB standard."""
        linear = standard.transfer.into_linear(rgb_array)
        return np.dot(linear, rgb_to_xyz_matrix(standard.space).T)

    @staticmethod
    def _xyz_to_rgb_raw(xyz_array: ArrayFloat, standard: Any) -> ArrayFloat:
        """Raw XYZ -> encoded RGB for the given RGB standard."""
        linear = np.dot(xyz_array, xyz_to_rgb_matrix(standard.space).T)
        return standard.transfer.from_linear(linear)

    @staticmethod
    def _xyz_to_lab_raw(xyz_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        xyz_norm = np.ascontiguousarray(xyz_array / _white_array(white_point))
        f_xyz = _lab_f(xyz_norm)

        out = np.empty_like(xyz_array)
        out[..., 0] = 116.0 * f_xyz[..., 1] - 16.0
        out[..., 1] = 500.0 * (f_xyz[..., 0] - f_xyz[..., 1])
        out[..., 2] = 200.0 * (f_xyz[..., 1] - f_xyz[..., 2])
        return out

    @staticmethod
    def _lab_to_xyz_raw(lab_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        L, a, b = lab_array[..., 0], lab_array[..., 1], lab_array[..., 2]

        f_xyz = np.empty_like(lab_array)
        f_xyz[..., 1] = (L + 16.0) / 116.0
        f_xyz[..., 0] = f_xyz[..., 1] + a / 500.0
        f_xyz[..., 2] = f_xyz[..., 1] - b / 200.0

        xyz = _lab_f_inv(f_xyz)
        xyz *= _white_array(white_point)
        return xyz

    @staticmethod
    def _xyz_to_luv_raw(xyz_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        wx, wy, wz = _white_array(white_point)
        return _xyz_to_luv_kernel(xyz_array, wx, wy, wz)

    @staticmethod
    def _luv_to_xyz_raw(luv_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        wx, wy, wz = _white_array(white_point)
        return _luv_to_xyz_kernel(luv_array, wx, wy, wz)

    @staticmethod
    def _to_polar_raw(cartesian: ArrayFloat) -> ArrayFloat:
        """Raw Lab -> LCh or Luv -> LChuv."""
        return _cartesian_to_polar_kernel(cartesian)

    @staticmethod
    def _from_polar_raw(polar: ArrayFloat) -> ArrayFloat:
        """Raw LCh -> Lab or LChuv -> Luv."""
        return _polar_to_cartesian_kernel(polar)

    @staticmethod
    def _rgb_to_hsv_raw(rgb_array: ArrayFloat) -> ArrayFloat:
        return _rgb_to_hsv_kernel(rgb_array)

    @staticmethod
    def _hsv_to_rgb_raw(hsv_array: ArrayFloat) -> ArrayFloat:
        return _hsv_to_rgb_kernel(hsv_array)

    @staticmethod
    def _rgb_to_hsl_raw(rgb_array: ArrayFloat) -> ArrayFloat:
        return _rgb_to_hsl_kernel(rgb_array)

    @staticmethod
    def _hsl_to_rgb_raw(hsl_array: ArrayFloat) -> ArrayFloat:
        return _hsl_to_rgb_kernel(hsl_array)

    @staticmethod
    def _hsv_to_hsl_raw(hsv_array: ArrayFloat) -> ArrayFloat:
        return _hsv_to_hsl_kernel(hsv_array)

    @staticmethod
    def _hsl_to_hsv_raw(hsl_array: ArrayFloat) -> ArrayFloat:
        return _hsl_to_hsv_kernel(hsl_array)

    @staticmethod
    def _xyz_to_yxy_raw(xyz_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        wx, wy, wz = _white_array(white_point)
        total = wx + wy + wz
        return _xyz_to_yxy_kernel(xyz_array, wx / total, wy / total)

    @staticmethod
    def _yxy_to_xyz_raw(yxy_array: ArrayFloat) -> ArrayFloat:
        return _yxy_to_xyz_kernel(yxy_array)

    # =====================================================================
    #  Public API  (accept (3,) or (N, 3) of any float dtype)
    # =====================================================================

    @staticmethod
    @handle_shapes
    def rgb_to_xyz(rgb_array: ArrayFloat, standard: Any) -> ArrayFloat:
        """
        Encoded RGB -> XYZ.

        Args:
            rgb_array: RGB values in [0, 1] (unclamped values pass through).
            standard: RGB standard marker, e.g. ``tint_encoding.Srgb``.
        """
        return ColorEngine._rgb_to_xyz_raw(rgb_array, standard)

    @staticmethod
    @handle_shapes
    def xyz_to_rgb(xyz_array: ArrayFloat, standard: Any) -> ArrayFloat:
        """XYZ -> encoded RGB.  Out-of-gamut results are not clipped."""
        return ColorEngine._xyz_to_rgb_raw(xyz_array, standard)

    @staticmethod
    @handle_shapes
    def xyz_to_lab(xyz_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        """
        XYZ -> CIELAB.

        Args:
            xyz_array: XYZ values (Y=1 scale).
            white_point: White point marker or XYZ triple of the reference white.
        """
        return ColorEngine._xyz_to_lab_raw(xyz_array, white_point)

    @staticmethod
    @handle_shapes
    def lab_to_xyz(lab_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        return ColorEngine._lab_to_xyz_raw(lab_array, white_point)

    @staticmethod
    @handle_shapes
    def xyz_to_luv(xyz_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        """XYZ -> CIELUV.  Black maps to (0, 0, 0)."""
        return ColorEngine._xyz_to_luv_raw(xyz_array, white_point)

    @staticmethod
    @handle_shapes
    def luv_to_xyz(luv_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        return ColorEngine._luv_to_xyz_raw(luv_array, white_point)

    @staticmethod
    @handle_shapes
    def to_polar(cartesian: ArrayFloat) -> ArrayFloat:
        """
        Lab -> LCh or Luv -> LChuv.

        The hue is returned in degrees as given by atan2, within [-180, 180].
        """
        return ColorEngine._to_polar_raw(cartesian)

    @staticmethod
    @handle_shapes
    def from_polar(polar: ArrayFloat) -> ArrayFloat:
        return ColorEngine._from_polar_raw(polar)

    @staticmethod
    @handle_shapes
    def rgb_to_hsv(rgb_array: ArrayFloat) -> ArrayFloat:
        return ColorEngine._rgb_to_hsv_raw(rgb_array)

    @staticmethod
    @handle_shapes
    def hsv_to_rgb(hsv_array: ArrayFloat) -> ArrayFloat:
        return ColorEngine._hsv_to_rgb_raw(hsv_array)

    @staticmethod
    @handle_shapes
    def rgb_to_hsl(rgb_array: ArrayFloat) -> ArrayFloat:
        return ColorEngine._rgb_to_hsl_raw(rgb_array)

    @staticmethod
    @handle_shapes
    def hsl_to_rgb(hsl_array: ArrayFloat) -> ArrayFloat:
        return ColorEngine._hsl_to_rgb_raw(hsl_array)

    @staticmethod
    @handle_shapes
    def hsv_to_hsl(hsv_array: ArrayFloat) -> ArrayFloat:
        return ColorEngine._hsv_to_hsl_raw(hsv_array)

    @staticmethod
    @handle_shapes
    def hsl_to_hsv(hsl_array: ArrayFloat) -> ArrayFloat:
        return ColorEngine._hsl_to_hsv_raw(hsl_array)

    @staticmethod
    @handle_shapes
    def xyz_to_yxy(xyz_array: ArrayFloat, white_point: Any) -> ArrayFloat:
        return ColorEngine._xyz_to_yxy_raw(xyz_array, white_point)

    @staticmethod
    @handle_shapes
    def yxy_to_xyz(yxy_array: ArrayFloat) -> ArrayFloat:
        return ColorEngine._yxy_to_xyz_raw(yxy_array)
