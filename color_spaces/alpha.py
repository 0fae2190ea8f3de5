# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Alpha Wrapper
=============
``Alpha[C, A]`` pairs a color of type C with an opacity of component type
A (defaults to C's component type).

The wrapper is transparent: channel names of the wrapped color read and
write through, so ``rgba.red`` works like ``rgb.red``.  Its channel tuple is
the color's channels followed by ``alpha``.  Alpha is bounded by
[0, max_intensity(A)] independently of the color's own bounds.

Operations of the wrapped color are attached per specialization, exactly
like the color's own capabilities:

    mix          alpha is interpolated with the same factor
    lighten      alpha is kept
    saturate     alpha is kept
    arithmetic   applied to alpha as well
    hue ops      alpha is kept
"""

import operator
import numbers
import numpy as np
from typing import Any, Callable, ClassVar

import tint_cast
from color_spaces.base import (
    Arithmetic, Color, HueShift, Lighten, Mix, Saturate, WithWhitePoint, _mix_factor,
)
from color_spaces.rgb import Rgb, format_hex_channel, hex_format_spec
from tint_component import (
    check_component, from_component, is_float_component, max_intensity, zero,
)
from tint_packed import ChannelOrder

__all__ = ["Alpha"]


class Alpha(Color):
    """
    A color with an alpha channel.

    Construction::

        Alpha[Lab](lab, 0.5)            # color + alpha
        Alpha[Lab](50.0, 10.0, 5.0, 0.5)  # channels + alpha
        Alpha[Lab](50.0, 10.0, 5.0)     # fully opaque
        Alpha(lab, 0.5)                 # color type inferred
    """
    __slots__ = ("color", "alpha")
    _param_kind = "alpha"
    _is_alpha = True
    _default_params = ()

    color_type: ClassVar[type]
    alpha_component: ClassVar[type]

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    @classmethod
    def _normalize_params(cls, params: tuple) -> tuple:
        if not 1 <= len(params) <= 2:
            raise TypeError("Alpha takes [color_type] or [color_type, alpha_component]")
        color_type = params[0]
        if not isinstance(color_type, type) and hasattr(color_type, "resolve"):
            color_type = color_type.resolve()
        if not (isinstance(color_type, type) and issubclass(color_type, Color)) or color_type._is_alpha:
            raise TypeError(f"Alpha wraps a plain color type, got {color_type!r}")
        color_type = color_type._concrete()
        alpha_component = check_component(params[1]) if len(params) == 2 else color_type.component
        return (color_type, alpha_component)

    @classmethod
    def _bind_params(cls, params: tuple) -> dict[str, Any]:
        color_type, alpha_component = params
        bound = {
            "color_type": color_type,
            "alpha_component": alpha_component,
            "component": color_type.component,
            "white_point": color_type.white_point,
            "_channels": color_type._channels + ("alpha",),
            "_hue_channel": color_type._hue_channel,
            "_hue_type": color_type._hue_type,
        }
        if hasattr(color_type, "standard"):
            bound["standard"] = color_type.standard
        return bound

    @classmethod
    def _capabilities(cls, params: tuple) -> tuple[type, ...]:
        color_type = params[0]
        return tuple(
            wrapper for capability, wrapper in _FORWARDED_CAPABILITIES
            if issubclass(color_type, capability)
        )

    @classmethod
    def _resolve_template(cls, args: tuple) -> type:
        if args and isinstance(args[0], Color) and not args[0]._is_alpha:
            return Alpha[type(args[0])]
        raise TypeError("Alpha needs a color type: use Alpha[ColorType](...) or pass a color value")

    @classmethod
    def _related(cls, template: type) -> None:
        return None

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    @classmethod
    def _stored_fields(cls) -> tuple[str, ...]:
        own = tint_cast.stored_fields(cls)
        if own != ("color", "alpha"):
            raise tint_cast.ArrayCastError(
                f"{cls.__name__}: stores {own}, expected ('color', 'alpha')"
            )
        if cls._params is None:
            return ()
        return cls.color_type._stored_fields() + ("alpha",)

    @classmethod
    def _channel_components(cls) -> tuple[type, ...]:
        return cls.color_type._channel_components() + (cls.alpha_component,)

    # -------------------------------------------------------------------------
    # Construction and field access
    # -------------------------------------------------------------------------

    def __init__(self, *args: Any):
        color_type = self.color_type
        n = len(color_type._channels)
        if len(args) in (1, 2) and isinstance(args[0], Color):
            if type(args[0]) is not color_type:
                raise TypeError(
                    f"{type(self).__name__} wraps {color_type.__name__}, got {type(args[0]).__name__}"
                )
            color = args[0].copy()
            alpha = args[1] if len(args) == 2 else max_intensity(self.alpha_component)
        elif len(args) in (n, n + 1):
            color = color_type(*args[:n])
            alpha = args[n] if len(args) == n + 1 else max_intensity(self.alpha_component)
        else:
            raise TypeError(
                f"{type(self).__name__} takes (color[, alpha]) or {n} channels [+ alpha], "
                f"got {len(args)} arguments"
            )
        object.__setattr__(self, "color", color)
        self.alpha = alpha

    def __getattr__(self, name: str) -> Any:
        if name in ("color", "alpha") or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.color, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "alpha":
            object.__setattr__(self, "alpha", self.alpha_component(value))
        elif name == "color":
            if type(value) is not self.color_type:
                raise TypeError(f"Expected {self.color_type.__name__}, got {type(value).__name__}")
            object.__setattr__(self, "color", value)
        else:
            setattr(self.color, name, value)

    @classmethod
    def default(cls) -> "Alpha":
        """Default color, fully opaque."""
        cls = cls._concrete()
        return cls(cls.color_type.default())

    # -------------------------------------------------------------------------
    # Bounds
    # -------------------------------------------------------------------------

    @classmethod
    def min_alpha(cls) -> Any:
        return zero(cls.alpha_component)

    @classmethod
    def max_alpha(cls) -> Any:
        return max_intensity(cls.alpha_component)

    @classmethod
    def _bounds(cls) -> tuple:
        return cls.color_type._bounds() + ((cls.min_alpha(), cls.max_alpha()),)

    # -------------------------------------------------------------------------
    # Alpha handling
    # -------------------------------------------------------------------------

    def with_alpha(self, alpha: Any) -> "Alpha":
        return type(self)(self.color, alpha)

    def without_alpha(self) -> Color:
        return self.color.copy()

    def split(self) -> tuple[Color, Any]:
        return self.color.copy(), self.alpha

    def _rewrap(self, color: Color, alpha: Any = None) -> "Alpha":
        alpha = self.alpha if alpha is None else alpha
        return Alpha[type(color), self.alpha_component](color, alpha)


# =============================================================================
# FORWARDED CAPABILITIES
# =============================================================================

class AlphaArithmetic:
    __slots__ = ()

    def _binary(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False) -> Any:
        if type(other) is type(self):
            if reflected:
                return NotImplemented
            return type(self)(op(self.color, other.color), op(self.alpha, other.alpha))
        if not isinstance(other, numbers.Real):
            return NotImplemented
        if reflected:
            return type(self)(op(other, self.color), op(other, self.alpha))
        return type(self)(op(self.color, other), op(self.alpha, other))

    def _named(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        result = self._binary(other, op)
        if result is NotImplemented:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: {type(other).__name__}"
            )
        return result

    def add(self, other: Any) -> Any:
        return self._named(other, operator.add)

    def sub(self, other: Any) -> Any:
        return self._named(other, operator.sub)

    def mul(self, other: Any) -> Any:
        return self._named(other, operator.mul)

    def div(self, other: Any) -> Any:
        return self._named(other, operator.truediv)

    def __add__(self, other: Any) -> Any:
        return self._binary(other, operator.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, operator.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, operator.sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, operator.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, operator.truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, operator.truediv, reflected=True)


class AlphaMix:
    __slots__ = ()

    def mix(self, other: Any, factor: float) -> Any:
        result = self.copy()
        result.mix_assign(other, factor)
        return result

    def mix_assign(self, other: Any, factor: float) -> None:
        if type(other) is not type(self):
            raise TypeError(f"Cannot mix {type(self).__name__} with {type(other).__name__}")
        factor = _mix_factor(factor)
        self.color.mix_assign(other.color, factor)
        start, end = float(self.alpha), float(other.alpha)
        mixed = start + (end - start) * factor
        self.alpha = mixed if is_float_component(self.alpha_component) else round(mixed)


class AlphaLighten:
    __slots__ = ()

    def lighten(self, factor: float) -> Any:
        return type(self)(self.color.lighten(factor), self.alpha)

    def lighten_assign(self, factor: float) -> None:
        self.color.lighten_assign(factor)

    def lighten_fixed(self, amount: float) -> Any:
        return type(self)(self.color.lighten_fixed(amount), self.alpha)

    def lighten_fixed_assign(self, amount: float) -> None:
        self.color.lighten_fixed_assign(amount)

    def darken(self, factor: float) -> Any:
        return self.lighten(-factor)

    def darken_fixed(self, amount: float) -> Any:
        return self.lighten_fixed(-amount)


class AlphaSaturate:
    __slots__ = ()

    def saturate(self, factor: float) -> Any:
        return type(self)(self.color.saturate(factor), self.alpha)

    def saturate_assign(self, factor: float) -> None:
        self.color.saturate_assign(factor)

    def saturate_fixed(self, amount: float) -> Any:
        return type(self)(self.color.saturate_fixed(amount), self.alpha)

    def saturate_fixed_assign(self, amount: float) -> None:
        self.color.saturate_fixed_assign(amount)

    def desaturate(self, factor: float) -> Any:
        return self.saturate(-factor)

    def desaturate_fixed(self, amount: float) -> Any:
        return self.saturate_fixed(-amount)


class AlphaHueShift:
    __slots__ = ()

    def get_hue(self) -> Any:
        return self.color.get_hue()

    def with_hue(self, hue: Any) -> Any:
        return type(self)(self.color.with_hue(hue), self.alpha)

    def set_hue(self, hue: Any) -> None:
        self.color.set_hue(hue)

    def shift_hue(self, amount: Any) -> Any:
        return type(self)(self.color.shift_hue(amount), self.alpha)

    def shift_hue_assign(self, amount: Any) -> None:
        self.color.shift_hue_assign(amount)


class AlphaWithWhitePoint:
    __slots__ = ()

    def with_white_point(self, white_point: type) -> Any:
        return self._rewrap(self.color.with_white_point(white_point))


class AlphaRgb:
    """Rgb-only operations with the alpha channel carried along."""
    __slots__ = ()

    def into_format(self, component: Any, alpha_component: Any = None) -> Any:
        component = check_component(component)
        alpha_component = component if alpha_component is None else check_component(alpha_component)
        color = self.color.into_format(component)
        alpha = from_component(self.alpha, self.alpha_component, alpha_component)
        return Alpha[type(color), alpha_component](color, alpha)

    @classmethod
    def from_format(cls, color: Any) -> Any:
        if color.color.standard is not cls.color_type.standard:
            raise TypeError("from_format keeps the RGB standard")
        return color.into_format(cls.component, cls.alpha_component)

    def into_linear(self) -> Any:
        return self._rewrap(self.color.into_linear())

    @classmethod
    def from_linear(cls, color: Any) -> Any:
        return cls(cls.color_type.from_linear(color.color), color.alpha)

    def into_encoding(self, standard: type) -> Any:
        return self._rewrap(self.color.into_encoding(standard))

    @classmethod
    def from_encoding(cls, color: Any) -> Any:
        return cls(cls.color_type.from_encoding(color.color), color.alpha)

    def into_u32(self, order: ChannelOrder = ChannelOrder.RGBA) -> int:
        """Packs the 8-bit version of this color."""
        color = self.into_format(np.uint8, np.uint8)
        return order.pack(color.red, color.green, color.blue, color.alpha)

    @classmethod
    def from_u32(cls, packed: int, order: ChannelOrder = ChannelOrder.RGBA) -> Any:
        red, green, blue, alpha = order.unpack(packed)
        rgba = Alpha[Rgb[cls.color_type.standard, np.uint8], np.uint8](red, green, blue, alpha)
        return rgba.into_format(cls.component, cls.alpha_component)

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        width, upper = hex_format_spec(spec, self.alpha_component)
        return format(self.color, spec) + format_hex_channel(self.alpha, width, upper)


_FORWARDED_CAPABILITIES: tuple[tuple[type, type], ...] = (
    (Arithmetic, AlphaArithmetic),
    (Mix, AlphaMix),
    (Lighten, AlphaLighten),
    (Saturate, AlphaSaturate),
    (HueShift, AlphaHueShift),
    (WithWhitePoint, AlphaWithWhitePoint),
    (Rgb, AlphaRgb),
)
