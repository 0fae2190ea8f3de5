# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color Base Class
================
Shared machinery of every color type.

1. PARAMETERS
   A color template (``Lab``, ``Rgb``, ...) is specialized by subscription:
   ``Lab[D50, np.float32]`` or ``Rgb[Srgb, np.uint8]``.  Each distinct
   parameter tuple produces one cached subclass, so specializations can be
   compared with ``is``.  Calling a template builds its default
   specialization (D65 or sRGB, float64).

2. CHANNELS
   Instances store exactly their channels in ``__slots__``; the type
   parameters live on the class.  Channel values are coerced to the
   component type on every assignment.

3. CAPABILITIES
   Optional behaviour (arithmetic, mix, lighten, saturate, hue operations)
   comes from mixins.  Templates that always support an operation list the
   mixin as a base; ``Rgb`` attaches them per specialization through
   ``_capabilities``.
"""

import functools
import math
import numbers
import operator
import numpy as np
from typing import Any, Callable, ClassVar, Iterator, Optional

import tint_cast
import tint_convert
from tint_component import (
    DEFAULT_COMPONENT, check_component, is_float_component,
)
from tint_encoding import RgbStandard
from tint_whitepoint import WhitePoint, D65

__all__ = [
    "Color",
    "Arithmetic",
    "Mix",
    "Lighten",
    "Saturate",
    "HueShift",
    "WithWhitePoint",
]

Bounds = tuple[Optional[Any], Optional[Any]]


def _is_component_like(param: Any) -> bool:
    if param is float or isinstance(param, np.dtype):
        return True
    return isinstance(param, type) and issubclass(param, np.generic)


def _param_label(param: Any) -> str:
    if _is_component_like(param):
        return np.dtype(param).name
    return getattr(param, "__name__", repr(param))


def _repr_value(value: Any) -> str:
    if isinstance(value, np.floating):
        return repr(float(value))
    if isinstance(value, np.integer):
        return repr(int(value))
    return repr(value)


@functools.lru_cache(maxsize=None)
def _specialize(template: type, params: tuple) -> type:
    namespace = {
        "__slots__": (),
        "__module__": template.__module__,
        "_params": params,
        "_template": template,
    }
    namespace.update(template._bind_params(params))
    name = f"{template.__name__}[{', '.join(_param_label(p) for p in params)}]"
    cls = type(name, template._capabilities(params) + (template,), namespace)
    cls.__qualname__ = name
    return cls


class Color:
    """
    Base class of all color types.

    Subclasses declare ``_channels`` and matching ``__slots__``; see
    :mod:`tint_cast` for the layout rules checked at class definition.
    """
    __slots__ = ()

    _channels: ClassVar[tuple[str, ...]] = ()
    _hue_channel: ClassVar[Optional[str]] = None
    _hue_type: ClassVar[Optional[type]] = None
    _param_kind: ClassVar[str] = "white_point"
    _default_params: ClassVar[tuple] = (D65, DEFAULT_COMPONENT)
    _float_only: ClassVar[bool] = True
    _is_alpha: ClassVar[bool] = False

    _params: ClassVar[Optional[tuple]] = None
    _template: ClassVar[Optional[type]] = None
    _array_castable: ClassVar[bool] = False

    hub_parent: ClassVar[Optional[type]] = None
    component: ClassVar[type]
    white_point: ClassVar[type]

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if cls._params is None:
            cls._template = cls
        cls._array_castable = tint_cast.check_layout(cls)

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    def __class_getitem__(cls, params: Any) -> type:
        if cls._params is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple):
            params = (params,)
        return _specialize(cls, cls._normalize_params(params))

    @classmethod
    def _normalize_params(cls, params: tuple) -> tuple:
        if len(params) == 1 and _is_component_like(params[0]):
            params = (cls._default_params[0],) + params
        if len(params) > len(cls._default_params):
            raise TypeError(
                f"{cls.__name__} takes at most {len(cls._default_params)} parameters, "
                f"got {len(params)}"
            )
        space, component = params + cls._default_params[len(params):]
        cls._check_space(space)
        component = check_component(component)
        if cls._float_only and not is_float_component(component):
            raise TypeError(
                f"{cls.__name__} needs a floating point component type, "
                f"got {np.dtype(component).name}"
            )
        return (space, component)

    @classmethod
    def _check_space(cls, space: Any) -> None:
        expected = WhitePoint if cls._param_kind == "white_point" else RgbStandard
        if not (isinstance(space, type) and issubclass(space, expected)):
            raise TypeError(
                f"{cls.__name__} needs a {expected.__name__} parameter, got {space!r}"
            )

    @classmethod
    def _bind_params(cls, params: tuple) -> dict[str, Any]:
        space, component = params
        if cls._param_kind == "standard":
            return {"standard": space, "white_point": space.space.white_point, "component": component}
        return {"white_point": space, "component": component}

    @classmethod
    def _capabilities(cls, params: tuple) -> tuple[type, ...]:
        return ()

    @classmethod
    def _concrete(cls) -> type:
        return cls[()] if cls._params is None else cls

    @classmethod
    def _resolve_template(cls, args: tuple) -> type:
        return cls[()]

    @classmethod
    def _related(cls, template: type) -> Optional[type]:
        """
        ``template`` specialized with this class's parameters, where that is
        meaningful: same parameter kind, or a white point template.
        """
        if template._param_kind == cls._param_kind:
            return template[cls._params]
        if template._param_kind == "white_point":
            return template[cls.white_point, cls.component]
        return None

    # -------------------------------------------------------------------------
    # Construction and channels
    # -------------------------------------------------------------------------

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls._params is None:
            cls = cls._resolve_template(args)
        return object.__new__(cls)

    def __init__(self, *values: Any):
        if len(values) != len(self._channels):
            raise TypeError(
                f"{type(self).__name__} takes {len(self._channels)} channel values, "
                f"got {len(values)}"
            )
        for name, value in zip(self._channels, values):
            object.__setattr__(self, name, self._coerce(name, value))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._channels:
            value = self._coerce(name, value)
        object.__setattr__(self, name, value)

    def _coerce(self, name: str, value: Any) -> Any:
        if name == self._hue_channel:
            return value if isinstance(value, self._hue_type) else self._hue_type(value)
        return self.component(value)

    @classmethod
    def _stored_fields(cls) -> tuple[str, ...]:
        return tint_cast.stored_fields(cls)

    @classmethod
    def _channel_components(cls) -> tuple[type, ...]:
        return (cls.component,) * len(cls._channels)

    def into_components(self) -> tuple:
        return tuple(getattr(self, name) for name in self._channels)

    @classmethod
    def from_components(cls, components: Any) -> "Color":
        return cls(*components)

    def _raw_values(self) -> tuple:
        # Hue objects are flattened to raw degrees
        return tuple(
            float(v) if name == self._hue_channel else v
            for name, v in zip(self._channels, self.into_components())
        )

    @classmethod
    def _from_raw_values(cls, values: Any) -> "Color":
        return cls(*values)

    def _as_batch(self) -> np.ndarray:
        return np.array([self._raw_values()], dtype=np.float64)

    @classmethod
    def _from_batch(cls, batch: np.ndarray) -> "Color":
        return cls._from_raw_values(tuple(batch[0]))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.into_components())

    def copy(self) -> "Color":
        return type(self).from_components(self.into_components())

    @classmethod
    def default(cls) -> "Color":
        """The zero value of every channel."""
        cls = cls._concrete()
        return cls._from_raw_values((0,) * len(cls._channels))

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(a == b for a, b in zip(self.into_components(), other.into_components()))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={_repr_value(value)}"
            for name, value in zip(self._channels, self.into_components())
        )
        return f"{type(self).__name__}({fields})"

    # -------------------------------------------------------------------------
    # Bounds
    # -------------------------------------------------------------------------

    @classmethod
    def _bounds(cls) -> tuple[Bounds, ...]:
        """Per-channel ``(min, max)``; ``None`` marks an open side."""
        return tuple((None, None) for _ in cls._channels)

    def is_within_bounds(self) -> bool:
        for name, (lo, hi) in zip(self._channels, self._bounds()):
            value = getattr(self, name)
            if lo is not None and not value >= lo:
                return False
            if hi is not None and not value <= hi:
                return False
        return True

    def clamp(self) -> "Color":
        result = self.copy()
        result.clamp_assign()
        return result

    def clamp_assign(self) -> None:
        for name, (lo, hi) in zip(self._channels, self._bounds()):
            if lo is None and hi is None:
                continue
            value = getattr(self, name)
            if lo is not None and value < lo:
                value = lo
            if hi is not None and value > hi:
                value = hi
            setattr(self, name, value)

    def component_wise(self, other: "Color", f: Callable[[Any, Any], Any]) -> "Color":
        """Applies ``f`` to each pair of channels of ``self`` and ``other``."""
        if type(other) is not type(self):
            raise TypeError(
                f"component_wise needs two {type(self).__name__} values, got {type(other).__name__}"
            )
        return type(self)._from_raw_values(tuple(
            f(a, b) for a, b in zip(self._raw_values(), other._raw_values())
        ))

    def component_wise_self(self, f: Callable[[Any], Any]) -> "Color":
        return type(self)._from_raw_values(tuple(f(a) for a in self._raw_values()))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def into_color(self, dst: Any) -> "Color":
        """Converts into ``dst`` and clamps the result."""
        return tint_convert.convert(self, dst)

    def into_color_unclamped(self, dst: Any) -> "Color":
        return tint_convert.convert_unclamped(self, dst)

    @classmethod
    def from_color(cls, color: "Color") -> "Color":
        return tint_convert.convert(color, cls)

    @classmethod
    def from_color_unclamped(cls, color: "Color") -> "Color":
        return tint_convert.convert_unclamped(color, cls)

    def with_alpha(self, alpha: Any) -> "Color":
        from color_spaces.alpha import Alpha
        return Alpha[type(self)](self, alpha)

    def into_array(self) -> np.ndarray:
        return tint_cast.into_array(self)

    @classmethod
    def from_array(cls, array: Any) -> "Color":
        return tint_cast.from_array(cls._concrete(), array)

    # -------------------------------------------------------------------------
    # Shared helpers for lighten / saturate
    # -------------------------------------------------------------------------

    def _scale_towards_bounds(self, targets: tuple, factor: float) -> None:
        for name, lo, hi in targets:
            value = getattr(self, name)
            difference = hi - value if factor >= 0 else value
            setattr(self, name, max(value + max(difference, 0) * factor, lo))

    def _shift_by_max(self, targets: tuple, amount: float) -> None:
        for name, lo, hi in targets:
            setattr(self, name, max(getattr(self, name) + hi * amount, lo))


# =============================================================================
# CAPABILITY MIXINS
# =============================================================================

class Arithmetic:
    """Channel-wise ``+ - * /`` with a same-typed color or a scalar."""
    __slots__ = ()

    def _binary(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False) -> Any:
        if type(other) is type(self):
            pairs = zip(self.into_components(), other.into_components())
        elif isinstance(other, numbers.Real):
            pairs = ((value, other) for value in self.into_components())
        else:
            return NotImplemented
        if reflected:
            values = tuple(op(b, a) for a, b in pairs)
        else:
            values = tuple(op(a, b) for a, b in pairs)
        return type(self).from_components(values)

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


def _mix_factor(factor: Any) -> float:
    return min(max(float(factor), 0.0), 1.0)


class Mix:
    """
    Linear interpolation between two colors of the same type.

    The factor is clamped to [0, 1].  A hue channel follows the shortest arc.
    """
    __slots__ = ()

    def mix(self, other: Any, factor: float) -> Any:
        result = self.copy()
        result.mix_assign(other, factor)
        return result

    def mix_assign(self, other: Any, factor: float) -> None:
        if type(other) is not type(self):
            raise TypeError(f"Cannot mix {type(self).__name__} with {type(other).__name__}")
        factor = _mix_factor(factor)
        for name in self._channels:
            value = getattr(self, name)
            target = getattr(other, name)
            if name == self._hue_channel:
                setattr(self, name, value + factor * (target - value).to_degrees())
            else:
                setattr(self, name, value + (target - value) * factor)


class Lighten:
    """
    Lightness adjustment over the channels named by ``_lighten_targets``.

    ``lighten(f)`` moves a fraction ``f`` of the remaining distance towards
    the maximum (or, for negative ``f``, towards zero); ``lighten_fixed(a)``
    adds ``a`` times the maximum.  Results never fall below the minimum.
    """
    __slots__ = ()

    def lighten(self, factor: float) -> Any:
        result = self.copy()
        result.lighten_assign(factor)
        return result

    def lighten_assign(self, factor: float) -> None:
        self._scale_towards_bounds(self._lighten_targets(), factor)

    def lighten_fixed(self, amount: float) -> Any:
        result = self.copy()
        result.lighten_fixed_assign(amount)
        return result

    def lighten_fixed_assign(self, amount: float) -> None:
        self._shift_by_max(self._lighten_targets(), amount)

    def darken(self, factor: float) -> Any:
        return self.lighten(-factor)

    def darken_fixed(self, amount: float) -> Any:
        return self.lighten_fixed(-amount)


class Saturate:
    """Same rules as :class:`Lighten`, applied to saturation or chroma."""
    __slots__ = ()

    def saturate(self, factor: float) -> Any:
        result = self.copy()
        result.saturate_assign(factor)
        return result

    def saturate_assign(self, factor: float) -> None:
        self._scale_towards_bounds(self._saturate_targets(), factor)

    def saturate_fixed(self, amount: float) -> Any:
        result = self.copy()
        result.saturate_fixed_assign(amount)
        return result

    def saturate_fixed_assign(self, amount: float) -> None:
        self._shift_by_max(self._saturate_targets(), amount)

    def desaturate(self, factor: float) -> Any:
        return self.saturate(-factor)

    def desaturate_fixed(self, amount: float) -> Any:
        return self.saturate_fixed(-amount)


class HueShift:
    """Read, replace and rotate the hue channel."""
    __slots__ = ()

    def _is_achromatic(self) -> bool:
        return False

    def get_hue(self) -> Any:
        """The hue, or ``None`` for an achromatic color."""
        if self._is_achromatic():
            return None
        return getattr(self, self._hue_channel)

    def with_hue(self, hue: Any) -> Any:
        result = self.copy()
        result.set_hue(hue)
        return result

    def set_hue(self, hue: Any) -> None:
        setattr(self, self._hue_channel, hue)

    def shift_hue(self, amount: Any) -> Any:
        result = self.copy()
        result.shift_hue_assign(amount)
        return result

    def shift_hue_assign(self, amount: Any) -> None:
        setattr(self, self._hue_channel, getattr(self, self._hue_channel) + amount)


class WithWhitePoint:
    """Reinterprets the channel values under another white point."""
    __slots__ = ()

    def with_white_point(self, white_point: type) -> Any:
        return self._template[white_point, self.component]._from_raw_values(self._raw_values())


def hue_from_atan2(hue_type: type, y: Any, x: Any) -> Any:
    """``hue_type`` of ``atan2(y, x)``, or ``None`` when both axes are zero."""
    if y == 0 and x == 0:
        return None
    return hue_type.from_radians(math.atan2(float(y), float(x)))
