# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Conversion Graph
================
Pairwise conversion rules plus a hub planner that chains them.

Every color template names a ``hub_parent`` (Lab -> Xyz, Lch -> Lab,
Hsv -> Rgb, ...), which makes the templates a tree rooted at Xyz.  Rules are
registered per template pair with :func:`conversion` and receive the source
value and the fully specialized destination class::

    @conversion(Xyz, Lab)
    def _xyz_to_lab(color, target):
        ...

To convert A into B the planner walks up A's hub chain.  At every node it
looks for a registered rule that lands on B's chain with compatible
parameters (same white point, same RGB standard where relevant); if none
exists it climbs one more step.  Once the chains meet, the plan walks down
B's chain.  Plans are cached per (source class, destination class).

Compatibility is decided here, once per class pair, so a mismatch such as
``Lab[D50] -> Lab[D65]`` raises ``TypeError`` before any arithmetic runs.
"""

import functools
from typing import Any, Callable

from tint_component import from_component, is_float_component, max_intensity

__all__ = [
    "conversion",
    "convert",
    "convert_unclamped",
    "conversion_path",
    "registered_rules",
]

Rule = Callable[[Any, type], Any]

_RULES: dict[tuple[type, type], Rule] = {}


def conversion(src_template: type, dst_template: type) -> Callable[[Rule], Rule]:
    """
    Decorator registering a direct rule between two color templates.

    Raises:
        ValueError: If a rule for the pair already exists.
    """
    def register(rule: Rule) -> Rule:
        key = (src_template, dst_template)
        if key in _RULES:
            raise ValueError(
                f"A conversion from {src_template.__name__} to {dst_template.__name__} "
                "is already registered"
            )
        _RULES[key] = rule
        _plan.cache_clear()
        return rule
    return register


def _rule(src: type, dst: type) -> Rule:
    try:
        return _RULES[(src._template, dst._template)]
    except KeyError:
        raise TypeError(
            f"No conversion rule from {src._template.__name__} to {dst._template.__name__}"
        ) from None


def _hub_chain(cls: type) -> tuple[type, ...]:
    """``cls`` followed by its hub ancestors, specialized with its parameters."""
    chain = [cls]
    while chain[-1].hub_parent is not None:
        parent = chain[-1]._related(chain[-1].hub_parent)
        if parent is None:
            raise TypeError(
                f"{chain[-1].__name__} cannot be related to {chain[-1].hub_parent.__name__}"
            )
        chain.append(parent)
    return tuple(chain)


def _compatible(node: type, target: type) -> bool:
    if node._template is target._template:
        return node.white_point is target.white_point
    return node._related(target._template) is target or target._related(node._template) is node


def _descend(chain: tuple[type, ...], index: int) -> list[tuple[Rule, type]]:
    return [(_rule(chain[k], chain[k - 1]), chain[k - 1]) for k in range(index, 0, -1)]


@functools.lru_cache(maxsize=256)
def _plan(src: type, dst: type) -> tuple[tuple[Rule, type], ...]:
    if src is dst:
        return ()

    src_chain = _hub_chain(src)
    dst_chain = _hub_chain(dst)
    steps: list[tuple[Rule, type]] = []

    for i, node in enumerate(src_chain):
        for j, target in enumerate(dst_chain):
            if target is node:
                return tuple(steps + _descend(dst_chain, j))
            rule = _RULES.get((node._template, target._template))
            if rule is not None and _compatible(node, target):
                return tuple(steps + [(rule, target)] + _descend(dst_chain, j))
        if i + 1 < len(src_chain):
            steps.append((_rule(node, src_chain[i + 1]), src_chain[i + 1]))

    raise TypeError(
        f"Cannot convert {src.__name__} into {dst.__name__}: "
        f"white points {src.white_point.__name__} and {dst.white_point.__name__} differ"
    )


def _resolve_target(src: type, dst: Any) -> type:
    """Turns aliases and unspecialized templates into a concrete class."""
    if not isinstance(dst, type) and hasattr(dst, "resolve"):
        dst = dst.resolve()
    if not isinstance(dst, type) or not hasattr(dst, "_template"):
        raise TypeError(f"{dst!r} is not a color type")
    if dst._params is not None:
        return dst
    if getattr(dst, "_is_alpha", False):
        raise TypeError("Alpha needs a color type parameter to be a conversion target")
    related = src._related(dst)
    if related is not None:
        return related
    return dst[dst._default_params[0], src.component]


def _check_components(src: type, dst: type) -> None:
    if src.component is not dst.component:
        raise TypeError(
            f"Cannot convert {src.__name__} into {dst.__name__}: component types differ; "
            "use into_format first"
        )
    if src is not dst and not is_float_component(src.component):
        raise TypeError(
            f"Cannot convert {src.__name__} into {dst.__name__}: "
            "conversions need a floating point component type"
        )


def _convert_color(color: Any, dst: type) -> Any:
    src = type(color)
    _check_components(src, dst)
    result = color
    for rule, target in _plan(src, dst):
        result = rule(result, target)
    return result.copy() if result is color else result


def conversion_path(src: type, dst: Any) -> list[type]:
    """
    The classes visited when converting ``src`` into ``dst``.

    Mainly a debugging aid; the first entry is ``src`` itself.
    """
    dst = _resolve_target(src, dst)
    _check_components(src, dst)
    return [src] + [target for _, target in _plan(src, dst)]


def convert_unclamped(color: Any, dst: Any) -> Any:
    """
    Converts ``color`` into ``dst`` without clamping the result.

    ``dst`` may be a specialized class, an alias or a template; a template
    takes its parameters from the source (white point, standard and
    component type).

    Alpha is handled around the color conversion: alpha to alpha converts
    the alpha component, a plain color gains full opacity, and an alpha
    value converted into a plain color drops its alpha.

    Raises:
        TypeError: If white points or component types do not match, or the
            component type is not floating point.
    """
    src = type(color)
    src_color = src.color_type if src._is_alpha else src
    inner = color.color if src._is_alpha else color

    target = _resolve_target(src_color, dst)
    if not target._is_alpha:
        return _convert_color(inner, target)

    converted = _convert_color(inner, target.color_type)
    if src._is_alpha:
        alpha = from_component(color.alpha, src.alpha_component, target.alpha_component)
    else:
        alpha = max_intensity(target.alpha_component)
    return target(converted, alpha)


def convert(color: Any, dst: Any) -> Any:
    """Like :func:`convert_unclamped`, then clamps into ``dst``'s bounds."""
    result = convert_unclamped(color, dst)
    result.clamp_assign()
    return result


def registered_rules() -> list[tuple[str, str]]:
    """Names of all directly registered (source, destination) template pairs."""
    return sorted((src.__name__, dst.__name__) for src, dst in _RULES)
