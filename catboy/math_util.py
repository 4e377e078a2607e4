"""Numeric helpers and easing curves used by the overlays and animations."""

from __future__ import annotations

import math
from typing import Callable

Easing = Callable[[float], float]


def clamp(x: float, lo: float, hi: float) -> float:
    """Limit ``x`` to the closed range ``[lo, hi]``."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def wrap(x: float, lo: float, hi: float) -> float:
    """Shift ``x`` by whole multiples of ``hi - lo`` until it lies in ``[lo, hi]``."""
    span = hi - lo
    if span <= 0 and (x < lo or x > hi):
        raise ValueError("wrap range must be positive")
    while x < lo:
        x += span
    while x > hi:
        x -= span
    return x


def lerp(x: float, f: float, t: float) -> float:
    """Linear interpolation from ``f`` (at 0) to ``t`` (at 1)."""
    return (t - f) * x + f


def in_out(x: float, ease_in: Easing, ease_out: Easing) -> float:
    """Join an ease-in curve on the first half with an ease-out curve on the second."""
    if x < 0.5:
        return ease_in(x * 2) / 2
    return (ease_out(x * 2 - 1) + 1) / 2


def expo_in(x: float, e: float) -> float:
    return x ** e


def expo_out(x: float, e: float) -> float:
    return 1 - (1 - x) ** e


def linear(x: float) -> float:
    return x


def sin_in(x: float) -> float:
    return 1 - math.cos((x * math.pi) / 2)


def sin_out(x: float) -> float:
    return math.sin((x * math.pi) / 2)


_C1 = 1.70158
_C2 = _C1 + 1


def elastic_in(x: float) -> float:
    """Back-style ease-in that dips below zero before rising."""
    return _C2 * x * x * x - _C1 * x * x


def elastic_out(x: float) -> float:
    """Back-style ease-out that overshoots one before settling."""
    return 1 + _C2 * (x - 1) ** 3 + _C1 * (x - 1) ** 2


def quad_in(x: float) -> float:
    return expo_in(x, 2)


def quad_out(x: float) -> float:
    return expo_out(x, 2)


def cubic_in(x: float) -> float:
    return expo_in(x, 3)


def cubic_out(x: float) -> float:
    return expo_out(x, 3)


def sin_in_out(x: float) -> float:
    return in_out(x, sin_in, sin_out)


def quad_in_out(x: float) -> float:
    return in_out(x, quad_in, quad_out)


def cubic_in_out(x: float) -> float:
    return in_out(x, cubic_in, cubic_out)


def elastic_in_out(x: float) -> float:
    return in_out(x, elastic_in, elastic_out)