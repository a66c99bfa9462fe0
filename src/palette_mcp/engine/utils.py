# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Array and curve helpers used by ramp generation."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence
from typing import Any

CURVE_METHODS = ("lamé", "arc", "pow", "powX", "powY", "linear")


def normalize_hue(h: float) -> float:
    """Wrap a hue into [0, 360)."""
    return ((h % 360) + 360) % 360


def lerp(amt: float, start: float, end: float) -> float:
    """Linear interpolation from ``start`` to ``end``."""
    return start + amt * (end - start)


def shuffle_array(array: Sequence[Any], rnd: Callable[[], float] = random.random) -> list[Any]:
    """Fisher-Yates shuffle into a new list."""
    result = list(array)
    for i in range(len(result) - 1, 0, -1):
        j = math.floor(rnd() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def scale_spread_array(values: Sequence[float], target_size: int, padding: float = 0) -> list[float]:
    """Stretch ``values`` to ``target_size`` items by interpolating between them.

    Extra items are distributed round-robin over the gaps between the
    original values, which keep their relative order. ``padding`` (0-0.5)
    pulls both ends towards their neighbour before spreading.
    """
    if len(values) < 2:
        raise ValueError("scale_spread_array needs at least two values")
    if not 0 <= padding < 0.5:
        raise ValueError("padding must be in [0, 0.5)")
    if target_size < len(values):
        raise ValueError("target_size must be at least the number of values")

    original = list(values)
    values = list(values)
    if padding:
        values[0] = lerp(padding, original[0], original[1])
        values[-1] = lerp(padding, original[-1], original[-2])

    gaps = len(values) - 1
    per_gap = [1] * gaps
    for i in range(target_size - len(values)):
        per_gap[i % gaps] += 1

    result: list[float] = []
    for i in range(gaps):
        steps = per_gap[i]
        result.extend(lerp(j / steps, values[i], values[i + 1]) for j in range(steps))
    result.append(values[-1])
    return result


def _signed_pow(base: float, exp: float) -> float:
    return math.copysign(abs(base) ** exp, base)


def point_on_curve(curve_method: str, curve_accent: float) -> Callable[[float], list[float]]:
    """Build a curve from ``(1, 0)`` at ``t=0`` to ``(0, 1)`` at ``t=1``.

    The accent bends the curve; 0 is the flattest variant of each method.
    """
    if curve_method not in CURVE_METHODS:
        raise ValueError(f"Unknown curve method: {curve_method!r}")
    accent = float(curve_accent)

    def point(t: float) -> list[float]:
        if curve_method == "lamé":
            angle = t * math.pi / 2
            exp = 2 / (2 + 20 * accent)
            # Rounded so cos(pi/2) is exactly 0 before the fractional power
            x = _signed_pow(round(math.cos(angle), 12), exp)
            y = _signed_pow(round(math.sin(angle), 12), exp)
        elif curve_method == "arc":
            x = math.sin(math.pi / 2 + t * math.pi / 2 - accent)
            y = math.cos(-math.pi / 2 + t * math.pi / 2 + accent)
        elif curve_method == "pow":
            x = _signed_pow(1 - t, 1 + accent)
            y = _signed_pow(t, 1 + accent)
        elif curve_method == "powX":
            x = _signed_pow(1 - t, 1 + accent)
            y = t
        elif curve_method == "powY":
            x = 1 - t
            y = _signed_pow(t, 1 + accent)
        else:
            x, y = 1 - t, t
        return [x, y]

    return point


class CurveEasing:
    """Easing along one axis of a curve.

    Saturation eases along ``1 - x`` and lightness along ``y``, so both
    run from 0 to 1 over the ramp.
    """

    def __init__(self, curve_method: str, curve_accent: float, axis: str):
        self.curve_method = curve_method
        self.curve_accent = curve_accent
        self.axis = axis
        self._point = point_on_curve(curve_method, curve_accent)

    def __call__(self, t: float) -> float:
        x, y = self._point(t)
        return 1 - x if self.axis == "s" else y

    def __repr__(self) -> str:
        return f"CurveEasing({self.curve_method!r}, {self.curve_accent!r}, axis={self.axis!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"curveMethod": self.curve_method, "curveAccent": self.curve_accent, "axis": self.axis}


def make_curve_easings(curve_method: str, curve_accent: float) -> dict[str, CurveEasing]:
    """Saturation (``sEasing``) and lightness (``lEasing``) easings for a curve."""
    return {
        "sEasing": CurveEasing(curve_method, curve_accent, "s"),
        "lEasing": CurveEasing(curve_method, curve_accent, "l"),
    }
