# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Default colour engine, following RampenSau's public call contract.

Usage::

    from palette_mcp.engine import RampenSauEngine

    engine = RampenSauEngine()
    ramp = engine.generate_ramp(total=5, hue_list=[0, 60, 120, 180, 240])
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import Any

from .base import Color, ColorEngine
from .css import color_to_css
from .hues import HARMONIES, harvey_hue, unique_random_hues
from .ramp import generate_color_ramp, generate_color_ramp_with_curve
from .utils import lerp, make_curve_easings, point_on_curve, scale_spread_array, shuffle_array


class RampenSauEngine:
    """ColorEngine implementation backed by the functions in this package.

    Args:
        rng: Randomness source for random start hues and shuffles. A fresh
             unseeded ``random.Random`` when omitted.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def generate_ramp(self, **opts: Any) -> list[Color]:
        return generate_color_ramp(rnd=self.rng.random, **opts)

    def generate_ramp_with_curve(
        self,
        *,
        curve_method: str = "lamé",
        curve_accent: float = 0.5,
        **opts: Any,
    ) -> list[Color]:
        return generate_color_ramp_with_curve(
            curve_method=curve_method,
            curve_accent=curve_accent,
            rnd=self.rng.random,
            **opts,
        )

    def color_to_css(self, color: Sequence[float], mode: str = "oklch") -> str:
        return color_to_css(color, mode)

    def harmony(self, method: str, base_hue: float) -> list[float]:
        return HARMONIES[method](base_hue)

    def unique_random_hues(
        self,
        *,
        start_hue: float | None = None,
        total: int | None = None,
        min_hue_diff_angle: float | None = None,
    ) -> list[float]:
        return unique_random_hues(
            start_hue=start_hue,
            total=9 if total is None else total,
            min_hue_diff_angle=60 if min_hue_diff_angle is None else min_hue_diff_angle,
            rnd=self.rng.random,
        )

    def harvey_hue(self, h: float) -> float:
        return harvey_hue(h)

    def shuffle(self, array: Sequence[Any]) -> list[Any]:
        return shuffle_array(array, self.rng.random)

    def lerp(self, amt: float, start: float, end: float) -> float:
        return lerp(amt, start, end)

    def scale_spread(self, values: Sequence[float], target_size: int, padding: float = 0) -> list[float]:
        return scale_spread_array(values, target_size, padding)

    def point_on_curve(self, curve_method: str, curve_accent: float) -> Callable[[float], list[float]]:
        return point_on_curve(curve_method, curve_accent)

    def make_curve_easings(self, curve_method: str, curve_accent: float) -> dict[str, Any]:
        return make_curve_easings(curve_method, curve_accent)


__all__ = ["Color", "ColorEngine", "RampenSauEngine"]
