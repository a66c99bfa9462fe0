# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Colour ramp generation."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

from .utils import make_curve_easings, normalize_hue

Easing = Callable[[float], float]

DEFAULT_TOTAL = 9
DEFAULT_S_RANGE = (0.4, 0.35)
DEFAULT_L_END = 0.9


def _identity(x: float) -> float:
    return x


def _ease_in_quad(x: float) -> float:
    return x**2


def _ease_in_1_5(x: float) -> float:
    return x**1.5


def generate_color_ramp(
    total: int | None = None,
    h_start: float | None = None,
    h_start_center: float | None = None,
    h_cycles: float | None = None,
    hue_list: Sequence[float] | None = None,
    s_range: Sequence[float] | None = None,
    l_range: Sequence[float] | None = None,
    h_easing: Easing = _identity,
    s_easing: Easing = _ease_in_quad,
    l_easing: Easing = _ease_in_1_5,
    rnd: Callable[[], float] = random.random,
) -> list[list[float]]:
    """Generate ``[hue, saturation, lightness]`` colours.

    Hues walk ``h_cycles`` times around the wheel from ``h_start``, with
    ``h_start_center`` choosing which point of the walk lands on the start
    hue. A non-empty ``hue_list`` replaces the walk and sets the ramp length.
    """
    total = DEFAULT_TOTAL if total is None else total
    h_start = rnd() * 360 if h_start is None else h_start
    h_start_center = 0.5 if h_start_center is None else h_start_center
    h_cycles = 1 if h_cycles is None else h_cycles
    s_range = DEFAULT_S_RANGE if s_range is None else s_range
    l_range = (rnd() * 0.1, DEFAULT_L_END) if l_range is None else l_range

    length = len(hue_list) if hue_list else total
    s_diff = s_range[1] - s_range[0]
    l_diff = l_range[1] - l_range[0]

    ramp = []
    for i in range(length):
        rel = i / max(length - 1, 1)
        if hue_list:
            hue = normalize_hue(hue_list[i])
        else:
            hue = normalize_hue(h_start + (1 - h_easing(rel) - h_start_center) * 360 * h_cycles)
        saturation = s_range[0] + s_diff * s_easing(rel)
        lightness = l_range[0] + l_diff * l_easing(rel)
        ramp.append([hue, saturation, lightness])
    return ramp


def generate_color_ramp_with_curve(
    curve_method: str = "lamé",
    curve_accent: float = 0.5,
    **opts,
) -> list[list[float]]:
    """Generate a ramp whose saturation and lightness follow a curve."""
    easings = make_curve_easings(curve_method, curve_accent)
    return generate_color_ramp(s_easing=easings["sEasing"], l_easing=easings["lEasing"], **opts)
