# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Hue generation: harmonies, unique random hues and Harvey's hue transform."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from types import MappingProxyType

from .utils import normalize_hue


def _offsets(*degrees: float) -> Callable[[float], list[float]]:
    def harmony(h: float) -> list[float]:
        return [normalize_hue(h + d) for d in degrees]

    return harmony


HARMONIES = MappingProxyType(
    {
        "complementary": _offsets(0, 180),
        "splitComplementary": _offsets(0, 150, -150),
        "triadic": _offsets(0, 120, 240),
        "tetradic": _offsets(0, 90, 180, 270),
        "monochromatic": _offsets(0, 0),
        "doubleComplementary": _offsets(0, 180, 30, 210),
        "compound": _offsets(0, 180, 60, 240),
        "analogous": _offsets(0, 30, 60, 90, 120, 150),
    }
)


def unique_random_hues(
    start_hue: float | None = None,
    total: int = 9,
    min_hue_diff_angle: float = 60,
    rnd: Callable[[], float] = random.random,
) -> list[float]:
    """Pick ``total`` distinct hues on an evenly spaced wheel, in random order.

    The spacing is ``min_hue_diff_angle``, tightened to ``360 / total`` when
    the wheel would otherwise not fit ``total`` hues. Without a start hue the
    wheel is rotated randomly.
    """
    step = min(min_hue_diff_angle, 360 / total) if min_hue_diff_angle > 0 else 360 / total
    base = rnd() * 360 if start_hue is None else start_hue
    slots = max(total, round(360 / step))

    # Partial Fisher-Yates over the wheel slots; only the swapped slots are stored
    swapped: dict[int, int] = {}
    hues = []
    for i in range(total):
        j = i + math.floor(rnd() * (slots - i))
        slot = swapped.get(j, j)
        swapped[j] = swapped.get(i, i)
        hues.append((base + slot * step) % 360)
    return hues


def harvey_hue(h: float) -> float:
    """Remap a hue so the six primary/secondary segments are evenly weighted."""
    pos = normalize_hue(h) / 360 * 6
    segment = math.floor(pos)
    a = (pos - segment) * math.pi / 2
    seg = 1 / 6
    b, c = seg * math.cos(a), seg * math.sin(a)
    cases = (c, 1 / 3 - b, 1 / 3 + c, 2 / 3 - b, 2 / 3 + c, 1 - b)
    return cases[segment % 6] * 360
