# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""CSS colour function rendering."""

from __future__ import annotations

from collections.abc import Sequence

from .utils import normalize_hue

CSS_MODES = ("hsl", "hsv", "lch", "oklch")

# Chroma reached at full saturation
LCH_MAX_CHROMA = 150
OKLCH_MAX_CHROMA = 0.4


def _fmt(value: float, digits: int = 2) -> str:
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def hsv_to_hsl(color: Sequence[float]) -> list[float]:
    h, s, v = color
    lightness = v * (1 - s / 2)
    if lightness in (0, 1):
        saturation = 0.0
    else:
        saturation = (v - lightness) / min(lightness, 1 - lightness)
    return [h, saturation, lightness]


def color_to_css(color: Sequence[float], mode: str = "oklch") -> str:
    """Render ``[h, s, l]`` (``[h, s, v]`` for hsv) as a CSS colour string.

    hsv has no CSS function and is emitted as hsl.
    """
    if mode not in CSS_MODES:
        raise ValueError(f"Unknown CSS mode: {mode!r}")
    if mode == "hsv":
        color = hsv_to_hsl(color)
        mode = "hsl"
    h, s, l = color  # noqa: E741
    h = normalize_hue(h)

    if mode == "hsl":
        return f"hsl({_fmt(h)} {_fmt(s * 100)}% {_fmt(l * 100)}%)"
    if mode == "lch":
        return f"lch({_fmt(l * 100)}% {_fmt(s * LCH_MAX_CHROMA)} {_fmt(h)})"
    return f"oklch({_fmt(l * 100)}% {_fmt(s * OKLCH_MAX_CHROMA, 3)} {_fmt(h)})"
