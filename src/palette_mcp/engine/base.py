# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Call contract of the colour engine consumed by the tool handlers.

Handlers depend on this protocol only, so any object providing these
methods can be injected into the dispatcher (tests use fakes).

Colours are ``[hue, saturation, lightness]`` lists: hue in degrees,
saturation and lightness as 0-1 fractions.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

Color = list[float]


@runtime_checkable
class ColorEngine(Protocol):
    """Ramp generation, hue helpers, CSS conversion and curve utilities."""

    def generate_ramp(
        self,
        *,
        total: int | None = None,
        h_start: float | None = None,
        h_start_center: float | None = None,
        h_cycles: float | None = None,
        hue_list: Sequence[float] | None = None,
        s_range: Sequence[float] | None = None,
        l_range: Sequence[float] | None = None,
    ) -> list[Color]:
        """Generate a ramp. ``hue_list`` takes precedence over generated hues."""
        ...

    def generate_ramp_with_curve(
        self,
        *,
        curve_method: str = "lamé",
        curve_accent: float = 0.5,
        **opts: Any,
    ) -> list[Color]:
        """Generate a ramp whose saturation/lightness follow a curve."""
        ...

    def color_to_css(self, color: Sequence[float], mode: str = "oklch") -> str:
        """Render a colour as a CSS colour function in ``mode`` space."""
        ...

    def harmony(self, method: str, base_hue: float) -> list[float]:
        """Hues related to ``base_hue`` by the named harmony rule."""
        ...

    def unique_random_hues(
        self,
        *,
        start_hue: float | None = None,
        total: int | None = None,
        min_hue_diff_angle: float | None = None,
    ) -> list[float]:
        """Randomly ordered hues at least ``min_hue_diff_angle`` apart."""
        ...

    def harvey_hue(self, h: float) -> float:
        """Transform a hue for perceptually even spacing."""
        ...

    def shuffle(self, array: Sequence[Any]) -> list[Any]:
        ...

    def lerp(self, amt: float, start: float, end: float) -> float:
        ...

    def scale_spread(self, values: Sequence[float], target_size: int, padding: float = 0) -> list[float]:
        ...

    def point_on_curve(self, curve_method: str, curve_accent: float) -> Callable[[float], list[float]]:
        """Build a curve; the returned function maps ``t`` to ``[x, y]``."""
        ...

    def make_curve_easings(self, curve_method: str, curve_accent: float) -> dict[str, Callable[[float], float]]:
        """Saturation and lightness easing functions for a curve."""
        ...
