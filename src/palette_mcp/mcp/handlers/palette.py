# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Palette generation and CSS conversion handlers."""

from __future__ import annotations

from typing import Any

from palette_mcp.core.config import get_config
from palette_mcp.engine.base import ColorEngine

# Wire name -> engine keyword for the ramp options
RAMP_OPTIONS = {
    "total": "total",
    "hStart": "h_start",
    "hStartCenter": "h_start_center",
    "hCycles": "h_cycles",
    "hueList": "hue_list",
    "sRange": "s_range",
    "lRange": "l_range",
}


def generate(engine: ColorEngine, args: dict[str, Any]) -> Any:
    """Generate a ramp, optionally curve-shaped, as tuples or CSS strings."""
    opts = {kw: args[name] for name, kw in RAMP_OPTIONS.items() if name in args}

    curve_method = args.get("curveMethod")
    if curve_method is not None:
        if "curveAccent" in args:
            opts["curve_accent"] = args["curveAccent"]
        ramp = engine.generate_ramp_with_curve(curve_method=curve_method, **opts)
    else:
        ramp = engine.generate_ramp(**opts)

    fmt = args.get("format", "array")
    if fmt == "array":
        return ramp
    space = fmt.removeprefix("css-")
    return [engine.color_to_css(color, space) for color in ramp]


def to_css(engine: ColorEngine, args: dict[str, Any]) -> str | list[str]:
    """Convert one colour or a list of colours, mirroring the input shape."""
    color = args["color"]
    mode = args.get("mode") or get_config().default_css_mode
    if color and not isinstance(color[0], list):
        return engine.color_to_css(color, mode)
    return [engine.color_to_css(c, mode) for c in color]
