# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Hue tool handlers."""

from __future__ import annotations

from typing import Any

from palette_mcp.engine.base import ColorEngine


def color_harmony(engine: ColorEngine, args: dict[str, Any]) -> list[float]:
    return engine.harmony(args["method"], args["baseHue"])


def unique_random_hues(engine: ColorEngine, args: dict[str, Any]) -> list[float]:
    return engine.unique_random_hues(
        start_hue=args.get("startHue"),
        total=args.get("total"),
        min_hue_diff_angle=args.get("minHueDiffAngle"),
    )


def harvey_hue(engine: ColorEngine, args: dict[str, Any]) -> float:
    return engine.harvey_hue(args["h"])
