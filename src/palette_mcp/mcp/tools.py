# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Palette tool definitions.

Contains PALETTE_TOOLS, the descriptors for every tool the server exposes,
and REGISTRY, the read-only catalog built from them at import time.

Tool list:
    generate          Generate a colour ramp / palette
    uniqueRandomHues  Unique random hues at least N degrees apart
    colorHarmony      Hues related by a harmony rule
    toCSS             Colour(s) to CSS colour functions
    harveyHue         Harvey's perceptual hue transform
    utils             Array / curve utilities with positional args
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, get_args

from pydantic import Field

from palette_mcp.core.schema import (
    ColorInput,
    CurveName,
    FormatName,
    Fraction,
    FractionPair,
    Hue,
    Integer,
    ModeName,
    ToolArguments,
)

from .handlers import color_harmony, generate, harvey_hue, to_css, unique_random_hues, utils
from .registry import ToolDescriptor, ToolRegistry

HarmonyMethod = Literal[
    "complementary",
    "splitComplementary",
    "triadic",
    "tetradic",
    "monochromatic",
    "doubleComplementary",
    "compound",
    "analogous",
]
UtilityName = Literal["shuffle", "lerp", "scaleSpread", "curvePoint", "curveEasings"]

HARMONY_METHODS = get_args(HarmonyMethod)
UTILITY_NAMES = get_args(UtilityName)

# =========================================================================
# Argument models
# =========================================================================


class RampArguments(ToolArguments):
    """Options shared by the plain and curve-shaped ramp generators."""

    total: Annotated[Integer, Field(ge=3)] = Field(10, description="Number of colours in the ramp (min 3, default 10)")
    hStart: Hue | None = Field(None, description="Starting hue in degrees (random when omitted)")
    hStartCenter: Fraction | None = Field(
        None, description="Where along the ramp the start hue sits, 0-1 or 0-100%"
    )
    hCycles: Annotated[float, Field(ge=1)] = Field(
        1, description="How many times the hues travel around the wheel (default 1)"
    )
    hueList: list[Hue] | None = Field(
        None, description="Explicit hues; overrides hStart/hCycles and sets the ramp length"
    )
    sRange: FractionPair | None = Field(None, description="Saturation [start, end], each 0-1 or 0-100%")
    lRange: FractionPair | None = Field(None, description="Lightness [start, end], each 0-1 or 0-100%")


class GenerateArguments(RampArguments):
    curveMethod: CurveName | None = Field(
        None, description="Curve shaping saturation and lightness (lamé, arc/sine, pow/power, powX, powY, linear)"
    )
    curveAccent: Annotated[float, Field(ge=0, le=5)] | None = Field(
        None, description="Curve accent; only used together with curveMethod"
    )
    format: FormatName = Field("array", description="'array' for [h, s, l] tuples, or a CSS format ('css' is css-hsl)")


class UniqueRandomHuesArguments(ToolArguments):
    startHue: Hue | None = Field(None, description="Hue the wheel starts from (random when omitted)")
    total: Annotated[Integer, Field(ge=1)] | None = Field(None, description="Number of hues (default 9)")
    minHueDiffAngle: Annotated[float, Field(ge=0, le=360)] | None = Field(
        None, description="Minimum angle between hues (default 60, tightened to fit total)"
    )


class ColorHarmonyArguments(ToolArguments):
    method: HarmonyMethod = Field(..., description="Harmony rule")
    baseHue: Hue = Field(..., description="Base hue in degrees")


class ToCSSArguments(ToolArguments):
    color: ColorInput = Field(..., description="[h, s, l] or a list of them")
    mode: ModeName | None = Field(None, description="Colour space: hsl, hsv, lch, oklch (css = hsl)")


class HarveyHueArguments(ToolArguments):
    h: Hue = Field(..., description="Hue in degrees")


class UtilsArguments(ToolArguments):
    fn: UtilityName = Field(..., description="Utility to run")
    args: list[Any] = Field(default_factory=list, description="Positional arguments (untyped)")


PALETTE_TOOLS = [
    # =========================================================================
    # Palette generation
    # =========================================================================
    ToolDescriptor(
        name="generate",
        description=(
            "Generate a colour ramp / palette.\n\n"
            "Returns [hue, saturation, lightness] tuples, or CSS strings when a CSS format "
            "is requested. Supplying curveMethod shapes saturation and lightness along a curve."
        ),
        arguments=GenerateArguments,
        handler=generate,
        examples=(
            {"total": 5, "hStart": 200},
            {"total": 8, "hStart": 30, "sRange": [40, 80], "lRange": [0.2, 0.9], "format": "css-oklch"},
            {"hueList": [120, 160, 200, 240, 280], "curveMethod": "lamé", "curveAccent": 0.3},
        ),
    ),
    # =========================================================================
    # Hue tools
    # =========================================================================
    ToolDescriptor(
        name="uniqueRandomHues",
        description="Generate an array of unique random hues.",
        arguments=UniqueRandomHuesArguments,
        handler=unique_random_hues,
        examples=({"total": 5, "minHueDiffAngle": 40},),
    ),
    ToolDescriptor(
        name="colorHarmony",
        description="Return hues based on harmony theory.",
        arguments=ColorHarmonyArguments,
        handler=color_harmony,
        examples=({"method": "triadic", "baseHue": 30},),
    ),
    # =========================================================================
    # Conversion
    # =========================================================================
    ToolDescriptor(
        name="toCSS",
        description=(
            "Convert a colour, or a list of colours, to CSS colour strings.\n\n"
            "A single [h, s, l] gives a string; a list gives a list in the same order. "
            "mode defaults to oklch."
        ),
        arguments=ToCSSArguments,
        handler=to_css,
        examples=(
            {"color": [200, 0.5, 0.5], "mode": "hsl"},
            {"color": [[0, 0.6, 0.4], [120, 0.6, 0.6]], "mode": "css-lch"},
        ),
    ),
    ToolDescriptor(
        name="harveyHue",
        description="Transform hue for perceptual evenness.",
        arguments=HarveyHueArguments,
        handler=harvey_hue,
        examples=({"h": 90},),
    ),
    # =========================================================================
    # Utilities (free-form positional args)
    # =========================================================================
    ToolDescriptor(
        name="utils",
        description=(
            "Access array/curve utilities.\n\n"
            "args are passed positionally: shuffle(array), lerp(amt, from, to), "
            "scaleSpread(values, targetSize, padding?), curvePoint(method, accent, t), "
            "curveEasings(method, accent)."
        ),
        arguments=UtilsArguments,
        handler=utils,
        examples=(
            {"fn": "lerp", "args": [0.5, 0, 10]},
            {"fn": "curvePoint", "args": ["lamé", 0.5, 0.25]},
        ),
        free_args="args",
    ),
]

REGISTRY = ToolRegistry.from_descriptors(PALETTE_TOOLS)
