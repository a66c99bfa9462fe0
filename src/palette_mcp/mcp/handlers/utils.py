# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Generic utility dispatch.

``args`` are untyped positional values spread into the engine call
unchanged; wrong positional values surface as engine errors, not
validation errors.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from palette_mcp.core.exceptions import UnknownUtility
from palette_mcp.engine.base import ColorEngine


def _shuffle(engine: ColorEngine, args: list[Any]) -> Any:
    return engine.shuffle(*args)


def _lerp(engine: ColorEngine, args: list[Any]) -> Any:
    return engine.lerp(*args)


def _scale_spread(engine: ColorEngine, args: list[Any]) -> Any:
    return engine.scale_spread(*args)


def _curve_point(engine: ColorEngine, args: list[Any]) -> Any:
    # First two args build the curve, the rest sample it
    return engine.point_on_curve(*args[:2])(*args[2:])


def _curve_easings(engine: ColorEngine, args: list[Any]) -> Any:
    return engine.make_curve_easings(*args)


UTILITIES: Mapping[str, Callable[[ColorEngine, list[Any]], Any]] = MappingProxyType(
    {
        "shuffle": _shuffle,
        "lerp": _lerp,
        "scaleSpread": _scale_spread,
        "curvePoint": _curve_point,
        "curveEasings": _curve_easings,
    }
)


def run_utility(engine: ColorEngine, fn: str, args: list[Any]) -> Any:
    """Invoke utility ``fn`` with ``args`` spread positionally.

    Raises:
        UnknownUtility: ``fn`` has no entry in the dispatch table.
    """
    utility = UTILITIES.get(fn)
    if utility is None:
        raise UnknownUtility(fn)
    return utility(engine, args)


def utils(engine: ColorEngine, args: dict[str, Any]) -> Any:
    return run_utility(engine, args["fn"], args.get("args", []))
