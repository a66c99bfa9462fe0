# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Route a tool call: look up, validate, normalize, invoke, wrap."""

from __future__ import annotations

import time
from typing import Any

from palette_mcp.core.logging import call_context, tool_logger
from palette_mcp.core.response import ResponseEnvelope, as_result
from palette_mcp.core.schema import validate_arguments
from palette_mcp.engine import RampenSauEngine
from palette_mcp.engine.base import ColorEngine

from .registry import ToolRegistry
from .tools import REGISTRY

_default_engine: ColorEngine | None = None


def get_engine() -> ColorEngine:
    """Process-wide default engine, created on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = RampenSauEngine()
    return _default_engine


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def dispatch(
    name: str,
    raw_args: Any,
    *,
    registry: ToolRegistry = REGISTRY,
    engine: ColorEngine | None = None,
) -> ResponseEnvelope:
    """Run tool ``name`` with ``raw_args`` and wrap its result.

    Raises:
        ToolNotFound: ``name`` is not registered. No handler runs.
        ValidationException: Arguments failed validation. No handler runs.
        UnknownUtility: ``utils`` was asked for a function it has no entry for.

    Engine errors propagate unchanged.
    """
    with call_context():
        descriptor = registry.get(name)
        tool_logger.log_call(name, raw_args)
        start = time.perf_counter()
        try:
            args = validate_arguments(descriptor.arguments, raw_args)
            result = descriptor.handler(engine or get_engine(), args)
        except Exception:
            tool_logger.log_result(name, False, _elapsed_ms(start))
            raise
        tool_logger.log_result(name, True, _elapsed_ms(start))
        return as_result(result)
