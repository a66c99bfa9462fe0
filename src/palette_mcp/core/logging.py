# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Logging for tool calls.

Every dispatched call runs under a short call id, and ``ToolCallLogger``
attaches the tool-call fields (``tool``, ``arguments``, ``success``,
``duration_ms``) to its records as plain record attributes. Both formatters
know these fields: the JSON formatter lifts them to top-level keys, the
text formatter appends them after the message.

Logs go to stderr only. Stdout carries the MCP protocol stream.
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

TOOL_FIELDS = ("tool", "arguments", "success", "duration_ms")

_call_id: ContextVar[str | None] = ContextVar("call_id", default=None)


def get_call_id() -> str | None:
    """Id of the tool call being handled, if any."""
    return _call_id.get()


def generate_call_id() -> str:
    return uuid.uuid4().hex[:12]


@contextmanager
def call_context(call_id: str | None = None) -> Generator[str, None, None]:
    """Scope a call id to one tool call.

    Example:
        with call_context() as cid:
            logger.info("Dispatching")  # carries cid
    """
    cid = call_id or generate_call_id()
    token = _call_id.set(cid)
    try:
        yield cid
    finally:
        _call_id.reset(token)


def _tool_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {name: getattr(record, name) for name in TOOL_FIELDS if getattr(record, name, None) is not None}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, tool-call fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        call_id = get_call_id()
        if call_id:
            entry["call_id"] = call_id
        entry.update(_tool_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``[call id] message tool=... duration_ms=...`` lines for terminals."""

    def __init__(self):
        super().__init__(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers must see the untouched record
        record = logging.makeLogRecord(record.__dict__)
        message = record.getMessage()

        fields = _tool_fields(record)
        fields.pop("arguments", None)
        if fields:
            message += " " + " ".join(f"{key}={value}" for key, value in fields.items())

        call_id = get_call_id()
        if call_id:
            message = f"[{call_id[:8]}] {message}"

        record.msg, record.args = message, None
        return super().format(record)


def configure_logging(
    level: str | int | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Log level; falls back to PALETTE_LOG_LEVEL.
        json_format: Force JSON output. When None, PALETTE_LOG_FORMAT decides,
            and ``auto`` picks JSON unless stderr is a terminal.
        log_file: Extra JSON log file; falls back to PALETTE_LOG_FILE.
    """
    from .config import get_config

    config = get_config()

    level = config.log_level if level is None else level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_format is None:
        fmt = config.log_format.lower()
        json_format = fmt == "json" or (fmt != "text" and not sys.stderr.isatty())

    log_file = config.log_file if log_file is None else log_file

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JSONFormatter() if json_format else TextFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logging.getLogger("mcp").setLevel(logging.WARNING)


class ToolCallLogger:
    """Logs a tool call and its outcome.

    Long lists (ramps, positional args) are shortened so a single call
    cannot flood the log.
    """

    MAX_ITEMS = 16
    MAX_STRING = 200

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("palette_mcp.tools")

    def log_call(self, tool_name: str, arguments: Any, level: int = logging.DEBUG) -> None:
        self.logger.log(
            level,
            f"Tool call: {tool_name}",
            extra={"tool": tool_name, "arguments": self._shorten(arguments)},
        )

    def log_result(
        self,
        tool_name: str,
        success: bool,
        duration_ms: float | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        status = "success" if success else "failure"
        self.logger.log(
            level,
            f"Tool result: {tool_name} -> {status}",
            extra={
                "tool": tool_name,
                "success": success,
                "duration_ms": None if duration_ms is None else round(duration_ms, 1),
            },
        )

    def _shorten(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: self._shorten(value) for key, value in data.items()}
        if isinstance(data, (list, tuple)):
            items = [self._shorten(item) for item in data[: self.MAX_ITEMS]]
            if len(data) > self.MAX_ITEMS:
                items.append(f"... {len(data) - self.MAX_ITEMS} more")
            return items
        if isinstance(data, str) and len(data) > self.MAX_STRING:
            return data[: self.MAX_STRING] + "..."
        return data


tool_logger = ToolCallLogger()
