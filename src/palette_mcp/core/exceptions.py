# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Custom exception hierarchy for palette-mcp.

Every error raised while validating or routing a tool call derives from
PaletteException, so the server can turn it into a structured error payload.
Errors raised by the colour engine itself are deliberately *not* part of
this hierarchy and propagate unchanged.
"""

from __future__ import annotations

from typing import Any


class PaletteException(Exception):  # noqa: N818
    """Base exception for all palette-mcp errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PaletteException):
    """Exception for tool argument validation errors.

    Raised when:
    - A required parameter is missing
    - A value has the wrong shape
    - A value is outside its declared bounds
    - An enum spelling is not recognised
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class MissingParameter(ValidationException):
    """A required parameter without a default was not supplied."""

    def __init__(self, field: str):
        super().__init__(f"Missing required parameter '{field}'", field=field)


class TypeMismatch(ValidationException):
    """A value does not match the declared shape."""

    def __init__(self, field: str, expected: str, value: Any = None):
        super().__init__(f"Parameter '{field}' must be {expected}", field=field, value=value)
        self.details["expected"] = expected
        self.expected = expected


class ConstraintViolation(ValidationException):
    """A value is outside a declared bound."""

    def __init__(self, field: str, bound: str, value: Any = None):
        super().__init__(f"Parameter '{field}' violates constraint: {bound}", field=field, value=value)
        self.details["bound"] = bound
        self.bound = bound


class UnknownAlias(ValidationException):
    """An enum spelling is missing from its alias table."""

    def __init__(self, kind: str, value: Any, accepted: list[str], field: str | None = None):
        super().__init__(
            f"Unknown {kind} '{value}'. Must be one of: {', '.join(accepted)}",
            field=field or kind,
            value=value,
        )
        self.details["kind"] = kind
        self.details["accepted"] = accepted
        self.kind = kind
        self.accepted = accepted


class ToolNotFound(PaletteException):
    """No tool is registered under the requested name."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", {"tool_name": tool_name})
        self.tool_name = tool_name


class UnknownUtility(PaletteException):
    """The utility dispatch table has no entry for the requested function."""

    def __init__(self, fn: str):
        super().__init__(f'utils: unknown fn "{fn}"', {"fn": fn})
        self.fn = fn


class ConfigException(PaletteException):
    """Exception for configuration errors.

    Raised when:
    - Configuration values are invalid
    - A tool catalog is inconsistent (duplicate names)
    """

    def __init__(self, message: str, setting: str | None = None):
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)
        self.setting = setting
