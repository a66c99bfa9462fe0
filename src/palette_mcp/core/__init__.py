"""palette_mcp core - validation, normalization and response primitives."""

from .aliases import ALIAS_TABLES, resolve_alias
from .exceptions import (
    ConfigException,
    ConstraintViolation,
    MissingParameter,
    PaletteException,
    ToolNotFound,
    TypeMismatch,
    UnknownAlias,
    UnknownUtility,
    ValidationException,
)
from .normalize import normalize_fraction
from .response import ResponseEnvelope, as_result

__all__ = [
    "ALIAS_TABLES",
    "ConfigException",
    "ConstraintViolation",
    "MissingParameter",
    "PaletteException",
    "ResponseEnvelope",
    "ToolNotFound",
    "TypeMismatch",
    "UnknownAlias",
    "UnknownUtility",
    "ValidationException",
    "as_result",
    "normalize_fraction",
    "resolve_alias",
]
