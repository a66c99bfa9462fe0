# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Tool argument models and the generic argument validator.

Each tool declares its arguments as a pydantic model deriving from
``ToolArguments``. The reusable field types below carry the constraints
(bounds, list shapes) and the canonicalising steps (percentages to
fractions, alias spellings to canonical names) as ``Annotated`` metadata,
so a validated model already holds canonical values.

``validate_arguments`` runs the model over raw client input and turns the
first pydantic error into the palette error taxonomy:

    missing                              -> MissingParameter
    extra_forbidden, bounds, literal     -> ConstraintViolation
    unknown_alias                        -> UnknownAlias
    anything else (wrong type or shape)  -> TypeMismatch

Usage:
    from palette_mcp.core.schema import Hue, ToolArguments, validate_arguments

    class HarveyArguments(ToolArguments):
        h: Hue

    validate_arguments(HarveyArguments, {"h": 90})  # {"h": 90.0}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    WithJsonSchema,
)
from pydantic_core import ErrorDetails, PydanticCustomError

from .aliases import accepted_spellings, resolve_alias
from .exceptions import (
    ConstraintViolation,
    MissingParameter,
    TypeMismatch,
    UnknownAlias,
    ValidationException,
)
from .normalize import FRACTION_MAX, FRACTION_MIN, normalize_fraction


class ToolArguments(BaseModel):
    """Base model for tool arguments.

    Strict: no type coercion (``"5"`` is not a number), no unknown fields,
    no NaN or infinity.
    """

    model_config = ConfigDict(extra="forbid", strict=True, allow_inf_nan=False)


# =============================================================================
# Field types
# =============================================================================


def _integral(value: Any) -> Any:
    # JSON clients may send 5.0 for an integer
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _to_fraction(value: float) -> float:
    return normalize_fraction(value)


def _alias(kind: str) -> Any:
    """String type resolved through the ``kind`` alias table."""

    def resolve(value: str) -> str:
        try:
            return resolve_alias(kind, value)
        except UnknownAlias as e:
            raise PydanticCustomError(
                "unknown_alias",
                "Unknown {kind} spelling",
                {"kind": kind, "accepted": e.accepted},
            ) from None

    return Annotated[
        str,
        AfterValidator(resolve),
        WithJsonSchema({"type": "string", "enum": accepted_spellings(kind)}),
    ]


Integer = Annotated[int, BeforeValidator(_integral)]
Hue = Annotated[float, Field(ge=0, le=360)]

# 0-1 fraction, or a 0-100 percentage normalised to one
Fraction = Annotated[float, Field(ge=FRACTION_MIN, le=FRACTION_MAX), AfterValidator(_to_fraction)]
FractionPair = Annotated[list[Fraction], Field(min_length=2, max_length=2)]

Color = Annotated[list[float], Field(min_length=3, max_length=3)]
ColorInput = Color | Annotated[list[Color], Field(min_length=1)]

FormatName = _alias("format")
ModeName = _alias("mode")
CurveName = _alias("curve")


# =============================================================================
# Validation
# =============================================================================

_BOUNDS = {
    "greater_than_equal": "must be >= {ge}",
    "less_than_equal": "must be <= {le}",
    "greater_than": "must be > {gt}",
    "less_than": "must be < {lt}",
}

_EXPECTED = {
    "int_type": "an integer",
    "float_type": "a number",
    "string_type": "a string",
    "list_type": "a list",
    "model_type": "an object",
    "model_attributes_type": "an object",
    "dict_type": "an object",
}


def _field_name(loc: tuple[int | str, ...]) -> str:
    """``("sRange", 1)`` -> ``"sRange[1]"``. Union member tags are dropped."""
    if not loc:
        return "arguments"
    name = str(loc[0])
    for part in loc[1:]:
        if isinstance(part, int):
            name += f"[{part}]"
    return name


def _to_palette_error(model: type[ToolArguments], error: ErrorDetails) -> ValidationException:
    field = _field_name(error["loc"])
    kind = error["type"]
    value = error.get("input")
    ctx = error.get("ctx", {})

    if kind == "missing":
        return MissingParameter(field)
    if kind == "extra_forbidden":
        return ConstraintViolation(field, f"unknown parameter; accepted: {', '.join(model.model_fields)}")
    if kind == "unknown_alias":
        return UnknownAlias(ctx["kind"], value, ctx["accepted"], field=field)
    if kind in _BOUNDS:
        return ConstraintViolation(field, _BOUNDS[kind].format(**ctx), value)
    if kind == "literal_error":
        return ConstraintViolation(field, f"must be one of: {ctx['expected']}", value)
    if kind == "finite_number":
        return ConstraintViolation(field, "must be a finite number", value)

    if kind == "too_short":
        expected = f"a list of at least {ctx['min_length']} items"
    elif kind == "too_long":
        expected = f"a list of at most {ctx['max_length']} items"
    else:
        expected = _EXPECTED.get(kind, error["msg"])
    return TypeMismatch(field, expected, value)


def validate_arguments(model: type[ToolArguments], raw: Any) -> dict[str, Any]:
    """Validate raw tool arguments against ``model``.

    Args:
        model: The tool's argument model.
        raw: Arguments as received from the client. ``None`` means no
            arguments, and a ``None`` value means the field is absent.

    Returns:
        Canonical arguments in declaration order. Absent optional fields
        without a default are omitted.

    Raises:
        TypeMismatch, ConstraintViolation, MissingParameter, UnknownAlias
    """
    if raw is None:
        raw = {}
    if isinstance(raw, Mapping):
        raw = {
            name: value for name, value in raw.items() if value is not None or name not in model.model_fields
        }

    try:
        arguments = model.model_validate(raw)
    except ValidationError as e:
        # Unknown fields are reported before anything else
        errors = sorted(e.errors(), key=lambda error: error["type"] != "extra_forbidden")
        raise _to_palette_error(model, errors[0]) from None

    return {name: value for name, value in arguments.model_dump().items() if value is not None}


def parameters_schema(model: type[ToolArguments]) -> dict[str, Any]:
    """JSON Schema object for the MCP tool listing."""
    schema = model.model_json_schema()
    schema.pop("title", None)
    return schema
