# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Numeric normalization for loosely specified tool input."""

from __future__ import annotations

from .exceptions import ConstraintViolation, TypeMismatch

FRACTION_MIN = 0
FRACTION_MAX = 100


def is_number(value: object) -> bool:
    """True for ints and floats, False for bools and everything else."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_fraction(value: float, field: str = "value") -> float:
    """Turn a fraction given as 0-1 or as a 0-100 percentage into 0-1.

    Values above 1 are read as percentages. Anything outside [0, 100]
    raises ConstraintViolation.
    """
    if not is_number(value):
        raise TypeMismatch(field, "a number", value)
    if value < FRACTION_MIN or value > FRACTION_MAX:
        raise ConstraintViolation(field, f"must be between {FRACTION_MIN} and {FRACTION_MAX}", value)
    if value > 1:
        return value / 100
    return value
