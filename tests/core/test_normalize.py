"""Tests for palette_mcp.core.normalize."""

from __future__ import annotations

import pytest

from palette_mcp.core.exceptions import ConstraintViolation, TypeMismatch, ValidationException
from palette_mcp.core.normalize import is_number, normalize_fraction


class TestNormalizeFraction:
    """normalize_fraction reads values above 1 as percentages."""

    @pytest.mark.parametrize("value", [0, 0.25, 0.5, 1, 1.0])
    def test_fractions_unchanged(self, value):
        assert normalize_fraction(value) == value

    @pytest.mark.parametrize("value,expected", [(50, 0.5), (100, 1.0), (1.5, 0.015), (25, 0.25)])
    def test_percentages_divided(self, value, expected):
        assert normalize_fraction(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", [0, 0.3, 1, 2, 37.5, 99, 100])
    def test_result_in_unit_interval(self, value):
        assert 0 <= normalize_fraction(value) <= 1

    @pytest.mark.parametrize("value", [-1, 101, -0.001, 100.5])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ConstraintViolation) as exc_info:
            normalize_fraction(value, "sRange[0]")
        assert exc_info.value.field == "sRange[0]"
        assert "100" in exc_info.value.bound

    def test_constraint_violation_is_validation_error(self):
        with pytest.raises(ValidationException):
            normalize_fraction(101)

    @pytest.mark.parametrize("value", ["50", None, True, [0.5]])
    def test_non_numbers_rejected(self, value):
        with pytest.raises(TypeMismatch):
            normalize_fraction(value)


class TestIsNumber:
    def test_bool_is_not_a_number(self):
        assert is_number(True) is False

    def test_int_and_float(self):
        assert is_number(3) and is_number(3.5)
