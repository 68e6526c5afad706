"""Tests for the Fraction and Precision tolerance wrappers."""

from __future__ import annotations

import dataclasses

import pytest

from fpcompare.errors import ToleranceError
from fpcompare.sentinels import INFINITY, NAN
from fpcompare.tolerance import Fraction, Precision


class TestNominalTypes:
    """Fraction and Precision are distinct immutable values."""

    def test_equal_payloads_of_same_type_are_equal(self) -> None:
        assert Fraction(0.1) == Fraction(0.1)
        assert Precision(0.1) == Precision(0.1)

    def test_types_are_not_interchangeable(self) -> None:
        assert Fraction(0.1) != Precision(0.1)
        assert Fraction(0.1) != 0.1

    def test_values_are_immutable(self) -> None:
        tolerance = Fraction(0.1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tolerance.value = 0.2  # type: ignore[misc]

    def test_values_are_hashable(self) -> None:
        assert len({Fraction(0.1), Fraction(0.1), Precision(0.1)}) == 2

    def test_plain_construction_is_permissive(self) -> None:
        assert Fraction(-1.0).value == -1.0
        assert Fraction(2.0).value == 2.0
        assert Precision(-0.5).value == -0.5


class TestFractionChecked:
    """Tests for Fraction.checked."""

    @pytest.mark.parametrize("value", [0.0, 1e-6, 0.5, 1.0])
    def test_accepts_unit_interval(self, value: float) -> None:
        assert Fraction.checked(value) == Fraction(value)

    def test_coerces_to_float(self) -> None:
        result = Fraction.checked(1)
        assert isinstance(result.value, float)

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_rejects_out_of_range(self, value: float) -> None:
        with pytest.raises(ToleranceError, match=r"must be in \[0.0, 1.0\]"):
            Fraction.checked(value)

    @pytest.mark.parametrize("value", [NAN, INFINITY, -INFINITY])
    def test_rejects_non_finite(self, value: float) -> None:
        with pytest.raises(ToleranceError, match="must be finite"):
            Fraction.checked(value)


class TestPrecisionChecked:
    """Tests for Precision.checked."""

    @pytest.mark.parametrize("value", [0.0, 0.1, 1e9])
    def test_accepts_non_negative(self, value: float) -> None:
        assert Precision.checked(value) == Precision(value)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ToleranceError, match="must be >= 0.0"):
            Precision.checked(-0.1)

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(ValueError, match="must be finite"):
            Precision.checked(INFINITY)
