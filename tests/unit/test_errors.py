"""Tests for fpcompare exception classes."""

import pytest

from fpcompare.errors import FloatCompareError, ToleranceError


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (
            ToleranceError.not_finite,
            ("Fraction", float("inf")),
            "Fraction tolerance must be finite (got inf)",
        ),
        (
            ToleranceError.out_of_range,
            ("Fraction", 2.0, 0.0, 1.0),
            "Fraction tolerance 2.0 must be in [0.0, 1.0]",
        ),
        (
            ToleranceError.out_of_range,
            ("Precision", -1.0, 0.0),
            "Precision tolerance -1.0 must be >= 0.0",
        ),
    ],
)
def test_error_factories(factory, args, expected):
    assert str(factory(*args)) == expected


def test_default_message():
    assert str(ToleranceError()) == "Tolerance value is outside its conventional range"


def test_keyword_context_is_stored():
    err = ToleranceError.out_of_range("Fraction", 2.0, 0.0, 1.0)
    assert err.kind == "Fraction"
    assert err.value == 2.0

    err = FloatCompareError("boom", detail=3)
    assert err.detail == 3


def test_hierarchy():
    assert issubclass(ToleranceError, FloatCompareError)
    assert issubclass(ToleranceError, ValueError)
