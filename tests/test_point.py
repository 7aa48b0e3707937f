"""Tests for Point and precision settings."""

import pytest

from shapecodec.point import (
    DECODE_PRECISION,
    DIGITS_PRECISION,
    ENCODE_PRECISION,
    Point,
    check_precision,
    decode_precision,
    encode_precision,
)


class TestPoint:
    """Test the Point value type."""

    def test_fields(self) -> None:
        """Test x is longitude and y is latitude."""
        p = Point(-122.4, 37.7)
        assert p.x == -122.4
        assert p.y == 37.7
        assert p[0] == p.x

    def test_value_equality(self) -> None:
        """Test points compare by value."""
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) == (1.0, 2.0)


class TestPrecision:
    """Test precision constants and helpers."""

    def test_defaults(self) -> None:
        """Test the defaults are six digits and reciprocal."""
        assert DIGITS_PRECISION == 6
        assert ENCODE_PRECISION == 1000000
        assert DECODE_PRECISION == 1e-6

    def test_encode_precision(self) -> None:
        """Test encode multipliers for common digit counts."""
        assert encode_precision(5) == 100000
        assert encode_precision(7) == 10000000
        assert encode_precision(0) == 1

    def test_decode_precision(self) -> None:
        """Test decode multipliers are reciprocals."""
        assert decode_precision(5) == pytest.approx(1e-5)
        assert decode_precision(7) == pytest.approx(1e-7)

    def test_bad_digits(self) -> None:
        """Test negative or non-integer digits are rejected."""
        for digits in (-1, 6.0, True):
            with pytest.raises(ValueError):
                encode_precision(digits)
            with pytest.raises(ValueError):
                decode_precision(digits)

    def test_check_precision(self) -> None:
        """Test non-positive and non-finite precisions are rejected."""
        check_precision(1e-6)
        check_precision(1000000)
        for precision in (0, -1e-6, float("nan"), float("inf")):
            with pytest.raises(ValueError):
                check_precision(precision)
