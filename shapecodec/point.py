"""
Point type and precision settings.

Precision is asymmetric: encoding multiplies coordinates by a power of ten
(e.g. 1e6) while decoding multiplies by its reciprocal (e.g. 1e-6). The
encoded stream carries no precision marker, so a mismatch between the two
silently yields wrong coordinates.
"""

from collections import namedtuple

# Six digits is the stored default; seven is opt-in per call
DIGITS_PRECISION = 6
ENCODE_PRECISION = 10**DIGITS_PRECISION
DECODE_PRECISION = 1e-6

# Longitude first, matching how shapes are held in memory. The wire order
# is latitude first.
Point = namedtuple("Point", ["x", "y"])


def encode_precision(digits: int) -> int:
    """
    Encode multiplier for a number of decimal digits.

    Args:
        digits: Decimal digits to keep (e.g. 5, 6, 7)

    Returns:
        10 ** digits

    Raises:
        ValueError: If digits is negative or not an integer
    """
    _check_digits(digits)
    return 10**digits


def decode_precision(digits: int) -> float:
    """
    Decode multiplier for a number of decimal digits.

    Args:
        digits: Decimal digits stored in the encoded shape

    Returns:
        10 ** -digits

    Raises:
        ValueError: If digits is negative or not an integer
    """
    _check_digits(digits)
    return 10.0**-digits


def _check_digits(digits: int) -> None:
    if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
        raise ValueError(f"digits must be a non-negative integer, got {digits!r}")


def check_precision(precision: float) -> None:
    """
    Validate an encode or decode precision.

    Raises:
        ValueError: If precision is not a positive finite number
    """
    if not precision > 0 or precision == float("inf"):
        raise ValueError(f"precision must be positive and finite, got {precision!r}")
