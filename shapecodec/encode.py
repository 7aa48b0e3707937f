"""
Shape encoding functions (scaling, zigzag, 5-bit and 7-bit samples).

Every value is written as a self-terminating run of chunks:
- Classic 5-bit form: 5 payload bits per byte, continuation flag 0x20,
  every byte biased by 63 so the output stays printable ASCII
- 7-bit form: 7 payload bits per byte, continuation flag 0x80, no bias

Signed values are zigzag mapped first so small negative deltas stay short.
"""

import math

from shapecodec.errors import ShapeOverflowError

# Import for type hints only
if False:  # noqa: SIM108
    from shapecodec.bytebuffer import ByteBuffer

# Constants
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

# Absolute coordinates are 32-bit, so a delta between two of them needs 33
MAX_DELTA = (1 << 32) - 1
MAX_ZIGZAG_BITS = 33

ASCII_BIAS = 63


def scale(value: float, precision: int) -> int:
    """
    Scale a real value to a whole number, rounding half away from zero.

    Args:
        value: Coordinate or sample value
        precision: Multiplier, a power of ten (e.g. 1000000)

    Returns:
        Scaled and rounded integer

    Raises:
        ValueError: If value is not finite
        ShapeOverflowError: If the result does not fit in 32 bits
    """
    scaled = float(value) * precision
    if not math.isfinite(scaled):
        raise ValueError(f"Cannot encode non-finite value {value!r}")

    # Python's round() is half-to-even
    number = int(math.floor(abs(scaled) + 0.5))
    if scaled < 0:
        number = -number

    if number < INT32_MIN or number > INT32_MAX:
        raise ShapeOverflowError(
            f"{value!r} at precision {precision} does not fit in 32 bits"
        )
    return number


def zigzag(number: int) -> int:
    """
    Map a signed integer onto an unsigned one.

    0 → 0, -1 → 1, 1 → 2, -2 → 3, ...

    Raises:
        ShapeOverflowError: If the magnitude exceeds MAX_DELTA
    """
    if number < -MAX_DELTA or number > MAX_DELTA:
        raise ShapeOverflowError(f"Delta {number} exceeds {MAX_ZIGZAG_BITS} bits")
    return ~(number << 1) if number < 0 else number << 1


def encode5_sample(output: "ByteBuffer", number: int) -> None:
    """
    Encode one whole number in the classic 5-bit form.

    Args:
        output: ByteBuffer to append encoded bytes to
        number: Signed value, already scaled (usually a delta)

    Raises:
        ShapeOverflowError: If number is too wide for the format
    """
    value = zigzag(number)

    # Low chunks first, each flagged as having a successor
    while value >= 0x20:
        output.append_byte((0x20 | (value & 0x1F)) + ASCII_BIAS)
        value >>= 5

    output.append_byte(value + ASCII_BIAS)


def encode7_sample(output: "ByteBuffer", number: int) -> None:
    """
    Encode one whole number in the 7-bit form.

    Args:
        output: ByteBuffer to append encoded bytes to
        number: Signed value, already scaled (usually a delta)

    Raises:
        ShapeOverflowError: If number is too wide for the format
    """
    value = zigzag(number)

    while value > 0x7F:
        output.append_byte(0x80 | (value & 0x7F))
        value >>= 7

    output.append_byte(value)
