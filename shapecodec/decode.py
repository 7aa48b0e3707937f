"""
Shape decoding functions (inverse of the 5-bit and 7-bit sample encodings).

Each function reads exactly one value and adds it to the previous one,
so callers carry the running total between calls.
"""

from shapecodec.encode import ASCII_BIAS, INT32_MAX, INT32_MIN, MAX_ZIGZAG_BITS
from shapecodec.errors import ShapeOverflowError

# Import for type hints only
if False:  # noqa: SIM108
    from shapecodec.bytereader import ByteReader


def unzigzag(value: int) -> int:
    """Invert the zigzag mapping: odd values are negative."""
    return ~(value >> 1) if value & 1 else value >> 1


def decode5_sample(reader: "ByteReader", previous: int) -> int:
    """
    Decode one classic 5-bit value and apply it to the previous value.

    Args:
        reader: ByteReader positioned at the first byte of the value
        previous: Value decoded by the last call (0 for the first)

    Returns:
        previous + decoded delta

    Raises:
        MalformedShapeError: If the input ends before the final chunk
        ShapeOverflowError: If the value or the result exceeds its width
    """
    result = 0
    shift = 0
    while True:
        if shift >= MAX_ZIGZAG_BITS:
            raise ShapeOverflowError(
                f"Value at offset {reader.position} is wider than "
                f"{MAX_ZIGZAG_BITS} bits"
            )
        chunk = reader.read_byte() - ASCII_BIAS
        result |= (chunk & 0x1F) << shift
        shift += 5
        if chunk < 0x20:
            break

    return _apply(previous, result)


def decode7_sample(reader: "ByteReader", previous: int) -> int:
    """
    Decode one 7-bit value and apply it to the previous value.

    Args:
        reader: ByteReader positioned at the first byte of the value
        previous: Value decoded by the last call (0 for the first)

    Returns:
        previous + decoded delta

    Raises:
        MalformedShapeError: If the input ends before the final chunk
        ShapeOverflowError: If the value or the result exceeds its width
    """
    result = 0
    shift = 0
    while True:
        if shift >= MAX_ZIGZAG_BITS:
            raise ShapeOverflowError(
                f"Value at offset {reader.position} is wider than "
                f"{MAX_ZIGZAG_BITS} bits"
            )
        byte = reader.read_byte()
        result |= (byte & 0x7F) << shift
        shift += 7
        if not byte & 0x80:
            break

    return _apply(previous, result)


def _apply(previous: int, result: int) -> int:
    if result >> MAX_ZIGZAG_BITS:
        raise ShapeOverflowError(f"Value {result} is wider than {MAX_ZIGZAG_BITS} bits")

    value = previous + unzigzag(result)
    if value < INT32_MIN or value > INT32_MAX:
        raise ShapeOverflowError(f"Decoded value {value} does not fit in 32 bits")
    return value
