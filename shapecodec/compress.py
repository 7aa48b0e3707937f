"""
Shape and sample encoding.

Implements the encode half of both wire forms:
- encode: classic 5-bit form, printable ASCII output
- encode7: 7-bit form, raw byte output
- encode_samples: a single channel of values (e.g. elevations) in the
  7-bit form

Points are written latitude first, then longitude, each as a delta from
the previous point. No point count or length prefix is stored.
"""

import logging

from shapecodec.bytebuffer import ByteBuffer
from shapecodec.delta import DeltaTracker
from shapecodec.encode import encode5_sample, encode7_sample, scale
from shapecodec.point import ENCODE_PRECISION, check_precision

logger = logging.getLogger(__name__)


class ShapeEncoder:
    """Incremental shape encoder state and operations."""

    def __init__(
        self,
        precision: int = ENCODE_PRECISION,
        sample_encoder=encode5_sample,
    ) -> None:
        """
        Initialize encoder.

        Args:
            precision: Coordinate multiplier (e.g. 1000000 for 6 digits)
            sample_encoder: Per-value step, encode5_sample or encode7_sample

        Raises:
            ValueError: If precision is not positive
        """
        check_precision(precision)
        self.precision = precision
        self.sample_encoder = sample_encoder
        self.tracker = DeltaTracker()
        self.output = ByteBuffer()
        self.count = 0

    def reset(self) -> None:
        """Reset encoder to an empty shape."""
        self.tracker.reset()
        self.output.clear()
        self.count = 0

    def encode_point(self, point) -> None:
        """
        Append one point to the shape.

        Args:
            point: Pair of (longitude, latitude)

        Raises:
            ValueError: If a coordinate is not finite
            ShapeOverflowError: If a scaled coordinate exceeds 32 bits
        """
        lon = scale(point[0], self.precision)
        lat = scale(point[1], self.precision)

        dlat, dlon = self.tracker.advance(lat, lon)
        self.sample_encoder(self.output, dlat)
        self.sample_encoder(self.output, dlon)
        self.count += 1

    def to_bytes(self) -> bytes:
        """Encoded shape so far."""
        return self.output.to_bytes()


def encode(points, precision: int = ENCODE_PRECISION) -> str:
    """
    Encode points in the classic 5-bit form.

    Args:
        points: Iterable of (longitude, latitude) pairs
        precision: Coordinate multiplier (default 1e6, 6 digits)

    Returns:
        Encoded shape, printable ASCII

    Raises:
        ValueError: If precision is not positive or a coordinate is not finite
        ShapeOverflowError: If a scaled coordinate exceeds 32 bits
    """
    encoder = ShapeEncoder(precision, encode5_sample)
    for point in points:
        encoder.encode_point(point)

    logger.debug("Encoded %d points into %d bytes", encoder.count, len(encoder.output))
    return encoder.output.to_str()


def encode7(points, precision: int = ENCODE_PRECISION) -> bytes:
    """
    Encode points in the 7-bit form.

    Args:
        points: Iterable of (longitude, latitude) pairs
        precision: Coordinate multiplier (default 1e6, 6 digits)

    Returns:
        Encoded shape bytes

    Raises:
        ValueError: If precision is not positive or a coordinate is not finite
        ShapeOverflowError: If a scaled coordinate exceeds 32 bits
    """
    encoder = ShapeEncoder(precision, encode7_sample)
    for point in points:
        encoder.encode_point(point)

    logger.debug("Encoded %d points into %d bytes", encoder.count, len(encoder.output))
    return encoder.to_bytes()


def encode_samples(values, precision: int) -> bytes:
    """
    Encode a list of samples in the 7-bit form.

    Args:
        values: Iterable of real values
        precision: A power of ten giving the number of digits kept

    Returns:
        Encoded sample bytes

    Raises:
        ValueError: If precision is not positive or a value is not finite
        ShapeOverflowError: If a scaled value exceeds 32 bits
    """
    check_precision(precision)

    output = ByteBuffer()
    last = 0
    for value in values:
        scaled = scale(value, precision)
        encode7_sample(output, scaled - last)
        last = scaled

    return output.to_bytes()
