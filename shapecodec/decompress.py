"""
Shape and sample decoding.

Implements the decode half of both wire forms:
- Streaming decoders that pop one point at a time
- decode / decode7: drain a decoder into any appendable container
- decode_samples: a single channel of values in the 7-bit form

Decode precision is the reciprocal of the encode precision (1e-6 for
shapes encoded at 1e6). The encoded data does not record it.
"""

import logging

from shapecodec.bytereader import ByteReader
from shapecodec.decode import decode5_sample, decode7_sample
from shapecodec.delta import DeltaTracker
from shapecodec.errors import ExhaustedDecoderError, MalformedShapeError
from shapecodec.point import DECODE_PRECISION, Point, check_precision

logger = logging.getLogger(__name__)


class ShapeDecoder:
    """Streaming shape decoder state and operations."""

    # Per-value step, set by subclasses
    sample_decoder = None

    def __init__(
        self,
        encoded: "str | bytes | bytearray | memoryview",
        precision: float = DECODE_PRECISION,
        point_type=Point,
        size: "int | None" = None,
    ) -> None:
        """
        Initialize decoder.

        Args:
            encoded: Encoded shape
            precision: Reciprocal of the encode precision (e.g. 1e-6)
            point_type: Callable building a point from (lon, lat)
            size: Number of leading bytes to decode (None = all)

        Raises:
            ValueError: If precision is not positive or size is out of range
        """
        check_precision(precision)
        self.reader = ByteReader(encoded, size)
        self.precision = precision
        self.point_type = point_type
        self.tracker = DeltaTracker()

    def is_empty(self) -> bool:
        """Whether all input has been consumed."""
        return self.reader.at_end()

    def pop(self):
        """
        Decode the next point.

        Returns:
            point_type(lon, lat) scaled by precision

        Raises:
            ExhaustedDecoderError: If the decoder is empty
            MalformedShapeError: If the input ends inside a point
            ShapeOverflowError: If a value exceeds the format's width
        """
        if self.is_empty():
            raise ExhaustedDecoderError("pop from an exhausted shape decoder")

        # Latitude is written first
        self.tracker.lat = self.sample_decoder(self.reader, self.tracker.lat)
        self.tracker.lon = self.sample_decoder(self.reader, self.tracker.lon)
        return self.point_type(
            self.tracker.lon * self.precision, self.tracker.lat * self.precision
        )

    def __iter__(self):
        while not self.is_empty():
            yield self.pop()


class Shape5Decoder(ShapeDecoder):
    """Decoder for the classic 5-bit form."""

    sample_decoder = staticmethod(decode5_sample)


class Shape7Decoder(ShapeDecoder):
    """Decoder for the 7-bit form."""

    sample_decoder = staticmethod(decode7_sample)


def decode(
    encoded: "str | bytes | bytearray | memoryview",
    precision: float = DECODE_PRECISION,
    container_type=list,
    point_type=Point,
    decoder_type=Shape5Decoder,
    size: "int | None" = None,
):
    """
    Decode an encoded shape into a container of points.

    Args:
        encoded: Encoded shape
        precision: Reciprocal of the encode precision (default 1e-6)
        container_type: Type of the result; needs a no-argument constructor
            and append()
        point_type: Callable building a point from (lon, lat)
        decoder_type: Shape5Decoder (classic form) or Shape7Decoder
        size: Number of leading bytes to decode (None = all)

    Returns:
        container_type instance holding the decoded points

    Raises:
        MalformedShapeError: If the input ends inside a point
        ShapeOverflowError: If a value exceeds the format's width
    """
    shape = decoder_type(encoded, precision, point_type, size)
    points = container_type()
    try:
        while not shape.is_empty():
            points.append(shape.pop())
    except MalformedShapeError:
        logger.debug(
            "Malformed shape after %d bytes of %d",
            shape.reader.position,
            shape.reader.end,
        )
        raise

    return points


def decode7(
    encoded: "str | bytes | bytearray | memoryview",
    precision: float = DECODE_PRECISION,
    container_type=list,
    point_type=Point,
    size: "int | None" = None,
):
    """
    Decode a 7-bit form shape into a container of points.

    Same as decode() with decoder_type=Shape7Decoder.
    """
    return decode(encoded, precision, container_type, point_type, Shape7Decoder, size)


def decode_samples(
    encoded: "str | bytes | bytearray | memoryview", precision: float
) -> "list[float]":
    """
    Decode 7-bit form samples.

    Args:
        encoded: Encoded samples
        precision: A power of ten giving the digits stored (0.01, 0.001, ...)

    Returns:
        Decoded values in order

    Raises:
        MalformedShapeError: If the input ends inside a value
        ShapeOverflowError: If a value exceeds the format's width
    """
    check_precision(precision)

    reader = ByteReader(encoded)
    values = []
    last = 0
    while not reader.at_end():
        last = decode7_sample(reader, last)
        values.append(last * precision)

    return values
