"""
shapecodec

Compact encoding of coordinate shapes and sample profiles:
- Classic 5-bit polyline form, printable ASCII
- 7-bit varint form, raw bytes
- Single channel samples (e.g. elevation profiles)
"""

__version__ = "1.0.0"

from shapecodec.compress import ShapeEncoder, encode, encode7, encode_samples
from shapecodec.decompress import (
    Shape5Decoder,
    Shape7Decoder,
    decode,
    decode7,
    decode_samples,
)
from shapecodec.errors import (
    ExhaustedDecoderError,
    MalformedShapeError,
    ShapeError,
    ShapeOverflowError,
)
from shapecodec.point import (
    DECODE_PRECISION,
    DIGITS_PRECISION,
    ENCODE_PRECISION,
    Point,
    decode_precision,
    encode_precision,
)

__all__ = [
    "encode",
    "decode",
    "encode7",
    "decode7",
    "encode_samples",
    "decode_samples",
    "ShapeEncoder",
    "Shape5Decoder",
    "Shape7Decoder",
    "Point",
    "ENCODE_PRECISION",
    "DECODE_PRECISION",
    "DIGITS_PRECISION",
    "encode_precision",
    "decode_precision",
    "ShapeError",
    "MalformedShapeError",
    "ExhaustedDecoderError",
    "ShapeOverflowError",
    "__version__",
]
