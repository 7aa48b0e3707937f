"""
Exceptions raised by shapecodec.

Each error also derives from the builtin that describes it, so callers may
catch either the package type or the builtin.
"""


class ShapeError(Exception):
    """Base class for shapecodec errors."""


class MalformedShapeError(ShapeError, EOFError):
    """Encoded input ended in the middle of a value or a point."""


class ExhaustedDecoderError(ShapeError, IndexError):
    """A point was requested from a decoder with no input left."""


class ShapeOverflowError(ShapeError, OverflowError):
    """A value does not fit the fixed integer width of the format."""
