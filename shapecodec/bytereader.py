"""
Sequential byte reader for decoding.

A reader is the cursor of one decode: a read position and an end position
over an encoded shape. Running coordinate totals live in the decoder, not
here.
"""

from shapecodec.errors import MalformedShapeError


def as_bytes(encoded: "str | bytes | bytearray | memoryview") -> bytes:
    """
    Normalize an encoded shape to bytes.

    Strings are taken one byte per character, so both the ASCII classic
    form and a latin-1 view of the 7-bit form are accepted.

    Raises:
        MalformedShapeError: If a character is above U+00FF
    """
    if isinstance(encoded, str):
        try:
            return encoded.encode("latin-1")
        except UnicodeEncodeError as e:
            raise MalformedShapeError(
                f"Character at offset {e.start} is not a byte value"
            ) from e
    return bytes(encoded)


class ByteReader:
    """Sequential byte reader over a range of encoded data."""

    def __init__(
        self,
        data: "str | bytes | bytearray | memoryview",
        size: "int | None" = None,
    ) -> None:
        """
        Initialize a byte reader.

        Args:
            data: Encoded data to read from
            size: Number of leading bytes to read (None = all of data)

        Raises:
            ValueError: If size is negative or larger than data
        """
        self._data = as_bytes(data)
        if size is None:
            size = len(self._data)
        elif size < 0 or size > len(self._data):
            raise ValueError(
                f"size {size} outside encoded data of {len(self._data)} bytes"
            )
        self.end = size
        self.position = 0

    @property
    def remaining(self) -> int:
        """Number of bytes remaining to read."""
        return self.end - self.position

    def at_end(self) -> bool:
        """Whether the read position has reached the end of the range."""
        return self.position >= self.end

    def read_byte(self) -> int:
        """
        Read and consume a single byte.

        Returns:
            Byte value (0-255)

        Raises:
            MalformedShapeError: If no more bytes are available
        """
        if self.position >= self.end:
            raise MalformedShapeError(
                f"Encoded shape ends inside a value at offset {self.position}"
            )

        value = self._data[self.position]
        self.position += 1
        return value
