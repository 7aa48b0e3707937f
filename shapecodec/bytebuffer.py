"""
Growable byte buffer for building encoded shapes.

Encoders append one chunk at a time; the finished buffer is handed back
either as bytes or, for the printable classic form, as an ASCII string.
"""


class ByteBuffer:
    """Variable-length byte buffer for building encoded output."""

    def __init__(self) -> None:
        """Initialize an empty byte buffer."""
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        """Clear the buffer."""
        self._data = bytearray()

    def append_byte(self, value: int) -> None:
        """
        Append a single byte to the buffer.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value is out of byte range
        """
        self._data.append(value)

    def to_bytes(self) -> bytes:
        """
        Convert buffer contents to bytes.

        Returns:
            Bytes representation of the buffer
        """
        return bytes(self._data)

    def to_str(self) -> str:
        """
        Convert buffer contents to a string, one character per byte.

        Returns:
            String representation of the buffer
        """
        return self._data.decode("latin-1")
