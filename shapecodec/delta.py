"""
Running (lat, lon) state shared by shape encoders and decoders.

Only differences from the previous point are ever written, so both sides
keep the last whole-number coordinates they have seen.
"""


class DeltaTracker:
    """Last seen scaled coordinates of a shape."""

    def __init__(self) -> None:
        self.lat = 0
        self.lon = 0

    def reset(self) -> None:
        """Forget the previous point."""
        self.lat = 0
        self.lon = 0

    def advance(self, lat: int, lon: int) -> "tuple[int, int]":
        """
        Move to a new point and return the offsets from the previous one.

        Args:
            lat: Scaled latitude of the new point
            lon: Scaled longitude of the new point

        Returns:
            (lat delta, lon delta)
        """
        delta = (lat - self.lat, lon - self.lon)
        self.lat = lat
        self.lon = lon
        return delta
