"""Point domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A geographic coordinate in degrees.

    Providers deliver coordinates either as floats or as fixed-point integers
    scaled by 1e6 or 1e5; the factories and accessors convert between them.
    """

    lat: float
    lon: float

    @classmethod
    def from_double(cls, lat: float, lon: float) -> "Point":
        return cls(lat, lon)

    @classmethod
    def from_1e6(cls, lat: int, lon: int) -> "Point":
        return cls(lat / 1e6, lon / 1e6)

    @classmethod
    def from_1e5(cls, lat: int, lon: int) -> "Point":
        return cls(lat / 1e5, lon / 1e5)

    @property
    def lat_as_1e6(self) -> int:
        return round(self.lat * 1e6)

    @property
    def lon_as_1e6(self) -> int:
        return round(self.lon * 1e6)

    @property
    def lat_as_1e5(self) -> int:
        return round(self.lat * 1e5)

    @property
    def lon_as_1e5(self) -> int:
        return round(self.lon * 1e5)

    def __str__(self) -> str:
        return f"{self.lat:.7f}/{self.lon:.7f}"
