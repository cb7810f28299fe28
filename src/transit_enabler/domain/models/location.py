"""Location domain model."""

from dataclasses import dataclass
from enum import Enum

from transit_enabler.domain.models.point import Point
from transit_enabler.domain.models.product import Product

# Station names shared by many places; these get the place prepended for display.
NON_UNIQUE_NAMES = frozenset(
    {
        "Hauptbahnhof",
        "Hbf",
        "Bahnhof",
        "Bf",
        "Busbahnhof",
        "ZOB",
        "Schiffstation",
        "Schiffst.",
        "Zentrum",
        "Markt",
        "Dorf",
        "Kirche",
        "Nord",
        "Ost",
        "Süd",
        "West",
    }
)


class LocationType(Enum):
    """Kind of place. Declaration order is also the preference order for suggestions."""

    STATION = "station"
    POI = "poi"
    ADDRESS = "address"
    COORD = "coord"
    ANY = "any"


@dataclass(frozen=True, eq=False)
class Location:
    """Identity of a place: a station, POI, address, bare coordinate or wildcard.

    Invariants are checked on construction and raise ``ValueError``:

    - ``id`` is never the empty string.
    - ``place`` is never set without ``name``.
    - An ``ANY`` location has no ``id``.
    - A ``COORD`` location has a ``coord`` and neither ``place`` nor ``name``.
    """

    type: LocationType
    id: str | None = None
    coord: Point | None = None
    place: str | None = None
    name: str | None = None
    products: frozenset[Product] | None = None

    def __post_init__(self) -> None:
        """Validate invariants and freeze the product set."""
        if self.id == "":
            raise ValueError("id must not be empty")
        if self.place is not None and self.name is None:
            raise ValueError(f"place '{self.place}' given without name")
        if self.type is LocationType.ANY and self.id is not None:
            raise ValueError(f"location of type ANY must not have an id: {self.id}")
        if self.type is LocationType.COORD:
            if self.coord is None:
                raise ValueError("coordinate missing for location of type COORD")
            if self.place is not None or self.name is not None:
                raise ValueError("location of type COORD must not have place or name")
        if self.products is not None and not isinstance(self.products, frozenset):
            object.__setattr__(self, "products", frozenset(self.products))

    @classmethod
    def from_coord(cls, coord: Point) -> "Location":
        """Coordinate-only location."""
        return cls(LocationType.COORD, coord=coord)

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> "Location":
        """Coordinate-only location from degrees."""
        return cls.from_coord(Point.from_double(lat, lon))

    def has_id(self) -> bool:
        return self.id is not None

    def has_coord(self) -> bool:
        return self.coord is not None

    def has_name(self) -> bool:
        return self.name is not None

    def is_identified(self) -> bool:
        """Whether the field identifying this kind of location is populated."""
        if self.type is LocationType.STATION:
            return self.has_id()
        if self.type is LocationType.POI:
            return True
        if self.type in (LocationType.ADDRESS, LocationType.COORD):
            return self.has_coord()
        return False

    def unique_short_name(self) -> str | None:
        """Short display name that stays unambiguous for generic station names.

        "Hauptbahnhof" alone could be any city, so the place is prepended for the
        names in NON_UNIQUE_NAMES. Falls back to the id when there is no name.
        """
        if self.name is not None:
            if self.place is not None and self.name in NON_UNIQUE_NAMES:
                return f"{self.place}, {self.name}"
            return self.name
        return self.id

    def equals_all_fields(self, other: "Location") -> bool:
        """Strict comparison of every field, including products."""
        return (
            self.type is other.type
            and self.id == other.id
            and self.coord == other.coord
            and self.place == other.place
            and self.name == other.name
            and self.products == other.products
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Location):
            return NotImplemented
        if self.type is not other.type:
            return False
        if self.id is not None or other.id is not None:
            return self.id == other.id
        if self.coord is not None or other.coord is not None:
            return self.coord == other.coord
        # only discriminate by place and name if there is neither id nor coordinate
        return self.place == other.place and self.name == other.name

    def __hash__(self) -> int:
        if self.id is not None:
            return hash((self.type, self.id))
        if self.coord is not None:
            return hash((self.type, self.coord))
        return hash((self.type, self.place, self.name))

    def __str__(self) -> str:
        parts = [self.type.name]
        if self.id is not None:
            parts.append(self.id)
        if self.coord is not None:
            parts.append(str(self.coord))
        if self.name is not None:
            parts.append(f"{self.place}, {self.name}" if self.place else self.name)
        return "[" + " ".join(parts) + "]"
