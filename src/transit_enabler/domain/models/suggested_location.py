"""Suggested location domain model."""

from dataclasses import dataclass

from transit_enabler.domain.models.location import Location, LocationType

_TYPE_ORDER = {location_type: index for index, location_type in enumerate(LocationType)}


@dataclass(frozen=True, eq=False)
class SuggestedLocation:
    """A location proposed for a search string, with a provider-assigned priority.

    Higher priority sorts first; ties prefer stations over POIs over addresses.
    Two suggestions are equal when their locations are.
    """

    location: Location
    priority: int = 0

    def _sort_key(self) -> tuple[int, int]:
        return -self.priority, _TYPE_ORDER[self.location.type]

    def __lt__(self, other: "SuggestedLocation") -> bool:
        if not isinstance(other, SuggestedLocation):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuggestedLocation):
            return NotImplemented
        return self.location == other.location

    def __hash__(self) -> int:
        return hash(self.location)

    def __str__(self) -> str:
        return f"{self.priority}:{self.location}"
