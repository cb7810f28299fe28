"""Nearby locations result domain model."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from transit_enabler.domain.models.location import Location
from transit_enabler.domain.models.result_header import ResultHeader


class NearbyLocationsStatus(Enum):
    """Outcome of a nearby locations query."""

    OK = "ok"
    INVALID_ID = "invalid_id"
    SERVICE_DOWN = "service_down"


@dataclass(frozen=True)
class NearbyLocationsResult:
    """Status-tagged result of a nearby locations query; only OK carries locations."""

    status: NearbyLocationsStatus
    header: ResultHeader | None = None
    locations: tuple[Location, ...] | None = None

    Status = NearbyLocationsStatus

    def __post_init__(self) -> None:
        """Check that the payload matches the status."""
        if self.status is NearbyLocationsStatus.OK:
            if self.locations is None:
                raise ValueError("OK result needs locations")
            object.__setattr__(self, "locations", tuple(self.locations))
        elif self.locations is not None:
            raise ValueError(f"{self.status.name} result must not carry locations")

    @classmethod
    def ok(
        cls, header: ResultHeader | None, locations: Sequence[Location]
    ) -> "NearbyLocationsResult":
        return cls(NearbyLocationsStatus.OK, header=header, locations=tuple(locations))

    @classmethod
    def failure(
        cls, header: ResultHeader | None, status: NearbyLocationsStatus
    ) -> "NearbyLocationsResult":
        if status is NearbyLocationsStatus.OK:
            raise ValueError("OK is not a failure status")
        return cls(status, header=header)

    def to_short_string(self) -> str:
        if self.status is NearbyLocationsStatus.OK and self.locations is not None:
            return f"{len(self.locations)} locations"
        return self.status.name
