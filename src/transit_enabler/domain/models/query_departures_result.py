"""Query departures result domain model."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from transit_enabler.domain.models.departure import StationDepartures
from transit_enabler.domain.models.result_header import ResultHeader


class QueryDeparturesStatus(Enum):
    """Outcome of a departures query."""

    OK = "ok"
    NO_INFO = "no_info"
    INVALID_STATION = "invalid_station"
    SERVICE_DOWN = "service_down"


@dataclass(frozen=True)
class QueryDeparturesResult:
    """Status-tagged result of a departures query.

    OK carries one ``StationDepartures`` per station the provider answered for
    (several when equivalent stations are included).
    """

    status: QueryDeparturesStatus
    header: ResultHeader | None = None
    station_departures: tuple[StationDepartures, ...] | None = None

    Status = QueryDeparturesStatus

    def __post_init__(self) -> None:
        """Check that the payload matches the status."""
        if self.status is QueryDeparturesStatus.OK:
            if self.station_departures is None:
                raise ValueError("OK result needs station departures")
            object.__setattr__(self, "station_departures", tuple(self.station_departures))
        elif self.station_departures is not None:
            raise ValueError(f"{self.status.name} result must not carry departures")

    @classmethod
    def ok(
        cls, header: ResultHeader | None, station_departures: Sequence[StationDepartures]
    ) -> "QueryDeparturesResult":
        return cls(
            QueryDeparturesStatus.OK,
            header=header,
            station_departures=tuple(station_departures),
        )

    @classmethod
    def failure(
        cls, header: ResultHeader | None, status: QueryDeparturesStatus
    ) -> "QueryDeparturesResult":
        if status is QueryDeparturesStatus.OK:
            raise ValueError("OK is not a failure status")
        return cls(status, header=header)

    def find_station_departures(self, station_id: str) -> StationDepartures | None:
        """Departures of the station with the given id, if it is part of the result."""
        for departures in self.station_departures or ():
            if departures.location.id == station_id:
                return departures
        return None

    def to_short_string(self) -> str:
        if self.status is QueryDeparturesStatus.OK and self.station_departures is not None:
            return f"{len(self.station_departures)} stationDepartures"
        return self.status.name
