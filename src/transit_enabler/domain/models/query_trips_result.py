"""Query trips result domain model."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from transit_enabler.domain.models.location import Location
from transit_enabler.domain.models.result_header import ResultHeader
from transit_enabler.domain.models.trip import Trip


@runtime_checkable
class QueryTripsContext(Protocol):
    """Opaque continuation token for paging through trips.

    Its contents are defined by the provider that issued it; callers only ask
    whether more pages exist and hand it back to query them.
    """

    def can_query_later(self) -> bool:
        """Whether later trips can be queried with this context."""
        ...

    def can_query_earlier(self) -> bool:
        """Whether earlier trips can be queried with this context."""
        ...


class QueryTripsStatus(Enum):
    """Outcome of a trip query."""

    OK = "ok"
    AMBIGUOUS = "ambiguous"
    TOO_CLOSE = "too_close"
    UNKNOWN_FROM = "unknown_from"
    UNKNOWN_VIA = "unknown_via"
    UNKNOWN_TO = "unknown_to"
    UNKNOWN_LOCATION = "unknown_location"
    UNRESOLVABLE_ADDRESS = "unresolvable_address"
    NO_TRIPS = "no_trips"
    INVALID_DATE = "invalid_date"
    SERVICE_DOWN = "service_down"


@dataclass(frozen=True)
class QueryTripsResult:
    """Status-tagged result of a trip query.

    Build it with ``ok``, ``ambiguous`` or ``failure``. OK carries the resolved
    locations, a paging context and the trips; AMBIGUOUS carries the three
    candidate lists; every other status carries no payload. Any other
    combination is rejected on construction.
    """

    status: QueryTripsStatus
    header: ResultHeader | None = None
    ambiguous_from: tuple[Location, ...] | None = None
    ambiguous_via: tuple[Location, ...] | None = None
    ambiguous_to: tuple[Location, ...] | None = None
    query_uri: str | None = None
    from_: Location | None = None
    via: Location | None = None
    to: Location | None = None
    context: QueryTripsContext | None = None
    trips: tuple[Trip, ...] | None = None

    Status = QueryTripsStatus

    def __post_init__(self) -> None:
        """Check that the payload matches the status."""
        ambiguous = (self.ambiguous_from, self.ambiguous_via, self.ambiguous_to)
        ok = (self.query_uri, self.from_, self.via, self.to, self.context, self.trips)
        if self.status is QueryTripsStatus.OK:
            if self.trips is None or self.context is None:
                raise ValueError("OK result needs trips and a context")
            if any(value is not None for value in ambiguous):
                raise ValueError("OK result must not carry ambiguous locations")
            object.__setattr__(self, "trips", tuple(self.trips))
        elif self.status is QueryTripsStatus.AMBIGUOUS:
            if any(value is None for value in ambiguous):
                raise ValueError("AMBIGUOUS result needs from, via and to candidates")
            if any(value is not None for value in ok):
                raise ValueError("AMBIGUOUS result must not carry trips")
            object.__setattr__(self, "ambiguous_from", tuple(self.ambiguous_from or ()))
            object.__setattr__(self, "ambiguous_via", tuple(self.ambiguous_via or ()))
            object.__setattr__(self, "ambiguous_to", tuple(self.ambiguous_to or ()))
        elif any(value is not None for value in ambiguous + ok):
            raise ValueError(f"{self.status.name} result must not carry a payload")

    @classmethod
    def ok(
        cls,
        header: ResultHeader | None,
        query_uri: str | None,
        from_: Location | None,
        via: Location | None,
        to: Location | None,
        context: QueryTripsContext,
        trips: Sequence[Trip],
    ) -> "QueryTripsResult":
        return cls(
            QueryTripsStatus.OK,
            header=header,
            query_uri=query_uri,
            from_=from_,
            via=via,
            to=to,
            context=context,
            trips=tuple(trips),
        )

    @classmethod
    def ambiguous(
        cls,
        header: ResultHeader | None,
        ambiguous_from: Sequence[Location] | None,
        ambiguous_via: Sequence[Location] | None,
        ambiguous_to: Sequence[Location] | None,
    ) -> "QueryTripsResult":
        """AMBIGUOUS result; a missing candidate list becomes an empty one."""
        return cls(
            QueryTripsStatus.AMBIGUOUS,
            header=header,
            ambiguous_from=tuple(ambiguous_from or ()),
            ambiguous_via=tuple(ambiguous_via or ()),
            ambiguous_to=tuple(ambiguous_to or ()),
        )

    @classmethod
    def failure(cls, header: ResultHeader | None, status: QueryTripsStatus) -> "QueryTripsResult":
        if status in (QueryTripsStatus.OK, QueryTripsStatus.AMBIGUOUS):
            raise ValueError(f"{status.name} is not a failure status")
        return cls(status, header=header)

    def to_short_string(self) -> str:
        if self.status is QueryTripsStatus.OK and self.trips is not None:
            text = f"{len(self.trips)} trips"
            if self.from_ is not None:
                text += f" from {self.from_}"
            if self.via is not None:
                text += f" via {self.via}"
            if self.to is not None:
                text += f" to {self.to}"
            return text
        return self.status.name
