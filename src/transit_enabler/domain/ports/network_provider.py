"""Network provider port."""

from datetime import datetime
from typing import Protocol

from transit_enabler.domain.models.location import Location, LocationType
from transit_enabler.domain.models.nearby_locations_result import NearbyLocationsResult
from transit_enabler.domain.models.network_id import NetworkId
from transit_enabler.domain.models.query_departures_result import QueryDeparturesResult
from transit_enabler.domain.models.query_trips_result import QueryTripsContext, QueryTripsResult
from transit_enabler.domain.models.suggest_locations_result import SuggestLocationsResult
from transit_enabler.domain.models.trip_options import TripOptions


class NetworkProvider(Protocol):
    """Port for a client of one transportation network.

    Implementations fill the domain models from the backend's responses.
    Query failures are reported through the result status; only transport
    problems are raised.
    """

    @property
    def network(self) -> NetworkId:
        """Network this provider answers for."""
        ...

    async def suggest_locations(
        self,
        constraint: str,
        types: frozenset[LocationType] | None = None,
        max_locations: int = 0,  # 0 means provider default
    ) -> SuggestLocationsResult:
        """Suggest locations matching the user's input so far."""
        ...

    async def query_nearby_locations(
        self,
        types: frozenset[LocationType],
        location: Location,
        max_distance: int = 0,  # meters, 0 means provider default
        max_locations: int = 0,
    ) -> NearbyLocationsResult:
        """Find locations near the given location."""
        ...

    async def query_departures(
        self,
        station_id: str,
        time: datetime | None = None,
        max_departures: int = 0,
        equivs: bool = False,  # also include equivalent stations
    ) -> QueryDeparturesResult:
        """Get departures at a station, probably live."""
        ...

    async def query_trips(
        self,
        from_: Location,
        via: Location | None,
        to: Location,
        date: datetime,
        dep: bool = True,  # True if date is the departure time, False for arrival
        options: TripOptions | None = None,
    ) -> QueryTripsResult:
        """Query trips, reporting ambiguous locations if they cannot be resolved."""
        ...

    async def query_more_trips(
        self, context: QueryTripsContext, later: bool
    ) -> QueryTripsResult:
        """Query earlier or later trips using a context from a previous result."""
        ...
