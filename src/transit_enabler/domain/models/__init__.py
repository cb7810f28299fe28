"""Domain models for public transport trips, stops and locations."""

from transit_enabler.domain.models.departure import Departure, LineDestination, StationDepartures
from transit_enabler.domain.models.fare import Fare, FareType
from transit_enabler.domain.models.leg import Individual, IndividualType, Leg, Public
from transit_enabler.domain.models.line import Line, LineAttr
from transit_enabler.domain.models.location import NON_UNIQUE_NAMES, Location, LocationType
from transit_enabler.domain.models.nearby_locations_result import (
    NearbyLocationsResult,
    NearbyLocationsStatus,
)
from transit_enabler.domain.models.network_id import NetworkId
from transit_enabler.domain.models.point import Point
from transit_enabler.domain.models.position import Position
from transit_enabler.domain.models.product import Product
from transit_enabler.domain.models.query_departures_result import (
    QueryDeparturesResult,
    QueryDeparturesStatus,
)
from transit_enabler.domain.models.query_trips_result import (
    QueryTripsContext,
    QueryTripsResult,
    QueryTripsStatus,
)
from transit_enabler.domain.models.result_header import ResultHeader
from transit_enabler.domain.models.stop import Stop
from transit_enabler.domain.models.style import Shape, Style
from transit_enabler.domain.models.suggest_locations_result import (
    SuggestLocationsResult,
    SuggestLocationsStatus,
)
from transit_enabler.domain.models.suggested_location import SuggestedLocation
from transit_enabler.domain.models.trip import Trip
from transit_enabler.domain.models.trip_options import (
    Accessibility,
    Optimize,
    TripFlag,
    TripOptions,
    WalkSpeed,
)
from transit_enabler.domain.models.trip_query_policy import TripQueryPolicy

__all__ = [
    "NON_UNIQUE_NAMES",
    "Accessibility",
    "Departure",
    "Fare",
    "FareType",
    "Individual",
    "IndividualType",
    "Leg",
    "Line",
    "LineAttr",
    "LineDestination",
    "Location",
    "LocationType",
    "NearbyLocationsResult",
    "NearbyLocationsStatus",
    "NetworkId",
    "Optimize",
    "Point",
    "Position",
    "Product",
    "Public",
    "QueryDeparturesResult",
    "QueryDeparturesStatus",
    "QueryTripsContext",
    "QueryTripsResult",
    "QueryTripsStatus",
    "ResultHeader",
    "Shape",
    "StationDepartures",
    "Stop",
    "Style",
    "SuggestLocationsResult",
    "SuggestLocationsStatus",
    "SuggestedLocation",
    "Trip",
    "TripFlag",
    "TripOptions",
    "TripQueryPolicy",
    "WalkSpeed",
]
