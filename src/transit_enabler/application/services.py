"""Application services (use cases) for trip queries."""

import dataclasses
import logging
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from transit_enabler.domain.models import (
    Location,
    QueryTripsContext,
    QueryTripsResult,
    QueryTripsStatus,
    Trip,
    TripOptions,
    TripQueryPolicy,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from transit_enabler.domain.ports import NetworkProvider


def _unique_trips(trips: Iterable[Trip]) -> list[Trip]:
    """Keep the first trip for every id, in order."""
    seen: set[str] = set()
    unique: list[Trip] = []
    for trip in trips:
        if trip.id in seen:
            continue
        seen.add(trip.id)
        unique.append(trip)
    return unique


class TripQueryService:
    """Service for querying trips from a provider and normalizing the results."""

    def __init__(
        self, provider: "NetworkProvider", policy: TripQueryPolicy | None = None
    ) -> None:
        """Initialize with a network provider and an optional policy."""
        self._provider = provider
        self._policy = policy or TripQueryPolicy()

    @property
    def policy(self) -> TripQueryPolicy:
        return self._policy

    async def query_trips(
        self,
        from_: Location,
        via: Location | None,
        to: Location,
        date: datetime,
        dep: bool = True,
        options: TripOptions | None = None,
    ) -> QueryTripsResult:
        """Query trips and normalize an OK result according to the policy."""
        try:
            result = await self._provider.query_trips(from_, via, to, date, dep, options)
        except Exception as e:
            logger.error(
                f"Error querying trips on {self._provider.network.name} from {from_} to {to}: {e}"
            )
            raise
        return self._normalize(result)

    async def query_more_trips(
        self, context: QueryTripsContext, later: bool = True
    ) -> QueryTripsResult:
        """Query earlier or later trips and normalize an OK result."""
        try:
            result = await self._provider.query_more_trips(context, later)
        except Exception as e:
            direction = "later" if later else "earlier"
            logger.error(f"Error querying {direction} trips on {self._provider.network.name}: {e}")
            raise
        return self._normalize(result)

    async def collect_trips(
        self,
        from_: Location,
        via: Location | None,
        to: Location,
        date: datetime,
        dep: bool = True,
        options: TripOptions | None = None,
    ) -> QueryTripsResult:
        """Query trips and page until the policy's minimum number of trips is known.

        Pages go later for a departure query and earlier for an arrival query.
        Paging stops early when the context cannot continue, a page is not OK
        or the page limit is reached. The combined trips are deduplicated by id
        and sorted by first departure time.
        """
        first = await self.query_trips(from_, via, to, date, dep, options)
        if first.status is not QueryTripsStatus.OK or first.trips is None:
            return first

        trips = list(first.trips)
        context = first.context
        pages = 0
        while (
            context is not None
            and len(trips) < self._policy.min_trips
            and pages < self._policy.max_more_trips_pages
        ):
            can_continue = context.can_query_later() if dep else context.can_query_earlier()
            if not can_continue:
                logger.debug("Trip context cannot be paged further")
                break
            page = await self.query_more_trips(context, later=dep)
            pages += 1
            if page.status is not QueryTripsStatus.OK or page.trips is None:
                logger.warning(f"Stopped paging trips after {pages} pages: {page.status.name}")
                break
            trips = _unique_trips([*trips, *page.trips])
            context = page.context

        trips.sort(key=lambda trip: trip.first_departure_time)
        logger.info(f"Collected {len(trips)} trips from {pages + 1} pages")
        return dataclasses.replace(first, context=context, trips=tuple(trips))

    def _normalize(self, result: QueryTripsResult) -> QueryTripsResult:
        """Apply the policy to the trips of an OK result; other results pass through."""
        if result.status is not QueryTripsStatus.OK or result.trips is None:
            logger.warning(f"Trip query returned {result.status.name}")
            return result

        trips: Iterable[Trip] = result.trips
        if self._policy.adjust_individual_legs:
            trips = [trip.adjust_untravelable_individual_legs() for trip in trips]
        if self._policy.discard_untravelable:
            kept = [trip for trip in trips if trip.is_travelable()]
            if len(kept) < len(result.trips):
                logger.debug(f"Discarded {len(result.trips) - len(kept)} untravelable trips")
            trips = kept
        unique = _unique_trips(trips)
        if len(unique) < len(result.trips):
            logger.debug(f"Dropped {len(result.trips) - len(unique)} duplicate trips")
        return dataclasses.replace(result, trips=tuple(unique))
