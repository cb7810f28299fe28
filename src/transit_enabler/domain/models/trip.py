"""Trip domain model."""

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from transit_enabler.domain.models.fare import Fare
from transit_enabler.domain.models.leg import (
    Individual,
    Leg,
    Public,
    arrival_time,
    departure_time,
)
from transit_enabler.domain.models.leg import max_time as leg_max_time
from transit_enabler.domain.models.leg import min_time as leg_min_time
from transit_enabler.domain.models.location import Location
from transit_enabler.domain.models.product import Product

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _epoch_millis(time: datetime) -> int:
    """Milliseconds since the epoch; naive times are taken as UTC."""
    if time.tzinfo is None:
        time = time.replace(tzinfo=UTC)
    return (time - _EPOCH) // timedelta(milliseconds=1)


def _id_or_coord(location: Location) -> str:
    return location.id if location.id is not None else str(location.coord)


def build_substitute_id(legs: Sequence[Leg]) -> str:
    """Derive a deterministic trip id from its legs.

    Each leg contributes ``departure-arrival-discriminator`` (locations by id,
    else by coordinate); legs are joined with ``|``. Individual legs use the
    literal ``individual`` as discriminator, so their exact times do not matter.
    Public legs use planned times in epoch milliseconds plus product code and
    label. A line without label contributes an empty string (not "null"), so
    these ids do not match ones built by other clients for the same trip.
    Paths never take part.
    """
    parts = []
    for leg in legs:
        builder = [_id_or_coord(leg.departure), "-", _id_or_coord(leg.arrival), "-"]
        if isinstance(leg, Individual):
            builder.append("individual")
        else:
            planned_departure = leg.departure_stop.planned_departure_time
            if planned_departure is not None:
                builder.append(f"{_epoch_millis(planned_departure)}-")
            planned_arrival = leg.arrival_stop.planned_arrival_time
            if planned_arrival is not None:
                builder.append(f"{_epoch_millis(planned_arrival)}-")
            builder.append(leg.line.product_code())
            builder.append(leg.line.label or "")
        parts.append("".join(builder))
    return "|".join(parts)


@dataclass(frozen=True, eq=False)
class Trip:
    """An ordered, non-empty sequence of legs from an origin to a destination.

    ``id`` is either the opaque id delivered by the provider or, when that is
    absent, the substitute id derived from the legs at construction. Trips are
    equal exactly when their ids are equal, which is what deduplication across
    repeated queries relies on.
    """

    from_: Location
    to: Location
    legs: tuple[Leg, ...]
    id: str | None = None
    fares: tuple[Fare, ...] | None = None
    capacity: tuple[int, ...] | None = None
    num_changes: int | None = None

    def __post_init__(self) -> None:
        """Freeze collections, reject empty trips and settle the id."""
        legs = tuple(self.legs)
        if not legs:
            raise ValueError("trip must have at least one leg")
        object.__setattr__(self, "legs", legs)
        if self.fares is not None:
            object.__setattr__(self, "fares", tuple(self.fares))
        if self.capacity is not None:
            object.__setattr__(self, "capacity", tuple(self.capacity))
        if self.id is None:
            object.__setattr__(self, "id", build_substitute_id(legs))

    @property
    def first_departure_time(self) -> datetime:
        return departure_time(self.legs[0])

    @property
    def last_arrival_time(self) -> datetime:
        return arrival_time(self.legs[-1])

    @property
    def first_public_leg(self) -> Public | None:
        for leg in self.legs:
            if isinstance(leg, Public):
                return leg
        return None

    @property
    def last_public_leg(self) -> Public | None:
        for leg in reversed(self.legs):
            if isinstance(leg, Public):
                return leg
        return None

    @property
    def first_public_leg_departure_time(self) -> datetime | None:
        leg = self.first_public_leg
        return leg.get_departure_time() if leg is not None else None

    @property
    def last_public_leg_arrival_time(self) -> datetime | None:
        leg = self.last_public_leg
        return leg.get_arrival_time() if leg is not None else None

    @property
    def duration(self) -> timedelta:
        """Duration of the whole trip, including leading and trailing individual legs."""
        return self.last_arrival_time - self.first_departure_time

    @property
    def public_duration(self) -> timedelta | None:
        """Duration from the first public departure to the last public arrival.

        Individual legs between public legs count, leading and trailing ones do
        not. ``None`` if the trip has no public legs.
        """
        first = self.first_public_leg_departure_time
        last = self.last_public_leg_arrival_time
        if first is None or last is None:
            return None
        return last - first

    @property
    def min_time(self) -> datetime:
        """Earliest time occurring in this trip."""
        return min(leg_min_time(leg) for leg in self.legs)

    @property
    def max_time(self) -> datetime:
        """Latest time occurring in this trip."""
        return max(leg_max_time(leg) for leg in self.legs)

    def products(self) -> frozenset[Product]:
        """Distinct products used by the public legs."""
        return frozenset(
            leg.line.product
            for leg in self.legs
            if isinstance(leg, Public) and leg.line.product is not None
        )

    def get_num_changes(self) -> int | None:
        """Number of changes.

        The explicit ``num_changes`` wins. Otherwise it is the number of public
        legs minus one, and ``None`` for a trip without public legs.
        """
        if self.num_changes is not None:
            return self.num_changes
        num_public = sum(1 for leg in self.legs if isinstance(leg, Public))
        return num_public - 1 if num_public else None

    def is_travelable(self) -> bool:
        """Whether the trip looks feasible.

        False if a public leg's departure or arrival is cancelled, or if any
        leg departs before the previous time or arrives before its own departure.
        """
        time: datetime | None = None
        for leg in self.legs:
            if isinstance(leg, Public) and (
                leg.departure_stop.departure_cancelled or leg.arrival_stop.arrival_cancelled
            ):
                return False

            leg_departure = departure_time(leg)
            if time is not None and leg_departure < time:
                return False
            time = leg_departure

            leg_arrival = arrival_time(leg)
            if leg_arrival < time:
                return False
            time = leg_arrival
        return True

    def adjust_untravelable_individual_legs(self) -> "Trip":
        """Shift overlapping individual legs to start at the previous leg's arrival.

        Returns a new trip, or this trip if no leg needed moving. Public legs are
        never moved, so a trip can stay untravelable after the adjustment.
        """
        legs = list(self.legs)
        changed = False
        for i in range(1, len(legs)):
            leg = legs[i]
            if not isinstance(leg, Individual):
                continue
            previous_arrival = arrival_time(legs[i - 1])
            if leg.departure_time < previous_arrival:
                legs[i] = leg.moved_clone(previous_arrival)
                changed = True
        if not changed:
            return self
        return dataclasses.replace(self, legs=tuple(legs))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Trip):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        first = self.first_public_leg_departure_time
        last = self.last_public_leg_arrival_time
        span = (
            f"{first:%a %H:%M}-{last:%a %H:%M}" if first is not None and last is not None else "null"
        )
        return f"Trip{{{self.id}, {span}, numChanges={self.num_changes}}}"
