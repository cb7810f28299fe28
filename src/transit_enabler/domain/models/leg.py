"""Leg domain models.

A leg is one atomic segment of a trip. The set of variants is closed: either an
``Individual`` leg (walking, cycling, driving, transferring) or a ``Public`` leg
riding a line between two stops. Code that needs variant-specific data
dispatches with ``isinstance`` on the ``Leg`` union.
"""

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from transit_enabler.domain.models.line import Line
from transit_enabler.domain.models.location import Location
from transit_enabler.domain.models.point import Point
from transit_enabler.domain.models.position import Position
from transit_enabler.domain.models.stop import Stop


class IndividualType(Enum):
    """Mode of an individual leg."""

    WALK = "walk"
    BIKE = "bike"
    CAR = "car"
    TRANSFER = "transfer"


def _freeze_path(path: Sequence[Point] | None) -> tuple[Point, ...] | None:
    return tuple(path) if path is not None else None


@dataclass(frozen=True)
class Individual:
    """A leg travelled on one's own, with fixed departure and arrival times."""

    type: IndividualType
    departure: Location
    departure_time: datetime
    arrival: Location
    arrival_time: datetime
    path: tuple[Point, ...] | None = None
    distance: int = 0
    min: int = dataclasses.field(init=False)

    def __post_init__(self) -> None:
        """Freeze the path and derive the duration in whole minutes."""
        object.__setattr__(self, "path", _freeze_path(self.path))
        minutes = int((self.arrival_time - self.departure_time) / timedelta(minutes=1))
        object.__setattr__(self, "min", minutes)

    def moved_clone(self, departure_time: datetime) -> "Individual":
        """Copy of this leg starting at ``departure_time``, keeping its duration."""
        arrival_time = departure_time + (self.arrival_time - self.departure_time)
        return dataclasses.replace(
            self, departure_time=departure_time, arrival_time=arrival_time
        )


@dataclass(frozen=True)
class Public:
    """A ride on a public transport line from one stop to another.

    Both the departure time of ``departure_stop`` and the arrival time of
    ``arrival_stop`` must be resolvable, otherwise construction fails.
    """

    line: Line
    destination: Location | None
    departure_stop: Stop
    arrival_stop: Stop
    intermediate_stops: tuple[Stop, ...] | None = None
    path: tuple[Point, ...] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        """Check that the leg's endpoints have times."""
        if self.departure_stop.get_departure_time() is None:
            raise ValueError(f"departure stop without departure time: {self.departure_stop}")
        if self.arrival_stop.get_arrival_time() is None:
            raise ValueError(f"arrival stop without arrival time: {self.arrival_stop}")
        if self.intermediate_stops is not None:
            object.__setattr__(self, "intermediate_stops", tuple(self.intermediate_stops))
        object.__setattr__(self, "path", _freeze_path(self.path))

    @property
    def departure(self) -> Location:
        return self.departure_stop.location

    @property
    def arrival(self) -> Location:
        return self.arrival_stop.location

    def get_departure_time(self, prefer_plan_time: bool = False) -> datetime:
        departure_time = self.departure_stop.get_departure_time(prefer_plan_time)
        if departure_time is None:
            raise ValueError(f"departure stop without departure time: {self.departure_stop}")
        return departure_time

    def is_departure_time_predicted(self) -> bool:
        return self.departure_stop.is_departure_time_predicted()

    def get_departure_delay(self) -> timedelta | None:
        return self.departure_stop.get_departure_delay()

    def get_departure_position(self) -> Position | None:
        return self.departure_stop.get_departure_position()

    def is_departure_position_predicted(self) -> bool:
        return self.departure_stop.is_departure_position_predicted()

    def get_arrival_time(self, prefer_plan_time: bool = False) -> datetime:
        arrival_time = self.arrival_stop.get_arrival_time(prefer_plan_time)
        if arrival_time is None:
            raise ValueError(f"arrival stop without arrival time: {self.arrival_stop}")
        return arrival_time

    def is_arrival_time_predicted(self) -> bool:
        return self.arrival_stop.is_arrival_time_predicted()

    def get_arrival_delay(self) -> timedelta | None:
        return self.arrival_stop.get_arrival_delay()

    def get_arrival_position(self) -> Position | None:
        return self.arrival_stop.get_arrival_position()

    def is_arrival_position_predicted(self) -> bool:
        return self.arrival_stop.is_arrival_position_predicted()


Leg = Individual | Public


def departure_time(leg: Leg) -> datetime:
    """Coarse departure time of a leg; predicted wins for public legs."""
    if isinstance(leg, Public):
        return leg.get_departure_time()
    return leg.departure_time


def arrival_time(leg: Leg) -> datetime:
    """Coarse arrival time of a leg; predicted wins for public legs."""
    if isinstance(leg, Public):
        return leg.get_arrival_time()
    return leg.arrival_time


def min_time(leg: Leg) -> datetime:
    """Earliest time occurring in a leg."""
    if isinstance(leg, Public):
        return leg.departure_stop.get_min_time() or leg.get_departure_time()
    return leg.departure_time


def max_time(leg: Leg) -> datetime:
    """Latest time occurring in a leg."""
    if isinstance(leg, Public):
        return leg.arrival_stop.get_max_time() or leg.get_arrival_time()
    return leg.arrival_time
