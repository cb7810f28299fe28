"""Departure board domain models."""

from dataclasses import dataclass
from datetime import datetime
from functools import total_ordering

from transit_enabler.domain.models.line import Line
from transit_enabler.domain.models.location import Location
from transit_enabler.domain.models.position import Position


@total_ordering
@dataclass(frozen=True)
class Departure:
    """A single departure of a line from a station. Sorted by ``time``."""

    planned_time: datetime | None
    predicted_time: datetime | None
    line: Line
    position: Position | None = None
    destination: Location | None = None
    capacity: tuple[int, ...] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        """Require at least one of the two times."""
        if self.planned_time is None and self.predicted_time is None:
            raise ValueError("departure needs a planned or a predicted time")
        if self.capacity is not None:
            object.__setattr__(self, "capacity", tuple(self.capacity))

    @property
    def time(self) -> datetime:
        """Predicted time if known, else planned time."""
        if self.predicted_time is not None:
            return self.predicted_time
        if self.planned_time is None:
            raise ValueError("departure needs a planned or a predicted time")
        return self.planned_time

    def __lt__(self, other: "Departure") -> bool:
        if not isinstance(other, Departure):
            return NotImplemented
        return self.time < other.time


@dataclass(frozen=True)
class LineDestination:
    """A line together with the destination it serves from a station."""

    line: Line
    destination: Location | None = None


@dataclass(frozen=True)
class StationDepartures:
    """Departures from one station, optionally with the lines serving it."""

    location: Location
    departures: tuple[Departure, ...]
    lines: tuple[LineDestination, ...] | None = None

    def __post_init__(self) -> None:
        """Freeze the collections."""
        object.__setattr__(self, "departures", tuple(self.departures))
        if self.lines is not None:
            object.__setattr__(self, "lines", tuple(self.lines))
