"""Stop domain model."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from transit_enabler.domain.models.location import Location
from transit_enabler.domain.models.position import Position


def _resolve_time(
    planned: datetime | None, predicted: datetime | None, prefer_plan_time: bool
) -> datetime | None:
    if prefer_plan_time and planned is not None:
        return planned
    if predicted is not None:
        return predicted
    return planned


def _delay(planned: datetime | None, predicted: datetime | None) -> timedelta | None:
    if planned is not None and predicted is not None:
        return predicted - planned
    return None


@dataclass(frozen=True)
class Stop:
    """One visit to a location during a public leg.

    Each side (arrival, departure) has a planned and a predicted time and
    position. Accessors resolve them: the predicted value wins unless the plan is
    explicitly preferred, and an absent prediction falls back to the plan. When
    both are absent the accessor returns ``None``.
    """

    location: Location
    planned_arrival_time: datetime | None = None
    predicted_arrival_time: datetime | None = None
    planned_arrival_position: Position | None = None
    predicted_arrival_position: Position | None = None
    arrival_cancelled: bool = False
    planned_departure_time: datetime | None = None
    predicted_departure_time: datetime | None = None
    planned_departure_position: Position | None = None
    predicted_departure_position: Position | None = None
    departure_cancelled: bool = False

    def get_arrival_time(self, prefer_plan_time: bool = False) -> datetime | None:
        return _resolve_time(
            self.planned_arrival_time, self.predicted_arrival_time, prefer_plan_time
        )

    def is_arrival_time_predicted(self, prefer_plan_time: bool = False) -> bool:
        if prefer_plan_time and self.planned_arrival_time is not None:
            return False
        return self.predicted_arrival_time is not None

    def get_arrival_delay(self) -> timedelta | None:
        return _delay(self.planned_arrival_time, self.predicted_arrival_time)

    def get_arrival_position(self) -> Position | None:
        if self.predicted_arrival_position is not None:
            return self.predicted_arrival_position
        return self.planned_arrival_position

    def is_arrival_position_predicted(self) -> bool:
        return self.predicted_arrival_position is not None

    def get_departure_time(self, prefer_plan_time: bool = False) -> datetime | None:
        return _resolve_time(
            self.planned_departure_time, self.predicted_departure_time, prefer_plan_time
        )

    def is_departure_time_predicted(self, prefer_plan_time: bool = False) -> bool:
        if prefer_plan_time and self.planned_departure_time is not None:
            return False
        return self.predicted_departure_time is not None

    def get_departure_delay(self) -> timedelta | None:
        return _delay(self.planned_departure_time, self.predicted_departure_time)

    def get_departure_position(self) -> Position | None:
        if self.predicted_departure_position is not None:
            return self.predicted_departure_position
        return self.planned_departure_position

    def is_departure_position_predicted(self) -> bool:
        return self.predicted_departure_position is not None

    def get_min_time(self) -> datetime | None:
        """Earlier of planned and predicted departure."""
        planned, predicted = self.planned_departure_time, self.predicted_departure_time
        if planned is None or (predicted is not None and predicted < planned):
            return predicted
        return planned

    def get_max_time(self) -> datetime | None:
        """Later of planned and predicted arrival."""
        planned, predicted = self.planned_arrival_time, self.predicted_arrival_time
        if planned is None or (predicted is not None and predicted > planned):
            return predicted
        return planned
