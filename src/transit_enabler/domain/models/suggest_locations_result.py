"""Suggest locations result domain model."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from transit_enabler.domain.models.location import Location
from transit_enabler.domain.models.result_header import ResultHeader
from transit_enabler.domain.models.suggested_location import SuggestedLocation


class SuggestLocationsStatus(Enum):
    """Outcome of a location suggestion query."""

    OK = "ok"
    SERVICE_DOWN = "service_down"


@dataclass(frozen=True)
class SuggestLocationsResult:
    """Status-tagged result of a location suggestion query.

    On OK the suggestions are kept sorted, best first.
    """

    status: SuggestLocationsStatus
    header: ResultHeader | None = None
    suggested_locations: tuple[SuggestedLocation, ...] | None = None

    Status = SuggestLocationsStatus

    def __post_init__(self) -> None:
        """Check that the payload matches the status and sort the suggestions."""
        if self.status is SuggestLocationsStatus.OK:
            if self.suggested_locations is None:
                raise ValueError("OK result needs suggested locations")
            object.__setattr__(
                self, "suggested_locations", tuple(sorted(self.suggested_locations))
            )
        elif self.suggested_locations is not None:
            raise ValueError(f"{self.status.name} result must not carry suggestions")

    @classmethod
    def ok(
        cls, header: ResultHeader | None, suggested_locations: Sequence[SuggestedLocation]
    ) -> "SuggestLocationsResult":
        return cls(
            SuggestLocationsStatus.OK,
            header=header,
            suggested_locations=tuple(suggested_locations),
        )

    @classmethod
    def failure(
        cls, header: ResultHeader | None, status: SuggestLocationsStatus
    ) -> "SuggestLocationsResult":
        if status is SuggestLocationsStatus.OK:
            raise ValueError("OK is not a failure status")
        return cls(status, header=header)

    def get_locations(self) -> list[Location]:
        """Locations of the suggestions, best first.

        Raises:
            RuntimeError: If the result is not OK.
        """
        if self.status is not SuggestLocationsStatus.OK or self.suggested_locations is None:
            raise RuntimeError(f"no locations with status: {self.status.name}")
        return [suggestion.location for suggestion in self.suggested_locations]

    def to_short_string(self) -> str:
        if self.status is SuggestLocationsStatus.OK and self.suggested_locations is not None:
            return f"{len(self.suggested_locations)} locations"
        return self.status.name
