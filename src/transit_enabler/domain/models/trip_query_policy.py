"""Trip query policy domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TripQueryPolicy:
    """How trip results from a provider are normalized and paged."""

    adjust_individual_legs: bool = (
        True  # Move individual legs that would start before the previous leg arrives
    )
    discard_untravelable: bool = False  # Drop trips that are still not travelable
    min_trips: int = 0  # Page with query_more_trips until this many unique trips are known
    max_more_trips_pages: int = 3  # Upper bound on follow-up pages per collect_trips call

    def __post_init__(self) -> None:
        if self.min_trips < 0:
            raise ValueError(f"min_trips must be >= 0, got {self.min_trips}")
        if self.max_more_trips_pages < 0:
            raise ValueError(
                f"max_more_trips_pages must be >= 0, got {self.max_more_trips_pages}"
            )
