"""Domain layer - transit value types and ports."""

from transit_enabler.domain.models import (
    Leg,
    Line,
    Location,
    Stop,
    Trip,
)
from transit_enabler.domain.ports import NetworkProvider

__all__ = [
    "Leg",
    "Line",
    "Location",
    "NetworkProvider",
    "Stop",
    "Trip",
]
