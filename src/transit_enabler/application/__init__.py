"""Application layer - use cases built on the domain ports."""

from transit_enabler.application.services import TripQueryService

__all__ = [
    "TripQueryService",
]
