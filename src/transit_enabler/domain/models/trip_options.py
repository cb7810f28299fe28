"""Trip query options domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from transit_enabler.domain.models.product import Product


class Optimize(Enum):
    """Aspect a trip search should optimize for."""

    LEAST_DURATION = "least_duration"
    LEAST_CHANGES = "least_changes"
    LEAST_WALKING = "least_walking"


class WalkSpeed(Enum):
    """Walking ability of the traveller."""

    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"


class Accessibility(Enum):
    """Required route accessibility."""

    NEUTRAL = "neutral"
    LIMITED = "limited"
    BARRIER_FREE = "barrier_free"


class TripFlag(Enum):
    """Additional trip search flags."""

    BIKE = "bike"


class TripOptions(BaseModel):
    """Options for a trip query. Every unset option means the provider default."""

    model_config = ConfigDict(frozen=True)

    products: frozenset[Product] | None = None
    optimize: Optimize | None = None
    walk_speed: WalkSpeed | None = None
    accessibility: Accessibility | None = None
    flags: frozenset[TripFlag] | None = None
