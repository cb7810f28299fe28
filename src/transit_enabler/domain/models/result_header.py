"""Result header domain model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from transit_enabler.domain.models.network_id import NetworkId


class ResultHeader(BaseModel):
    """Metadata about the backend that answered a query."""

    model_config = ConfigDict(frozen=True)

    network: NetworkId
    server_product: str  # e.g. "hafas", "efa", "navitia"
    server_version: str | None = None
    server_name: str | None = None
    server_time: datetime | None = None
    context: Any = None  # Provider-defined, opaque to callers
