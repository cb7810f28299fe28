"""Configuration adapters."""

from transit_enabler.adapters.config.app_config import AppConfig
from transit_enabler.adapters.config.trip_query_policy_loader import TripQueryPolicyLoader

__all__ = ["AppConfig", "TripQueryPolicyLoader"]
