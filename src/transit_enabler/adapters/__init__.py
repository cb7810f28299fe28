"""Adapters layer - configuration, logging and wire formats."""

from transit_enabler.adapters.config import AppConfig, TripQueryPolicyLoader
from transit_enabler.adapters.logging_config import configure_logging

__all__ = [
    "AppConfig",
    "TripQueryPolicyLoader",
    "configure_logging",
]
