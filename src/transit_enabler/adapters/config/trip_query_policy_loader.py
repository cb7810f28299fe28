"""Trip query policy loader."""

from transit_enabler.adapters.config.app_config import AppConfig
from transit_enabler.domain.models.trip_query_policy import TripQueryPolicy


class TripQueryPolicyLoader:
    """Loads the trip query policy from app config."""

    @staticmethod
    def load(config: AppConfig) -> TripQueryPolicy:
        """Load the trip query policy from app config, applying its TOML file first."""
        config.load_config_file()
        return TripQueryPolicy(
            adjust_individual_legs=config.adjust_individual_legs,
            discard_untravelable=config.discard_untravelable,
            min_trips=config.min_trips,
            max_more_trips_pages=config.max_more_trips_pages,
        )
