"""Public transport domain model, provider port and trip query service."""
