# ABOUTME: Main package for the weather service.
# ABOUTME: Weather lookups proxied to OpenWeatherMap and email subscriptions stored in PostgreSQL.

__version__ = "0.1.0"

__all__ = ["__version__"]
