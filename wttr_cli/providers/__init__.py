"""Weather data providers."""

from wttr_cli.providers.wttr import build_url, fetch_weather

__all__ = ["build_url", "fetch_weather"]
