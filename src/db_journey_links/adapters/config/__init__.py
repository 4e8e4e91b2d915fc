"""Configuration adapters."""

from db_journey_links.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
