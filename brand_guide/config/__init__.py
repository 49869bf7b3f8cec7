"""Configuration module for the Brand Guide Pipeline."""

from brand_guide.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
