"""Configuration loading for the country translator."""

from country_translator.config.manager import ConfigManager

__all__ = ["ConfigManager"]
