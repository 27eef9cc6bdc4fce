"""Console output formatting for the country translator."""

from country_translator.output.formatter import ConsoleFormatter

__all__ = ["ConsoleFormatter"]
