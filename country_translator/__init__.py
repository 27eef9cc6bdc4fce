"""Country Translator - translate country names between languages."""

__version__ = "0.1.0"
