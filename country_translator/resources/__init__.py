"""Bundled country code, language code and translation data."""
