"""Data layer for country name translation."""

from country_translator.data.schemas import (
    COUNTRY_LAYOUT,
    LANGUAGE_LAYOUT,
    CatalogStats,
    CodeEntry,
    CodeTableLayout,
    Config,
    StoreBackend,
    TranslationRecord,
    TranslationResult,
    TranslationStatus,
)

__all__ = [
    "COUNTRY_LAYOUT",
    "LANGUAGE_LAYOUT",
    "CatalogStats",
    "CodeEntry",
    "CodeTableLayout",
    "Config",
    "StoreBackend",
    "TranslationRecord",
    "TranslationResult",
    "TranslationStatus",
]
