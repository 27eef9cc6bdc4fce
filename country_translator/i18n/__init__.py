"""Internationalization (i18n) of CLI messages in English and German."""

from country_translator.i18n.catalog import (
    MessageCatalog,
    get_catalog,
    get_current_language,
    set_language,
    t,
)

__all__ = ["MessageCatalog", "get_catalog", "get_current_language", "set_language", "t"]
