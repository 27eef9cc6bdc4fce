"""Core logic for country name translation."""

from country_translator.core.code_table import (
    CodeTable,
    load_country_codes,
    load_language_codes,
)
from country_translator.core.engine import TranslationEngine, translate_country_name
from country_translator.core.errors import ResourceLoadError
from country_translator.core.fixed_store import FixedTranslationStore
from country_translator.core.json_store import JSONTranslationStore, load_translations
from country_translator.core.suggestions import NameSuggester, suggest_names
from country_translator.core.translation_store import TranslationStore

__all__ = [
    "CodeTable",
    "FixedTranslationStore",
    "JSONTranslationStore",
    "NameSuggester",
    "ResourceLoadError",
    "TranslationEngine",
    "TranslationStore",
    "load_country_codes",
    "load_language_codes",
    "load_translations",
    "suggest_names",
    "translate_country_name",
]
