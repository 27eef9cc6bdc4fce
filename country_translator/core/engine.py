"""Lookup engine composing the code tables and a translation store."""

import logging
from typing import Optional

from country_translator.core.code_table import (
    CodeTable,
    load_country_codes,
    load_language_codes,
)
from country_translator.core.fixed_store import FixedTranslationStore
from country_translator.core.json_store import load_translations
from country_translator.core.suggestions import NameSuggester
from country_translator.core.translation_store import TranslationStore
from country_translator.data.schemas import (
    CatalogStats,
    CodeEntry,
    Config,
    StoreBackend,
    TranslationResult,
    TranslationStatus,
)

logger = logging.getLogger(__name__)


def translate_country_name(
    country_name: Optional[str],
    language_name: Optional[str],
    *,
    country_codes: CodeTable,
    language_codes: CodeTable,
    store: TranslationStore,
    suggester: Optional[NameSuggester] = None,
) -> TranslationResult:
    """Translate a country name into a language, both given as display names.

    Resolves the country name to its code, the language name to its code, and
    asks the store for the translation. Unknown or empty names never raise;
    they are reported through the result status.

    Args:
        country_name: Country display name, e.g. "Canada".
        language_name: Language display name, e.g. "Spanish".
        country_codes: Country name/code table.
        language_codes: Language name/code table.
        store: Translation store to query.
        suggester: Produces close names when a name is not recognized.

    Returns:
        TranslationResult with the outcome.
    """
    result = TranslationResult(
        country_name=country_name or "",
        language_name=language_name or "",
        status=TranslationStatus.COUNTRY_NOT_RECOGNIZED,
    )

    country_code = country_codes.code_for_name(country_name)
    if country_code is None:
        if suggester and country_name:
            result.suggestions = suggester.suggest(country_name, country_codes.names())
        logger.debug(f"Country not recognized: {country_name!r}")
        return result
    result.country_code = country_code

    language_code = language_codes.code_for_name(language_name)
    if language_code is None:
        result.status = TranslationStatus.LANGUAGE_NOT_RECOGNIZED
        if suggester and language_name:
            candidates = [
                name
                for name in (
                    language_codes.name_for_code(code)
                    for code in store.languages_for(country_code)
                )
                if name
            ] or language_codes.names()
            result.suggestions = suggester.suggest(language_name, candidates)
        logger.debug(f"Language not recognized: {language_name!r}")
        return result
    result.language_code = language_code

    translation = store.translate(country_code, language_code)
    if translation is None:
        result.status = TranslationStatus.TRANSLATION_UNAVAILABLE
        logger.debug(f"No translation for {country_code}/{language_code}")
        return result

    result.status = TranslationStatus.TRANSLATED
    result.translation = translation
    return result


class TranslationEngine:
    """Owns the code tables and the translation store used by the CLI."""

    def __init__(
        self,
        country_codes: CodeTable,
        language_codes: CodeTable,
        store: TranslationStore,
        suggester: Optional[NameSuggester] = None,
        backend: StoreBackend = StoreBackend.JSON,
        translations_source: Optional[str] = None,
    ):
        """Initialize the engine with already loaded collaborators.

        Args:
            country_codes: Country name/code table.
            language_codes: Language name/code table.
            store: Translation store to query.
            suggester: Produces close names for unrecognized input.
            backend: Which backend the store is, for statistics.
            translations_source: Where the store was loaded from, for statistics.
        """
        self.country_codes = country_codes
        self.language_codes = language_codes
        self.store = store
        self.suggester = suggester
        self.backend = backend
        self.translations_source = translations_source

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "TranslationEngine":
        """Load all resources named in the configuration.

        Unset paths fall back to the files bundled with the package.

        Raises:
            ResourceLoadError: If any resource cannot be loaded.
        """
        config = config or Config()

        country_codes = load_country_codes(config.country_codes_path)
        language_codes = load_language_codes(config.language_codes_path)

        store: TranslationStore
        if config.backend == StoreBackend.FIXED:
            store = FixedTranslationStore()
            translations_source = None
        else:
            json_store = load_translations(config.translations_path)
            store = json_store
            translations_source = json_store.source

        logger.info(
            f"Engine ready: {country_codes.count()} countries, "
            f"{language_codes.count()} languages, backend={config.backend.value}"
        )
        return cls(
            country_codes=country_codes,
            language_codes=language_codes,
            store=store,
            suggester=NameSuggester(
                threshold=config.suggestion_threshold,
                limit=config.suggestion_limit,
            ),
            backend=config.backend,
            translations_source=translations_source,
        )

    def translate(
        self, country_name: Optional[str], language_name: Optional[str]
    ) -> TranslationResult:
        """Translate a country name into a language; see translate_country_name()."""
        return translate_country_name(
            country_name,
            language_name,
            country_codes=self.country_codes,
            language_codes=self.language_codes,
            store=self.store,
            suggester=self.suggester,
        )

    def available_countries(self) -> list[CodeEntry]:
        """Countries the store can translate and the country table can name.

        Returns:
            Entries sorted by display name.
        """
        entries = []
        for code in self.store.countries():
            name = self.country_codes.name_for_code(code)
            if name is None:
                logger.debug(f"Country code without a name: {code}")
                continue
            entries.append(CodeEntry(display_name=name, code=code))
        return sorted(entries, key=lambda e: e.display_name)

    def available_languages(self, country_code: Optional[str]) -> list[CodeEntry]:
        """Languages the store has for a country and the language table can name.

        Returns:
            Entries sorted by display name; empty for an unknown country.
        """
        entries = []
        for code in self.store.languages_for(country_code):
            name = self.language_codes.name_for_code(code)
            if name is None:
                logger.debug(f"Language code without a name: {code}")
                continue
            entries.append(CodeEntry(display_name=name, code=code))
        return sorted(entries, key=lambda e: e.display_name)

    def get_stats(self) -> CatalogStats:
        """Get statistics about the loaded tables and store."""
        countries = self.store.countries()
        return CatalogStats(
            country_count=self.country_codes.count(),
            language_count=self.language_codes.count(),
            translatable_countries=len(countries),
            translation_pairs=sum(len(self.store.languages_for(c)) for c in countries),
            backend=self.backend,
            country_codes_source=self.country_codes.source,
            language_codes_source=self.language_codes.source,
            translations_source=self.translations_source,
        )
