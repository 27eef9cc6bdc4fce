"""Small hard-coded translation store for demos and tests."""

from typing import Optional

from country_translator.core.translation_store import normalize_code

CANADA = "can"
USA = "usa"

FIXED_TRANSLATIONS: dict[str, dict[str, str]] = {
    CANADA: {
        "de": "Kanada",
        "en": "Canada",
        "es": "Canadá",
        "fr": "Canada",
        "zh": "加拿大",
    },
    USA: {
        "en": "United States",
        "es": "Estados Unidos",
    },
}


class FixedTranslationStore:
    """Translation store with translations for Canada and the USA only."""

    def countries(self) -> list[str]:
        return list(FIXED_TRANSLATIONS)

    def languages_for(self, country_code: Optional[str]) -> list[str]:
        return list(FIXED_TRANSLATIONS.get(normalize_code(country_code) or "", {}))

    def translate(
        self, country_code: Optional[str], language_code: Optional[str]
    ) -> Optional[str]:
        translations = FIXED_TRANSLATIONS.get(normalize_code(country_code) or "")
        language = normalize_code(language_code)
        if translations is None or language is None:
            return None
        return translations.get(language)

    def __repr__(self) -> str:
        return f"<FixedTranslationStore countries={len(FIXED_TRANSLATIONS)}>"
