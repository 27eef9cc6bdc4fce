"""User-facing message strings for English and German."""

from typing import Dict

# Type alias for message dictionaries
MessageDict = Dict[str, str]

MESSAGES: Dict[str, MessageDict] = {
    "en": {
        # =============================================================================
        # CLI - Options
        # =============================================================================
        "cli.option.language": "Language for output (en=English, de=German). Default: en.",
        "cli.option.config": "Path to configuration file.",
        "cli.option.backend": "Translation backend: json file or the fixed demo table.",
        "cli.option.country_codes": "Tab-delimited country code file (name, alpha-2, alpha-3, numeric).",
        "cli.option.language_codes": "Tab-delimited language code file (name, alpha-2).",
        "cli.option.translations": "JSON file with country name translations.",
        "cli.option.verbose": "Enable verbose output.",

        # =============================================================================
        # CLI - Errors
        # =============================================================================
        "cli.error.load": "Could not load resource: {error}",
        "cli.error.invalid_input": "Invalid input: {error}",
        "cli.error.generic": "Error: {error}",

        # =============================================================================
        # CLI - Interactive session
        # =============================================================================
        "cli.interactive.select_country": "Select a country from above (or type 'quit' to exit)",
        "cli.interactive.select_language": "Select a language from above (or type 'quit' to exit)",
        "cli.interactive.invalid_country": "Invalid country. Please try again.",
        "cli.interactive.invalid_language": "Invalid language. Please try again.",
        "cli.interactive.result": "{country} in {language} is {translation}",
        "cli.interactive.continue": "Press enter to continue or type 'quit' to exit",
        "cli.interactive.no_countries": "No translatable countries are available.",
        "cli.interactive.no_languages": "No languages are available for {country}.",
        "cli.interactive.goodbye": "Goodbye!",

        # =============================================================================
        # Translation results
        # =============================================================================
        "result.translated": "{country} in {language} is {translation}",
        "result.country_not_recognized": "Country not recognized: {country}",
        "result.language_not_recognized": "Language not recognized: {language}",
        "result.translation_unavailable": "No translation of {country} into {language} is available",
        "result.suggestions": "Did you mean: {names}?",

        # =============================================================================
        # Formatter - Labels
        # =============================================================================
        "fmt.panel.title": "Country Name Translation",
        "fmt.country": "Country",
        "fmt.language": "Language",
        "fmt.translation": "Translation",
        "fmt.status": "Status",
        "fmt.name": "Name",
        "fmt.code": "Code",
        "fmt.metric": "Metric",
        "fmt.value": "Value",
        "fmt.bundled": "bundled",
        "fmt.countries_title": "Translatable Countries ({count})",
        "fmt.languages_title": "Languages for {country} ({count})",
        "fmt.stats.title": "Catalog Statistics",
        "fmt.stats.countries": "Country Codes",
        "fmt.stats.languages": "Language Codes",
        "fmt.stats.translatable": "Translatable Countries",
        "fmt.stats.pairs": "Translation Pairs",
        "fmt.stats.backend": "Backend",
        "fmt.stats.country_source": "Country Code File",
        "fmt.stats.language_source": "Language Code File",
        "fmt.stats.translation_source": "Translation File",

        # =============================================================================
        # Status labels
        # =============================================================================
        "status.translated": "Translated",
        "status.country_not_recognized": "Unknown Country",
        "status.language_not_recognized": "Unknown Language",
        "status.translation_unavailable": "Unavailable",
    },
    "de": {
        # =============================================================================
        # CLI - Optionen
        # =============================================================================
        "cli.option.language": "Ausgabesprache (en=Englisch, de=Deutsch). Standard: en.",
        "cli.option.config": "Pfad zur Konfigurationsdatei.",
        "cli.option.backend": "Übersetzungsquelle: JSON-Datei oder die feste Demo-Tabelle.",
        "cli.option.country_codes": "Tabulatorgetrennte Ländercode-Datei (Name, Alpha-2, Alpha-3, numerisch).",
        "cli.option.language_codes": "Tabulatorgetrennte Sprachcode-Datei (Name, Alpha-2).",
        "cli.option.translations": "JSON-Datei mit Übersetzungen der Ländernamen.",
        "cli.option.verbose": "Ausführliche Ausgabe aktivieren.",

        # =============================================================================
        # CLI - Fehler
        # =============================================================================
        "cli.error.load": "Ressource konnte nicht geladen werden: {error}",
        "cli.error.invalid_input": "Ungültige Eingabe: {error}",
        "cli.error.generic": "Fehler: {error}",

        # =============================================================================
        # CLI - Interaktive Sitzung
        # =============================================================================
        "cli.interactive.select_country": "Wählen Sie ein Land aus der Liste ('quit' zum Beenden)",
        "cli.interactive.select_language": "Wählen Sie eine Sprache aus der Liste ('quit' zum Beenden)",
        "cli.interactive.invalid_country": "Ungültiges Land. Bitte erneut versuchen.",
        "cli.interactive.invalid_language": "Ungültige Sprache. Bitte erneut versuchen.",
        "cli.interactive.result": "{country} auf {language} heißt {translation}",
        "cli.interactive.continue": "Enter zum Fortfahren oder 'quit' zum Beenden",
        "cli.interactive.no_countries": "Keine übersetzbaren Länder verfügbar.",
        "cli.interactive.no_languages": "Keine Sprachen für {country} verfügbar.",
        "cli.interactive.goodbye": "Auf Wiedersehen!",

        # =============================================================================
        # Übersetzungsergebnisse
        # =============================================================================
        "result.translated": "{country} auf {language} heißt {translation}",
        "result.country_not_recognized": "Land nicht erkannt: {country}",
        "result.language_not_recognized": "Sprache nicht erkannt: {language}",
        "result.translation_unavailable": "Keine Übersetzung von {country} ins {language} verfügbar",
        "result.suggestions": "Meinten Sie: {names}?",

        # =============================================================================
        # Formatierung - Beschriftungen
        # =============================================================================
        "fmt.panel.title": "Übersetzung des Ländernamens",
        "fmt.country": "Land",
        "fmt.language": "Sprache",
        "fmt.translation": "Übersetzung",
        "fmt.status": "Status",
        "fmt.name": "Name",
        "fmt.code": "Code",
        "fmt.metric": "Kennzahl",
        "fmt.value": "Wert",
        "fmt.bundled": "mitgeliefert",
        "fmt.countries_title": "Übersetzbare Länder ({count})",
        "fmt.languages_title": "Sprachen für {country} ({count})",
        "fmt.stats.title": "Katalogstatistik",
        "fmt.stats.countries": "Ländercodes",
        "fmt.stats.languages": "Sprachcodes",
        "fmt.stats.translatable": "Übersetzbare Länder",
        "fmt.stats.pairs": "Übersetzungspaare",
        "fmt.stats.backend": "Quelle",
        "fmt.stats.country_source": "Ländercode-Datei",
        "fmt.stats.language_source": "Sprachcode-Datei",
        "fmt.stats.translation_source": "Übersetzungsdatei",

        # =============================================================================
        # Statusbezeichnungen
        # =============================================================================
        "status.translated": "Übersetzt",
        "status.country_not_recognized": "Unbekanntes Land",
        "status.language_not_recognized": "Unbekannte Sprache",
        "status.translation_unavailable": "Nicht verfügbar",
    },
}


def get_message(key: str, language: str = "en", /, **kwargs) -> str:
    """Get a message for a key.

    Args:
        key: The message key.
        language: Language code ('en' or 'de').
        **kwargs: Format arguments for the message string, which may
            include a "language" placeholder distinct from the catalog language.

    Returns:
        The message, the English message if missing, or the key if not found.
    """
    lang_dict = MESSAGES.get(language, MESSAGES["en"])
    text = lang_dict.get(key, MESSAGES["en"].get(key, key))

    if kwargs:
        try:
            return text.format(**kwargs)
        except KeyError:
            return text
    return text
