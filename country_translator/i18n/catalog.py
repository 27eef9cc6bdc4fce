"""Message catalog for bilingual CLI output."""

import os
from typing import Optional

from country_translator.i18n.messages import get_message

# Supported languages
SUPPORTED_LANGUAGES = ["en", "de"]


class MessageCatalog:
    """Looks up user-facing messages in the selected language."""

    def __init__(self, language: str = "en"):
        """Initialize the catalog.

        Args:
            language: Language code ('en' or 'de'). Defaults to 'en'.
        """
        self.language = self._validate_language(language)

    def _validate_language(self, language: str) -> str:
        """Normalize a language code, defaulting to English."""
        lang = language.lower().strip()

        if lang in ("de", "german", "deutsch", "de-de", "de_de"):
            return "de"
        return "en"

    def set_language(self, language: str) -> None:
        """Set the current language."""
        self.language = self._validate_language(language)

    def get_language(self) -> str:
        """Get the current language."""
        return self.language

    def t(self, key: str, /, **kwargs) -> str:
        """Look up a message.

        Args:
            key: The message key.
            **kwargs: Format arguments for the message string.

        Returns:
            The formatted message.
        """
        return get_message(key, self.language, **kwargs)

    def __call__(self, key: str, /, **kwargs) -> str:
        return self.t(key, **kwargs)


# Global catalog instance
_catalog: Optional[MessageCatalog] = None


def get_catalog() -> MessageCatalog:
    """Get the global message catalog.

    The language is determined in the following order:
    1. Previously set language via set_language()
    2. COUNTRY_TRANSLATOR_LANGUAGE environment variable
    3. LANG environment variable (first two characters)
    4. Default to 'en'
    """
    global _catalog

    if _catalog is None:
        language = os.environ.get("COUNTRY_TRANSLATOR_LANGUAGE")

        if not language:
            # e.g. "de_DE.UTF-8" -> "de"
            lang_env = os.environ.get("LANG", "en")
            language = lang_env[:2] if len(lang_env) >= 2 else "en"

        _catalog = MessageCatalog(language)

    return _catalog


def set_language(language: str) -> None:
    """Set the global message language ('en' or 'de')."""
    get_catalog().set_language(language)


def get_current_language() -> str:
    """Get the current message language code."""
    return get_catalog().get_language()


def t(key: str, /, **kwargs) -> str:
    """Look up a message using the global catalog.

    Example:
        >>> t("result.country_not_recognized", country="Atlantis")
        'Country not recognized: Atlantis'

        >>> set_language("de")
        >>> t("result.country_not_recognized", country="Atlantis")
        'Land nicht erkannt: Atlantis'
    """
    return get_catalog().t(key, **kwargs)
