"""Translation store capability shared by all translation backends.

Stores are keyed by case-folded codes: alpha-3 for countries, alpha-2 for
languages. Every lookup trims and lowercases its inputs before matching, and
unknown or empty inputs produce ``None`` or an empty list instead of an error.
"""

from typing import Optional, Protocol


class TranslationStore(Protocol):
    """Interface for looking up a country's name in a given language."""

    def countries(self) -> list[str]:
        """Country codes this store can translate, in a stable order."""
        ...

    def languages_for(self, country_code: Optional[str]) -> list[str]:
        """Language codes available for a country (empty if unknown)."""
        ...

    def translate(
        self, country_code: Optional[str], language_code: Optional[str]
    ) -> Optional[str]:
        """The country's name in the language, or None if unavailable."""
        ...


def normalize_code(code: Optional[str]) -> Optional[str]:
    """Trim and lowercase a code, mapping None or blank input to None."""
    if code is None:
        return None
    key = code.strip().lower()
    return key or None
