"""Translation store backed by a JSON array of per-country objects."""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from country_translator.core.errors import ResourceLoadError
from country_translator.core.translation_store import normalize_code
from country_translator.data.schemas import TranslationRecord

logger = logging.getLogger(__name__)

TRANSLATIONS_RESOURCE = "translations.json"

COUNTRY_CODE_KEY = "alpha3"

# Identifier keys that never hold a translation
RESERVED_KEYS = frozenset({"id", "alpha2", "alpha3", "numeric"})


class JSONTranslationStore:
    """Translation store loaded once from JSON data.

    Expected shape::

        [{"id": 124, "alpha2": "ca", "alpha3": "can", "en": "Canada", "es": "Canadá"}]

    Every key other than the identifier keys is a language code.
    """

    def __init__(self, data: Any, source: Optional[str] = None):
        """Build the store from parsed JSON data.

        Args:
            data: The decoded JSON array.
            source: Description of where the data came from, for errors.

        Raises:
            ResourceLoadError: If data is not a JSON array.
        """
        self.source = source
        if not isinstance(data, list):
            raise ResourceLoadError(
                f"Expected a JSON array of countries in {source or 'data'}, "
                f"got {type(data).__name__}",
                source,
            )

        self._records: dict[str, TranslationRecord] = {}
        for index, element in enumerate(data):
            record = self._parse_element(index, element)
            if record is None:
                continue
            if record.country_code in self._records:
                logger.warning(f"Duplicate country code replaced: {record.country_code}")
            self._records[record.country_code] = record

        logger.debug(f"Parsed {len(self._records)} countries from {source or 'data'}")

    def _parse_element(self, index: int, element: Any) -> Optional[TranslationRecord]:
        """Turn one array element into a TranslationRecord.

        Args:
            index: Position of the element in the array.
            element: The decoded element.

        Returns:
            The record, or None if the element has no usable country code.
        """
        if not isinstance(element, dict):
            logger.debug(f"Skipping element {index}: not an object")
            return None

        country_code = element.get(COUNTRY_CODE_KEY)
        if not isinstance(country_code, str) or not country_code.strip():
            logger.debug(f"Skipping element {index}: missing '{COUNTRY_CODE_KEY}'")
            return None

        languages: dict[str, str] = {}
        for key, value in element.items():
            language_code = key.strip().lower()
            if not language_code or language_code in RESERVED_KEYS:
                continue
            if not isinstance(value, str):
                logger.debug(
                    f"Skipping non-string translation {country_code}/{key}: {value!r}"
                )
                continue
            languages[language_code] = value

        return TranslationRecord(country_code=country_code, languages=languages)

    @classmethod
    def from_stream(cls, stream: TextIO, source: Optional[str] = None) -> "JSONTranslationStore":
        """Load a store from an open text stream.

        Args:
            stream: Readable stream containing the JSON array.
            source: Description of the stream, for errors.

        Raises:
            ResourceLoadError: If the stream cannot be read or is not valid JSON.
        """
        try:
            data = json.load(stream)
        except json.JSONDecodeError as e:
            raise ResourceLoadError(
                f"Invalid JSON in {source or 'stream'}: {e}", source
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceLoadError(
                f"Error reading translations from {source or 'stream'}: {e}", source
            ) from e
        return cls(data, source=source)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "JSONTranslationStore":
        """Load a store from a UTF-8 JSON file.

        Args:
            file_path: Path to the JSON file.

        Raises:
            ResourceLoadError: If the file is missing, unreadable or invalid.
        """
        path = Path(file_path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                store = cls.from_stream(f, source=str(path))
        except OSError as e:
            raise ResourceLoadError(
                f"Error reading translations from {path}: {e}", str(path)
            ) from e

        logger.info(f"Loaded translations for {len(store)} countries from: {path}")
        return store

    def countries(self) -> list[str]:
        """Country codes in source order."""
        return list(self._records)

    def languages_for(self, country_code: Optional[str]) -> list[str]:
        """Language codes available for a country, in source order."""
        record = self._record(country_code)
        if record is None:
            return []
        return list(record.languages)

    def translate(
        self, country_code: Optional[str], language_code: Optional[str]
    ) -> Optional[str]:
        """Get the country's name in the language, or None."""
        record = self._record(country_code)
        language = normalize_code(language_code)
        if record is None or language is None:
            return None
        return record.languages.get(language)

    def records(self) -> list[TranslationRecord]:
        """All records in source order."""
        return list(self._records.values())

    def _record(self, country_code: Optional[str]) -> Optional[TranslationRecord]:
        key = normalize_code(country_code)
        if key is None:
            return None
        return self._records.get(key)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"<JSONTranslationStore countries={len(self)} source={self.source}>"


def load_translations(file_path: Optional[Union[str, Path]] = None) -> JSONTranslationStore:
    """Load the JSON translation store.

    Args:
        file_path: Translation file; the bundled file is used if None.
    """
    if file_path is not None:
        return JSONTranslationStore.from_file(file_path)

    resource = resources.files("country_translator.resources").joinpath(TRANSLATIONS_RESOURCE)
    try:
        with resource.open("r", encoding="utf-8") as f:
            return JSONTranslationStore.from_stream(f, source=TRANSLATIONS_RESOURCE)
    except OSError as e:
        raise ResourceLoadError(
            f"Error reading bundled translations: {e}", TRANSLATIONS_RESOURCE
        ) from e
