"""Shared fixtures for country translator tests.

Sources are built in memory so the core can be exercised without files;
file-based fixtures write the same content to a temporary directory.
"""

import io
import json

import pytest

from country_translator.core.code_table import CodeTable
from country_translator.core.json_store import JSONTranslationStore
from country_translator.core.suggestions import NameSuggester
from country_translator.data.schemas import COUNTRY_LAYOUT, LANGUAGE_LAYOUT
from country_translator.i18n import set_language

COUNTRY_TEXT = (
    "Country\tAlpha-2 code\tAlpha-3 code\tNumeric\n"
    "Canada\tCA\tCAN\t124\n"
    "United States of America\tUS\tUSA\t840\n"
    "Germany\tDE\tDEU\t276\n"
    "France\tFR\tFRA\t250\n"
)

LANGUAGE_TEXT = (
    "ISO language name\t639-1 code\n"
    "English\ten\n"
    "Spanish\tes\n"
    "German\tde\n"
    "French\tfr\n"
    "Japanese\tja\n"
)

TRANSLATION_DATA = [
    {"id": 124, "alpha2": "ca", "alpha3": "can", "en": "Canada", "es": "Canadá", "de": "Kanada", "fr": "Canada"},
    {"id": 840, "alpha2": "us", "alpha3": "usa", "en": "United States", "es": "Estados Unidos"},
    {"id": 276, "alpha2": "de", "alpha3": "deu", "en": "Germany", "de": "Deutschland"},
]


@pytest.fixture(autouse=True)
def english_messages():
    """Reset the CLI message language so tests see English output."""
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def country_codes():
    """Country table loaded from an in-memory stream."""
    return CodeTable(io.StringIO(COUNTRY_TEXT), COUNTRY_LAYOUT, source="countries")


@pytest.fixture
def language_codes():
    """Language table loaded from an in-memory stream."""
    return CodeTable(io.StringIO(LANGUAGE_TEXT), LANGUAGE_LAYOUT, source="languages")


@pytest.fixture
def json_store():
    """JSON-backed store built from already parsed data."""
    return JSONTranslationStore(TRANSLATION_DATA, source="translations")


@pytest.fixture
def suggester():
    """Suggester with the default settings."""
    return NameSuggester(threshold=70.0, limit=3)


@pytest.fixture
def resource_files(tmp_path):
    """Write the sample resources to disk and return their paths."""
    country_file = tmp_path / "country-codes.txt"
    language_file = tmp_path / "language-codes.txt"
    translation_file = tmp_path / "translations.json"

    country_file.write_text(COUNTRY_TEXT, encoding="utf-8")
    language_file.write_text(LANGUAGE_TEXT, encoding="utf-8")
    translation_file.write_text(json.dumps(TRANSLATION_DATA, ensure_ascii=False), encoding="utf-8")

    return {
        "country_codes": country_file,
        "language_codes": language_file,
        "translations": translation_file,
    }
