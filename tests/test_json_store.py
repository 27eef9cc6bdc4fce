"""Tests for the JSON-backed translation store."""

import io
import json

import pytest

from country_translator.core.errors import ResourceLoadError
from country_translator.core.json_store import JSONTranslationStore, load_translations

from conftest import TRANSLATION_DATA


class TestTranslate:
    """Tests for translation lookups."""

    def test_translate(self, json_store):
        """Test a direct lookup by lowercase codes."""
        assert json_store.translate("can", "en") == "Canada"

    def test_translate_case_folds_inputs(self, json_store):
        """Test that country and language codes match in any case."""
        assert json_store.translate("CAN", "ES") == "Canadá"
        assert json_store.translate(" Usa ", "Es") == "Estados Unidos"

    def test_unknown_country(self, json_store):
        """Test that an unknown country has no translation."""
        assert json_store.translate("xyz", "en") is None

    def test_unknown_language(self, json_store):
        """Test that a known country with an unknown language has no translation."""
        assert json_store.translate("can", "zz") is None
        assert json_store.translate("usa", "de") is None

    @pytest.mark.parametrize(
        "country, language",
        [(None, "en"), ("can", None), ("", "en"), ("can", "  "), (None, None)],
    )
    def test_empty_inputs(self, json_store, country, language):
        """Test that empty inputs return None instead of raising."""
        assert json_store.translate(country, language) is None

    def test_reserved_keys_are_not_languages(self, json_store):
        """Test that identifier fields cannot be queried as translations."""
        assert json_store.translate("can", "alpha2") is None
        assert json_store.translate("can", "id") is None


class TestListing:
    """Tests for countries() and languages_for()."""

    def test_countries_in_source_order(self, json_store):
        """Test that countries are listed in the order they were loaded."""
        assert json_store.countries() == ["can", "usa", "deu"]

    def test_languages_for_country(self, json_store):
        """Test that exactly the record's language codes are listed."""
        assert set(json_store.languages_for("can")) == {"en", "es", "de", "fr"}
        assert set(json_store.languages_for("USA")) == {"en", "es"}

    def test_languages_for_unknown_country(self, json_store):
        """Test that an unknown country has no languages."""
        assert json_store.languages_for("xyz") == []
        assert json_store.languages_for(None) == []
        assert json_store.languages_for("") == []

    def test_records(self, json_store):
        """Test that records expose case-folded codes."""
        records = json_store.records()
        assert [r.country_code for r in records] == ["can", "usa", "deu"]
        assert records[2].languages == {"en": "Germany", "de": "Deutschland"}
        assert len(json_store) == 3


class TestParsing:
    """Tests for how array elements are interpreted."""

    def test_keys_are_case_folded(self):
        """Test that uppercase codes are stored lowercase."""
        store = JSONTranslationStore([{"alpha3": "MEX", "EN": "Mexico", "Es": "México", "ID": 484}])
        assert store.countries() == ["mex"]
        assert set(store.languages_for("mex")) == {"en", "es"}
        assert store.translate("mex", "es") == "México"

    def test_non_string_values_skipped(self):
        """Test that only string values are kept as translations."""
        store = JSONTranslationStore(
            [{"alpha3": "bra", "en": "Brazil", "es": None, "fr": 42, "de": ["Brasilien"]}]
        )
        assert store.languages_for("bra") == ["en"]
        assert store.translate("bra", "fr") is None

    def test_elements_without_country_code_skipped(self):
        """Test that elements without a usable alpha3 are dropped entirely."""
        store = JSONTranslationStore(
            [
                {"alpha2": "xx", "en": "Nowhere"},
                {"alpha3": "", "en": "Empty"},
                {"alpha3": 840, "en": "Numeric"},
                "not an object",
                {"alpha3": "can", "en": "Canada"},
            ]
        )
        assert store.countries() == ["can"]

    def test_duplicate_country_last_wins(self):
        """Test that a repeated alpha3 replaces the earlier record."""
        store = JSONTranslationStore(
            [
                {"alpha3": "can", "en": "Canada", "fr": "Canada"},
                {"alpha3": "CAN", "en": "Dominion of Canada"},
            ]
        )
        assert store.countries() == ["can"]
        assert store.translate("can", "en") == "Dominion of Canada"
        assert store.translate("can", "fr") is None

    def test_country_without_languages(self):
        """Test that a country with only identifier fields is still listed."""
        store = JSONTranslationStore([{"id": 10, "alpha2": "aq", "alpha3": "ata", "numeric": "010"}])
        assert store.countries() == ["ata"]
        assert store.languages_for("ata") == []

    def test_non_array_data_raises(self):
        """Test that data other than an array is a load error."""
        with pytest.raises(ResourceLoadError):
            JSONTranslationStore({"alpha3": "can", "en": "Canada"})


class TestLoading:
    """Tests for loading stores from streams and files."""

    def test_from_stream(self):
        """Test loading from an already opened stream."""
        stream = io.StringIO(json.dumps(TRANSLATION_DATA))
        store = JSONTranslationStore.from_stream(stream, source="memory")
        assert store.translate("deu", "de") == "Deutschland"
        assert store.source == "memory"

    def test_invalid_json_stream_raises(self):
        """Test that malformed JSON is a load error."""
        with pytest.raises(ResourceLoadError, match="Invalid JSON"):
            JSONTranslationStore.from_stream(io.StringIO('[{"alpha3": "can",'))

    def test_from_file(self, resource_files):
        """Test loading from a file on disk."""
        store = JSONTranslationStore.from_file(resource_files["translations"])
        assert store.translate("CAN", "ES") == "Canadá"
        assert store.source == str(resource_files["translations"])

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing file is a load error."""
        missing = tmp_path / "missing.json"
        with pytest.raises(ResourceLoadError) as exc_info:
            JSONTranslationStore.from_file(missing)
        assert exc_info.value.source == str(missing)

    def test_object_file_raises(self, tmp_path):
        """Test that a file holding a JSON object is a load error."""
        path = tmp_path / "object.json"
        path.write_text('{"alpha3": "can"}', encoding="utf-8")
        with pytest.raises(ResourceLoadError):
            JSONTranslationStore.from_file(path)

    def test_reload_gives_identical_results(self, resource_files):
        """Test that loading the same file twice answers every query alike."""
        first = load_translations(resource_files["translations"])
        second = load_translations(resource_files["translations"])

        assert first.countries() == second.countries()
        for element in TRANSLATION_DATA:
            country = element["alpha3"]
            assert first.languages_for(country) == second.languages_for(country)
            for language in first.languages_for(country):
                assert first.translate(country, language) == second.translate(country, language)

    def test_bundled_translations(self):
        """Test loading the translation file shipped with the package."""
        store = load_translations()
        assert store.translate("can", "es") == "Canadá"
        assert store.translate("DEU", "fr") == "Allemagne"
        assert "usa" in store.countries()
