"""Tests for configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from country_translator.config.manager import ConfigManager
from country_translator.data.schemas import Config, StoreBackend


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration overrides from the environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Write a nested YAML configuration file."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "language": "Deutsch",
                "resources": {
                    "country_codes": "/data/countries.txt",
                    "language_codes": "/data/languages.txt",
                    "translations": "/data/translations.json",
                },
                "store": {"backend": "FIXED"},
                "suggestions": {"threshold": 85.0, "limit": 5},
            }
        ),
        encoding="utf-8",
    )
    return path


class TestLoad:
    """Tests for ConfigManager.load()."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test that defaults apply when the file does not exist."""
        config = ConfigManager(str(tmp_path / "missing.yaml")).load()

        assert config.language == "en"
        assert config.backend == StoreBackend.JSON
        assert config.translations_path is None
        assert config.suggestion_limit == 3

    def test_packaged_settings(self):
        """Test that the shipped settings file loads."""
        config = ConfigManager().load()

        assert config.backend == StoreBackend.JSON
        assert config.country_codes_path is None

    def test_nested_yaml_is_flattened(self, config_file):
        """Test that every section maps onto the flat Config."""
        config = ConfigManager(str(config_file)).load()

        assert config.language == "de"
        assert config.country_codes_path == "/data/countries.txt"
        assert config.language_codes_path == "/data/languages.txt"
        assert config.translations_path == "/data/translations.json"
        assert config.backend == StoreBackend.FIXED
        assert config.suggestion_threshold == 85.0
        assert config.suggestion_limit == 5

    def test_env_overrides_file(self, config_file, monkeypatch):
        """Test that environment variables win over the file."""
        monkeypatch.setenv("COUNTRY_TRANSLATOR_BACKEND", "json")
        monkeypatch.setenv("COUNTRY_TRANSLATOR_TRANSLATIONS", "/env/translations.json")
        monkeypatch.setenv("COUNTRY_TRANSLATOR_SUGGESTION_THRESHOLD", "50")
        monkeypatch.setenv("COUNTRY_TRANSLATOR_SUGGESTION_LIMIT", "1")

        config = ConfigManager(str(config_file)).load()

        assert config.backend == StoreBackend.JSON
        assert config.translations_path == "/env/translations.json"
        assert config.suggestion_threshold == 50.0
        assert config.suggestion_limit == 1

    def test_invalid_yaml_is_ignored(self, tmp_path):
        """Test that an unparsable file falls back to defaults."""
        path = tmp_path / "broken.yaml"
        path.write_text("store: [unclosed\n", encoding="utf-8")

        config = ConfigManager(str(path)).load()
        assert config.backend == StoreBackend.JSON

    def test_scalar_section_is_ignored(self, tmp_path):
        """Test that a section that is not a mapping is skipped, keeping the rest."""
        path = tmp_path / "scalar.yaml"
        path.write_text(
            "resources: foo\nstore: [fixed]\nsuggestions:\n  limit: 5\n", encoding="utf-8"
        )

        config = ConfigManager(str(path)).load()

        assert config.country_codes_path is None
        assert config.backend == StoreBackend.JSON
        assert config.suggestion_limit == 5

    def test_invalid_backend_rejected(self, monkeypatch, tmp_path):
        """Test that an unknown backend is a validation error."""
        monkeypatch.setenv("COUNTRY_TRANSLATOR_BACKEND", "xml")
        with pytest.raises(ValidationError):
            ConfigManager(str(tmp_path / "missing.yaml")).load()


class TestSaveAndReload:
    """Tests for writing configuration back out."""

    def test_save_round_trip(self, tmp_path):
        """Test that a saved configuration loads back unchanged."""
        path = tmp_path / "saved.yaml"
        manager = ConfigManager(str(path))
        original = Config(
            language="de",
            translations_path="/data/t.json",
            backend="fixed",
            suggestion_threshold=60.0,
        )

        manager.save(original)
        reloaded = manager.reload()

        assert reloaded == original

    def test_config_property_loads_lazily(self, config_file):
        """Test that the config property loads on first access."""
        manager = ConfigManager(str(config_file))
        assert manager.config.backend == StoreBackend.FIXED


class TestConfigModel:
    """Tests for Config validators."""

    @pytest.mark.parametrize(
        "value, expected",
        [("de", "de"), ("German", "de"), ("de_DE", "de"), ("en", "en"), ("fr", "en")],
    )
    def test_language_normalized(self, value, expected):
        """Test that language names collapse to en or de."""
        assert Config(language=value).language == expected

    def test_backend_case_insensitive(self):
        """Test that backend names match in any case."""
        assert Config(backend=" Fixed ").backend == StoreBackend.FIXED

    def test_threshold_bounds(self):
        """Test that the suggestion threshold stays within 0-100."""
        with pytest.raises(ValidationError):
            Config(suggestion_threshold=150.0)
