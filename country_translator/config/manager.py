"""Configuration management with YAML and environment variable support.

Supports bilingual operation (English/German) via the language setting.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from country_translator.data.schemas import Config

logger = logging.getLogger(__name__)

# Default config file path
DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # Environment variable prefix
    ENV_PREFIX = "COUNTRY_TRANSLATOR_"

    # Mapping of environment variables to config fields
    ENV_MAPPINGS = {
        "COUNTRY_TRANSLATOR_LANGUAGE": "language",
        "COUNTRY_TRANSLATOR_COUNTRY_CODES": "country_codes_path",
        "COUNTRY_TRANSLATOR_LANGUAGE_CODES": "language_codes_path",
        "COUNTRY_TRANSLATOR_TRANSLATIONS": "translations_path",
        "COUNTRY_TRANSLATOR_BACKEND": "backend",
        "COUNTRY_TRANSLATOR_SUGGESTION_THRESHOLD": "suggestion_threshold",
        "COUNTRY_TRANSLATOR_SUGGESTION_LIMIT": "suggestion_limit",
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the config manager.

        Args:
            config_path: Path to YAML config file. Uses default if not provided.
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Optional[Config] = None

    def load(self) -> Config:
        """Load configuration from file and environment variables.

        Returns:
            Config object with merged configuration.
        """
        config_dict: dict[str, Any] = {}

        if self.config_path.exists():
            config_dict = self._load_yaml()
            logger.debug(f"Loaded config from: {self.config_path}")
        else:
            logger.debug(f"Config file not found: {self.config_path}, using defaults")

        config_dict = self._apply_env_overrides(config_dict)

        self._config = Config(**config_dict)
        return self._config

    def _load_yaml(self) -> dict[str, Any]:
        """Load configuration from YAML file.

        Returns:
            Dictionary of configuration values.
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Error loading config file: {e}")
            return {}

        if not isinstance(raw_config, dict):
            logger.warning(f"Ignoring config file without a mapping: {self.config_path}")
            return {}

        # Flatten nested structure
        config_dict: dict[str, Any] = {}

        if "language" in raw_config:
            config_dict["language"] = raw_config["language"]

        resources = self._section(raw_config, "resources")
        if resources.get("country_codes"):
            config_dict["country_codes_path"] = resources["country_codes"]
        if resources.get("language_codes"):
            config_dict["language_codes_path"] = resources["language_codes"]
        if resources.get("translations"):
            config_dict["translations_path"] = resources["translations"]

        store = self._section(raw_config, "store")
        if "backend" in store:
            config_dict["backend"] = store["backend"]

        suggestions = self._section(raw_config, "suggestions")
        if "threshold" in suggestions:
            config_dict["suggestion_threshold"] = suggestions["threshold"]
        if "limit" in suggestions:
            config_dict["suggestion_limit"] = suggestions["limit"]

        return config_dict

    def _section(self, raw_config: dict[str, Any], name: str) -> dict[str, Any]:
        """Get a nested section, ignoring it if it is not a mapping."""
        section = raw_config.get(name) or {}
        if not isinstance(section, dict):
            logger.warning(f"Ignoring config section '{name}' without a mapping: {self.config_path}")
            return {}
        return section

    def _apply_env_overrides(self, config_dict: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config.

        Args:
            config_dict: Current configuration dictionary.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, config_key in self.ENV_MAPPINGS.items():
            value = os.environ.get(env_var)
            if value is not None:
                if config_key == "suggestion_threshold":
                    config_dict[config_key] = float(value)
                elif config_key == "suggestion_limit":
                    config_dict[config_key] = int(value)
                else:
                    config_dict[config_key] = value
                logger.debug(f"Override from env: {env_var} -> {config_key}")

        return config_dict

    @property
    def config(self) -> Config:
        """Get the current configuration, loading if needed."""
        if self._config is None:
            self.load()
        return self._config  # type: ignore

    def reload(self) -> Config:
        """Reload configuration from file and environment.

        Returns:
            Freshly loaded Config object.
        """
        self._config = None
        return self.load()

    def save(self, config: Config, path: Optional[str] = None) -> None:
        """Save configuration to a YAML file.

        Args:
            config: Configuration to save.
            path: Path to save to (uses self.config_path if not provided).
        """
        save_path = Path(path) if path else self.config_path

        yaml_config = {
            "language": config.language,
            "resources": {
                "country_codes": config.country_codes_path,
                "language_codes": config.language_codes_path,
                "translations": config.translations_path,
            },
            "store": {
                "backend": config.backend.value,
            },
            "suggestions": {
                "threshold": config.suggestion_threshold,
                "limit": config.suggestion_limit,
            },
        }

        with open(save_path, "w", encoding="utf-8") as f:
            yaml.dump(yaml_config, f, default_flow_style=False, allow_unicode=True)

        logger.info(f"Saved configuration to: {save_path}")
