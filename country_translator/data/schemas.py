"""Pydantic data models for country name translation."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TranslationStatus(str, Enum):
    """Outcome of a country name translation."""

    TRANSLATED = "translated"
    COUNTRY_NOT_RECOGNIZED = "country_not_recognized"
    LANGUAGE_NOT_RECOGNIZED = "language_not_recognized"
    TRANSLATION_UNAVAILABLE = "translation_unavailable"


class StoreBackend(str, Enum):
    """Available translation store implementations."""

    JSON = "json"
    FIXED = "fixed"


class CodeTableLayout(BaseModel):
    """Field positions of a tab-delimited code file."""

    model_config = ConfigDict(frozen=True)

    name_field: int = Field(0, ge=0, description="Index of the display name field")
    code_field: int = Field(..., ge=0, description="Index of the code field")
    min_fields: int = Field(..., ge=1, description="Minimum number of fields per line")

    @model_validator(mode="after")
    def validate_fields_within_minimum(self) -> "CodeTableLayout":
        """Ensure both fields exist on every line that passes the minimum."""
        if max(self.name_field, self.code_field) >= self.min_fields:
            raise ValueError("name_field and code_field must be below min_fields")
        return self


# Country files carry name, alpha-2, alpha-3 and numeric code.
COUNTRY_LAYOUT = CodeTableLayout(code_field=2, min_fields=4)

# Language files carry name and the ISO 639-1 code.
LANGUAGE_LAYOUT = CodeTableLayout(code_field=1, min_fields=2)


class CodeEntry(BaseModel):
    """A display name paired with its short code."""

    model_config = ConfigDict(frozen=True)

    display_name: str = Field(..., description="Name as authored in the source")
    code: str = Field(..., description="Case-folded code")

    @field_validator("display_name")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Ensure the display name is not empty."""
        if not v or not v.strip():
            raise ValueError("Display name cannot be empty")
        return v.strip()

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Ensure the code is not empty and store it lowercase."""
        if not v or not v.strip():
            raise ValueError("Code cannot be empty")
        return v.strip().lower()


class TranslationRecord(BaseModel):
    """All translations of one country's name."""

    model_config = ConfigDict(frozen=True)

    country_code: str = Field(..., description="Case-folded alpha-3 country code")
    languages: dict[str, str] = Field(
        default_factory=dict, description="Language code to translated name"
    )

    @field_validator("country_code")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        """Ensure the country code is not empty and store it lowercase."""
        if not v or not v.strip():
            raise ValueError("Country code cannot be empty")
        return v.strip().lower()

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: dict[str, str]) -> dict[str, str]:
        """Case-fold language codes, keeping the last value on collisions."""
        return {code.strip().lower(): text for code, text in v.items() if code.strip()}


class TranslationResult(BaseModel):
    """Result of translating a country name into a language."""

    country_name: str = Field(..., description="Country name as queried")
    language_name: str = Field(..., description="Language name as queried")
    status: TranslationStatus = Field(..., description="Outcome of the lookup")
    country_code: Optional[str] = Field(None, description="Resolved country code")
    language_code: Optional[str] = Field(None, description="Resolved language code")
    translation: Optional[str] = Field(None, description="Translated country name")
    suggestions: list[str] = Field(
        default_factory=list, description="Close names when a name was not recognized"
    )

    @property
    def is_translated(self) -> bool:
        """Check if a translation was found."""
        return self.status == TranslationStatus.TRANSLATED


class CatalogStats(BaseModel):
    """Statistics about the loaded code tables and translation store."""

    country_count: int = Field(..., description="Number of country codes")
    language_count: int = Field(..., description="Number of language codes")
    translatable_countries: int = Field(..., description="Countries with translations")
    translation_pairs: int = Field(..., description="Total (country, language) pairs")
    backend: StoreBackend = Field(..., description="Active store backend")
    country_codes_source: Optional[str] = Field(None, description="Country code file")
    language_codes_source: Optional[str] = Field(None, description="Language code file")
    translations_source: Optional[str] = Field(None, description="Translation file")


class Config(BaseModel):
    """Configuration for the country translator."""

    language: str = Field("en", description="Language for output (en=English, de=German)")
    country_codes_path: Optional[str] = Field(
        None, description="Path to the country code file (bundled file if unset)"
    )
    language_codes_path: Optional[str] = Field(
        None, description="Path to the language code file (bundled file if unset)"
    )
    translations_path: Optional[str] = Field(
        None, description="Path to the translation JSON file (bundled file if unset)"
    )
    backend: StoreBackend = Field(StoreBackend.JSON, description="Translation store backend")
    suggestion_threshold: float = Field(
        70.0, ge=0.0, le=100.0, description="Minimum similarity score for suggestions"
    )
    suggestion_limit: int = Field(3, ge=0, le=20, description="Maximum number of suggestions")

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        lang = v.lower().strip()
        if lang in ("de", "german", "deutsch", "de-de", "de_de"):
            return "de"
        return "en"

    @field_validator("backend", mode="before")
    @classmethod
    def validate_backend(cls, v):
        """Accept backend names in any case."""
        if isinstance(v, str):
            return v.lower().strip()
        return v
