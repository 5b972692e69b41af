"""
Pydantic schemas for the translator API.

Wire names are camelCase; Python attributes are snake_case with aliases.
Request records validate and sanitize their own fields. Absent fields are
validated as null, so each field's rule reports its own message for them.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List, Dict, Any

from core.validators import validate_text, validate_language_code, validate_string
from .config import (
    TRANSLATOR_DEFAULT_SOURCE_LANGUAGE,
    TRANSLATOR_DICTIONARY_FALLBACK_LANGUAGE,
)


class TranslatorModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# =========================
# Request Records
# =========================

class RequestRecord(TranslatorModel):
    """Base for JSON request bodies."""

    @model_validator(mode="before")
    @classmethod
    def fill_absent_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        filled = {
            field.alias or name: None
            for name, field in cls.model_fields.items()
            if name not in data
        }
        filled.update(data)
        return filled


class TextRequest(RequestRecord):
    """Base for bodies carrying a `text` field."""
    text: str = Field(..., description="Text to process")

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, value: Any) -> str:
        return validate_text(value)


class TranslationRequest(TextRequest):
    """Validated /translate body."""
    text: str = Field(..., description="Text to translate")
    target_language: str = Field(
        ...,
        alias="targetLanguage",
        description="Target language code"
    )
    source_language: str = Field(
        TRANSLATOR_DEFAULT_SOURCE_LANGUAGE,
        alias="sourceLanguage",
        description="Source language code (defaults to English when absent or null)"
    )

    @field_validator("target_language", mode="before")
    @classmethod
    def check_target_language(cls, value: Any) -> str:
        return validate_language_code(value, "Target language")

    @field_validator("source_language", mode="before")
    @classmethod
    def check_source_language(cls, value: Any) -> str:
        if value is None:
            return TRANSLATOR_DEFAULT_SOURCE_LANGUAGE
        return validate_language_code(value, "Source language")


class DetectionRequest(TextRequest):
    """Validated /detect body."""
    text: str = Field(..., description="Text whose language is detected")


class LanguageTextRequest(TextRequest):
    """Base for bodies carrying `text` plus the `language` it is written in."""
    language: str = Field(..., description="Language code of the text")

    @field_validator("language", mode="before")
    @classmethod
    def check_language(cls, value: Any) -> str:
        return validate_language_code(value, "Language")


class TransliterationRequest(LanguageTextRequest):
    """Validated /transliterate body."""
    text: str = Field(..., description="Text to transliterate")
    from_script: str = Field(
        ...,
        alias="fromScript",
        description="Script of the input text"
    )
    to_script: str = Field(
        ...,
        alias="toScript",
        description="Script to convert to"
    )

    @field_validator("from_script", mode="before")
    @classmethod
    def check_from_script(cls, value: Any) -> str:
        return validate_string(value, "Source script is required")

    @field_validator("to_script", mode="before")
    @classmethod
    def check_to_script(cls, value: Any) -> str:
        return validate_string(value, "Target script is required")


class SentenceBreakRequest(LanguageTextRequest):
    """Validated /breaksentence body."""
    text: str = Field(..., description="Text to split into sentences")


class DictionaryLookupRequest(LanguageTextRequest):
    """Validated /dictionarylookup body."""
    text: str = Field(..., description="Word or phrase to look up")

    @property
    def to_language(self) -> str:
        # English has no en->en dictionary, so look up its Spanish translations
        if self.language == "en":
            return TRANSLATOR_DICTIONARY_FALLBACK_LANGUAGE
        return self.language


class LanguageLookupRequest(TranslatorModel):
    """Language name or code taken from the path."""
    name: Optional[str] = Field(None, description="Lowercased, trimmed name or code")


# =========================
# Responses
# =========================

class TranslateResponse(TranslatorModel):
    translated_text: str = Field(..., alias="translatedText")


class DetectResponse(TranslatorModel):
    detected_language: str = Field(..., alias="detectedLanguage")


class LanguageNameResponse(TranslatorModel):
    language_name: Optional[str] = Field(None, alias="Language Name")


class LanguageCodeResponse(TranslatorModel):
    language_code: str = Field(..., alias="languageCode")


class TransliterateResponse(TranslatorModel):
    transliterated_text: str = Field(..., alias="transliteratedText")


class BreakSentenceResponse(TranslatorModel):
    sentences: List[int] = Field(..., description="Length of each sentence, in characters")


class DictionaryLookupResponse(TranslatorModel):
    entries: List[Dict[str, Any]] = Field(..., description="Provider dictionary translations, unmodified")
