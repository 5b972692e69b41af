"""
Translator Service

FastAPI endpoints forwarding requests to the translation provider.
"""
import logging
from typing import Dict

from fastapi import APIRouter
from pydantic import BaseModel

from core import BadRequestError, Operation, sanitize, execute
from .operations import (
    TRANSLATE,
    DETECT,
    LIST_LANGUAGES,
    LANGUAGE_CODE,
    TRANSLITERATE,
    BREAK_SENTENCE,
    DICTIONARY_LOOKUP,
)
from .schemas import (
    TranslationRequest,
    DetectionRequest,
    TransliterationRequest,
    SentenceBreakRequest,
    DictionaryLookupRequest,
    LanguageLookupRequest,
    TranslateResponse,
    DetectResponse,
    LanguageNameResponse,
    LanguageCodeResponse,
    TransliterateResponse,
    BreakSentenceResponse,
    DictionaryLookupResponse,
)
from .translator_client import call_translator, get_translator_config

logger = logging.getLogger(__name__)

LANGUAGE_NAME_REQUIRED_MESSAGE = "Language name is required"

# Create router
router = APIRouter(tags=["Translator"])


async def run_body_operation(operation: Operation, request: BaseModel):
    """Run a validated request body against the provider."""
    tag = operation.name.upper()
    logger.info(f"[{tag}] START | chars={len(request.text)}")
    result = await execute(operation, request, call_translator, get_translator_config())
    logger.info(f"[{tag}] END")
    return result


def language_lookup(name: str) -> LanguageLookupRequest:
    return LanguageLookupRequest(name=sanitize(name).lower())


# =====================
# API Endpoints
# =====================

@router.post("/translate", response_model=TranslateResponse)
async def translate_endpoint(request: TranslationRequest):
    """
    Translate text to a target language.

    **Request Body:**
    - `text`: Text to translate (required)
    - `targetLanguage`: Target language code, 2-5 letters (required)
    - `sourceLanguage`: Source language code (optional, defaults to `en`)

    **Returns:**
    - `translatedText`: Translated text
    """
    return await run_body_operation(TRANSLATE, request)


@router.post("/detect", response_model=DetectResponse)
async def detect_endpoint(request: DetectionRequest):
    """
    Detect the language of a text.

    **Returns:**
    - `detectedLanguage`: Provider language code
    """
    return await run_body_operation(DETECT, request)


@router.get("/languages", response_model=Dict[str, str])
async def list_languages_endpoint():
    """
    List the languages supported for translation as a code -> name map.
    """
    logger.info("[LISTLANGUAGES] START")
    return await execute(LIST_LANGUAGES, LanguageLookupRequest(), call_translator, get_translator_config())


@router.get("/languages/{name}", response_model=LanguageNameResponse)
async def language_name_endpoint(name: str):
    """
    Look up the display name of a language code.

    Unknown codes return `{"Language Name": null}`.
    """
    lookup = language_lookup(name)
    logger.info(f"[LISTLANGUAGES] START | code={lookup.name}")
    return await execute(LIST_LANGUAGES, lookup, call_translator, get_translator_config())


@router.get("/languageCode/{name}", response_model=LanguageCodeResponse)
async def language_code_endpoint(name: str):
    """
    Find the code of a language from its English or native name (case-insensitive).

    **Errors:**
    - 400 when the name is blank
    - 404 when no language matches
    """
    lookup = language_lookup(name)
    if not lookup.name:
        raise BadRequestError(LANGUAGE_NAME_REQUIRED_MESSAGE)

    logger.info(f"[LANGUAGECODE] START | name={lookup.name}")
    return await execute(LANGUAGE_CODE, lookup, call_translator, get_translator_config())


@router.post("/transliterate", response_model=TransliterateResponse)
async def transliterate_endpoint(request: TransliterationRequest):
    """
    Convert text from one script to another.

    **Request Body:**
    - `text`, `language`, `fromScript`, `toScript` (all required)
    """
    return await run_body_operation(TRANSLITERATE, request)


@router.post("/breaksentence", response_model=BreakSentenceResponse)
async def break_sentence_endpoint(request: SentenceBreakRequest):
    """
    Split text into sentences.

    **Returns:**
    - `sentences`: Length of each sentence
    """
    return await run_body_operation(BREAK_SENTENCE, request)


@router.post("/dictionarylookup", response_model=DictionaryLookupResponse)
async def dictionary_lookup_endpoint(request: DictionaryLookupRequest):
    """
    Look up dictionary translations of a word.

    English words are looked up into Spanish; any other language into itself.
    """
    return await run_body_operation(DICTIONARY_LOOKUP, request)
