"""
Translator operations.

Each Operation pairs the provider route and query/payload builders with a
projector that reshapes the provider envelope into this service's response.
"""
import logging
from typing import Any, Dict, List

from core import Operation, NotFoundError
from .config import (
    ROUTE_TRANSLATE,
    ROUTE_DETECT,
    ROUTE_LANGUAGES,
    ROUTE_TRANSLITERATE,
    ROUTE_BREAK_SENTENCE,
    ROUTE_DICTIONARY_LOOKUP,
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

logger = logging.getLogger(__name__)

LANGUAGE_NOT_FOUND_MESSAGE = "Language not found"


def text_payload(request) -> List[Dict[str, str]]:
    return [{"text": request.text}]


def first_result(data: Any) -> Dict[str, Any]:
    """First per-text result of a provider envelope."""
    if not isinstance(data, list):
        raise TypeError(f"expected a list envelope, got {type(data).__name__}")
    return data[0]


# =========================
# Language Catalog
# =========================

def catalog_entries(data: Any) -> Dict[str, Dict[str, Any]]:
    """The 'translation' section of a /languages envelope, in provider order."""
    catalog = data["translation"]
    if not isinstance(catalog, dict):
        raise TypeError("translation catalog is not an object")
    return catalog


def catalog_names(catalog: Dict[str, Dict[str, Any]]) -> Dict[str, str]:
    """Reshape code -> entry into code -> display name, keeping provider order."""
    return {code: entry["name"] for code, entry in catalog.items()}


def find_language_code(catalog: Dict[str, Dict[str, Any]], name: str) -> str:
    """
    Case-insensitive search over each entry's name and nativeName.

    Returns:
        The first matching code, in catalog order

    Raises:
        NotFoundError: If no entry matches either field
    """
    wanted = name.lower()
    for code, entry in catalog.items():
        if (entry.get("name") or "").lower() == wanted or (entry.get("nativeName") or "").lower() == wanted:
            return code
    raise NotFoundError(LANGUAGE_NOT_FOUND_MESSAGE)


# =========================
# Projectors
# =========================

def project_translation(data: Any, request: TranslationRequest) -> TranslateResponse:
    return TranslateResponse(translated_text=first_result(data)["translations"][0]["text"])


def project_detection(data: Any, request: DetectionRequest) -> DetectResponse:
    return DetectResponse(detected_language=first_result(data)["language"])


def project_languages(data: Any, request: LanguageLookupRequest):
    """Full code -> name map, or the single name for a requested code."""
    names = catalog_names(catalog_entries(data))
    if request.name is None:
        return names

    # Catalog codes are mixed case (zh-Hans); the path code arrives lowercased.
    # An unknown code yields null rather than 404, matching the listing's contract
    wanted = request.name.lower()
    name = next((n for code, n in names.items() if code.lower() == wanted), None)
    if name is None:
        logger.warning(f"[LANGUAGES] UNKNOWN_CODE | code={request.name}")
    return LanguageNameResponse(language_name=name)


def project_language_code(data: Any, request: LanguageLookupRequest) -> LanguageCodeResponse:
    return LanguageCodeResponse(language_code=find_language_code(catalog_entries(data), request.name))


def project_transliteration(data: Any, request: TransliterationRequest) -> TransliterateResponse:
    return TransliterateResponse(transliterated_text=first_result(data)["text"])


def project_sentences(data: Any, request: SentenceBreakRequest) -> BreakSentenceResponse:
    return BreakSentenceResponse(sentences=first_result(data)["sentLen"])


def project_dictionary(data: Any, request: DictionaryLookupRequest) -> DictionaryLookupResponse:
    return DictionaryLookupResponse(entries=first_result(data)["translations"])


# =========================
# Operation Descriptors
# =========================

TRANSLATE = Operation(
    name="translate",
    method="POST",
    route=ROUTE_TRANSLATE,
    query=lambda r: {"from": r.source_language, "to": r.target_language},
    payload=text_payload,
    project=project_translation,
)

DETECT = Operation(
    name="detect",
    method="POST",
    route=ROUTE_DETECT,
    payload=text_payload,
    project=project_detection,
)

LIST_LANGUAGES = Operation(
    name="listLanguages",
    method="GET",
    route=ROUTE_LANGUAGES,
    project=project_languages,
)

LANGUAGE_CODE = Operation(
    name="languageCode",
    method="GET",
    route=ROUTE_LANGUAGES,
    project=project_language_code,
)

TRANSLITERATE = Operation(
    name="transliterate",
    method="POST",
    route=ROUTE_TRANSLITERATE,
    query=lambda r: {"language": r.language, "fromScript": r.from_script, "toScript": r.to_script},
    payload=text_payload,
    project=project_transliteration,
)

BREAK_SENTENCE = Operation(
    name="breakSentence",
    method="POST",
    route=ROUTE_BREAK_SENTENCE,
    payload=text_payload,
    project=project_sentences,
)

DICTIONARY_LOOKUP = Operation(
    name="dictionaryLookup",
    method="POST",
    route=ROUTE_DICTIONARY_LOOKUP,
    query=lambda r: {"from": r.language, "to": r.to_language},
    payload=text_payload,
    project=project_dictionary,
)
