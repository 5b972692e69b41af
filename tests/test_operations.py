"""
Tests for core/pipeline.py and translator/operations.py - building provider
requests and projecting provider envelopes.
"""
import pytest
from unittest.mock import AsyncMock
from urllib.parse import urlsplit, parse_qs

from core import NotFoundError, UpstreamError, build_request, execute
from translator.operations import (
    TRANSLATE,
    DETECT,
    LIST_LANGUAGES,
    LANGUAGE_CODE,
    TRANSLITERATE,
    BREAK_SENTENCE,
    DICTIONARY_LOOKUP,
    catalog_names,
    find_language_code,
)
from translator.schemas import (
    TranslationRequest,
    DetectionRequest,
    TransliterationRequest,
    SentenceBreakRequest,
    DictionaryLookupRequest,
    LanguageLookupRequest,
)


def query_of(url):
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query).items()}


def path_of(url):
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


class TestBuildRequest:
    """Tests for build_request() across operations."""

    def test_translate_defaults_source_to_english(self, translator_config):
        request = TranslationRequest.model_validate({"text": "Hello", "targetLanguage": "fr"})
        built = build_request(TRANSLATE, request, translator_config)

        assert built.method == "POST"
        assert path_of(built.url) == "https://translator.test/translate"
        assert query_of(built.url) == {"api-version": "3.0", "from": "en", "to": "fr"}
        assert built.payload == [{"text": "Hello"}]

    def test_translate_with_source_language(self, translator_config):
        request = TranslationRequest.model_validate({"text": "Hola", "targetLanguage": "fr", "sourceLanguage": "es"})
        built = build_request(TRANSLATE, request, translator_config)

        assert query_of(built.url)["from"] == "es"

    def test_detect(self, translator_config):
        request = DetectionRequest.model_validate({"text": "Bonjour"})
        built = build_request(DETECT, request, translator_config)

        assert path_of(built.url) == "https://translator.test/detect"
        assert query_of(built.url) == {"api-version": "3.0"}
        assert built.payload == [{"text": "Bonjour"}]

    def test_list_languages_is_bodiless_get(self, translator_config):
        built = build_request(LIST_LANGUAGES, LanguageLookupRequest(), translator_config)

        assert built.method == "GET"
        assert built.payload is None
        assert path_of(built.url) == "https://translator.test/languages"
        assert query_of(built.url) == {"api-version": "3.0"}

    def test_language_code_uses_languages_route(self, translator_config):
        built = build_request(LANGUAGE_CODE, LanguageLookupRequest(name="french"), translator_config)

        assert built.method == "GET"
        assert path_of(built.url) == "https://translator.test/languages"

    def test_transliterate_query(self, translator_config):
        body = {"text": "こんにちは", "language": "ja", "fromScript": "Jpan", "toScript": "Latn"}
        built = build_request(TRANSLITERATE, TransliterationRequest.model_validate(body), translator_config)

        assert path_of(built.url) == "https://translator.test/transliterate"
        assert query_of(built.url) == {
            "api-version": "3.0", "language": "ja", "fromScript": "Jpan", "toScript": "Latn"
        }

    def test_transliterate_script_values_are_encoded(self, translator_config):
        body = {"text": "x", "language": "ja", "fromScript": "Jpan&to=xx", "toScript": "La tn"}
        built = build_request(TRANSLITERATE, TransliterationRequest.model_validate(body), translator_config)

        assert "Jpan%26to%3Dxx" in built.url
        assert query_of(built.url)["fromScript"] == "Jpan&to=xx"
        assert query_of(built.url)["toScript"] == "La tn"
        assert "to" not in query_of(built.url)

    def test_break_sentence(self, translator_config):
        body = {"text": "Hello world! How are you?", "language": "en"}
        built = build_request(BREAK_SENTENCE, SentenceBreakRequest.model_validate(body), translator_config)

        assert path_of(built.url) == "https://translator.test/breaksentence"
        assert query_of(built.url) == {"api-version": "3.0"}

    def test_dictionary_lookup_from_english_targets_spanish(self, translator_config):
        request = DictionaryLookupRequest.model_validate({"text": "fly", "language": "en"})
        built = build_request(DICTIONARY_LOOKUP, request, translator_config)

        assert request.to_language == "es"
        assert path_of(built.url) == "https://translator.test/dictionary/lookup"
        assert query_of(built.url) == {"api-version": "3.0", "from": "en", "to": "es"}

    def test_dictionary_lookup_other_language_mirrors_source(self, translator_config):
        request = DictionaryLookupRequest.model_validate({"text": "voler", "language": "fr"})
        built = build_request(DICTIONARY_LOOKUP, request, translator_config)

        assert request.to_language == "fr"
        assert query_of(built.url)["to"] == "fr"


class TestLanguageCatalog:
    """Tests for catalog reshaping and reverse name lookup."""

    def test_catalog_names_keeps_provider_order(self, language_catalog):
        names = catalog_names(language_catalog["translation"])
        assert list(names.items()) == [
            ("de", "German"),
            ("fr", "French"),
            ("es", "Spanish"),
            ("zh-Hans", "Chinese Simplified"),
        ]

    @pytest.mark.parametrize("name", ["french", "French", "FRENCH", "français", "FRANÇAIS".lower()])
    def test_find_by_name_or_native_name(self, language_catalog, name):
        assert find_language_code(language_catalog["translation"], name) == "fr"

    def test_find_returns_first_match(self):
        catalog = {
            "nb": {"name": "Norwegian", "nativeName": "Norsk Bokmål"},
            "no": {"name": "Norwegian", "nativeName": "Norsk"},
        }
        assert find_language_code(catalog, "norwegian") == "nb"

    def test_unknown_name_raises_not_found(self, language_catalog):
        with pytest.raises(NotFoundError) as exc_info:
            find_language_code(language_catalog["translation"], "klingon")

        assert exc_info.value.message == "Language not found"
        assert exc_info.value.status_code == 404


class TestExecute:
    """Tests for execute() - call + projection + error mapping."""

    @pytest.mark.asyncio
    async def test_translate_projection(self, translator_config):
        call = AsyncMock(return_value=[{"translations": [{"text": "Bonjour", "to": "fr"}]}])
        request = TranslationRequest.model_validate({"text": "Hello", "targetLanguage": "fr"})

        result = await execute(TRANSLATE, request, call, translator_config)

        assert result.model_dump(by_alias=True) == {"translatedText": "Bonjour"}
        call.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_detect_projection(self, translator_config):
        call = AsyncMock(return_value=[{"language": "de", "score": 1.0, "isTranslationSupported": True}])
        request = DetectionRequest.model_validate({"text": "Guten Tag"})

        result = await execute(DETECT, request, call, translator_config)

        assert result.model_dump(by_alias=True) == {"detectedLanguage": "de"}

    @pytest.mark.asyncio
    async def test_list_languages_projection(self, translator_config, language_catalog):
        call = AsyncMock(return_value=language_catalog)

        result = await execute(LIST_LANGUAGES, LanguageLookupRequest(), call, translator_config)

        assert result == {"de": "German", "fr": "French", "es": "Spanish", "zh-Hans": "Chinese Simplified"}

    @pytest.mark.asyncio
    async def test_single_code_lookup(self, translator_config, language_catalog):
        call = AsyncMock(return_value=language_catalog)

        result = await execute(LIST_LANGUAGES, LanguageLookupRequest(name="de"), call, translator_config)

        assert result.model_dump(by_alias=True) == {"Language Name": "German"}

    @pytest.mark.asyncio
    async def test_single_code_lookup_unknown_is_null(self, translator_config, language_catalog):
        call = AsyncMock(return_value=language_catalog)

        result = await execute(LIST_LANGUAGES, LanguageLookupRequest(name="xx"), call, translator_config)

        assert result.model_dump(by_alias=True) == {"Language Name": None}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["zh-hans", "zh-Hans", "ZH-HANS"])
    async def test_single_code_lookup_ignores_case(self, translator_config, language_catalog, code):
        call = AsyncMock(return_value=language_catalog)

        result = await execute(LIST_LANGUAGES, LanguageLookupRequest(name=code), call, translator_config)

        assert result.model_dump(by_alias=True) == {"Language Name": "Chinese Simplified"}

    @pytest.mark.asyncio
    async def test_transliterate_projection(self, translator_config):
        call = AsyncMock(return_value=[{"text": "konnnichiha", "script": "Latn"}])
        body = {"text": "こんにちは", "language": "ja", "fromScript": "Jpan", "toScript": "Latn"}

        result = await execute(TRANSLITERATE, TransliterationRequest.model_validate(body), call, translator_config)

        assert result.model_dump(by_alias=True) == {"transliteratedText": "konnnichiha"}

    @pytest.mark.asyncio
    async def test_break_sentence_projection(self, translator_config):
        call = AsyncMock(return_value=[{"sentLen": [12, 13]}])
        body = {"text": "Hello world! How are you?", "language": "en"}

        result = await execute(BREAK_SENTENCE, SentenceBreakRequest.model_validate(body), call, translator_config)

        assert result.model_dump() == {"sentences": [12, 13]}

    @pytest.mark.asyncio
    async def test_dictionary_entries_passed_through(self, translator_config):
        entries = [
            {"normalizedTarget": "volar", "displayTarget": "volar", "posTag": "VERB",
             "confidence": 0.45, "prefixWord": "", "backTranslations": []},
        ]
        call = AsyncMock(return_value=[{"normalizedSource": "fly", "displaySource": "fly", "translations": entries}])
        request = DictionaryLookupRequest.model_validate({"text": "fly", "language": "en"})

        result = await execute(DICTIONARY_LOOKUP, request, call, translator_config)

        assert result.entries == entries

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self, translator_config):
        call = AsyncMock(side_effect=UpstreamError("The target language is not valid.", upstream_status=400))
        request = TranslationRequest.model_validate({"text": "Hello", "targetLanguage": "xx"})

        with pytest.raises(UpstreamError) as exc_info:
            await execute(TRANSLATE, request, call, translator_config)

        assert exc_info.value.message == "The target language is not valid."

    @pytest.mark.asyncio
    async def test_unexpected_call_error_becomes_upstream_error(self, translator_config):
        call = AsyncMock(side_effect=RuntimeError("connection reset"))
        request = DetectionRequest.model_validate({"text": "Hello"})

        with pytest.raises(UpstreamError) as exc_info:
            await execute(DETECT, request, call, translator_config)

        assert exc_info.value.message == "connection reset"
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("envelope", [[], {}, [{}], [{"translations": []}], None])
    async def test_malformed_envelope(self, translator_config, envelope):
        call = AsyncMock(return_value=envelope)
        request = TranslationRequest.model_validate({"text": "Hello", "targetLanguage": "fr"})

        with pytest.raises(UpstreamError) as exc_info:
            await execute(TRANSLATE, request, call, translator_config)

        assert exc_info.value.message == "Unexpected response from translator service"

    @pytest.mark.asyncio
    async def test_language_code_not_found_propagates(self, translator_config, language_catalog):
        call = AsyncMock(return_value=language_catalog)

        with pytest.raises(NotFoundError):
            await execute(LANGUAGE_CODE, LanguageLookupRequest(name="elvish"), call, translator_config)
