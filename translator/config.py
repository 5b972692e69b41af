"""
Translator Configuration

Module-specific settings for the translation provider.
"""
import os

# =========================
# Provider Configuration
# =========================

# Credentials and endpoint (fall back to global config names)
TRANSLATOR_SUBSCRIPTION_KEY = os.getenv("TRANSLATOR_SUBSCRIPTION_KEY", os.getenv("TRANSLATOR_KEY", ""))
TRANSLATOR_BASE_URL = os.getenv(
    "TRANSLATOR_BASE_URL",
    os.getenv("TRANSLATOR_ENDPOINT", "https://api.cognitive.microsofttranslator.com")
)
TRANSLATOR_REGION = os.getenv("TRANSLATOR_REGION", os.getenv("TRANSLATOR_LOCATION", ""))

TRANSLATOR_API_VERSION = os.getenv("TRANSLATOR_API_VERSION", "3.0")

# =========================
# Provider Routes
# =========================

ROUTE_TRANSLATE = "/translate"
ROUTE_DETECT = "/detect"
ROUTE_LANGUAGES = "/languages"
ROUTE_TRANSLITERATE = "/transliterate"
ROUTE_BREAK_SENTENCE = "/breaksentence"
ROUTE_DICTIONARY_LOOKUP = "/dictionary/lookup"

# =========================
# Language Defaults
# =========================

TRANSLATOR_DEFAULT_SOURCE_LANGUAGE = os.getenv("TRANSLATOR_DEFAULT_SOURCE_LANGUAGE", "en")

# Dictionary lookups from English go to this language; other sources look up into themselves
TRANSLATOR_DICTIONARY_FALLBACK_LANGUAGE = os.getenv("TRANSLATOR_DICTIONARY_FALLBACK_LANGUAGE", "es")

# =========================
# Connection Settings
# =========================

TRANSLATOR_CONNECTION_TIMEOUT = int(os.getenv("TRANSLATOR_CONNECTION_TIMEOUT", "300"))
TRANSLATOR_CONNECTION_POOL_LIMIT = int(os.getenv("TRANSLATOR_CONNECTION_POOL_LIMIT", "50"))
