"""
Global Configuration

Shared settings used across all modules.
Module-specific settings are in each module's config.py file.

All settings can be overridden via environment variables or a .env file.
See .env.example for a complete list of configurable variables.
"""
import os
from dotenv import load_dotenv

# Load .env file before any os.getenv() calls
load_dotenv()

# =========================
# Translator Provider
# =========================

TRANSLATOR_KEY = os.getenv("TRANSLATOR_KEY", "")
TRANSLATOR_ENDPOINT = os.getenv("TRANSLATOR_ENDPOINT", "https://api.cognitive.microsofttranslator.com")
TRANSLATOR_LOCATION = os.getenv("TRANSLATOR_LOCATION", "")

# =========================
# Server Settings
# =========================

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# =========================
# Language Code Constraints
# =========================

LANGUAGE_CODE_MIN_LENGTH = 2
LANGUAGE_CODE_MAX_LENGTH = 5
