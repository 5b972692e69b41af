"""
Translator Service Module

Provides translation, detection, language catalog, transliteration,
sentence-break and dictionary endpoints backed by the translation provider.
"""

from .service import router

__all__ = ["router"]
