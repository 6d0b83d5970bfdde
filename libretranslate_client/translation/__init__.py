"""
LibreTranslate 翻訳クライアント

Usage:
    from libretranslate_client.translation import Language, translate

    # ソース言語を指定
    result = translate(Language.ENGLISH, Language.JAPANESE, "Hello")
    print(result.output)

    # ソース言語を自動検出
    result = translate(Language.DETECT, Language.ENGLISH, "le texte français.")
    print(result.source.pretty)  # "French"

    # ビルダー
    result = (
        TranslationBuilder()
        .url("https://libretranslate.de/")
        .to_lang(Language.GERMAN)
        .text("Good morning")
        .translate()
    )
"""

from __future__ import annotations

from .builder import TranslationBuilder
from .detector import LanguageDetector, detect
from .exceptions import (
    DetectError,
    FormatError,
    HttpError,
    LanguageError,
    LengthError,
    ParseError,
    TranslateError,
)
from .languages import Language
from .query import Query, from_lang, to_lang
from .result import Translation
from .translator import LibreTranslator, translate, translate_async, translate_url

__all__ = [
    # Core classes
    "Language",
    "Translation",
    "TranslationBuilder",
    "Query",
    "LibreTranslator",
    "LanguageDetector",
    # Functions
    "translate",
    "translate_async",
    "translate_url",
    "detect",
    "to_lang",
    "from_lang",
    # Exceptions
    "LanguageError",
    "FormatError",
    "TranslateError",
    "HttpError",
    "ParseError",
    "DetectError",
    "LengthError",
]
