"""Canonical re-exports for the libretranslate-client public API surface.

`libretranslate_client` 直下から主要シンボルを取得できるようにする。

- translate / translate_async: 翻訳 API 呼び出し
- TranslationBuilder, Query: メソッドチェーンによるリクエスト組み立て
- Language: 翻訳言語の列挙
- detect: 言語検出
"""

from .translation import (
    DetectError,
    FormatError,
    HttpError,
    Language,
    LanguageDetector,
    LanguageError,
    LengthError,
    LibreTranslator,
    ParseError,
    Query,
    TranslateError,
    Translation,
    TranslationBuilder,
    detect,
    from_lang,
    to_lang,
    translate,
    translate_async,
    translate_url,
)

__all__ = [
    "Language",
    "Translation",
    "TranslationBuilder",
    "Query",
    "LibreTranslator",
    "LanguageDetector",
    "translate",
    "translate_async",
    "translate_url",
    "detect",
    "to_lang",
    "from_lang",
    "LanguageError",
    "FormatError",
    "TranslateError",
    "HttpError",
    "ParseError",
    "DetectError",
    "LengthError",
]
