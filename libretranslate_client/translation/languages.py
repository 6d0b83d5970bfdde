"""
翻訳言語の定義

翻訳 API が入出力に受け付ける言語の閉じた集合と、言語コード・英語名との
相互変換を提供。ロケール表記（"fr-FR" など）の正規化には langcodes
ライブラリを使用する。
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

import langcodes

from .exceptions import FormatError

# 英語表示名
_PRETTY_NAMES = {
    "auto": "Detect",
    "en": "English",
    "ar": "Arabic",
    "zh": "Chinese",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "ja": "Japanese",
    "pt": "Portuguese",
    "ru": "Russian",
    "es": "Spanish",
}


class Language(Enum):
    """
    翻訳の入出力に使用できる言語

    値は API に送信する言語コード。DETECT はソース言語を自動検出する
    ための特別な値で、翻訳結果のソース言語として現れることはない。

    Examples:
        >>> Language.parse("FRENCH")
        <Language.FRENCH: 'fr'>
        >>> Language.parse("zh").pretty
        'Chinese'
        >>> str(Language.GERMAN)
        'de'
    """

    DETECT = "auto"
    ENGLISH = "en"
    ARABIC = "ar"
    CHINESE = "zh"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    JAPANESE = "ja"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SPANISH = "es"

    @property
    def code(self) -> str:
        """言語コード（例: "ar", "de"）。DETECT は "auto" """
        return self.value

    @property
    def pretty(self) -> str:
        """英語での言語名（例: "Arabic", "German"）"""
        return _PRETTY_NAMES[self.value]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> Language:
        """ターゲット言語の既定値"""
        return cls.ENGLISH

    @classmethod
    def translatable(cls) -> List[Language]:
        """
        翻訳可能な言語の一覧（DETECT を除く）

        言語検出の許可リストとしても使用する。
        """
        return [lang for lang in cls if lang is not cls.DETECT]

    @classmethod
    def parse(cls, text: str) -> Language:
        """
        言語コードまたは英語名から Language を取得

        大文字・小文字は区別しない。

        Args:
            text: "en", "French", "AUTO" など

        Returns:
            対応する Language

        Raises:
            FormatError: どの言語にも一致しない場合
        """
        lang = _LOOKUP.get(text.strip().lower())
        if lang is None:
            raise FormatError(text)
        return lang

    @classmethod
    def from_str(cls, text: str) -> Language:
        """parse() の別名"""
        return cls.parse(text)

    @classmethod
    def from_locale(cls, tag: str) -> Language:
        """
        BCP-47 / ロケール表記から Language を取得

        langcodes で言語サブタグ（ISO 639-1）に正規化してから解決する。

        Args:
            tag: "fr-FR", "zh-Hant", "pt_BR" など

        Returns:
            対応する Language

        Raises:
            FormatError: タグが不正、または翻訳対象外の言語の場合

        Examples:
            >>> Language.from_locale("fr-FR")
            <Language.FRENCH: 'fr'>
        """
        try:
            language = langcodes.Language.get(tag.replace("_", "-")).language
        except ValueError as e:
            raise FormatError(tag) from e

        lang = _LOOKUP.get(language or "")
        if lang is None or lang is cls.DETECT:
            raise FormatError(tag)
        return lang


def _build_lookup() -> Dict[str, Language]:
    lookup: Dict[str, Language] = {}
    for lang in Language:
        lookup[lang.code] = lang
        lookup[lang.pretty.lower()] = lang
    return lookup


_LOOKUP = _build_lookup()
