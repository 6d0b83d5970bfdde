"""
文字列から始める簡易翻訳 API

to_lang() / from_lang() でテキストを Query に包み、もう一方の言語を
チェーンで指定して translate() で翻訳テキストだけを受け取る。

Usage:
    text = (
        to_lang("This is text, written on a computer, in English.", Language.GERMAN)
        .from_lang(Language.ENGLISH)
        .translate()
    )
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..config import DEFAULT_URL
from .languages import Language
from .translator import translate, translate_async


@dataclass(frozen=True)
class Query:
    """単発の翻訳クエリ"""

    text: str
    source: Language = Language.DETECT
    target: Language = Language.ENGLISH
    base_url: Optional[str] = None
    api_key: Optional[str] = None

    def to_lang(self, language: Language) -> Query:
        return replace(self, target=language)

    def from_lang(self, language: Language) -> Query:
        return replace(self, source=language)

    def url(self, url: str) -> Query:
        return replace(self, base_url=url)

    def key(self, key: str) -> Query:
        return replace(self, api_key=key)

    def translate(self) -> str:
        """
        翻訳テキストを取得

        テキストが空なら通信せずに空文字列を返す。

        Raises:
            TranslateError: translator.translate() と同じ
        """
        if self.text == "":
            return ""
        result = translate(
            self.source, self.target, self.text, self.base_url or DEFAULT_URL, self.api_key
        )
        return result.output

    async def translate_async(self) -> str:
        if self.text == "":
            return ""
        result = await translate_async(
            self.source, self.target, self.text, self.base_url or DEFAULT_URL, self.api_key
        )
        return result.output


def to_lang(text: str, language: Language) -> Query:
    """ターゲット言語を指定して Query を作成（ソースは自動検出）"""
    return Query(text=text, source=Language.DETECT, target=language)


def from_lang(text: str, language: Language) -> Query:
    """ソース言語を指定して Query を作成（ターゲットは英語）"""
    return Query(text=text, source=language, target=Language.default())
