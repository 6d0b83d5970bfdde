"""
翻訳リクエストのビルダー

エンドポイント・言語・テキスト・API キーをメソッドチェーンで組み立て、
最後に translate() でリクエストを発行する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..config import DEFAULT_URL
from .languages import Language
from .result import Translation
from .translator import translate, translate_async, translate_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationBuilder:
    """
    翻訳リクエストのビルダー

    各セッターは値を更新した新しいビルダーを返し、元のビルダーは変更しない。
    セッターでは検証を行わず、検証は translate() 時に行う。

    Examples:
        >>> result = (
        ...     TranslationBuilder()
        ...     .url("https://libretranslate.de/")
        ...     .from_lang(Language.ENGLISH)
        ...     .to_lang(Language.FRENCH)
        ...     .text("Amazing!")
        ...     .translate()
        ... )
        >>> result.output
        'Incroyable !'
    """

    base_url: str = DEFAULT_URL
    source: Language = Language.DETECT
    target: Language = Language.ENGLISH
    input: str = ""
    api_key: Optional[str] = None

    def url(self, url: str) -> TranslationBuilder:
        return replace(self, base_url=url)

    def from_lang(self, lang: Language) -> TranslationBuilder:
        return replace(self, source=lang)

    def to_lang(self, lang: Language) -> TranslationBuilder:
        return replace(self, target=lang)

    def text(self, text: str) -> TranslationBuilder:
        return replace(self, input=text)

    def key(self, key: str) -> TranslationBuilder:
        return replace(self, api_key=key)

    def _empty_result(self) -> Translation:
        logger.debug("Empty input, skipping request")
        return Translation(
            url=translate_url(self.base_url),
            source=self.source,
            target=self.target,
            input="",
            output="",
        )

    def translate(self) -> Translation:
        """
        リクエストを発行して翻訳

        入力が空文字列の場合は通信せずに空の出力を返す。言語検出も行わない
        ため、結果の source は指定どおり（DETECT のままの場合がある）。

        Raises:
            TranslateError: translator.translate() と同じ
        """
        if self.input == "":
            return self._empty_result()
        return translate(self.source, self.target, self.input, self.base_url, self.api_key)

    async def translate_async(self) -> Translation:
        """非同期翻訳"""
        if self.input == "":
            return self._empty_result()
        return await translate_async(
            self.source, self.target, self.input, self.base_url, self.api_key
        )
