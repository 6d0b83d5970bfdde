"""
LibreTranslate 互換 API クライアント

requests を使用して翻訳エンドポイントに JSON を POST し、レスポンスを
Translation に変換する。ソース言語が DETECT の場合は langdetect で
言語を推定してからリクエストする。
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import requests

from ..config import DEFAULT_URL, MAX_INPUT_CHARS
from .detector import get_detector
from .exceptions import HttpError, LengthError, ParseError
from .languages import Language
from .result import Translation

logger = logging.getLogger(__name__)

_MISSING_TRANSLATION = "Unable to find translatedText in parsed JSON"


def translate_url(url: str) -> str:
    """
    ベース URL を /translate エンドポイントに正規化

    Examples:
        >>> translate_url("https://libretranslate.com/")
        'https://libretranslate.com/translate'
        >>> translate_url("https://libretranslate.com")
        'https://libretranslate.com/translate'
    """
    stripped = url.rstrip("/")
    if stripped.endswith("/translate"):
        return stripped
    if url.endswith("/"):
        return url + "translate"
    return url + "/translate"


def build_payload(
    text: str,
    source: Language,
    target: Language,
    api_key: Optional[str] = None,
) -> Dict[str, str]:
    """リクエストボディを構築（api_key は指定時のみ含める）"""
    payload = {
        "q": text,
        "source": source.code,
        "target": target.code,
    }
    if api_key is not None:
        payload["api_key"] = api_key
    return payload


def parse_response(body: str) -> str:
    """
    レスポンスボディから翻訳テキストを取り出す

    サービスが返す error フィールドは translatedText より優先する。

    Raises:
        ParseError: JSON として解析できない、error を含む、
            または translatedText が見つからない場合
    """
    try:
        data: Any = json.loads(body)
    except ValueError as e:
        raise ParseError(str(e)) from e

    if not isinstance(data, dict):
        raise ParseError(_MISSING_TRANSLATION)

    error = data.get("error")
    if isinstance(error, str):
        raise ParseError(error)

    output = data.get("translatedText")
    if not isinstance(output, str):
        raise ParseError(_MISSING_TRANSLATION)
    return output


def translate(
    source: Language,
    target: Language,
    text: str,
    url: str = DEFAULT_URL,
    api_key: Optional[str] = None,
) -> Translation:
    """
    テキストを翻訳

    Args:
        source: ソース言語。Language.DETECT なら自動検出
        target: ターゲット言語
        text: 翻訳対象テキスト
        url: 翻訳サービスのベース URL
        api_key: API キー（任意）

    Returns:
        Translation

    Raises:
        LengthError: テキストが MAX_INPUT_CHARS 文字以上の場合（通信前に判定）
        DetectError: 言語検出に失敗した場合
        HttpError: 通信に失敗した場合
        ParseError: レスポンスを解釈できない場合
    """
    if len(text) >= MAX_INPUT_CHARS:
        raise LengthError(len(text), MAX_INPUT_CHARS)

    if source is Language.DETECT:
        source = get_detector().detect(text)

    endpoint = translate_url(url)
    payload = build_payload(text, source, target, api_key)
    logger.debug("POST %s (%s -> %s)", endpoint, source.code, target.code)

    try:
        response = requests.post(endpoint, json=payload)
        body = response.text
    except requests.RequestException as e:
        raise HttpError(str(e)) from e

    output = parse_response(body)

    return Translation(
        url=endpoint,
        source=source,
        target=target,
        input=text,
        output=output,
    )


async def translate_async(
    source: Language,
    target: Language,
    text: str,
    url: str = DEFAULT_URL,
    api_key: Optional[str] = None,
) -> Translation:
    """
    非同期翻訳

    translate() を asyncio.to_thread でワーカースレッド上で実行する。
    """
    return await asyncio.to_thread(translate, source, target, text, url, api_key)


class LibreTranslator:
    """
    エンドポイントと API キーを保持する翻訳クライアント

    Examples:
        >>> translator = LibreTranslator("https://libretranslate.de/")
        >>> result = translator.translate("Amazing!", Language.ENGLISH, Language.FRENCH)
        >>> result.url
        'https://libretranslate.de/translate'
    """

    def __init__(self, url: str = DEFAULT_URL, api_key: Optional[str] = None):
        self.url = url
        self.api_key = api_key

    @property
    def endpoint(self) -> str:
        """正規化済みのエンドポイント URL"""
        return translate_url(self.url)

    def translate(
        self,
        text: str,
        source: Language = Language.DETECT,
        target: Language = Language.ENGLISH,
    ) -> Translation:
        """テキストを翻訳（例外は translate() と同じ）"""
        return translate(source, target, text, self.url, self.api_key)

    async def translate_async(
        self,
        text: str,
        source: Language = Language.DETECT,
        target: Language = Language.ENGLISH,
    ) -> Translation:
        """非同期翻訳"""
        return await translate_async(source, target, text, self.url, self.api_key)
