"""
言語検出

langdetect ライブラリを使用してテキストの言語を推定する。
langdetect は全プロファイルで判定し、翻訳可能な言語（許可リスト）以外の
結果は DetectError として扱う（近い言語への読み替えは行わない）。

Note:
    短い文や複数言語が混在する文では検出精度が低い。これは langdetect の
    統計モデルの限界であり、このモジュールでは補正しない。
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from langdetect.detector_factory import PROFILES_DIRECTORY, DetectorFactory
from langdetect.lang_detect_exception import LangDetectException

from .exceptions import DetectError
from .languages import Language

logger = logging.getLogger(__name__)

# langdetect のプロファイル名 → Language
_PROFILE_LANGUAGES: Dict[str, Language] = {
    "en": Language.ENGLISH,
    "ar": Language.ARABIC,
    "zh-cn": Language.CHINESE,
    "zh-tw": Language.CHINESE,
    "fr": Language.FRENCH,
    "de": Language.GERMAN,
    "it": Language.ITALIAN,
    "ja": Language.JAPANESE,
    "pt": Language.PORTUGUESE,
    "ru": Language.RUSSIAN,
    "es": Language.SPANISH,
}


class LanguageDetector:
    """
    許可リスト付き言語検出器

    プロファイルのロードは初回の検出時に一度だけ行う（スレッドセーフ）。

    Examples:
        >>> detector = LanguageDetector()
        >>> detector.detect("Salut! Je parle en français.")
        <Language.FRENCH: 'fr'>
    """

    def __init__(self, seed: Optional[int] = 0):
        """
        Args:
            seed: langdetect の乱数シード。None なら実行ごとに結果が揺れる。
        """
        self._seed = seed
        self._factory: Optional[DetectorFactory] = None
        self._lock = threading.Lock()

    def _get_factory(self) -> DetectorFactory:
        with self._lock:
            if self._factory is None:
                factory = DetectorFactory()
                factory.load_profile(PROFILES_DIRECTORY)
                factory.seed = self._seed
                self._factory = factory
        return self._factory

    def _identify(self, text: str) -> Optional[str]:
        """
        langdetect で言語タグを取得

        Returns:
            プロファイル名（例: "fr", "zh-cn"）。判定不能なら None。

        Raises:
            LangDetectException: 特徴量が抽出できない場合など
        """
        detector = self._get_factory().create()
        detector.append(text)
        tag = detector.detect()
        if tag == "unknown":
            return None
        return tag

    def detect(self, text: str) -> Language:
        """
        テキストの言語を検出

        Args:
            text: 判定対象テキスト

        Returns:
            検出された Language（DETECT は返さない）

        Raises:
            DetectError: 判定不能、または許可リスト外の言語を検出した場合
        """
        try:
            tag = self._identify(text)
        except LangDetectException as e:
            raise DetectError() from e

        lang = _PROFILE_LANGUAGES.get(tag) if tag else None
        if lang is None:
            logger.debug("Detected language %r is not translatable", tag)
            raise DetectError()

        logger.debug("Detected language: %s", lang.code)
        return lang


_default_detector: Optional[LanguageDetector] = None
_default_detector_lock = threading.Lock()


def get_detector() -> LanguageDetector:
    """共有の LanguageDetector を取得"""
    global _default_detector
    with _default_detector_lock:
        if _default_detector is None:
            _default_detector = LanguageDetector()
    return _default_detector


def detect(text: str) -> Language:
    """
    テキストの言語を検出（共有の検出器を使用）

    Raises:
        DetectError: 判定不能、または許可リスト外の言語を検出した場合
    """
    return get_detector().detect(text)
