"""
翻訳結果のデータクラス

翻訳リクエスト 1 回分の結果を格納する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .languages import Language


@dataclass(frozen=True)
class Translation:
    """翻訳結果"""

    url: str  # 実際にリクエストしたエンドポイント
    source: Language  # ソース言語（自動検出時は検出結果）
    target: Language  # ターゲット言語
    input: str  # 原文
    output: str  # 翻訳テキスト

    def to_dict(self) -> Dict[str, Any]:
        """JSON 出力用の辞書に変換"""
        return {
            "url": self.url,
            "source": self.source.code,
            "target": self.target.code,
            "input": self.input,
            "output": self.output,
        }
