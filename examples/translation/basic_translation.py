#!/usr/bin/env python3
"""基本的な翻訳の例.

LibreTranslate サーバーを使った最小構成のサンプルです。
インターネット接続が必要です。

使用方法:
    python examples/translation/basic_translation.py

    # カスタムテキストを指定
    python examples/translation/basic_translation.py "Text to translate"

環境変数:
    LIBRETRANSLATE_URL: サーバーのベース URL、デフォルト: https://libretranslate.com/
    LIBRETRANSLATE_API_KEY: API キー（任意）
    LIBRETRANSLATE_TARGET_LANG: ターゲット言語、デフォルト: ja
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    """メイン処理."""
    from libretranslate_client import Language, LanguageError, TranslateError, translate
    from libretranslate_client.config import DEFAULT_URL

    url = os.getenv("LIBRETRANSLATE_URL", DEFAULT_URL)
    api_key = os.getenv("LIBRETRANSLATE_API_KEY")

    try:
        target = Language.parse(os.getenv("LIBRETRANSLATE_TARGET_LANG", "ja"))
    except LanguageError as e:
        print(f"Error: {e}")
        sys.exit(1)

    text = sys.argv[1] if len(sys.argv) > 1 else "what is the problem!"

    print("=== Basic Translation Example (LibreTranslate) ===")
    print(f"Server: {url}")
    print(f"Target language: {target.pretty}")
    print()

    # ソース言語は自動検出
    try:
        result = translate(Language.DETECT, target, text, url, api_key)
    except TranslateError as e:
        print(f"Error during translation: {e}")
        sys.exit(1)

    print("=== Translation Result ===")
    print(f"URL: {result.url}")
    print(f"Input {result.source.pretty}: {result.input}")
    print(f"Output {result.target.pretty}: {result.output}")


if __name__ == "__main__":
    main()
