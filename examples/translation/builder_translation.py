#!/usr/bin/env python3
"""ビルダーと Query API の例.

TranslationBuilder と to_lang() / from_lang() によるメソッドチェーンの
使い方を示します。インターネット接続が必要です。

使用方法:
    python examples/translation/builder_translation.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from libretranslate_client import Language, TranslateError, TranslationBuilder, to_lang  # noqa: E402


async def translate_concurrently() -> list[str]:
    """複数の Query を並行して翻訳."""
    queries = [
        to_lang("Good morning", lang).from_lang(Language.ENGLISH)
        for lang in (Language.FRENCH, Language.GERMAN, Language.SPANISH)
    ]
    return await asyncio.gather(*(query.translate_async() for query in queries))


def main() -> None:
    """メイン処理."""
    print("=== TranslationBuilder ===")
    builder = (
        TranslationBuilder()
        .url("https://libretranslate.com/")
        .from_lang(Language.ENGLISH)
        .to_lang(Language.JAPANESE)
    )
    try:
        result = builder.text("Amazing!").translate()
        print(f"{result.input} -> {result.output}")

        # 空入力は通信せずに空の出力を返す
        empty = builder.translate()
        print(f"Empty input -> {empty.output!r}")

        print()
        print("=== Query ===")
        text = (
            to_lang("This is text, written on a computer, in English.", Language.GERMAN)
            .from_lang(Language.ENGLISH)
            .translate()
        )
        print(f"output: {text!r}")

        print()
        print("=== Concurrent queries ===")
        for output in asyncio.run(translate_concurrently()):
            print(output)
    except TranslateError as e:
        print(f"Error during translation: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
