#!/usr/bin/env python3
"""言語検出の例.

langdetect による言語検出のサンプルです（ネットワーク不要）。
短い文は検出精度が低く、翻訳できない言語を検出した場合は DetectError になります。

使用方法:
    python examples/translation/detect_language.py "Salut! Je dis en Francais."
"""

from __future__ import annotations

import sys
from pathlib import Path

# プロジェクトルートをパスに追加
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    """メイン処理."""
    from libretranslate_client import DetectError, Language, detect

    texts = sys.argv[1:] or [
        "Salut! Je dis en Francais.",
        "Ich habe heute leider keine Zeit.",
        "今日はとても良い天気ですね。",
        "안녕하세요, 만나서 반갑습니다.",
    ]

    print("=== Language Detection ===")
    for text in texts:
        try:
            lang = detect(text)
            print(f"[{lang.code}] {lang.pretty}: {text}")
        except DetectError:
            print(f"[??] not translatable: {text}")

    print()
    print("=== Locale parsing ===")
    for tag in ("fr-FR", "pt_BR", "zh-Hant"):
        print(f"{tag} -> {Language.from_locale(tag).pretty}")


if __name__ == "__main__":
    main()
