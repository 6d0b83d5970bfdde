"""
翻訳エラーの例外クラス階層

言語名の解析エラーと、翻訳リクエストで発生する各種エラーを分類するための
例外クラスを定義。
"""


class LanguageError(Exception):
    """言語指定エラーの基底クラス"""

    pass


class FormatError(LanguageError, ValueError):
    """既知の言語コード・言語名のいずれにも一致しない"""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unknown Language: {text}")


class TranslateError(Exception):
    """翻訳エラーの基底クラス"""

    pass


class HttpError(TranslateError):
    """HTTP 通信エラー（接続失敗、TLS、タイムアウト）"""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"HTTP request error: {description}")


class ParseError(TranslateError):
    """レスポンス解析エラー（不正な JSON、translatedText 欠落、サービス側エラー）"""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"JSON parsing error: {description}")


class DetectError(TranslateError):
    """言語検出の失敗、または翻訳対象外の言語を検出"""

    def __init__(self):
        super().__init__("Language detection error")


class LengthError(TranslateError):
    """入力テキストが長すぎる"""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__("Requested text is too long")
