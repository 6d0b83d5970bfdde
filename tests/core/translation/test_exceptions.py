"""
翻訳例外クラスのテスト
"""

from __future__ import annotations

import pytest

from libretranslate_client.translation.exceptions import (
    DetectError,
    FormatError,
    HttpError,
    LanguageError,
    LengthError,
    ParseError,
    TranslateError,
)


class TestExceptionHierarchy:
    """例外クラス階層のテスト"""

    def test_format_error_is_language_error(self):
        assert issubclass(FormatError, LanguageError)

    def test_language_error_is_not_translate_error(self):
        """言語指定エラーと翻訳エラーは別系統"""
        assert not issubclass(LanguageError, TranslateError)

    @pytest.mark.parametrize("cls", [HttpError, ParseError, DetectError, LengthError])
    def test_translate_errors(self, cls):
        assert issubclass(cls, TranslateError)


class TestMessages:
    """エラーメッセージのテスト"""

    def test_http_error(self):
        error = HttpError("connection refused")
        assert error.description == "connection refused"
        assert str(error) == "HTTP request error: connection refused"

    def test_parse_error(self):
        error = ParseError("Unable to find translatedText in parsed JSON")
        assert error.description == "Unable to find translatedText in parsed JSON"
        assert "Unable to find translatedText in parsed JSON" in str(error)

    def test_detect_error(self):
        assert str(DetectError()) == "Language detection error"

    def test_length_error(self):
        error = LengthError(6000, 5000)
        assert error.length == 6000
        assert error.limit == 5000
        assert str(error) == "Requested text is too long"

    def test_format_error(self):
        error = FormatError("Klingon")
        assert error.text == "Klingon"
        assert str(error) == "Unknown Language: Klingon"

    def test_can_be_caught_as_translate_error(self):
        with pytest.raises(TranslateError):
            raise ParseError("bad")
