"""
Translation のテスト
"""

from __future__ import annotations

import dataclasses

import pytest

from libretranslate_client.translation.languages import Language
from libretranslate_client.translation.result import Translation


class TestTranslation:
    """Translation のテスト"""

    def _make(self) -> Translation:
        return Translation(
            url="https://libretranslate.com/translate",
            source=Language.JAPANESE,
            target=Language.ENGLISH,
            input="こんにちは",
            output="Hello",
        )

    def test_basic_creation(self):
        result = self._make()
        assert result.output == "Hello"
        assert result.input == "こんにちは"
        assert result.source is Language.JAPANESE
        assert result.target is Language.ENGLISH

    def test_immutable(self):
        """作成後は変更できない"""
        result = self._make()
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.output = "Hi"

    def test_to_dict(self):
        assert self._make().to_dict() == {
            "url": "https://libretranslate.com/translate",
            "source": "ja",
            "target": "en",
            "input": "こんにちは",
            "output": "Hello",
        }

    def test_equality(self):
        assert self._make() == self._make()
