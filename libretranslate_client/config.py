"""Default configuration values for the LibreTranslate client."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

DEFAULT_URL = "https://libretranslate.com/"

# 上限以上の文字数はリクエスト前に拒否する
MAX_INPUT_CHARS = 5000

DEFAULT_CONFIG: Dict[str, Any] = {
    "translation": {
        "url": DEFAULT_URL,
        "api_key": None,
    },
}


def get_default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return deepcopy(DEFAULT_CONFIG)


def merge_config(base: Dict[str, Any], override: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Recursively merge two configuration dictionaries.

    Args:
        base: The base configuration that provides default values.
        override: Overrides coming from callers (can be None).

    Returns:
        A new dictionary containing the merged configuration.
    """
    if override is None:
        return deepcopy(base)

    merged = deepcopy(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged
