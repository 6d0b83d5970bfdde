from libretranslate_client.config import (
    DEFAULT_CONFIG,
    DEFAULT_URL,
    MAX_INPUT_CHARS,
    get_default_config,
    merge_config,
)


def test_get_default_config_returns_deep_copy():
    config_a = get_default_config()
    config_b = get_default_config()

    assert config_a is not config_b
    config_a["translation"]["url"] = "http://localhost:5000/"
    assert DEFAULT_CONFIG["translation"]["url"] == DEFAULT_URL


def test_default_translation_section():
    translation = get_default_config()["translation"]
    assert translation["url"] == "https://libretranslate.com/"
    assert translation["api_key"] is None
    assert set(translation) == {"url", "api_key"}
    assert MAX_INPUT_CHARS == 5000


def test_merge_config_overrides_nested_dicts():
    base = {"translation": {"url": DEFAULT_URL, "api_key": None}}
    override = {"translation": {"api_key": "secret"}}

    merged = merge_config(base, override)
    assert merged["translation"]["url"] == DEFAULT_URL
    assert merged["translation"]["api_key"] == "secret"
    assert base["translation"]["api_key"] is None


def test_merge_config_none_override():
    base = get_default_config()
    merged = merge_config(base, None)
    assert merged == base
    assert merged is not base
