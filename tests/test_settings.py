from __future__ import annotations

from pathlib import Path

from easy_i18n.settings import DEFAULT_LANG, Settings, normalize_lang


def test_normalize_lang() -> None:
    assert normalize_lang("en") == "EN"
    assert normalize_lang("Zh") == "ZH"
    assert normalize_lang(None) == DEFAULT_LANG
    assert normalize_lang("en") == normalize_lang("EN")


def test_settings_from_env() -> None:
    s = Settings.from_env({"EASY_I18N_LANG": "en", "EASY_I18N_SOURCE": "locales"})
    assert s.lang == "EN"
    assert s.source_dir == Path("locales")


def test_settings_defaults() -> None:
    s = Settings.from_env({})
    assert s.lang == DEFAULT_LANG
    assert s.source_dir is None
    assert Settings.from_env({"EASY_I18N_LANG": "", "EASY_I18N_SOURCE": ""}) == s
