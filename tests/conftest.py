from __future__ import annotations

import json
from pathlib import Path

import pytest

from easy_i18n import registry


def write_source(directory: Path, name: str, data: object) -> Path:
    path = directory / name
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "source"
    src.mkdir()
    write_source(src, "en.json", {"common": {"hi": "hello"}, "formal": {"hi": "Good day"}})
    write_source(src, "zh.json", {"common": {"hi": "你好"}})
    return src


@pytest.fixture(autouse=True)
def _clean_registry(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("EASY_I18N_LANG", raising=False)
    monkeypatch.delenv("EASY_I18N_SOURCE", raising=False)
    registry.reset()
    yield
    registry.reset()
