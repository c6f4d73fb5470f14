"""
Process-wide translation store for call sites that do not carry a store.

    from easy_i18n import i18n, set_lang, set_source

    set_source("locales")
    set_lang("en")
    i18n("这是一个测试")                          # This is a test
    i18n("这是一个测试", ns="namespace1")
    i18n("他的成绩是，语文：%1, 数学：%2", 88, 100)

Every function below takes the module lock for exactly one store operation.
"""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Sequence

from .loader import ErrorHook
from .settings import Settings
from .store import TranslationStore

_LOCK = threading.Lock()
_STORE: TranslationStore | None = None


def _store() -> TranslationStore:
    # caller holds _LOCK
    global _STORE
    if _STORE is None:
        settings = Settings.from_env()
        store = TranslationStore(settings.lang)
        if settings.source_dir is not None:
            store.set_source(settings.source_dir)
        _STORE = store
    return _STORE


def set_lang(lang: str) -> None:
    with _LOCK:
        _store().set_lang(lang)


def set_source(path: str | Path) -> None:
    with _LOCK:
        _store().set_source(path)


def set_error_hook(hook: ErrorHook | None) -> None:
    """Observe files skipped by later set_source() calls."""
    with _LOCK:
        _store().on_error = hook


def get_lang() -> str:
    with _LOCK:
        return _store().lang


def languages() -> tuple[str, ...]:
    with _LOCK:
        return _store().languages


def snapshot() -> TranslationStore:
    """Independent copy of the global store (same tables, same language)."""
    with _LOCK:
        store = _store()
        return TranslationStore(store.lang, sources=store.sources, on_error=store.on_error)


def translate(key: str, ns: str | None = None) -> str:
    with _LOCK:
        return _store().translate(key, ns)


def trans_with_inter(key: str, values: Sequence[str], ns: str | None = None) -> str:
    with _LOCK:
        return _store().trans_with_inter(key, values, ns)


def i18n(key: str, *values: Any, ns: str | None = None) -> str:
    """translate() when no values are given, otherwise trans_with_inter()."""
    if not values:
        return translate(key, ns)
    return trans_with_inter(key, [str(v) for v in values], ns)


def reset() -> None:
    """Drop the global store; the next call rebuilds it from the environment."""
    global _STORE
    with _LOCK:
        _STORE = None
