"""
Streamlit helpers: the active language lives in st.session_state["lang"].

Each browser session can show a different language while the translation
tables are shared with the process-wide registry.
"""
from __future__ import annotations

from typing import Any

import streamlit as st

from . import registry
from .settings import DEFAULT_LANG, normalize_lang
from .store import TranslationStore

SESSION_KEY = "lang"


def session_lang() -> str:
    try:
        lang = st.session_state.get(SESSION_KEY, DEFAULT_LANG)
    except Exception:  # pragma: no cover - no Streamlit runtime
        lang = DEFAULT_LANG
    return normalize_lang(lang)


def t(key: str, *values: Any, ns: str | None = None, store: TranslationStore | None = None) -> str:
    """
    Translate key for the current session's language.

    store defaults to a copy of the global registry, so switching the
    session language never changes the process-wide one.
    """
    view = registry.snapshot() if store is None else TranslationStore(
        store.lang, sources=store.sources
    )
    view.set_lang(session_lang())
    if not values:
        return view.translate(key, ns)
    return view.trans_with_inter(key, [str(v) for v in values], ns)


def language_selector(
    store: TranslationStore | None = None, *, label: str = "Language"
) -> str:
    """Sidebar select box over loaded languages, bound to session_state["lang"]."""
    langs = list(store.languages if store is not None else registry.languages())
    current = session_lang()
    if current not in langs:
        langs.insert(0, current)
    with st.sidebar:
        choice = st.selectbox(label, langs, index=langs.index(current))
    st.session_state[SESSION_KEY] = choice
    return choice
