from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from easy_i18n import TranslationStore  # noqa: E402
from easy_i18n.catalog import coverage_frame, missing_keys  # noqa: E402
from easy_i18n.st_session import language_selector, t  # noqa: E402


DEFAULT_SOURCE_DIR = str(ROOT / "locales")


def _init_state() -> None:
    st.session_state.setdefault("source_dir", DEFAULT_SOURCE_DIR)


@st.cache_resource(show_spinner=False)
def _load_store(source_dir: str) -> tuple[TranslationStore, list[str]]:
    skipped: list[str] = []
    store = TranslationStore(on_error=lambda path, exc: skipped.append(f"{path}: {exc}"))
    store.set_source(source_dir)
    return store, skipped


def _render_coverage(store: TranslationStore) -> None:
    st.subheader("Coverage")
    df = coverage_frame(store.sources)
    if df.empty:
        st.info("No translations loaded.")
        return
    st.dataframe(df, hide_index=True)
    for lang, pairs in missing_keys(store.sources).items():
        if pairs:
            st.warning(f"{lang}: {len(pairs)} missing key(s)")


def _render_playground(store: TranslationStore) -> None:
    st.subheader("Lookup")
    key = st.text_input("Source text", value="这是一个测试")
    ns = st.text_input("Namespace", value="common")
    raw_values = st.text_input("Values (comma separated)", value="")
    values = [v.strip() for v in raw_values.split(",")] if raw_values.strip() else []
    st.code(t(key, *values, ns=ns or None, store=store), language=None)


def main() -> None:
    st.set_page_config(page_title="easy_i18n viewer", layout="wide")
    _init_state()
    state = st.session_state

    with st.sidebar:
        st.title("easy_i18n")
        st.text_input("Source directory", key="source_dir")
        if st.button("Reload"):
            _load_store.clear()

    source_dir = state["source_dir"]
    if not Path(source_dir).is_dir():
        st.error(f"Directory not found: {source_dir}")
        return

    store, skipped = _load_store(source_dir)
    language_selector(store)

    for line in skipped:
        st.warning(f"Skipped: {line}")

    st.caption("Languages: " + (", ".join(store.languages) or "none"))
    _render_coverage(store)
    _render_playground(store)


if __name__ == "__main__":
    main()
