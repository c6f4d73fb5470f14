"""Translation viewer: run app/streamlit_app.py headless against locales/."""
from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parents[1]
APP_FILE = ROOT / "app" / "streamlit_app.py"


def _app() -> AppTest:
    at = AppTest.from_file(str(APP_FILE), default_timeout=30)
    at.session_state["source_dir"] = str(ROOT / "locales")
    return at.run()


def test_viewer_renders_coverage() -> None:
    at = _app()
    assert not at.exception
    assert not at.error
    assert len(at.dataframe) == 1
    df = at.dataframe[0].value
    assert {"namespace", "key", "EN", "ZH"} <= set(df.columns)
    assert bool(df["EN"].all()) and bool(df["ZH"].all())


def test_viewer_lookup_follows_sidebar_language() -> None:
    at = _app()
    at.sidebar.selectbox[0].set_value("EN").run()
    assert not at.exception
    assert at.session_state["lang"] == "EN"
    assert at.code[0].value == "This is a test"


def test_viewer_missing_directory(tmp_path: Path) -> None:
    at = AppTest.from_file(str(APP_FILE), default_timeout=30)
    at.session_state["source_dir"] = str(tmp_path / "absent")
    at.run()
    assert not at.exception
    assert "Directory not found" in at.error[0].value
