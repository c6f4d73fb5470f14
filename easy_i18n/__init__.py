"""
easy_i18n — runtime text translation from a directory of <lang>.json files.

- source file: {"namespace": {"source text": "translated text"}}
- language ids are case-insensitive (stored upper-case)
- %1, %2, ... are filled positionally
- a missing translation returns the source text unchanged

Streamlit helpers (easy_i18n.st_session) and the coverage report
(easy_i18n.catalog) are imported on demand.
"""

from .interpolate import interpolate
from .loader import load_source
from .registry import (
    get_lang,
    i18n,
    languages,
    reset,
    set_error_hook,
    set_lang,
    set_source,
    trans_with_inter,
    translate,
)
from .settings import DEFAULT_LANG, DEFAULT_NAMESPACE, Settings, normalize_lang
from .source_table import SourceParseError, SourceTable
from .store import TranslationStore

__all__ = [
    "DEFAULT_LANG",
    "DEFAULT_NAMESPACE",
    "Settings",
    "SourceParseError",
    "SourceTable",
    "TranslationStore",
    "get_lang",
    "i18n",
    "interpolate",
    "languages",
    "load_source",
    "normalize_lang",
    "reset",
    "set_error_hook",
    "set_lang",
    "set_source",
    "trans_with_inter",
    "translate",
]
