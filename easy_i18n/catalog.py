"""
Key coverage across loaded languages.

Every language file is expected to carry the same (namespace, key) pairs;
these helpers show where one is missing.
"""
from __future__ import annotations

from typing import Mapping

import pandas as pd

from .source_table import SourceTable

COVERAGE_INDEX = ["namespace", "key"]


def _all_pairs(sources: Mapping[str, SourceTable]) -> list[tuple[str, str]]:
    pairs: set[tuple[str, str]] = set()
    for source in sources.values():
        for ns in source.namespaces:
            pairs.update((ns, key) for key in source.keys(ns))
    return sorted(pairs)


def coverage_frame(sources: Mapping[str, SourceTable]) -> pd.DataFrame:
    """One row per (namespace, key), one bool column per language."""
    langs = sorted(sources)
    rows = []
    for ns, key in _all_pairs(sources):
        row: dict[str, object] = {"namespace": ns, "key": key}
        for lang in langs:
            row[lang] = sources[lang].get(key, ns) is not None
        rows.append(row)
    df = pd.DataFrame(rows, columns=COVERAGE_INDEX + langs)
    return df.astype({lang: bool for lang in langs})


def missing_keys(sources: Mapping[str, SourceTable]) -> dict[str, list[tuple[str, str]]]:
    """Per language: (namespace, key) pairs other languages have and it lacks."""
    pairs = _all_pairs(sources)
    return {
        lang: [(ns, key) for ns, key in pairs if sources[lang].get(key, ns) is None]
        for lang in sorted(sources)
    }
