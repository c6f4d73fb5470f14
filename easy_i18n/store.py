from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Sequence

from .interpolate import interpolate
from .loader import ErrorHook, load_source
from .settings import DEFAULT_LANG, normalize_lang
from .source_table import SourceTable

logger = logging.getLogger(__name__)


class TranslationStore:
    """
    Active language plus the translation tables of every loaded language.

    Lookups never fail: when the active language, the namespace or the key
    is missing, the key itself is returned.

    Not thread-safe on its own; easy_i18n.registry wraps one instance in a lock.
    """

    def __init__(
        self,
        lang: str = DEFAULT_LANG,
        *,
        sources: Mapping[str, SourceTable] | None = None,
        on_error: ErrorHook | None = None,
    ) -> None:
        self._lang = normalize_lang(lang)
        self._sources: dict[str, SourceTable] = {
            normalize_lang(k): v for k, v in (sources or {}).items()
        }
        self.on_error = on_error

    @property
    def lang(self) -> str:
        return self._lang

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(sorted(self._sources))

    @property
    def sources(self) -> Mapping[str, SourceTable]:
        return dict(self._sources)

    def source_for(self, lang: str) -> SourceTable | None:
        return self._sources.get(normalize_lang(lang))

    def set_lang(self, lang: str) -> None:
        self._lang = normalize_lang(lang)

    def set_source(self, path: str | Path) -> None:
        """Replace all loaded languages with the <lang>.json files in path."""
        self._sources = load_source(path, on_error=self.on_error)
        if self._lang not in self._sources:
            logger.debug("i18n active language %s has no source loaded", self._lang)

    def translate(self, key: str, ns: str | None = None) -> str:
        source = self._sources.get(self._lang)
        if source is None:
            return key
        text = source.get(key, ns)
        return key if text is None else text

    def trans_with_inter(
        self, key: str, values: Sequence[str], ns: str | None = None
    ) -> str:
        """translate(), then fill %1..%N; also applied to an untranslated key."""
        return interpolate(self.translate(key, ns), values)

    translate_with_values = trans_with_inter
