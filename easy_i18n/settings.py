from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# Language ids are stored upper-case everywhere ("en.json" -> "EN").
DEFAULT_LANG = "CN"
DEFAULT_NAMESPACE = "common"
SOURCE_SUFFIX = "json"

ENV_LANG = "EASY_I18N_LANG"
ENV_SOURCE = "EASY_I18N_SOURCE"


def normalize_lang(lang: str | None) -> str:
    if lang is None:
        return DEFAULT_LANG
    return str(lang).upper()


@dataclass(frozen=True)
class Settings:
    lang: str = DEFAULT_LANG
    source_dir: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Read startup configuration from the environment.

        EASY_I18N_LANG   active language (default CN)
        EASY_I18N_SOURCE directory of <lang>.json files loaded on first use
        """
        env = os.environ if environ is None else environ
        lang = env.get(ENV_LANG) or DEFAULT_LANG
        source = env.get(ENV_SOURCE) or None
        return cls(
            lang=normalize_lang(lang),
            source_dir=Path(source) if source else None,
        )
