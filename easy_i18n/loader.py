from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from .settings import SOURCE_SUFFIX, normalize_lang
from .source_table import SourceParseError, SourceTable

logger = logging.getLogger(__name__)

ErrorHook = Callable[[Path, Exception], None]


def _report(on_error: ErrorHook | None, path: Path, exc: Exception) -> None:
    if on_error is None:
        return
    try:
        on_error(path, exc)
    except Exception:
        logger.exception("i18n error hook failed for %s", path)


def split_source_name(name: str) -> tuple[str, str] | None:
    """'en.json' -> ('en', 'json'); None when the name has no '.'."""
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return None
    return stem, ext


def load_source(
    path: str | Path, *, on_error: ErrorHook | None = None
) -> dict[str, SourceTable]:
    """
    Load every <lang>.json directly inside path.

    Best effort: a missing directory yields {}, a file that cannot be read or
    parsed is skipped. Skipped entries are logged and passed to on_error.
    Two files normalizing to the same language: the later one in directory
    order replaces the earlier (order is filesystem dependent).
    """
    source_dir = Path(path)
    sources: dict[str, SourceTable] = {}
    try:
        with os.scandir(source_dir) as it:
            entries = list(it)
    except OSError as exc:
        logger.warning("i18n source dir not readable: %s (%s)", source_dir, exc)
        _report(on_error, source_dir, exc)
        return sources

    for entry in entries:
        entry_path = Path(entry.path)
        try:
            if entry.is_dir():
                continue
        except OSError as exc:
            logger.warning("i18n source entry skipped: %s (%s)", entry_path, exc)
            _report(on_error, entry_path, exc)
            continue

        parts = split_source_name(entry.name)
        if parts is None:
            continue
        stem, ext = parts
        if ext.lower() != SOURCE_SUFFIX:
            continue

        try:
            table = SourceTable.from_path(entry_path)
        except (OSError, SourceParseError) as exc:
            logger.warning("i18n source file skipped: %s (%s)", entry_path, exc)
            _report(on_error, entry_path, exc)
            continue

        lang = normalize_lang(stem)
        if lang in sources:
            logger.debug("i18n language %s replaced by %s", lang, entry_path)
        sources[lang] = table

    logger.info("i18n loaded %d language(s) from %s", len(sources), source_dir)
    return sources
