from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .settings import DEFAULT_NAMESPACE


class SourceParseError(ValueError):
    """Language file is not valid JSON or not shaped {namespace: {key: text}}."""

    def __init__(self, reason: str, *, path: Path | None = None) -> None:
        self.reason = reason
        self.path = path
        message = f"source parse error: {reason}"
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


def _check_shape(data: Any) -> dict[str, dict[str, str]]:
    if not isinstance(data, dict):
        raise SourceParseError(
            f"top level must be an object, got {type(data).__name__}"
        )
    out: dict[str, dict[str, str]] = {}
    for ns, entries in data.items():
        if not isinstance(entries, dict):
            raise SourceParseError(
                f"namespace {ns!r} must be an object, got {type(entries).__name__}"
            )
        for key, text in entries.items():
            if not isinstance(text, str):
                raise SourceParseError(
                    f"value for {key!r} in namespace {ns!r} must be a string, "
                    f"got {type(text).__name__}"
                )
        out[ns] = dict(entries)
    return out


@dataclass(frozen=True, eq=False)
class SourceTable:
    """
    Translations of one language: namespace -> (key -> translated text).

    Built once from a JSON document and read-only afterwards.
    """

    _data: Mapping[str, Mapping[str, str]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        frozen = {
            ns: MappingProxyType(dict(entries)) for ns, entries in self._data.items()
        }
        object.__setattr__(self, "_data", MappingProxyType(frozen))

    @classmethod
    def from_document(cls, text: str | bytes) -> "SourceTable":
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SourceParseError(f"invalid JSON: {exc}") from exc
        return cls(_check_shape(data))

    @classmethod
    def from_path(cls, path: str | Path) -> "SourceTable":
        source_path = Path(path)
        raw = source_path.read_bytes()
        try:
            return cls.from_document(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise SourceParseError(f"not UTF-8: {exc}", path=source_path) from exc
        except SourceParseError as exc:
            raise SourceParseError(exc.reason, path=source_path) from exc

    def get(self, key: str, ns: str | None = None) -> str | None:
        entries = self._data.get(DEFAULT_NAMESPACE if ns is None else ns)
        if entries is None:
            return None
        return entries.get(key)

    @property
    def namespaces(self) -> tuple[str, ...]:
        return tuple(sorted(self._data))

    def keys(self, ns: str = DEFAULT_NAMESPACE) -> frozenset[str]:
        return frozenset(self._data.get(ns, ()))

    def __contains__(self, ns: object) -> bool:
        return ns in self._data

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._data.values())
