"""Persisted key/value preferences backed by a single JSON document.

Mirrors the small surface the navigation layer needs from a platform
preferences store: strings and lists of strings, read with a default and
written immediately. Values of the wrong type read as absent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..config.settings import PREFS_FILE
from ..logging_config import get_logger
from .file_cache import FileCache, file_cache

log = get_logger(__name__)


class Preferences:
    def __init__(self, path: str | Path = PREFS_FILE, cache: FileCache | None = None):
        self._path = Path(path)
        self._cache = cache or file_cache

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, Any]:
        data = self._cache.load_file(self._path, {})
        if not isinstance(data, dict):
            log.debug("Ignoring non-object preferences document %s", self._path)
            return {}
        return data

    def _write(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        if not self._cache.save_file(self._path, data):
            log.warning("Preference %s not persisted", key)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._read().get(key)
        if isinstance(value, str):
            return value
        if value is not None:
            log.debug("Preference %s is not a string: %r", key, value)
        return default

    def put_string(self, key: str, value: str) -> None:
        self._write(key, value)

    def get_string_list(
        self, key: str, default: Optional[Sequence[str]] = None
    ) -> Optional[List[str]]:
        value = self._read().get(key)
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value)
        if value is not None:
            log.debug("Preference %s is not a string list: %r", key, value)
        return list(default) if default is not None else None

    def put_string_list(self, key: str, values: Sequence[str]) -> None:
        self._write(key, list(values))
