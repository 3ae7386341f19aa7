from __future__ import annotations

import copy
import json
import os
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..logging_config import get_logger


@dataclass
class CachedFile:
    """A parsed JSON document together with the stat info it was read with."""

    path: str
    content: Any
    mtime: float
    size: int
    last_accessed: datetime


class FileCache:
    """
    Process-wide cache for the JSON documents rpcsx-ui reads and writes.

    A cached document is served until the file's mtime or size changes on disk.
    Writes go through a temporary file and ``os.replace`` so a crash never
    leaves a half-written document behind, and the cache is refreshed from the
    written content so the next load sees it without touching the disk.
    """

    _instance: Optional["FileCache"] = None
    _lock = threading.RLock()

    def __init__(self):
        self._cache: Dict[str, CachedFile] = {}
        self._log = get_logger(__name__)
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "FileCache":
        """Get singleton instance of FileCache."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = FileCache()
        return cls._instance

    def _get_file_info(self, filepath: str) -> tuple[float, int]:
        try:
            stat = os.stat(filepath)
            return stat.st_mtime, stat.st_size
        except OSError:
            return 0.0, 0

    def load_file(
        self, filepath: str | Path, default_value: Any = None, force_reload: bool = False
    ) -> Any:
        """
        Load and parse a JSON file, using the cached copy when it is still fresh.

        Args:
            filepath: Path to the JSON file
            default_value: Returned when the file is missing or unreadable
            force_reload: Ignore the cached copy

        Returns:
            A deep copy of the parsed content, or ``default_value``
        """
        filepath = str(Path(filepath).expanduser().resolve())

        with self._lock:
            current_mtime, current_size = self._get_file_info(filepath)
            if current_mtime == 0.0:
                return default_value

            cached_file = self._cache.get(filepath)
            if (
                not force_reload
                and cached_file is not None
                and cached_file.mtime == current_mtime
                and cached_file.size == current_size
            ):
                cached_file.last_accessed = datetime.now()
                return copy.deepcopy(cached_file.content)

            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    parsed_content = json.load(f)
            except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
                self._log.warning("Error loading %s, using default: %s", filepath, e)
                return default_value

            self._cache[filepath] = CachedFile(
                path=filepath,
                content=parsed_content,
                mtime=current_mtime,
                size=current_size,
                last_accessed=datetime.now(),
            )
            self._log.debug("Loaded %s (%d bytes)", filepath, current_size)
            return copy.deepcopy(parsed_content)

    def save_file(self, filepath: str | Path, content: Any) -> bool:
        """Write ``content`` as JSON and refresh the cache. Returns success."""
        filepath = str(Path(filepath).expanduser().resolve())

        with self._lock:
            tmp_path = f"{filepath}.tmp"
            try:
                Path(filepath).parent.mkdir(parents=True, exist_ok=True)
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(content, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, filepath)
            except (OSError, TypeError, ValueError) as e:
                self._log.error("Error saving %s: %s", filepath, e)
                return False

            new_mtime, new_size = self._get_file_info(filepath)
            self._cache[filepath] = CachedFile(
                path=filepath,
                content=copy.deepcopy(content),
                mtime=new_mtime,
                size=new_size,
                last_accessed=datetime.now(),
            )
            self._log.debug("Saved %s (%d bytes)", filepath, new_size)
            return True

    def is_loaded(self, filepath: str | Path) -> bool:
        """Check if file is currently cached."""
        return str(Path(filepath).expanduser().resolve()) in self._cache

    def clear_cache(self, filepath: Optional[str | Path] = None) -> None:
        """Clear cache for specific file or all files."""
        with self._lock:
            if filepath:
                self._cache.pop(str(Path(filepath).expanduser().resolve()), None)
            else:
                self._cache.clear()


# Global instance
file_cache = FileCache.get_instance()


def load_json(filepath: str | Path, default_value: Any = None, force_reload: bool = False) -> Any:
    """Load JSON file with caching."""
    return file_cache.load_file(filepath, default_value, force_reload=force_reload)


def save_json(filepath: str | Path, data: Any) -> bool:
    """Save JSON file and update cache."""
    return file_cache.save_file(filepath, data)
