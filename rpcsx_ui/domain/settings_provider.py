from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Protocol

from ..config.settings import SETTINGS_FILE
from ..infrastructure.file_cache import load_json
from ..logging_config import get_logger

log = get_logger(__name__)


class SettingsProvider(Protocol):
    def settings_get(self) -> Any:
        """Return the current settings tree as deserialized JSON."""
        ...


class JsonFileSettingsProvider:
    """Reads the settings tree the emulator core dumps to a JSON file."""

    def __init__(self, path: str | Path = SETTINGS_FILE):
        self._path = Path(path)

    def available(self) -> bool:
        return self._path.exists()

    def settings_get(self) -> Dict[str, Any]:
        tree = load_json(self._path, {}, force_reload=True)
        if not isinstance(tree, dict):
            log.warning("Settings file %s does not hold an object", self._path)
            return {}
        return tree
