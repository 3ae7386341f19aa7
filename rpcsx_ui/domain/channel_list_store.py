from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from kivy.event import EventDispatcher
from kivy.properties import ListProperty, StringProperty

from ..infrastructure.preferences import Preferences
from ..logging_config import get_logger
from .channels import CATEGORY_DEFAULTS, CategoryDefaults, ChannelCategory

log = get_logger(__name__)


@dataclass(frozen=True)
class ChannelSnapshot:
    channels: Tuple[str, ...]
    selected: str


def _unique(channels: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for channel in channels:
        if channel not in seen:
            seen.add(channel)
            out.append(channel)
    return out


class ChannelListStore(EventDispatcher):
    """Persisted, ordered list of update channels for one category.

    ``channels`` and ``selected`` mirror the persisted state and are updated
    in the same call that writes it, so widgets bind to them instead of
    reading preferences. Mutators are permissive: ``remove`` does not consult
    ``is_deletable``, callers decide whether to offer a delete at all.
    """

    channels = ListProperty([])
    selected = StringProperty("")

    def __init__(
        self,
        category: ChannelCategory,
        prefs: Preferences,
        defaults: CategoryDefaults | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.category = category
        self.defaults = defaults or CATEGORY_DEFAULTS[category]
        self._prefs = prefs
        self._loaded = False
        self._log = get_logger(f"{__name__}.{category.value}")

    def load(self) -> Tuple[List[str], str]:
        """Read list and selection, falling back to the category defaults.

        A missing selection is written back so later loads agree with this one.
        """
        persisted = self._prefs.get_string_list(self.category.list_key)
        channels = _unique(persisted) if persisted else list(self.defaults.default_list)

        selected = self._prefs.get_string(self.category.selection_key)
        if not selected:
            selected = self.defaults.release
            self._prefs.put_string(self.category.selection_key, selected)

        self.channels = channels
        self.selected = selected
        self._loaded = True
        return list(channels), selected

    def _ensure_loaded(self):
        if not self._loaded:
            self.load()

    def _commit(self, channels: List[str]) -> List[str]:
        self._prefs.put_string_list(self.category.list_key, channels)
        self.channels = channels
        return list(channels)

    def add(self, candidate: str) -> List[str]:
        self._ensure_loaded()
        if candidate in self.channels:
            self._log.debug("Channel %r already listed", candidate)
            return list(self.channels)
        if self.defaults.validated and self.defaults.is_reserved(candidate):
            self._log.debug("Channel %r is a reserved name", candidate)
            return list(self.channels)
        return self._commit(list(self.channels) + [candidate])

    def remove(self, target: str) -> List[str]:
        self._ensure_loaded()
        channels = list(self.channels)
        try:
            channels.remove(target)
        except ValueError:
            return channels
        return self._commit(channels)

    def is_deletable(self, target: str) -> bool:
        self._ensure_loaded()
        if self.defaults.validated:
            return not self.defaults.is_reserved(target)
        return len(self.channels) > 1

    def select(self, channel_id: str) -> None:
        self._ensure_loaded()
        self._prefs.put_string(self.category.selection_key, channel_id)
        self.selected = channel_id

    def snapshot(self) -> ChannelSnapshot:
        self._ensure_loaded()
        return ChannelSnapshot(tuple(self.channels), self.selected)


class ChannelStores:
    """The three category stores, addressable by category."""

    def __init__(self, prefs: Preferences):
        self.prefs = prefs
        self._stores: Dict[ChannelCategory, ChannelListStore] = {
            category: ChannelListStore(category, prefs) for category in ChannelCategory
        }

    def __getitem__(self, category: ChannelCategory) -> ChannelListStore:
        return self._stores[category]

    def __iter__(self):
        return iter(self._stores.values())

    def load(self, category: ChannelCategory) -> Tuple[List[str], str]:
        return self._stores[category].load()

    def add(self, category: ChannelCategory, candidate: str) -> List[str]:
        return self._stores[category].add(candidate)

    def remove(self, category: ChannelCategory, target: str) -> List[str]:
        return self._stores[category].remove(target)

    def is_deletable(self, category: ChannelCategory, target: str) -> bool:
        return self._stores[category].is_deletable(target)

    def select(self, category: ChannelCategory, channel_id: str) -> None:
        self._stores[category].select(channel_id)
