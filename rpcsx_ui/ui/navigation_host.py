from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Tuple

from kivy.event import EventDispatcher
from kivy.properties import BooleanProperty, StringProperty

from ..domain.channel_codec import ChannelCodec
from ..domain.channel_list_store import ChannelListStore, ChannelStores
from ..domain.channels import ChannelCategory
from ..domain.route_builder import SettingsRouteBuilder
from ..domain.settings_provider import SettingsProvider
from ..domain.settings_tree import Group, classify_root
from ..logging_config import get_logger
from .routes import (
    CHANNEL_TITLES,
    SETTINGS,
    START_DESTINATION,
    STATIC_DESTINATIONS,
    Destination,
    DestinationKind,
    settings_route,
)

log = get_logger(__name__)


class PackageInstaller(Protocol):
    def install_package(self) -> None: ...

    def install_folder(self) -> None: ...


@dataclass(frozen=True)
class ChannelListScreenState:
    """What a channel list screen shows: labels, not identifiers."""

    category: ChannelCategory
    title: str
    items: Tuple[str, ...]
    selected: str
    deletable: Tuple[bool, ...]


class NavigationHost(EventDispatcher):
    """Route table, back stack and action dispatch for the app shell.

    Owns the fixed destinations plus one destination per settings group, the
    channel stores of all categories, and two ephemeral flags: the navigation
    drawer and the install FAB. Both flags start closed and nothing persists
    them. Back navigation closes an open drawer instead of leaving the screen.

    Events:
      on_routes_changed: the route table was rebuilt
    """

    current_route = StringProperty(START_DESTINATION)
    drawer_open = BooleanProperty(False)
    fab_expanded = BooleanProperty(False)

    def __init__(
        self,
        stores: ChannelStores,
        settings_provider: Optional[SettingsProvider] = None,
        installer: Optional[PackageInstaller] = None,
        route_builder: Optional[SettingsRouteBuilder] = None,
        **kwargs,
    ):
        self.register_event_type("on_routes_changed")
        super().__init__(**kwargs)
        self.stores = stores
        self._settings_provider = settings_provider
        self._installer = installer
        self._route_builder = route_builder or SettingsRouteBuilder()
        self._destinations: Dict[str, Destination] = {}
        self.settings_root = Group()
        self._back_stack: List[str] = [START_DESTINATION]

        for store in stores:
            store.load()
        self.build_routes()

    def on_routes_changed(self, *_):
        pass

    # --- Route table ----------------------------------------------------
    @property
    def library_available(self) -> bool:
        return self._settings_provider is not None

    @property
    def routes(self) -> List[str]:
        return list(self._destinations)

    def destination(self, route: str) -> Destination:
        return self._destinations[route]

    def has_route(self, route: str) -> bool:
        return route in self._destinations

    def is_current_destination(self, route: str, destination: Destination) -> bool:
        """True while ``destination`` is the registered entry for ``route``.

        A refresh registers new destination objects, so holders of an older one
        can tell it went stale even when the route string survived.
        """
        return self._destinations.get(route) is destination

    def register(self, destination: Destination) -> None:
        if destination.route in self._destinations:
            raise ValueError(f"Route already registered: {destination.route}")
        self._destinations[destination.route] = destination

    def build_routes(self) -> None:
        self._destinations.clear()
        static = STATIC_DESTINATIONS if self.library_available else STATIC_DESTINATIONS[:1]
        for destination in static:
            self.register(destination)
        if self.library_available:
            for category in ChannelCategory:
                self.register(
                    Destination(
                        category.route,
                        DestinationKind.CHANNEL_LIST,
                        CHANNEL_TITLES[category],
                        category=category,
                    )
                )
            self._register_settings_routes()
        self.dispatch("on_routes_changed")

    def _register_settings_routes(self) -> int:
        self.settings_root = classify_root(self._settings_provider.settings_get())
        routes = self._route_builder.build_routes(self.settings_root)
        for entry in routes:
            self.register(
                Destination(
                    settings_route(entry.route),
                    DestinationKind.SETTINGS_GROUP,
                    entry.path.name,
                    path=entry.path,
                    group=entry.group,
                )
            )
        log.info("Registered %d settings group routes", len(routes))
        return len(routes)

    def refresh_settings(self) -> int:
        """Re-read the settings tree and replace the settings group routes."""
        if not self.library_available:
            return 0
        for route, destination in list(self._destinations.items()):
            if destination.kind is DestinationKind.SETTINGS_GROUP:
                del self._destinations[route]
        count = self._register_settings_routes()
        stale = [r for r in self._back_stack if r not in self._destinations]
        if stale:
            self._back_stack = [r for r in self._back_stack if r in self._destinations]
            self.current_route = self._back_stack[-1]
        self.dispatch("on_routes_changed")
        return count

    def settings_group(self, route: str) -> Group:
        destination = self._destinations[route]
        if destination.group is None:
            raise KeyError(f"Not a settings group route: {route}")
        return destination.group

    # --- Back stack -----------------------------------------------------
    @property
    def back_stack(self) -> Tuple[str, ...]:
        return tuple(self._back_stack)

    def navigate(self, route: str) -> None:
        if route not in self._destinations:
            raise KeyError(f"Unknown route: {route}")
        self._back_stack.append(route)
        self.current_route = route

    def navigate_up(self) -> bool:
        if len(self._back_stack) <= 1:
            return False
        self._back_stack.pop()
        self.current_route = self._back_stack[-1]
        return True

    def navigate_to_settings(self) -> None:
        self.navigate(SETTINGS)

    def handle_back(self) -> bool:
        """System back: close the drawer if open, else go up. True if consumed."""
        if self.drawer_open:
            self.close_drawer()
            return True
        return self.navigate_up()

    # --- Drawer and FAB -------------------------------------------------
    def open_drawer(self) -> None:
        self.drawer_open = True

    def close_drawer(self) -> None:
        self.drawer_open = False

    def toggle_drawer(self) -> None:
        self.drawer_open = not self.drawer_open

    def toggle_fab(self) -> None:
        self.fab_expanded = not self.fab_expanded

    def install_package(self) -> None:
        self.fab_expanded = False
        if self._installer is not None:
            self._installer.install_package()

    def install_folder(self) -> None:
        self.fab_expanded = False
        if self._installer is not None:
            self._installer.install_folder()

    # --- Update channels ------------------------------------------------
    def _codec(self, store: ChannelListStore) -> Optional[ChannelCodec]:
        # Driver channels are listed by identifier, without Release/Development labels
        if not store.defaults.validated:
            return None
        return ChannelCodec(store.defaults.release, store.defaults.development)

    def _to_label(self, store: ChannelListStore, channel_id: str) -> str:
        codec = self._codec(store)
        return codec.to_label(channel_id) if codec else channel_id

    def _to_id(self, store: ChannelListStore, label: str) -> str:
        codec = self._codec(store)
        return codec.from_label(label) if codec else label

    def channel_screen(self, category: ChannelCategory) -> ChannelListScreenState:
        store = self.stores[category]
        snapshot = store.snapshot()
        return ChannelListScreenState(
            category=category,
            title=CHANNEL_TITLES[category],
            items=tuple(self._to_label(store, c) for c in snapshot.channels),
            selected=self._to_label(store, snapshot.selected),
            deletable=tuple(store.is_deletable(c) for c in snapshot.channels),
        )

    def add_channel(self, category: ChannelCategory, candidate: str) -> ChannelListScreenState:
        self.stores.add(category, candidate)
        return self.channel_screen(category)

    def delete_channel(self, category: ChannelCategory, label: str) -> ChannelListScreenState:
        channel_id = self._to_id(self.stores[category], label)
        if self.stores.is_deletable(category, channel_id):
            self.stores.remove(category, channel_id)
        else:
            log.debug("Refusing to delete protected %s channel %r", category.value, label)
        return self.channel_screen(category)

    def select_channel(self, category: ChannelCategory, label: str) -> None:
        self.stores.select(category, self._to_id(self.stores[category], label))
        self.navigate_up()
