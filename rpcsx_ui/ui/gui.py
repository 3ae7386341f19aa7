from __future__ import annotations

from typing import Dict

from kivy.core.window import Window
from kivy.uix.screenmanager import NoTransition, ScreenManager
from kivymd.app import MDApp
from kivymd.uix.navigationdrawer import MDNavigationLayout
from kivymd.uix.screen import MDScreen

from ..logging_config import get_logger
from .components.left_drawer import LeftDrawer
from .navigation_host import NavigationHost
from .routes import GAMES, SETTINGS, UPDATE_CHANNELS, Destination, DestinationKind
from .screens.channel_list import ChannelListScreen
from .screens.settings_group import SettingsGroupScreen
from .screens.static import GamesScreen, PlaceholderScreen, SettingsScreen, UpdateChannelsScreen

log = get_logger(__name__)

KEY_BACK = 27

STATIC_SCREENS = {
    GAMES: GamesScreen,
    SETTINGS: SettingsScreen,
    UPDATE_CHANNELS: UpdateChannelsScreen,
}


class RpcsxApp(MDApp):  # pragma: no cover - UI heavy
    """KivyMD shell around a ``NavigationHost``.

    Screens are created the first time their route becomes current and
    follow ``host.current_route`` afterwards. When the host rebuilds its
    route table, screens built from a replaced destination are dropped and
    the visible one is rebuilt in place.
    """

    def __init__(self, host: NavigationHost, **kwargs):
        super().__init__(**kwargs)
        self.host = host
        self._screens: Dict[str, MDScreen] = {}
        self._built_from: Dict[str, Destination] = {}
        self._screen_manager: ScreenManager | None = None

    def build(self):
        self.theme_cls.theme_style = "Dark"
        self.theme_cls.primary_palette = "Teal"

        screen = MDScreen()
        layout = MDNavigationLayout()
        self._screen_manager = ScreenManager(transition=NoTransition())
        layout.add_widget(self._screen_manager)
        layout.add_widget(LeftDrawer(self.host))
        screen.add_widget(layout)

        self.host.bind(current_route=self._on_route)
        self.host.bind(on_routes_changed=self._on_routes_changed)
        Window.bind(on_keyboard=self._on_keyboard)
        self._on_route(self.host, self.host.current_route)
        return screen

    def _create_screen(self, destination: Destination) -> MDScreen:
        if destination.kind is DestinationKind.CHANNEL_LIST:
            return ChannelListScreen(self.host, destination.category)
        if destination.kind is DestinationKind.SETTINGS_GROUP:
            return SettingsGroupScreen(
                self.host,
                destination.route,
                destination.title,
                destination.group,
                destination.path,
            )
        factory = STATIC_SCREENS.get(destination.route, PlaceholderScreen)
        return factory(self.host, destination.route, destination.title)

    def _on_route(self, _host, route: str):
        screen = self._screens.get(route)
        if screen is None:
            destination = self.host.destination(route)
            screen = self._create_screen(destination)
            self._screens[route] = screen
            self._built_from[route] = destination
            self._screen_manager.add_widget(screen)
        self._screen_manager.current = route

    def _drop_screen(self, route: str):
        self._screen_manager.remove_widget(self._screens.pop(route))
        self._built_from.pop(route, None)

    def _on_routes_changed(self, *_):
        current = self.host.current_route
        for route in list(self._screens):
            if not self.host.is_current_destination(route, self._built_from[route]):
                self._drop_screen(route)
        if current not in self._screens:
            # The visible screen was built from a replaced destination
            self._on_route(self.host, current)
        log.debug("Screen cache now holds %d screens", len(self._screens))

    def _on_keyboard(self, _window, key, *_):
        if key == KEY_BACK:
            return self.host.handle_back()
        return False


def create_gui(host: NavigationHost) -> RpcsxApp:
    return RpcsxApp(host=host)
