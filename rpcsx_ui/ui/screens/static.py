"""Fixed destinations. Their content belongs to other parts of the app; these
screens only carry the navigation affordances the host wires up."""

from __future__ import annotations

from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFloatingActionButton
from kivymd.uix.floatlayout import MDFloatLayout
from kivymd.uix.label import MDLabel
from kivymd.uix.list import MDList, OneLineListItem
from kivymd.uix.screen import MDScreen
from kivymd.uix.scrollview import MDScrollView
from kivymd.uix.toolbar import MDTopAppBar

from ...domain.channels import ChannelCategory
from ...domain.settings_tree import RoutePath
from ..navigation_host import NavigationHost
from ..routes import CHANNEL_TITLES, CONTROLS, DRIVERS, UPDATE_CHANNELS, USERS, settings_route
from ..strings import tr


def _back_bar(host: NavigationHost, title: str, actions=None) -> MDTopAppBar:
    return MDTopAppBar(
        title=tr(title),
        left_action_items=[["arrow-left", lambda *_: host.navigate_up()]],
        right_action_items=actions or [],
    )


class PlaceholderScreen(MDScreen):  # pragma: no cover - UI heavy
    def __init__(self, host: NavigationHost, route: str, title: str, **kwargs):
        super().__init__(name=route, **kwargs)
        layout = MDBoxLayout(orientation="vertical")
        layout.add_widget(_back_bar(host, title))
        layout.add_widget(MDLabel(text=tr(title), halign="center"))
        self.add_widget(layout)


class GamesScreen(MDScreen):  # pragma: no cover - UI heavy
    """Start destination: menu button for the drawer and the install FAB."""

    def __init__(self, host: NavigationHost, route: str, title: str, **kwargs):
        super().__init__(name=route, **kwargs)
        self.host = host
        root = MDFloatLayout()
        layout = MDBoxLayout(orientation="vertical")
        layout.add_widget(
            MDTopAppBar(
                title="RPCSX",
                left_action_items=[["menu", lambda *_: host.toggle_drawer()]],
            )
        )
        layout.add_widget(MDLabel(text=tr(title), halign="center"))
        root.add_widget(layout)

        self._package_fab = MDFloatingActionButton(
            icon="file-document",
            pos_hint={"right": 0.97, "y": 0.31},
            on_release=lambda *_: host.install_package(),
        )
        self._folder_fab = MDFloatingActionButton(
            icon="folder",
            pos_hint={"right": 0.97, "y": 0.18},
            on_release=lambda *_: host.install_folder(),
        )
        root.add_widget(
            MDFloatingActionButton(
                icon="plus",
                pos_hint={"right": 0.97, "y": 0.04},
                on_release=lambda *_: host.toggle_fab(),
            )
        )
        self.add_widget(root)
        self._fab_layer = root
        host.bind(fab_expanded=self._on_fab_expanded)

    def _on_fab_expanded(self, _host, expanded: bool):
        for fab in (self._package_fab, self._folder_fab):
            if expanded and fab.parent is None:
                self._fab_layer.add_widget(fab)
            elif not expanded and fab.parent is not None:
                self._fab_layer.remove_widget(fab)


class _RouteListScreen(MDScreen):  # pragma: no cover - UI heavy
    def __init__(self, host: NavigationHost, route: str, title: str, **kwargs):
        super().__init__(name=route, **kwargs)
        self.host = host
        layout = MDBoxLayout(orientation="vertical")
        layout.add_widget(_back_bar(host, title, self.bar_actions()))
        self._list = MDList()
        scroll = MDScrollView()
        scroll.add_widget(self._list)
        layout.add_widget(scroll)
        self.add_widget(layout)
        host.bind(on_routes_changed=lambda *_: self.refresh())
        self.refresh()

    def bar_actions(self):
        return []

    def entries(self):
        return []

    def refresh(self):
        self._list.clear_widgets()
        for text, target in self.entries():
            if self.host.has_route(target):
                self._list.add_widget(
                    OneLineListItem(text=text, on_release=lambda _w, t=target: self.host.navigate(t))
                )


class SettingsScreen(_RouteListScreen):  # pragma: no cover - UI heavy
    """Fixed settings entries followed by the top-level settings groups."""

    def bar_actions(self):
        return [["refresh", lambda *_: self.host.refresh_settings()]]

    def entries(self):
        fixed = [
            (tr("update_channels"), UPDATE_CHANNELS),
            (tr("drivers"), DRIVERS),
            (tr("controls"), CONTROLS),
            (tr("users"), USERS),
        ]
        groups = [
            (key, settings_route(RoutePath((key,)).encode())) for key, _ in self.host.settings_root.groups()
        ]
        return fixed + groups


class UpdateChannelsScreen(_RouteListScreen):  # pragma: no cover - UI heavy
    def entries(self):
        return [(tr(CHANNEL_TITLES[c]), c.route) for c in ChannelCategory]
