from __future__ import annotations

from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.list import MDList, OneLineIconListItem, IconLeftWidget
from kivymd.uix.navigationdrawer import MDNavigationDrawer
from kivymd.uix.scrollview import MDScrollView

from ..navigation_host import NavigationHost
from ..routes import SETTINGS, UPDATE_CHANNELS
from ..strings import tr


class LeftDrawer(MDNavigationDrawer):  # pragma: no cover - UI heavy
    """Navigation drawer whose open state follows ``NavigationHost.drawer_open``.

    Swipe or scrim dismissal on the widget side is reported back to the host
    so both sides agree on the flag.
    """

    def __init__(self, host: NavigationHost, **kwargs):
        super().__init__(**kwargs)
        self.host = host
        self.width = "240dp"
        self.anchor = "left"
        container = MDBoxLayout(orientation="vertical", padding=8, spacing=8)
        self._list = MDList()
        scroll = MDScrollView()
        scroll.add_widget(self._list)
        container.add_widget(scroll)
        self.add_widget(container)

        self._add_item(tr("settings"), "cog", self._open_settings)
        self._add_item(tr("update_channels"), "update", self._open_update_channels)

        host.bind(drawer_open=self._on_host_drawer)
        self.bind(state=self._on_widget_state)

    def _add_item(self, text, icon, callback):
        item = OneLineIconListItem(text=text, on_release=lambda *_: callback())
        item.add_widget(IconLeftWidget(icon=icon))
        self._list.add_widget(item)

    def _open_settings(self):
        if self.host.has_route(SETTINGS):
            self.host.navigate_to_settings()
        self.host.close_drawer()

    def _open_update_channels(self):
        if self.host.has_route(UPDATE_CHANNELS):
            self.host.navigate(UPDATE_CHANNELS)
        self.host.close_drawer()

    def _on_host_drawer(self, _host, is_open: bool):
        wanted = "open" if is_open else "close"
        if self.state != wanted:
            self.set_state(wanted)

    def _on_widget_state(self, _drawer, state: str):
        is_open = state == "open"
        if self.host.drawer_open != is_open:
            self.host.drawer_open = is_open
