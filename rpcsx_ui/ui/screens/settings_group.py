from __future__ import annotations

from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.list import MDList, OneLineListItem, TwoLineListItem
from kivymd.uix.screen import MDScreen
from kivymd.uix.scrollview import MDScrollView
from kivymd.uix.toolbar import MDTopAppBar

from ...domain.settings_tree import Group, RoutePath
from ..navigation_host import NavigationHost
from ..routes import settings_route
from ..strings import tr


class SettingsGroupScreen(MDScreen):  # pragma: no cover - UI heavy
    """Lists one settings group: subgroups navigate, leaves show their type."""

    def __init__(self, host: NavigationHost, route: str, title: str, group: Group, path: RoutePath, **kwargs):
        super().__init__(name=route, **kwargs)
        self.host = host
        layout = MDBoxLayout(orientation="vertical")
        layout.add_widget(
            MDTopAppBar(
                title=tr(title) if title else tr("advanced_settings"),
                left_action_items=[["arrow-left", lambda *_: host.navigate_up()]],
            )
        )
        entries = MDList()
        scroll = MDScrollView()
        scroll.add_widget(entries)
        layout.add_widget(scroll)
        self.add_widget(layout)

        for key, _child in group.groups():
            target = settings_route(path.child(key).encode())
            if not host.has_route(target):
                continue
            entries.add_widget(
                OneLineListItem(text=key, on_release=lambda _w, t=target: host.navigate(t))
            )
        for key, leaf in group.leaves():
            kind = leaf.payload.get("type", "") if isinstance(leaf.payload, dict) else ""
            entries.add_widget(TwoLineListItem(text=key, secondary_text=str(kind)))
        if not group.children:
            entries.add_widget(OneLineListItem(text=tr("no_settings")))
