from __future__ import annotations

from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDRaisedButton
from kivymd.uix.list import IconRightWidget, MDList, OneLineAvatarIconListItem
from kivymd.uix.screen import MDScreen
from kivymd.uix.scrollview import MDScrollView
from kivymd.uix.textfield import MDTextField
from kivymd.uix.toolbar import MDTopAppBar

from ...domain.channels import ChannelCategory
from ..navigation_host import NavigationHost
from ..strings import tr


class ChannelListScreen(MDScreen):
    """Update channel list for one category.

    Tapping an entry selects it and goes back; the delete icon is only shown
    for entries the store reports as deletable.
    """

    def __init__(self, host: NavigationHost, category: ChannelCategory, **kwargs):
        super().__init__(name=category.route, **kwargs)
        self.host = host
        self.category = category
        self.items: dict[str, OneLineAvatarIconListItem] = {}

        layout = MDBoxLayout(orientation="vertical")
        self._toolbar = MDTopAppBar(
            title=tr(host.channel_screen(category).title),
            left_action_items=[["arrow-left", lambda *_: host.navigate_up()]],
        )
        layout.add_widget(self._toolbar)

        self._list = MDList()
        scroll = MDScrollView()
        scroll.add_widget(self._list)
        layout.add_widget(scroll)

        add_row = MDBoxLayout(orientation="horizontal", size_hint_y=None, height="64dp", padding=8, spacing=8)
        self.name_field = MDTextField(hint_text=tr("add_channel"))
        add_row.add_widget(self.name_field)
        add_row.add_widget(MDRaisedButton(text="Add", on_release=self._on_add))
        layout.add_widget(add_row)
        self.add_widget(layout)

        store = host.stores[category]
        store.bind(channels=lambda *_: self.refresh(), selected=lambda *_: self.refresh())
        self.refresh()

    def refresh(self):
        state = self.host.channel_screen(self.category)
        self._list.clear_widgets()
        self.items = {}
        for label, deletable in zip(state.items, state.deletable):
            item = OneLineAvatarIconListItem(
                text=tr(label), on_release=lambda _w, lbl=label: self._on_select(lbl)
            )
            if label == state.selected:
                item.theme_text_color = "Custom"
                item.text_color = item.theme_cls.primary_color
            if deletable:
                item.add_widget(
                    IconRightWidget(
                        icon="delete", on_release=lambda _w, lbl=label: self._on_delete(lbl)
                    )
                )
            self.items[label] = item
            self._list.add_widget(item)

    def _on_select(self, label: str):
        self.host.select_channel(self.category, label)

    def _on_delete(self, label: str):
        self.host.delete_channel(self.category, label)

    def _on_add(self, *_):
        text = self.name_field.text.strip()
        if text:
            self.host.add_channel(self.category, text)
        self.name_field.text = ""
