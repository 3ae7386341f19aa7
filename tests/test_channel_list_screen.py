"""Widget tests for ChannelListScreen.

KivyMD widgets need a working window provider and an App instance for their
theme. Where neither is available (headless CI with the mock window) these
tests skip. The store bindings the screen relies on are covered without
widgets in test_navigation_host.py.
"""

from __future__ import annotations

import pytest

from rpcsx_ui.domain.channels import ChannelCategory
from rpcsx_ui.ui.navigation_host import NavigationHost

try:
    from kivymd.app import MDApp
    from rpcsx_ui.ui.screens.channel_list import ChannelListScreen
except (
    BaseException
) as e:  # pragma: no cover - includes SystemExit from Kivy window init
    ChannelListScreen = None  # type: ignore
    _import_error = e  # type: ignore
else:
    _import_error = None


class FakeSettingsProvider:
    def settings_get(self):
        return {}


@pytest.fixture
def screen(stores):
    if ChannelListScreen is None:
        pytest.skip(f"ChannelListScreen unavailable: {_import_error}")
    # KivyMD widgets take their theme from the current App instance
    try:
        MDApp.get_running_app() or MDApp()
    except BaseException as e:  # pragma: no cover
        pytest.skip(f"MDApp unavailable: {e}")
    host = NavigationHost(stores, settings_provider=FakeSettingsProvider())
    return ChannelListScreen(host, ChannelCategory.UI)


def test_lists_labels_and_delete_affordance(screen):
    assert list(screen.items) == ["Release", "Development"]
    screen.host.add_channel(ChannelCategory.UI, "custom/x")
    # Store property change rebuilds the list
    assert list(screen.items) == ["Release", "Development", "custom/x"]


def test_add_field_adds_and_clears(screen):
    screen.name_field.text = "  custom/y "
    screen._on_add()
    assert screen.name_field.text == ""
    assert "custom/y" in screen.items


def test_select_goes_back(screen):
    screen.host.navigate("update_channels")
    screen.host.navigate("ui_channels")
    screen._on_select("Development")
    assert screen.host.current_route == "update_channels"
