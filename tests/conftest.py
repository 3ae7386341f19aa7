from __future__ import annotations

import os

# Kivy reads these at import time: keep it away from pytest's argv and the console,
# and use the mock window so widget tests run headless.
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_WINDOW", "mock")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

import pytest

from rpcsx_ui.domain.channel_list_store import ChannelStores
from rpcsx_ui.infrastructure.preferences import Preferences


@pytest.fixture
def prefs(tmp_path):
    return Preferences(tmp_path / "app_prefs.json")


@pytest.fixture
def stores(prefs):
    return ChannelStores(prefs)
