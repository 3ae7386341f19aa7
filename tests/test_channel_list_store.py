"""Tests for the persisted update channel lists."""

from __future__ import annotations

import json

import pytest

from rpcsx_ui.config.settings import (
    DEFAULT_GPU_DRIVER_CHANNEL,
    DEV_RPCSX_CHANNEL,
    DEV_UI_CHANNEL,
    RELEASE_RPCSX_CHANNEL,
    RELEASE_UI_CHANNEL,
)
from rpcsx_ui.domain.channel_list_store import ChannelListStore, ChannelStores
from rpcsx_ui.domain.channels import CategoryDefaults, ChannelCategory
from rpcsx_ui.infrastructure.preferences import Preferences

VALIDATED = [ChannelCategory.UI, ChannelCategory.CORE]


def test_first_load_uses_defaults_and_persists_selection(stores, prefs):
    channels, selected = stores.load(ChannelCategory.UI)
    assert channels == [RELEASE_UI_CHANNEL, DEV_UI_CHANNEL]
    assert selected == RELEASE_UI_CHANNEL
    assert prefs.get_string("ui_channel") == RELEASE_UI_CHANNEL
    # The list itself is only written by mutations
    assert prefs.get_string_list("ui_channel_list") is None


def test_driver_defaults(stores):
    assert stores.load(ChannelCategory.DRIVER) == (
        [DEFAULT_GPU_DRIVER_CHANNEL],
        DEFAULT_GPU_DRIVER_CHANNEL,
    )


def test_core_defaults(stores):
    assert stores.load(ChannelCategory.CORE) == (
        [RELEASE_RPCSX_CHANNEL, DEV_RPCSX_CHANNEL],
        RELEASE_RPCSX_CHANNEL,
    )


@pytest.mark.parametrize("category", list(ChannelCategory))
def test_load_is_idempotent(stores, category):
    first = stores.load(category)
    assert stores.load(category) == first


@pytest.mark.parametrize("category", list(ChannelCategory))
def test_writes_visible_to_next_load(prefs, category):
    store = ChannelStores(prefs)
    store.add(category, "custom/x")
    store.select(category, "custom/x")

    fresh = ChannelStores(prefs)
    channels, selected = fresh.load(category)
    assert channels[-1] == "custom/x"
    assert selected == "custom/x"


def test_empty_persisted_list_falls_back_to_defaults(prefs, stores):
    prefs.put_string_list("ui_channel_list", [])
    prefs.put_string("ui_channel", "")
    assert stores.load(ChannelCategory.UI) == (
        [RELEASE_UI_CHANNEL, DEV_UI_CHANNEL],
        RELEASE_UI_CHANNEL,
    )


def test_malformed_persisted_values_fall_back(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"rpcsx_channel_list": "oops", "rpcsx_channel": 12}))
    stores = ChannelStores(Preferences(path))
    assert stores.load(ChannelCategory.CORE) == (
        [RELEASE_RPCSX_CHANNEL, DEV_RPCSX_CHANNEL],
        RELEASE_RPCSX_CHANNEL,
    )


def test_persisted_duplicates_are_collapsed(prefs, stores):
    prefs.put_string_list("gpu_driver_channel_list", ["a", "b", "a"])
    channels, _ = stores.load(ChannelCategory.DRIVER)
    assert channels == ["a", "b"]


@pytest.mark.parametrize("category", list(ChannelCategory))
def test_add_twice_equals_add_once(stores, category):
    once = stores.add(category, "custom/x")
    assert stores.add(category, "custom/x") == once
    assert once.count("custom/x") == 1


@pytest.mark.parametrize("category", VALIDATED)
@pytest.mark.parametrize("token", ["Release", "Development"])
def test_reserved_labels_rejected(stores, category, token):
    before, _ = stores.load(category)
    assert stores.add(category, token) == before
    stores.remove(category, before[0])
    assert token not in stores.add(category, token)


@pytest.mark.parametrize("category", VALIDATED)
def test_reserved_defaults_rejected_even_after_removal(stores, category):
    channels, _ = stores.load(category)
    release = channels[0]
    stores.remove(category, release)
    assert release not in stores.add(category, release)


def test_driver_accepts_reserved_label_names(stores):
    assert stores.add(ChannelCategory.DRIVER, "Release")[-1] == "Release"


def test_add_appends_preserving_order(stores):
    stores.add(ChannelCategory.UI, "custom/a")
    assert stores.add(ChannelCategory.UI, "custom/b") == [
        RELEASE_UI_CHANNEL,
        DEV_UI_CHANNEL,
        "custom/a",
        "custom/b",
    ]


def test_empty_candidate_is_appended_like_any_other(stores):
    # Blank input is filtered by the screen, the store only rejects duplicates and reserved names
    assert stores.add(ChannelCategory.UI, "") == [RELEASE_UI_CHANNEL, DEV_UI_CHANNEL, ""]
    assert stores.add(ChannelCategory.UI, "") == [RELEASE_UI_CHANNEL, DEV_UI_CHANNEL, ""]
    assert stores.add(ChannelCategory.DRIVER, "") == [DEFAULT_GPU_DRIVER_CHANNEL, ""]


def test_remove_first_occurrence_and_persist(prefs, stores):
    stores.add(ChannelCategory.DRIVER, "b")
    assert stores.remove(ChannelCategory.DRIVER, DEFAULT_GPU_DRIVER_CHANNEL) == ["b"]
    assert prefs.get_string_list("gpu_driver_channel_list") == ["b"]


def test_remove_missing_is_noop(stores):
    assert stores.remove(ChannelCategory.DRIVER, "nope") == [DEFAULT_GPU_DRIVER_CHANNEL]


def test_remove_is_unguarded(stores):
    # The store does what it is told; guarding is the caller's job
    assert not stores.is_deletable(ChannelCategory.UI, RELEASE_UI_CHANNEL)
    assert stores.remove(ChannelCategory.UI, RELEASE_UI_CHANNEL) == [DEV_UI_CHANNEL]


def test_driver_deletable_only_with_more_than_one_entry(stores):
    assert not stores.is_deletable(ChannelCategory.DRIVER, DEFAULT_GPU_DRIVER_CHANNEL)
    stores.add(ChannelCategory.DRIVER, "other")
    assert stores.is_deletable(ChannelCategory.DRIVER, DEFAULT_GPU_DRIVER_CHANNEL)
    assert stores.is_deletable(ChannelCategory.DRIVER, "other")


@pytest.mark.parametrize("category", VALIDATED)
def test_validated_deletable_unless_reserved(stores, category):
    store = stores[category]
    for token in store.defaults.reserved_tokens:
        assert not stores.is_deletable(category, token)
    stores.add(category, "custom/x")
    assert stores.is_deletable(category, "custom/x")


def test_select_does_not_add_and_delete_does_not_reselect(stores):
    stores.select(ChannelCategory.UI, "elsewhere/y")
    channels, selected = stores.load(ChannelCategory.UI)
    assert "elsewhere/y" not in channels
    assert selected == "elsewhere/y"

    stores.add(ChannelCategory.UI, "custom/x")
    stores.select(ChannelCategory.UI, "custom/x")
    stores.remove(ChannelCategory.UI, "custom/x")
    assert stores.load(ChannelCategory.UI)[1] == "custom/x"


def test_store_properties_follow_mutations(prefs):
    store = ChannelListStore(ChannelCategory.CORE, prefs)
    seen = []
    store.bind(channels=lambda _s, value: seen.append(list(value)))
    store.load()
    store.add("custom/x")
    assert seen[-1] == [RELEASE_RPCSX_CHANNEL, DEV_RPCSX_CHANNEL, "custom/x"]
    store.select("custom/x")
    assert store.selected == "custom/x"
    assert store.snapshot().channels == (RELEASE_RPCSX_CHANNEL, DEV_RPCSX_CHANNEL, "custom/x")


def test_ui_package_scenario(prefs):
    defaults = CategoryDefaults(
        release="org/release",
        development="org/dev",
        default_list=("org/release", "org/dev"),
        validated=True,
    )
    store = ChannelListStore(ChannelCategory.UI, prefs, defaults=defaults)
    store.load()
    assert store.add("org/release") == ["org/release", "org/dev"]
    assert store.add("custom/x") == ["org/release", "org/dev", "custom/x"]


def test_categories_do_not_share_state(stores):
    stores.add(ChannelCategory.UI, "custom/x")
    assert "custom/x" not in stores.load(ChannelCategory.CORE)[0]
    assert "custom/x" not in stores.load(ChannelCategory.DRIVER)[0]
