"""
Domain layer for the rpcsx-ui navigation host.

- channel_codec: identifier <-> label mapping for update channels
- channel_list_store: persisted per-category channel lists
- settings_tree / route_builder: settings groups as navigable routes
"""

from .channel_codec import ChannelCodec, RELEASE_LABEL, DEVELOPMENT_LABEL
from .channels import ChannelCategory, CategoryDefaults, CATEGORY_DEFAULTS
from .channel_list_store import ChannelListStore, ChannelStores, ChannelSnapshot
from .settings_tree import Group, Leaf, RoutePath, classify, classify_root
from .route_builder import SettingsRouteBuilder

__all__ = [
    "ChannelCodec",
    "RELEASE_LABEL",
    "DEVELOPMENT_LABEL",
    "ChannelCategory",
    "CategoryDefaults",
    "CATEGORY_DEFAULTS",
    "ChannelListStore",
    "ChannelStores",
    "ChannelSnapshot",
    "Group",
    "Leaf",
    "RoutePath",
    "classify",
    "classify_root",
    "SettingsRouteBuilder",
]
