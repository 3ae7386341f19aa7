"""Route identifiers of the navigation host."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..domain.channels import ChannelCategory
from ..domain.settings_tree import Group, RoutePath

GAMES = "games"
USERS = "users"
SETTINGS = "settings"
CONTROLS = "controls"
DRIVERS = "drivers"
UPDATE_CHANNELS = "update_channels"

START_DESTINATION = GAMES


class DestinationKind(Enum):
    STATIC = "static"
    CHANNEL_LIST = "channel_list"
    SETTINGS_GROUP = "settings_group"


@dataclass(frozen=True)
class Destination:
    route: str
    kind: DestinationKind
    title: str
    category: Optional[ChannelCategory] = None
    path: Optional[RoutePath] = None
    group: Optional[Group] = None


STATIC_DESTINATIONS: Tuple[Destination, ...] = (
    Destination(GAMES, DestinationKind.STATIC, "games"),
    Destination(USERS, DestinationKind.STATIC, "users"),
    Destination(SETTINGS, DestinationKind.STATIC, "settings"),
    Destination(CONTROLS, DestinationKind.STATIC, "controls"),
    Destination(DRIVERS, DestinationKind.STATIC, "drivers"),
    Destination(UPDATE_CHANNELS, DestinationKind.STATIC, "update_channels"),
)

CHANNEL_TITLES = {
    ChannelCategory.DRIVER: "driver_download_channel",
    ChannelCategory.UI: "ui_update_channel",
    ChannelCategory.CORE: "rpcsx_download_channel",
}


def settings_route(encoded_path: str) -> str:
    return SETTINGS + encoded_path
