from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ..config.settings import (
    DEFAULT_GPU_DRIVER_CHANNEL,
    DEV_RPCSX_CHANNEL,
    DEV_UI_CHANNEL,
    RELEASE_RPCSX_CHANNEL,
    RELEASE_UI_CHANNEL,
)
from .channel_codec import DEVELOPMENT_LABEL, RELEASE_LABEL


class ChannelCategory(Enum):
    """Update channel categories; the value is the persisted key prefix."""

    DRIVER = "gpu_driver"
    UI = "ui"
    CORE = "rpcsx"

    @property
    def list_key(self) -> str:
        return f"{self.value}_channel_list"

    @property
    def selection_key(self) -> str:
        return f"{self.value}_channel"

    @property
    def route(self) -> str:
        return f"{self.value}_channels"


@dataclass(frozen=True)
class CategoryDefaults:
    release: str
    development: Optional[str]
    default_list: Tuple[str, ...]
    # Validated categories reject reserved names on add and protect them from delete
    validated: bool

    @property
    def reserved_tokens(self) -> Tuple[str, ...]:
        tokens = [RELEASE_LABEL, DEVELOPMENT_LABEL, self.release]
        if self.development is not None:
            tokens.append(self.development)
        return tuple(tokens)

    def is_reserved(self, channel: str) -> bool:
        return channel in self.reserved_tokens


CATEGORY_DEFAULTS: Dict[ChannelCategory, CategoryDefaults] = {
    ChannelCategory.DRIVER: CategoryDefaults(
        release=DEFAULT_GPU_DRIVER_CHANNEL,
        development=None,
        default_list=(DEFAULT_GPU_DRIVER_CHANNEL,),
        validated=False,
    ),
    ChannelCategory.UI: CategoryDefaults(
        release=RELEASE_UI_CHANNEL,
        development=DEV_UI_CHANNEL,
        default_list=(RELEASE_UI_CHANNEL, DEV_UI_CHANNEL),
        validated=True,
    ),
    ChannelCategory.CORE: CategoryDefaults(
        release=RELEASE_RPCSX_CHANNEL,
        development=DEV_RPCSX_CHANNEL,
        default_list=(RELEASE_RPCSX_CHANNEL, DEV_RPCSX_CHANNEL),
        validated=True,
    ),
}
