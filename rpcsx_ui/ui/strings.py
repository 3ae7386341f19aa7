"""Display strings for label tokens used by the navigation layer."""

STRINGS = {
    "Release": "Release",
    "Development": "Development",
    "games": "Games",
    "users": "Users",
    "settings": "Settings",
    "advanced_settings": "Advanced Settings",
    "controls": "Controls",
    "drivers": "GPU Drivers",
    "update_channels": "Update Channels",
    "driver_download_channel": "Driver download channel",
    "ui_update_channel": "UI update channel",
    "rpcsx_download_channel": "RPCSX download channel",
    "add_channel": "Add channel",
    "no_settings": "No settings available",
}


def tr(token: str) -> str:
    """Display string for ``token``; unknown tokens display as themselves."""
    return STRINGS.get(token, token)
