# Configure Kivy window size BEFORE importing any Kivy window modules
from kivy.config import Config

Config.set("graphics", "width", "480")
Config.set("graphics", "height", "800")

from .config.settings import PREFS_FILE, SETTINGS_FILE
from .domain.channel_list_store import ChannelStores
from .domain.settings_provider import JsonFileSettingsProvider
from .infrastructure.preferences import Preferences
from .logging_config import get_logger, init_logging
from .ui.navigation_host import NavigationHost

log = get_logger(__name__)


def create_host() -> NavigationHost:
    stores = ChannelStores(Preferences(PREFS_FILE))
    provider = JsonFileSettingsProvider(SETTINGS_FILE)
    if not provider.available():
        log.warning("No settings found at %s; only the games screen is available", SETTINGS_FILE)
        provider = None
    return NavigationHost(stores, settings_provider=provider)


def run():
    init_logging()
    from .ui.gui import create_gui

    host = create_host()
    log.info("Preferences: %s", PREFS_FILE)
    create_gui(host).run()


if __name__ == "__main__":
    run()
