import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("RPCSX_UI_DATA_DIR") or Path.home() / ".rpcsx_ui")
PREFS_FILE = Path(os.environ.get("RPCSX_UI_PREFS_FILE") or DATA_DIR / "app_prefs.json")
SETTINGS_FILE = Path(
    os.environ.get("RPCSX_UI_SETTINGS_FILE") or DATA_DIR / "settings.json"
)

# Built-in update channels
DEFAULT_GPU_DRIVER_CHANNEL = "K11MCH1/AdrenoToolsDrivers"
RELEASE_UI_CHANNEL = "RPCSX/rpcsx-ui-android"
DEV_UI_CHANNEL = "RPCSX/rpcsx-ui-android-build"
RELEASE_RPCSX_CHANNEL = "RPCSX/rpcsx"
DEV_RPCSX_CHANNEL = "RPCSX/rpcsx-build"
