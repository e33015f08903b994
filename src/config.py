"""Configuration: catalog file format constants and app settings."""

from src.adapters.config.json_config_adapter import JsonConfigAdapter

_cfg = JsonConfigAdapter().load()

# Catalog file
DEFAULT_CATALOG_FILE = "AxigallyDatabase.csv"
CATALOG_ENCODING = "utf-8"
CATALOG_MIN_FIELDS = 11
SAVE_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
SAVE_MARKER = "\n--- Setlist saved on {timestamp} ---\n"

# User settings
CATALOG_PATH = _cfg.get("catalog_path") or DEFAULT_CATALOG_FILE
LOG_LEVEL = _cfg.get("log_level", "INFO")
LOG_FILE = _cfg.get("log_file", "")

# Window
APP_NAME = "Axigally Setlist Shuffle"
WINDOW_WIDTH = int(_cfg.get("window_width", 850))
WINDOW_HEIGHT = int(_cfg.get("window_height", 500))
