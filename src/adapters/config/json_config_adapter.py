"""JSON file-based config adapter."""

import json
import os
import sys

from src.domain.ports import ConfigPort

_DEFAULTS = {
    "catalog_path": "AxigallyDatabase.csv",
    "log_level": "INFO",
    "log_file": "",
    "window_width": 850,
    "window_height": 500,
}


def _config_dir() -> str:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


class JsonConfigAdapter(ConfigPort):

    def __init__(self, path: str | None = None):
        self.path = path or os.path.join(_config_dir(), "config.json")

    def load(self) -> dict:
        cfg = dict(_DEFAULTS)
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf-8") as f:
                cfg.update(json.load(f))
        return cfg
