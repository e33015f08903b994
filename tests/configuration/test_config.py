"""Bounded context: Configuration

Where the catalog lives and how the app logs.
"""

import json
import logging

from src.adapters.config.json_config_adapter import JsonConfigAdapter
from src.logging_setup import configure_logging


class TestConfigDefaults:
    """The app runs with sensible defaults when no config file exists."""

    def test_load_returns_defaults_when_no_file(self, tmp_path):
        adapter = JsonConfigAdapter(path=str(tmp_path / "config.json"))
        loaded = adapter.load()

        assert loaded["catalog_path"] == "AxigallyDatabase.csv"
        assert loaded["log_level"] == "INFO"
        assert loaded["log_file"] == ""
        assert loaded["window_width"] == 850
        assert loaded["window_height"] == 500


class TestConfigFile:
    """A config.json next to the app overrides the defaults it names."""

    def test_file_values_override_defaults(self, tmp_path):
        config_path = str(tmp_path / "config.json")
        with open(config_path, "w") as f:
            json.dump({"catalog_path": "gigs/summer.csv", "log_level": "DEBUG"}, f)

        loaded = JsonConfigAdapter(path=config_path).load()

        assert loaded["catalog_path"] == "gigs/summer.csv"
        assert loaded["log_level"] == "DEBUG"
        assert loaded["window_height"] == 500

    def test_unknown_keys_are_kept(self, tmp_path):
        config_path = str(tmp_path / "config.json")
        with open(config_path, "w") as f:
            json.dump({"theme": "dark"}, f)

        loaded = JsonConfigAdapter(path=config_path).load()

        assert loaded["theme"] == "dark"
        assert loaded["catalog_path"] == "AxigallyDatabase.csv"


class TestLogging:

    def test_file_logging(self, tmp_path):
        log_path = tmp_path / "app.log"
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            configure_logging("debug", str(log_path))
            logging.getLogger("setlist_shuffle.catalog").debug("Skipping line %s", 7)
            for handler in root.handlers:
                handler.flush()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

        content = log_path.read_text(encoding="utf-8")
        assert "DEBUG setlist_shuffle.catalog: Skipping line 7" in content
