"""Tests for configuration loading.

**Feature: wins-and-losses**
"""

from pathlib import Path

import toml

from winsandlosses.config import Settings, create_template_config, load_config
from winsandlosses.engine import WeekPolicy


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_config(tmp_path / "absent.toml")
        assert settings == Settings()
        assert settings.journal.week_policy is WeekPolicy.CALENDAR
        assert settings.journal.recent_limit == 3

    def test_values_read(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(toml.dumps({
            "storage": {"db_path": "~/journal.db"},
            "journal": {"week_policy": "rolling", "recent_limit": 5},
            "logging": {"level": "debug"},
        }))

        settings = load_config(path)

        assert settings.storage.db_path == Path.home() / "journal.db"
        assert settings.journal.week_policy is WeekPolicy.ROLLING
        assert settings.journal.recent_limit == 5
        assert settings.logging.level == "DEBUG"

    def test_invalid_toml_gives_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[journal\nweek_policy = ")
        assert load_config(path) == Settings()

    def test_invalid_values_give_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(toml.dumps({"journal": {"week_policy": "fortnight"}}))
        assert load_config(path) == Settings()


class TestTemplateConfig:
    def test_template_loads(self, tmp_path):
        path = create_template_config(tmp_path / "nested" / "config.toml")
        assert path.exists()
        assert load_config(path) == Settings()
