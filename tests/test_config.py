"""Tests for config loading."""

from pathlib import Path

import pytest

from weekplan.config import DATA_DIR, Config, load_config


@pytest.fixture
def write_config(tmp_path):
    def _write(content: str) -> Path:
        path = tmp_path / "weekplan.conf"
        path.write_text(content)
        return path
    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.conf")
        assert config == Config()
        assert config.user_id == "default"
        assert config.week_start_day == "Sunday"

    def test_parses_values(self, write_config):
        path = write_config(
            "# weekplan settings\n"
            "DATA_DIR = ~/plans\n"
            'USER_ID = "alice" # me\n'
            "WEEK_START_DAY = monday\n"
        )
        config = load_config(path)
        assert config.data_dir == "~/plans"
        assert config.user_id == "alice"
        assert config.week_start_day == "Monday"

    def test_strips_inline_comment_from_unquoted(self, write_config):
        config = load_config(write_config("USER_ID = bob # comment\n"))
        assert config.user_id == "bob"

    def test_single_quotes(self, write_config):
        config = load_config(write_config("DATA_DIR = '/tmp/plan # data'\n"))
        assert config.data_dir == "/tmp/plan # data"

    def test_invalid_week_start_is_ignored(self, write_config, caplog):
        config = load_config(write_config("WEEK_START_DAY = Caturday\n"))
        assert config.week_start_day == "Sunday"
        assert "WEEK_START_DAY" in caplog.text

    def test_ignores_junk_lines_and_unknown_keys(self, write_config):
        config = load_config(write_config("no equals sign\nCOLOR_SCHEME = dark\n\n"))
        assert config == Config()


class TestConfig:
    def test_resolve_data_dir_default(self):
        assert Config().resolve_data_dir() == DATA_DIR

    def test_resolve_data_dir_expands_user(self):
        config = Config(data_dir="~/some/plans")
        assert config.resolve_data_dir() == Path.home() / "some" / "plans"

    def test_week_start_index(self):
        assert Config(week_start_day="Monday").week_start_index() == 1
