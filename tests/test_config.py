import stat
from pathlib import Path

import pytest
from pydantic import ValidationError

from whatdidido.config import AppDirs, HistorySettings, get_settings
from whatdidido.config import factory

# region Fixtures


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear whatdidido variables and point HOME at a temporary directory."""
    for name in [
        "WHATDIDIDO_DATA_DIR",
        "WHATDIDIDO_HISTORY_FILE",
        "WHATDIDIDO_MAX_ENTRIES",
        "WHATDIDIDO_LOCK_TIMEOUT",
        "WHATDIDIDO_IMPORT_LIMIT",
        "WHATDIDIDO_LIST_LIMIT",
        "WHATDIDIDO_SHELL_HISTORY",
        "WHATDIDIDO_LOG_LEVEL",
        "XDG_DATA_HOME",
    ]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


# endregion
# region Directory resolution


class TestAppDirs:
    def test_home_fallback(self, clean_env):
        expected = clean_env / "home" / ".local" / "share" / "whatdidido"
        assert AppDirs.data_dir() == expected

    def test_xdg_data_home(self, clean_env, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", str(clean_env / "xdg"))
        assert AppDirs.data_dir() == clean_env / "xdg" / "whatdidido"


# endregion
# region HistorySettings


class TestHistorySettings:
    def test_defaults(self, clean_env):
        settings = HistorySettings()
        assert settings.max_entries == 100
        assert settings.import_limit == 50
        assert settings.list_limit == 10
        assert settings.history_path.name == "history.json"
        assert settings.data_dir == AppDirs.data_dir()

    def test_env_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("WHATDIDIDO_DATA_DIR", str(clean_env / "store"))
        monkeypatch.setenv("WHATDIDIDO_MAX_ENTRIES", "25")
        settings = HistorySettings()
        assert settings.data_dir == clean_env / "store"
        assert settings.history_path == clean_env / "store" / "history.json"
        assert settings.max_entries == 25

    def test_init_kwargs_win_over_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("WHATDIDIDO_DATA_DIR", str(clean_env / "env"))
        settings = HistorySettings(data_dir=clean_env / "explicit")
        assert settings.data_dir == clean_env / "explicit"

    def test_lock_path_suffix(self, settings):
        assert settings.lock_path == Path(str(settings.history_path) + ".lock")

    def test_user_expansion(self, clean_env):
        settings = HistorySettings(data_dir="~/logs")
        assert settings.data_dir == clean_env / "home" / "logs"

    def test_invalid_max_entries(self, clean_env):
        with pytest.raises(ValidationError):
            HistorySettings(max_entries=0)

    def test_invalid_log_level(self, clean_env):
        with pytest.raises(ValidationError):
            HistorySettings(log_level="loud")

    def test_ensure_data_dir_owner_only(self, settings):
        path = settings.ensure_data_dir()
        assert path.is_dir()
        assert stat.S_IMODE(path.stat().st_mode) & 0o077 == 0

    def test_get_settings_is_cached(self, clean_env):
        assert get_settings(HistorySettings) is get_settings(HistorySettings)

    def test_yaml_config_file(self, clean_env, monkeypatch):
        config_file = clean_env / "config.yaml"
        config_file.write_text("WHATDIDIDO_MAX_ENTRIES: 7\nWHATDIDIDO_LIST_LIMIT: 3\n")
        monkeypatch.setattr(factory, "YAML_FILE", config_file)
        settings = HistorySettings()
        assert settings.max_entries == 7
        assert settings.list_limit == 3

    def test_env_wins_over_yaml(self, clean_env, monkeypatch):
        config_file = clean_env / "config.yaml"
        config_file.write_text("WHATDIDIDO_MAX_ENTRIES: 7\n")
        monkeypatch.setattr(factory, "YAML_FILE", config_file)
        monkeypatch.setenv("WHATDIDIDO_MAX_ENTRIES", "12")
        assert HistorySettings().max_entries == 12


# endregion
