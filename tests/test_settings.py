import yaml

from gboard_dictionary.config.settings import AppSettings, SettingsManager
from gboard_dictionary.utils.constants import DICTIONARY_PATH_ENV


def test_singleton(settings_manager):
    assert SettingsManager() is settings_manager


def test_defaults(settings_manager):
    settings = settings_manager.load()
    assert settings.storage.default_path == ""
    assert settings.storage.encoding == "utf-8"
    assert settings.storage.atomic_writes is True
    assert settings.logging.level == "INFO"


def test_user_config_overrides(settings_manager):
    path = settings_manager.user_config_path
    path.parent.mkdir(parents=True)
    path.write_text(
        yaml.safe_dump({"storage": {"default_path": "/tmp/dict.txt", "atomic_writes": False},
                        "logging": {"level": "DEBUG"}}),
        encoding="utf-8",
    )
    settings = settings_manager.load()
    assert settings.storage.default_path == "/tmp/dict.txt"
    assert settings.storage.atomic_writes is False
    assert settings.storage.encoding == "utf-8"
    assert settings.logging.level == "DEBUG"


def test_invalid_yaml_is_ignored(settings_manager):
    path = settings_manager.user_config_path
    path.parent.mkdir(parents=True)
    path.write_text("storage: [unclosed", encoding="utf-8")
    assert settings_manager.load() == AppSettings()


def test_env_overrides_default_path(settings_manager, monkeypatch):
    monkeypatch.setenv(DICTIONARY_PATH_ENV, "/data/gboard.txt")
    assert settings_manager.load().storage.default_path == "/data/gboard.txt"


def test_save_and_reload(settings_manager):
    settings_manager.settings.storage.default_path = "saved.txt"
    settings_manager.save()
    SettingsManager.reset_instance()
    reloaded = SettingsManager(user_config_path=settings_manager.user_config_path)
    assert reloaded.load().storage.default_path == "saved.txt"


def test_numeric_log_level_is_coerced(settings_manager):
    path = settings_manager.user_config_path
    path.parent.mkdir(parents=True)
    path.write_text("logging:\n  level: 10\n", encoding="utf-8")
    assert settings_manager.load().logging.level == "10"
