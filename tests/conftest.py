"""Shared fixtures for the dictionary tests."""

import pytest

from gboard_dictionary import DictionaryRecord
from gboard_dictionary.config.settings import SettingsManager
from gboard_dictionary.utils.constants import DICTIONARY_PATH_ENV


@pytest.fixture(autouse=True)
def settings_manager(tmp_path, monkeypatch):
    """Fresh settings singleton that never touches the real home directory."""
    monkeypatch.delenv(DICTIONARY_PATH_ENV, raising=False)
    SettingsManager.reset_instance()
    manager = SettingsManager(user_config_path=tmp_path / "user" / "config.yaml")
    yield manager
    SettingsManager.reset_instance()


@pytest.fixture
def dict_path(tmp_path):
    return tmp_path / "dictionary.txt"


@pytest.fixture
def colors():
    return [
        DictionaryRecord("cian", "#00FFFF", "es-ES", "frio"),
        DictionaryRecord("negro", "#000000", "es-ES", "neutro"),
        DictionaryRecord("blanco", "#FFFFFF", "es-ES", "neutro"),
        DictionaryRecord("blue", "#0000FF", "en", "frio"),
    ]
