"""
Tests for the manager factory.
"""

import pytest

from my_text_reader.core.base_manager import BaseSpeechManager
from my_text_reader.core.preferences import PreferenceKeys, PreferenceStore
from my_text_reader.factory import (
    get_controller,
    get_manager,
    get_store,
    list_managers,
)
from my_text_reader.providers.engine import SpeechManager
from my_text_reader.providers.system import SystemSpeechManager
from my_text_reader.reader import ReaderController


def test_list_managers():
    """Test listing available managers."""
    managers = list_managers()
    assert isinstance(managers, list)
    assert managers == ["engine", "system"]


def test_get_engine_manager(store, mock_engine):
    """Test getting the engine manager with an injected engine."""
    manager = get_manager("engine", store=store, engine_factory=lambda d: mock_engine)
    assert isinstance(manager, SpeechManager)
    assert isinstance(manager, BaseSpeechManager)


def test_get_system_manager_uses_config(store, reader_config):
    """Test the system manager takes the command from config."""
    reader_config.say_command = "espeak"
    manager = get_manager("system", store=store, config=reader_config)
    assert isinstance(manager, SystemSpeechManager)
    assert manager.say_command == "espeak"


def test_get_manager_invalid(store):
    """Test getting invalid manager raises error."""
    with pytest.raises(ValueError, match="Unknown manager type"):
        get_manager("invalid_manager", store=store)  # type: ignore[arg-type]


def test_get_store(reader_config, prefs_path):
    """Test the store opens the configured path."""
    assert get_store(reader_config).path == prefs_path


def test_get_controller_shares_store(reader_config):
    """Test both managers of a controller share one store."""
    controller = get_controller(reader_config)
    assert isinstance(controller, ReaderController)
    assert controller.speech_manager.store is controller.store
    assert controller.system_manager.store is controller.store


def test_get_controller_keeps_every_preference(reader_config, mock_popen):
    """Test tab and system settings written on first run are all kept."""
    controller = get_controller(reader_config)
    controller.system_manager._popen = mock_popen
    controller.select_tab(1)
    controller.system_manager.selected_voice = "Yelda"
    controller.toggle(1, "Merhaba")
    controller.close()

    saved = PreferenceStore(reader_config.preferences_path).to_dict()
    assert saved[PreferenceKeys.SELECTED_TAB] == 1
    assert saved[PreferenceKeys.SELECTED_VOICE] == "Yelda"
    assert saved[PreferenceKeys.SYSTEM_SPEECH_RATE] == 180
