"""
Tests for the system voice command manager.
"""

import subprocess

import pytest

from my_text_reader.core.preferences import PreferenceKeys, PreferenceStore
from my_text_reader.providers.system import SystemSpeechManager
from tests.conftest import MockPopen


def test_defaults(system_manager):
    """Test a fresh manager uses the default voice."""
    assert system_manager.selected_voice == "Default"
    assert system_manager.is_default_voice is True
    assert system_manager.system_speech_rate == 180


def test_command_without_voice(system_manager):
    """Test the default voice adds no -v flag."""
    assert system_manager.build_command("Hello world") == [
        "say",
        "-r",
        "180",
        "Hello world",
    ]


def test_command_with_voice(system_manager):
    """Test a chosen voice is passed with -v and the text stays one argument."""
    system_manager.selected_voice = "Good News"
    system_manager.system_speech_rate = 240
    assert system_manager.build_command('He said "hi"; rm -rf /') == [
        "say",
        "-r",
        "240",
        "-v",
        "Good News",
        'He said "hi"; rm -rf /',
    ]


def test_blank_voice_means_default(system_manager):
    """Test an empty voice name resets to the default."""
    system_manager.selected_voice = "  "
    assert system_manager.is_default_voice is True


@pytest.mark.parametrize(
    "rate, expected", [(0, 150), (149, 150), (184, 180), (186, 190), (300, 300), (999, 300)]
)
def test_rate_is_clamped(system_manager, rate, expected):
    """Test the rate stays within its bounds and step."""
    system_manager.system_speech_rate = rate
    assert system_manager.system_speech_rate == expected


def test_saved_settings_are_loaded(store, mock_popen):
    """Test saved voice and rate are restored."""
    store.update(
        {PreferenceKeys.SELECTED_VOICE: "Yelda", PreferenceKeys.SYSTEM_SPEECH_RATE: 260}
    )
    manager = SystemSpeechManager(store, popen=mock_popen)
    assert manager.selected_voice == "Yelda"
    assert manager.system_speech_rate == 260


def test_start_spawns_and_finishes_on_exit(system_manager, mock_popen):
    """Test one child is spawned per read and its exit clears the flag."""
    assert system_manager.start("Hello") is True
    assert system_manager.is_speaking is True
    assert mock_popen.last.args == ["say", "-r", "180", "Hello"]
    assert mock_popen.kwargs[0]["stdout"] == subprocess.DEVNULL

    mock_popen.last.finish()
    assert system_manager.wait(timeout=2) is True
    assert system_manager.is_speaking is False


def test_start_saves_preferences(system_manager, prefs_path):
    """Test voice and rate are written when reading starts."""
    system_manager.selected_voice = "Zosia"
    system_manager.system_speech_rate = 210
    system_manager.start("Dzień dobry")

    reopened = PreferenceStore(prefs_path)
    assert reopened.get_str(PreferenceKeys.SELECTED_VOICE, "Default") == "Zosia"
    assert reopened.get_int(PreferenceKeys.SYSTEM_SPEECH_RATE, 0) == 210


def test_stop_terminates_child(system_manager, mock_popen):
    """Test stopping terminates the spawned child only."""
    system_manager.start("Hello")
    process = mock_popen.last

    assert system_manager.stop() is True
    assert process.terminated is True
    assert system_manager.is_speaking is False
    assert system_manager.stop() is False


def test_toggle(system_manager, mock_popen):
    """Test toggle flips the flag once per call."""
    assert system_manager.toggle("text") is True
    assert system_manager.toggle("text") is False
    assert system_manager.toggle("text") is True
    assert len(mock_popen.processes) == 2


def test_spawn_failure_is_silent(store):
    """Test a missing command leaves nothing playing."""
    manager = SystemSpeechManager(
        store, say_command="missing-say", popen=MockPopen(FileNotFoundError("missing-say"))
    )
    assert manager.start("Hello") is False
    assert manager.is_speaking is False


def test_failed_command_exit_is_silent(system_manager, mock_popen):
    """Test a non-zero exit (e.g. unknown voice) just ends the read."""
    system_manager.selected_voice = "Nobody"
    system_manager.start("Hello")
    mock_popen.last.finish(returncode=1)

    assert system_manager.wait(timeout=2) is True
    assert system_manager.is_speaking is False


def test_nul_in_text_is_silent(store):
    """Test text the OS cannot pass as an argument leaves nothing playing."""
    manager = SystemSpeechManager(store, say_command="true", popen=subprocess.Popen)
    errors = []
    manager.on_error.connect(lambda sender, **kw: errors.append(kw["error"]), weak=False)

    assert manager.start("pasted\x00text") is False
    assert manager.is_speaking is False
    assert manager.wait(timeout=0) is True
    assert "null byte" in errors[0]
