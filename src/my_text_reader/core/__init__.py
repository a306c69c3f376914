"""
Core abstractions shared by the speech back ends.
"""

from my_text_reader.core.base_manager import BaseSpeechManager, snap_to_range
from my_text_reader.core.catalog import (
    DEFAULT_VOICE,
    SUPPORTED_LANGUAGES,
    SYSTEM_VOICES,
    Language,
    SystemVoice,
)
from my_text_reader.core.exceptions import (
    ConfigurationError,
    PreferenceStoreError,
    SpeechEngineError,
    SystemVoiceError,
    TextReaderError,
)
from my_text_reader.core.preferences import PreferenceKeys, PreferenceStore

__all__ = [
    "DEFAULT_VOICE",
    "SUPPORTED_LANGUAGES",
    "SYSTEM_VOICES",
    "BaseSpeechManager",
    "ConfigurationError",
    "Language",
    "PreferenceKeys",
    "PreferenceStore",
    "PreferenceStoreError",
    "SpeechEngineError",
    "SystemVoice",
    "SystemVoiceError",
    "TextReaderError",
    "snap_to_range",
]
