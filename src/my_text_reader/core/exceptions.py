"""
Custom exceptions for My Text Reader.
"""


class TextReaderError(Exception):
    """Base exception for all text reader errors"""

    pass


class ConfigurationError(TextReaderError):
    """Raised when configuration is invalid"""

    pass


class PreferenceStoreError(TextReaderError):
    """Raised when the preference file cannot be read or written"""

    pass


class SpeechEngineError(TextReaderError):
    """Raised when the in-process speech engine cannot be created or driven"""

    pass


class SystemVoiceError(TextReaderError):
    """Raised when the system voice command cannot be spawned"""

    pass
