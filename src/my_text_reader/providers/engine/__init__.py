from my_text_reader.providers.engine.manager import (
    DEFAULT_SPEECH_RATE,
    MAX_SPEECH_RATE,
    MIN_SPEECH_RATE,
    SPEECH_RATE_STEP,
    SpeechManager,
    find_voice_for_locale,
)

__all__ = [
    "DEFAULT_SPEECH_RATE",
    "MAX_SPEECH_RATE",
    "MIN_SPEECH_RATE",
    "SPEECH_RATE_STEP",
    "SpeechManager",
    "find_voice_for_locale",
]
