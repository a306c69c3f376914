from my_text_reader.providers.system.manager import (
    DEFAULT_SYSTEM_RATE,
    MAX_SYSTEM_RATE,
    MIN_SYSTEM_RATE,
    SYSTEM_RATE_STEP,
    SystemSpeechManager,
)

__all__ = [
    "DEFAULT_SYSTEM_RATE",
    "MAX_SYSTEM_RATE",
    "MIN_SYSTEM_RATE",
    "SYSTEM_RATE_STEP",
    "SystemSpeechManager",
]
