"""
Play/stop controller for the in-process speech engine (pyttsx3).
"""

import re
import threading
from collections.abc import Callable, Iterable
from typing import Any

from loguru import logger

from my_text_reader.core.base_manager import BaseSpeechManager, snap_to_range
from my_text_reader.core.catalog import (
    SUPPORTED_LANGUAGES,
    is_valid_language_index,
    language_code,
    language_locale,
)
from my_text_reader.core.exceptions import SpeechEngineError
from my_text_reader.core.preferences import PreferenceKeys, PreferenceStore

MIN_SPEECH_RATE = 0.5
MAX_SPEECH_RATE = 1.75
SPEECH_RATE_STEP = 0.05
DEFAULT_SPEECH_RATE = 1.0

# Used when the engine does not report its own default rate
FALLBACK_BASE_RATE = 200

# How long a new read waits for a stopped run loop to exit
WIND_DOWN_TIMEOUT = 2.0


def _normalize_locale(value: Any) -> str:
    """Turn 'en-US', b'\\x05en-us' or 'EN_us' into 'en_us'"""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="ignore")
    value = re.sub(r"^[^A-Za-z]+", "", str(value))
    return value.replace("-", "_").lower()


def find_voice_for_locale(voices: Iterable[Any], locale: str) -> str | None:
    """
    Pick the id of an installed voice speaking locale.

    An exact locale match wins over a language-only match (``en`` for
    ``en_US``), which wins over a voice whose id merely mentions the locale.
    """
    wanted = _normalize_locale(locale)
    language = wanted.split("_")[0]
    partial = None
    by_id = None

    for voice in voices:
        languages = [_normalize_locale(lang) for lang in getattr(voice, "languages", [])]
        if wanted in languages:
            return voice.id
        if partial is None and any(
            lang == language or lang.split("_")[0] == language for lang in languages
        ):
            partial = voice.id
        if by_id is None and wanted in _normalize_locale(getattr(voice, "id", "")):
            by_id = voice.id

    return partial or by_id


def _default_engine_factory(driver: str | None = None) -> Any:
    import pyttsx3

    return pyttsx3.init(driverName=driver)


class SpeechManager(BaseSpeechManager):
    """Reads text with the platform speech engine in a chosen language and rate."""

    name = "engine"

    def __init__(
        self,
        store: PreferenceStore,
        engine_factory: Callable[[str | None], Any] | None = None,
        driver: str | None = None,
    ):
        super().__init__(store)
        self._engine_factory = engine_factory or _default_engine_factory
        self._driver = driver
        self._engine: Any = None
        self._base_rate: int = FALLBACK_BASE_RATE
        self._worker: threading.Thread | None = None

        # Load saved settings
        self._selected_language_index = 0
        self._speech_rate = DEFAULT_SPEECH_RATE
        self.selected_language_index = store.get_int(
            PreferenceKeys.SELECTED_LANGUAGE_INDEX, 0
        )
        self.speech_rate = store.get_float(
            PreferenceKeys.SPEECH_RATE, DEFAULT_SPEECH_RATE
        )

    @property
    def selected_language_index(self) -> int:
        return self._selected_language_index

    @selected_language_index.setter
    def selected_language_index(self, index: int) -> None:
        if not is_valid_language_index(index):
            logger.warning(f"Invalid language index: {index}, using 0")
            index = 0
        self._selected_language_index = index

    @property
    def speech_rate(self) -> float:
        return self._speech_rate

    @speech_rate.setter
    def speech_rate(self, rate: float) -> None:
        self._speech_rate = snap_to_range(
            float(rate), MIN_SPEECH_RATE, MAX_SPEECH_RATE, SPEECH_RATE_STEP
        )

    @property
    def language_code(self) -> str:
        return language_code(self._selected_language_index)

    @property
    def locale(self) -> str:
        return language_locale(self._selected_language_index)

    @property
    def supported_languages(self) -> list[str]:
        return [language.code for language in SUPPORTED_LANGUAGES]

    @property
    def engine(self) -> Any:
        """Create the engine on first use"""
        if self._engine is None:
            try:
                engine = self._engine_factory(self._driver)
            except Exception as e:
                raise SpeechEngineError(f"Speech engine unavailable: {e}") from e

            rate = engine.getProperty("rate")
            if isinstance(rate, (int, float)) and rate > 0:
                self._base_rate = int(rate)
            self._engine = engine
            logger.debug(f"Speech engine ready (base rate {self._base_rate} wpm)")
        return self._engine

    @property
    def effective_rate(self) -> int:
        """Words per minute passed to the engine"""
        return int(round(self._base_rate * self._speech_rate))

    def available_voices(self) -> list[str]:
        """List ids of the voices installed for the engine"""
        try:
            return [voice.id for voice in self.engine.getProperty("voices")]
        except SpeechEngineError as e:
            logger.warning(f"Cannot list engine voices: {e}")
            return []

    def save_preferences(self) -> None:
        self.store.update(
            {
                PreferenceKeys.SPEECH_RATE: self._speech_rate,
                PreferenceKeys.SELECTED_LANGUAGE_INDEX: self._selected_language_index,
            }
        )

    def _begin(self, text: str, generation: int) -> None:
        engine = self.engine

        # pyttsx3 refuses a second runAndWait while a stopped loop winds down
        previous = self._worker
        if previous is not None and previous.is_alive():
            previous.join(timeout=WIND_DOWN_TIMEOUT)
            if previous.is_alive():
                raise SpeechEngineError("Speech engine is still busy")

        try:
            engine.setProperty("rate", self.effective_rate)
            voice_id = find_voice_for_locale(engine.getProperty("voices"), self.locale)
            if voice_id:
                engine.setProperty("voice", voice_id)
            else:
                logger.debug(f"No engine voice for {self.locale}, using default")
        except Exception as e:
            raise SpeechEngineError(f"Cannot configure speech engine: {e}") from e

        self._worker = threading.Thread(
            target=self._run,
            args=(engine, text, generation),
            name=f"speech-engine-{generation}",
            daemon=True,
        )
        self._worker.start()

    def _run(self, engine: Any, text: str, generation: int) -> None:
        try:
            engine.say(text)
            engine.runAndWait()
        except Exception as e:
            logger.warning(f"[{self.name}] Speech engine error: {e}")
            self.on_error.send(self, error=str(e))
        finally:
            self._finish(generation)

    def _cancel(self) -> None:
        if self._engine is None:
            return
        try:
            self._engine.stop()
        except Exception as e:
            raise SpeechEngineError(f"Cannot stop speech engine: {e}") from e

    def close(self) -> None:
        super().close()
        if self._worker is not None:
            self._worker.join(timeout=1.0)
        self._engine = None
