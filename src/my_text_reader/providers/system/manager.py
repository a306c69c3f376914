"""
Play/stop controller for the system voice command (``say``).
"""

import subprocess
import threading
from collections.abc import Callable
from typing import Any

from loguru import logger

from my_text_reader.core.base_manager import BaseSpeechManager, snap_to_range
from my_text_reader.core.catalog import DEFAULT_VOICE
from my_text_reader.core.exceptions import SystemVoiceError
from my_text_reader.core.preferences import PreferenceKeys, PreferenceStore

MIN_SYSTEM_RATE = 150
MAX_SYSTEM_RATE = 300
SYSTEM_RATE_STEP = 10
DEFAULT_SYSTEM_RATE = 180


class SystemSpeechManager(BaseSpeechManager):
    """
    Reads text by spawning the system voice command.

    One child process is spawned per read and a watcher thread clears the
    speaking flag when it exits. Stopping terminates only the child this
    manager started.
    """

    name = "system"

    def __init__(
        self,
        store: PreferenceStore,
        say_command: str = "say",
        popen: Callable[..., Any] | None = None,
    ):
        super().__init__(store)
        self.say_command = say_command
        self._popen = popen or subprocess.Popen
        self._process: Any = None

        self._selected_voice = DEFAULT_VOICE
        self._system_speech_rate = DEFAULT_SYSTEM_RATE
        self.selected_voice = store.get_str(PreferenceKeys.SELECTED_VOICE, DEFAULT_VOICE)
        self.system_speech_rate = store.get_float(
            PreferenceKeys.SYSTEM_SPEECH_RATE, DEFAULT_SYSTEM_RATE
        )

    @property
    def selected_voice(self) -> str:
        return self._selected_voice

    @selected_voice.setter
    def selected_voice(self, voice: str) -> None:
        self._selected_voice = voice.strip() or DEFAULT_VOICE

    @property
    def is_default_voice(self) -> bool:
        """Check if the sentinel default voice is selected"""
        return self._selected_voice == DEFAULT_VOICE

    @property
    def system_speech_rate(self) -> int:
        return self._system_speech_rate

    @system_speech_rate.setter
    def system_speech_rate(self, rate: float) -> None:
        self._system_speech_rate = int(
            snap_to_range(float(rate), MIN_SYSTEM_RATE, MAX_SYSTEM_RATE, SYSTEM_RATE_STEP)
        )

    def build_command(self, text: str) -> list[str]:
        """Argument vector for reading text with the current settings"""
        command = [self.say_command, "-r", str(self._system_speech_rate)]
        if not self.is_default_voice:
            command += ["-v", self._selected_voice]
        command.append(text)
        return command

    def save_preferences(self) -> None:
        self.store.update(
            {
                PreferenceKeys.SELECTED_VOICE: self._selected_voice,
                PreferenceKeys.SYSTEM_SPEECH_RATE: self._system_speech_rate,
            }
        )

    def _begin(self, text: str, generation: int) -> None:
        command = self.build_command(text)
        logger.debug(f"Spawning {command[:-1]} with {len(text)} characters")

        try:
            process = self._popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, ValueError) as e:
            # ValueError: NUL bytes in the text or voice name
            raise SystemVoiceError(f"Cannot run {self.say_command}: {e}") from e

        self._process = process
        threading.Thread(
            target=self._watch,
            args=(process, generation),
            name=f"system-voice-{generation}",
            daemon=True,
        ).start()

    def _watch(self, process: Any, generation: int) -> None:
        returncode = process.wait()
        if returncode:
            logger.debug(f"{self.say_command} exited with {returncode}")
        self._finish(generation)

    def _cancel(self) -> None:
        process = self._process
        if process is None or process.poll() is not None:
            return
        try:
            process.terminate()
        except ProcessLookupError:
            pass
        except OSError as e:
            raise SystemVoiceError(f"Cannot stop {self.say_command}: {e}") from e

    def close(self) -> None:
        super().close()
        self._process = None
