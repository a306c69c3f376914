"""
Abstract play/stop controller shared by the speech back ends.
"""

import math
import threading
from abc import ABC, abstractmethod

from blinker import Signal
from loguru import logger

from my_text_reader.core.exceptions import TextReaderError
from my_text_reader.core.preferences import PreferenceStore


def snap_to_range(value: float, lower: float, upper: float, step: float) -> float:
    """Clamp value to [lower, upper] and round it to the nearest step"""
    if math.isnan(value):
        return lower
    clamped = min(max(value, lower), upper)
    steps = round((clamped - lower) / step)
    # Keep float noise (0.1 + 0.2) out of stored preferences
    return min(round(lower + steps * step, 6), upper)


class BaseSpeechManager(ABC):
    """
    Tracks whether text is being read aloud and starts/stops it.

    Subclasses only know how to begin and cancel their back end; this class
    owns the ``is_speaking`` flag, preference writes and signals. A read that
    fails to begin is logged and reported through ``on_error`` but never
    raised, so the caller simply hears nothing.
    """

    name: str = ""

    def __init__(self, store: PreferenceStore):
        self.store = store
        self._lock = threading.Lock()
        self._is_speaking = False
        self._generation = 0
        self._done = threading.Event()
        self._done.set()

        # Signals
        self.on_started = Signal()
        self.on_finished = Signal()
        self.on_error = Signal()

    @property
    def is_speaking(self) -> bool:
        """Check if text is currently being read"""
        return self._is_speaking

    @property
    def generation(self) -> int:
        """Sequence number of the most recent read"""
        return self._generation

    @abstractmethod
    def save_preferences(self) -> None:
        """Write this manager's settings to the preference store."""
        pass

    @abstractmethod
    def _begin(self, text: str, generation: int) -> None:
        """
        Start reading text on the back end.

        Must return promptly and arrange for ``_finish(generation)`` to be
        called once the back end is done. Raise a TextReaderError if the
        read cannot begin.
        """
        pass

    @abstractmethod
    def _cancel(self) -> None:
        """Cancel the read in progress on the back end."""
        pass

    def start(self, text: str) -> bool:
        """
        Begin reading text aloud.

        Args:
            text: Text to read

        Returns:
            True if a read was started
        """
        if not text:
            logger.debug(f"[{self.name}] Nothing to read")
            return False

        with self._lock:
            if self._is_speaking:
                logger.debug(f"[{self.name}] Already reading, start ignored")
                return False
            self._generation += 1
            generation = self._generation
            self._is_speaking = True
            self._done.clear()

        self.save_preferences()
        self.on_started.send(self, text=text)
        logger.info(f"[{self.name}] Reading {len(text)} characters")

        try:
            self._begin(text, generation)
        except TextReaderError as e:
            logger.warning(f"[{self.name}] Could not start reading: {e}")
            self.on_error.send(self, error=str(e))
            self._finish(generation)
            return False
        except Exception:
            self._finish(generation)
            raise

        return True

    def stop(self) -> bool:
        """
        Stop the current read.

        Returns:
            True if a read was stopped
        """
        with self._lock:
            if not self._is_speaking:
                return False
            generation = self._generation

        try:
            self._cancel()
        except TextReaderError as e:
            logger.warning(f"[{self.name}] Cancel failed: {e}")

        self._finish(generation)
        logger.info(f"[{self.name}] Reading stopped")
        return True

    def toggle(self, text: str) -> bool:
        """
        Stop if reading, otherwise start reading text.

        Returns:
            The new is_speaking value
        """
        if self._is_speaking:
            self.stop()
        else:
            self.start(text)
        return self._is_speaking

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the current read finishes, False on timeout"""
        return self._done.wait(timeout)

    def _finish(self, generation: int) -> None:
        """Completion callback; stale generations are ignored"""
        with self._lock:
            if generation != self._generation or not self._is_speaking:
                return
            self._is_speaking = False

        logger.debug(f"[{self.name}] Read {generation} finished")
        self.on_finished.send(self, generation=generation)

        # wait() returns only once listeners have seen the finish
        with self._lock:
            if generation == self._generation:
                self._done.set()

    def close(self) -> None:
        """Stop any read and release back-end resources"""
        self.stop()
