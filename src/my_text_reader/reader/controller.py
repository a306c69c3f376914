"""
Read/stop routing between the reader tabs and their speech managers.
"""

from enum import Enum

from blinker import Signal
from loguru import logger

from my_text_reader.core.base_manager import BaseSpeechManager
from my_text_reader.core.preferences import PreferenceStore
from my_text_reader.providers.engine import SpeechManager
from my_text_reader.providers.system import SystemSpeechManager
from my_text_reader.reader.tabs import Tab, TabSelection


class ReaderState(Enum):
    """Reader states as seen by the interface."""

    IDLE = "idle"
    READING = "reading"


class ReaderController:
    """
    Owns the tab selection and one manager per speech tab.

    The interface hands every read/stop click to ``toggle`` together with the
    tab it came from; state changes of either manager are re-emitted through
    ``on_state_changed`` so a single listener can refresh the window.
    """

    def __init__(
        self,
        store: PreferenceStore,
        speech_manager: SpeechManager,
        system_manager: SystemSpeechManager,
    ):
        self.store = store
        self.tabs = TabSelection(store)
        self.speech_manager = speech_manager
        self.system_manager = system_manager

        # Signals
        self.on_state_changed = Signal()

        self._connect(Tab.ENGINE, speech_manager)
        self._connect(Tab.SYSTEM, system_manager)

    def _connect(self, tab: Tab, manager: BaseSpeechManager) -> None:
        def started(sender, **kwargs):
            self._emit(tab, ReaderState.IDLE, ReaderState.READING)

        def finished(sender, **kwargs):
            self._emit(tab, ReaderState.READING, ReaderState.IDLE)

        # blinker holds weak references by default
        manager.on_started.connect(started, weak=False)
        manager.on_finished.connect(finished, weak=False)

    def _emit(self, tab: Tab, old_state: ReaderState, new_state: ReaderState) -> None:
        self.on_state_changed.send(
            self,
            tab=tab,
            old_state=old_state.value,
            new_state=new_state.value,
        )
        logger.debug(f"{tab.name}: {old_state.value} -> {new_state.value}")

    @property
    def selected_tab(self) -> Tab:
        return self.tabs.selected_tab

    def select_tab(self, tab: int) -> None:
        self.tabs.selected_tab = tab

    def manager_for(self, tab: int) -> BaseSpeechManager | None:
        """Get the manager behind a tab, None for the placeholder tab"""
        if tab == Tab.ENGINE:
            return self.speech_manager
        if tab == Tab.SYSTEM:
            return self.system_manager
        return None

    def state(self, tab: int) -> ReaderState:
        manager = self.manager_for(tab)
        if manager is not None and manager.is_speaking:
            return ReaderState.READING
        return ReaderState.IDLE

    def toggle(self, tab: int, text: str) -> ReaderState:
        """
        Start or stop reading on a tab.

        Args:
            tab: Tab the request came from
            text: Text currently in that tab's input

        Returns:
            State of the tab after the action
        """
        manager = self.manager_for(tab)
        if manager is None:
            logger.debug(f"No reader on tab {tab}")
            return ReaderState.IDLE

        manager.toggle(text)
        return self.state(tab)

    def stop_all(self) -> None:
        self.speech_manager.stop()
        self.system_manager.stop()

    def close(self) -> None:
        """Stop both managers and release their resources"""
        self.speech_manager.close()
        self.system_manager.close()
        logger.info("Reader controller closed")
