"""
Persisted tab selection.
"""

from enum import IntEnum

from loguru import logger

from my_text_reader.core.preferences import PreferenceKeys, PreferenceStore


class Tab(IntEnum):
    """Tabs of the reader window, in display order"""

    ENGINE = 0
    SYSTEM = 1
    PLACEHOLDER = 2


class TabSelection:
    """Remembers which tab the user has open; every change is saved at once."""

    def __init__(self, store: PreferenceStore):
        self.store = store
        saved = store.get_int(PreferenceKeys.SELECTED_TAB, Tab.ENGINE)
        if saved not in Tab._value2member_map_:
            logger.warning(f"Invalid saved tab: {saved}, using {Tab.ENGINE.name}")
            saved = Tab.ENGINE
        self._selected_tab = Tab(saved)

    @property
    def selected_tab(self) -> Tab:
        return self._selected_tab

    @selected_tab.setter
    def selected_tab(self, tab: int) -> None:
        tab = Tab(tab)
        self._selected_tab = tab
        self.store.set(PreferenceKeys.SELECTED_TAB, int(tab))
        logger.debug(f"Selected tab: {tab.name}")
