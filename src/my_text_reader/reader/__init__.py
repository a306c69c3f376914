"""
Tab selection and read/stop routing used by the user interface.
"""

from my_text_reader.reader.controller import ReaderController, ReaderState
from my_text_reader.reader.tabs import Tab, TabSelection

__all__ = ["ReaderController", "ReaderState", "Tab", "TabSelection"]
