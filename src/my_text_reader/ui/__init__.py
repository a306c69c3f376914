"""
Textual user interface for the reader.
"""

from my_text_reader.ui.reader_app import ReaderApp, RateControl, run_app

__all__ = ["RateControl", "ReaderApp", "run_app"]
