"""
My Text Reader - Read Typed Text Aloud
======================================

A small reader with two speech back ends:
- Speech engine (in-process, pyttsx3) with a language and rate multiplier
- System voice command (``say``) with a voice and words-per-minute rate

Quick Start:
-----------
```python
from my_text_reader import get_manager

manager = get_manager("engine")
manager.selected_language_index = 2  # FR
manager.speech_rate = 1.25
manager.start("Bonjour tout le monde")
manager.wait()
```

System Voice:
------------
```python
from my_text_reader import get_manager

manager = get_manager("system")
manager.selected_voice = "Samantha"
manager.system_speech_rate = 200
manager.toggle("Hello world")  # start
manager.toggle("Hello world")  # stop
```

Window:
------
```python
from my_text_reader.ui import run_app

run_app()
```
"""

# Factory functions (primary API)
from my_text_reader.config import ReaderConfig
from my_text_reader.core.base_manager import BaseSpeechManager
from my_text_reader.core.preferences import PreferenceKeys, PreferenceStore
from my_text_reader.factory import (
    get_controller,
    get_default_manager,
    get_manager,
    get_store,
    list_managers,
)
from my_text_reader.providers.engine import SpeechManager
from my_text_reader.providers.system import SystemSpeechManager
from my_text_reader.reader import ReaderController, ReaderState, Tab, TabSelection

__version__ = "0.1.0"

__all__ = [
    # Base classes
    "BaseSpeechManager",
    "PreferenceKeys",
    "PreferenceStore",
    # Reader
    "ReaderConfig",
    "ReaderController",
    "ReaderState",
    # Managers
    "SpeechManager",
    "SystemSpeechManager",
    "Tab",
    "TabSelection",
    # Version
    "__version__",
    "get_controller",
    "get_default_manager",
    # Factory functions (recommended API)
    "get_manager",
    "get_store",
    "list_managers",
]
