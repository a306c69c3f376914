"""
Persistent key-value storage for user preferences.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from loguru import logger

from my_text_reader.core.exceptions import PreferenceStoreError


class PreferenceKeys:
    """Keys under which the reader persists its settings"""

    SELECTED_TAB = "selected_tab"
    SELECTED_LANGUAGE_INDEX = "selected_language_index"
    SPEECH_RATE = "speech_rate"
    SELECTED_VOICE = "selected_voice"
    SYSTEM_SPEECH_RATE = "system_speech_rate"


class PreferenceStore:
    """
    Flat key-value store kept in memory and mirrored to a JSON file.

    The file is read once on construction; every ``set`` writes the whole
    object back. Failures to read start from an empty store and failures to
    write are logged, so preferences never stop the reader from working.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self._values: dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        """Replace in-memory values with the file contents"""
        try:
            self._values = self._read()
        except PreferenceStoreError as e:
            logger.warning(f"{e}, starting with empty preferences")
            self._values = {}

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            logger.debug(f"No preferences at {self.path}")
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PreferenceStoreError(
                f"Invalid JSON in preferences file: {self.path} - {e}"
            ) from e
        except OSError as e:
            raise PreferenceStoreError(
                f"Cannot read preferences file: {self.path} - {e}"
            ) from e

        if not isinstance(data, dict):
            raise PreferenceStoreError(
                f"Preferences file is not a JSON object: {self.path}"
            )

        logger.debug(f"Loaded {len(data)} preferences from {self.path}")
        return data

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{self.path.name}.", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def save(self) -> bool:
        """Write the current values to disk, returning False on failure"""
        try:
            self._write()
        except OSError as e:
            logger.error(f"Failed to save preferences to {self.path}: {e}")
            return False
        return True

    def set(self, key: str, value: Any) -> None:
        """Store a value and persist immediately"""
        self._values[key] = value
        self.save()

    def update(self, values: dict[str, Any]) -> None:
        """Store several values with a single write"""
        self._values.update(values)
        self.save()

    def remove(self, key: str) -> None:
        if key in self._values:
            del self._values[key]
            self.save()

    def clear(self) -> None:
        self._values.clear()
        self.save()

    def contains(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        value = self._values.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def get_float(self, key: str, default: float) -> float:
        value = self._values.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return default

    def get_str(self, key: str, default: str) -> str:
        value = self._values.get(key)
        if isinstance(value, str):
            return value
        return default

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._values)
