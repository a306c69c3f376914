"""
Pytest configuration and fixtures for my-text-reader tests.
"""

import threading
import time
from dataclasses import dataclass, field

import pytest

from my_text_reader.config import ReaderConfig
from my_text_reader.core.preferences import PreferenceStore
from my_text_reader.providers.engine import SpeechManager
from my_text_reader.providers.system import SystemSpeechManager
from my_text_reader.reader import ReaderController


@dataclass
class MockVoice:
    """Mock of a pyttsx3 voice."""

    id: str
    name: str = ""
    languages: list = field(default_factory=list)


class MockEngine:
    """Mock pyttsx3 engine; runAndWait blocks until stop() when blocking."""

    def __init__(self, voices=None, rate=200, blocking=False):
        self.properties = {
            "rate": rate,
            "voices": voices
            if voices is not None
            else [
                MockVoice("english", "English", [b"\x05en-us"]),
                MockVoice("turkish", "Turkish", ["tr_TR"]),
                MockVoice("french", "French", ["fr"]),
            ],
        }
        self.blocking = blocking
        self.spoken: list[str] = []
        self.stop_calls = 0
        self.set_calls: list[tuple] = []
        self._released = threading.Event()

    def getProperty(self, name):
        return self.properties[name]

    def setProperty(self, name, value):
        self.set_calls.append((name, value))
        self.properties[name] = value

    def say(self, text):
        self.spoken.append(text)

    def runAndWait(self):
        if self.blocking:
            self._released.wait(timeout=5)
        self._released.clear()

    def stop(self):
        self.stop_calls += 1
        self._released.set()


class LingeringEngine(MockEngine):
    """Mock engine whose run loop keeps going briefly after stop(), like pyttsx3."""

    def __init__(self, linger=0.2, **kwargs):
        super().__init__(blocking=True, **kwargs)
        self.linger = linger
        self._looping = False

    def runAndWait(self):
        if self._looping:
            raise RuntimeError("run loop already started")
        self._looping = True
        try:
            self._released.wait(timeout=5)
            time.sleep(self.linger)
        finally:
            self._released.clear()
            self._looping = False


class MockProcess:
    """Mock child process that runs until finish() or terminate()."""

    def __init__(self, args):
        self.args = args
        self.returncode = None
        self.terminated = False
        self._exited = threading.Event()

    def wait(self, timeout=None):
        self._exited.wait(timeout if timeout is not None else 5)
        return self.returncode

    def poll(self):
        return self.returncode

    def finish(self, returncode=0):
        self.returncode = returncode
        self._exited.set()

    def terminate(self):
        self.terminated = True
        self.finish(-15)


class MockPopen:
    """Callable standing in for subprocess.Popen."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.processes: list[MockProcess] = []
        self.kwargs: list[dict] = []

    def __call__(self, args, **kwargs):
        if self.error is not None:
            raise self.error
        process = MockProcess(args)
        self.processes.append(process)
        self.kwargs.append(kwargs)
        return process

    @property
    def last(self) -> MockProcess:
        return self.processes[-1]


@pytest.fixture
def prefs_path(tmp_path):
    """Fixture for a preference file location."""
    return tmp_path / "prefs" / "preferences.json"


@pytest.fixture
def store(prefs_path):
    """Fixture for an empty preference store."""
    return PreferenceStore(prefs_path)


@pytest.fixture
def reader_config(tmp_path, prefs_path):
    """Fixture for a config that keeps files in a temp directory."""
    return ReaderConfig(
        preferences_path=prefs_path,
        log_file=tmp_path / "reader.log",
    )


@pytest.fixture
def mock_engine():
    """Fixture for an engine that finishes immediately."""
    return MockEngine()


@pytest.fixture
def blocking_engine():
    """Fixture for an engine that speaks until stopped."""
    engine = MockEngine(blocking=True)
    yield engine
    engine.stop()


@pytest.fixture
def mock_popen():
    """Fixture for a Popen replacement."""
    popen = MockPopen()
    yield popen
    for process in popen.processes:
        if process.returncode is None:
            process.finish()


@pytest.fixture
def speech_manager(store, mock_engine):
    manager = SpeechManager(store, engine_factory=lambda driver: mock_engine)
    yield manager
    manager.close()


@pytest.fixture
def system_manager(store, mock_popen):
    manager = SystemSpeechManager(store, popen=mock_popen)
    yield manager
    manager.close()


@pytest.fixture
def controller(store, blocking_engine, mock_popen):
    """Fixture for a controller whose reads last until stopped."""
    controller = ReaderController(
        store,
        speech_manager=SpeechManager(store, engine_factory=lambda driver: blocking_engine),
        system_manager=SystemSpeechManager(store, popen=mock_popen),
    )
    yield controller
    controller.close()
