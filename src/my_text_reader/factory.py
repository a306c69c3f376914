"""
Factory functions for speech managers and the reader controller.
"""

from typing import Literal

from my_text_reader.config import ReaderConfig
from my_text_reader.core.base_manager import BaseSpeechManager
from my_text_reader.core.preferences import PreferenceStore
from my_text_reader.providers.engine import SpeechManager
from my_text_reader.providers.system import SystemSpeechManager
from my_text_reader.reader import ReaderController

# Type for supported managers
ManagerType = Literal["engine", "system"]


def get_store(config: ReaderConfig | None = None) -> PreferenceStore:
    """Open the preference store named by config"""
    config = config or ReaderConfig.from_env()
    return PreferenceStore(config.preferences_path)


def get_manager(
    manager_type: ManagerType = "engine",
    store: PreferenceStore | None = None,
    config: ReaderConfig | None = None,
    **kwargs,
) -> BaseSpeechManager:
    """
    Factory function to create speech managers.

    Args:
        manager_type: Type of manager ("engine" or "system")
        store: Preference store to load from and save to (optional)
        config: Reader config (optional, read from environment if None)
        **kwargs: Extra constructor arguments, e.g. engine_factory or popen

    Returns:
        Speech manager instance

    Examples:
        # In-process engine with saved preferences
        manager = get_manager("engine")

        # System voice command with a custom binary
        manager = get_manager("system", config=ReaderConfig(say_command="espeak"))
    """
    config = config or ReaderConfig.from_env()
    if store is None:
        store = get_store(config)

    if manager_type == "engine":
        kwargs.setdefault("driver", config.engine_driver)
        return SpeechManager(store, **kwargs)

    elif manager_type == "system":
        kwargs.setdefault("say_command", config.say_command)
        return SystemSpeechManager(store, **kwargs)

    else:
        raise ValueError(
            f"Unknown manager type: {manager_type}. "
            f"Supported managers: {', '.join(list_managers())}"
        )


def list_managers() -> list[str]:
    """
    Get list of available speech managers.

    Returns:
        List of manager names
    """
    return ["engine", "system"]


def get_default_manager() -> BaseSpeechManager:
    """
    Get the default speech manager (in-process engine).

    Returns:
        Default manager instance
    """
    return get_manager("engine")


def get_controller(config: ReaderConfig | None = None) -> ReaderController:
    """
    Create the reader controller with both managers sharing one store.

    Args:
        config: Reader config (optional, read from environment if None)

    Returns:
        Reader controller instance
    """
    config = config or ReaderConfig.from_env()
    store = get_store(config)
    return ReaderController(
        store,
        speech_manager=get_manager(  # type: ignore[arg-type]
            "engine", store=store, config=config
        ),
        system_manager=get_manager(  # type: ignore[arg-type]
            "system", store=store, config=config
        ),
    )
