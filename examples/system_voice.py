"""System voice example.

This example reads text with the system voice command and stops it early.
"""

import time

from my_text_reader import ReaderConfig, get_manager


def main():
    """System voice example."""
    # espeak understands the same -r/-v flags on Linux
    config = ReaderConfig.from_env()
    manager = get_manager("system", config=config)

    manager.selected_voice = "Samantha"
    manager.system_speech_rate = 220
    print("Command:", manager.build_command("<text>"))

    manager.toggle("This sentence is long enough that it will be cut off after two seconds.")
    time.sleep(2)

    if manager.is_speaking:
        print("⏹ Stopping early")
        manager.toggle("")

    manager.close()


if __name__ == "__main__":
    main()
