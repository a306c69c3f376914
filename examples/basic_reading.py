"""Basic reading example.

This example reads a sentence with the in-process speech engine.
"""

from my_text_reader import get_manager


def main():
    """Basic reading example."""
    manager = get_manager("engine")

    # Pick French at a slightly faster pace; both are saved on start
    manager.selected_language_index = 2
    manager.speech_rate = 1.2

    text = "Bonjour! Ceci est un exemple de lecture de texte."
    print(f"Reading ({manager.language_code}, {manager.speech_rate:.2f}x): {text}")

    if manager.start(text):
        manager.wait()
        print("Reading complete!")
    else:
        print("Nothing was read (is a speech engine installed?)")

    manager.close()


if __name__ == "__main__":
    main()
