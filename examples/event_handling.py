"""Event handling example.

This example demonstrates using controller signals to follow reading state.
"""

from my_text_reader import Tab, get_controller


def main():
    """Event handling example."""
    controller = get_controller()

    # Track events
    events = []

    @controller.on_state_changed.connect
    def on_state(sender, **kwargs):
        events.append((kwargs["tab"].name, kwargs["new_state"]))
        print(f"  {kwargs['tab'].name}: {kwargs['old_state']} -> {kwargs['new_state']}")

    @controller.speech_manager.on_error.connect
    def on_error(sender, **kwargs):
        events.append(("ENGINE", "error"))
        print(f"✗ Error: {kwargs.get('error')}")

    # Read text
    text = "This example demonstrates event handling in my text reader."
    print(f"\nReading: {text}\n")

    controller.toggle(Tab.ENGINE, text)
    controller.speech_manager.wait(timeout=30)

    # Print event summary
    print(f"\n{'='*50}")
    print("Event Summary:")
    print(f"{'='*50}")
    for tab, state in events:
        print(f"  - {tab}: {state}")

    # Cleanup
    controller.close()


if __name__ == "__main__":
    main()
