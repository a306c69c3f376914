"""
My Text Reader - Textual UI
Type or paste text and have it read aloud by the speech engine or the
system voice command.
"""

import threading

from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    Footer,
    Header,
    Label,
    Select,
    Static,
    TabbedContent,
    TabPane,
    TextArea,
)

from my_text_reader.config import ReaderConfig
from my_text_reader.core.catalog import SUPPORTED_LANGUAGES, SYSTEM_VOICES, voice_label
from my_text_reader.providers.engine import (
    MAX_SPEECH_RATE,
    MIN_SPEECH_RATE,
    SPEECH_RATE_STEP,
)
from my_text_reader.providers.system import (
    MAX_SYSTEM_RATE,
    MIN_SYSTEM_RATE,
    SYSTEM_RATE_STEP,
)
from my_text_reader.reader import ReaderController, ReaderState, Tab

TAB_IDS = {
    Tab.ENGINE: "engine",
    Tab.SYSTEM: "system",
    Tab.PLACEHOLDER: "siri",
}

READ_LABEL = "Read Text"
STOP_LABEL = "Stop Reading"
PLACEHOLDER = "Text Field to Read"


class RateControl(Horizontal):
    """Stepper standing in for a slider: '-' and '+' around a speed label"""

    class Changed(Message):
        """Posted when the user steps the rate"""

        def __init__(self, control: "RateControl", value: float) -> None:
            super().__init__()
            self.control = control
            self.value = value

    def __init__(
        self,
        value: float,
        minimum: float,
        maximum: float,
        step: float,
        fmt: str,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self.fmt = fmt

    def compose(self) -> ComposeResult:
        yield Button("-", classes="rate-down")
        yield Label(self.fmt.format(self.value), classes="rate-label")
        yield Button("+", classes="rate-up")

    def set_value(self, value: float) -> None:
        self.value = value
        self.query_one(".rate-label", Label).update(self.fmt.format(value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        direction = 1 if event.button.has_class("rate-up") else -1
        value = min(max(self.value + direction * self.step, self.minimum), self.maximum)
        self.post_message(self.Changed(self, value))


class LinkRow(Horizontal):
    """Share button, read/stop button and author credit"""

    def __init__(self, prefix: str, author_url: str, **kwargs):
        super().__init__(classes="link-row", **kwargs)
        self.prefix = prefix
        self.author_url = author_url

    def compose(self) -> ComposeResult:
        yield Button("Share", id=f"{self.prefix}-share")
        yield Button(READ_LABEL, id=f"{self.prefix}-read", disabled=True)
        yield Static(
            Text.assemble(
                "Created by ", ("DivWizard", Style(link=self.author_url, underline=True))
            ),
            classes="credit",
        )


class ReaderApp(App[None]):
    """Main Textual app for My Text Reader"""

    CSS = """
    TabPane {
        padding: 1;
    }

    TextArea {
        height: 1fr;
        border: solid $secondary;
    }

    .settings-row {
        height: auto;
        margin-top: 1;
    }

    .settings-row Select {
        width: 30;
        margin-right: 2;
    }

    RateControl {
        height: auto;
        width: auto;
    }

    RateControl Button {
        min-width: 5;
    }

    .rate-label {
        padding: 1 2;
    }

    .link-row {
        height: auto;
        margin-top: 1;
    }

    .link-row Button {
        margin-right: 2;
    }

    .credit {
        width: 1fr;
        content-align: right middle;
        padding: 1 0;
    }

    #placeholder-text {
        width: 100%;
        height: 100%;
        content-align: center middle;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "toggle_reading", "Read/Stop"),
        Binding("ctrl+s", "share", "Share"),
    ]

    def __init__(self, controller: ReaderController, config: ReaderConfig | None = None):
        super().__init__()
        self.controller = controller
        self.reader_config = config or ReaderConfig()
        self._ui_thread_id: int | None = None

    def compose(self) -> ComposeResult:
        speech = self.controller.speech_manager
        system = self.controller.system_manager

        voices = [(Text(voice_label(v.name)), v.name) for v in SYSTEM_VOICES]
        if system.selected_voice not in {v.name for v in SYSTEM_VOICES}:
            voices.append((Text(system.selected_voice), system.selected_voice))

        yield Header()

        with TabbedContent(initial=TAB_IDS[self.controller.selected_tab]):
            with TabPane("Speech Engine", id=TAB_IDS[Tab.ENGINE]):
                with Vertical():
                    yield TextArea(id="engine-text")
                    with Horizontal(classes="settings-row"):
                        yield Select(
                            [
                                (language.code, index)
                                for index, language in enumerate(SUPPORTED_LANGUAGES)
                            ],
                            value=speech.selected_language_index,
                            allow_blank=False,
                            id="engine-language",
                        )
                        yield RateControl(
                            speech.speech_rate,
                            MIN_SPEECH_RATE,
                            MAX_SPEECH_RATE,
                            SPEECH_RATE_STEP,
                            "Reading Speed: {:.2f}x",
                            id="engine-rate",
                        )
                    yield LinkRow("engine", self.reader_config.author_url)

            with TabPane("System", id=TAB_IDS[Tab.SYSTEM]):
                with Vertical():
                    yield TextArea(id="system-text")
                    with Horizontal(classes="settings-row"):
                        yield Select(
                            voices,
                            value=system.selected_voice,
                            allow_blank=False,
                            id="system-voice",
                        )
                        yield RateControl(
                            system.system_speech_rate,
                            MIN_SYSTEM_RATE,
                            MAX_SYSTEM_RATE,
                            SYSTEM_RATE_STEP,
                            "Reading Speed: {:.0f}",
                            id="system-rate",
                        )
                    yield LinkRow("system", self.reader_config.author_url)

            with TabPane("Siri", id=TAB_IDS[Tab.PLACEHOLDER]):
                yield Static("Maybe Later", id="placeholder-text")

        yield Footer()

    def on_mount(self) -> None:
        """Initialize the app"""
        self.title = "My Text Reader"
        self.sub_title = "Type or paste text to read aloud"
        self._ui_thread_id = threading.get_ident()

        for prefix in ("engine", "system"):
            self.update_placeholder(self.query_one(f"#{prefix}-text", TextArea))

        self.controller.on_state_changed.connect(self._reader_state_changed)
        self.refresh_buttons()

    def on_unmount(self) -> None:
        self.controller.on_state_changed.disconnect(self._reader_state_changed)

    # Called from the manager threads when a read starts or finishes
    def _reader_state_changed(self, sender, **kwargs) -> None:
        if threading.get_ident() == self._ui_thread_id:
            self.refresh_buttons()
        else:
            self.call_from_thread(self.refresh_buttons)

    def _text(self, tab: Tab) -> str:
        if tab == Tab.PLACEHOLDER:
            return ""
        return self.query_one(f"#{TAB_IDS[tab]}-text", TextArea).text

    def refresh_buttons(self) -> None:
        """Sync read buttons with text contents and reader state"""
        for tab in (Tab.ENGINE, Tab.SYSTEM):
            button = self.query_one(f"#{TAB_IDS[tab]}-read", Button)
            reading = self.controller.state(tab) == ReaderState.READING
            button.label = STOP_LABEL if reading else READ_LABEL
            button.variant = "error" if reading else "default"
            button.disabled = not reading and not self._text(tab)

    def select_tab_by_id(self, pane_id: str) -> None:
        for tab, tab_id in TAB_IDS.items():
            if tab_id == pane_id and tab != self.controller.selected_tab:
                self.controller.select_tab(tab)

    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        self.select_tab_by_id(event.tabbed_content.active)

    @staticmethod
    def update_placeholder(area: TextArea) -> None:
        """Show the hint title only while the text area is empty"""
        area.border_title = None if area.text else PLACEHOLDER

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.update_placeholder(event.text_area)
        self.refresh_buttons()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        if event.select.id == "engine-language":
            self.controller.speech_manager.selected_language_index = int(event.value)
        elif event.select.id == "system-voice":
            self.controller.system_manager.selected_voice = str(event.value)

    def on_rate_control_changed(self, event: RateControl.Changed) -> None:
        if event.control.id == "engine-rate":
            manager = self.controller.speech_manager
            manager.speech_rate = event.value
            event.control.set_value(manager.speech_rate)
        elif event.control.id == "system-rate":
            system = self.controller.system_manager
            system.system_speech_rate = event.value
            event.control.set_value(system.system_speech_rate)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.endswith("-share"):
            self.action_share()
        elif button_id == "engine-read":
            self.toggle_reading(Tab.ENGINE)
        elif button_id == "system-read":
            self.toggle_reading(Tab.SYSTEM)

    def toggle_reading(self, tab: Tab) -> None:
        text = self._text(tab)
        if not text and self.controller.state(tab) == ReaderState.IDLE:
            return
        self.controller.toggle(tab, text)
        self.refresh_buttons()

    def action_toggle_reading(self) -> None:
        """Read or stop on the active tab"""
        self.toggle_reading(self.controller.selected_tab)

    def action_share(self) -> None:
        """Copy the project link to the clipboard"""
        self.copy_to_clipboard(self.reader_config.share_url)
        self.notify(f"Link copied: {self.reader_config.share_url}", title="Share")

    def action_quit(self) -> None:
        """Handle Ctrl+C - stop speech and quit the application"""
        self.controller.stop_all()
        self.exit()


def run_app(config: ReaderConfig | None = None) -> None:
    """Run My Text Reader until the window is closed"""
    from my_text_reader.factory import get_controller

    config = config or ReaderConfig.from_env()
    controller = get_controller(config)
    try:
        ReaderApp(controller, config).run()
    finally:
        controller.close()
