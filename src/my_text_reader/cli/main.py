"""
Command-line interface for my-text-reader.
"""

import sys
from typing import cast

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from my_text_reader.config import ReaderConfig
from my_text_reader.core.catalog import (
    DEFAULT_VOICE,
    SUPPORTED_LANGUAGES,
    SYSTEM_VOICES,
    language_index,
    voice_label,
)
from my_text_reader.factory import get_manager, get_store
from my_text_reader.providers.engine import SpeechManager
from my_text_reader.providers.system import SystemSpeechManager

app = typer.Typer(
    name="my-text-reader",
    help="My Text Reader - type or paste text and have it read aloud",
    add_completion=False,
)
console = Console()

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


def configure_logging(level: str = "INFO", sink=sys.stderr) -> None:
    """Send log records to a single sink"""
    logger.remove()
    logger.add(sink, format=LOG_FORMAT, level=level)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context):
    """Open the reader window when no command is given."""
    if ctx.invoked_subcommand is None:
        gui()


@app.command()
def gui():
    """Open the reader window."""
    from my_text_reader.ui import run_app

    config = ReaderConfig.from_env()

    # Keep the terminal clean while Textual owns it
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    configure_logging(config.log_level, sink=config.log_file)

    run_app(config)


@app.command()
def read(
    text: str = typer.Argument(..., help="Text to read aloud"),
    system: bool = typer.Option(
        False, "--system", help="Use the system voice command instead of the engine"
    ),
    language: str
    | None = typer.Option(
        None, "--language", "-l", help="Engine language code (US, TR, FR, ...)"
    ),
    voice: str
    | None = typer.Option(None, "--voice", "-v", help="System voice name"),
    rate: float
    | None = typer.Option(
        None,
        "--rate",
        "-r",
        help="Engine rate multiplier (0.5-1.75) or system words per minute (150-300)",
    ),
):
    """Read text aloud with the saved settings, updating them with any options."""
    config = ReaderConfig.from_env()

    if system:
        if language:
            console.print("[red]Error: --language only applies to the engine[/red]")
            raise typer.Exit(1)
        manager = cast(SystemSpeechManager, get_manager("system", config=config))
        if voice:
            manager.selected_voice = voice
        if rate is not None:
            manager.system_speech_rate = rate
        settings = (
            f"{voice_label(manager.selected_voice)} at {manager.system_speech_rate} wpm"
        )
    else:
        if voice:
            console.print("[red]Error: --voice only applies to --system[/red]")
            raise typer.Exit(1)
        manager = cast(SpeechManager, get_manager("engine", config=config))
        if language:
            try:
                manager.selected_language_index = language_index(language)
            except ValueError as e:
                console.print(f"[red]Error: {e}[/red]")
                raise typer.Exit(1) from e
        if rate is not None:
            manager.speech_rate = rate
        settings = f"{manager.language_code} at {manager.speech_rate:.2f}x"

    try:
        if not manager.start(text):
            console.print("[yellow]Nothing was read[/yellow]")
            raise typer.Exit(1)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task(escape(f"Reading ({settings}): {text[:50]}..."), total=None)
            while not manager.wait(timeout=0.1):
                pass

        console.print("✓ Reading complete")

    except KeyboardInterrupt:
        console.print("\n⏹ Stopping...")
        manager.stop()

    finally:
        manager.close()


@app.command()
def languages():
    """List the engine languages."""
    console.print("\n[bold]Engine languages:[/bold]")
    for index, language in enumerate(SUPPORTED_LANGUAGES):
        console.print(f"  {index:>2}  [cyan]{language.code}[/cyan]  {language.locale}")


@app.command()
def voices(
    installed: bool = typer.Option(
        False, "--installed", help="List voices installed for the engine instead"
    ),
):
    """List the system voices offered by the reader."""
    if installed:
        manager = cast(SpeechManager, get_manager("engine"))
        console.print("\n[bold]Installed engine voices:[/bold]")
        for voice_id in manager.available_voices():
            console.print(f"  • {escape(voice_id)}")
        return

    console.print("\n[bold]System voices:[/bold]")
    for voice in SYSTEM_VOICES:
        if voice.name == DEFAULT_VOICE:
            console.print(f"  • [cyan]{voice.name}[/cyan]")
        else:
            locale = escape(f"[{voice.locale}]")
            console.print(f"  • [cyan]{voice.name}[/cyan] {locale}")


@app.command()
def prefs(
    reset: bool = typer.Option(False, "--reset", help="Forget all saved preferences"),
):
    """Show or reset saved preferences."""
    store = get_store()

    if reset:
        store.clear()
        console.print(f"✓ Preferences cleared: [cyan]{store.path}[/cyan]")
        return

    console.print(f"\n[bold]Preferences[/bold] ([cyan]{store.path}[/cyan]):")
    values = store.to_dict()
    if not values:
        console.print("  (none saved)")
    for key, value in sorted(values.items()):
        console.print(f"  {key} = {escape(repr(value))}")


@app.command()
def version():
    """Show my-text-reader version."""
    from my_text_reader import __version__

    console.print(f"my-text-reader version [cyan]{__version__}[/cyan]")


def main():
    """Main CLI entry point."""
    # Configure logging
    configure_logging(ReaderConfig.from_env().log_level)

    app()


if __name__ == "__main__":
    main()
