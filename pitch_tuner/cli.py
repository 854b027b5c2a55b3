"""Command-line interface for Pitch Tuner.

Provides commands for:
- analyze: Run an audio file through the tuner frame by frame
- note: Map a frequency to its nearest note
- info: Show audio file information
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .core.constants import DEFAULT_BUFFER_SIZE

app = typer.Typer(
    name="pitch-tuner",
    help="Monophonic pitch detection and tuning",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    logging.getLogger("numba").setLevel(logging.WARNING)


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="Input audio file"),
    detector: Optional[str] = typer.Option(
        None, "-d", "--detector", help="Pitch detector: autocorrelation or yin"
    ),
    buffer_size: Optional[int] = typer.Option(
        None, "-b", "--buffer-size", min=3, help="Samples per frame (default 2048)"
    ),
    a4: Optional[float] = typer.Option(
        None, "--a4", help="Reference pitch for A4 in Hz (default 440)"
    ),
    window: Optional[int] = typer.Option(
        None, "-w", "--window", help="Smoothing window in frames (default 5)"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "-c", "--config", help="JSON file with tuner settings"
    ),
    normalize: bool = typer.Option(
        False, "--normalize", help="Peak-normalize audio before analysis"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Run an audio file through the tuner, one frame at a time.

    **Examples:**

        pitch-tuner analyze guitar_a.wav

        pitch-tuner analyze voice.wav -d yin --a4 442 --json

        pitch-tuner analyze quiet_take.wav --normalize
    """
    from .core import TunerConfig
    from .engine import TunerEngine
    from .input import AudioLoader
    from .output import TunerDisplay

    _setup_logging(verbose)

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    try:
        settings = (
            TunerConfig.from_file(str(config_file)).to_dict() if config_file else {}
        )
        overrides = {
            "detector": detector,
            "buffer_size": buffer_size,
            "a4_frequency": a4,
            "smoothing_window": window,
        }
        settings.update({k: v for k, v in overrides.items() if v is not None})
        config = TunerConfig.from_dict(settings)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    loader = AudioLoader(normalize=normalize)
    try:
        audio, sr = loader.load(str(input_file))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    engine = TunerEngine.from_config(config)
    readings = []
    total = 0
    for start, frame in loader.frames(audio, config.buffer_size):
        total += 1
        note = engine.process_frame(frame, sr)
        if note is not None:
            readings.append((start / sr, note))
    engine.reset()

    if json_output:
        result = {
            "input_file": str(input_file),
            "sample_rate": sr,
            "config": config.to_dict(),
            "frames": total,
            "voiced_frames": len(readings),
            "readings": [
                {"time": round(time, 4), **note.to_dict()} for time, note in readings
            ],
        }
        typer.echo(json.dumps(result, indent=2))
        return

    display = TunerDisplay()
    console.print(
        f"[blue]Analyzed:[/blue] {input_file.name} "
        f"({total} frames, {len(readings)} voiced, detector={config.detector})"
    )
    if not readings:
        console.print("[yellow]No pitch detected[/yellow]")
        return

    console.print(display.readings_table(readings, title="Tuner Readings"))
    console.print(display.render(readings[-1][1]))


@app.command()
def note(
    frequency: float = typer.Argument(..., help="Frequency in Hz"),
    a4: float = typer.Option(440.0, "--a4", help="Reference pitch for A4 in Hz"),
):
    """Show the nearest note and tuning offset for a frequency."""
    from .output import TunerDisplay
    from .processing import NoteMapper

    try:
        descriptor = NoteMapper(a4).map(frequency)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(TunerDisplay().render(descriptor))
    console.print(f"  MIDI: {descriptor.midi}")


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Input audio file"),
    buffer_size: int = typer.Option(
        DEFAULT_BUFFER_SIZE, "-b", "--buffer-size", min=1, help="Samples per frame"
    ),
):
    """Show information about an audio file."""
    from .input import AudioLoader

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    loader = AudioLoader()
    try:
        audio, sr = loader.load(str(input_file))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Audio Info:[/bold] {input_file.name}")
    console.print(f"  Duration: {loader.get_duration(audio, sr):.2f} seconds")
    console.print(f"  Sample rate: {sr} Hz")
    console.print(f"  Samples: {len(audio):,}")
    console.print(f"  Frames of {buffer_size}: {loader.count_frames(audio, buffer_size)}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
