"""Terminal presentation of note descriptors."""

from enum import Enum
from typing import Iterable, Optional, Tuple

from rich.table import Table
from rich.text import Text

from ..core import NoteDescriptor
from ..core.constants import DISPLAY_CENTS_RANGE, IN_TUNE_CENTS


class TuningStatus(Enum):
    """How a reading relates to its nearest note."""

    IN_TUNE = "in tune"
    FLAT = "flat"
    SHARP = "sharp"


STATUS_STYLES = {
    TuningStatus.IN_TUNE: "bold green",
    TuningStatus.FLAT: "yellow",
    TuningStatus.SHARP: "yellow",
}


class TunerDisplay:
    """Renders readings as a needle dial and status, like a hardware tuner."""

    def __init__(
        self,
        tolerance_cents: float = IN_TUNE_CENTS,
        cents_range: float = DISPLAY_CENTS_RANGE,
        width: int = 41,
    ):
        """
        Initialize TunerDisplay.

        Args:
            tolerance_cents: Offset below which a note counts as in tune
            cents_range: Offset shown at either end of the dial
            width: Character width of the dial (odd keeps a centre mark)
        """
        self.tolerance_cents = tolerance_cents
        self.cents_range = cents_range
        self.width = width

    def status(self, cents: float) -> TuningStatus:
        if abs(cents) < self.tolerance_cents:
            return TuningStatus.IN_TUNE
        return TuningStatus.FLAT if cents < 0 else TuningStatus.SHARP

    def clamp(self, cents: float) -> float:
        """Limit an offset to the dial range."""
        return max(-self.cents_range, min(self.cents_range, cents))

    def needle_position(self, cents: float) -> int:
        """Dial column of the needle, 0 at the far flat end."""
        fraction = (self.clamp(cents) + self.cents_range) / (2 * self.cents_range)
        return int(round(fraction * (self.width - 1)))

    def needle(self, cents: float) -> str:
        dial = ["-"] * self.width
        dial[self.width // 2] = "|"
        dial[self.needle_position(cents)] = "v"
        return "".join(dial)

    def render(self, note: Optional[NoteDescriptor]) -> Text:
        """One-line reading; a dash when there is no note."""
        if note is None:
            return Text("-", style="dim")

        status = self.status(note.cents)
        text = Text()
        text.append(f"{note.label:<4}", style="bold cyan")
        text.append(f" {note.frequency:8.2f} Hz ")
        text.append(self.needle(note.cents))
        text.append(f" {note.cents:+6.1f} c ")
        text.append(status.value, style=STATUS_STYLES[status])
        return text

    def readings_table(
        self, readings: Iterable[Tuple[float, NoteDescriptor]], title: str = "Readings"
    ) -> Table:
        """Table of (time, note) readings."""
        table = Table(title=title)
        table.add_column("Time (s)", style="green")
        table.add_column("Note", style="cyan")
        table.add_column("Frequency (Hz)", style="yellow")
        table.add_column("Cents", style="magenta")
        table.add_column("Needle")
        table.add_column("Status")

        for time, note in readings:
            status = self.status(note.cents)
            table.add_row(
                f"{time:.3f}",
                note.label,
                f"{note.frequency:.2f}",
                f"{note.cents:+.1f}",
                self.needle(note.cents),
                Text(status.value, style=STATUS_STYLES[status]),
            )

        return table
