"""NoteDescriptor data class - the per-frame result handed to presentation."""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from .constants import A4_FREQUENCY, A4_MIDI


@dataclass(frozen=True)
class NoteDescriptor:
    """A detected frequency expressed as the nearest equal-tempered note."""

    name: str  # Pitch class name, e.g. 'A#'
    octave: int  # Scientific pitch notation octave
    frequency: float  # Smoothed input frequency in Hz
    cents: float  # Signed deviation from the nearest semitone
    midi: int  # MIDI note number (A4 = 69)

    @property
    def label(self) -> str:
        """Get note label (e.g., 'A4', 'C#3')."""
        return f"{self.name}{self.octave}"

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return self.midi % 12

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        data = asdict(self)
        data["label"] = self.label
        return data

    @staticmethod
    def midi_to_freq(midi: int, a4: float = A4_FREQUENCY) -> float:
        """Convert MIDI pitch to equal-tempered frequency (Hz)."""
        return a4 * (2 ** ((midi - A4_MIDI) / 12.0))
