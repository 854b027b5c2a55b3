"""Frequency to equal-tempered note mapping."""

import math

from ..core import NoteDescriptor
from ..core.constants import A4_FREQUENCY, A4_MIDI, PITCH_NAMES


class NoteMapper:
    """Maps a frequency to the nearest note and its offset in cents."""

    def __init__(self, a4: float = A4_FREQUENCY):
        """
        Initialize NoteMapper.

        Args:
            a4: Reference frequency of A4 (MIDI 69) in Hz
        """
        if a4 <= 0:
            raise ValueError(f"a4 must be positive, got {a4}")
        self.a4 = a4

    def map(self, frequency: float) -> NoteDescriptor:
        """
        Map a frequency to a note descriptor.

        Ties between two semitones round up, so cents lie in [-50, 50)
        rather than (-50, 50]; no clamp is applied.

        Args:
            frequency: Frequency in Hz (> 0)

        Returns:
            NoteDescriptor with cents in [-50, 50)

        Raises:
            ValueError: If frequency is not a positive finite number
        """
        if not math.isfinite(frequency) or frequency <= 0:
            raise ValueError(f"Frequency must be positive and finite, got {frequency}")

        note_num = 12 * math.log2(frequency / self.a4)
        # Half-up rounding keeps ties on the upper semitone
        midi = int(math.floor(note_num + 0.5)) + A4_MIDI

        desired = self.midi_to_freq(midi)
        cents = 1200 * math.log2(frequency / desired)

        return NoteDescriptor(
            name=PITCH_NAMES[midi % 12],
            octave=midi // 12 - 1,
            frequency=float(frequency),
            cents=cents,
            midi=midi,
        )

    def midi_to_freq(self, midi: int) -> float:
        """Equal-tempered frequency of a MIDI note at this reference pitch."""
        return NoteDescriptor.midi_to_freq(midi, self.a4)
