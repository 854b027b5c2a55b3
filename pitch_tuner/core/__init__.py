"""Core types and constants for Pitch Tuner."""

from .note import NoteDescriptor
from .config import TunerConfig
from .constants import (
    PITCH_NAMES,
    A4_FREQUENCY,
    A4_MIDI,
    DEFAULT_BUFFER_SIZE,
)

__all__ = [
    "NoteDescriptor",
    "TunerConfig",
    "PITCH_NAMES",
    "A4_FREQUENCY",
    "A4_MIDI",
    "DEFAULT_BUFFER_SIZE",
]
