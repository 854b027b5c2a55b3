"""Output layer - Presentation of tuner readings.

This layer renders note descriptors for the terminal:
- Needle dial with clamped cents offset
- In tune / flat / sharp status
- Tables of per-frame readings
"""

from .display import TunerDisplay, TuningStatus

__all__ = [
    "TunerDisplay",
    "TuningStatus",
]
