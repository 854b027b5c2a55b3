"""Processing layer - Per-frame post-processing of pitch estimates.

- Moving-average smoothing across frames
- Frequency to note mapping
"""

from .smoother import PitchSmoother
from .note_mapper import NoteMapper

__all__ = [
    "PitchSmoother",
    "NoteMapper",
]
