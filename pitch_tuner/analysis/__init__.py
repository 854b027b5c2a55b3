"""Analysis layer - Low-level signal statistics.

- RMS energy (silence gate)
- Parabolic sub-sample interpolation
"""

from .signal import rms, parabolic_offset

__all__ = [
    "rms",
    "parabolic_offset",
]
