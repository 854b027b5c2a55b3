"""Input layer - Audio file loading and framing."""

from .loader import AudioLoader

__all__ = [
    "AudioLoader",
]
