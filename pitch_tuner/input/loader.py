"""Audio loading and framing - feeds the engine from a file."""

import numpy as np
import librosa
from pathlib import Path
from typing import Iterator, Optional, Tuple

from ..core.constants import DEFAULT_BUFFER_SIZE


class AudioLoader:
    """Handles audio file loading and slicing into analysis frames."""

    SUPPORTED_FORMATS = {".wav", ".mp3", ".flac", ".ogg", ".m4a", ".mp4"}

    def __init__(
        self,
        target_sr: Optional[int] = None,
        mono: bool = True,
        normalize: bool = False,
    ):
        """
        Initialize AudioLoader.

        Args:
            target_sr: Target sample rate for resampling (None keeps the native rate)
            mono: Convert to mono if True
            normalize: Peak-normalize audio amplitude if True
        """
        self.target_sr = target_sr
        self.mono = mono
        self.normalize = normalize

    def load(self, path: str) -> Tuple[np.ndarray, int]:
        """
        Load audio file and preprocess.

        Args:
            path: Path to audio file

        Returns:
            Tuple of (audio array, sample rate)

        Raises:
            ValueError: If file format not supported
            FileNotFoundError: If file doesn't exist
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {self.SUPPORTED_FORMATS}"
            )

        # Load with librosa (handles resampling and mono conversion)
        audio, sr = librosa.load(
            str(path),
            sr=self.target_sr,
            mono=self.mono,
        )

        if self.normalize:
            audio = self._normalize(audio)

        return audio, int(sr)

    def _normalize(self, audio: np.ndarray) -> np.ndarray:
        """Normalize audio to [-1, 1] range using peak normalization."""
        peak = np.abs(audio).max()
        if peak > 0:
            audio = audio / peak
        return audio

    def frames(
        self,
        audio: np.ndarray,
        frame_size: int = DEFAULT_BUFFER_SIZE,
        hop_length: Optional[int] = None,
    ) -> Iterator[Tuple[int, np.ndarray]]:
        """
        Slice audio into consecutive fixed-size frames.

        A trailing partial frame is dropped, as a capture device only
        delivers full buffers.

        Args:
            audio: Mono audio array
            frame_size: Samples per frame
            hop_length: Samples between frame starts (default: frame_size)

        Yields:
            Tuples of (start sample, frame)
        """
        if frame_size < 1:
            raise ValueError(f"frame_size must be >= 1, got {frame_size}")
        hop_length = hop_length or frame_size

        for start in range(0, len(audio) - frame_size + 1, hop_length):
            yield start, audio[start : start + frame_size]

    def count_frames(
        self,
        audio: np.ndarray,
        frame_size: int = DEFAULT_BUFFER_SIZE,
        hop_length: Optional[int] = None,
    ) -> int:
        """Number of full frames frames() will yield."""
        if frame_size < 1:
            raise ValueError(f"frame_size must be >= 1, got {frame_size}")
        hop_length = hop_length or frame_size
        if len(audio) < frame_size:
            return 0
        return (len(audio) - frame_size) // hop_length + 1

    def get_duration(self, audio: np.ndarray, sr: int) -> float:
        """Get duration in seconds."""
        return len(audio) / sr
