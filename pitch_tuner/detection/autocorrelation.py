"""Lag-domain pitch detection using unnormalized autocorrelation."""

import logging
from typing import Optional

import numpy as np

from .base import DetectorType, PitchDetector
from ..analysis import parabolic_offset, rms
from ..core.constants import DEFAULT_RMS_THRESHOLD, DEFAULT_TRIM_THRESHOLD

logger = logging.getLogger(__name__)


class AutocorrelationDetector(PitchDetector):
    """Estimates pitch from the highest autocorrelation peak past lag zero."""

    detector_type = DetectorType.AUTOCORRELATION

    def __init__(
        self,
        rms_threshold: float = DEFAULT_RMS_THRESHOLD,
        trim_threshold: float = DEFAULT_TRIM_THRESHOLD,
    ):
        """
        Initialize AutocorrelationDetector.

        Args:
            rms_threshold: Minimum RMS energy to attempt detection (filters noise)
            trim_threshold: Amplitude below which a sample ends the leading/trailing transient
        """
        self.rms_threshold = rms_threshold
        self.trim_threshold = trim_threshold

    def estimate(self, buffer: np.ndarray, sample_rate: float) -> Optional[float]:
        """
        Estimate pitch of one frame.

        Args:
            buffer: Mono samples
            sample_rate: Sample rate in Hz

        Returns:
            Frequency in Hz, or None for silence or a degenerate frame
        """
        buffer = np.asarray(buffer, dtype=float)

        if rms(buffer) < self.rms_threshold:
            return None

        window = self._trim(buffer)
        size = len(window)
        if size < 3:
            logger.debug("Trimmed window too short (%d samples)", size)
            return None

        corr = self._autocorrelate(window)

        # Skip the decay of the zero-lag peak
        d = 0
        while d < size - 1 and corr[d] > corr[d + 1]:
            d += 1

        maxpos = d + int(np.argmax(corr[d:]))
        period = float(maxpos)

        if 0 < maxpos < size - 1:
            period += parabolic_offset(
                corr[maxpos - 1], corr[maxpos], corr[maxpos + 1]
            )

        if period <= 0:
            return None

        frequency = sample_rate / period
        if not np.isfinite(frequency):
            return None

        return float(frequency)

    def _trim(self, buffer: np.ndarray) -> np.ndarray:
        """
        Cut the frame to the span between the first quiet samples at each end.

        Each scan only looks at its own half of the buffer. A scan that finds
        nothing leaves its bound at the buffer edge.
        """
        size = len(buffer)
        limit = (size + 1) // 2
        quiet = np.abs(buffer) < self.trim_threshold

        head = np.flatnonzero(quiet[:limit])
        start = int(head[0]) if head.size else 0

        tail_idx = np.arange(size - 1, size - limit, -1)
        tail = tail_idx[quiet[tail_idx]]
        end = int(tail[0]) if tail.size else size - 1

        return buffer[start:end]

    def _autocorrelate(self, window: np.ndarray) -> np.ndarray:
        """Unnormalized autocorrelation for lags 0..N-1."""
        full = np.correlate(window, window, mode="full")
        return full[len(window) - 1 :]
