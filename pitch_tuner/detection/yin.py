"""YIN pitch detection (de Cheveigne & Kawahara, 2002)."""

import logging
from typing import Optional

import numpy as np

from .base import DetectorType, PitchDetector
from ..analysis import parabolic_offset, rms
from ..core.constants import (
    DEFAULT_RMS_THRESHOLD,
    DEFAULT_YIN_CONFIDENCE,
    DEFAULT_YIN_THRESHOLD,
)

logger = logging.getLogger(__name__)


class YinDetector(PitchDetector):
    """Estimates pitch from the first dip of the cumulative mean normalized difference."""

    detector_type = DetectorType.YIN

    def __init__(
        self,
        threshold: float = DEFAULT_YIN_THRESHOLD,
        confidence_floor: float = DEFAULT_YIN_CONFIDENCE,
        rms_threshold: float = DEFAULT_RMS_THRESHOLD,
    ):
        """
        Initialize YinDetector.

        Args:
            threshold: Absolute threshold for the dip search (0.05-0.2 typical)
            confidence_floor: Minimum confidence (1 - normalized difference) to accept
            rms_threshold: Minimum RMS energy to attempt detection (filters noise)
        """
        self.threshold = threshold
        self.confidence_floor = confidence_floor
        self.rms_threshold = rms_threshold

    def estimate(
        self,
        buffer: np.ndarray,
        sample_rate: float,
        threshold: Optional[float] = None,
    ) -> Optional[float]:
        """
        Estimate pitch of one frame.

        Args:
            buffer: Mono samples
            sample_rate: Sample rate in Hz
            threshold: Override for the absolute threshold of this call

        Returns:
            Frequency in Hz, or None for silence, low confidence or a degenerate frame
        """
        threshold = self.threshold if threshold is None else threshold
        buffer = np.asarray(buffer, dtype=float)

        if rms(buffer) < self.rms_threshold:
            return None

        half = len(buffer) // 2
        if half < 3:
            logger.debug("Frame too short for YIN (%d samples)", len(buffer))
            return None

        cmnd = self.cumulative_mean_normalized_difference(
            self.difference_function(buffer)
        )
        tau = self._absolute_threshold(cmnd, threshold)

        period = float(tau)
        if 0 < tau < half - 1:
            period += parabolic_offset(cmnd[tau - 1], cmnd[tau], cmnd[tau + 1])

        if period <= 0:
            return None

        confidence = 1.0 - cmnd[int(np.floor(period))]
        if confidence < self.confidence_floor:
            logger.debug("Rejected YIN estimate, confidence %.3f", confidence)
            return None

        frequency = sample_rate / period
        if not np.isfinite(frequency):
            return None

        return float(frequency)

    @staticmethod
    def difference_function(buffer: np.ndarray) -> np.ndarray:
        """
        Squared difference d[tau] over the first half of the buffer.

        Returns:
            Array of length len(buffer)//2 with d[0] = 0
        """
        half = len(buffer) // 2
        frame = buffer[:half]
        diff = np.zeros(half)

        for tau in range(1, half):
            delta = frame - buffer[tau : tau + half]
            diff[tau] = np.dot(delta, delta)

        return diff

    @staticmethod
    def cumulative_mean_normalized_difference(diff: np.ndarray) -> np.ndarray:
        """Normalize d[tau] by its running mean; d'[0] = 1."""
        cmnd = np.ones(len(diff))
        if len(diff) < 2:
            return cmnd

        running = np.cumsum(diff[1:])
        taus = np.arange(1, len(diff))
        with np.errstate(divide="ignore", invalid="ignore"):
            normalized = diff[1:] * taus / running
        cmnd[1:] = np.where(running > 0, normalized, 1.0)

        return cmnd

    @staticmethod
    def _absolute_threshold(cmnd: np.ndarray, threshold: float) -> int:
        """
        First tau below threshold, walked down to the bottom of its dip.

        Falls back to the global minimum over tau >= 1 when nothing
        crosses the threshold.
        """
        below = np.flatnonzero(cmnd[1:] < threshold)
        if below.size == 0:
            return 1 + int(np.argmin(cmnd[1:]))

        tau = int(below[0]) + 1
        while tau + 1 < len(cmnd) and cmnd[tau + 1] < cmnd[tau]:
            tau += 1

        return tau
