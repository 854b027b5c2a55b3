"""Base classes for pitch detection."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

import numpy as np


class DetectorType(Enum):
    """Available pitch detection algorithms."""

    AUTOCORRELATION = "autocorrelation"
    YIN = "yin"

    @classmethod
    def parse(cls, value: Union[str, "DetectorType"]) -> Optional["DetectorType"]:
        """Look up a detector by name, returning None when unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class PitchDetector(ABC):
    """Abstract base class for single-frame pitch estimation.

    Implementations hold only their tunables, so one instance can be
    shared across frames and threads.
    """

    detector_type: DetectorType

    @abstractmethod
    def estimate(self, buffer: np.ndarray, sample_rate: float) -> Optional[float]:
        """
        Estimate the fundamental frequency of one frame.

        Args:
            buffer: Mono samples, roughly in [-1, 1]
            sample_rate: Sample rate in Hz

        Returns:
            Frequency in Hz, or None when no pitch is found
        """
        pass
