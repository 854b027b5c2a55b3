"""Tuner configuration - one place for every tunable of the pipeline."""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Mapping

from .constants import (
    A4_FREQUENCY,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_RMS_THRESHOLD,
    DEFAULT_SMOOTHING_WINDOW,
    DEFAULT_TRIM_THRESHOLD,
    DEFAULT_YIN_CONFIDENCE,
    DEFAULT_YIN_THRESHOLD,
)


@dataclass
class TunerConfig:
    """Configuration for the tuner engine.

    Attributes:
        detector: Initial detector, 'autocorrelation' or 'yin' (default: autocorrelation)
        buffer_size: Samples per analysis frame (default: 2048)
        rms_threshold: RMS below which a frame is treated as silence (default: 0.01)
        trim_threshold: Amplitude marking the end of a transient for autocorrelation (default: 0.2)
        yin_threshold: YIN absolute threshold on the normalized difference (default: 0.1)
        yin_confidence: Minimum YIN confidence to accept an estimate (default: 0.6)
        smoothing_window: Number of past estimates averaged (default: 5)
        a4_frequency: Reference pitch for A4 in Hz (default: 440.0)
    """

    detector: str = "autocorrelation"
    buffer_size: int = DEFAULT_BUFFER_SIZE
    rms_threshold: float = DEFAULT_RMS_THRESHOLD
    trim_threshold: float = DEFAULT_TRIM_THRESHOLD
    yin_threshold: float = DEFAULT_YIN_THRESHOLD
    yin_confidence: float = DEFAULT_YIN_CONFIDENCE
    smoothing_window: int = DEFAULT_SMOOTHING_WINDOW
    a4_frequency: float = A4_FREQUENCY

    def __post_init__(self):
        from ..detection.base import DetectorType

        if DetectorType.parse(self.detector) is None:
            raise ValueError(
                f"Unknown detector: {self.detector}. "
                f"Supported: {[d.value for d in DetectorType]}"
            )
        if self.buffer_size < 3:
            raise ValueError(f"buffer_size must be >= 3, got {self.buffer_size}")
        if self.smoothing_window < 1:
            raise ValueError(
                f"smoothing_window must be >= 1, got {self.smoothing_window}"
            )
        if self.a4_frequency <= 0:
            raise ValueError(f"a4_frequency must be positive, got {self.a4_frequency}")
        if self.rms_threshold < 0 or self.trim_threshold < 0:
            raise ValueError("Amplitude thresholds must be non-negative")
        if not 0.0 < self.yin_threshold <= 1.0:
            raise ValueError(f"yin_threshold must be in (0, 1], got {self.yin_threshold}")
        if not 0.0 <= self.yin_confidence <= 1.0:
            raise ValueError(
                f"yin_confidence must be in [0, 1], got {self.yin_confidence}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TunerConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_file(cls, path: str) -> "TunerConfig":
        """
        Load a config from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a JSON object or holds invalid values
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = json.loads(path.read_text())
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {path}")

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return asdict(self)
