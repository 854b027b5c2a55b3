"""Detection layer - Single-frame fundamental frequency estimation.

- Autocorrelation (lag-domain peak picking)
- YIN (cumulative mean normalized difference)
"""

from typing import Optional, Union

from .base import DetectorType, PitchDetector
from .autocorrelation import AutocorrelationDetector
from .yin import YinDetector
from ..core.config import TunerConfig


def create_detector(
    detector_type: Union[str, DetectorType],
    config: Optional[TunerConfig] = None,
) -> PitchDetector:
    """
    Build a detector from its type and the tuner configuration.

    Raises:
        ValueError: If the detector type is unknown
    """
    kind = DetectorType.parse(detector_type)
    if kind is None:
        raise ValueError(f"Unknown detector: {detector_type}")

    config = config or TunerConfig()
    if kind is DetectorType.YIN:
        return YinDetector(
            threshold=config.yin_threshold,
            confidence_floor=config.yin_confidence,
            rms_threshold=config.rms_threshold,
        )
    return AutocorrelationDetector(
        rms_threshold=config.rms_threshold,
        trim_threshold=config.trim_threshold,
    )


__all__ = [
    "DetectorType",
    "PitchDetector",
    "AutocorrelationDetector",
    "YinDetector",
    "create_detector",
]
