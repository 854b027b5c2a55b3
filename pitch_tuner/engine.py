"""Tuner engine - the per-frame pipeline surrounding collaborators call.

detector -> smoother (valid estimates only) -> note mapper
"""

import logging
import math
import threading
from typing import Dict, Optional, Sequence, Union

import numpy as np

from .core import NoteDescriptor, TunerConfig
from .detection import DetectorType, PitchDetector, create_detector
from .processing import NoteMapper, PitchSmoother

logger = logging.getLogger(__name__)


class TunerEngine:
    """Runs the selected detector on each frame and maps the smoothed pitch to a note.

    The smoothing window is shared state across calls, so every public
    operation holds one lock for its whole duration.
    """

    def __init__(
        self,
        detectors: Optional[Dict[DetectorType, PitchDetector]] = None,
        detector: Union[str, DetectorType] = DetectorType.AUTOCORRELATION,
        smoother: Optional[PitchSmoother] = None,
        mapper: Optional[NoteMapper] = None,
    ):
        """
        Initialize TunerEngine.

        Args:
            detectors: Detector instance per type (default: one of each with default tunables)
            detector: Initially selected detector
            smoother: Smoothing window (default: 5 frames)
            mapper: Note mapper (default: A4 = 440 Hz)
        """
        if detectors is None:
            detectors = {kind: create_detector(kind) for kind in DetectorType}
        self._detectors = detectors
        selected = DetectorType.parse(detector)
        if selected is None or selected not in self._detectors:
            raise ValueError(f"Unknown detector: {detector}")

        self._detector_type = selected
        self._smoother = smoother if smoother is not None else PitchSmoother()
        self._mapper = mapper if mapper is not None else NoteMapper()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: TunerConfig) -> "TunerEngine":
        """Build an engine with every component tuned from one config."""
        return cls(
            detectors={kind: create_detector(kind, config) for kind in DetectorType},
            detector=config.detector,
            smoother=PitchSmoother(config.smoothing_window),
            mapper=NoteMapper(config.a4_frequency),
        )

    @property
    def detector_type(self) -> DetectorType:
        return self._detector_type

    @property
    def detector(self) -> PitchDetector:
        return self._detectors[self._detector_type]

    @property
    def smoother(self) -> PitchSmoother:
        return self._smoother

    @property
    def mapper(self) -> NoteMapper:
        return self._mapper

    def process_frame(
        self, samples: Sequence[float], sample_rate: float
    ) -> Optional[NoteDescriptor]:
        """
        Process one captured frame.

        Args:
            samples: Mono samples of the frame
            sample_rate: Sample rate in Hz

        Returns:
            NoteDescriptor of the smoothed pitch, or None when the frame has no pitch

        Raises:
            ValueError: If sample_rate is not a positive finite number
        """
        if not math.isfinite(sample_rate) or sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {sample_rate}")

        buffer = np.asarray(samples, dtype=float)

        with self._lock:
            if buffer.size == 0 or not np.all(np.isfinite(buffer)):
                logger.debug("Skipping empty or non-finite frame")
                return None

            frequency = self.detector.estimate(buffer, sample_rate)
            if frequency is None:
                return None

            smoothed = self._smoother.push(frequency)
            return self._mapper.map(smoothed)

    def select_detector(self, name: Union[str, DetectorType]) -> bool:
        """
        Switch the active detector without touching the smoothing window.

        Returns:
            True on success, False if the name is unknown (detector unchanged)
        """
        kind = DetectorType.parse(name)
        if kind is None or kind not in self._detectors:
            logger.warning(
                "Unknown detector %r, keeping %s", name, self._detector_type.value
            )
            return False

        with self._lock:
            self._detector_type = kind
        logger.debug("Selected detector: %s", kind.value)
        return True

    def reset(self) -> None:
        """Clear smoothing history at the end of a tuning session."""
        with self._lock:
            self._smoother.clear()
        logger.debug("Tuner session reset")
