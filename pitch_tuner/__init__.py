"""Pitch Tuner - Monophonic pitch detection and note tuning.

Architecture Layers:
    1. core/        - Note descriptor, configuration, constants
    2. analysis/    - Low-level signal statistics (RMS, interpolation)
    3. detection/   - Single-frame pitch detectors (autocorrelation, YIN)
    4. processing/  - Smoothing and frequency to note mapping
    5. engine       - Per-frame tuner pipeline
    6. input/       - Audio file loading and framing
    7. output/      - Terminal presentation
"""

__version__ = "0.1.0"

# Core types
from .core import NoteDescriptor, TunerConfig

# Analysis layer
from .analysis import rms, parabolic_offset

# Detection layer
from .detection import (
    DetectorType,
    PitchDetector,
    AutocorrelationDetector,
    YinDetector,
    create_detector,
)

# Processing layer
from .processing import PitchSmoother, NoteMapper

# Engine
from .engine import TunerEngine

# Input layer
from .input import AudioLoader

# Output layer
from .output import TunerDisplay, TuningStatus

__all__ = [
    # Core
    "NoteDescriptor",
    "TunerConfig",
    # Analysis
    "rms",
    "parabolic_offset",
    # Detection
    "DetectorType",
    "PitchDetector",
    "AutocorrelationDetector",
    "YinDetector",
    "create_detector",
    # Processing
    "PitchSmoother",
    "NoteMapper",
    # Engine
    "TunerEngine",
    # Input
    "AudioLoader",
    # Output
    "TunerDisplay",
    "TuningStatus",
]
