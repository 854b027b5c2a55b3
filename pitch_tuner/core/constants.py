"""Global constants for Pitch Tuner."""

# Pitch names
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Reference pitch
A4_FREQUENCY = 440.0
A4_MIDI = 69

# Frame defaults
DEFAULT_BUFFER_SIZE = 2048

# Detector tunables (empirical, not derived)
DEFAULT_RMS_THRESHOLD = 0.01  # silence gate
DEFAULT_TRIM_THRESHOLD = 0.2  # autocorrelation transient trim
DEFAULT_YIN_THRESHOLD = 0.1
DEFAULT_YIN_CONFIDENCE = 0.6

# Smoothing
DEFAULT_SMOOTHING_WINDOW = 5

# Display
IN_TUNE_CENTS = 5.0
DISPLAY_CENTS_RANGE = 50.0
