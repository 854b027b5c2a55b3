"""Shared fixtures and synthetic audio helpers."""

import numpy as np
import pytest

SR = 44100
BUFFER_SIZE = 2048


def generate_sine_wave(
    freq: float,
    n_samples: int = BUFFER_SIZE,
    sr: int = SR,
    amplitude: float = 0.5,
) -> np.ndarray:
    """Generate a sine wave at given frequency."""
    t = np.arange(n_samples) / sr
    return (amplitude * np.sin(2 * np.pi * freq * t)).astype(np.float32)


def generate_harmonic_tone(
    freq: float,
    n_samples: int = BUFFER_SIZE,
    sr: int = SR,
    amplitudes=(0.4, 0.2, 0.1),
) -> np.ndarray:
    """Generate a tone with a few harmonics (closer to a plucked string)."""
    t = np.arange(n_samples) / sr
    tone = sum(
        amp * np.sin(2 * np.pi * freq * (k + 1) * t) for k, amp in enumerate(amplitudes)
    )
    return tone.astype(np.float32)


@pytest.fixture
def sample_rate():
    return SR


@pytest.fixture
def silence():
    return np.zeros(BUFFER_SIZE, dtype=np.float32)


@pytest.fixture
def a4_frame():
    return generate_sine_wave(440.0)
