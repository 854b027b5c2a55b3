"""Signal statistics shared by the pitch detectors."""

import numpy as np


def rms(buffer: np.ndarray) -> float:
    """Root-mean-square energy of a buffer (0.0 when empty)."""
    buffer = np.asarray(buffer, dtype=float)
    if buffer.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(buffer**2)))


def parabolic_offset(x1: float, x2: float, x3: float) -> float:
    """
    Sub-sample offset of the extremum of a parabola through three points.

    The points are taken at positions -1, 0 and +1 around a discrete
    peak or trough at x2.

    Returns:
        Offset to add to the centre index, 0.0 for a flat fit
    """
    a = (x1 + x3 - 2 * x2) / 2
    b = (x3 - x1) / 2
    if a == 0:
        return 0.0
    return -b / (2 * a)
