"""Moving-average smoothing of successive pitch estimates."""

from collections import deque
from typing import Tuple

from ..core.constants import DEFAULT_SMOOTHING_WINDOW


class PitchSmoother:
    """Fixed-size FIFO of recent valid frequencies, averaged on every push.

    Frames without a pitch are simply not pushed, so the window carries
    over silent stretches unchanged.
    """

    def __init__(self, window_size: int = DEFAULT_SMOOTHING_WINDOW):
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        self.window_size = window_size
        self._history = deque(maxlen=window_size)

    def push(self, frequency: float) -> float:
        """Append a frequency, evicting the oldest if full, and return the mean."""
        self._history.append(float(frequency))
        return sum(self._history) / len(self._history)

    def clear(self) -> None:
        self._history.clear()

    @property
    def values(self) -> Tuple[float, ...]:
        """Current window, oldest first."""
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)
