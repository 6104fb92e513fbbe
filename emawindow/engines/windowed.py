"""EMA engine recomputed over a bounded sliding window."""

from collections import deque

from ..parameters import EmaParameters
from .base import EmaEngine
from .step import ema_step


class WindowedEmaEngine(EmaEngine):
    """
    EMA recomputed from scratch over the last ``window_size`` observations.

    Each update evicts the oldest observation once the window is full, then
    replays the smoothing recurrence over the whole window, seeding with its
    oldest element. Updates cost O(window_size), and the result depends on
    the current window contents only.
    """

    def __init__(self, parameters: EmaParameters | None = None):
        super().__init__(parameters)
        # first value is oldest, last is newest
        self._window: deque[float] = deque(maxlen=self.parameters.window_size)
        self._result: float | None = None

    @property
    def window(self) -> tuple[float, ...]:
        return tuple(self._window)

    def update(self, observation: float) -> float | None:
        self._window.append(observation)

        if len(self._window) < self.parameters.window_size:
            self._result = None
            return None

        alpha = self.parameters.alpha
        values = iter(self._window)
        result = next(values)
        for value in values:
            result = ema_step(result, value, alpha)

        self._result = result
        return result

    def get_result(self) -> float | None:
        return self._result
