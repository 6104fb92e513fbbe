"""Incremental EMA engine."""

from ..parameters import EmaParameters
from .base import EmaEngine
from .step import ema_step


class FastEmaEngine(EmaEngine):
    """
    EMA updated in place with one smoothing step per observation.

    Every update costs O(1) because all prior history is folded into a
    single running value. The price is that observations older than the
    current window never drop out: the first observation still carries a
    weight of ``(1 - alpha) ** n`` after ``n`` further updates. Results
    therefore match ``WindowedEmaEngine`` only for the first emitted value.
    """

    def __init__(self, parameters: EmaParameters | None = None):
        super().__init__(parameters)
        self._last_value: float = 0.0
        self._count: int = 0
        self._result: float | None = None

    @property
    def last_value(self) -> float:
        return self._last_value

    @property
    def observation_count(self) -> int:
        return self._count

    def update(self, observation: float) -> float | None:
        if self._count == 0:
            # Seed with the raw first observation
            self._last_value = observation
        else:
            self._last_value = ema_step(
                self._last_value, observation, self.parameters.alpha
            )
        self._count += 1

        if self._count >= self.parameters.window_size:
            self._result = self._last_value

        return self._result

    def get_result(self) -> float | None:
        return self._result
