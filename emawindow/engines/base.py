"""Base class for EMA engines."""

import abc

from ..parameters import DEFAULT_PARAMETERS, EmaParameters


class EmaEngine(abc.ABC):
    """
    Abstract base class for streaming EMA engines.

    Engines are fed one observation at a time through ``update`` and report
    ``None`` until enough observations have been seen. Behavior for NaN or
    infinite observations is unspecified: they flow through ordinary float
    arithmetic without being checked.
    """

    def __init__(self, parameters: EmaParameters | None = None):
        self.parameters = parameters or DEFAULT_PARAMETERS

    @abc.abstractmethod
    def update(self, observation: float) -> float | None:
        """Record a new observation and return the latest result."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_result(self) -> float | None:
        """Return the current EMA, or None while warming up."""
        raise NotImplementedError

    def ready(self) -> bool:
        """Return True once the engine has produced a result."""
        return self.get_result() is not None

    def warmup_periods(self) -> int:
        return self.parameters.window_size

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(window_size={self.parameters.window_size}, "
            f"smoothing={self.parameters.smoothing}, ready={self.ready()})"
        )
