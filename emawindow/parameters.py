"""Window size and smoothing constants shared by every EMA engine."""

from dataclasses import dataclass, field

from .config import settings


@dataclass(frozen=True)
class EmaParameters:
    """
    Immutable parameter set for a family of EMA engines.

    ``alpha`` is derived once as ``smoothing / (1 + window_size)``. Engines
    whose outputs are compared must be built from the same instance.
    """

    window_size: int = 30
    smoothing: float = 2.0
    alpha: float = field(init=False)

    def __post_init__(self) -> None:
        if self.window_size <= 0:
            raise ValueError("window_size must be > 0")
        if self.smoothing <= 0:
            raise ValueError("smoothing must be > 0")

        alpha = self.smoothing / (1 + self.window_size)
        if not 0.0 < alpha < 1.0:
            raise ValueError(
                f"smoothing / (1 + window_size) must be in (0, 1), got {alpha}"
            )
        object.__setattr__(self, "alpha", alpha)


DEFAULT_PARAMETERS = EmaParameters(
    window_size=settings.window_size,
    smoothing=settings.smoothing,
)
