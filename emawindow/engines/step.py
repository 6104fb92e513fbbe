"""Single exponential smoothing transition."""

from ..parameters import DEFAULT_PARAMETERS


def ema_step(
    previous_ema: float,
    observation: float,
    alpha: float = DEFAULT_PARAMETERS.alpha,
) -> float:
    """Blend ``observation`` into ``previous_ema`` with weight ``alpha``."""
    return previous_ema + alpha * (observation - previous_ema)
