# emawindow/__init__.py
"""
emawindow - windowed Exponential Moving Average engines.

Provides two interchangeable EMA engines that agree on their first result
and diverge afterwards:

    FastEmaEngine      - O(1) incremental update; older history never fully
                         drops out of the result
    WindowedEmaEngine  - recomputes over the last window_size observations;
                         result depends on the window only

Example:
    from emawindow import EmaParameters, FastEmaEngine, WindowedEmaEngine

    params = EmaParameters(window_size=5)
    fast = FastEmaEngine(params)
    windowed = WindowedEmaEngine(params)

    for price in [1, 2, 3, 4, 5, 5]:
        fast.update(price)
        windowed.update(price)

    print(fast.get_result(), windowed.get_result())
"""

from .config import settings, load_parameters_config
from .parameters import DEFAULT_PARAMETERS, EmaParameters
from .engines import EmaEngine, FastEmaEngine, WindowedEmaEngine, ema_step
from .series import EngineComparison, compare_engines, run_engine
from .runner import configure_logging, run_comparison

__version__ = "0.1.0"
__all__ = [
    "settings",
    "load_parameters_config",
    "DEFAULT_PARAMETERS",
    "EmaParameters",
    "EmaEngine",
    "FastEmaEngine",
    "WindowedEmaEngine",
    "ema_step",
    "EngineComparison",
    "compare_engines",
    "run_engine",
    "configure_logging",
    "run_comparison",
]
