"""
Streaming EMA engines.

Example:
    from emawindow.engines import FastEmaEngine, WindowedEmaEngine

    fast = FastEmaEngine()
    windowed = WindowedEmaEngine()

    for price in prices:
        fast.update(price)
        windowed.update(price)
"""

from .base import EmaEngine
from .fast import FastEmaEngine
from .step import ema_step
from .windowed import WindowedEmaEngine

__all__ = ["EmaEngine", "FastEmaEngine", "WindowedEmaEngine", "ema_step"]
