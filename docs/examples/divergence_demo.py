# docs/examples/divergence_demo.py
"""
Feed the same prices to both EMA engines and log where they part ways.

This demonstrates:
- How to build a shared parameter set
- How to drive engines one observation at a time
- How to run a logged batch comparison

Usage:
    python docs/examples/divergence_demo.py

Requirements:
    - emawindow library installed
"""

import logging

from emawindow import EmaParameters, FastEmaEngine, WindowedEmaEngine, run_comparison

log = logging.getLogger(__name__)


def main() -> None:
    params = EmaParameters(window_size=5)
    prices = [1.0, 2.0, 3.0, 4.0, 5.0, 5.0, 5.0, 5.0]

    comparison = run_comparison(prices, params)

    # Same thing, one observation at a time
    fast = FastEmaEngine(params)
    windowed = WindowedEmaEngine(params)
    for price in prices:
        f = fast.update(price)
        w = windowed.update(price)
        if f is None:
            continue
        log.info("price=%.1f fast=%.10f windowed=%.10f", price, f, w)

    log.info("first divergence at index %s", comparison.first_divergence_index)


if __name__ == "__main__":
    main()
