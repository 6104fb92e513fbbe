# emawindow/runner.py
"""
Logging setup and a logged engine comparison for embedding callers.
"""

import logging
import sys
from typing import Iterable

from .config import settings
from .parameters import EmaParameters
from .series import EngineComparison, compare_engines

log = logging.getLogger(__name__)


def configure_logging(level: str | None = None, force: bool = False) -> None:
    """
    Send emawindow log records to stdout.

    Leaves an already configured root logger alone unless ``force`` is set,
    in which case its handlers are replaced.

    Args:
        level: Logging level name (default: settings.log_level)
        force: If True, replace existing root handlers
    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers() and not force:
        return

    if force:
        root_logger.handlers.clear()
    root_logger.setLevel((level or settings.log_level).upper())

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def run_comparison(
    observations: Iterable[float],
    parameters: EmaParameters | None = None,
    log_level: str | None = None,
    setup_logging: bool = True,
) -> EngineComparison:
    """
    Compare both engines over a sequence of observations and log a summary.

    Args:
        observations: Observations, oldest first
        parameters: Shared parameter set (default: DEFAULT_PARAMETERS)
        log_level: Optional log level override
        setup_logging: If True, configure basic logging

    Returns:
        The EngineComparison that was logged
    """
    settings.validate()
    if setup_logging:
        configure_logging(log_level)

    comparison = compare_engines(observations, parameters)
    params = comparison.parameters

    log.info("=" * 70)
    log.info("EMA engine comparison")
    log.info("=" * 70)
    log.info(
        "window_size=%d smoothing=%s alpha=%.6f observations=%d",
        params.window_size, params.smoothing, params.alpha, len(comparison),
    )

    first = comparison.first_result_index
    if first is None:
        log.warning(
            "Not enough observations for a result (need %d, got %d)",
            params.window_size, len(comparison),
        )
        return comparison

    log.info("First result at index %d: %.10f", first, comparison.fast[first])

    divergence = comparison.first_divergence_index
    if divergence is None:
        log.info("Engines agree on every result")
    else:
        log.info(
            "Engines diverge from index %d (fast=%.10f windowed=%.10f)",
            divergence, comparison.fast[divergence], comparison.windowed[divergence],
        )
    log.info("Max absolute difference: %.10f", comparison.max_abs_difference)

    return comparison
