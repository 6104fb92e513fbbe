# emawindow/series.py
"""
Batch helpers - run engines over whole observation sequences.

Results come back as float64 numpy arrays aligned with the input, with
NaN in every warm-up position.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .engines import EmaEngine, FastEmaEngine, WindowedEmaEngine
from .parameters import DEFAULT_PARAMETERS, EmaParameters

log = logging.getLogger(__name__)


def run_engine(engine: EmaEngine, observations: Iterable[float]) -> np.ndarray:
    """
    Feed observations to an engine in order and collect every result.

    Args:
        engine: Engine to update (mutated in place)
        observations: Observations, oldest first

    Returns:
        Array of results, NaN where the engine had no result yet
    """
    was_ready = engine.ready()
    results: list[float] = []

    for i, observation in enumerate(observations):
        value = engine.update(float(observation))
        if value is None:
            results.append(np.nan)
            continue

        if not was_ready:
            was_ready = True
            log.debug("%r produced its first result at index %d", engine, i)
        results.append(value)

    return np.array(results, dtype=np.float64)


@dataclass(frozen=True)
class EngineComparison:
    """
    Side-by-side results of both engines over the same observations.

    Attributes:
        parameters: Parameter set shared by both engines
        fast: FastEmaEngine results
        windowed: WindowedEmaEngine results
    """

    parameters: EmaParameters
    fast: np.ndarray
    windowed: np.ndarray

    @property
    def difference(self) -> np.ndarray:
        """Fast minus windowed results (NaN during warm-up)."""
        return self.fast - self.windowed

    @property
    def first_result_index(self) -> Optional[int]:
        ready = np.flatnonzero(~np.isnan(self.fast))
        return int(ready[0]) if ready.size else None

    @property
    def first_divergence_index(self) -> Optional[int]:
        """Index of the first result where the engines disagree, if any."""
        both = ~np.isnan(self.fast) & ~np.isnan(self.windowed)
        diverged = np.flatnonzero(both & (self.fast != self.windowed))
        return int(diverged[0]) if diverged.size else None

    @property
    def max_abs_difference(self) -> float:
        diff = self.difference
        diff = diff[~np.isnan(diff)]
        if diff.size == 0:
            return 0.0
        return float(np.max(np.abs(diff)))

    def __len__(self) -> int:
        return len(self.fast)


def compare_engines(
    observations: Iterable[float],
    parameters: Optional[EmaParameters] = None,
) -> EngineComparison:
    """
    Run a fresh FastEmaEngine and WindowedEmaEngine over the same observations.

    Args:
        observations: Observations, oldest first
        parameters: Shared parameter set (default: DEFAULT_PARAMETERS)

    Returns:
        EngineComparison holding both result arrays
    """
    parameters = parameters or DEFAULT_PARAMETERS
    values = np.asarray(list(observations), dtype=np.float64)

    fast = run_engine(FastEmaEngine(parameters), values)
    windowed = run_engine(WindowedEmaEngine(parameters), values)

    return EngineComparison(parameters=parameters, fast=fast, windowed=windowed)
