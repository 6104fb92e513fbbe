# tests/conftest.py
import pytest

from emawindow.parameters import EmaParameters


@pytest.fixture
def params() -> EmaParameters:
    """Small window keeping fixtures short and history influence large."""
    return EmaParameters(window_size=5, smoothing=2.0)


def make_ramp(n: int, start: int = 1) -> list[float]:
    """
    Deterministic observation series: start, start + 1, ..., start + n - 1.
    """
    return [float(i) for i in range(start, start + n)]


@pytest.fixture
def ramp():
    """
    Returns a function: (n:int, start:int=1) -> list[float]
    """
    return make_ramp
