"""Pytest configuration and fixtures."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from pulsar_plots.surface import RecordingSurface


@pytest.fixture
def surface():
    """Fresh recording surface per test."""
    return RecordingSurface()


@pytest.fixture(autouse=True)
def close_figures():
    """Close every figure a test leaves open."""
    yield
    plt.close("all")


@pytest.fixture
def ramp():
    """Seven values 0.1 .. 0.7, one full column at row_count=7."""
    return [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7]
