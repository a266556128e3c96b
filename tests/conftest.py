import pytest

from chromaramp import ColorEngine, OKLCH, Ramp


@pytest.fixture
def engine():
    return ColorEngine(123)


@pytest.fixture
def ramp5():
    """A hand-built five-entry ramp with distinct entries."""
    return Ramp([
        OKLCH(0.95, 0.02, 10.0),
        OKLCH(0.80, 0.08, 40.0),
        OKLCH(0.60, 0.12, 90.0),
        OKLCH(0.40, 0.16, 200.0),
        OKLCH(0.20, 0.10, 330.0),
    ])
