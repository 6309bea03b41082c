"""Global test configuration and shared fixtures.

Seeds RNGs for deterministic runs and builds the canonical tanh neuron used
by several test modules.
"""

import os
import random

import numpy as np
import pytest

from scalargrad import Value


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("SCALARGRAD_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


@pytest.fixture
def neuron():
    """o = tanh(x1*w1 + x2*w2 + b) with the inputs and intermediates by name."""
    x1 = Value(2.0, name="x1")
    x2 = Value(0.0, name="x2")
    w1 = Value(-3.0, name="w1")
    w2 = Value(1.0, name="w2")
    b = Value(6.881373587019, name="b")
    n = x1 * w1 + x2 * w2 + b
    o = n.tanh()
    return {"x1": x1, "x2": x2, "w1": w1, "w2": w2, "b": b, "n": n, "o": o}
