import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def linear():
    a, b = 1.0, 1.0

    def f(t, y):
        return a * y

    def g(t, y):
        return b * y

    return f, g


@pytest.fixture
def short_grid():
    return np.linspace(0.0, 1.0, 51)
