import matplotlib
matplotlib.use("Agg")

import pytest

from linreg.data import make_dataset, make_rng
from linreg.optimizer import GDConfig


A_TRUE, B_TRUE = 3.0, 8.0
A_GUESS, B_GUESS = -5.0, -3.0


@pytest.fixture
def dataset():
    # 30 samples on the line y = 3x + 8, fixed seed
    return make_dataset(A_TRUE, B_TRUE, 30, make_rng(42))


@pytest.fixture
def config():
    return GDConfig(learning_rate=0.01, max_iterations=3000, sample_count=30, report_every=100)
