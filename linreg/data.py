import numpy as np

from .model import make_y
from .vector_ops import DomainError


def make_rng(seed=None):
    return np.random.default_rng(seed)


def rand_nums(count, rng):
    """count uniform draws in [0, 1) from rng (a np.random.Generator)"""
    if count <= 0:
        raise DomainError(f"sample count must be positive, got {count}")
    return rng.random(count)


def make_targets(a_true, b_true, xs):
    # no noise: the data lies exactly on the line
    return make_y(a_true, b_true, xs)


def make_dataset(a_true, b_true, count, rng):
    """
    Arguments:
        a_true, b_true: parameters the optimizer should recover
        count: number of samples
        rng: seeded generator, same seed gives the same dataset
    Returns: x, y arrays of length count
    """
    x = rand_nums(count, rng)
    y = make_targets(a_true, b_true, x)
    return x, y
