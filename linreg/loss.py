import numpy as np

from .model import make_y
from .vector_ops import DomainError, as_vector, check_same_length, elementwise, sum_of_squares


def sum_squared_errors(y, pred):
    """sum of (y_i - pred_i)^2, the quantity gradient descent minimises"""
    y = as_vector(y)
    pred = as_vector(pred)
    check_same_length(y, pred)
    return sum_of_squares(elementwise(np.subtract, y, pred))


def loss(y, a, b, x):
    return sum_squared_errors(y, make_y(a, b, x))


def rms_loss(y, a, b, x):
    """
    root mean squared error of the guess (a, b), only used to print progress.
    the optimizer never differentiates this, it works on the raw SSE
    """
    n = len(x)
    if n == 0:
        raise DomainError("rms loss of an empty sample set")
    return float(np.sqrt(loss(y, a, b, x) / n))
