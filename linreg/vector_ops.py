import numpy as np


class DomainError(ValueError):
    """Raised when a caller breaks a precondition (empty input, length mismatch)."""


def as_vector(values):
    """convert values to a 1-D float64 array"""
    v = np.asarray(values, dtype=np.float64)
    if v.ndim != 1:
        raise DomainError(f"expected a 1-D sequence, got shape {v.shape}")
    return v


def check_same_length(xs, ys):
    if len(xs) != len(ys):
        raise DomainError(f"length mismatch: {len(xs)} != {len(ys)}")


def mean(values):
    """
    arithmetic mean of values
    an empty sequence raises DomainError instead of returning NaN
    """
    v = as_vector(values)
    if v.size == 0:
        raise DomainError("mean of an empty sequence")
    return float(np.sum(v) / v.size)


def sum_of_squares(values):
    v = as_vector(values)
    return float(np.sum(v * v))


def elementwise(fn, xs, ys=None):
    """
    apply fn over one or two sequences of the same length.
    fn gets whole arrays (numpy style) and must return one value per element:
        elementwise(np.negative, xs)
        elementwise(lambda p, t: 2 * (p - t), pred, y)
    """
    xs = as_vector(xs)
    if ys is None:
        out = fn(xs)
    else:
        ys = as_vector(ys)
        check_same_length(xs, ys)
        out = fn(xs, ys)
    out = as_vector(out)
    check_same_length(xs, out)
    return out
