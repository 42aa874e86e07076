from .vector_ops import as_vector


def linear_function(a, b, x):
    """f(x) = a * x + b"""
    return a * x + b


def predict_all(a, b, xs):
    """
    evaluate the affine model on every x
    Returns: array with the same length as xs
    """
    return linear_function(a, b, as_vector(xs))


# generate Y's
make_y = predict_all
