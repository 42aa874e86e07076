import torch
import torch.optim as optim

from .vector_ops import as_vector, check_same_length


def fit_autograd(x, y, config, a_guess=-5.0, b_guess=-3.0, iterations=None):
    """
    same fit as GradientDescent but with torch computing the derivatives.
    the mean of the squared errors has the gradient mean(2 x (y_ - y)), mean(2 (y_ - y)),
    which is what GradientDescent derives by hand, so both should agree
    Returns: a, b as python floats
    """
    x_np = as_vector(x)
    y_np = as_vector(y)
    check_same_length(x_np, y_np)
    config.validate()

    # float64 so the result is comparable with the numpy version
    X = torch.tensor(x_np, dtype=torch.float64)
    Y = torch.tensor(y_np, dtype=torch.float64)
    a = torch.tensor([a_guess], dtype=torch.float64, requires_grad=True)
    b = torch.tensor([b_guess], dtype=torch.float64, requires_grad=True)

    optimizer = optim.SGD([a, b], lr=config.learning_rate)

    if iterations is None:
        iterations = config.max_iterations
    for i in range(iterations):
        # affine regression model
        Y_ = a * X + b
        diff = (Y - Y_)
        loss = torch.mean(diff**2)
        optimizer.zero_grad()
        loss.backward()
        optimizer.step()

    return a.item(), b.item()
