from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .loss import rms_loss
from .model import make_y
from .vector_ops import DomainError, as_vector, check_same_length, elementwise, mean


@dataclass
class GDConfig:
    learning_rate: float = 0.01
    max_iterations: int = 3000
    sample_count: int = 30
    report_every: int = 100     # 0 disables reporting
    tolerance: Optional[float] = None

    def validate(self):
        if self.learning_rate <= 0:
            raise DomainError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.max_iterations < 0:
            raise DomainError(f"max_iterations must be >= 0, got {self.max_iterations}")
        if self.sample_count <= 0:
            raise DomainError(f"sample_count must be positive, got {self.sample_count}")
        if self.report_every < 0:
            raise DomainError(f"report_every must be >= 0, got {self.report_every}")
        if self.tolerance is not None and self.tolerance <= 0:
            raise DomainError(f"tolerance must be positive, got {self.tolerance}")
        return self


@dataclass
class FitResult:
    a: float
    b: float
    iterations: int
    history: List[Tuple[int, float]] = field(default_factory=list)
    converged: bool = False


class GradientDescent:
    """
    batch gradient descent for f(x) = a * x + b on the sum of squared errors

    loss = (y - (a * x + b))^2 per sample, so
        d/db = 2 (a x + b - y) = 2 (y_pred - y)
        d/da = 2 x (a x + b - y) = x * d/db
    both are averaged over the whole sample set and a, b move against them.
    """

    def __init__(self, config: GDConfig, a_guess: float, b_guess: float):
        self.config = config.validate()
        self.a = float(a_guess)
        self.b = float(b_guess)
        self.iteration = 0
        self.converged = False

    @property
    def done(self) -> bool:
        return self.converged or self.iteration >= self.config.max_iterations

    def gradients(self, x, y) -> Tuple[float, float]:
        x = as_vector(x)
        y = as_vector(y)
        check_same_length(x, y)
        y_pred = make_y(self.a, self.b, x)
        dydb = elementwise(lambda p, t: 2 * (p - t), y_pred, y)
        dyda = elementwise(lambda xi, g: xi * g, x, dydb)
        return mean(dyda), mean(dydb)

    def step(self, x, y) -> Tuple[float, float]:
        """one update, both gradients come from the same (pre-update) guess"""
        grad_a, grad_b = self.gradients(x, y)
        lr = self.config.learning_rate
        self.a -= lr * grad_a
        self.b -= lr * grad_b
        self.iteration += 1

        tol = self.config.tolerance
        if tol is not None and max(abs(lr * grad_a), abs(lr * grad_b)) < tol:
            self.converged = True
        return grad_a, grad_b

    def fit(self, x, y, callback: Optional[Callable[[int, float], None]] = None) -> FitResult:
        """run until max_iterations (or tolerance), reporting rms loss every report_every steps"""
        x = as_vector(x)
        y = as_vector(y)
        check_same_length(x, y)
        if x.size == 0:
            raise DomainError("cannot fit an empty sample set")

        history = []
        every = self.config.report_every
        while not self.done:
            i = self.iteration
            self.step(x, y)
            if every and i % every == 0:
                L = rms_loss(y, self.a, self.b, x)
                history.append((i, L))
                if callback is not None:
                    callback(i, L)
        return FitResult(self.a, self.b, self.iteration, history, self.converged)


def fit_linear(x, y, config=None, a_guess=-5.0, b_guess=-3.0, callback=None) -> FitResult:
    optimizer = GradientDescent(config or GDConfig(), a_guess, b_guess)
    return optimizer.fit(x, y, callback)
