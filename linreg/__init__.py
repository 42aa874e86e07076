from .vector_ops import DomainError, mean, sum_of_squares, elementwise
from .model import linear_function, predict_all, make_y
from .loss import sum_squared_errors, loss, rms_loss
from .data import make_rng, rand_nums, make_targets, make_dataset
from .optimizer import GDConfig, FitResult, GradientDescent, fit_linear
