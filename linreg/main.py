import argparse

from .data import make_dataset, make_rng
from .loss import rms_loss
from .optimizer import GDConfig, GradientDescent


def build_arg_parser():
    p = argparse.ArgumentParser(description="fit f(x) = a * x + b with batch gradient descent")
    # true parameters, the model will try to guess them
    p.add_argument("--a", type=float, default=3.0)
    p.add_argument("--b", type=float, default=8.0)
    # starting guess, it doesn't matter what
    p.add_argument("--a_guess", type=float, default=-5.0)
    p.add_argument("--b_guess", type=float, default=-3.0)
    # optimizer
    p.add_argument("--samples", type=int, default=30)
    p.add_argument("--lr", type=float, default=0.01)
    p.add_argument("--iterations", type=int, default=3000)
    p.add_argument("--report_every", type=int, default=100)
    p.add_argument("--tolerance", type=float, default=None, help="stop once a step is smaller than this")
    p.add_argument("--seed", type=int, default=None)
    # extras
    p.add_argument("--plot", type=str, default=None, help="save the loss curve to this file")
    p.add_argument("--check_autograd", action="store_true", help="refit with torch and compare")
    return p


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    config = GDConfig(
        learning_rate=args.lr,
        max_iterations=args.iterations,
        sample_count=args.samples,
        report_every=args.report_every,
        tolerance=args.tolerance,
    ).validate()

    # generate 'some' data using the known values of a and b
    x, y = make_dataset(args.a, args.b, config.sample_count, make_rng(args.seed))

    print(f"Starting loss : {rms_loss(y, args.a_guess, args.b_guess, x)}")

    optimizer = GradientDescent(config, args.a_guess, args.b_guess)
    result = optimizer.fit(x, y, callback=lambda i, L: print(f"loss = {L}"))

    print(f"I guess a={result.a} and b={result.b}")

    if args.check_autograd:
        from .pt_linreg import fit_autograd
        a_pt, b_pt = fit_autograd(x, y, config, args.a_guess, args.b_guess, result.iterations)
        print(f"torch autograd guess a={a_pt} and b={b_pt}")
    if args.plot:
        from .plot import plot_loss_history
        plot_loss_history(result.history, args.plot)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
