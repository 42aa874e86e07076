import matplotlib.pyplot as plt


def plot_loss_history(history, path=None):
    """
    history: list of (iteration, rms loss) pairs as returned in FitResult.history
    """
    fig = plt.figure(figsize=(8, 5))
    if history:
        its, losses = zip(*history)
        plt.plot(its, losses, marker='.')
    plt.yscale('log')
    plt.xlabel('iteration')
    plt.ylabel('rms loss')
    plt.title('gradient descent on f(x) = a * x + b')
    if path is not None:
        fig.savefig(path)
        print(f"loss curve saved to {path}")
    return fig
