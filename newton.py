"""
Newton-Method Example
Find the root of cos(x) - x**3, starting from 0.5.
"""

import sys

import numpy as np

from generic_newton import Newton, find_root


def f(x: float) -> float:
    """ Function we'll find the (unique) zero of. """
    return np.cos(x) - x ** 3


def dfdx(x: float) -> float:
    """ Derivative of f """
    return -(np.sin(x) + 3 * x ** 2)


def plot(xs: list):
    """ Plot the estimates, and `f` evaluated at each. """
    import matplotlib.pyplot as plt

    fig, (ax0, ax1) = plt.subplots(2, 1, sharex=True)
    ax0.plot(xs, marker='o')
    ax0.set_ylabel('x')
    ax1.semilogy([abs(f(x)) for x in xs], marker='o')
    ax1.set_ylabel('|f(x)|')
    ax1.set_xlabel('Iteration')
    plt.show()


def main():
    n = Newton(0.5, f, dfdx)
    xs = [n.current] + n.take(10)
    for i, x in enumerate(xs):
        print(f'Iter #{i} - Guessing {x}')

    root = find_root(0.5, f, dfdx, verbose=True)
    print(f'Root: {root}, f(root): {f(root)}')

    if '--plot' in sys.argv[1:]:
        plot(xs)


if __name__ == '__main__':
    main()
