"""
Convergence Policies, built on top of the `Newton` iterator
"""

from typing import Callable, Iterator, Optional, Tuple

import numpy as np

from .iterator import Newton
from .errors import ConvergenceError, DivergenceError
from .options import NewtonOptions


def isfinite(x) -> bool:
    """ Boolean finite-ness of scalar or array `x`. All elements must be finite. """
    return bool(np.all(np.isfinite(np.asarray(x, dtype='float64'))))


def checked(newton: Newton) -> Iterator:
    """ Wrap `newton`, yielding its estimates,
    and raising a `DivergenceError` on the first non-finite one. """
    for step, x in enumerate(newton):
        if not isfinite(x):
            raise DivergenceError(f'Non-finite estimate {x} at step {step}', step=step, estimate=x)
        yield x


class Solver(object):
    """ Newton-Method Solver
    Drives a `Newton` iterator until successive estimates agree within `options.tol`. """

    def __init__(self, newton: Newton, options: Optional[NewtonOptions] = None):
        self.newton = newton
        self.options = options or NewtonOptions()
        self.history = [newton.current]

    @property
    def x(self):
        return self.newton.current

    def iterate(self) -> None:
        """ Single Newton step, recorded in `history` """
        self.history.append(self.newton.advance())

    def converged(self) -> bool:
        """ Newton-iteration-similarity test """
        if len(self.history) < 2:
            return False
        diff = np.abs(self.history[-1] - self.history[-2])
        # nan never compares less-than, so non-finite estimates never pass
        return bool(np.all(diff < self.options.tol))

    def solve(self):
        """ Iterate to convergence, and return the solution. """
        max_iters = self.options.max_iters

        for i in range(max_iters):
            if self.options.verbose:
                print(f'Iter #{i} - Guessing {self.x}')
            self.iterate()
            if self.options.check_finite and not isfinite(self.x):
                raise DivergenceError(f'Non-finite estimate {self.x} at step {i}', step=i, estimate=self.x)
            if self.converged():
                break
        else:
            raise ConvergenceError(f'Could Not Converge in {max_iters} iterations', history=self.history)

        if self.options.verbose:
            print(f'Successfully Converged to {self.x} in {i + 1} iterations')
        return self.x


def find_root(initial_guess, func: Callable, derivative: Callable,
              options: Optional[NewtonOptions] = None, **kw):
    """ Find a root of `func`, starting from `initial_guess`.
    Keyword arguments are forwarded to `NewtonOptions`, if `options` is not provided. """
    if options is None:
        options = NewtonOptions(**kw)
    elif kw:
        raise TypeError(f'Cannot combine `options` with keyword options {list(kw)}')
    newton = Newton(initial_guess, func, derivative)
    return Solver(newton, options=options).solve()


def explore(func: Callable, derivative: Callable, *, xmin: float = -1.0, xmax: float = 1.0,
            xstep: float = 0.1, options: Optional[NewtonOptions] = None) -> Tuple[np.ndarray, np.ndarray]:
    """ Solve from each of a grid of initial guesses.
    Returns arrays of `(guesses, roots)`, with nan for guesses which fail to converge. """
    if not xmax >= xmin:
        raise ValueError(f'Invalid range [{xmin}, {xmax}]')
    if not xstep > 0:
        raise ValueError(f'Invalid step {xstep}')
    nstep = int(round((xmax - xmin) / xstep)) + 1
    guesses = np.linspace(xmin, xmax, nstep)

    roots = []
    for x0 in guesses:
        try:
            root = find_root(float(x0), func, derivative, options=options)
        except (ConvergenceError, DivergenceError):
            root = np.nan
        roots.append(root)

    return guesses, np.array(roots, dtype='float64')
