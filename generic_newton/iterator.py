"""
Newton-Raphson Iterator
"""

import decimal
from contextlib import contextmanager
from typing import Callable, Generic, List, TypeVar

import numpy as np

T = TypeVar('T')


@contextmanager
def quiet():
    """ Let exceptional arithmetic produce inf and nan, rather than warn or raise.
    Covers numpy's floating-point state, and the `decimal` traps. """
    with np.errstate(divide='ignore', invalid='ignore'), decimal.localcontext() as ctx:
        ctx.traps[decimal.DivisionByZero] = False
        ctx.traps[decimal.InvalidOperation] = False
        yield


def divide(num, den):
    """ Divide `num` by `den` with IEEE-754 semantics.
    numpy and `decimal` yield +/-inf or nan under `quiet`.
    Python floats and ints raise on division by zero; fall back to numpy `float64` for those. """
    with quiet():
        try:
            return num / den
        except ZeroDivisionError:
            return np.float64(num) / np.float64(den)


class Newton(Generic[T]):
    """ Iterator over successive Newton-method estimates of a root of `func`.

    x[k+1] = x[k] - func(x[k]) / derivative(x[k])

    Generic over the estimate type: anything supporting subtraction and division,
    including numpy arrays, which iterate elementwise.
    The sequence is infinite; callers decide when to stop pulling values. """

    def __init__(self, initial_guess: T, func: Callable[[T], T], derivative: Callable[[T], T]):
        self._current = initial_guess
        self._func = func
        self._derivative = derivative

    def __repr__(self):
        return f'<{self.__class__.__name__}(current={self._current})>'

    @property
    def current(self) -> T:
        """ The last estimate produced, or the initial guess before any step. """
        return self._current

    @property
    def func(self) -> Callable[[T], T]:
        return self._func

    @property
    def derivative(self) -> Callable[[T], T]:
        return self._derivative

    def advance(self) -> T:
        """ Take a single Newton step, and return the new estimate.
        A zero derivative produces an infinite (or nan) estimate, never an exception. """
        x = self._current
        y = self._func(x)
        dy = self._derivative(x)
        # Once an estimate is inf, the subtraction itself can hit inf - inf
        with quiet():
            self._current = x - divide(y, dy)
        return self._current

    def __iter__(self):
        return self

    def __next__(self) -> T:
        return self.advance()

    def nth(self, n: int) -> T:
        """ Return the `n`th next estimate, zero-indexed.
        Advances `n + 1` times; `nth(0)` is a single step. """
        if n < 0:
            raise ValueError(f'Invalid step count {n}')
        for _ in range(n):
            self.advance()
        return self.advance()

    def take(self, n: int) -> List[T]:
        """ Collect the next `n` estimates """
        return [self.advance() for _ in range(n)]
