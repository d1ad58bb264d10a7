"""
Exception Classes
"""


class NewtonError(Exception):
    """ Base-class for errors raised by the solving layer.
    The iterator itself never raises these. """

    @classmethod
    def assert_true(cls, cond, msg: str = ''):
        if not cond:
            raise cls(msg)


class ConvergenceError(NewtonError):
    """ Iteration budget exhausted without converging. """

    def __init__(self, msg: str = '', history=None):
        super().__init__(msg)
        self.history = history or []


class DivergenceError(NewtonError):
    """ An estimate went non-finite (inf or nan), typically from a zero derivative. """

    def __init__(self, msg: str = '', step: int = None, estimate=None):
        super().__init__(msg)
        self.step = step
        self.estimate = estimate


class OptionsError(NewtonError, ValueError):
    """ Invalid solver option value. """
