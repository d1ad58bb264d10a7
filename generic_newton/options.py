"""
Solver options, and support for storing them to YAML
"""

from pathlib import Path

import ruamel.yaml

from . import DEFAULT_TOL, DEFAULT_MAX_ITERS
from .errors import OptionsError

yaml = ruamel.yaml.YAML()


@yaml.register_class
class NewtonOptions(object):
    """ Stopping-policy knobs for `Solver`.
    None of these affect the `Newton` iterator itself. """

    def __init__(self, *, tol: float = DEFAULT_TOL, max_iters: int = DEFAULT_MAX_ITERS,
                 check_finite: bool = True, verbose: bool = False):
        OptionsError.assert_true(tol > 0, f'Invalid tolerance {tol}')
        OptionsError.assert_true(max_iters >= 1, f'Invalid iteration limit {max_iters}')
        self.tol = float(tol)
        self.max_iters = int(max_iters)
        self.check_finite = bool(check_finite)
        self.verbose = bool(verbose)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.to_dict()})>'

    def __eq__(self, other):
        if not isinstance(other, NewtonOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return dict(
            tol=self.tol,
            max_iters=self.max_iters,
            check_finite=self.check_finite,
            verbose=self.verbose,
        )

    @classmethod
    def from_dict(cls, d: dict) -> "NewtonOptions":
        # Unknown keys fail here with a TypeError
        return cls(**d)

    @classmethod
    def to_yaml(cls, representer, node):
        return representer.represent_dict(node.to_dict())

    def dump(self, file):
        p = Path(file)
        yaml.dump(self, p)

    @classmethod
    def load(cls, file) -> "NewtonOptions":
        p = Path(file)
        y = yaml.load(p)
        if y is None:  # Empty file, all defaults
            return cls()
        return cls.from_dict({str(k): v for k, v in y.items()})
