"""
Generic Newton-Method Root Finding
"""

__version__ = '0.1.0'

# Default stopping policy for `Solver`
DEFAULT_TOL = 1e-12
DEFAULT_MAX_ITERS = 100

from .iterator import Newton, divide
from .errors import NewtonError, ConvergenceError, DivergenceError, OptionsError
from .options import NewtonOptions
from .converge import Solver, checked, find_root, explore
