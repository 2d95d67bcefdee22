"""
exactdist
=========

Exact cumulative and inverse-cumulative computations for the F and
Hypergeometric distributions, built on a regularized incomplete beta
function, log-space binomial coefficients and a bracketing root solver.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .special import *
from .special import __all__ as _special_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("exactdist")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_special_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _special_all
del _types_all
