"""
Error Taxonomy
==============

Exceptions raised by distribution construction, parameter mutation and
quantile inversion.

- :class:`InvalidParameterError`: a parameter violates its constraint.
- :class:`OutOfRangeError`: a probability to invert lies outside ``(0, 1)``.
- :class:`ConvergenceError`: an iterative computation exhausted its budget.

Each error also derives from the built-in exception the operation would
otherwise raise, so ``except ValueError`` and ``except RuntimeError`` keep
working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(Exception):
    """Base class for all exactdist errors."""


class InvalidParameterError(DistributionError, ValueError):
    """
    Raised when a distribution parameter violates its constraint.

    Raised on construction and on every parameter mutation. Values are never
    clamped.
    """


class OutOfRangeError(DistributionError, ValueError):
    """Raised when a cumulative probability to invert is not in ``(0, 1)``."""


class ConvergenceError(DistributionError, RuntimeError):
    """
    Raised when an iterative computation does not converge.

    Covers the bracketing solver exhausting its iteration budget or receiving
    hints that do not bracket the root, and special-function series or
    continued fractions that fail to converge.
    """


__all__ = [
    "DistributionError",
    "InvalidParameterError",
    "OutOfRangeError",
    "ConvergenceError",
]
