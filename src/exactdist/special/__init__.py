"""
Special-function primitives.

Stateless numeric kernels the distributions are built on:

- regularized incomplete beta function and log beta (:mod:`.beta`);
- exact and log-space binomial coefficients (:mod:`.combinatorics`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .beta import log_beta, regularized_beta
from .combinatorics import binomial_coefficient, log_binomial_coefficient

__all__ = [
    "regularized_beta",
    "log_beta",
    "binomial_coefficient",
    "log_binomial_coefficient",
]
