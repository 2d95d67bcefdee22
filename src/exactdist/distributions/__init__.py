"""
Distributions subpackage

Interfaces and generic algorithms for probability distributions:

- distribution protocols (:mod:`.distribution`);
- domain-hint contract (:mod:`.domain`);
- bracketing inverse-CDF solver (:mod:`.solver`);
- computation primitives (:mod:`.computation`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import (
    AnalyticalComputation,
    Computation,
    FittedComputationMethod,
)
from .distribution import ContinuousDistribution, DiscreteDistribution, Distribution
from .domain import BracketableDistribution, DomainHints
from .solver import (
    DEFAULT_SOLVER,
    BracketingSolver,
    check_probability,
    inverse_cumulative_probability,
)
from .support import BoundedIntegerSupport, ContinuousSupport, DiscreteSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    # domain hints and solver
    "DomainHints",
    "BracketableDistribution",
    "BracketingSolver",
    "DEFAULT_SOLVER",
    "check_probability",
    "inverse_cumulative_probability",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "BoundedIntegerSupport",
]
