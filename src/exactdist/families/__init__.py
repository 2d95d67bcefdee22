"""
Parametric Families module for working with statistical distribution families.

This package provides the framework for defining and registering parametric
families together with the built-in F and Hypergeometric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import FDistribution, HypergeometricDistribution
from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricFamilyDistribution
from .parametric_family import ParametricFamily, ParametrizedDomainHints
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "ParametrizedDomainHints",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    "FDistribution",
    "HypergeometricDistribution",
]
