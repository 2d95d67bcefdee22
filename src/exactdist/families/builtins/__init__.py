"""
Built-in distribution families for exactdist.

This package contains the parametric families that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from exactdist.families.builtins.continuous import FDistribution, configure_f_family
from exactdist.families.builtins.discrete import (
    HypergeometricDistribution,
    configure_hypergeometric_family,
)

__all__ = [
    "configure_f_family",
    "configure_hypergeometric_family",
    "FDistribution",
    "HypergeometricDistribution",
]
