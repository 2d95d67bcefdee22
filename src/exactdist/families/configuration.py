"""
Distribution Families Configuration
====================================

This module configures the built-in parametric families:

- F (Fisher–Snedecor): continuous, CDF through the regularized incomplete beta.
- Hypergeometric: discrete, PMF through log-space binomial coefficients.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Quantiles without a closed form are obtained from the family's bracketing
  solver and domain hints.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from exactdist.families.builtins import (
    configure_f_family,
    configure_hypergeometric_family,
)
from exactdist.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_f_family()
    configure_hypergeometric_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
