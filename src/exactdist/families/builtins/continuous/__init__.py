"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from exactdist.families.builtins.continuous.fisher import FDistribution, configure_f_family

__all__ = [
    "configure_f_family",
    "FDistribution",
]
