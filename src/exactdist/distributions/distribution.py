"""
Distribution Interfaces
=======================

This module defines the public query contract shared by all distributions:

- :class:`Distribution` protocol – cumulative probability and its inverse.
- :class:`ContinuousDistribution` – adds the probability density.
- :class:`DiscreteDistribution` – adds the probability mass.

Notes
-----
- All queries are scalar (``float -> float``); vectorization, if needed, is
  handled by the caller.
- Evaluation outside the support never fails: densities and masses are ``0``
  there, and the cumulative probability is ``0`` or ``1``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from exactdist.distributions.support import Support
    from exactdist.types import DistributionType, Number


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by the solver and by callers."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support | None: ...

    def cumulative_probability(self, x: Number) -> float: ...

    def inverse_cumulative_probability(self, p: float) -> float: ...


@runtime_checkable
class ContinuousDistribution(Distribution, Protocol):
    def density(self, x: float) -> float: ...


@runtime_checkable
class DiscreteDistribution(Distribution, Protocol):
    def probability(self, x: Number) -> float: ...
