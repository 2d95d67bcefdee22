"""
Domain Hints
============

Capability contract a distribution implements so that the generic
:class:`~exactdist.distributions.solver.BracketingSolver` can invert its CDF.

For a target cumulative probability ``p`` the hooks return

- ``domain_lower_bound(p)`` – a point ``lo`` with ``CDF(lo) < p`` (or the left
  edge of the support, which the solver returns when ``CDF(lo) >= p``);
- ``domain_upper_bound(p)`` – a point ``hi`` with ``CDF(hi) >= p``;
- ``initial_domain_guess(p)`` – a heuristic starting point. It may be poor,
  negative or infinite; the solver replaces unusable guesses by a point
  inside ``[lo, hi]``.

The solver never evaluates the CDF outside ``[lo, hi]``. For discrete
distributions all three hooks are read as integers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from exactdist.types import DistributionType, Number


@runtime_checkable
class DomainHints(Protocol):
    """Bracket hints for inverting a CDF at ``p``."""

    def domain_lower_bound(self, p: float) -> float: ...

    def domain_upper_bound(self, p: float) -> float: ...

    def initial_domain_guess(self, p: float) -> float: ...


@runtime_checkable
class BracketableDistribution(DomainHints, Protocol):
    """What the bracketing solver needs from a distribution."""

    @property
    def distribution_type(self) -> DistributionType: ...

    def cumulative_probability(self, x: Number) -> float: ...


__all__ = [
    "DomainHints",
    "BracketableDistribution",
]
