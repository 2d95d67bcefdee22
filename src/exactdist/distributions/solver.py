"""
Bracketing Solver
=================

Generic inverse CDF for any distribution implementing
:class:`~exactdist.distributions.domain.BracketableDistribution`.

For a target ``p`` in ``(0, 1)`` the solver returns the smallest domain value
``x`` with ``CDF(x) >= p``:

1. Read the bracket ``[lo, hi]`` from the distribution's domain hints. If
   ``CDF(lo) >= p`` the answer is ``lo``; if ``CDF(hi) < p`` the hints do not
   bracket the root and :class:`~exactdist.errors.ConvergenceError` is raised.
2. Start at the distribution's initial guess (or a fallback inside the
   bracket when the guess is unusable) and grow a sub-bracket geometrically
   until it contains the root.
3. Bisect while keeping ``CDF(L) < p <= CDF(R)``. Brackets spanning several
   orders of magnitude are split geometrically (and brackets ending at zero
   by a fixed factor), so quantiles near zero are resolved to full relative
   precision rather than to a fixed absolute width.

Continuous distributions are searched on the real line, discrete ones on the
integers; the distribution kind is read from its type.

Notes
-----
The CDF is never evaluated outside ``[lo, hi]``. Both phases have fixed
iteration caps, so a pathological or non-monotone CDF ends in
:class:`~exactdist.errors.ConvergenceError` rather than a loop.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from dataclasses import dataclass
from math import isfinite, isnan, sqrt
from typing import TYPE_CHECKING

from exactdist.errors import ConvergenceError, OutOfRangeError
from exactdist.types import Kind

if TYPE_CHECKING:
    from exactdist.distributions.domain import BracketableDistribution
    from exactdist.types import ScalarFunc


_ZERO_SPLIT = 2.0**-10
_GEOMETRIC_RATIO = 4.0


def check_probability(p: float) -> None:
    """
    Ensure ``p`` is a cumulative probability that can be inverted.

    Raises
    ------
    OutOfRangeError
        If ``p`` is not in the open interval ``(0, 1)`` (NaN included).
    """
    if not (0.0 < p < 1.0):
        raise OutOfRangeError(f"Cumulative probability must be in (0, 1), got {p}")


@dataclass(frozen=True, slots=True)
class BracketingSolver:
    """
    Bisection-based CDF inversion with bracket expansion.

    Parameters
    ----------
    absolute_accuracy : float, default sys.float_info.min
        Absolute bracket width at which the search stops. The default only
        matters for roots at zero; all other roots stop on the relative width.
    relative_accuracy : float, default 1e-14
        Bracket width, relative to the bracket magnitude, at which the search stops.
    function_value_accuracy : float, default 0.0
        Stop early when ``|CDF(x) - p|`` falls to this value. Any positive
        value bounds the error in ``p`` absolutely, which costs relative
        accuracy for small ``p``.
    initial_step : float, default 1.0
        First step used to grow the bracket away from the initial guess.
    expand_factor : float, default 2.0
        Multiplicative factor for geometric bracket growth.
    max_expansions : int, default 1100
        Maximum bracket growth steps. The default lets a unit step reach the
        largest finite double.
    max_iterations : int, default 500
        Maximum bisection steps.

    Raises
    ------
    ValueError
        If a setting is out of its admissible range.
    """

    absolute_accuracy: float = sys.float_info.min
    relative_accuracy: float = 1e-14
    function_value_accuracy: float = 0.0
    initial_step: float = 1.0
    expand_factor: float = 2.0
    max_expansions: int = 1100
    max_iterations: int = 500

    def __post_init__(self) -> None:
        if not (self.absolute_accuracy >= 0.0 and self.relative_accuracy >= 0.0):
            raise ValueError("accuracies must be non-negative.")
        if not self.function_value_accuracy >= 0.0:
            raise ValueError("function_value_accuracy must be non-negative.")
        if not self.initial_step > 0.0:
            raise ValueError("initial_step must be positive.")
        if not self.expand_factor > 1.0:
            raise ValueError("expand_factor must be greater than 1.")
        if self.max_expansions <= 0 or self.max_iterations <= 0:
            raise ValueError("iteration limits must be positive integers.")

    def solve(self, distribution: BracketableDistribution, p: float) -> float:
        """
        Smallest domain value whose cumulative probability is at least ``p``.

        Parameters
        ----------
        distribution : BracketableDistribution
            Distribution providing ``cumulative_probability`` and domain hints.
        p : float
            Target cumulative probability in ``(0, 1)``.

        Returns
        -------
        float
            The quantile; an ``int`` for discrete distributions.

        Raises
        ------
        OutOfRangeError
            If ``p`` is not in ``(0, 1)``.
        ConvergenceError
            If the hints do not bracket ``p`` or an iteration cap is exceeded.
        """
        check_probability(p)

        def objective(x: float) -> float:
            value = float(distribution.cumulative_probability(x)) - p
            if isnan(value):
                raise ConvergenceError(f"Cumulative probability is undefined at x={x}.")
            return value

        if distribution.distribution_type.features.get("kind") == Kind.DISCRETE:
            return self._solve_discrete(distribution, objective, p)
        return self._solve_continuous(distribution, objective, p)

    # ------------------------------------------------------------------ #
    # Continuous search
    # ------------------------------------------------------------------ #

    def _solve_continuous(
        self, distribution: BracketableDistribution, f: ScalarFunc, p: float
    ) -> float:
        lower = float(distribution.domain_lower_bound(p))
        upper = float(distribution.domain_upper_bound(p))

        if not lower < upper:
            return lower
        if f(lower) >= 0.0:
            return lower
        if f(upper) < 0.0:
            raise ConvergenceError(
                f"Domain bounds [{lower}, {upper}] do not bracket cumulative probability {p}."
            )

        guess = self._starting_point(float(distribution.initial_domain_guess(p)), lower, upper)
        left, right = self._expand(f, guess, lower, upper)
        return self._bisect(f, left, right)

    @staticmethod
    def _starting_point(guess: float, lower: float, upper: float) -> float:
        if isfinite(guess) and lower < guess < upper:
            return guess
        if isfinite(lower) and isfinite(upper):
            return min(lower + 1.0, 0.5 * lower + 0.5 * upper)
        if isfinite(lower):
            return lower + 1.0
        if isfinite(upper):
            return upper - 1.0
        return 0.0

    def _expand(self, f: ScalarFunc, guess: float, lower: float, upper: float) -> tuple[float, float]:
        # f(lower) < 0 <= f(upper) holds on entry
        step = self.initial_step

        if f(guess) >= 0.0:
            right = guess
            for _ in range(self.max_expansions):
                left = max(right - step, lower)
                if left <= lower:
                    return lower, right
                if f(left) < 0.0:
                    return left, right
                right = left
                step *= self.expand_factor
        else:
            left = guess
            for _ in range(self.max_expansions):
                right = min(left + step, upper)
                if right >= upper:
                    return left, upper
                if f(right) >= 0.0:
                    return left, right
                left = right
                step *= self.expand_factor

        raise ConvergenceError(
            f"Could not bracket the root within {self.max_expansions} expansions."
        )

    def _bisect(self, f: ScalarFunc, left: float, right: float) -> float:
        if not (isfinite(left) and isfinite(right)):
            raise ConvergenceError(f"Cannot bisect the unbounded bracket [{left}, {right}].")

        for _ in range(self.max_iterations):
            tolerance = max(
                self.absolute_accuracy, self.relative_accuracy * max(abs(left), abs(right))
            )
            if right - left <= tolerance:
                return right

            middle = _split(left, right)
            if middle <= left or middle >= right:
                return right

            value = f(middle)
            if abs(value) <= self.function_value_accuracy:
                return middle
            if value >= 0.0:
                right = middle
            else:
                left = middle

        raise ConvergenceError(
            f"Bisection did not converge in {self.max_iterations} iterations "
            f"(last bracket [{left}, {right}])."
        )

    # ------------------------------------------------------------------ #
    # Discrete search
    # ------------------------------------------------------------------ #

    def _solve_discrete(
        self, distribution: BracketableDistribution, f: ScalarFunc, p: float
    ) -> int:
        lower = int(distribution.domain_lower_bound(p))
        upper = int(distribution.domain_upper_bound(p))

        if upper <= lower:
            return lower
        if f(lower) >= 0.0:
            return lower
        if f(upper) < 0.0:
            raise ConvergenceError(
                f"Domain bounds [{lower}, {upper}] do not bracket cumulative probability {p}."
            )
        if f(upper - 1) < 0.0:
            return upper

        # f(left) < 0 <= f(right)
        left, right = lower, upper - 1

        guess = float(distribution.initial_domain_guess(p))
        if isfinite(guess):
            point = int(round(guess))
            if left < point < right:
                if f(point) >= 0.0:
                    right = point
                else:
                    left = point

        for _ in range(self.max_iterations):
            if right - left <= 1:
                return right
            middle = (left + right) // 2
            if f(middle) >= 0.0:
                right = middle
            else:
                left = middle

        raise ConvergenceError(
            f"Integer bisection did not converge in {self.max_iterations} iterations "
            f"(last bracket [{left}, {right}])."
        )


def _split(left: float, right: float) -> float:
    # interior point of a bracket; geometric when the ends differ in magnitude
    if left < 0.0 < right:
        return 0.0
    if left == 0.0:
        return right * _ZERO_SPLIT
    if right == 0.0:
        return left * _ZERO_SPLIT
    if left > 0.0 and right > _GEOMETRIC_RATIO * left:
        return sqrt(left) * sqrt(right)
    if right < 0.0 and left < _GEOMETRIC_RATIO * right:
        return -(sqrt(-left) * sqrt(-right))
    return 0.5 * left + 0.5 * right


DEFAULT_SOLVER = BracketingSolver()
"""Solver used by families that do not configure their own."""


def inverse_cumulative_probability(
    distribution: BracketableDistribution,
    p: float,
    solver: BracketingSolver | None = None,
) -> float:
    """
    Invert ``distribution``'s CDF at ``p`` with ``solver`` (default settings if omitted).

    See :meth:`BracketingSolver.solve`.
    """
    return (DEFAULT_SOLVER if solver is None else solver).solve(distribution, p)


__all__ = [
    "BracketingSolver",
    "DEFAULT_SOLVER",
    "check_probability",
    "inverse_cumulative_probability",
]
