"""
Hypergeometric distribution family implementation.

Contains the Hypergeometric family with the population/successes/sample
parametrization and the :class:`HypergeometricDistribution` convenience class.

Notes
-----
Each parameter is validated on its own: the population size must be
positive, the number of successes and the sample size non-negative. A number
of successes or a sample size larger than the population size is accepted
(the support is then empty and every probability mass is 0) and reported
with a ``UserWarning`` rather than rejected.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from numbers import Integral
from typing import TYPE_CHECKING, cast

from exactdist.distributions.support import BoundedIntegerSupport
from exactdist.families.distribution import ParametricFamilyDistribution
from exactdist.families.parametric_family import ParametricFamily, ParametrizedDomainHints
from exactdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from exactdist.families.registry import ParametricFamilyRegister
from exactdist.special import log_binomial_coefficient
from exactdist.types import (
    CharacteristicName,
    FamilyName,
    Number,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def hypergeometric_domain(
    population_size: int, number_of_successes: int, sample_size: int
) -> tuple[int, int]:
    """
    Exact support bounds ``(max(0, K - (N - n)), min(n, K))``.

    The lower bound exceeds the upper one when the parameters are
    inconsistent (``K > N`` or ``n > N``).
    """
    lower = max(0, number_of_successes - (population_size - sample_size))
    upper = min(sample_size, number_of_successes)
    return int(lower), int(upper)


def configure_hypergeometric_family() -> None:
    """
    Configure and register the Hypergeometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HYPERGEOMETRIC):
        return

    HYPERGEOMETRIC_DOC = """
    Hypergeometric distribution.

    Number of successes in a sample of size n drawn without replacement from
    a population of size N containing K successes.

    Probability mass function:
        P(X = k) = C(K, k) C(N - K, n - k) / C(N, n)
        for max(0, K - (N - n)) ≤ k ≤ min(n, K)

    The mass is evaluated in log space and exponentiated once, so large
    populations do not overflow.
    """

    def _domain(parameters: _Counts) -> tuple[int, int]:
        return hypergeometric_domain(
            parameters.population_size, parameters.number_of_successes, parameters.sample_size
        )

    def pmf(parameters: Parametrization, x: Number) -> float:
        """
        Probability mass function for hypergeometric distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - population_size: int (N)
            - number_of_successes: int (K)
            - sample_size: int (n)
        x : Number
            Point at which to evaluate the probability mass function

        Returns
        -------
        float
            P(X = x); 0 outside the support and for non-integer x
        """
        parameters = cast(_Counts, parameters)
        lower, upper = _domain(parameters)
        if not BoundedIntegerSupport(lower, upper).contains(x):
            return 0.0

        k = int(x)
        total = parameters.population_size
        successes = parameters.number_of_successes
        sample = parameters.sample_size
        return math.exp(
            log_binomial_coefficient(successes, k)
            + log_binomial_coefficient(total - successes, sample - k)
            - log_binomial_coefficient(total, sample)
        )

    def cdf(parameters: Parametrization, x: Number) -> float:
        """
        Cumulative distribution function for hypergeometric distribution.

        Sums the probability mass from the lower support bound up to
        floor(x). Returns 0 below the support and 1 at or above its upper
        bound.
        """
        if math.isnan(float(x)):
            return math.nan

        parameters = cast(_Counts, parameters)
        lower, upper = _domain(parameters)
        if x < lower:
            return 0.0
        if x >= upper:
            return 1.0

        support = BoundedIntegerSupport(lower, upper)
        total = math.fsum(pmf(parameters, k) for k in support.iter_leq(x))
        return min(total, 1.0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of hypergeometric distribution, n K / N."""
        parameters = cast(_Counts, parameters)
        return (
            parameters.sample_size * parameters.number_of_successes / parameters.population_size
        )

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of hypergeometric distribution; 0 for a population of one."""
        parameters = cast(_Counts, parameters)
        total = parameters.population_size
        successes = parameters.number_of_successes
        sample = parameters.sample_size
        if total == 1:
            return 0.0
        return (
            sample
            * (successes / total)
            * ((total - successes) / total)
            * ((total - sample) / (total - 1))
        )

    def _support(parameters: Parametrization) -> BoundedIntegerSupport:
        """Support of hypergeometric distribution"""
        lower, upper = _domain(cast(_Counts, parameters))
        return BoundedIntegerSupport(lower, upper)

    def lower_bound(parameters: Parametrization, p: float) -> float:
        return _domain(cast(_Counts, parameters))[0]

    def upper_bound(parameters: Parametrization, p: float) -> float:
        return _domain(cast(_Counts, parameters))[1]

    def initial_guess(parameters: Parametrization, p: float) -> float:
        """Mean rounded to the nearest integer, clamped into the support."""
        lower, upper = _domain(cast(_Counts, parameters))
        guess = round(mean_func(parameters, None))
        return min(max(guess, lower), upper)

    Hypergeometric = ParametricFamily(
        name=FamilyName.HYPERGEOMETRIC,
        distr_type=UnivariateDiscrete,
        parametrization_name="counts",
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        domain_hints=ParametrizedDomainHints(
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            initial_guess=initial_guess,
        ),
    )
    Hypergeometric.__doc__ = HYPERGEOMETRIC_DOC

    @parametrization(family=Hypergeometric, name="counts")
    class _Counts(Parametrization):
        """
        Counts parametrization of hypergeometric distribution.

        Parameters
        ----------
        population_size : int
            Population size (N)
        number_of_successes : int
            Number of successes in the population (K)
        sample_size : int
            Sample size (n)
        """

        population_size: int
        number_of_successes: int
        sample_size: int

        @constraint(description="population_size is an integer > 0")
        def check_population_size(self) -> bool:
            """Check that the population size is a positive integer."""
            return _is_integer(self.population_size) and self.population_size > 0

        @constraint(description="number_of_successes is an integer >= 0")
        def check_number_of_successes(self) -> bool:
            """Check that the number of successes is a non-negative integer."""
            return _is_integer(self.number_of_successes) and self.number_of_successes >= 0

        @constraint(description="sample_size is an integer >= 0")
        def check_sample_size(self) -> bool:
            """Check that the sample size is a non-negative integer."""
            return _is_integer(self.sample_size) and self.sample_size >= 0

        def consistency_warnings(self) -> list[str]:
            messages = []
            if self.number_of_successes > self.population_size:
                messages.append(
                    f"number_of_successes ({self.number_of_successes}) exceeds "
                    f"population_size ({self.population_size}); the support is empty."
                )
            if self.sample_size > self.population_size:
                messages.append(
                    f"sample_size ({self.sample_size}) exceeds "
                    f"population_size ({self.population_size}); the support is empty."
                )
            return messages

    ParametricFamilyRegister.register(Hypergeometric)


class HypergeometricDistribution(ParametricFamilyDistribution):
    """
    Hypergeometric distribution with mutable counts.

    Parameters
    ----------
    population_size : int
        Population size N, positive.
    number_of_successes : int
        Number of successes K in the population, non-negative.
    sample_size : int
        Sample size n, non-negative.

    Raises
    ------
    InvalidParameterError
        If a count violates its constraint, on construction or assignment.

    Notes
    -----
    No cross-parameter check is made; see the module notes.

    Examples
    --------
    >>> dist = HypergeometricDistribution(10, 5, 5)
    >>> round(dist.probability(3), 10)
    0.3968253968
    """

    __slots__ = ()

    def __init__(self, population_size: int, number_of_successes: int, sample_size: int) -> None:
        from exactdist.families.configuration import configure_families_register

        family = configure_families_register().get(FamilyName.HYPERGEOMETRIC)
        super().__init__(
            family,
            family.create_parameters(
                population_size=population_size,
                number_of_successes=number_of_successes,
                sample_size=sample_size,
            ),
        )

    @property
    def population_size(self) -> int:
        return cast(int, self.parameters.parameters["population_size"])

    @population_size.setter
    def population_size(self, value: int) -> None:
        self.update_parameters(population_size=value)

    @property
    def number_of_successes(self) -> int:
        return cast(int, self.parameters.parameters["number_of_successes"])

    @number_of_successes.setter
    def number_of_successes(self, value: int) -> None:
        self.update_parameters(number_of_successes=value)

    @property
    def sample_size(self) -> int:
        return cast(int, self.parameters.parameters["sample_size"])

    @sample_size.setter
    def sample_size(self, value: int) -> None:
        self.update_parameters(sample_size=value)

    @property
    def lower_domain(self) -> int:
        """Smallest value with positive probability mass."""
        return hypergeometric_domain(self.population_size, self.number_of_successes, self.sample_size)[0]

    @property
    def upper_domain(self) -> int:
        """Largest value with positive probability mass."""
        return hypergeometric_domain(self.population_size, self.number_of_successes, self.sample_size)[1]
