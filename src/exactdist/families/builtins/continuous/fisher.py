"""
F (Fisher–Snedecor) distribution family implementation.

Contains the F family with the degrees-of-freedom parametrization and the
:class:`FDistribution` convenience class.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from typing import TYPE_CHECKING, cast

from exactdist.distributions.support import ContinuousSupport
from exactdist.families.distribution import ParametricFamilyDistribution
from exactdist.families.parametric_family import ParametricFamily, ParametrizedDomainHints
from exactdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from exactdist.families.registry import ParametricFamilyRegister
from exactdist.special import log_beta, regularized_beta
from exactdist.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_f_family() -> None:
    """
    Configure and register the F distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.F):
        return

    F_DOC = """
    F (Fisher–Snedecor) distribution.

    The distribution of the ratio of two independent chi-square variables,
    each divided by its degrees of freedom. Parameters are the numerator
    degrees of freedom n and the denominator degrees of freedom m.

    Cumulative distribution function:
        F(x) = I_{n x / (m + n x)}(n/2, m/2) for x > 0

    where I is the regularized incomplete beta function. Quantiles are found
    by bracketing the CDF, starting from the mean m / (m - 2).
    """

    def cdf(parameters: Parametrization, x: float) -> float:
        """
        Cumulative distribution function for F distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - numerator_degrees_of_freedom: float
            - denominator_degrees_of_freedom: float
        x : float
            Point at which to evaluate the cumulative distribution function

        Returns
        -------
        float
            Probability P(X ≤ x); exactly 0 for x ≤ 0

        Raises
        ------
        ConvergenceError
            If the incomplete beta continued fraction does not converge
        """
        if x <= 0.0:
            return 0.0

        parameters = cast(_DegreesOfFreedom, parameters)
        n = parameters.numerator_degrees_of_freedom
        m = parameters.denominator_degrees_of_freedom

        nx = n * x
        if math.isinf(nx):
            return 1.0
        # Equal to nx / (m + nx) without overflowing m + nx
        y = 1.0 / (1.0 + m / nx) if nx > m else nx / (m + nx)
        return regularized_beta(y, 0.5 * n, 0.5 * m)

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for F distribution.

        Evaluated in log space. At x = 0 the right-hand limit is returned:
        inf for n < 2, 1 for n = 2 and 0 for n > 2.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        n = parameters.numerator_degrees_of_freedom
        m = parameters.denominator_degrees_of_freedom

        if x < 0.0 or math.isinf(x):
            return 0.0
        if x == 0.0:
            if n < 2.0:
                return math.inf
            return 1.0 if n == 2.0 else 0.0

        log_pdf = (
            0.5 * n * math.log(n / m)
            + (0.5 * n - 1.0) * math.log(x)
            - 0.5 * (n + m) * math.log1p(n * x / m)
            - log_beta(0.5 * n, 0.5 * m)
        )
        return math.exp(log_pdf)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of F distribution; nan for m ≤ 2."""
        parameters = cast(_DegreesOfFreedom, parameters)
        m = parameters.denominator_degrees_of_freedom
        if m <= 2.0:
            return math.nan
        return m / (m - 2.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of F distribution; nan for m ≤ 4."""
        parameters = cast(_DegreesOfFreedom, parameters)
        n = parameters.numerator_degrees_of_freedom
        m = parameters.denominator_degrees_of_freedom
        if m <= 4.0:
            return math.nan
        return 2.0 * m * m * (n + m - 2.0) / (n * (m - 2.0) ** 2 * (m - 4.0))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of F distribution"""
        return ContinuousSupport(left=0.0)

    def lower_bound(_: Parametrization, p: float) -> float:
        return 0.0

    def upper_bound(_: Parametrization, p: float) -> float:
        return sys.float_info.max

    def initial_guess(parameters: Parametrization, p: float) -> float:
        """Mean m / (m - 2); negative for m < 2 and inf for m = 2."""
        parameters = cast(_DegreesOfFreedom, parameters)
        m = parameters.denominator_degrees_of_freedom
        denominator = m - 2.0
        if denominator == 0.0:
            return math.inf
        return m / denominator

    F = ParametricFamily(
        name=FamilyName.F,
        distr_type=UnivariateContinuous,
        parametrization_name="degreesOfFreedom",
        distr_characteristics={
            CharacteristicName.PDF: pdf,
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
    F.__doc__ = F_DOC

    @parametrization(family=F, name="degreesOfFreedom")
    class _DegreesOfFreedom(Parametrization):
        """
        Degrees-of-freedom parametrization of F distribution.

        Parameters
        ----------
        numerator_degrees_of_freedom : float
            Numerator degrees of freedom (n)
        denominator_degrees_of_freedom : float
            Denominator degrees of freedom (m)
        """

        numerator_degrees_of_freedom: float
        denominator_degrees_of_freedom: float

        @constraint(description="numerator_degrees_of_freedom > 0")
        def check_numerator_positive(self) -> bool:
            """Check that numerator degrees of freedom are positive."""
            return self.numerator_degrees_of_freedom > 0

        @constraint(description="denominator_degrees_of_freedom > 0")
        def check_denominator_positive(self) -> bool:
            """Check that denominator degrees of freedom are positive."""
            return self.denominator_degrees_of_freedom > 0

    ParametricFamilyRegister.register(F)


class FDistribution(ParametricFamilyDistribution):
    """
    F distribution with mutable degrees of freedom.

    Parameters
    ----------
    numerator_degrees_of_freedom : float
        Numerator degrees of freedom, strictly positive.
    denominator_degrees_of_freedom : float
        Denominator degrees of freedom, strictly positive.

    Raises
    ------
    InvalidParameterError
        If either degrees of freedom is not positive, on construction or
        assignment.

    Examples
    --------
    >>> dist = FDistribution(5.0, 5.0)
    >>> round(dist.cumulative_probability(1.0), 12)
    0.5
    """

    __slots__ = ()

    def __init__(
        self, numerator_degrees_of_freedom: float, denominator_degrees_of_freedom: float
    ) -> None:
        from exactdist.families.configuration import configure_families_register

        family = configure_families_register().get(FamilyName.F)
        super().__init__(
            family,
            family.create_parameters(
                numerator_degrees_of_freedom=numerator_degrees_of_freedom,
                denominator_degrees_of_freedom=denominator_degrees_of_freedom,
            ),
        )

    @property
    def numerator_degrees_of_freedom(self) -> float:
        return cast(float, self.parameters.parameters["numerator_degrees_of_freedom"])

    @numerator_degrees_of_freedom.setter
    def numerator_degrees_of_freedom(self, value: float) -> None:
        self.update_parameters(numerator_degrees_of_freedom=value)

    @property
    def denominator_degrees_of_freedom(self) -> float:
        return cast(float, self.parameters.parameters["denominator_degrees_of_freedom"])

    @denominator_degrees_of_freedom.setter
    def denominator_degrees_of_freedom(self, value: float) -> None:
        self.update_parameters(denominator_degrees_of_freedom=value)
