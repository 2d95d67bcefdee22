"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.

Notes
-----
Instances are mutable: :meth:`ParametricFamilyDistribution.update_parameters`
swaps in a new validated parametrization object. Every query reads the
current parameters at call time and nothing is cached, so concurrent
read-only queries are safe; mutating a distribution while another thread
queries it needs external synchronization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import os
import warnings
from typing import TYPE_CHECKING

from exactdist.distributions.computation import FittedComputationMethod
from exactdist.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from exactdist.distributions.computation import AnalyticalComputation, Method
    from exactdist.distributions.support import Support
    from exactdist.families.parametric_family import ParametricFamily, ParametrizedDomainHints
    from exactdist.families.parametrizations import Parametrization
    from exactdist.types import (
        DistributionType,
        GenericCharacteristicName,
        Number,
    )

# Warnings are attributed to the first frame outside the package
_PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _warn_inconsistent(parameters: Parametrization) -> None:
    for message in parameters.consistency_warnings():
        warnings.warn(message, UserWarning, skip_file_prefixes=(_PACKAGE_ROOT,))


class ParametricFamilyDistribution:
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to.
    parameters : Parametrization
        Validated parameter values for this distribution.
    """

    __slots__ = ("_family", "_parameters")

    def __init__(self, family: ParametricFamily, parameters: Parametrization) -> None:
        self._family = family
        self._parameters = parameters
        _warn_inconsistent(parameters)

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self._parameters.parameters.items())
        return f"{type(self).__name__}({values})"

    @property
    def family(self) -> ParametricFamily:
        """Get the parametric family this distribution belongs to."""
        return self._family

    @property
    def family_name(self) -> str:
        """Get the name of the family."""
        return self._family.name

    @property
    def parameters(self) -> Parametrization:
        """Get the current parameters."""
        return self._parameters

    @property
    def parametrization_name(self) -> str:
        """Get the name of the parametrization the parameters are expressed in."""
        return self._parameters.name

    def update_parameters(self, **changes: Any) -> None:
        """
        Change some parameters in place.

        Only the changed values need to satisfy their constraints; other
        parameters are left as they are.

        Raises
        ------
        InvalidParameterError
            If a new value violates its constraint. The distribution is left
            unchanged.
        """
        self._parameters = self._parameters.replace(**changes)
        _warn_inconsistent(self._parameters)

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._family.distribution_type_of(self._parameters)

    @property
    def support(self) -> Support | None:
        """Get the support for the current parameters."""
        return self._family.support_of(self._parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Analytical computations bound to the current parameters."""
        return self._family.build_analytical_computations(self._parameters)

    def query_method(self, characteristic_name: GenericCharacteristicName) -> Method[Any, Any]:
        """
        Resolve a callable for ``characteristic_name``.

        Only the requested characteristic is bound to the current parameters.
        A ``ppf`` without closed form is derived from ``cdf`` by the family's
        bracketing solver.

        Raises
        ------
        RuntimeError
            If the characteristic is neither analytical nor derivable.
        """
        analytical = self._family.analytical_computation(characteristic_name, self._parameters)
        if analytical is not None:
            return analytical

        if (
            characteristic_name == CharacteristicName.PPF
            and CharacteristicName.CDF in self._family.distr_characteristics
            and self._family.domain_hints is not None
        ):
            return FittedComputationMethod(
                target=CharacteristicName.PPF,
                sources=[CharacteristicName.CDF],
                func=self._solve_quantile,
            )

        raise RuntimeError(
            f"Family '{self.family_name}' provides no computation for '{characteristic_name}'."
        )

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        """Evaluate ``characteristic_name`` at ``value``."""
        return self.query_method(characteristic_name)(value, **options)

    # ------------------------------------------------------------------ #
    # Query surface
    # ------------------------------------------------------------------ #

    def cumulative_probability(self, x: Number) -> float:
        """``P(X <= x)``; ``0`` or ``1`` outside the support."""
        return float(self.calculate_characteristic(CharacteristicName.CDF, x))

    def probability(self, x: Number) -> float:
        """``P(X = x)`` for discrete families; ``0`` outside the support."""
        return float(self.calculate_characteristic(CharacteristicName.PMF, x))

    def density(self, x: float) -> float:
        """Probability density at ``x`` for continuous families."""
        return float(self.calculate_characteristic(CharacteristicName.PDF, x))

    def inverse_cumulative_probability(self, p: float) -> float:
        """
        Smallest domain value ``x`` with ``P(X <= x) >= p``.

        Raises
        ------
        OutOfRangeError
            If ``p`` is not in ``(0, 1)``.
        ConvergenceError
            If the solver does not converge.
        """
        return self.calculate_characteristic(CharacteristicName.PPF, p)

    @property
    def mean(self) -> float:
        """Expected value (``nan`` where undefined)."""
        return float(self.calculate_characteristic(CharacteristicName.MEAN, None))

    @property
    def variance(self) -> float:
        """Variance (``nan`` where undefined)."""
        return float(self.calculate_characteristic(CharacteristicName.VAR, None))

    # ------------------------------------------------------------------ #
    # Domain hints
    # ------------------------------------------------------------------ #

    def _hints(self) -> ParametrizedDomainHints:
        hints = self._family.domain_hints
        if hints is None:
            raise RuntimeError(f"Family '{self.family_name}' provides no domain hints.")
        return hints

    def domain_lower_bound(self, p: float) -> float:
        return self._hints().lower_bound(self._parameters, p)

    def domain_upper_bound(self, p: float) -> float:
        return self._hints().upper_bound(self._parameters, p)

    def initial_domain_guess(self, p: float) -> float:
        return self._hints().initial_guess(self._parameters, p)

    def _solve_quantile(self, p: float, **_: Any) -> float:
        return self._family.solver.solve(self, p)


__all__ = [
    "ParametricFamilyDistribution",
]
