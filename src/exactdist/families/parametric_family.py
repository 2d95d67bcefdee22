"""
Parametric families of distributions.

A :class:`ParametricFamily` ties together everything a distribution of a given
shape needs, independently of concrete parameter values:

- the name of its parametrization and, once decorated, its class;
- analytical characteristics written against those parameters, e.g.
  ``cdf(params, x)``;
- the support for given parameters;
- :class:`ParametrizedDomainHints` and a :class:`BracketingSolver` for
  quantiles that have no closed form.

Calling a family with parameter values returns a
:class:`~exactdist.families.distribution.ParametricFamilyDistribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from exactdist.distributions.computation import AnalyticalComputation
from exactdist.distributions.solver import DEFAULT_SOLVER
from exactdist.families.distribution import ParametricFamilyDistribution
from exactdist.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from exactdist.distributions.solver import BracketingSolver
    from exactdist.distributions.support import Support
    from exactdist.families.parametrizations import Parametrization
    from exactdist.types import GenericCharacteristicName, ParametrizationName

    type Characteristic = Callable[..., Any]
    type Hint = Callable[[Parametrization, float], float]
    type SupportResolver = Callable[[Parametrization], Support | None]
    type TypeResolver = Callable[[Parametrization], DistributionType]


@dataclass(frozen=True, slots=True)
class ParametrizedDomainHints:
    """
    Bracketing hints of a family, written against its parameters.

    Each callable receives ``(parameters, p)``; see
    :class:`~exactdist.distributions.domain.DomainHints` for what the returned
    values mean.
    """

    lower_bound: Hint
    upper_bound: Hint
    initial_guess: Hint


class ParametricFamily:
    """
    Definition of a family of distributions (e.g. F, hypergeometric).

    Parameters
    ----------
    name : str
        Family name, also its key in the family register.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Fixed distribution type, or a function of the parameters.
    parametrization_name : ParametrizationName
        Name of the parametrization the family is written against.
    distr_characteristics : dict[str, Callable]
        Characteristic name to ``func(parameters, x, **options)``.
    support_by_parametrization : Callable or None, optional
        Support as a function of the parameters.
    domain_hints : ParametrizedDomainHints or None, optional
        Enables ``ppf`` through the bracketing solver when the family has a
        ``cdf``.
    solver : BracketingSolver, optional
        Solver settings for this family; :data:`DEFAULT_SOLVER` if omitted.

    Notes
    -----
    The parametrization class is attached afterwards with the
    :func:`~exactdist.families.parametrizations.parametrization` decorator.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | TypeResolver,
        parametrization_name: ParametrizationName,
        distr_characteristics: dict[GenericCharacteristicName, Characteristic],
        support_by_parametrization: SupportResolver | None = None,
        domain_hints: ParametrizedDomainHints | None = None,
        solver: BracketingSolver | None = None,
    ):
        self._name = name
        if isinstance(distr_type, DistributionType):
            fixed_type = distr_type
            self._type_resolver: TypeResolver = lambda _params: fixed_type
        else:
            self._type_resolver = distr_type
        self._support_resolver = support_by_parametrization

        self.parametrization_name: ParametrizationName = parametrization_name
        self._parameters_class: type[Parametrization] | None = None

        self.distr_characteristics = dict(distr_characteristics)
        self.domain_hints = domain_hints
        self.solver = solver if solver is not None else DEFAULT_SOLVER

    def __repr__(self) -> str:
        return (
            f"ParametricFamily(name={self._name!r}, "
            f"parametrization={self.parametrization_name!r})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters_class(self) -> type[Parametrization]:
        """
        The parametrization class of the family.

        Raises
        ------
        ValueError
            If no class has been registered yet.
        """
        if self._parameters_class is None:
            raise ValueError(
                f"Parametrization '{self.parametrization_name}' is not registered."
            )
        return self._parameters_class

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Attach the parametrization class declared as ``name``.

        Raises
        ------
        ValueError
            If a class is already attached or ``name`` is not the declared one.
        """
        if self._parameters_class is not None:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        if name != self.parametrization_name:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self.name}'.")
        self._parameters_class = parametrization_class

    def distribution_type_of(self, parameters: Parametrization) -> DistributionType:
        return self._type_resolver(parameters)

    def support_of(self, parameters: Parametrization) -> Support | None:
        """Support for ``parameters``; ``None`` if the family declares none."""
        if self._support_resolver is None:
            return None
        return self._support_resolver(parameters)

    def analytical_computation(
        self, characteristic: GenericCharacteristicName, parameters: Parametrization
    ) -> AnalyticalComputation[Any, Any] | None:
        """``characteristic`` bound to ``parameters``; ``None`` if the family has no formula."""
        func = self.distr_characteristics.get(characteristic)
        if func is None:
            return None
        return AnalyticalComputation(target=characteristic, func=partial(func, parameters))

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every analytical characteristic to ``parameters``."""
        return {
            name: AnalyticalComputation(target=name, func=partial(func, parameters))
            for name, func in self.distr_characteristics.items()
        }

    def create_parameters(self, **parameters_values: Any) -> Parametrization:
        """
        Instantiate and validate the family's parametrization.

        Raises
        ------
        TypeError
            If a field is missing or unknown.
        InvalidParameterError
            If a constraint does not hold.
        """
        parameters = self.parameters_class(**parameters_values)
        parameters.validate()
        return parameters

    def distribution(self, **parameters_values: Any) -> ParametricFamilyDistribution:
        """
        Create a distribution of this family.

        Accepts the same arguments as :meth:`create_parameters` and raises the
        same errors.
        """
        return ParametricFamilyDistribution(self, self.create_parameters(**parameters_values))

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Class decorator registering a parametrization of this family as ``name``."""
        from exactdist.families.parametrizations import parametrization as _register

        return _register(family=self, name=name)

    __call__ = distribution
