from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import pytest

from exactdist.distributions.computation import AnalyticalComputation, FittedComputationMethod
from exactdist.distributions.solver import BracketingSolver
from exactdist.distributions.support import ContinuousSupport
from exactdist.errors import ConvergenceError, InvalidParameterError
from exactdist.families import (
    ParametricFamily,
    ParametricFamilyDistribution,
    Parametrization,
    ParametrizedDomainHints,
    constraint,
    parametrization,
)
from exactdist.types import CharacteristicName, UnivariateContinuous


def _cdf(parameters: Any, x: float) -> float:
    return min(max(x - parameters.shift, 0.0), 1.0)


def make_shifted_uniform(solver: BracketingSolver | None = None) -> ParametricFamily:
    """Uniform distribution on ``[shift, shift + 1]``."""
    family = ParametricFamily(
        name="ShiftedUniform",
        distr_type=UnivariateContinuous,
        parametrization_name="shift",
        distr_characteristics={CharacteristicName.CDF: _cdf},
        support_by_parametrization=lambda params: ContinuousSupport(
            left=params.shift, right=params.shift + 1.0
        ),
        domain_hints=ParametrizedDomainHints(
            lower_bound=lambda params, p: params.shift,
            upper_bound=lambda params, p: params.shift + 1.0,
            initial_guess=lambda params, p: params.shift + 0.5,
        ),
        solver=solver,
    )

    @parametrization(family=family, name="shift")
    class Shift(Parametrization):
        shift: float

        @constraint(description="shift is finite")
        def check_shift(self) -> bool:
            return abs(self.shift) < float("inf")

    return family


class TestParametricFamily:
    def test_name_and_parametrization(self) -> None:
        family = make_shifted_uniform()

        assert family.name == "ShiftedUniform"
        assert family.parametrization_name == "shift"
        assert family.parameters_class.__name__ == "Shift"
        assert repr(family) == "ParametricFamily(name='ShiftedUniform', parametrization='shift')"

    def test_parametrization_not_registered(self) -> None:
        family = ParametricFamily(
            name="Empty",
            distr_type=UnivariateContinuous,
            parametrization_name="base",
            distr_characteristics={},
        )
        with pytest.raises(ValueError, match="not registered"):
            _ = family.parameters_class
        with pytest.raises(ValueError, match="not registered"):
            family(value=1.0)

    def test_register_parametrization_errors(self) -> None:
        family = make_shifted_uniform()

        with pytest.raises(ValueError, match="already registered"):
            family.register_parametrization("shift", family.parameters_class)

        other = ParametricFamily(
            name="Other",
            distr_type=UnivariateContinuous,
            parametrization_name="base",
            distr_characteristics={},
        )
        with pytest.raises(ValueError, match="not declared"):
            other.register_parametrization("other", family.parameters_class)

    def test_family_call_creates_distribution(self) -> None:
        family = make_shifted_uniform()
        dist = family(shift=2.0)

        assert isinstance(dist, ParametricFamilyDistribution)
        assert dist.family is family
        assert dist.parametrization_name == "shift"
        assert dist.cumulative_probability(2.25) == pytest.approx(0.25)

    def test_parameters_reach_support_and_hints(self) -> None:
        dist = make_shifted_uniform().distribution(shift=-1.0)

        assert dist.cumulative_probability(-0.5) == pytest.approx(0.5)
        assert dist.domain_lower_bound(0.5) == -1.0
        assert dist.domain_upper_bound(0.5) == 0.0
        assert dist.initial_domain_guess(0.5) == -0.5
        assert dist.support == ContinuousSupport(left=-1.0, right=0.0)

    def test_constraint_violation(self) -> None:
        family = make_shifted_uniform()
        with pytest.raises(InvalidParameterError, match="shift is finite"):
            family(shift=float("inf"))

    def test_unknown_field(self) -> None:
        family = make_shifted_uniform()
        with pytest.raises(TypeError):
            family.distribution(scale=1.0)

    def test_support_absent(self) -> None:
        family = ParametricFamily(
            name="NoSupport",
            distr_type=UnivariateContinuous,
            parametrization_name="base",
            distr_characteristics={},
        )

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

        assert family(value=1.0).support is None


class TestDistributionQueries:
    def test_ppf_derived_from_cdf(self) -> None:
        dist = make_shifted_uniform()(shift=3.0)

        assert dist.inverse_cumulative_probability(0.25) == pytest.approx(3.25, abs=1e-11)
        ppf = dist.query_method(CharacteristicName.PPF)
        assert ppf(0.75) == pytest.approx(3.75, abs=1e-11)

    def test_ppf_method_is_plain_fitted_computation(self) -> None:
        ppf = make_shifted_uniform()(shift=0.0).query_method(CharacteristicName.PPF)

        assert type(ppf) is FittedComputationMethod
        assert ppf.target == CharacteristicName.PPF
        assert list(ppf.sources) == [CharacteristicName.CDF]
        assert not hasattr(ppf, "__orig_class__")

    def test_query_binds_only_requested_characteristic(self, monkeypatch) -> None:
        family = make_shifted_uniform()
        family.distr_characteristics[CharacteristicName.MEAN] = lambda params, _: params.shift
        dist = family(shift=1.0)

        def fail(*args: Any, **kwargs: Any) -> Any:
            raise AssertionError("all characteristics were bound for a single query")

        monkeypatch.setattr(family, "build_analytical_computations", fail)

        cdf = dist.query_method(CharacteristicName.CDF)
        assert isinstance(cdf, AnalyticalComputation)
        assert cdf.target == CharacteristicName.CDF
        assert dist.cumulative_probability(1.5) == pytest.approx(0.5)
        assert dist.mean == pytest.approx(1.0)
        assert dist.inverse_cumulative_probability(0.5) == pytest.approx(1.5)

    def test_analytical_computations_cover_every_characteristic(self) -> None:
        computations = make_shifted_uniform()(shift=0.0).analytical_computations
        assert set(computations) == {CharacteristicName.CDF}
        assert computations[CharacteristicName.CDF](0.25) == pytest.approx(0.25)

    def test_family_solver_is_used(self) -> None:
        dist = make_shifted_uniform(BracketingSolver(max_iterations=2))(shift=0.0)

        with pytest.raises(ConvergenceError):
            dist.inverse_cumulative_probability(0.3)

    def test_missing_characteristic(self) -> None:
        dist = make_shifted_uniform()(shift=0.0)

        with pytest.raises(RuntimeError, match="provides no computation"):
            dist.query_method(CharacteristicName.PDF)
        with pytest.raises(RuntimeError):
            _ = dist.mean

    def test_ppf_requires_hints(self) -> None:
        family = ParametricFamily(
            name="NoHints",
            distr_type=UnivariateContinuous,
            parametrization_name="base",
            distr_characteristics={CharacteristicName.CDF: _cdf},
        )

        @family.parametrization(name="base")
        class Base(Parametrization):
            shift: float

        dist = family(shift=0.0)
        with pytest.raises(RuntimeError, match="ppf"):
            dist.inverse_cumulative_probability(0.5)
        with pytest.raises(RuntimeError, match="domain hints"):
            dist.domain_lower_bound(0.5)

    def test_calculate_characteristic(self) -> None:
        dist = make_shifted_uniform()(shift=0.0)
        assert dist.calculate_characteristic(CharacteristicName.CDF, 0.4) == pytest.approx(0.4)

    def test_update_parameters(self) -> None:
        dist = make_shifted_uniform()(shift=0.0)
        first = dist.parameters

        dist.update_parameters(shift=5.0)
        assert dist.parameters is not first
        assert dist.cumulative_probability(5.5) == pytest.approx(0.5)

        with pytest.raises(InvalidParameterError):
            dist.update_parameters(shift=float("-inf"))
        with pytest.raises(TypeError, match="Unknown parameters"):
            dist.update_parameters(scale=2.0)
        assert dist.parameters.parameters == {"shift": 5.0}

    def test_repr(self) -> None:
        dist = make_shifted_uniform()(shift=1.5)
        assert repr(dist) == "ParametricFamilyDistribution(shift=1.5)"
