from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

import pytest

from exactdist.distributions.domain import BracketableDistribution
from exactdist.distributions.solver import (
    DEFAULT_SOLVER,
    BracketingSolver,
    check_probability,
    inverse_cumulative_probability,
)
from exactdist.errors import ConvergenceError, OutOfRangeError
from exactdist.types import DistributionType, UnivariateContinuous, UnivariateDiscrete


class StubContinuous:
    """Uniform distribution on ``[0, 1]`` with configurable hints."""

    distribution_type: DistributionType = UnivariateContinuous

    def __init__(self, lower: float = 0.0, upper: float = 1.0, guess: float = 0.5) -> None:
        self.lower = lower
        self.upper = upper
        self.guess = guess
        self.calls: list[float] = []

    def cumulative_probability(self, x: float) -> float:
        self.calls.append(x)
        return min(max(x, 0.0), 1.0)

    def domain_lower_bound(self, p: float) -> float:
        return self.lower

    def domain_upper_bound(self, p: float) -> float:
        return self.upper

    def initial_domain_guess(self, p: float) -> float:
        return self.guess


class StubExponential(StubContinuous):
    def __init__(self, guess: float) -> None:
        super().__init__(lower=0.0, upper=math.inf, guess=guess)

    def cumulative_probability(self, x: float) -> float:
        self.calls.append(x)
        return -math.expm1(-x) if x > 0 else 0.0


class StubDiscrete:
    """Discrete uniform distribution on ``{0, ..., 9}``."""

    distribution_type: DistributionType = UnivariateDiscrete

    def __init__(self, guess: float = 4.0) -> None:
        self.guess = guess

    def cumulative_probability(self, x: float) -> float:
        if x < 0:
            return 0.0
        return min((math.floor(x) + 1) / 10, 1.0)

    def domain_lower_bound(self, p: float) -> float:
        return 0

    def domain_upper_bound(self, p: float) -> float:
        return 9

    def initial_domain_guess(self, p: float) -> float:
        return self.guess


class TestCheckProbability:
    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5, math.nan, math.inf])
    def test_rejects(self, p: float) -> None:
        with pytest.raises(OutOfRangeError):
            check_probability(p)

    def test_out_of_range_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            check_probability(2.0)

    def test_accepts_open_interval(self) -> None:
        check_probability(1e-300)
        check_probability(0.5)


class TestSolverSettings:
    def test_defaults(self) -> None:
        assert DEFAULT_SOLVER == BracketingSolver()
        assert DEFAULT_SOLVER.absolute_accuracy == sys.float_info.min
        assert DEFAULT_SOLVER.relative_accuracy == 1e-14
        assert DEFAULT_SOLVER.function_value_accuracy == 0.0
        assert DEFAULT_SOLVER.max_iterations == 500

    @pytest.mark.parametrize(
        "settings",
        [
            {"absolute_accuracy": -1.0},
            {"function_value_accuracy": -1.0},
            {"initial_step": 0.0},
            {"expand_factor": 1.0},
            {"max_iterations": 0},
            {"max_expansions": 0},
        ],
    )
    def test_invalid_settings(self, settings: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            BracketingSolver(**settings)


class TestContinuousSolve:
    def test_stub_satisfies_protocol(self) -> None:
        assert isinstance(StubContinuous(), BracketableDistribution)

    @pytest.mark.parametrize("p", [1e-9, 0.1, 0.3, 0.5, 0.999])
    def test_uniform_quantile(self, p: float) -> None:
        assert DEFAULT_SOLVER.solve(StubContinuous(), p) == pytest.approx(p, abs=1e-11)

    @pytest.mark.parametrize("p", [1e-9, 1e-20, 1e-200, 1e-300])
    def test_tiny_quantile_has_relative_accuracy(self, p: float) -> None:
        assert DEFAULT_SOLVER.solve(StubContinuous(), p) == pytest.approx(p, rel=1e-13)

    @pytest.mark.parametrize("p", [1e-12, 1e-100, 1e-300])
    def test_tiny_quantile_of_unbounded_distribution(self, p: float) -> None:
        result = inverse_cumulative_probability(StubExponential(guess=1.0), p)
        assert result == pytest.approx(-math.log1p(-p), rel=1e-13)

    def test_root_at_zero_inside_bracket(self) -> None:
        class SymmetricStub(StubContinuous):
            def cumulative_probability(self, x: float) -> float:
                return min(max(0.5 * x + 0.5, 0.0), 1.0)

        assert DEFAULT_SOLVER.solve(SymmetricStub(lower=-1.0, upper=1.0, guess=0.3), 0.5) == 0.0

    def test_function_value_accuracy_stops_early(self) -> None:
        solver = BracketingSolver(function_value_accuracy=1e-3)
        assert solver.solve(StubContinuous(), 0.3) == pytest.approx(0.3, abs=1e-3)

    @pytest.mark.parametrize("guess", [0.01, 5.0, 1e6])
    def test_unbounded_expansion(self, guess: float) -> None:
        p = 0.75
        result = inverse_cumulative_probability(StubExponential(guess), p)
        assert result == pytest.approx(-math.log1p(-p), rel=1e-11)

    @pytest.mark.parametrize("guess", [math.nan, math.inf, -1.0, 2.0])
    def test_unusable_guess_falls_back(self, guess: float) -> None:
        result = DEFAULT_SOLVER.solve(StubContinuous(guess=guess), 0.4)
        assert result == pytest.approx(0.4, abs=1e-11)

    def test_point_mass(self) -> None:
        stub = StubContinuous(lower=0.7, upper=0.7)
        assert DEFAULT_SOLVER.solve(stub, 0.2) == 0.7
        assert stub.calls == []

    def test_lower_bound_already_reaches_p(self) -> None:
        assert DEFAULT_SOLVER.solve(StubContinuous(lower=0.6), 0.5) == 0.6

    def test_hints_not_bracketing(self) -> None:
        with pytest.raises(ConvergenceError, match="do not bracket"):
            DEFAULT_SOLVER.solve(StubContinuous(upper=0.5), 0.8)

    def test_iterations_exhausted(self) -> None:
        solver = BracketingSolver(max_iterations=3)
        with pytest.raises(ConvergenceError, match="did not converge"):
            solver.solve(StubContinuous(), 0.3)

    def test_nan_cdf(self) -> None:
        class NanStub(StubContinuous):
            def cumulative_probability(self, x: float) -> float:
                return math.nan

        with pytest.raises(ConvergenceError, match="undefined"):
            DEFAULT_SOLVER.solve(NanStub(), 0.5)

    def test_never_leaves_bounds(self) -> None:
        stub = StubContinuous(lower=0.0, upper=1.0, guess=0.9)
        DEFAULT_SOLVER.solve(stub, 0.05)
        assert all(0.0 <= x <= 1.0 for x in stub.calls)

    @pytest.mark.parametrize("p", [0.0, 1.0, math.nan])
    def test_out_of_range(self, p: float) -> None:
        with pytest.raises(OutOfRangeError):
            DEFAULT_SOLVER.solve(StubContinuous(), p)


class TestDiscreteSolve:
    @pytest.mark.parametrize(
        "p, expected",
        [(0.05, 0), (0.1, 0), (0.35, 3), (0.41, 4), (0.55, 5), (0.85, 8), (0.95, 9)],
    )
    def test_smallest_value_reaching_p(self, p: float, expected: int) -> None:
        result = DEFAULT_SOLVER.solve(StubDiscrete(), p)
        assert result == expected
        assert isinstance(result, int)

    @pytest.mark.parametrize("guess", [math.nan, -3.0, 100.0, 8.6])
    def test_guess_does_not_change_result(self, guess: float) -> None:
        assert DEFAULT_SOLVER.solve(StubDiscrete(guess=guess), 0.35) == 3

    def test_iterations_exhausted(self) -> None:
        solver = BracketingSolver(max_iterations=1)
        with pytest.raises(ConvergenceError, match="Integer bisection"):
            solver.solve(StubDiscrete(guess=math.nan), 0.45)
