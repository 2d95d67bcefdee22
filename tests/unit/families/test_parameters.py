from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from typing import Any

import pytest

from exactdist.errors import InvalidParameterError
from exactdist.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from exactdist.types import UnivariateContinuous


def make_family(name: str = "ParamFamily") -> ParametricFamily:
    return ParametricFamily(
        name=name,
        distr_type=UnivariateContinuous,
        parametrization_name="base",
        distr_characteristics={},
    )


class TestParametrizationAPI:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_decorator_builds_frozen_dataclass(self) -> None:
        family = make_family()

        @parametrization(family=family, name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value(self) -> bool:
                return self.value > 0

        obj = Base(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "base"
        assert obj.parameters == {"value": 1.25}
        assert [c.description for c in obj.constraints] == ["value > 0"]
        assert getattr(Base, "__family__", None) is family
        assert getattr(Base, "__param_name__", None) == "base"

        with pytest.raises(dataclasses.FrozenInstanceError):
            obj.value = 2.0  # type: ignore[misc]

    def test_validate(self) -> None:
        family = make_family()

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value(self) -> bool:
                return self.value > 0

        Base(value=1.0).validate()  # type: ignore[call-arg]
        with pytest.raises(InvalidParameterError, match='Constraint "value > 0" does not hold'):
            Base(value=-1.0).validate()  # type: ignore[call-arg]

    def test_replace(self) -> None:
        family = make_family()

        @family.parametrization(name="base")
        class Base(Parametrization):
            low: float
            high: float

            @constraint(description="low >= 0")
            def check_low(self) -> bool:
                return self.low >= 0

        original = Base(low=1.0, high=2.0)  # type: ignore[call-arg]
        updated = original.replace(high=5.0)

        assert updated is not original
        assert updated.parameters == {"low": 1.0, "high": 5.0}
        assert original.parameters == {"low": 1.0, "high": 2.0}

        with pytest.raises(InvalidParameterError):
            original.replace(low=-1.0)
        with pytest.raises(TypeError, match="Unknown parameters"):
            original.replace(width=1.0)

    def test_consistency_warnings_default_empty(self) -> None:
        family = make_family()

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

        assert Base(value=0.0).consistency_warnings() == []  # type: ignore[call-arg]

    @pytest.mark.parametrize("wrapper", [staticmethod, classmethod])
    def test_constraint_must_be_instance_method(self, wrapper: Any) -> None:
        family = make_family()

        with pytest.raises(TypeError, match="must be an instance method"):

            @parametrization(family=family, name="base")
            class Base(Parametrization):
                value: float

                check = wrapper(lambda *args: True)
