"""
Parameter sets of distribution families.

A parametrization is a frozen dataclass holding the parameter values of one
distribution. Its ``@constraint`` methods are predicates checked on every
construction through a family and on every update, so a distribution never
holds values that violate them. Updates go through
:meth:`Parametrization.replace`, which builds and validates a new object and
leaves the old one untouched.

Example
-------
>>> @parametrization(family=family, name="degreesOfFreedom")
... class DegreesOfFreedom(Parametrization):
...     numerator: float
...
...     @constraint(description="numerator > 0")
...     def check_numerator(self) -> bool:
...         return self.numerator > 0
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from dataclasses import replace as _dataclass_replace
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from exactdist.errors import InvalidParameterError
from exactdist.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from exactdist.families.parametric_family import ParametricFamily

_CONSTRAINT_FLAG = "__is_constraint"
_CONSTRAINT_DESCRIPTION = "__constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    A named predicate over a parametrization.

    Parameters
    ----------
    description : str
        Text quoted in the error raised when ``check`` fails.
    check : Callable[[Any], bool]
        Predicate receiving the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of parametrizations.

    Subclasses are turned into frozen dataclasses by the
    :func:`parametrization` decorator, which also fills in the class
    attributes below.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Field values by field name, in declaration order."""
        if is_dataclass(self):
            return {field.name: getattr(self, field.name) for field in fields(self)}
        return {key: getattr(self, key) for key in getattr(self, "__annotations__", {})}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every constraint, in declaration order.

        Raises
        ------
        InvalidParameterError
            For the first constraint that does not hold.
        """
        failed = next((c for c in self._constraints if not c.check(self)), None)
        if failed is not None:
            raise InvalidParameterError(f'Constraint "{failed.description}" does not hold')

    def replace(self, **changes: Any) -> Parametrization:
        """
        Validated copy of ``self`` with some fields changed.

        Raises
        ------
        TypeError
            If a key in ``changes`` is not a field of this parametrization.
        InvalidParameterError
            If the copy violates a constraint.
        """
        unknown = sorted(set(changes).difference(self.parameters))
        if unknown:
            raise TypeError(f"Unknown parameters for parametrization '{self.name}': {unknown}")
        updated = _dataclass_replace(self, **changes)  # type: ignore[type-var]
        updated.validate()
        return updated

    def consistency_warnings(self) -> list[str]:
        """
        Messages for combinations that pass validation but are degenerate.

        Distributions emit each message as a ``UserWarning``. The base
        implementation reports nothing.
        """
        return []


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method of a parametrization as a constraint.

    Parameters
    ----------
    description : str
        Text of the constraint, quoted in validation errors.

    Notes
    -----
    Keep one parameter per constraint: updates re-run all of them, and a
    predicate over several parameters would make the order of single-field
    updates matter.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, _CONSTRAINT_FLAG, True)
        setattr(wrapper, _CONSTRAINT_DESCRIPTION, description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            kind = "@staticmethod" if isinstance(attr, staticmethod) else "@classmethod"
            raise TypeError(f"@constraint '{attr_name}' must be an instance method, not {kind}")
        if not (isfunction(attr) and getattr(attr, _CONSTRAINT_FLAG, False)):
            continue
        collected.append(
            ParametrizationConstraint(
                description=getattr(attr, _CONSTRAINT_DESCRIPTION, attr.__name__), check=attr
            )
        )
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class becomes a frozen, slotted dataclass (unless it already is a
    dataclass), its ``@constraint`` methods are collected, and it is
    registered with the family as ``name``.

    Raises
    ------
    TypeError
        If the class body holds a ``staticmethod`` or ``classmethod``.
    ValueError
        If the family rejects ``name``.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
