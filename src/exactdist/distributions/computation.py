"""
Characteristic Callables
========================

A distribution answers a query such as ``cdf`` or ``ppf`` through a small
callable object that knows which characteristic it computes:

- :class:`AnalyticalComputation` wraps a closed-form function of the family,
  already bound to the distribution's parameters;
- :class:`FittedComputationMethod` wraps a numerical procedure built from
  other characteristics, such as the quantile obtained by bracketing ``cdf``.

Both satisfy the :class:`Computation` protocol and are called as
``method(x, **options)``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from exactdist.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Anything that evaluates one named characteristic."""

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic.

    Parameters
    ----------
    target : str
        Characteristic computed, e.g. ``"cdf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Function of the evaluation point, with the parameters already bound.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """
    Characteristic obtained numerically from other characteristics.

    Parameters
    ----------
    target : str
        Characteristic computed, e.g. ``"ppf"``.
    sources : Sequence[str]
        Characteristics the procedure evaluates, e.g. ``["cdf"]``.
    func : Callable[[In, KwArg(Any)], Out]
        The procedure itself.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]
"""Callable returned by ``ParametricFamilyDistribution.query_method``."""


__all__ = [
    "Computation",
    "AnalyticalComputation",
    "FittedComputationMethod",
    "Method",
]
