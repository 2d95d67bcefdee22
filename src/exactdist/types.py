"""
Shared Types
============

Names, type aliases and small value objects used across exactdist: the
distribution kind the solver dispatches on, the interval type behind
continuous supports, and the enumerations of characteristic and family names.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
from math import inf, isnan
from numbers import Real
from typing import Any

import numpy as np


class Kind(StrEnum):
    """Whether a distribution has a density or a mass function."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Marker base of distribution type descriptors.

    Subclasses are frozen dataclasses; their fields are published through
    :attr:`features`, which the bracketing solver reads to pick the
    continuous or the integer search.
    """

    __slots__ = ()

    @property
    def features(self) -> Mapping[str, Any]:
        """Public dataclass fields of the type, by name."""
        try:
            declared = fields(self)  # type: ignore[arg-type]
        except TypeError:
            return {}
        return {f.name: getattr(self, f.name) for f in declared if not f.name.startswith("_")}


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution on ``R^dimension``.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Number of coordinates; ``1`` for every built-in family.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type of the F distribution and other real-valued families."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type of the hypergeometric distribution and other integer-valued families."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""NumPy scalar accepted wherever a Python number is."""

Number = NumPyNumber | int | float
"""Any real scalar argument of a distribution function."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Real interval, open or closed at each end.

    Parameters
    ----------
    left, right : float, default -inf, inf
        Endpoints.
    left_closed, right_closed : bool, default True
        Whether the endpoint belongs to the interval. Infinite endpoints are
        always treated as open.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    def contains(self, x: Number) -> bool:
        """``True`` if ``x`` lies in the interval; ``False`` for NaN."""
        value = float(x)
        if isnan(value):
            return False
        above = value > self.left or (self.left_closed and value == self.left)
        below = value < self.right or (self.right_closed and value == self.right)
        return above and below

    def __contains__(self, x: object) -> bool:
        return isinstance(x, Real) and self.contains(x)

    @property
    def is_empty(self) -> bool:
        if self.left == self.right:
            return not (self.left_closed and self.right_closed)
        return self.left > self.right


type GenericCharacteristicName = str
"""Key of a characteristic, e.g. ``"cdf"``."""

type ParametrizationName = str
"""Key of a parametrization within its family."""

ScalarFunc = Callable[[float], float]
"""Real function of one real variable, such as a shifted CDF."""


class CharacteristicName(StrEnum):
    """Characteristics a family can provide or derive."""

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    PMF = "pmf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    """Names of the built-in families in the family register."""

    F = "F"
    HYPERGEOMETRIC = "Hypergeometric"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "ScalarFunc",
    "Interval1D",
    "NumPyNumber",
    "Number",
    "CharacteristicName",
    "FamilyName",
]
