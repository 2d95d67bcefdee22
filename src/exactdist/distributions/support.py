from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor, isfinite
from numbers import Real
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from exactdist.types import Interval1D, Number

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    def contains(self, x: Number) -> bool: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[int]: ...

    def iter_leq(self, x: Number) -> Iterator[int]: ...


@dataclass(frozen=True, slots=True)
class BoundedIntegerSupport(DiscreteSupport):
    """
    Consecutive integers ``min_k, min_k + 1, ..., max_k``.

    The support is empty when ``min_k > max_k``.
    """

    min_k: int
    max_k: int

    def contains(self, x: Number) -> bool:
        if not isinstance(x, Real):
            return False
        value = float(x)
        if not isfinite(value) or value != floor(value):
            return False
        return self.min_k <= value <= self.max_k

    def __contains__(self, x: object) -> bool:
        return isinstance(x, Real) and self.contains(x)

    @property
    def is_empty(self) -> bool:
        return self.min_k > self.max_k

    def iter_points(self) -> Iterator[int]:
        return iter(range(self.min_k, self.max_k + 1))

    def iter_leq(self, x: Number) -> Iterator[int]:
        threshold = float(x)
        if threshold < self.min_k:
            return iter(())
        last = self.max_k if threshold >= self.max_k else int(floor(threshold))
        return iter(range(self.min_k, last + 1))

    __iter__ = iter_points


__all__ = [
    # Base support protocol
    "Support",
    "ContinuousSupport",
    # Discrete support protocol and implementations
    "DiscreteSupport",
    "BoundedIntegerSupport",
]
