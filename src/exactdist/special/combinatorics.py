"""
Log-space binomial coefficients.

Binomial coefficients for realistic population sizes overflow a double long
before the probabilities built from them do, so distributions combine them in
log space and exponentiate once.

Below ``_EXACT_LIMIT`` the coefficient is computed exactly with
:func:`math.comb` and its logarithm is correctly rounded. Above it the
identity ``C(n, k) = 1 / ((n + 1) B(n - k + 1, k + 1))`` is evaluated with
:func:`scipy.special.betaln`, whose magnitude (and hence absolute error) scales
with ``min(k, n - k) * log(n)`` rather than with ``n log n``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import betaln

_EXACT_LIMIT = 1000


def binomial_coefficient(n: int, k: int) -> int:
    """
    Exact binomial coefficient ``C(n, k)``.

    Returns ``0`` when ``k`` lies outside ``[0, n]`` or ``n`` is negative.
    """
    if n < 0 or k < 0 or k > n:
        return 0
    return math.comb(n, k)


def log_binomial_coefficient(n: int, k: int) -> float:
    """
    Natural logarithm of the binomial coefficient ``C(n, k)``.

    Parameters
    ----------
    n : int
        Number of items.
    k : int
        Number of chosen items.

    Returns
    -------
    float
        ``log C(n, k)``; ``-inf`` when ``k`` lies outside ``[0, n]`` (the
        coefficient is zero there).
    """
    if n < 0 or k < 0 or k > n:
        return -math.inf
    if k == 0 or k == n:
        return 0.0
    if k == 1 or k == n - 1:
        return math.log(n)
    if n <= _EXACT_LIMIT:
        return math.log(math.comb(n, k))
    return float(-math.log1p(n) - betaln(n - k + 1.0, k + 1.0))
