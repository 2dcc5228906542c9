#!/usr/bin/env python

#
# This file is part of the `causal_regulators` Python module
#
# Copyright 2026
# Heidelberg University Hospital
#
# File author(s): OmniPath Team (omnipathdb@gmail.com)
#
# Distributed under the BSD-3-Clause license
# See the file `LICENSE` or read a copy at
# https://opensource.org/license/bsd-3-clause
#

"""
Exact p-values of the signed regulator scores.

Null model
----------
A population of ``N = n_plus + n_minus + n_zero`` mRNA targets carries
``n_plus`` up, ``n_minus`` down and ``n_zero`` unobserved labels.  A
source node splits the population into four groups of fixed size:

- ``q_plus``: children predicted to go up,
- ``q_minus``: children predicted to go down,
- ``q_r``: children with an ambiguous prediction,
- ``q_zero``: targets the source does not reach.

Under the null hypothesis each assignment of the labels to the targets
is equally likely, i.e. the 4 x 3 table of group by label follows the
multivariate hypergeometric distribution with both margins fixed.  The
score is::

    S = (up in q_plus) - (down in q_plus)
      + (down in q_minus) - (up in q_minus)
      + (up or down in q_r)

and the p-value is ``P(S >= score)``.

Evaluation
----------
Sampling the signed labels of the ``q_plus`` and ``q_minus`` groups
explicitly and treating the ambiguous and unreached groups together, the
number of label arrangements with ``j``/``k`` up/down labels in
``q_plus``, ``l``/``mm`` in ``q_minus`` and ``w`` signed labels in
``q_r`` is::

    M(q_plus; j, k) * M(q_minus; l, mm)
        * C(q_r, w) * C(q_zero, E - e - w) * C(E - e, n_plus - u)

with ``E = n_plus + n_minus``, ``u = j + l``, ``e = j + k + l + mm``
and ``M`` the trinomial coefficient.  The sum over ``w`` is a
cumulative tail, the remaining four indices are enumerated, looping in
Python over the smaller of the two signed groups and vectorized over the
larger one.  All terms are non-negative and handled in log space, so the
tails keep full relative precision down to the float64 range.
"""

from __future__ import annotations

__all__ = [
    'PValueOracle',
    'qp_pvalue',
]

from functools import cache
from typing import Protocol

import numpy as np
from scipy.special import gammaln, logsumexp


class PValueOracle(Protocol):
    """
    Maps a score and the partition sizes to a one-sided p-value.

    Any callable with this signature can replace :func:`qp_pvalue`.
    """

    def __call__(
        self,
        score: int,
        q_plus: int,
        q_minus: int,
        q_zero: int,
        q_r: int,
        n_plus: int,
        n_minus: int,
        n_zero: int,
    ) -> float:
        ...


@cache
def qp_pvalue(
    score: int,
    q_plus: int,
    q_minus: int,
    q_zero: int,
    q_r: int,
    n_plus: int,
    n_minus: int,
    n_zero: int,
) -> float:
    """
    Probability of a score at least as large as *score* under the null.

    Args:
        score:
            Observed value of the statistic.
        q_plus, q_minus, q_r:
            Number of children predicted up, down and ambiguous.
        q_zero:
            Number of targets not reached by the source.
        n_plus, n_minus, n_zero:
            Number of targets observed up, down and without evidence.

    Returns:
        The one-sided p-value, in [0, 1].

    Raises:
        ValueError: If any count is negative or the group sizes do not
            add up to the population size.
    """

    sizes = (q_plus, q_minus, q_zero, q_r, n_plus, n_minus, n_zero)

    if any(size < 0 for size in sizes):
        raise ValueError(f'Partition sizes must be non-negative: {sizes}.')

    n_total = n_plus + n_minus + n_zero

    if q_plus + q_minus + q_zero + q_r != n_total:
        raise ValueError(
            'Group sizes (q_plus + q_minus + q_zero + q_r = '
            f'{q_plus + q_minus + q_zero + q_r}) do not match the '
            f'population size (n_plus + n_minus + n_zero = {n_total}).'
        )

    n_signed = q_plus + q_minus

    if score <= -n_signed:
        return 1.0

    if score > n_signed + q_r:
        return 0.0

    # Swapping the two signed groups together with the up and down labels
    # leaves S unchanged; loop over the smaller group.
    if q_plus > q_minus:
        q_plus, q_minus = q_minus, q_plus
        n_plus, n_minus = n_minus, n_plus

    n_labelled = n_plus + n_minus
    tail = _log_tail(q_r, q_zero, n_labelled, n_signed)

    ll, mm = np.meshgrid(
        np.arange(q_minus + 1),
        np.arange(q_minus + 1),
        indexing='ij',
    )
    inside = ll + mm <= q_minus
    ll = ll[inside]
    mm = mm[inside]
    log_minus = _log_trinomial(q_minus, ll, mm)

    terms = []

    with np.errstate(divide='ignore', invalid='ignore'):

        for j in range(min(q_plus, n_plus) + 1):
            for k in range(min(q_plus - j, n_minus) + 1):

                u = j + ll
                e = u + k + mm
                t = np.clip(score - (j - k + mm - ll), 0, q_r + 1)

                log_terms = (
                    _log_trinomial(q_plus, j, k) +
                    log_minus +
                    _log_binom(n_labelled - e, n_plus - u) +
                    tail[e, t]
                )
                terms.append(logsumexp(log_terms))

        log_p = logsumexp(terms) - _log_trinomial(n_total, n_plus, n_minus)

    return float(min(1.0, max(0.0, np.exp(log_p))))


def _log_binom(n, k) -> np.ndarray:
    """Log binomial coefficient, ``-inf`` outside of ``0 <= k <= n``."""

    n = np.asarray(n, dtype=float)
    k = np.asarray(k, dtype=float)

    with np.errstate(invalid='ignore'):
        out = gammaln(n + 1) - gammaln(k + 1) - gammaln(n - k + 1)

    return np.where((k >= 0) & (k <= n), out, -np.inf)


def _log_trinomial(n, a, b) -> np.ndarray:
    """Log of ``n! / (a! b! (n - a - b)!)``, ``-inf`` if undefined."""

    return _log_binom(n, a) + _log_binom(n - np.asarray(a), b)


def _log_tail(
    q_r: int,
    q_zero: int,
    n_labelled: int,
    n_signed: int,
) -> np.ndarray:
    """
    Log of the number of ways to place the remaining labels.

    Entry ``[e, t]`` is ``log sum_{w >= t} C(q_r, w) C(q_zero, E - e - w)``:
    the arrangements of the signed-or-not pattern over the ambiguous and
    unreached groups when ``e`` labels went to the signed groups and at
    least ``t`` labels land in the ambiguous group.  Column ``q_r + 1``
    is the empty tail.
    """

    e = np.arange(n_signed + 1)[:, None]
    w = np.arange(q_r + 1)[None, :]

    with np.errstate(divide='ignore', invalid='ignore'):
        log_w = _log_binom(q_r, w) + _log_binom(q_zero, n_labelled - e - w)
        tail = np.logaddexp.accumulate(log_w[:, ::-1], axis=1)[:, ::-1]

    return np.hstack([tail, np.full((n_signed + 1, 1), -np.inf)])
