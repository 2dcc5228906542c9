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
Scoring statistics.

Each method turns the contingency counts of a source node into the
oracle queries for the two hypotheses: the source is up-regulated, or
it is down-regulated.

``Quaternary``
    Signed and ambiguous children both count.  Ambiguous children
    contribute to the score whenever they are regulated.
``Ternary``
    Ambiguous children are removed from the population altogether.
``Enrichment``
    Direction is ignored: every child is treated as ambiguous, the two
    hypotheses share one p-value.
"""

from __future__ import annotations

__all__ = [
    'METHODS',
    'enrichment',
    'method_queries',
    'quaternary',
    'score_counts',
    'ternary',
]

from typing import TYPE_CHECKING

from ._errors import InvalidMethodError
from ._record import ContingencyTable, OracleQuery

if TYPE_CHECKING:
    from .pvalue import PValueOracle


def quaternary(c: ContingencyTable) -> tuple[OracleQuery, OracleQuery]:
    """Up and down queries of the Quaternary statistic."""

    q_plus = c.npp + c.npm + c.npz
    q_minus = c.nmp + c.nmm + c.nmz
    q_r = c.nrp + c.nrm + c.nrz
    q_zero = c.nzp + c.nzm + c.nzz
    n_plus = c.npp + c.nmp + c.nrp + c.nzp
    n_minus = c.npm + c.nmm + c.nrm + c.nzm
    n_zero = c.npz + c.nmz + c.nrz + c.nzz
    ambiguous = c.nrp + c.nrm

    up = OracleQuery(
        score=c.npp + c.nmm + ambiguous - (c.npm + c.nmp),
        q_plus=q_plus,
        q_minus=q_minus,
        q_zero=q_zero,
        q_r=q_r,
        n_plus=n_plus,
        n_minus=n_minus,
        n_zero=n_zero,
    )
    down = up._replace(
        score=c.nmp + c.npm + ambiguous - (c.npp + c.nmm),
        q_plus=q_minus,
        q_minus=q_plus,
    )

    return up, down


def ternary(c: ContingencyTable) -> tuple[OracleQuery, OracleQuery]:
    """Up and down queries of the Ternary statistic."""

    q_plus = c.npp + c.npm + c.npz
    q_minus = c.nmp + c.nmm + c.nmz

    up = OracleQuery(
        score=c.npp + c.nmm - (c.npm + c.nmp),
        q_plus=q_plus,
        q_minus=q_minus,
        q_zero=c.nzp + c.nzm + c.nzz,
        q_r=0,
        n_plus=c.npp + c.nmp + c.nzp,
        n_minus=c.npm + c.nmm + c.nzm,
        n_zero=c.npz + c.nmz + c.nzz,
    )
    down = up._replace(
        score=c.nmp + c.npm - (c.npp + c.nmm),
        q_plus=q_minus,
        q_minus=q_plus,
    )

    return up, down


def enrichment(c: ContingencyTable) -> tuple[OracleQuery, None]:
    """
    Direction-agnostic query of the Enrichment statistic.

    Returns ``None`` for the down hypothesis: it reuses the up p-value.
    """

    # fold signed predictions into the ambiguous group
    nrp = c.npp + c.nmp + c.nrp
    nrm = c.npm + c.nmm + c.nrm
    nrz = c.npz + c.nmz + c.nrz

    up = OracleQuery(
        score=nrp + nrm,
        q_plus=0,
        q_minus=0,
        q_zero=c.nzp + c.nzm + c.nzz,
        q_r=nrp + nrm + nrz,
        n_plus=nrp + c.nzp,
        n_minus=nrm + c.nzm,
        n_zero=nrz + c.nzz,
    )

    return up, None


METHODS = {
    'Quaternary': quaternary,
    'Ternary': ternary,
    'Enrichment': enrichment,
}


def method_queries(
    counts: ContingencyTable,
    method: str,
) -> tuple[OracleQuery, OracleQuery | None]:
    """
    Oracle queries of one source node.

    Args:
        counts: Contingency counts of the source node.
        method: Name of a statistic in :data:`METHODS`.

    Returns:
        The up and down queries; the down query is ``None`` when the
        method does not distinguish the two hypotheses.

    Raises:
        InvalidMethodError: If *method* is unknown.
    """

    if method not in METHODS:
        raise InvalidMethodError(
            f'Unknown method: {method!r}. '
            f'Available: {list(METHODS)}'
        )

    return METHODS[method](counts)


def score_counts(
    counts: ContingencyTable,
    method: str,
    oracle: PValueOracle,
) -> tuple[float, float]:
    """
    P-values of the up and down hypotheses of one source node.

    Args:
        counts: Contingency counts of the source node.
        method: Name of a statistic in :data:`METHODS`.
        oracle: P-value function called with the query fields.

    Returns:
        ``(pval_up, pval_down)``.
    """

    up, down = method_queries(counts, method)
    pval_up = oracle(*up)
    pval_down = pval_up if down is None else oracle(*down)

    return pval_up, pval_down
