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

"""Result table of the causal relation engine."""

from __future__ import annotations

__all__ = ['RESULT_COLUMNS', 'assemble_results', 'result_rows']

from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._record import ContingencyTable, SourceIndex


RESULT_COLUMNS = (
    'uid',
    'name',
    'regulation',
    'correct.pred',
    'incorrect.pred',
    'score',
    'total.reachable',
    'significant.reachable',
    'total.ambiguous',
    'significant.ambiguous',
    'unknown',
    'pvalue',
)


def result_rows(
    source: SourceIndex,
    counts: ContingencyTable,
    pval_up: float,
    pval_down: float,
) -> tuple[dict, dict]:
    """
    The ``up`` and ``down`` rows of one source node.

    Correct and incorrect predictions and the score always count the
    signed children only, whichever statistic produced the p-values.
    """

    c = counts
    correct = c.npp + c.nmm
    incorrect = c.npm + c.nmp

    shared = {
        'uid': source.uid,
        'name': source.symbol,
        'total.reachable': c.n_children,
        'significant.reachable': c.npp + c.npm + c.nmp + c.nmm + c.nrp + c.nrm,
        'total.ambiguous': c.nrp + c.nrm + c.nrz,
        'significant.ambiguous': c.nrp + c.nrm,
        'unknown': c.n_non_children,
    }

    up = {
        **shared,
        'regulation': 'up',
        'correct.pred': correct,
        'incorrect.pred': incorrect,
        'score': correct - incorrect,
        'pvalue': pval_up,
    }
    down = {
        **shared,
        'regulation': 'down',
        'correct.pred': incorrect,
        'incorrect.pred': correct,
        'score': incorrect - correct,
        'pvalue': pval_down,
    }

    return up, down


def assemble_results(rows: Iterable[dict]) -> pd.DataFrame:
    """
    Collect result rows into a table ranked by p-value.

    The sort is stable: rows with equal p-values keep the order in which
    they were added.

    Args:
        rows: Row dicts as produced by :func:`result_rows`.

    Returns:
        DataFrame with columns :data:`RESULT_COLUMNS`, ascending by
        ``pvalue``, index reset.
    """

    df = pd.DataFrame(list(rows), columns=list(RESULT_COLUMNS))

    return df.sort_values('pvalue', kind='stable').reset_index(drop=True)
