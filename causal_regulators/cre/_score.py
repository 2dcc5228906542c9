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
Causal relation engine entry point.

Scores every source node of a causal network against differential
expression evidence::

    validate_inputs()  normalized relations, evidence, entities
    build_index()      children and observed values per source node
    count_contingency()  twelve counts per source node
    score_counts()     up / down p-values of the chosen statistic
    assemble_results() two rows per source node, ranked by p-value
"""

from __future__ import annotations

__all__ = ['score']

import logging
from typing import TYPE_CHECKING

from tqdm import tqdm

from ._config import config
from ._contingency import count_contingency
from ._errors import InvalidMethodError
from ._methods import METHODS, score_counts
from ._results import assemble_results, result_rows
from ._validate import validate_inputs
from .network import build_index
from .pvalue import qp_pvalue

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from .pvalue import PValueOracle

_log = logging.getLogger(__name__)


def score(
    relations: pd.DataFrame,
    evidence: pd.DataFrame,
    entities: pd.DataFrame,
    *args: dict | Path | str,
    oracle: PValueOracle | None = None,
    **kwargs,
) -> pd.DataFrame:
    """
    Rank the source nodes of a causal network by agreement with evidence.

    For each source node, the regulation its children are predicted to
    undergo is compared with the regulation observed in *evidence*,
    once assuming the source is up-regulated and once assuming it is
    down-regulated.

    Args:
        relations:
            Columns ``srcuid``, ``trguid``, ``mode`` (``increases``,
            ``decreases`` or ``regulates``); all text.
        evidence:
            Columns ``entrez`` (text), ``fc`` and ``pvalue`` (numeric).
        entities:
            Columns ``uid``, ``id``, ``symbol``, ``type``; all text.
            Targets of relations must be of type ``mRNA``, sources of
            any other type.
        *args:
            Configuration overrides as dicts or YAML file paths.
        oracle:
            P-value function; :func:`~.pvalue.qp_pvalue` by default.
        **kwargs:
            Configuration keys: ``method``, ``fc_thresh``, ``is_logfc``,
            ``pval_thresh``, ``progress``, e.g.::

                score(rel, ev, ent, method='Ternary', is_logfc=False)

    Returns:
        DataFrame with two rows (``up`` and ``down``) per source node
        and the columns listed in :data:`~._results.RESULT_COLUMNS`,
        ascending by ``pvalue``.

    Raises:
        CREError: If the configuration names an unknown method or the
            inputs fail validation.  Nothing is computed in that case.
    """

    cfg = config(*args, **kwargs)
    method = cfg['method']

    if method not in METHODS:
        raise InvalidMethodError(
            f'Unknown method: {method!r}. '
            f'Available: {list(METHODS)}'
        )

    oracle = oracle or qp_pvalue

    validated = validate_inputs(
        relations,
        evidence,
        entities,
        fc_thresh=cfg['fc_thresh'],
        is_logfc=cfg['is_logfc'],
        pval_thresh=cfg['pval_thresh'],
    )
    index = build_index(
        validated.relations,
        validated.evidence,
        validated.entities,
    )

    _log.info(
        '[CRE] Scoring %d source nodes with the %s statistic...',
        len(index),
        method,
    )

    rows = []

    for source in tqdm(
        index,
        desc='[CRE] scoring source nodes',
        disable=not cfg['progress'],
    ):
        counts = count_contingency(source)
        _log.debug('[CRE] %s: %s', source.uid, counts)
        pval_up, pval_down = score_counts(counts, method, oracle)
        rows.extend(result_rows(source, counts, pval_up, pval_down))

    results = assemble_results(rows)

    _log.info('[CRE] Result table has %d rows.', len(results))

    return results
