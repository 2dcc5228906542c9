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
Per-source view of the causal network.

For every source node (hypothesis) this module collects its children,
the sign the network predicts for each of them and the value observed
in the evidence, and the observed values of all mRNA targets the
source does not reach.
"""

from __future__ import annotations

__all__ = [
    'build_index',
    'gene_values',
]

from typing import TYPE_CHECKING

import numpy as np

from ._record import SourceIndex
from ._validate import MODES, TARGET_TYPE

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    import pandas as pd


def gene_values(
    uids: Iterable[str],
    values: Mapping[str, int],
) -> np.ndarray:
    """
    Observed regulation of target nodes.

    Args:
        uids: Target uids.
        values: Evidence value by uid.

    Returns:
        Integer array aligned with *uids*: the evidence value, or 0 for
        targets without evidence.
    """

    return np.array([values.get(uid, 0) for uid in uids], dtype=int)


def build_index(
    relations: pd.DataFrame,
    evidence: pd.DataFrame,
    entities: pd.DataFrame,
) -> list[SourceIndex]:
    """
    Children, predicted signs and observed values for every source node.

    Args:
        relations:
            Normalized relations, one row per source-target pair.
        evidence:
            Normalized evidence with ``uid`` and ``val`` columns.
        entities:
            Validated node catalog.

    Returns:
        One :class:`SourceIndex` per distinct ``srcuid``, in order of
        first appearance in *relations*.
    """

    values = dict(zip(evidence['uid'], evidence['val']))
    symbols = dict(zip(entities['uid'], entities['symbol']))

    target_uids = entities.loc[entities['type'] == TARGET_TYPE, 'uid'].to_numpy()
    target_values = gene_values(target_uids, values)

    index = []

    for uid, group in relations.groupby('srcuid', sort=False):

        children = group['trguid'].to_numpy()
        non_child = ~np.isin(target_uids, children)

        index.append(SourceIndex(
            uid=uid,
            symbol=symbols[uid],
            child_uids=tuple(children),
            child_signs=group['mode'].map(MODES).to_numpy(dtype=int),
            child_values=gene_values(children, values),
            non_child_values=target_values[non_child],
        ))

    return index
