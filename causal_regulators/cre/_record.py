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

"""Records passed between the stages of the causal relation engine."""

from __future__ import annotations

__all__ = [
    'ContingencyTable',
    'OracleQuery',
    'SourceIndex',
    'ValidatedInputs',
]

from typing import NamedTuple

import numpy as np
import pandas as pd


class ValidatedInputs(NamedTuple):
    """Normalized input tables, ready for indexing."""

    relations: pd.DataFrame
    """Columns ``srcuid``, ``trguid``, ``mode``; one row per pair."""

    evidence: pd.DataFrame
    """Columns ``uid`` and ``val`` (+1 or -1)."""

    entities: pd.DataFrame
    """Columns ``uid``, ``id``, ``symbol``, ``type``."""

    n_unmapped: int = 0
    """Evidence rows dropped because their entrez id is not an mRNA id."""


class SourceIndex(NamedTuple):
    """
    Children of one source node and the evidence observed on them.

    ``child_signs`` and ``child_values`` are aligned with ``child_uids``.
    """

    uid: str
    """Source node uid."""

    symbol: str
    """Symbol of the source node from the entities table."""

    child_uids: tuple[str, ...]
    """Target uids reached by the source, in relation order."""

    child_signs: np.ndarray
    """Predicted sign per child: 1 increases, -1 decreases, 0 regulates."""

    child_values: np.ndarray
    """Observed value per child: 1 up, -1 down, 0 no evidence."""

    non_child_values: np.ndarray
    """Observed value of every mRNA entity that is not a child."""


class ContingencyTable(NamedTuple):
    """
    Predicted sign by observed value counts of one source node.

    Field names are ``n<sign><value>`` with ``p`` for +1, ``m`` for -1,
    ``r`` for an ambiguous prediction and ``z`` for zero.  The last three
    fields count the non-children (``z`` sign).
    """

    npp: int
    npm: int
    npz: int
    nmp: int
    nmm: int
    nmz: int
    nrp: int
    nrm: int
    nrz: int
    nzp: int
    nzm: int
    nzz: int

    @property
    def n_children(self) -> int:

        return sum(self[:9])

    @property
    def n_non_children(self) -> int:

        return self.nzp + self.nzm + self.nzz


class OracleQuery(NamedTuple):
    """Arguments of one p-value oracle call."""

    score: int
    q_plus: int
    q_minus: int
    q_zero: int
    q_r: int
    n_plus: int
    n_minus: int
    n_zero: int
