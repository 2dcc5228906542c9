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
Causal relation engine: which regulators explain an expression profile?

Given a signed causal network (source node → mRNA target, ``increases``,
``decreases`` or ``regulates``), a differential expression table and an
entity catalog, every source node is scored twice: assuming it is
up-regulated and assuming it is down-regulated.  The score counts the
children whose observed regulation matches the network's prediction;
its p-value comes from an exact test over all label arrangements.

Usage::

    import pandas as pd
    from causal_regulators.cre import score

    relations = pd.read_csv('relations.csv', dtype=str)
    evidence = pd.read_csv('evidence.csv', dtype={'entrez': str})
    entities = pd.read_csv('entities.csv', dtype=str)

    # Quaternary statistic, log2 fold changes, default thresholds
    results = score(relations, evidence, entities)

    # Ternary statistic on linear fold changes
    results = score(
        relations, evidence, entities,
        method='Ternary',
        is_logfc=False,
        fc_thresh=1.5,
    )

    results.head()
"""

__all__ = [
    '__version__',
    'CREError',
    'METHODS',
    'PValueOracle',
    'RESULT_COLUMNS',
    'config',
    'default_config',
    'qp_pvalue',
    'score',
    'validate_inputs',
]

from .._metadata import __version__
from ._config import config, default_config
from ._errors import CREError
from ._methods import METHODS
from ._results import RESULT_COLUMNS
from ._score import score
from ._validate import validate_inputs
from .pvalue import PValueOracle, qp_pvalue
