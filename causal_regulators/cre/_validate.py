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
Validation and normalization of the engine's input tables.

Three tables enter the engine:

``relations``
    ``srcuid``, ``trguid``, ``mode`` -- edges of the causal network.
    ``mode`` is one of ``increases``, ``decreases`` or ``regulates``.
``evidence``
    ``entrez``, ``fc``, ``pvalue`` -- differential expression results.
``entities``
    ``uid``, ``id``, ``symbol``, ``type`` -- catalog of all nodes.
    Entities of type ``mRNA`` are the measurable targets, everything
    else is a candidate regulator.

Validation fails on the first problem found.  Normalization thresholds
and quantizes the evidence, maps entrez ids to entity uids and collapses
relations that connect the same pair of nodes more than once into a
single ``regulates`` relation.
"""

from __future__ import annotations

__all__ = [
    'validate_inputs',
    'ENTITY_COLUMNS',
    'EVIDENCE_COLUMNS',
    'MODES',
    'RELATION_COLUMNS',
    'TARGET_TYPE',
]

import logging
import math

import numpy as np
import pandas as pd

from ._errors import (
    AmbiguousIdentifierMappingError,
    ColumnTypeError,
    DuplicateRowError,
    EmptyInputError,
    InvalidModeError,
    NAPresentError,
    NoDataAfterFilteringError,
    OutOfRangeValueError,
    SchemaError,
    UnmappedIdentifierError,
)
from ._record import ValidatedInputs

_log = logging.getLogger(__name__)

RELATION_COLUMNS = ('srcuid', 'trguid', 'mode')
EVIDENCE_COLUMNS = ('entrez', 'fc', 'pvalue')
ENTITY_COLUMNS = ('uid', 'id', 'symbol', 'type')

MODES = {'increases': 1, 'decreases': -1, 'regulates': 0}
TARGET_TYPE = 'mRNA'


def validate_inputs(
    relations: pd.DataFrame,
    evidence: pd.DataFrame,
    entities: pd.DataFrame,
    fc_thresh: float = 1.3,
    is_logfc: bool = True,
    pval_thresh: float = 0.01,
) -> ValidatedInputs:
    """
    Check the three input tables and bring them to normal form.

    The input frames are not modified.

    Args:
        relations:
            Causal network edges.
        evidence:
            Differential expression results keyed by entrez id.
        entities:
            Node catalog.
        fc_thresh:
            Minimum absolute fold change.  If *is_logfc* is ``True`` it
            is compared against the log2 of this value.
        is_logfc:
            Whether the ``fc`` column is on log2 scale.
        pval_thresh:
            Maximum evidence p-value.

    Returns:
        The normalized tables: relations with one row per source-target
        pair, evidence as ``uid`` / ``val`` with ``val`` in {1, -1}, and
        the entities in canonical column order.

    Raises:
        CREError: One of its subclasses, for the first failed check.
    """

    relations = _check_table(relations, 'relations', RELATION_COLUMNS)
    evidence = _check_table(evidence, 'evidence', EVIDENCE_COLUMNS)
    entities = _check_table(entities, 'entities', ENTITY_COLUMNS)

    evidence = _filter_evidence(evidence, fc_thresh, is_logfc, pval_thresh)

    _check_text(entities, 'entities', ENTITY_COLUMNS)

    if entities['uid'].duplicated().any():
        raise DuplicateRowError('Duplicated uid in entities.')

    is_target = entities['type'] == TARGET_TYPE
    targets = entities[is_target]
    sources = entities[~is_target]

    if targets.empty:
        raise EmptyInputError(
            f'No target nodes in entities: no entity is of type {TARGET_TYPE}.'
        )

    evidence, n_unmapped = _map_evidence(evidence, targets)

    if sources.empty:
        raise EmptyInputError('No source nodes in entities.')

    relations = _normalize_relations(relations, targets, sources)

    return ValidatedInputs(
        relations=relations,
        evidence=evidence,
        entities=entities,
        n_unmapped=n_unmapped,
    )


def _check_table(
    table: pd.DataFrame,
    name: str,
    columns: tuple[str, ...],
) -> pd.DataFrame:
    """
    Checks shared by all tables.

    Returns:
        A copy of *table* with columns in canonical order and a fresh
        index.
    """

    if not isinstance(table, pd.DataFrame):
        raise SchemaError(
            f'{name} must be a pandas DataFrame, got {type(table).__name__}.'
        )

    if (
        len(table.columns) != len(columns) or
        set(table.columns) != set(columns)
    ):
        raise SchemaError(
            f'{name} must have exactly the columns {list(columns)}, '
            f'got {list(table.columns)}.'
        )

    if table.empty:
        raise EmptyInputError(f'{name} has no rows.')

    if table.isna().to_numpy().any():
        raise NAPresentError(f'{name} contains missing values.')

    table = table.loc[:, list(columns)].reset_index(drop=True).copy()

    if table.duplicated().any():
        raise DuplicateRowError(f'Duplicated rows in {name}.')

    return table


def _is_text(value) -> bool:

    return isinstance(value, str)


def _check_text(table: pd.DataFrame, name: str, columns) -> None:

    for col in columns:
        if not table[col].map(_is_text).all():
            raise ColumnTypeError(
                f'In {name}, column {col} must be of type character.'
            )


def _check_numeric(table: pd.DataFrame, name: str, columns) -> None:

    for col in columns:
        dtype = table[col].dtype

        if (
            not pd.api.types.is_numeric_dtype(dtype) or
            pd.api.types.is_bool_dtype(dtype)
        ):
            raise ColumnTypeError(
                f'In {name}, column {col} must be numeric, got {dtype}.'
            )


def _filter_evidence(
    evidence: pd.DataFrame,
    fc_thresh: float,
    is_logfc: bool,
    pval_thresh: float,
) -> pd.DataFrame:
    """
    Validate, threshold and quantize the evidence table.

    Returns:
        Columns ``entrez`` and ``val``, where ``val`` is 1 for positive
        and -1 for negative fold changes.
    """

    _check_text(evidence, 'evidence', ('entrez',))
    _check_numeric(evidence, 'evidence', ('fc', 'pvalue'))

    if not evidence['pvalue'].between(0, 1).all():
        raise OutOfRangeValueError(
            'All p-values in evidence must lie between zero and one.'
        )

    if evidence['entrez'].duplicated().any():
        raise DuplicateRowError('Duplicated entrez ids in evidence.')

    if is_logfc:
        fc_thresh = math.log2(fc_thresh)

    keep = (
        (evidence['fc'].abs() >= fc_thresh) &
        (evidence['pvalue'] <= pval_thresh)
    )
    n_total = len(evidence)
    evidence = evidence[keep]

    if evidence.empty:
        raise NoDataAfterFilteringError(
            'No rows left in evidence after filtering by '
            f'fc_thresh ({fc_thresh:g}) and pval_thresh ({pval_thresh:g}).'
        )

    _log.info(
        '[CRE] %d of %d evidence rows pass the thresholds.',
        len(evidence),
        n_total,
    )

    return pd.DataFrame({
        'entrez': evidence['entrez'].to_numpy(),
        'val': np.where(evidence['fc'].to_numpy() > 0, 1, -1),
    })


def _map_evidence(
    evidence: pd.DataFrame,
    targets: pd.DataFrame,
) -> tuple[pd.DataFrame, int]:
    """
    Translate evidence entrez ids to target uids.

    Rows with an entrez id unknown among the targets are dropped with a
    warning.

    Returns:
        Evidence with columns ``uid`` and ``val``, and the number of
        dropped rows.
    """

    known = evidence['entrez'].isin(targets['id'])
    n_unmapped = int((~known).sum())
    evidence = evidence[known]

    if evidence.empty:
        raise NoDataAfterFilteringError(
            'None of the entrez ids in evidence is present among '
            'the mRNA entities.'
        )

    if n_unmapped:
        _log.warning(
            '[CRE] %d rows removed from evidence: entrez ids not '
            'present in entities.',
            n_unmapped,
        )

    merged = evidence.merge(
        targets[['id', 'uid']],
        left_on='entrez',
        right_on='id',
        how='inner',
    )

    if len(merged) != len(evidence):
        ambiguous = sorted(merged.loc[
            merged['entrez'].duplicated(keep=False),
            'entrez',
        ].unique())
        raise AmbiguousIdentifierMappingError(
            'Entrez ids in evidence map to multiple mRNAs in entities: '
            f'{", ".join(ambiguous)}.'
        )

    return merged[['uid', 'val']].reset_index(drop=True), n_unmapped


def _normalize_relations(
    relations: pd.DataFrame,
    targets: pd.DataFrame,
    sources: pd.DataFrame,
) -> pd.DataFrame:
    """
    Validate relations and collapse repeated source-target pairs.

    Every pair occurring on more than one row becomes a single
    ``regulates`` relation, whether or not the modes agree.  Row order
    follows the first occurrence of each pair.
    """

    _check_text(relations, 'relations', RELATION_COLUMNS)

    bad_modes = ~relations['mode'].isin(MODES)

    if bad_modes.any():
        raise InvalidModeError(
            'Relation modes must be one of '
            f'{", ".join(MODES)}; got: '
            f'{", ".join(sorted(relations.loc[bad_modes, "mode"].unique()))}.'
        )

    if not relations['trguid'].isin(targets['uid']).all():
        raise UnmappedIdentifierError(
            'All trguids in relations must be present in the uid column '
            f'of entities and be of type {TARGET_TYPE}.'
        )

    if not relations['srcuid'].isin(sources['uid']).all():
        raise UnmappedIdentifierError(
            'All srcuids in relations must be present in the uid column '
            f'of entities and must not be of type {TARGET_TYPE}.'
        )

    ambiguous = relations.duplicated(['srcuid', 'trguid'], keep=False)
    relations.loc[ambiguous, 'mode'] = 'regulates'
    relations = relations.drop_duplicates().reset_index(drop=True)

    _log.info(
        '[CRE] %d relations after collapsing %d ambiguous rows.',
        len(relations),
        int(ambiguous.sum()),
    )

    return relations
