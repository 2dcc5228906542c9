#!/usr/bin/env python

"""Shared test fixtures for causal_regulators tests."""

import pandas as pd
import pytest


# ---------------------------------------------------------------------------
# One regulator, two targets
# ---------------------------------------------------------------------------

@pytest.fixture
def entities():
    """One protein and two mRNAs."""

    return pd.DataFrame({
        'uid': ['A', 'T1', 'T2'],
        'id': ['geneA', '1001', '1002'],
        'symbol': ['A', 'T1', 'T2'],
        'type': ['protein', 'mRNA', 'mRNA'],
    })


@pytest.fixture
def relations():
    """A increases T1 and decreases T2."""

    return pd.DataFrame({
        'srcuid': ['A', 'A'],
        'trguid': ['T1', 'T2'],
        'mode': ['increases', 'decreases'],
    })


@pytest.fixture
def evidence():
    """T1 up, T2 down, both significant on a linear fold change scale."""

    return pd.DataFrame({
        'entrez': ['1001', '1002'],
        'fc': [2.0, -2.5],
        'pvalue': [0.001, 0.002],
    })


@pytest.fixture
def linear_fc():
    """Settings for linear fold changes."""

    return {'fc_thresh': 1.3, 'is_logfc': False, 'pval_thresh': 0.01}


# ---------------------------------------------------------------------------
# Three regulators, eight targets
# ---------------------------------------------------------------------------

@pytest.fixture
def network_entities():
    """Sources S1..S3 and targets G1..G8 (entrez ids 1..8)."""

    targets = [f'G{i}' for i in range(1, 9)]

    return pd.DataFrame({
        'uid': ['S1', 'S2', 'S3'] + targets,
        'id': ['P1', 'CHEMBL2', 'P3'] + [str(i) for i in range(1, 9)],
        'symbol': ['SRC1', 'DRUG2', 'SRC3'] + [f'GENE{i}' for i in range(1, 9)],
        'type': ['protein', 'compound', 'protein'] + ['mRNA'] * 8,
    })


@pytest.fixture
def network_relations():
    """
    S1: G1+, G2+, G3-, G4 ambiguous.
    S2: G1-, G5 both + and - (collapses to ambiguous), G6+.
    S3: G7+, G8-.
    """

    return pd.DataFrame(
        [
            ('S1', 'G1', 'increases'),
            ('S1', 'G2', 'increases'),
            ('S1', 'G3', 'decreases'),
            ('S1', 'G4', 'regulates'),
            ('S2', 'G1', 'decreases'),
            ('S2', 'G5', 'increases'),
            ('S2', 'G5', 'decreases'),
            ('S2', 'G6', 'increases'),
            ('S3', 'G7', 'increases'),
            ('S3', 'G8', 'decreases'),
        ],
        columns=['srcuid', 'trguid', 'mode'],
    )


@pytest.fixture
def network_evidence():
    """
    With fc_thresh=1.1 (linear) and pval_thresh=0.01: G1, G2 up, G3, G4,
    G7 down; entrez 5 fails the p-value, 6 the fold change, 9 is unknown.
    """

    return pd.DataFrame({
        'entrez': ['1', '2', '3', '4', '5', '6', '9', '7'],
        'fc': [2.0, 1.5, -2.0, -1.2, 3.0, 0.1, 2.0, -2.0],
        'pvalue': [0.001, 0.001, 0.001, 0.001, 0.5, 0.001, 0.001, 0.001],
    })


@pytest.fixture
def network_settings():

    return {'fc_thresh': 1.1, 'is_logfc': False, 'pval_thresh': 0.01}
