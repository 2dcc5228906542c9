#!/usr/bin/env python

"""Tests for causal_regulators.cre._validate module."""

import logging

import pandas as pd
import pytest

from causal_regulators.cre._errors import (
    AmbiguousIdentifierMappingError,
    ColumnTypeError,
    CREError,
    DuplicateRowError,
    EmptyInputError,
    InvalidModeError,
    NAPresentError,
    NoDataAfterFilteringError,
    OutOfRangeValueError,
    SchemaError,
    UnmappedIdentifierError,
)
from causal_regulators.cre._validate import validate_inputs


def _validate(relations, evidence, entities, **kwargs):
    settings = {'fc_thresh': 1.3, 'is_logfc': False, 'pval_thresh': 0.01}
    settings.update(kwargs)
    return validate_inputs(relations, evidence, entities, **settings)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

class TestNormalization:

    def test_scenario_evidence(self, relations, evidence, entities):
        result = _validate(relations, evidence, entities)

        assert list(result.evidence.columns) == ['uid', 'val']
        assert dict(zip(result.evidence['uid'], result.evidence['val'])) == {
            'T1': 1,
            'T2': -1,
        }
        assert result.n_unmapped == 0

    def test_relations_unchanged_without_ambiguity(
        self, relations, evidence, entities,
    ):
        result = _validate(relations, evidence, entities)
        pd.testing.assert_frame_equal(result.relations, relations)

    def test_inputs_not_modified(self, relations, evidence, entities):
        relations = pd.concat(
            [relations, pd.DataFrame([('A', 'T1', 'decreases')],
                                     columns=relations.columns)],
            ignore_index=True,
        )
        before = (relations.copy(), evidence.copy(), entities.copy())

        _validate(relations, evidence, entities)

        pd.testing.assert_frame_equal(relations, before[0])
        pd.testing.assert_frame_equal(evidence, before[1])
        pd.testing.assert_frame_equal(entities, before[2])

    def test_evidence_column_order_free(self, relations, evidence, entities):
        shuffled = evidence[['pvalue', 'entrez', 'fc']]
        result = _validate(relations, shuffled, entities)
        assert len(result.evidence) == 2

    def test_fc_threshold_filter(self, relations, evidence, entities):
        evidence.loc[0, 'fc'] = 1.2
        result = _validate(relations, evidence, entities)
        assert list(result.evidence['uid']) == ['T2']

    def test_fc_threshold_inclusive(self, relations, evidence, entities):
        evidence.loc[0, 'fc'] = 1.3
        result = _validate(relations, evidence, entities)
        assert list(result.evidence['uid']) == ['T1', 'T2']

    def test_pvalue_threshold_filter(self, relations, evidence, entities):
        evidence.loc[1, 'pvalue'] = 0.02
        result = _validate(relations, evidence, entities)
        assert list(result.evidence['uid']) == ['T1']

    def test_log_fold_change_threshold(self, relations, evidence, entities):
        """With is_logfc the threshold is compared on log2 scale."""

        evidence['fc'] = [1.0, -0.9]
        result = _validate(
            relations, evidence, entities,
            fc_thresh=2.0, is_logfc=True,
        )
        assert list(result.evidence['uid']) == ['T1']

    def test_integer_fold_changes_accepted(self, relations, evidence, entities):
        evidence['fc'] = [2, -3]
        result = _validate(relations, evidence, entities)
        assert list(result.evidence['val']) == [1, -1]

    def test_unmapped_entrez_dropped_with_warning(
        self, relations, evidence, entities, caplog,
    ):
        extra = pd.DataFrame({'entrez': ['9999'], 'fc': [3.0], 'pvalue': [0.0]})
        evidence = pd.concat([evidence, extra], ignore_index=True)

        with caplog.at_level(logging.WARNING):
            result = _validate(relations, evidence, entities)

        assert result.n_unmapped == 1
        assert list(result.evidence['uid']) == ['T1', 'T2']
        assert '1 rows removed from evidence' in caplog.text

    def test_entrez_of_non_mrna_is_unmapped(self, relations, evidence, entities):
        """Only mRNA entities take part in entrez mapping."""

        extra = pd.DataFrame({'entrez': ['geneA'], 'fc': [3.0], 'pvalue': [0.0]})
        evidence = pd.concat([evidence, extra], ignore_index=True)

        result = _validate(relations, evidence, entities)
        assert result.n_unmapped == 1


class TestAmbiguityCollapse:

    def test_conflicting_modes_collapse(self, evidence, entities):
        relations = pd.DataFrame({
            'srcuid': ['A', 'A'],
            'trguid': ['T1', 'T1'],
            'mode': ['increases', 'decreases'],
        })

        result = _validate(relations, evidence, entities)

        assert result.relations.values.tolist() == [['A', 'T1', 'regulates']]

    def test_three_way_collapse_keeps_position(self, evidence, entities):
        relations = pd.DataFrame({
            'srcuid': ['A', 'A', 'A', 'A'],
            'trguid': ['T2', 'T1', 'T1', 'T1'],
            'mode': ['decreases', 'increases', 'regulates', 'decreases'],
        })

        result = _validate(relations, evidence, entities)

        assert result.relations.values.tolist() == [
            ['A', 'T2', 'decreases'],
            ['A', 'T1', 'regulates'],
        ]

    def test_pairs_of_different_sources_independent(self, evidence):
        entities = pd.DataFrame({
            'uid': ['A', 'B', 'T1', 'T2'],
            'id': ['a', 'b', '1001', '1002'],
            'symbol': ['A', 'B', 'T1', 'T2'],
            'type': ['protein', 'protein', 'mRNA', 'mRNA'],
        })
        relations = pd.DataFrame({
            'srcuid': ['A', 'B'],
            'trguid': ['T1', 'T1'],
            'mode': ['increases', 'decreases'],
        })

        result = _validate(relations, evidence, entities)

        assert list(result.relations['mode']) == ['increases', 'decreases']


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestSchema:

    def test_not_a_dataframe(self, relations, evidence, entities):
        with pytest.raises(SchemaError, match='relations'):
            _validate(relations.to_dict(), evidence, entities)

    def test_missing_column(self, relations, evidence, entities):
        with pytest.raises(SchemaError, match='evidence'):
            _validate(relations, evidence.drop(columns='pvalue'), entities)

    def test_extra_column(self, relations, evidence, entities):
        entities['extra'] = 'x'
        with pytest.raises(SchemaError, match='entities'):
            _validate(relations, evidence, entities)

    def test_misnamed_column(self, relations, evidence, entities):
        relations = relations.rename(columns={'mode': 'effect'})
        with pytest.raises(SchemaError):
            _validate(relations, evidence, entities)

    def test_errors_share_base_class(self, relations, evidence, entities):
        with pytest.raises(CREError):
            _validate(relations, evidence.drop(columns='fc'), entities)


class TestEmpty:

    def test_empty_table(self, relations, evidence, entities):
        with pytest.raises(EmptyInputError, match='evidence'):
            _validate(relations, evidence.iloc[0:0], entities)

    def test_no_mrna_entities(self, relations, evidence, entities):
        entities['type'] = 'protein'
        with pytest.raises(EmptyInputError, match='target'):
            _validate(relations, evidence, entities)

    def test_no_source_entities(self, relations, evidence, entities):
        entities['type'] = 'mRNA'
        with pytest.raises(EmptyInputError, match='source'):
            _validate(relations, evidence, entities)


class TestMissingValues:

    @pytest.mark.parametrize('table', ['relations', 'evidence', 'entities'])
    def test_na_present(self, relations, evidence, entities, table):
        tables = {
            'relations': relations,
            'evidence': evidence,
            'entities': entities,
        }
        frame = tables[table].astype(object)
        frame.iloc[0, 0] = None
        tables[table] = frame

        with pytest.raises(NAPresentError, match=table):
            _validate(**tables)


class TestDuplicates:

    def test_duplicate_relation_rows(self, relations, evidence, entities):
        relations = pd.concat([relations, relations.iloc[[0]]], ignore_index=True)
        with pytest.raises(DuplicateRowError, match='relations'):
            _validate(relations, evidence, entities)

    def test_duplicate_evidence_rows(self, relations, evidence, entities):
        evidence = pd.concat([evidence, evidence.iloc[[1]]], ignore_index=True)
        with pytest.raises(DuplicateRowError, match='evidence'):
            _validate(relations, evidence, entities)

    def test_duplicate_entrez(self, relations, evidence, entities):
        extra = pd.DataFrame({'entrez': ['1001'], 'fc': [5.0], 'pvalue': [0.0]})
        evidence = pd.concat([evidence, extra], ignore_index=True)
        with pytest.raises(DuplicateRowError, match='entrez'):
            _validate(relations, evidence, entities)

    def test_duplicate_uid(self, relations, evidence, entities):
        extra = pd.DataFrame({
            'uid': ['T1'], 'id': ['1003'], 'symbol': ['T1b'], 'type': ['mRNA'],
        })
        entities = pd.concat([entities, extra], ignore_index=True)
        with pytest.raises(DuplicateRowError, match='uid'):
            _validate(relations, evidence, entities)


class TestTypes:

    def test_fc_not_numeric(self, relations, evidence, entities):
        evidence['fc'] = ['2.0', '-2.5']
        with pytest.raises(ColumnTypeError, match='fc'):
            _validate(relations, evidence, entities)

    def test_boolean_pvalue_rejected(self, relations, evidence, entities):
        evidence['pvalue'] = [True, False]
        with pytest.raises(ColumnTypeError, match='pvalue'):
            _validate(relations, evidence, entities)

    def test_entrez_not_text(self, relations, evidence, entities):
        evidence['entrez'] = [1001, 1002]
        with pytest.raises(ColumnTypeError, match='entrez'):
            _validate(relations, evidence, entities)

    def test_entity_column_not_text(self, relations, evidence, entities):
        entities['symbol'] = [1, 2, 3]
        with pytest.raises(ColumnTypeError, match='symbol'):
            _validate(relations, evidence, entities)

    def test_relation_column_not_text(self, relations, evidence, entities):
        relations['mode'] = [1, -1]
        with pytest.raises(ColumnTypeError, match='mode'):
            _validate(relations, evidence, entities)

    def test_is_builtin_type_error(self, relations, evidence, entities):
        evidence['fc'] = ['a', 'b']
        with pytest.raises(TypeError):
            _validate(relations, evidence, entities)


class TestValues:

    @pytest.mark.parametrize('pvalue', [1.5, -0.1])
    def test_pvalue_out_of_range(self, relations, evidence, entities, pvalue):
        evidence.loc[0, 'pvalue'] = pvalue
        with pytest.raises(OutOfRangeValueError):
            _validate(relations, evidence, entities)

    @pytest.mark.parametrize('pvalue', [0.0, 1.0])
    def test_pvalue_bounds_inclusive(self, relations, evidence, entities, pvalue):
        evidence.loc[1, 'pvalue'] = pvalue
        _validate(relations, evidence, entities, pval_thresh=1.0)

    def test_invalid_mode(self, relations, evidence, entities):
        relations.loc[0, 'mode'] = 'activates'
        with pytest.raises(InvalidModeError, match='activates'):
            _validate(relations, evidence, entities)


class TestIdentifiers:

    def test_target_not_in_entities(self, relations, evidence, entities):
        relations.loc[0, 'trguid'] = 'T9'
        with pytest.raises(UnmappedIdentifierError, match='trguid'):
            _validate(relations, evidence, entities)

    def test_target_not_mrna(self, relations, evidence, entities):
        extra = pd.DataFrame({
            'uid': ['B'], 'id': ['geneB'], 'symbol': ['B'], 'type': ['protein'],
        })
        entities = pd.concat([entities, extra], ignore_index=True)
        relations.loc[0, 'trguid'] = 'B'
        with pytest.raises(UnmappedIdentifierError, match='trguid'):
            _validate(relations, evidence, entities)

    def test_source_not_in_entities(self, relations, evidence, entities):
        relations.loc[0, 'srcuid'] = 'Z'
        with pytest.raises(UnmappedIdentifierError, match='srcuid'):
            _validate(relations, evidence, entities)

    def test_source_is_mrna(self, relations, evidence, entities):
        relations.loc[0, 'srcuid'] = 'T2'
        with pytest.raises(UnmappedIdentifierError, match='srcuid'):
            _validate(relations, evidence, entities)

    def test_ambiguous_entrez_mapping(self, relations, evidence, entities):
        extra = pd.DataFrame({
            'uid': ['T3'], 'id': ['1001'], 'symbol': ['T3'], 'type': ['mRNA'],
        })
        entities = pd.concat([entities, extra], ignore_index=True)
        with pytest.raises(AmbiguousIdentifierMappingError, match='1001'):
            _validate(relations, evidence, entities)


class TestNoData:

    def test_nothing_passes_thresholds(self, relations, evidence, entities):
        with pytest.raises(NoDataAfterFilteringError, match='thresh'):
            _validate(relations, evidence, entities, pval_thresh=0.0001)

    def test_nothing_maps(self, relations, evidence, entities):
        evidence['entrez'] = ['5', '6']
        with pytest.raises(NoDataAfterFilteringError, match='entrez'):
            _validate(relations, evidence, entities)
