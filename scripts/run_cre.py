#!/usr/bin/env python

"""
Score the source nodes of a causal network against expression evidence.

Pipeline::

    read tables → score() → write ranked table

Usage::

    python scripts/run_cre.py \\
        --relations relations.csv \\
        --evidence evidence.csv \\
        --entities entities.csv

    # Ternary statistic, linear fold changes, TSV output
    python scripts/run_cre.py \\
        --relations relations.tsv --evidence evidence.tsv \\
        --entities entities.tsv --method Ternary --no-logfc \\
        --output cre_results.tsv

    # Settings from a YAML file, progress bar on
    python scripts/run_cre.py ... --config my_config.yaml --progress

Input tables
------------
``relations``  ``srcuid``, ``trguid``, ``mode``
``evidence``   ``entrez``, ``fc``, ``pvalue``
``entities``   ``uid``, ``id``, ``symbol``, ``type``

Identifier columns are read as text.  The separator of every file is
chosen by its extension: ``.tsv`` / ``.txt`` → tab, otherwise comma.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description='Score regulators of a causal network.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # --- inputs --------------------------------------------------------------
    p.add_argument('--relations', required=True, help='Relations table.')
    p.add_argument('--evidence', required=True, help='Evidence table.')
    p.add_argument('--entities', required=True, help='Entities table.')

    # --- settings ------------------------------------------------------------
    p.add_argument(
        '--config', default=None,
        help='YAML file with engine settings; command line options win.',
    )
    p.add_argument(
        '--method', choices=['Quaternary', 'Ternary', 'Enrichment'],
        default=None,
        help='Scoring statistic (default from config: Quaternary).',
    )
    p.add_argument(
        '--fc-thresh', type=float, default=None,
        help='Minimum absolute fold change (default from config: 1.3).',
    )
    p.add_argument(
        '--no-logfc', action='store_true',
        help='Fold changes in the evidence are linear, not log2.',
    )
    p.add_argument(
        '--pval-thresh', type=float, default=None,
        help='Maximum evidence p-value (default from config: 0.01).',
    )
    p.add_argument('--progress', action='store_true', help='Show progress.')

    # --- output --------------------------------------------------------------
    p.add_argument(
        '--output', default='cre_results.csv',
        help=(
            'Output file path.  Extension determines the separator: '
            '.tsv / .txt → tab-separated; everything else → comma-separated.'
        ),
    )
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logs.')

    return p.parse_args()


def _separator(path: str) -> str:
    suffix = Path(path).suffix.lower()
    if suffix in {'.tsv', '.txt'}:
        return '\t'
    return ','


def _read(path: str, text_columns: list[str]):
    import pandas as pd

    return pd.read_csv(
        path,
        sep=_separator(path),
        dtype={col: str for col in text_columns},
        keep_default_na=False,
        na_values=[''],
    )


def _settings(args: argparse.Namespace) -> dict:
    kwargs: dict = {}

    if args.method is not None:
        kwargs['method'] = args.method
    if args.fc_thresh is not None:
        kwargs['fc_thresh'] = args.fc_thresh
    if args.no_logfc:
        kwargs['is_logfc'] = False
    if args.pval_thresh is not None:
        kwargs['pval_thresh'] = args.pval_thresh
    if args.progress:
        kwargs['progress'] = True

    return kwargs


def main() -> None:
    from causal_regulators.cre import score

    args = _parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # ------------------------------------------------------------------
    # 1. Read inputs
    # ------------------------------------------------------------------
    relations = _read(args.relations, ['srcuid', 'trguid', 'mode'])
    evidence = _read(args.evidence, ['entrez'])
    entities = _read(args.entities, ['uid', 'id', 'symbol', 'type'])
    print(
        f'Read {len(relations):,} relations, {len(evidence):,} evidence rows, '
        f'{len(entities):,} entities'
    )

    # ------------------------------------------------------------------
    # 2. Score
    # ------------------------------------------------------------------
    layers = [args.config] if args.config else []
    results = score(relations, evidence, entities, *layers, **_settings(args))

    # ------------------------------------------------------------------
    # 3. Write output
    # ------------------------------------------------------------------
    out_path = Path(args.output)
    results.to_csv(out_path, sep=_separator(args.output), index=False)
    print(f'\nSaved to {out_path}  ({len(results):,} rows)')

    print('\nTop regulators:')
    for _, row in results.head(10).iterrows():
        print(
            f'  {row["name"]:<20} {row["regulation"]:<5} '
            f'score {row["score"]:>5}  p = {row["pvalue"]:.3g}'
        )


if __name__ == '__main__':
    main()
