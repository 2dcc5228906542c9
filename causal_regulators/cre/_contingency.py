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

"""Cross-tabulation of predicted signs against observed values."""

from __future__ import annotations

__all__ = ['count_contingency']

from ._record import ContingencyTable, SourceIndex

_LEVELS = (1, -1, 0)


def count_contingency(source: SourceIndex) -> ContingencyTable:
    """
    Count children and non-children of a source node by value.

    The nine child cells are ordered by predicted sign (increases,
    decreases, regulates) and within that by observed value (up, down,
    none); the three non-child cells by observed value only.

    Args:
        source: Index entry of one source node.

    Returns:
        The twelve counts.
    """

    signs = source.child_signs
    values = source.child_values
    others = source.non_child_values

    child_cells = [
        int(((signs == sign) & (values == value)).sum())
        for sign in _LEVELS
        for value in _LEVELS
    ]
    other_cells = [int((others == value).sum()) for value in _LEVELS]

    return ContingencyTable(*child_cells, *other_cells)
