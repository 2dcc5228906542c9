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
Errors raised by the causal relation engine.

Every failure aborts the whole call.  All classes derive from
:class:`CREError`, itself a :class:`ValueError`, so callers can catch
either.
"""

from __future__ import annotations

__all__ = [
    'CREError',
    'SchemaError',
    'ColumnTypeError',
    'EmptyInputError',
    'NAPresentError',
    'DuplicateRowError',
    'OutOfRangeValueError',
    'UnmappedIdentifierError',
    'AmbiguousIdentifierMappingError',
    'InvalidModeError',
    'InvalidMethodError',
    'NoDataAfterFilteringError',
]


class CREError(ValueError):
    """Base class of all input and configuration errors."""


class SchemaError(CREError):
    """Input is not a table or does not have the expected columns."""


class ColumnTypeError(CREError, TypeError):
    """A column has the wrong data type."""


class EmptyInputError(CREError):
    """A table, or a required subset of it, has no rows."""


class NAPresentError(CREError):
    """A table contains missing values."""


class DuplicateRowError(CREError):
    """A table contains duplicated rows or duplicated identifiers."""


class OutOfRangeValueError(CREError):
    """An evidence p-value lies outside of [0, 1]."""


class UnmappedIdentifierError(CREError):
    """A relation refers to an identifier missing from the entities."""


class AmbiguousIdentifierMappingError(CREError):
    """An entrez id maps to more than one mRNA entity."""


class InvalidModeError(CREError):
    """A relation mode is not one of increases, decreases, regulates."""


class InvalidMethodError(CREError):
    """The requested statistic is not available."""


class NoDataAfterFilteringError(CREError):
    """No evidence is left after thresholding or identifier mapping."""
