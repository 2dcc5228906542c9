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

"""Package metadata (version, authors, etc)."""

__all__ = ['__version__', '__author__', '__license__']

import importlib.metadata

_DIST_NAME = 'causal_regulators'
_SOURCE_VERSION = '0.1.0'


def _version() -> str:
    """Installed distribution version, or the source tree version."""

    try:
        return importlib.metadata.version(_DIST_NAME)
    except importlib.metadata.PackageNotFoundError:
        return _SOURCE_VERSION


__version__ = _version()

__author__ = 'OmniPath Team'
__license__ = 'BSD-3-Clause'
