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

"""Data files shipped with the causal relation engine."""

from pathlib import Path


DATA_DIR = Path(__file__).parent


def data_path(filename: str) -> Path:
    """
    Path to a file shipped in the engine's data directory.

    Raises:
        FileNotFoundError: If the package has no such data file.
    """

    path = DATA_DIR / filename

    if not path.is_file():
        raise FileNotFoundError(
            f'No data file {filename!r} in {DATA_DIR}. '
            f'Available: {sorted(p.name for p in DATA_DIR.glob("*.yaml"))}'
        )

    return path
