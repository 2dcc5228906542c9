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
Causal relation engine configuration.

Built-in defaults come from a YAML file shipped with the package.  Any
number of override layers (dicts or YAML files) and keyword arguments
can be stacked on top of them.
"""

from __future__ import annotations

__all__ = ['config', 'default_config', 'CONFIG_KEYS']

import copy
from typing import TYPE_CHECKING

import yaml

from .data import data_path

if TYPE_CHECKING:
    from pathlib import Path


CONFIG_KEYS = frozenset({
    'method',
    'fc_thresh',
    'is_logfc',
    'pval_thresh',
    'progress',
})


def default_config() -> dict:
    """
    Load the built-in default configuration.

    Returns:
        Dict with the default engine settings.
    """

    return _load_yaml(data_path('default_config.yaml'))


def config(
    *args: dict | Path | str,
    **kwargs,
) -> dict:
    """
    Build a configuration by merging defaults with overrides.

    Positional arguments are applied first (dicts or YAML file paths),
    then keyword arguments are merged as a final layer.

    Args:
        *args:
            Dicts or paths to YAML files.  Later values take
            precedence over earlier ones.
        **kwargs:
            Config keys merged last.

    Returns:
        Merged configuration dict.

    Raises:
        ValueError: If any layer contains a key the engine does not
            know, or if the fold change threshold cannot be log
            transformed.

    Examples::

        # Use all defaults
        cfg = config()

        # Ternary statistic on linear fold changes
        cfg = config(method='Ternary', is_logfc=False)

        # Load from a YAML file, then override
        cfg = config('my_config.yaml', pval_thresh=0.05)
    """

    result = default_config()

    for arg in args:
        if isinstance(arg, dict):
            layer = arg
        else:
            layer = _load_yaml(arg)

        _deep_merge(result, layer)

    if kwargs:
        _deep_merge(result, kwargs)

    _check(result)

    return result


def _check(cfg: dict) -> None:
    """Reject unknown keys and thresholds that cannot be used."""

    unknown = set(cfg) - CONFIG_KEYS

    if unknown:
        raise ValueError(
            f'Unknown config key(s): {sorted(unknown)}. '
            f'Available: {sorted(CONFIG_KEYS)}'
        )

    if cfg['is_logfc'] and not cfg['fc_thresh'] > 0:
        raise ValueError(
            'fc_thresh must be positive when is_logfc is True, '
            f'got {cfg["fc_thresh"]!r}.'
        )


def _load_yaml(path: Path | str) -> dict:
    """Load a YAML file and return its contents as a dict."""

    with open(path) as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Recursively merge *override* into *base* in place.

    For nested dicts, values are merged recursively. For all other
    types (including lists), the override value replaces the base.

    Returns:
        The mutated *base* dict.
    """

    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)

    return base
