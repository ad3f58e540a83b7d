"""
Run configuration.

Settings live in a YAML file (config/default.yaml). Values missing from
the file fall back to DEFAULT_CONFIG.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .sieve import MAX_BOUND

DEFAULT_CONFIG: Dict[str, Any] = {
    "N": 1_000_000,
    "checked": False,
    "verbose": False,
    "sample_size": 10_000,
    "seed": 42,
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration, overlaying a YAML file on the defaults.

    Parameters
    ----------
    path : str or Path, optional
        YAML file to read. If None, the defaults are returned.

    Returns
    -------
    dict
        Validated configuration.

    Raises
    ------
    FileNotFoundError
        If path does not exist.
    ValueError
        If the file is not a mapping, has unknown keys, or holds
        out-of-range values.
    """
    config = dict(DEFAULT_CONFIG)

    if path is not None:
        with open(path) as f:
            loaded = yaml.safe_load(f)

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{path}: expected a mapping, got {type(loaded).__name__}")

        unknown = set(loaded) - set(DEFAULT_CONFIG)
        if unknown:
            raise ValueError(f"{path}: unknown keys {sorted(unknown)}")
        config.update(loaded)

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]):
    """Raise ValueError if any setting is out of range."""
    N = config["N"]
    if isinstance(N, bool) or not isinstance(N, int):
        raise ValueError(f"N must be an integer, got {N!r}")
    if not 0 <= N <= MAX_BOUND:
        raise ValueError(f"N={N} is outside [0, {MAX_BOUND}]")

    sample_size = config["sample_size"]
    if isinstance(sample_size, bool) or not isinstance(sample_size, int) or sample_size < 0:
        raise ValueError(f"sample_size must be a non-negative integer, got {sample_size!r}")

    for key in ("checked", "verbose"):
        if not isinstance(config[key], bool):
            raise ValueError(f"{key} must be true or false, got {config[key]!r}")

    seed = config["seed"]
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"seed must be an integer, got {seed!r}")
