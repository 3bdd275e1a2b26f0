"""
Run configuration.

Loaded from YAML (config/default.yaml by convention) and merged onto
DEFAULTS. Command-line options are applied on top by the caller.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError

DEFAULTS: Dict[str, Any] = {
    'limit': None,
    'output': None,
    'prompt': True,
    'verify': False,
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a YAML config file and merge it onto DEFAULTS.

    Parameters
    ----------
    path : str or Path, optional
        Config file. None returns a copy of DEFAULTS.

    Returns
    -------
    dict
        Complete configuration.

    Raises
    ------
    ConfigError
        If the file is missing, not valid YAML, not a mapping, or has
        unknown keys, or if prompt/verify are not booleans.
    """
    config = dict(DEFAULTS)
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(loaded).__name__}")

    unknown = sorted(set(loaded) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    for key in ('prompt', 'verify'):
        if key in loaded and not isinstance(loaded[key], bool):
            raise ConfigError(f"'{key}' in {path} must be true or false, got {loaded[key]!r}")
    if loaded.get('output') is not None and not isinstance(loaded['output'], str):
        raise ConfigError(f"'output' in {path} must be a file name, got {loaded['output']!r}")

    config.update(loaded)
    return config
