"""
StrandLink v0.1.0

Configuration schema for StrandLink.

Defines all available configuration parameters with defaults and validation.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml

from strandlink.assembly_core.data_structures import OverlapConfig
from strandlink.errors import ConfigError


VALID_FORMATS = ['adj', 'dot', 'sam', 'gfa']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Overlap detection
    # ========================================================================
    'overlap': {
        'k': None,  # Required; overlaps are exactly k-1 residues
        'colour_space': None,  # None = detect from the first fragment
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'format': 'adj',  # 'adj', 'dot', 'sam', 'gfa'
        'path': None,  # None = standard output
        'stats_file': None,  # Optional JSON statistics

        # Logging
        'logging': {
            'level': 'WARNING',  # 'DEBUG', 'INFO', 'WARNING', 'ERROR'
            'log_file': None,
        },
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If the file is missing or is not a YAML mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")
        try:
            with open(config_path) as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {config_path}: {e}")

        if user_config is None:
            return config
        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        # Deep merge user config into defaults
        config = _deep_merge(config, user_config)

        # An empty section such as "overlap:" replaces the defaults with None
        errors = _check_sections(config, DEFAULT_CONFIG)
        if errors:
            raise ConfigError(f"Invalid config file {config_path}: {'; '.join(errors)}")

    return config


def _check_sections(config: Dict, defaults: Dict, prefix: str = '') -> List[str]:
    """
    Check that every section of the defaults is still a mapping.

    Returns:
        List of errors, one per section that is not a mapping
    """
    errors = []
    for key, default in defaults.items():
        if not isinstance(default, dict):
            continue
        name = f"{prefix}{key}"
        section = config.get(key)
        if not isinstance(section, dict):
            errors.append(f"Section '{name}' must be a mapping, got {section!r}")
        else:
            errors.extend(_check_sections(section, default, prefix=f"{name}."))
    return errors


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_overrides(config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply command-line overrides to a configuration.

    Keys use dotted notation (e.g. 'overlap.k'); None values are skipped so
    options the user did not give keep the file or default value.
    """
    config = copy.deepcopy(config)
    for key, value in overrides.items():
        if value is None:
            continue
        keys = key.split('.')
        target = config
        for k in keys[:-1]:
            target = target.setdefault(k, {})
        target[keys[-1]] = value
    return config


def save_config_template(output_path: Path, k: Optional[int] = None):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        k: Optional k to pre-fill
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config['overlap']['k'] = k

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = _check_sections(config, DEFAULT_CONFIG)
    if errors:
        return errors

    k = config.get('overlap', {}).get('k')
    if k is None:
        errors.append("Missing overlap.k (k-mer size)")
    elif isinstance(k, bool) or not isinstance(k, int) or k < 2:
        errors.append(f"Invalid overlap.k: {k!r} (must be an integer >= 2)")

    colour_space = config.get('overlap', {}).get('colour_space')
    if colour_space is not None and not isinstance(colour_space, bool):
        errors.append(f"Invalid overlap.colour_space: {colour_space!r} (must be true, false or null)")

    output = config.get('output', {})
    if output.get('format') not in VALID_FORMATS:
        errors.append(f"Invalid output.format: {output.get('format')!r}")

    level = output.get('logging', {}).get('level')
    if level not in VALID_LOG_LEVELS:
        errors.append(f"Invalid output.logging.level: {level!r}")

    return errors


def overlap_config_from(config: Dict[str, Any]) -> OverlapConfig:
    """
    Build the explicit run configuration from a configuration dictionary.

    Raises:
        ConfigError: If the configuration does not validate
    """
    errors = validate_config(config)
    if errors:
        raise ConfigError('; '.join(errors))
    overlap = config['overlap']
    return OverlapConfig(k=overlap['k'], colour_space=overlap.get('colour_space'))
