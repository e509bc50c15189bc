"""Configuration module for the justification engine."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = Path(__file__).parent / 'default.yaml'


class ConfigError(Exception):
    """Exception raised when a configuration file is invalid."""
    pass


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. Uses default.yaml if not specified.

    Returns:
        Dictionary containing configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigError: If the config file is invalid YAML or not a mapping.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Configuration in {path} must be a mapping, got {type(config).__name__}"
        )

    return config


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two configuration dictionaries.

    Args:
        base: Configuration providing the defaults.
        override: Configuration whose values win.

    Returns:
        New merged dictionary; the inputs are left untouched.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_config_value(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary.
        key_path: Dot-separated path to the value (e.g., 'justify.line_width').
        default: Default value if key is not found.

    Returns:
        The configuration value or default.
    """
    keys = key_path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


__all__ = [
    'load_config',
    'merge_config',
    'get_config_value',
    'ConfigError',
    'DEFAULT_CONFIG_PATH',
]
