"""
Configuration loader for YAML-based CLI settings.

Lets the CLI pick a custom registry file, output format and log level
without repeating command-line flags.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..exceptions import ValidationError

OUTPUT_FORMATS = ("text", "json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "registry": {
        "path": None,
    },
    "output": {
        "format": "text",
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config format is invalid

    Example:
        >>> config = load_config("cve-projects.yaml")
        >>> print(config["output"]["format"])
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Create a config file using: cve-projects init-config"
        )

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except UnicodeDecodeError as e:
        raise ValidationError(f"Config file is not valid UTF-8: {e}")
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in config file: {e}")

    if not isinstance(config, dict):
        raise ValidationError("Config file must contain a YAML dictionary")

    return config


def merge_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Fill missing sections and keys from DEFAULT_CONFIG.

    Args:
        config: Partial configuration (may be None)

    Returns:
        New dictionary; `config` is left untouched
    """
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in (config or {}).items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid

    Raises:
        ValidationError: If configuration is invalid
    """
    for section in DEFAULT_CONFIG:
        if section in config and not isinstance(config[section], dict):
            raise ValidationError(f"'{section}' must be a mapping")

    registry_path = config.get("registry", {}).get("path")
    if registry_path is not None and not isinstance(registry_path, str):
        raise ValidationError("registry.path must be a file path or null")

    output_format = config.get("output", {}).get("format", "text")
    if output_format not in OUTPUT_FORMATS:
        raise ValidationError(
            f"output.format must be one of: {', '.join(OUTPUT_FORMATS)} (got {output_format!r})"
        )

    level = config.get("logging", {}).get("level", "WARNING")
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise ValidationError(f"logging.level is not a valid log level: {level!r}")

    return True


def create_default_config(output_path: str = "cve-projects.yaml"):
    """
    Create a default configuration file with all options.

    Args:
        output_path: Where to save the config file

    Example:
        >>> create_default_config("my-config.yaml")
    """
    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
