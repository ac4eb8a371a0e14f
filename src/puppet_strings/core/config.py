"""Configuration management for puppet-strings."""

import os
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from puppet_strings.core.exceptions import ConfigurationError
from puppet_strings.core.logging import configure_logging
from puppet_strings.models.config import StringsConfig

CONFIG_ENV_VAR = "PUPPET_STRINGS_CONFIG"


def _read_config_data(config_path: str) -> Dict[str, Any]:
    """Load the YAML mapping from a config file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, empty or not a mapping
    """
    if not os.path.exists(config_path):
        raise ConfigurationError(config_path, "File does not exist")
    if not os.path.isfile(config_path):
        raise ConfigurationError(config_path, "Path is not a file")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(config_path, f"YAML parsing failed: {e}") from e
    except OSError as e:
        raise ConfigurationError(config_path, f"Failed to read file: {e}") from e

    if config_data is None:
        raise ConfigurationError(config_path, "Config file is empty")
    if not isinstance(config_data, dict):
        raise ConfigurationError(config_path, "Config must be a YAML dictionary")
    return config_data


def _describe_validation_error(error: ValidationError) -> str:
    """One ``field: message`` entry per failing field, e.g. ``json_indent: Input should be ...``."""
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "config"
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)


def validate_config_file(config_path: str) -> StringsConfig:
    """Validate a puppet-strings YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated StringsConfig model

    Raises:
        ConfigurationError: If config file is invalid
    """
    config_data = _read_config_data(config_path)
    try:
        return StringsConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationError(config_path, f"Validation failed: {_describe_validation_error(e)}") from e


def resolve_config_path(flag_value: Optional[str] = None) -> Optional[str]:
    """Resolve the config file path.

    Precedence: --config flag > PUPPET_STRINGS_CONFIG env > None
    """
    return flag_value or os.environ.get(CONFIG_ENV_VAR) or None


def load_config(flag_value: Optional[str] = None) -> StringsConfig:
    """Load the configuration, falling back to defaults when no file is given.

    Raises:
        ConfigurationError: If a config file is given but invalid
    """
    config_path = resolve_config_path(flag_value)
    if config_path is None:
        return StringsConfig()
    return validate_config_file(config_path)


def configure_logging_from_args(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure logging from flags and environment.

    Precedence: --log-level/--log-file flags > LOG_LEVEL/LOG_FILE env > defaults
    """
    level = log_level or os.environ.get("LOG_LEVEL", "INFO")
    file = log_file or os.environ.get("LOG_FILE")
    configure_logging(log_level=level, log_file=file)
