# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Configuration management utilities for the pdf_ua_generator package.

This module resolves document settings from the built-in defaults, an optional
configuration file, PDF_UA_* environment variables and explicit options, in
that order of precedence.
"""

import os
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional, Mapping, Union

from pdf_ua_generator.logging_helper import setup_logger, ConfigurationError
from pdf_ua_generator.models import DEFAULT_CONFIG, DocumentConfig

# Configure module-level logger
logger = setup_logger(__name__)

ENV_PREFIX = "PDF_UA_"


class ConfigManager:
    """
    Configuration manager for document settings.

    This class handles:
    - Default options
    - Options loaded from a configuration file
    - Environment variables
    - Option validation
    - Option merging and cascade
    """

    def __init__(
        self,
        defaults: Optional[DocumentConfig] = None,
        env_prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize a configuration manager.

        Args:
            defaults: Base settings (default: DEFAULT_CONFIG)
            env_prefix: Prefix for environment variables
            environ: Environment to read (default: os.environ)
        """
        self.defaults = defaults or DEFAULT_CONFIG
        self.env_prefix = env_prefix
        self.environ = environ
        self.user_config: Dict[str, Any] = {}

    def set_user_config(self, config: Mapping[str, Any]) -> None:
        """
        Set persistent user configuration, e.g. the contents of a config file.

        Args:
            config: Dictionary of configuration options
        """
        for key, value in config.items():
            if key == "margins" and isinstance(value, Mapping):
                margins = dict(self.user_config.get("margins", {}))
                margins.update(value)
                self.user_config["margins"] = margins
            else:
                self.user_config[key] = value

    def get_config(self, user_options: Optional[Mapping[str, Any]] = None) -> DocumentConfig:
        """
        Get the resolved configuration.

        Args:
            user_options: Option overrides with the highest precedence; None
                values are ignored

        Returns:
            The resolved DocumentConfig

        Raises:
            ConfigurationError: If a resolved value is invalid
        """
        config = self.defaults.model_dump()

        _merge_options(config, self.user_config)
        self._apply_env_vars(config)

        if user_options:
            _merge_options(
                config, {k: v for k, v in user_options.items() if v is not None}
            )

        return self.defaults.merged(config)

    def _apply_env_vars(self, config: Dict[str, Any]) -> None:
        """
        Apply relevant environment variables to the configuration.

        Margins are read from <prefix>MARGINS_LEFT, <prefix>MARGINS_TOP, etc.

        Args:
            config: Configuration dictionary to update
        """
        environ = os.environ if self.environ is None else self.environ

        for option_name, existing_value in config.items():
            if option_name == "margins":
                for side, side_value in existing_value.items():
                    env_var = f"{self.env_prefix}MARGINS_{side.upper()}"
                    if env_var in environ:
                        existing_value[side] = _convert(env_var, environ[env_var], side_value)
                continue

            env_var = f"{self.env_prefix}{option_name.upper()}"
            if env_var in environ:
                config[option_name] = _convert(env_var, environ[env_var], existing_value)
                logger.debug(f"Applied environment variable {env_var}")


def _merge_options(config: Dict[str, Any], options: Mapping[str, Any]) -> None:
    """Merge options into config; margins are merged per side."""
    for key, value in options.items():
        if key == "margins" and isinstance(value, Mapping):
            config["margins"] = {**config.get("margins", {}), **value}
        else:
            config[key] = value


def _convert(env_var: str, value: str, existing_value: Any) -> Any:
    """Convert an environment string to the type of the existing value."""
    existing_type = type(existing_value)

    try:
        if existing_type == bool:
            # Special handling for booleans
            return value.lower() in ("true", "1", "yes", "y")
        elif existing_type == int:
            return int(value)
        elif existing_type == float:
            return float(value)
    except (ValueError, TypeError) as e:
        raise ConfigurationError(
            f"Could not convert environment variable {env_var} to {existing_type.__name__}"
        ) from e

    return value


def load_config_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML (.yaml, .yml) and JSON (.json) formats.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration options

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    if path.suffix.lower() not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. "
            "Supported formats: YAML (.yaml, .yml), JSON (.json)"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )
    return data


def save_config(
    config: DocumentConfig, file_path: Union[str, Path], file_format: str = "yaml"
) -> None:
    """
    Save configuration to a file.

    Args:
        config: Settings to save
        file_path: Path to save the configuration file
        file_format: File format ('yaml' or 'json')

    Raises:
        ConfigurationError: If file cannot be written
    """
    if file_format.lower() not in ("yaml", "json"):
        raise ConfigurationError(f"Unsupported format: {file_format}")

    data = config.model_dump()
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            if file_format.lower() == "yaml":
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(data, f, indent=2)
        logger.info(f"Configuration saved to {file_path}")
    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}") from e


def resolve_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    defaults: Optional[DocumentConfig] = None,
) -> DocumentConfig:
    """
    Resolve settings from defaults, a config file, the environment and overrides.

    Args:
        config_file: Optional YAML/JSON file of settings
        overrides: Explicit settings (highest precedence, None values ignored)
        environ: Environment to read (default: os.environ)
        defaults: Base settings (default: DEFAULT_CONFIG)

    Returns:
        The resolved DocumentConfig
    """
    manager = ConfigManager(defaults=defaults, environ=environ)
    if config_file:
        manager.set_user_config(load_config_file(config_file))
    return manager.get_config(overrides)
