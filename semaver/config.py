"""
Configuration management for semaver.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Dict, Optional

from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger('config')

OUTPUT_FORMATS = ('text', 'json')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ParserConfig:
    """Configuration for version parsing."""
    allow_prefix: bool = True  # Accept "v1.2.3"


@dataclass
class OutputConfig:
    """Configuration for command line output."""
    default_format: str = "text"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    parser: ParserConfig = field(default_factory=ParserConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Config object with loaded settings

    Raises:
        ConfigurationError: If configuration file is invalid
    """
    config = Config()

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", file_path=config_path)
        except OSError as e:
            raise ConfigurationError(f"Cannot read file: {e}", file_path=config_path)

        if config_data:
            if not isinstance(config_data, dict):
                raise ConfigurationError("Top level must be a mapping", file_path=config_path)
            _update_config_from_dict(config, config_data)
            logger.info(f"Loaded configuration from {config_path}")

    elif config_path:
        logger.warning(f"Configuration file not found: {config_path}")

    validation_errors = validate_config(config)
    if validation_errors:
        raise ConfigurationError("\n".join(validation_errors), file_path=config_path)

    return config


def _section(config_data: Dict, name: str) -> Dict:
    data = config_data.get(name) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Section '{name}' must be a mapping")
    return data


def _update_config_from_dict(config: Config, config_data: Dict) -> None:
    """
    Update configuration object from dictionary data.

    Args:
        config: Config object to update
        config_data: Dictionary with configuration data
    """
    parser_data = _section(config_data, 'parser')
    if 'allow_prefix' in parser_data:
        config.parser.allow_prefix = parser_data['allow_prefix']

    output_data = _section(config_data, 'output')
    if 'default_format' in output_data:
        config.output.default_format = output_data['default_format']

    logging_data = _section(config_data, 'logging')
    if 'level' in logging_data:
        config.logging.level = logging_data['level']
    if 'log_file' in logging_data:
        config.logging.log_file = logging_data['log_file']
    if 'verbose' in logging_data:
        config.logging.verbose = logging_data['verbose']


def validate_config(config: Config) -> list:
    """
    Check configuration values.

    Returns:
        List of error messages, empty when the configuration is valid
    """
    errors = []

    if not isinstance(config.parser.allow_prefix, bool):
        errors.append(f"parser.allow_prefix must be true or false, got {config.parser.allow_prefix!r}")

    if config.output.default_format not in OUTPUT_FORMATS:
        errors.append(f"output.default_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                      f"got {config.output.default_format!r}")

    if not isinstance(config.logging.level, str) or config.logging.level.upper() not in LOG_LEVELS:
        errors.append(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {config.logging.level!r}")

    if not isinstance(config.logging.verbose, bool):
        errors.append(f"logging.verbose must be true or false, got {config.logging.verbose!r}")

    if config.logging.log_file is not None and not isinstance(config.logging.log_file, str):
        errors.append(f"logging.log_file must be a path, got {config.logging.log_file!r}")

    return errors


def get_default_config_path() -> Optional[str]:
    """
    Get the default configuration file path.

    Returns:
        Path to default config file if it exists, None otherwise
    """
    possible_paths = [
        'semaver.yaml',
        'semaver.yml',
        os.path.expanduser('~/.semaver.yaml'),
        os.path.expanduser('~/.semaver.yml'),
    ]

    for path in possible_paths:
        if os.path.exists(path):
            return path

    return None
