"""
Configuration loading for compose-executor.

Settings come from an optional YAML file, then from environment variables
(a ``.env`` file in the working directory is loaded first).
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigError
from .invoker import DEFAULT_RUNTIME
from .registry import DEFAULT_SERVICES

logger = logging.getLogger('compose_executor.config')

CONFIG_ENV_VAR = "COMPOSE_EXECUTOR_CONFIG"
RUNTIME_ENV_VAR = "COMPOSE_EXECUTOR_RUNTIME"
LOG_DIR_ENV_VAR = "COMPOSE_EXECUTOR_LOG_DIR"


def default_log_dir() -> Path:
    return Path.home() / '.compose-executor' / 'logs'


@dataclass
class ExecutorConfig:
    runtime: str = DEFAULT_RUNTIME
    services: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SERVICES))
    log_dir: Path = field(default_factory=default_log_dir)


def _read_config_file(path: Path) -> dict:
    """Load and parse a YAML configuration file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse configuration file {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    return data


def _validate_services(services) -> Dict[str, str]:
    if not isinstance(services, dict):
        raise ConfigError("'services' must be a mapping of service key to container name")
    for key, container in services.items():
        if not isinstance(key, str) or not isinstance(container, str) or not container:
            raise ConfigError(f"Invalid service entry: {key!r}: {container!r}")
    return dict(services)


def load_config(path: Optional[Union[str, Path]] = None,
                env_file: Optional[Union[str, Path]] = None) -> ExecutorConfig:
    """
    Build the executor configuration.

    Args:
        path: YAML configuration file. Falls back to $COMPOSE_EXECUTOR_CONFIG;
              without either the built-in defaults are used.
        env_file: Optional .env file to load instead of .env in the
                  working directory

    Returns:
        The resolved ExecutorConfig

    Raises:
        ConfigError: If the file is missing, malformed or has invalid values
    """
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env")

    config = ExecutorConfig()
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    if path is not None:
        data = _read_config_file(Path(path))
        if 'runtime' in data:
            if not isinstance(data['runtime'], str) or not data['runtime'].strip():
                raise ConfigError("'runtime' must be a non-empty string")
            config.runtime = data['runtime'].strip()
        if 'services' in data:
            config.services = _validate_services(data['services'])
        logger.debug(f"Loaded configuration from {path}")

    runtime = os.environ.get(RUNTIME_ENV_VAR)
    if runtime:
        config.runtime = runtime
    log_dir = os.environ.get(LOG_DIR_ENV_VAR)
    if log_dir:
        config.log_dir = Path(log_dir)

    return config
