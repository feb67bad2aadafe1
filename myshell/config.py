"""
Configuration management for MyShell

Settings come from an optional YAML file and a couple of environment
variables. Everything has a working default so the shell runs without any
configuration at all.
"""

import os
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger('MyShell.config')

DEFAULT_CONFIG_PATH = '~/.config/myshell/config.yaml'
CONFIG_ENV = 'MYSHELL_CONFIG'
LOG_FILE_ENV = 'MYSHELL_LOG_FILE'

@dataclass
class ShellConfig:
    """Runtime settings for a shell session"""
    log_file: str = '~/.myshell.log'
    history_file: str = '~/.myshell_history'
    prompt: str = 'MyShell> '
    editor: str = 'nano'
    sudo_command: str = 'sudo'
    # Arguments that make sudo_command check credentials without running anything
    sudo_validate: str = '-v'

    def __post_init__(self):
        self.log_file = os.path.expanduser(self.log_file)
        self.history_file = os.path.expanduser(self.history_file)

def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data

def load_config(path: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None) -> ShellConfig:
    """
    Load shell configuration

    Args:
        path: Explicit config file; must exist when given
        environ: Environment to read overrides from (defaults to os.environ)

    Returns:
        A populated ShellConfig
    """
    environ = os.environ if environ is None else environ

    explicit = path or environ.get(CONFIG_ENV)
    config_path = os.path.expanduser(explicit or DEFAULT_CONFIG_PATH)

    values: Dict[str, Any] = {}
    if explicit or os.path.exists(config_path):
        if not os.path.exists(config_path):
            raise ConfigError(f"Config file not found: {config_path}")
        values = _read_yaml(config_path)
        logger.debug(f"Loaded config from {config_path}")

    known = {f.name for f in fields(ShellConfig)}
    settings = {}
    for key, value in values.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config key '{key}' in {config_path}")
            continue
        if not isinstance(value, str):
            raise ConfigError(f"Config key '{key}' must be a string")
        settings[key] = value

    if environ.get(LOG_FILE_ENV):
        settings['log_file'] = environ[LOG_FILE_ENV]

    return ShellConfig(**settings)
