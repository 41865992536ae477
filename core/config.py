"""
Configuration management for whoisparser
"""
import copy
import json
import os
from typing import Any, Dict, Optional

import yaml

from core.errors import ConfigError
from core.logger import get_module_logger

logger = get_module_logger("config")

DEFAULT_CONFIG = {
    "general": {
        "verbose": False
    },
    "logging": {
        "level": "INFO",
        "file": None
    },
    "parser": {
        "record_type": "auto"
    },
    "output": {
        "format": "json",
        "indent": 2
    }
}


class Config:
    """Configuration manager for whoisparser"""

    _config_data: Dict[str, Any] = {}
    _config_file = None
    _verbose = False

    @classmethod
    def initialize(cls, config_file: Optional[str] = None, verbose: bool = False):
        """Initialize the configuration"""
        cls._verbose = verbose
        cls._config_file = config_file

        cls._load_default_config()

        if config_file and os.path.exists(config_file):
            cls._load_config_file(config_file)
        elif config_file:
            logger.warning(f"Config file not found: {config_file}")

    @classmethod
    def _load_default_config(cls):
        """Load default configuration values"""
        cls._config_data = copy.deepcopy(DEFAULT_CONFIG)

    @classmethod
    def _read_file(cls, config_file: str) -> Dict[str, Any]:
        ext = os.path.splitext(config_file)[1].lower()

        if ext in ('.yaml', '.yml'):
            with open(config_file, 'r') as f:
                return yaml.safe_load(f) or {}
        elif ext == '.json':
            with open(config_file, 'r') as f:
                return json.load(f)

        raise ConfigError(f"Unsupported config file format: {ext}")

    @classmethod
    def _load_config_file(cls, config_file: str):
        """Load configuration from file"""
        try:
            custom_config = cls._read_file(config_file)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config file {config_file}: {e}")
            return

        if not isinstance(custom_config, dict):
            logger.error(f"Ignoring config file {config_file}: top level is not a mapping")
            return

        cls._merge_configs(cls._config_data, custom_config)
        logger.debug(f"Loaded config file {config_file}")

    @classmethod
    def _merge_configs(cls, target: Dict[str, Any], custom_config: Dict[str, Any]):
        """Recursively merge custom config into target"""
        for key, value in custom_config.items():
            if (key in target and isinstance(target[key], dict)
                    and isinstance(value, dict)):
                cls._merge_configs(target[key], value)
            else:
                target[key] = value

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        keys = key.split('.')
        config = cls._config_data

        for k in keys:
            if isinstance(config, dict) and k in config:
                config = config[k]
            else:
                return default

        return config

    @classmethod
    def set(cls, key: str, value: Any):
        """Set a configuration value"""
        keys = key.split('.')
        config = cls._config_data

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    @classmethod
    def save(cls, output_file: Optional[str] = None) -> str:
        """
        Save the current configuration to a file

        Args:
            output_file: Destination path, defaults to the loaded config file

        Returns:
            Path of the written file
        """
        file_path = output_file or cls._config_file

        if not file_path:
            file_path = os.path.join(os.getcwd(), 'whoisparser.yaml')

        ext = os.path.splitext(file_path)[1].lower()
        if ext not in ('.yaml', '.yml', '.json'):
            raise ConfigError(f"Unsupported config file format: {ext}")

        os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)

        with open(file_path, 'w') as f:
            if ext == '.json':
                json.dump(cls._config_data, f, indent=4)
            else:
                yaml.dump(cls._config_data, f, default_flow_style=False)

        return file_path
