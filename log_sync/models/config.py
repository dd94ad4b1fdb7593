"""
Configuration classes for the log sync service.
"""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml

from ..exceptions import ConfigInvalidError, ConfigMissingError


DEFAULT_CONFIG_FILE = 'config.yml'


@dataclass(frozen=True)
class LogTypeRule:
    """A named rule pairing a file name prefix with a remote directory segment."""
    name: str
    log_prefix: str
    directory_name: str

    @classmethod
    def from_dict(cls, name: str, data: Any) -> 'LogTypeRule':
        """Create a rule from its `LogTypes` entry."""
        if not isinstance(data, dict):
            raise ConfigInvalidError(f"LogTypes.{name} must be a mapping")

        log_prefix = _require_str(data, 'LogPrefix', f"LogTypes.{name}.")
        directory_name = _require_str(data, 'DirectoryName', f"LogTypes.{name}.")
        if not directory_name:
            raise ConfigInvalidError(f"LogTypes.{name}.DirectoryName must not be empty")

        return cls(name=str(name), log_prefix=log_prefix, directory_name=directory_name)


@dataclass(frozen=True)
class SyncConfig:
    """Main configuration for the log sync service. Read-only after load."""
    remote_bucket: str
    log_directory: str
    region: Optional[str] = None
    credential_profile: Optional[str] = None
    debug_enabled: bool = False
    log_file: Optional[str] = None
    log_type_rules: Mapping[str, LogTypeRule] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> 'SyncConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Location of the configuration file

        Returns:
            SyncConfig: The validated configuration

        Raises:
            ConfigMissingError: If the file does not exist
            ConfigInvalidError: If the file cannot be read, parsed or validated
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigMissingError(f"Config file is missing: {path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigInvalidError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigInvalidError(f"Cannot parse config file {path}: {e}") from e

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> 'SyncConfig':
        """Create SyncConfig from a parsed configuration document."""
        if not isinstance(data, dict):
            raise ConfigInvalidError("Config document must be a mapping")

        remote_bucket = _require_str(data, 'AWSBucket')
        log_directory = _require_str(data, 'LogDirectory')
        if not remote_bucket:
            raise ConfigInvalidError("AWSBucket must not be empty")
        if not log_directory:
            raise ConfigInvalidError("LogDirectory must not be empty")

        debug = data.get('Debug', False)
        if debug is None:
            debug = False
        if not isinstance(debug, bool):
            raise ConfigInvalidError("Debug must be true or false")

        log_types = data.get('LogTypes') or {}
        if not isinstance(log_types, dict):
            raise ConfigInvalidError("LogTypes must be a mapping")

        rules: Dict[str, LogTypeRule] = {}
        for name, entry in log_types.items():
            rules[str(name)] = LogTypeRule.from_dict(name, entry)

        return cls(
            remote_bucket=remote_bucket,
            log_directory=log_directory,
            region=_optional_str(data, 'Region'),
            credential_profile=_optional_str(data, 'Env'),
            debug_enabled=debug,
            log_file=_optional_str(data, 'LogFile'),
            log_type_rules=MappingProxyType(rules)
        )


def _require_str(data: Dict[str, Any], key: str, context: str = '') -> str:
    if key not in data or data[key] is None:
        raise ConfigInvalidError(f"Missing required config key: {context}{key}")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigInvalidError(f"Config key {context}{key} must be a string")
    return value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    """Empty or absent values mean 'use the ambient default'."""
    value = data.get(key)
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ConfigInvalidError(f"Config key {key} must be a string")
    return value
