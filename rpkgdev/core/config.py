"""User configuration for descriptor metadata and default flags"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_AUTHOR_EMAIL,
    DEFAULT_AUTHOR_FAMILY,
    DEFAULT_AUTHOR_GIVEN,
    DEFAULT_DESCRIPTION,
    DEFAULT_LICENSE,
    DEFAULT_TITLE,
    DEFAULT_VERSION,
    ENV_CONFIG_PATH,
    USER_CONFIG_FILE,
)

logger = logging.getLogger(__name__)


@dataclass
class DeployerConfig:
    """Configuration data model

    This represents the configuration stored in ~/.rpkgdev.yaml::

        descriptor:
          author_given: Ada
          author_family: Lovelace
          author_email: ada@example.com
        defaults:
          agent_config: false
    """
    author_given: str = DEFAULT_AUTHOR_GIVEN
    author_family: str = DEFAULT_AUTHOR_FAMILY
    author_email: str = DEFAULT_AUTHOR_EMAIL
    license: str = DEFAULT_LICENSE
    version: str = DEFAULT_VERSION
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    agent_config: bool = True
    dev_scripts: bool = True
    git_init: bool = True
    ide_project: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployerConfig':
        """Create DeployerConfig from dictionary

        Args:
            data: Configuration dictionary with ``descriptor`` and ``defaults`` sections

        Returns:
            DeployerConfig instance

        Raises:
            ConfigError: If a section is not a mapping, a key is unknown or a
                value has the wrong type
        """
        known = {f.name: type(f.default) for f in fields(cls)}
        values = {}

        for section in ('descriptor', 'defaults'):
            section_data = data.get(section) or {}
            if not isinstance(section_data, dict):
                raise ConfigError(f"Configuration section '{section}' must be a mapping")
            for key, value in section_data.items():
                if key not in known:
                    raise ConfigError(f"Unknown configuration key: {section}.{key}")
                expected = known[key]
                if not isinstance(value, expected):
                    kind = "a boolean" if expected is bool else "a string"
                    raise ConfigError(
                        f"Configuration key {section}.{key} must be {kind}, "
                        f"got {value!r}"
                    )
                values[key] = value

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'descriptor': {
                'author_given': self.author_given,
                'author_family': self.author_family,
                'author_email': self.author_email,
                'license': self.license,
                'version': self.version,
                'title': self.title,
                'description': self.description,
            },
            'defaults': {
                'agent_config': self.agent_config,
                'dev_scripts': self.dev_scripts,
                'git_init': self.git_init,
                'ide_project': self.ide_project,
            },
        }


def default_config_path() -> Path:
    """Configuration path from the environment, else the home directory file"""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / USER_CONFIG_FILE


def load_config(config_path: Optional[Path] = None) -> DeployerConfig:
    """Load configuration from file

    An explicit path (argument or environment variable) must exist; the
    home directory file is optional.

    Args:
        config_path: Explicit configuration file

    Returns:
        Loaded configuration

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    explicit = config_path is not None or bool(os.environ.get(ENV_CONFIG_PATH))
    path = Path(config_path).expanduser() if config_path is not None else default_config_path()

    if not path.exists():
        if explicit:
            raise ConfigError(f"Configuration file not found: {path}")
        logger.debug("No configuration file at %s, using defaults", path)
        return DeployerConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}")

    # Simple environment variable expansion
    content = os.path.expandvars(content)

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")

    logger.debug("Loaded configuration from %s", path)
    return DeployerConfig.from_dict(data)
