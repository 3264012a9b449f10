# rpkgdev/api/__init__.py
"""API layer for rpkgdev"""

from .deployer import TemplateDeployer, deploy_template
from .exceptions import (
    RpkgdevError,
    InvalidNameError,
    DestinationExistsError,
    TemplateNotFoundError,
    PrerequisiteMissingError,
    PackageNotFoundError,
    ConfigError,
)

__all__ = [
    # Main classes
    "TemplateDeployer",

    # Convenience functions
    "deploy_template",

    # Exceptions
    "RpkgdevError",
    "InvalidNameError",
    "DestinationExistsError",
    "TemplateNotFoundError",
    "PrerequisiteMissingError",
    "PackageNotFoundError",
    "ConfigError",
]
