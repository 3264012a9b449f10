"""rpkgdev - R package development helpers.

Scaffolds new R packages from a bundled template that carries development
scripts, AI agent configuration, GitHub workflows and test infrastructure.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .api.deployer import TemplateDeployer, deploy_template

# Data models
from .models import DeploymentRequest, DeploymentResult, TemplateSubtree

# Capabilities
from .core import (
    DeployerConfig,
    load_config,
    VcsClient,
    GitClient,
    NullVcsClient,
    IdeBridge,
    RStudioBridge,
    NullIdeBridge,
    parse_description,
    validate_package_path,
)

# Exceptions
from .api.exceptions import (
    RpkgdevError,
    InvalidNameError,
    DestinationExistsError,
    TemplateNotFoundError,
    PrerequisiteMissingError,
    PackageNotFoundError,
    ConfigError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "TemplateDeployer",
    "deploy_template",

    # Data models
    "DeploymentRequest",
    "DeploymentResult",
    "TemplateSubtree",

    # Capabilities
    "DeployerConfig",
    "load_config",
    "VcsClient",
    "GitClient",
    "NullVcsClient",
    "IdeBridge",
    "RStudioBridge",
    "NullIdeBridge",
    "parse_description",
    "validate_package_path",

    # Exceptions
    "RpkgdevError",
    "InvalidNameError",
    "DestinationExistsError",
    "TemplateNotFoundError",
    "PrerequisiteMissingError",
    "PackageNotFoundError",
    "ConfigError",
]
