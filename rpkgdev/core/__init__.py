"""Core functionality for rpkgdev"""

from .config import DeployerConfig, load_config
from .descriptor import parse_description, validate_package_path, write_descriptor
from .ide import IdeBridge, NullIdeBridge, RStudioBridge, write_ide_project
from .template_source import TEMPLATE_SUBTREES, TemplateSource
from .vcs import GitClient, NullVcsClient, VcsClient

__all__ = [
    "DeployerConfig",
    "load_config",
    "parse_description",
    "validate_package_path",
    "write_descriptor",
    "IdeBridge",
    "NullIdeBridge",
    "RStudioBridge",
    "write_ide_project",
    "TEMPLATE_SUBTREES",
    "TemplateSource",
    "GitClient",
    "NullVcsClient",
    "VcsClient",
]
