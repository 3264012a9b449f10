"""Data models for rpkgdev"""

from .request import DeploymentRequest, is_valid_package_name
from .result import DeploymentResult
from .template import TemplateSubtree

__all__ = [
    "DeploymentRequest",
    "DeploymentResult",
    "TemplateSubtree",
    "is_valid_package_name",
]
