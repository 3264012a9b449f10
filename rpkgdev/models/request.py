"""Deployment request model"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import DestinationExistsError, InvalidNameError
from ..constants import PACKAGE_NAME_PATTERN


def is_valid_package_name(name: Optional[str]) -> bool:
    """Check a package name against the R naming rules"""
    return bool(name) and PACKAGE_NAME_PATTERN.fullmatch(name) is not None


@dataclass
class DeploymentRequest:
    """Caller input for one template deployment

    Host-environment facts (interactive session, IDE availability) are
    plain fields so the deployer never queries them itself.
    """

    path: Union[str, Path]
    package_name: Optional[str] = None
    agent_config: bool = True
    dev_scripts: bool = True
    overwrite: bool = False
    git_init: bool = True
    ide_project: bool = True
    open_project: bool = False
    quiet: bool = False
    interactive: bool = False
    ide_available: bool = False

    @property
    def destination(self) -> Path:
        """Absolute destination path with ``~`` expanded"""
        return Path(self.path).expanduser().absolute()

    @property
    def resolved_name(self) -> str:
        """Explicit package name, or the final segment of the destination"""
        if self.package_name is not None:
            return self.package_name
        return self.destination.name

    def is_enabled(self, flag: Optional[str]) -> bool:
        """Check whether an optional step flag is set; ``None`` means always"""
        if flag is None:
            return True
        return bool(getattr(self, flag))

    def validate(self) -> None:
        """Validate the request without touching the filesystem

        Raises:
            InvalidNameError: If the resolved name fails the naming pattern
            DestinationExistsError: If the destination exists and overwrite is off
        """
        name = self.resolved_name
        if not is_valid_package_name(name):
            raise InvalidNameError(name)

        if self.destination.exists() and not self.overwrite:
            raise DestinationExistsError(str(self.destination))
