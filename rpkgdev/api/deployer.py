"""Deployer API for creating new R packages from the bundled template"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape

from ..constants import (
    EMOJI_SUCCESS,
    EMOJI_WARNING,
    EMOJI_INFO,
    NEXT_STEPS,
    SKELETON_DIRS,
)
from ..core.config import DeployerConfig
from ..core.descriptor import write_descriptor
from ..core.ide import IdeBridge, NullIdeBridge, write_ide_project
from ..core.template_source import TemplateSource
from ..core.vcs import GitClient, VcsClient
from ..models import DeploymentRequest, DeploymentResult
from ..templates import DESCRIPTION_TEMPLATE, get_template_path
from ..utils.template_utils import create_template_context
from .exceptions import PrerequisiteMissingError, TemplateNotFoundError


class TemplateDeployer:
    """Materializes new package directories from a template

    The pipeline is linear: validate, scaffold, copy, generate, finalize.
    It is not transactional; a failure part-way leaves whatever was
    already written on disk.
    """

    def __init__(self,
                 template_root: Optional[Path] = None,
                 vcs: Optional[VcsClient] = None,
                 ide: Optional[IdeBridge] = None,
                 config: Optional[DeployerConfig] = None,
                 console: Optional[Console] = None):
        """
        Initialize deployer

        Args:
            template_root: Alternative template root (defaults to bundled templates)
            vcs: Version-control client (defaults to git)
            ide: IDE bridge (defaults to a bridge that never opens anything)
            config: Descriptor metadata defaults
            console: Console for status output
        """
        self.template_source = TemplateSource(template_root)
        self.vcs = vcs if vcs is not None else GitClient()
        self.ide = ide if ide is not None else NullIdeBridge(available=False)
        self.config = config or DeployerConfig()
        self.console = console or Console()
        self.logger = logging.getLogger(__name__)
        self._quiet = False

    def deploy(self, request: DeploymentRequest) -> DeploymentResult:
        """
        Deploy the template according to a request

        Args:
            request: Deployment request

        Returns:
            DeploymentResult: What was created

        Raises:
            InvalidNameError: If the package name is invalid
            DestinationExistsError: If the destination exists without overwrite
            TemplateNotFoundError: If template assets are missing
            OSError: If any file operation fails
        """
        self._quiet = request.quiet
        self._heading("Deploying R Package Template")

        request.validate()
        package_name = request.resolved_name
        destination = request.destination

        self._info(f"Package name: {package_name}")
        self._info(f"Target path: {destination}")

        subtrees = [
            subtree for subtree in self.template_source.subtrees
            if request.is_enabled(subtree.flag)
        ]
        self._check_templates(subtrees)

        files_created: List[str] = []
        warnings: List[str] = []

        # Directory skeleton
        self._heading("Creating Directory Structure")
        destination.mkdir(parents=True, exist_ok=True)
        for directory in SKELETON_DIRS:
            (destination / directory).mkdir(parents=True, exist_ok=True)
            files_created.append(f"{directory}/")
        self._success(f"Created {len(SKELETON_DIRS)} directories")

        # Template subtrees
        self._heading("Copying Template Files")
        variables = create_template_context(package_name)
        for subtree in subtrees:
            copied = self.template_source.copy_subtree(subtree, destination, variables)
            files_created.extend(copied)
            self._success(f"Copied {subtree.name} ({len(copied)} files)")

        # Package metadata
        self._heading("Creating Package Metadata")
        written = write_descriptor(
            destination, package_name, self.config, self.template_source.root
        )
        files_created.extend(written)
        self._success(f"Created {', '.join(written)}")

        rproj_path = None
        if request.ide_project:
            rproj_path = write_ide_project(
                destination, package_name, self.template_source.root
            )
            files_created.append(rproj_path.name)
            self._success("Created RStudio project file")

        git_initialized = False
        if request.git_init:
            git_initialized = self._init_vcs(destination, request.quiet, warnings)

        self._summary(package_name, destination)

        if request.open_project and rproj_path is not None:
            self._open_project(rproj_path, request, warnings)

        self.logger.info("Deployed %s to %s (%d paths)",
                         package_name, destination, len(files_created))

        return DeploymentResult(
            path=destination,
            package_name=package_name,
            files_created=tuple(files_created),
            git_initialized=git_initialized,
            ide_project=rproj_path,
            warnings=tuple(warnings),
        )

    def _check_templates(self, subtrees) -> None:
        self.template_source.check(subtrees)
        category, name = DESCRIPTION_TEMPLATE
        if get_template_path(category, name, self.template_source.resolve_root()) is None:
            raise TemplateNotFoundError(
                str(self.template_source.resolve_root() / category / name)
            )

    def _init_vcs(self, destination: Path, quiet: bool, warnings: List[str]) -> bool:
        try:
            self.vcs.init(destination, quiet=quiet)
        except PrerequisiteMissingError as e:
            self._warning(str(e))
            warnings.append(str(e))
            return False
        except subprocess.CalledProcessError as e:
            message = f"Failed to initialize {self.vcs.name} repository: {e}"
            self._warning(message)
            warnings.append(message)
            return False

        self._success(f"Initialized {self.vcs.name} repository")
        return True

    def _open_project(self, rproj_path: Path, request: DeploymentRequest,
                      warnings: List[str]) -> None:
        if not (request.interactive and request.ide_available):
            self.logger.debug("Not opening %s: non-interactive or no IDE", rproj_path)
            return

        try:
            self.ide.open_project(rproj_path)
        except PrerequisiteMissingError as e:
            self._warning(str(e))
            warnings.append(str(e))

    # Status output

    def _heading(self, title: str) -> None:
        if not self._quiet:
            self.console.rule(f"[bold]{title}[/bold]")

    def _info(self, message: str) -> None:
        if not self._quiet:
            self.console.print(f"[blue]{EMOJI_INFO}[/blue] {escape(message)}")

    def _success(self, message: str) -> None:
        if not self._quiet:
            self.console.print(f"[green]{EMOJI_SUCCESS}[/green] {escape(message)}")

    def _warning(self, message: str) -> None:
        self.logger.debug("Warning: %s", message)
        if not self._quiet:
            self.console.print(f"[yellow]{EMOJI_WARNING}[/yellow] {escape(message)}")

    def _summary(self, package_name: str, destination: Path) -> None:
        if self._quiet:
            return
        self._heading("Deployment Complete")
        self._success(f"Package {package_name} created at {destination}")
        self.console.print("\nNext steps:")
        for index, step in enumerate(NEXT_STEPS, start=1):
            self.console.print(f"  {index}. {step}")


def deploy_template(path: Union[str, Path],
                    package_name: Optional[str] = None,
                    vcs: Optional[VcsClient] = None,
                    ide: Optional[IdeBridge] = None,
                    config: Optional[DeployerConfig] = None,
                    template_root: Optional[Path] = None,
                    **options) -> DeploymentResult:
    """
    Deploy the template to a new package directory

    This is a convenience function that creates a TemplateDeployer
    instance and performs the deployment.

    Args:
        path: Directory to create
        package_name: Package name (defaults to the last path segment)
        vcs: Version-control client
        ide: IDE bridge
        config: Descriptor metadata defaults
        template_root: Alternative template root
        **options: DeploymentRequest flags (agent_config, dev_scripts,
            overwrite, git_init, ide_project, open_project, quiet,
            interactive, ide_available)

    Returns:
        DeploymentResult: Deployment result
    """
    request = DeploymentRequest(path=path, package_name=package_name, **options)
    deployer = TemplateDeployer(
        template_root=template_root,
        vcs=vcs,
        ide=ide,
        config=config,
    )
    return deployer.deploy(request)
