"""Bundled template source and the table of copyable subtrees"""

import fnmatch
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..api.exceptions import TemplateNotFoundError
from ..constants import DOTFILE_NAMES
from ..models.template import COPY_FILES, COPY_TREE, TemplateSubtree
from ..templates import get_template_root
from ..utils.file_utils import copy_template_file, scan_directory

# Copied in order; the project/ category is rendered separately
TEMPLATE_SUBTREES: Tuple[TemplateSubtree, ...] = (
    TemplateSubtree(
        name="core",
        source="core",
        destination="",
        mode=COPY_FILES,
        description="Ignore rules, lint/format config, session bootstrap, pkgdown config",
    ),
    TemplateSubtree(
        name="agent-config",
        source="claude",
        destination=".claude",
        mode=COPY_FILES,
        flag="agent_config",
        routes=(("*.md", "agents"),),
        description="AI agent settings and agent definitions",
    ),
    TemplateSubtree(
        name="dev-scripts",
        source="dev",
        destination="dev",
        mode=COPY_TREE,
        flag="dev_scripts",
        description="Development workflow scripts",
    ),
    TemplateSubtree(
        name="workflows",
        source="github/workflows",
        destination=".github/workflows",
        mode=COPY_TREE,
        description="GitHub Actions workflows",
    ),
    TemplateSubtree(
        name="tests",
        source="tests",
        destination="tests",
        mode=COPY_FILES,
        description="testthat runner",
    ),
)

EXCLUDE_PATTERNS = ["*.pyc", ".DS_Store"]


class TemplateSource:
    """Read-only view over a template root

    Args:
        root: Template root directory (defaults to the bundled templates)
        subtrees: Subtree table to copy from
    """

    def __init__(self,
                 root: Optional[Path] = None,
                 subtrees: Iterable[TemplateSubtree] = TEMPLATE_SUBTREES):
        self.root = Path(root) if root is not None else None
        self.subtrees = tuple(subtrees)
        self.logger = logging.getLogger(__name__)

    def resolve_root(self) -> Path:
        """Return the template root

        Raises:
            TemplateNotFoundError: If the root directory is missing
        """
        return get_template_root(self.root)

    def source_dir(self, subtree: TemplateSubtree) -> Path:
        """Absolute source directory of a subtree"""
        return self.resolve_root() / subtree.source

    def check(self, subtrees: Iterable[TemplateSubtree]) -> None:
        """Ensure every given subtree exists in the template root

        Raises:
            TemplateNotFoundError: If the root or any subtree directory is missing
        """
        for subtree in subtrees:
            source = self.source_dir(subtree)
            if not source.is_dir():
                raise TemplateNotFoundError(str(source))

    def files(self, subtree: TemplateSubtree) -> List[Path]:
        """Template files of a subtree, sorted"""
        return scan_directory(self.source_dir(subtree), EXCLUDE_PATTERNS,
                              recursive=subtree.recursive)

    def target_path(self, subtree: TemplateSubtree, file_path: Path) -> str:
        """Relative POSIX path a template file is copied to"""
        relative = file_path.relative_to(self.source_dir(subtree))
        parts = list(relative.parts)
        parts[-1] = DOTFILE_NAMES.get(parts[-1], parts[-1])

        if len(parts) == 1:
            for pattern, subdir in subtree.routes:
                if fnmatch.fnmatch(parts[0], pattern):
                    parts.insert(0, subdir)
                    break

        if subtree.destination:
            parts.insert(0, subtree.destination)
        return "/".join(parts)

    def copy_subtree(self, subtree: TemplateSubtree, destination: Path,
                     variables: Dict[str, Any]) -> List[str]:
        """Copy one subtree into a package directory

        Args:
            subtree: Subtree to copy
            destination: Package root
            variables: Placeholder values for text files

        Returns:
            Relative paths of the copied files
        """
        copied = []
        for file_path in self.files(subtree):
            relative = self.target_path(subtree, file_path)
            copy_template_file(file_path, destination / relative, variables)
            self.logger.debug("Copied %s -> %s", file_path, relative)
            copied.append(relative)
        return copied
