"""Version-control capability used by the deployer"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from ..api.exceptions import PrerequisiteMissingError
from ..utils.git_utils import find_git, init_git_repo


class VcsClient(ABC):
    """Interface for initializing a repository in a new package"""

    name = "vcs"

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the tool exists on this host"""

    @abstractmethod
    def init(self, path: Path, quiet: bool = False) -> None:
        """Initialize a repository at ``path``

        Raises:
            PrerequisiteMissingError: If the tool is unavailable
        """


class GitClient(VcsClient):
    """Runs ``git init`` through a subprocess"""

    name = "git"

    def is_available(self) -> bool:
        return find_git() is not None

    def init(self, path: Path, quiet: bool = False) -> None:
        if not self.is_available():
            raise PrerequisiteMissingError("git", "repository initialization")

        try:
            init_git_repo(path, quiet=quiet)
        except FileNotFoundError:
            raise PrerequisiteMissingError("git", "repository initialization")


class NullVcsClient(VcsClient):
    """Records init calls without touching the host"""

    name = "null"

    def __init__(self, available: bool = True):
        self.available = available
        self.calls: List[Path] = []

    def is_available(self) -> bool:
        return self.available

    def init(self, path: Path, quiet: bool = False) -> None:
        if not self.available:
            raise PrerequisiteMissingError("vcs", "repository initialization")
        self.calls.append(Path(path))
