"""Git operation utilities"""

import shutil
import subprocess
from pathlib import Path
from typing import Optional

from ..constants import GIT_EXECUTABLE


def find_git() -> Optional[str]:
    """Return the git executable path, or None when git is not installed"""
    return shutil.which(GIT_EXECUTABLE)


def init_git_repo(path: Path, quiet: bool = True) -> None:
    """
    Initialize a Git repository

    Args:
        path: Directory to initialize
        quiet: Suppress git's own output

    Raises:
        subprocess.CalledProcessError: If ``git init`` fails
    """
    subprocess.run(
        [GIT_EXECUTABLE, 'init'],
        cwd=path,
        capture_output=quiet,
        check=True
    )
