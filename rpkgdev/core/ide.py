"""IDE project file and IDE bridge"""

import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..api.exceptions import PrerequisiteMissingError
from ..constants import RSTUDIO_EXECUTABLE
from ..templates import RPROJ_TEMPLATE, load_template


def write_ide_project(destination: Path, package_name: str,
                      template_root: Optional[Path] = None) -> Path:
    """
    Write the RStudio project file for a package

    Args:
        destination: Package root
        package_name: Package name, used as the file stem
        template_root: Alternative template root

    Returns:
        Path to the ``.Rproj`` file
    """
    category, name = RPROJ_TEMPLATE
    content = load_template(category, name, template_root)

    rproj_path = destination / f"{package_name}.Rproj"
    rproj_path.write_text(content, encoding='utf-8')
    return rproj_path


class IdeBridge(ABC):
    """Interface for opening a project in an IDE session"""

    name = "ide"

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the IDE can be reached from this host"""

    @abstractmethod
    def open_project(self, project_file: Path) -> None:
        """Open the project file

        Raises:
            PrerequisiteMissingError: If the IDE is unavailable
        """


class RStudioBridge(IdeBridge):
    """Launches RStudio with the project file, without waiting for it"""

    name = "rstudio"

    def is_available(self) -> bool:
        return shutil.which(RSTUDIO_EXECUTABLE) is not None

    def open_project(self, project_file: Path) -> None:
        executable = shutil.which(RSTUDIO_EXECUTABLE)
        if executable is None:
            raise PrerequisiteMissingError("RStudio", "opening the project")

        subprocess.Popen(
            [executable, str(project_file)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True
        )


class NullIdeBridge(IdeBridge):
    """Records open requests without launching anything"""

    name = "null"

    def __init__(self, available: bool = True):
        self.available = available
        self.opened: List[Path] = []

    def is_available(self) -> bool:
        return self.available

    def open_project(self, project_file: Path) -> None:
        if not self.available:
            raise PrerequisiteMissingError("IDE", "opening the project")
        self.opened.append(Path(project_file))
