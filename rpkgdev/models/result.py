"""Deployment result model"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class DeploymentResult:
    """Summary of one deployment pass

    ``files_created`` holds POSIX paths relative to ``path``; directories
    end with a slash.
    """

    path: Path
    package_name: str
    files_created: Tuple[str, ...] = ()
    git_initialized: bool = False
    ide_project: Optional[Path] = None
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    def has(self, relative_path: str) -> bool:
        """Check whether a relative path was created"""
        return relative_path in self.files_created

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "path": str(self.path),
            "package_name": self.package_name,
            "files_created": list(self.files_created),
            "git_initialized": self.git_initialized,
            "ide_project": str(self.ide_project) if self.ide_project else None,
            "warnings": list(self.warnings),
        }
