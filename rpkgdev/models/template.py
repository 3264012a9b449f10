"""Template subtree model"""

from dataclasses import dataclass
from typing import Optional, Tuple

COPY_FILES = "files"
COPY_TREE = "tree"


@dataclass(frozen=True)
class TemplateSubtree:
    """One independently copied directory of the bundled template

    Attributes:
        name: Display name
        source: Directory relative to the template root
        destination: Directory relative to the new package root ("" for root)
        flag: DeploymentRequest attribute gating the copy, None if unconditional
        mode: "files" copies top-level files only, "tree" copies recursively
        routes: (glob, subdirectory) pairs redirecting top-level files
    """

    name: str
    source: str
    destination: str
    flag: Optional[str] = None
    mode: str = COPY_TREE
    routes: Tuple[Tuple[str, str], ...] = ()
    description: str = ""

    @property
    def recursive(self) -> bool:
        return self.mode == COPY_TREE
