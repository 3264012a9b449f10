# rpkgdev/cli/commands/__init__.py
"""CLI commands"""

from . import deploy
from . import templates
from . import inspect

__all__ = [
    "deploy",
    "templates",
    "inspect",
]
